"""
Sizes Override

This module contains the SizesOverride variant describing how the
responsive ``sizes`` attribute of an image should be produced.
"""

import logging
from enum import Enum
from typing import Callable, Optional, Sequence, Union

sizes_logger = logging.getLogger('responsive_images')

SizesCallback = Callable[..., Optional[str]]
SizesValue = Union[None, str, Sequence, SizesCallback]


class SizesKind(Enum):
    """The four shapes a sizes override can take."""
    NONE = "none"
    LITERAL = "literal"
    SEQUENCE = "sequence"
    CALLBACK = "callback"


class SizesOverride:
    """
    Tagged representation of a caller-supplied ``sizes`` value.
    
    The tag is decided once, when the override is built, so resolution can
    switch on ``kind`` rather than inspecting the value again.
    
    Attributes:
        kind (SizesKind): Which variant this override holds
        value: The raw value for the variant (None for NONE)
    """
    
    def __init__(self, kind: SizesKind, value=None):
        self.kind = kind
        self.value = value
    
    @classmethod
    def from_value(cls, value: SizesValue) -> 'SizesOverride':
        """
        Classify a raw sizes value.
        
        Strings are checked before sequences since a str is itself a
        sequence. Unsupported types are treated as no override.
        """
        if value is None:
            return cls(SizesKind.NONE)
        if isinstance(value, SizesOverride):
            return value
        if isinstance(value, str):
            return cls(SizesKind.LITERAL, value)
        if isinstance(value, (list, tuple)):
            return cls(SizesKind.SEQUENCE, tuple(value))
        if callable(value):
            return cls(SizesKind.CALLBACK, value)
        
        sizes_logger.debug(f"Ignoring sizes override of unsupported type {type(value).__name__}")
        return cls(SizesKind.NONE)
    
    def join_sequence(self) -> str:
        """
        Join a SEQUENCE override into a sizes attribute string.
        
        A (condition, value) pair renders as "<value> <condition>", a bare
        string passes through, anything else is dropped. An empty result
        is an empty string, not None.
        """
        rows = (self._format_row(row) for row in self.value or ())
        return ', '.join(row for row in rows if row)
    
    @staticmethod
    def _format_row(row) -> Optional[str]:
        if isinstance(row, str):
            return row
        if isinstance(row, (list, tuple)) and len(row) == 2:
            condition, size_value = row
            return f"{size_value} {condition}"
        return None
    
    def __repr__(self):
        return f"SizesOverride({self.kind.name}, {self.value!r})"
