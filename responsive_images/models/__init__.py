"""
Models Package

Contains the Image value object and the sizes override variant.
"""

from .image import Image
from .sizes import SizesOverride, SizesKind

__all__ = ['Image', 'SizesOverride', 'SizesKind']
