"""
Dotted Mapping Utilities

Helpers for flattening nested metadata into a single level with dot-joined
keys, and for reading values back out of the flattened result.
"""

from typing import Any, Mapping


def dot(mapping: Mapping, prepend: str = '') -> dict:
    """
    Flatten a nested mapping into a single-level dict with dotted keys.
    
    Non-empty nested mappings are expanded, and so are non-empty lists and
    tuples, keyed by index ("keywords.0"). Empty ones are kept as a leaf
    under their own key. Later keys overwrite earlier ones on collision.
    
    Args:
        mapping: Nested mapping to flatten
        prepend: Prefix added to every key produced at this level
        
    Returns:
        dict: Flattened mapping
    """
    results = {}
    
    for key, value in mapping.items():
        nested = dict(enumerate(value)) if isinstance(value, (list, tuple)) else value
        if isinstance(nested, Mapping) and nested:
            results.update(dot(nested, f"{prepend}{key}."))
        else:
            results[f"{prepend}{key}"] = value
    
    return results


def dot_get(path: str, mapping: Mapping, default: Any = None) -> Any:
    """Get a value from a flattened mapping, or default if unset."""
    value = mapping.get(path)
    if value is None:
        return default
    return value

