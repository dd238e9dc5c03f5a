"""
Utilities Package

Contains helpers for flattening rendition metadata and rendering
resolved image attributes as HTML.
"""

from .dot import dot, dot_get
from .html_utils import render_img_tag, padding_style

__all__ = [
    'dot',              # Flattens nested metadata into dotted keys
    'dot_get',          # Reads a dotted key with a default
    'render_img_tag',   # Builds an <img> element from an Image
    'padding_style',    # Intrinsic-ratio padding for placeholders
]
