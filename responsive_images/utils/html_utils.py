"""
HTML Rendering Utilities

This module contains utility functions for turning resolved image
attributes into markup that a template layer can drop into a page.
"""

from typing import Optional
from bs4 import BeautifulSoup


def render_img_tag(image, **extra) -> str:
    """
    Build an <img> element from an Image's resolved attributes.
    
    Extra keyword arguments are added as attributes after the resolved ones;
    use a trailing underscore for reserved words (``class_="hero"``).
    Attributes whose value is None are left out.
    
    Args:
        image: Image instance to render
        **extra: Additional attributes for the element
        
    Returns:
        Rendered <img> markup, or an empty string for an invalid image
    """
    if not image.is_valid:
        return ''
    
    attrs = image.attributes()
    for name, value in extra.items():
        if value is None:
            continue
        attrs[name.rstrip('_')] = value
    
    soup = BeautifulSoup('', 'html.parser')
    tag = soup.new_tag('img', attrs=attrs)
    return str(tag)


def padding_style(image) -> Optional[str]:
    """
    Get a bottom-padding declaration matching the image's aspect ratio.
    
    Useful for absolutely positioned images that should keep their
    original ratio while loading.
    """
    percent = image.ratio_percent()
    if percent is None:
        return None
    return f"padding-bottom: {percent}%"
