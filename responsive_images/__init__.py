"""
Responsive Images

Derives HTML <img> attributes (alt, title, src, srcset, sizes and aspect
ratio) from a CMS media record exposed through a MediaStore.
"""

from responsive_images.models.image import Image
from responsive_images.models.sizes import SizesOverride, SizesKind
from responsive_images.services.media_store import MediaStore, MediaRecord, InMemoryMediaStore

__all__ = [
    'Image',
    'SizesOverride',
    'SizesKind',
    'MediaStore',
    'MediaRecord',
    'InMemoryMediaStore',
]
