"""
Image Attribute Resolution

This module contains the Image class, which derives the attributes of an
HTML <img> element (alt, title, src, srcset, sizes) and its aspect ratio
from a media record held in a MediaStore.
"""

import logging
from typing import Dict, Optional

from responsive_images.config import Config
from responsive_images.models.sizes import SizesKind, SizesOverride, SizesValue
from responsive_images.services.media_store import MediaRecord, MediaStore
from responsive_images.utils.dot import dot, dot_get

# Set up image-specific logger
image_logger = logging.getLogger('responsive_images')
image_logger.setLevel(Config.LOG_LEVEL)

# Add console handler if not already present
if not image_logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(Config.LOG_LEVEL)
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)
    image_logger.addHandler(console_handler)


class Image:
    """
    Resolves <img> attributes for a single media record.

    The record is looked up and validated once, when the Image is built;
    if it is missing, is not an attachment, or is not an image, every
    accessor returns None.

    Attributes:
        id: Identifier of the media record
        size (str): Rendition used for src, srcset, sizes and ratio
        metadata (dict): Flattened rendition metadata (empty when invalid)
        is_valid (bool): Whether the record is an image attachment
    """

    def __init__(
        self,
        store: MediaStore,
        id,
        alt: Optional[str] = None,
        title: Optional[str] = None,
        size: Optional[str] = None,
        sizes: SizesValue = None,
    ):
        """
        Look up and validate the media record.

        Args:
            store: MediaStore the record and its renditions live in
            id: Identifier of the media record
            alt: Alt text overriding the stored one
            title: Title overriding the stored one
            size: Rendition name, defaults to Config.DEFAULT_IMAGE_SIZE
            sizes: Override for the sizes attribute; a string, a sequence of
                (condition, value) pairs or strings, or a callable. The
                callable is called positionally as callback(record_id, size),
                so its parameters may be named freely
        """
        self.store = store
        self.id = id
        self._alt = alt
        self._title = title
        self.size = size if size is not None else Config.DEFAULT_IMAGE_SIZE
        self._sizes = SizesOverride.from_value(sizes)

        self.record: Optional[MediaRecord] = None
        self.metadata: Dict = {}
        self.is_valid = False

        self._setup()

    def _setup(self):
        """Fetch the record and, if it is an image, its flattened metadata."""
        self.record = self.store.get_record(self.id)
        if self.record is None:
            image_logger.debug(f"No media record found for id {self.id!r}")
            return

        self.is_valid = self.record.is_image_attachment()
        if not self.is_valid:
            image_logger.debug(f"Media record {self.id!r} is not an image attachment: {self.record!r}")
            return

        self.metadata = dot(self.store.get_rendition_metadata(self.record.id) or {})

    def alt(self) -> Optional[str]:
        """Get the alt text; a str override wins, even an empty one."""
        if not self.is_valid:
            return None

        if isinstance(self._alt, str):
            return self._alt

        return self.store.get_attachment_text(self.record.id, Config.ALT_TEXT_META_KEY)

    def title(self) -> Optional[str]:
        """Get the title, falling back to the record's stored title."""
        if not self.is_valid:
            return None

        if self._title is not None:
            return self._title
        return self.record.title

    def src(self) -> Optional[str]:
        if not self.is_valid:
            return None
        return self.store.get_image_url(self.record.id, self.size) or None

    def srcset(self) -> Optional[str]:
        if not self.is_valid:
            return None
        return self.store.get_srcset(self.record.id, self.size) or None

    def sizes(self) -> Optional[str]:
        """
        Get the sizes attribute.

        A literal override is returned as is, a sequence override is joined
        (an empty sequence gives ""), a callable override is called with
        (record_id, size) and its result returned unchanged. With no
        override the store's default for the rendition is used.
        """
        if not self.is_valid:
            return None

        kind = self._sizes.kind
        if kind is SizesKind.LITERAL:
            return self._sizes.value
        if kind is SizesKind.SEQUENCE:
            return self._sizes.join_sequence()
        if kind is SizesKind.CALLBACK:
            return self._sizes.value(self.record.id, self.size)

        return self.store.get_sizes_attribute(self.record.id, self.size)

    def ratio_float(self) -> Optional[float]:
        """
        Get the height/width ratio.

        Uses the rendition's own dimensions when the metadata has them,
        otherwise the original upload's. A zero width raises
        ZeroDivisionError.
        """
        if not self.is_valid:
            return None

        height = dot_get(f"sizes.{self.size}.height", self.metadata)
        width = dot_get(f"sizes.{self.size}.width", self.metadata)
        if height is None or width is None:
            height = dot_get("height", self.metadata)
            width = dot_get("width", self.metadata)

        if height is None or width is None:
            return None
        return height / width

    def ratio_percent(self) -> Optional[float]:
        """
        Get the height/width ratio as a percentage.

        This is useful as bottom-padding when absolutely positioning an
        image that should retain its original ratio.
        """
        ratio = self.ratio_float()
        if ratio is None:
            return None
        return round(ratio * 100, 2)

    def attributes(self) -> Dict[str, str]:
        """Get the resolved <img> attributes, leaving out absent ones."""
        if not self.is_valid:
            return {}

        attrs = {
            'src': self.src(),
            'srcset': self.srcset(),
            'sizes': self.sizes(),
            'alt': self.alt(),
            'title': self.title(),
        }
        return {name: value for name, value in attrs.items() if value is not None}

    def __repr__(self):
        return f"Image(id={self.id!r}, size={self.size!r}, valid={self.is_valid})"
