"""
Media Store

This module defines the MediaStore interface an Image resolves its
attributes against, the MediaRecord it returns, and a dict-backed
implementation for hosts that already hold their media data in memory.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, Optional, Tuple

from responsive_images.config import Config


class MediaRecord:
    """
    A CMS-managed media entry.
    
    Attributes:
        id: Identifier of the record in the host CMS
        post_type (str): Record type, "attachment" for uploaded media
        mime_type (str): MIME type of the uploaded file
        title (str): Stored title of the record
    """
    
    def __init__(self, id: Hashable, post_type: str, mime_type: str, title: Optional[str] = None):
        self.id = id
        self.post_type = post_type
        self.mime_type = mime_type
        self.title = title
    
    def is_image_attachment(self) -> bool:
        """Whether this record is an attachment holding an image."""
        return (
            self.post_type == Config.ATTACHMENT_POST_TYPE
            and (self.mime_type or '').startswith(Config.IMAGE_MIME_PREFIX)
        )
    
    def __repr__(self):
        return f"MediaRecord(id={self.id!r}, post_type={self.post_type!r}, mime_type={self.mime_type!r})"


class MediaStore(ABC):
    """Lookups an Image needs from its host platform."""
    
    @abstractmethod
    def get_record(self, record_id) -> Optional[MediaRecord]:
        """Fetch a record by id, or None if it does not exist."""
    
    @abstractmethod
    def get_rendition_metadata(self, record_id) -> Optional[Dict[str, Any]]:
        """
        Fetch the stored rendition metadata for a record.
        
        The mapping is nested: top-level width/height describe the original
        upload and ``sizes`` maps rendition names to their own width, height
        and file details.
        """
    
    @abstractmethod
    def get_image_url(self, record_id, size: str) -> Optional[str]:
        """URL of the rendition named size."""
    
    @abstractmethod
    def get_srcset(self, record_id, size: str) -> Optional[str]:
        """srcset attribute for the rendition named size."""
    
    @abstractmethod
    def get_sizes_attribute(self, record_id, size: str) -> Optional[str]:
        """Default sizes attribute for the rendition named size."""
    
    @abstractmethod
    def get_attachment_text(self, record_id, key: str) -> Optional[str]:
        """Stored text meta value for a record."""


class InMemoryMediaStore(MediaStore):
    """
    MediaStore backed by plain dicts.
    
    Records and their per-size values are registered up front; lookups for
    anything unregistered return None.
    """
    
    def __init__(self):
        self.records: Dict[Hashable, MediaRecord] = {}
        self.metadata: Dict[Hashable, Dict[str, Any]] = {}
        self.urls: Dict[Tuple[Hashable, str], str] = {}
        self.srcsets: Dict[Tuple[Hashable, str], str] = {}
        self.sizes_attributes: Dict[Tuple[Hashable, str], str] = {}
        self.texts: Dict[Tuple[Hashable, str], str] = {}
    
    # Registration
    
    def add_record(self, record: MediaRecord, metadata: Optional[Dict[str, Any]] = None) -> MediaRecord:
        """Register a record, optionally with its rendition metadata."""
        self.records[record.id] = record
        if metadata is not None:
            self.metadata[record.id] = metadata
        return record
    
    def set_metadata(self, record_id, metadata: Dict[str, Any]):
        self.metadata[record_id] = metadata
    
    def set_image_url(self, record_id, size: str, url: str):
        self.urls[(record_id, size)] = url
    
    def set_srcset(self, record_id, size: str, srcset: str):
        self.srcsets[(record_id, size)] = srcset
    
    def set_sizes_attribute(self, record_id, size: str, sizes: str):
        self.sizes_attributes[(record_id, size)] = sizes
    
    def set_attachment_text(self, record_id, key: str, text: str):
        self.texts[(record_id, key)] = text
    
    # MediaStore
    
    def get_record(self, record_id) -> Optional[MediaRecord]:
        return self.records.get(record_id)
    
    def get_rendition_metadata(self, record_id) -> Optional[Dict[str, Any]]:
        return self.metadata.get(record_id)
    
    def get_image_url(self, record_id, size: str) -> Optional[str]:
        return self.urls.get((record_id, size))
    
    def get_srcset(self, record_id, size: str) -> Optional[str]:
        return self.srcsets.get((record_id, size))
    
    def get_sizes_attribute(self, record_id, size: str) -> Optional[str]:
        return self.sizes_attributes.get((record_id, size))
    
    def get_attachment_text(self, record_id, key: str) -> Optional[str]:
        return self.texts.get((record_id, key))
