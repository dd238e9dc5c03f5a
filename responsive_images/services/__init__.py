"""
Services Package

Contains the media store interface images are resolved against.
"""

from .media_store import MediaStore, MediaRecord, InMemoryMediaStore

__all__ = ['MediaStore', 'MediaRecord', 'InMemoryMediaStore']
