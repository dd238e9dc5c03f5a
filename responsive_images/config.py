"""
Configuration Management

This module handles the configuration settings and environment variables
used when resolving image attributes against a media store.
"""

import logging
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _log_level_from_env(default: str = "INFO") -> str:
    """Read LOG_LEVEL from the environment, falling back to default if unknown."""
    level = os.environ.get("LOG_LEVEL", default).strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return default


class Config:
    """Base configuration class."""
    
    # Rendition used when the caller does not name one
    DEFAULT_IMAGE_SIZE = os.environ.get("DEFAULT_IMAGE_SIZE", "medium_large")
    
    # Per-attachment meta key holding the stored alt text
    ALT_TEXT_META_KEY = os.environ.get("ALT_TEXT_META_KEY", "_wp_attachment_image_alt")
    
    # Record validation
    ATTACHMENT_POST_TYPE = "attachment"
    IMAGE_MIME_PREFIX = "image"
    
    # Logging
    LOG_LEVEL = _log_level_from_env()
