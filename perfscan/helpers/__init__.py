"""
Helper utilities for the performance extraction service
"""

from .config import Settings, get_settings, configure_logging
from .utils import validate_image_file
from .storage import StorageManager, storage

__all__ = [
    'Settings',
    'get_settings',
    'configure_logging',
    'validate_image_file',
    'StorageManager',
    'storage'
]
