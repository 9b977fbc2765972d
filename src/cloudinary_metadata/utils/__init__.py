"""
Utility functions and helpers for Cloudinary metadata params.
"""

from .errors import ConfigurationError, InvalidParametersError, MetadataError
from .logging_config import get_logger

__all__ = [
    "MetadataError",
    "InvalidParametersError",
    "ConfigurationError",
    "get_logger",
]
