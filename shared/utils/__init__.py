"""
Wellness Shared Utilities
Common utility functions and classes used across services
"""

from .config import Settings, get_settings
from .errors import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    SeriesTypeMismatchError,
    WellnessException,
)
from .logger import get_logger

__all__ = [
    # Config
    "get_settings",
    "Settings",
    # Logging
    "get_logger",
    # Errors
    "WellnessException",
    "NotFoundError",
    "AuthenticationError",
    "AuthorizationError",
    "SeriesTypeMismatchError",
]
