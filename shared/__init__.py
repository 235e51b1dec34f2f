"""
Wellness Shared Library
Common models, utilities, and auth helpers for the platform services
"""

__version__ = "0.1.0"

from . import models
from . import utils

__all__ = ["models", "utils"]
