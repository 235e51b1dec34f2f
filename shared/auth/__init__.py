"""
Wellness Authentication Module
JWT-based authentication and role checks for all services
"""

from .dependencies import get_current_user, require_roles
from .models import Role, TokenData
from .utils import create_access_token, decode_access_token

__all__ = [
    # Dependencies
    "get_current_user",
    "require_roles",
    # Utils
    "create_access_token",
    "decode_access_token",
    # Models
    "Role",
    "TokenData",
]
