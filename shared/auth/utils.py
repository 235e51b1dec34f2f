"""
Wellness Authentication Utilities
JWT token operations
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from shared.utils.config import get_settings
from shared.utils.logger import get_logger

from .models import Role

logger = get_logger(__name__)


def create_access_token(
    user_id: str,
    username: str,
    role: Role,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a JWT access token

    Args:
        user_id: Subject identifier
        username: User's username
        role: Caller role
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(seconds=settings.jwt_expiration)

    payload = {
        "sub": str(user_id),
        "username": username,
        "role": Role(role).value,
        "exp": expire,
        "iat": datetime.now(timezone.utc),
        "type": "access",
    }

    return jwt.encode(
        payload,
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode and validate a JWT access token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
        )

        if not payload.get("sub") or not payload.get("role"):
            logger.warning("Token missing required fields")
            return None

        return payload

    except jwt.ExpiredSignatureError:
        logger.warning("Token has expired")
        return None
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid token: {e}")
        return None
