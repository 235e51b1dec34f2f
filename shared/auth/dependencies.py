"""
Wellness Authentication Dependencies
FastAPI dependency injection for authentication and role checks
"""

from typing import Iterable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from shared.utils.errors import AuthenticationError, AuthorizationError
from shared.utils.logger import get_logger

from .models import Role, TokenData
from .utils import decode_access_token

logger = get_logger(__name__)

# HTTP Bearer security scheme
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> TokenData:
    """
    FastAPI dependency to get current authenticated user from JWT token

    Raises:
        AuthenticationError: If token is missing or invalid
    """
    if credentials is None:
        raise AuthenticationError()

    payload = decode_access_token(credentials.credentials)

    if payload is None:
        raise AuthenticationError("Invalid or expired token")

    try:
        return TokenData(
            user_id=str(payload["sub"]),
            username=payload.get("username") or str(payload["sub"]),
            role=Role.parse(payload["role"]),
        )

    except (KeyError, ValueError, AttributeError) as e:
        logger.warning(f"Invalid token payload: {e}")
        raise AuthenticationError("Invalid token payload")


def require_roles(*roles: Role):
    """
    Factory for a dependency that admits only callers holding one of ``roles``

    Usage:
    ```python
    @router.delete("/reports/{report_id}")
    async def delete_report(
        report_id: int,
        current_user: TokenData = Depends(require_roles(Role.ADMIN)),
    ):
        ...
    ```

    Raises:
        AuthenticationError: If token is missing or invalid
        AuthorizationError: If the caller's role is not allowed
    """
    allowed = frozenset(roles)

    async def verify_role(
        current_user: TokenData = Depends(get_current_user),
    ) -> TokenData:
        if current_user.role not in allowed:
            logger.info(
                f"Role {current_user.role.value} denied; requires one of "
                f"{_role_names(allowed)}"
            )
            raise AuthorizationError("Insufficient role for this operation")
        return current_user

    return verify_role


def _role_names(roles: Iterable[Role]) -> str:
    return ", ".join(sorted(role.value for role in roles))
