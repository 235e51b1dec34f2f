"""
Wellness Authentication Models
Pydantic models for the authenticated caller
"""

from enum import Enum

from pydantic import BaseModel, Field


class Role(str, Enum):
    """Platform roles carried in the ``role`` token claim"""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    EMPLOYEE = "EMPLOYEE"

    @classmethod
    def parse(cls, value: str) -> "Role":
        """Accept both ``MANAGER`` and the prefixed ``ROLE_MANAGER`` form"""
        normalized = value.strip().upper()
        if normalized.startswith("ROLE_"):
            normalized = normalized[len("ROLE_"):]
        return cls(normalized)


class TokenData(BaseModel):
    """JWT token payload data"""

    user_id: str = Field(..., description="Subject of the token")
    username: str = Field(..., description="Username")
    role: Role = Field(..., description="Caller role")
