"""
Wellness Shared Library - Models Module
SQLAlchemy models shared by the platform services
"""

from .database import (
    ActivityDB,
    Base,
    ChallengeDB,
    GoalDB,
    ProgramDB,
    ReportDB,
    UserDB,
)

__all__ = [
    "Base",
    "ReportDB",
    "UserDB",
    "ProgramDB",
    "ActivityDB",
    "GoalDB",
    "ChallengeDB",
]
