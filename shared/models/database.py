"""
Wellness - Shared Database Models
SQLAlchemy ORM models used across services.
These models are in shared to avoid circular imports.
"""

from sqlalchemy import (
    Column,
    Date,
    Float,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


# ============================================================================
# REPORTS
# ============================================================================


class ReportDB(Base):
    """Audit/snapshot record written whenever a metric is computed"""

    __tablename__ = "reports"

    report_id = Column(Integer, primary_key=True, autoincrement=True)
    scope = Column(String(255), nullable=False)
    metrics = Column(String(500), nullable=False)
    generated_date = Column(Date, nullable=False)

    def __repr__(self) -> str:
        return (
            f"ReportDB(report_id={self.report_id!r}, scope={self.scope!r}, "
            f"metrics={self.metrics!r}, generated_date={self.generated_date!r})"
        )


# ============================================================================
# METRIC SOURCE TABLES
# Owned by the user, program, activity and challenge services; read-only here.
# ============================================================================


class UserDB(Base):
    """Platform user (employee, manager or admin)"""

    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    role = Column(String(20), nullable=False)  # 'ADMIN', 'MANAGER', 'EMPLOYEE'
    department = Column(String(100))
    manager_id = Column(Integer, ForeignKey("users.user_id"), index=True)


class ProgramDB(Base):
    """Wellness program"""

    __tablename__ = "programs"

    program_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    category = Column(String(100))
    status = Column(String(20), nullable=False)  # 'ACTIVE', 'UPCOMING', 'COMPLETED'


class ActivityDB(Base):
    """A user's enrollment in a program activity"""

    __tablename__ = "activities"

    activity_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    program_id = Column(Integer, ForeignKey("programs.program_id"), index=True)
    category = Column(String(100))
    status = Column(String(20), nullable=False)  # 'ACTIVE', 'COMPLETED', 'DROPPED'
    activity_date = Column(Date, index=True)


class GoalDB(Base):
    """Personal wellness goal"""

    __tablename__ = "goals"

    goal_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    status = Column(String(20), nullable=False)
    progress = Column(Float, default=0)  # 0-100


class ChallengeDB(Base):
    """A user's participation in a challenge"""

    __tablename__ = "challenges"

    challenge_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    status = Column(String(20), nullable=False)  # 'JOINED', 'COMPLETED', 'FAILED'
