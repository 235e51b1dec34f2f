"""
Wellness Analytics - FastAPI dependency providers
One session per request; repositories and services are built on top of it.
"""

from typing import AsyncGenerator

from app.application.analytics import AnalyticsService
from app.application.reports import ReportService
from app.core.config import get_analytics_config
from app.dependencies.container import database
from app.infrastructure.repositories import (
    ActivityMetricsRepository,
    ChallengeMetricsRepository,
    GoalMetricsRepository,
    ProgramMetricsRepository,
    ReportRepository,
    UserMetricsRepository,
)
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session from connection pool

    Usage:
    ```python
    @router.get("/endpoint")
    async def endpoint(db: AsyncSession = Depends(get_db_session)):
        result = await db.execute(query)
    ```
    """
    async with database.session() as session:
        yield session


def get_report_service(db: AsyncSession = Depends(get_db_session)) -> ReportService:
    return ReportService(ReportRepository(db))


def get_analytics_service(
    db: AsyncSession = Depends(get_db_session),
    reports: ReportService = Depends(get_report_service),
) -> AnalyticsService:
    return AnalyticsService(
        reports,
        activity=ActivityMetricsRepository(db),
        goal=GoalMetricsRepository(db),
        challenge=ChallengeMetricsRepository(db),
        user=UserMetricsRepository(db),
        program=ProgramMetricsRepository(db),
        audit_enabled=get_analytics_config().audit_enabled,
    )
