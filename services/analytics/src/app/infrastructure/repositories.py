"""
Wellness Analytics Repositories
Metric source queries and report persistence

Metric repositories return ordered ``(key, value)`` rows exactly as the
store produced them; grouping and ordering are decided here, in SQL.
"""

from typing import List, Optional

from sqlalchemy import delete, select

from shared.models.database import ReportDB
from shared.repositories.base import BaseRepository, Row
from shared.utils.logger import get_logger

logger = get_logger(__name__)


# ============================================================================
# ACTIVITY METRICS
# ============================================================================


class ActivityMetricsRepository(BaseRepository):
    """Aggregations over program activity enrollments"""

    async def participation_status(self) -> List[Row]:
        """Number of activity enrollments per status"""
        return await self.fetch_rows("""
            SELECT a.status, COUNT(a.activity_id)
            FROM activities a
            GROUP BY a.status
            ORDER BY a.status
        """)

    async def participation_by_department(self) -> List[Row]:
        """Distinct participating users per department"""
        return await self.fetch_rows("""
            SELECT u.department, COUNT(DISTINCT a.user_id)
            FROM activities a
            JOIN users u ON u.user_id = a.user_id
            GROUP BY u.department
            ORDER BY u.department
        """)

    async def participation_by_program(self) -> List[Row]:
        """Activity enrollments per program"""
        return await self.fetch_rows("""
            SELECT p.title, COUNT(a.activity_id)
            FROM activities a
            JOIN programs p ON p.program_id = a.program_id
            GROUP BY p.title
            ORDER BY p.title
        """)

    async def participation_by_category(self) -> List[Row]:
        """Activity enrollments per activity category"""
        return await self.fetch_rows("""
            SELECT a.category, COUNT(a.activity_id)
            FROM activities a
            GROUP BY a.category
            ORDER BY a.category
        """)

    async def monthly_trend(self) -> List[Row]:
        """Activity count per calendar month; month is the raw 1-12 ordinal"""
        return await self.fetch_rows("""
            SELECT CAST(EXTRACT(MONTH FROM a.activity_date) AS INTEGER) AS month,
                   COUNT(a.activity_id)
            FROM activities a
            GROUP BY month
            ORDER BY month
        """)

    async def completion_status(self) -> List[Row]:
        """Completed versus not yet completed activities"""
        return await self.fetch_rows("""
            SELECT CASE WHEN a.status = 'COMPLETED' THEN 'Completed'
                        ELSE 'Pending' END AS completion,
                   COUNT(a.activity_id)
            FROM activities a
            GROUP BY completion
            ORDER BY completion
        """)


# ============================================================================
# GOAL METRICS
# ============================================================================


class GoalMetricsRepository(BaseRepository):
    """Aggregations over personal goals"""

    async def goal_status(self) -> List[Row]:
        return await self.fetch_rows("""
            SELECT g.status, COUNT(g.goal_id)
            FROM goals g
            GROUP BY g.status
            ORDER BY g.status
        """)

    async def engagement_by_department(self) -> List[Row]:
        """Average goal progress per department"""
        return await self.fetch_rows("""
            SELECT u.department, AVG(g.progress)
            FROM goals g
            JOIN users u ON u.user_id = g.user_id
            GROUP BY u.department
            ORDER BY u.department
        """)


# ============================================================================
# CHALLENGE METRICS
# ============================================================================


class ChallengeMetricsRepository(BaseRepository):
    """Aggregations over challenge participation"""

    async def challenge_completion(self) -> List[Row]:
        return await self.fetch_rows("""
            SELECT c.status, COUNT(c.challenge_id)
            FROM challenges c
            GROUP BY c.status
            ORDER BY c.status
        """)


# ============================================================================
# USER METRICS
# ============================================================================


class UserMetricsRepository(BaseRepository):
    """Aggregations over the user directory"""

    async def manager_team_size(self) -> List[Row]:
        """Direct reports per manager"""
        return await self.fetch_rows("""
            SELECT m.name, COUNT(e.user_id)
            FROM users m
            JOIN users e ON e.manager_id = m.user_id
            WHERE m.role = 'MANAGER'
            GROUP BY m.user_id, m.name
            ORDER BY m.name
        """)


# ============================================================================
# PROGRAM METRICS
# ============================================================================


class ProgramMetricsRepository(BaseRepository):
    """Aggregations over wellness programs"""

    async def program_status_count(self) -> List[Row]:
        return await self.fetch_rows("""
            SELECT p.status, COUNT(p.program_id)
            FROM programs p
            GROUP BY p.status
            ORDER BY p.status
        """)


# ============================================================================
# REPORTS
# ============================================================================


class ReportRepository(BaseRepository):
    """Persistence for audit/snapshot reports"""

    async def save(self, report: ReportDB) -> ReportDB:
        """Insert a new report or write back changes to a loaded one"""
        try:
            self.db.add(report)
            await self.commit()
            await self.db.refresh(report)
            return report

        except Exception as e:
            await self.rollback()
            logger.error(f"Error saving report: {e}")
            raise

    async def find_by_id(self, report_id: int) -> Optional[ReportDB]:
        return await self.db.get(ReportDB, report_id)

    async def find_all(self) -> List[ReportDB]:
        result = await self.db.execute(select(ReportDB).order_by(ReportDB.report_id))
        return list(result.scalars().all())

    async def delete_by_id(self, report_id: int) -> None:
        """Delete a report; a missing id deletes nothing"""
        try:
            await self.db.execute(delete(ReportDB).where(ReportDB.report_id == report_id))
            await self.commit()

        except Exception as e:
            await self.rollback()
            logger.error(f"Error deleting report {report_id}: {e}")
            raise
