"""
Wellness Database Repository Pattern
Data access layer abstraction

Repositories keep SQL out of the services so that:
1. business logic is separate from data access
2. services can be tested against in-memory fakes
3. query text lives in one place per data source
"""

from abc import ABC
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from shared.utils.logger import get_logger

logger = get_logger(__name__)

Row = Tuple[Any, ...]


class BaseRepository(ABC):
    """Base repository with common database operations"""

    def __init__(self, db_session: AsyncSession):
        self.db = db_session

    async def execute(self, query: str, params: Optional[Dict[str, Any]] = None):
        """Execute raw SQL query with parameters"""
        return await self.db.execute(text(query), params or {})

    async def fetch_rows(
        self, query: str, params: Optional[Dict[str, Any]] = None
    ) -> List[Row]:
        """Execute an aggregation query and return its rows as plain tuples, in order"""
        result = await self.execute(query, params)
        return [tuple(row) for row in result.fetchall()]

    async def commit(self):
        """Commit transaction"""
        await self.db.commit()

    async def rollback(self):
        """Rollback transaction"""
        await self.db.rollback()
