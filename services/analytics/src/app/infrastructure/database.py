"""
Wellness Analytics - Database Engine
Pooled async engine for the analytics store, one session per request
"""

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, Optional

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from shared.models.database import Base
from shared.utils.logger import get_logger

logger = get_logger(__name__)

# Server-side limit for a single aggregation query, in milliseconds
STATEMENT_TIMEOUT_MS = 30000


@dataclass(frozen=True)
class PoolSettings:
    size: int = 5
    max_size: int = 20
    recycle_seconds: int = 3600
    acquire_timeout: int = 30
    pre_ping: bool = True
    echo: bool = False

    def engine_kwargs(self) -> Dict[str, Any]:
        return {
            "pool_size": self.size,
            "max_overflow": max(self.max_size - self.size, 0),
            "pool_recycle": self.recycle_seconds,
            "pool_timeout": self.acquire_timeout,
            "pool_pre_ping": self.pre_ping,
            "echo": self.echo,
        }


class AnalyticsDatabase:
    """
    Owns the async engine behind every repository session

    The engine is created lazily by ``connect()`` during application
    startup; until then ``status()`` reports ``not_connected`` and
    ``session()`` refuses to hand out sessions.
    """

    def __init__(self, url: str, pool: Optional[PoolSettings] = None):
        self.url = url
        self.pool = pool or PoolSettings()
        self.engine: Optional[AsyncEngine] = None
        self._sessions: Optional[async_sessionmaker] = None
        self.checkouts = 0

    @property
    def connected(self) -> bool:
        return self._sessions is not None

    async def connect(self, create_schema: bool = False) -> None:
        """Build the engine, check connectivity and optionally create tables."""
        if self.connected:
            logger.warning("Analytics database already connected")
            return

        engine = create_async_engine(
            self.url,
            connect_args=self._driver_options(),
            **self.pool.engine_kwargs(),
        )
        self._track_checkouts(engine)

        try:
            async with engine.begin() as connection:
                await connection.execute(text("SELECT 1"))
                if create_schema:
                    await connection.run_sync(Base.metadata.create_all)
                    logger.info("Analytics schema created")
        except Exception as e:
            logger.error(f"Analytics database unreachable: {e}")
            await engine.dispose()
            raise

        self.engine = engine
        self._sessions = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )
        logger.info(
            f"Analytics database connected: pool_size={self.pool.size}, "
            f"max_size={self.pool.max_size}"
        )

    async def disconnect(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()
            logger.info("Analytics database disconnected")
        self._sessions = None

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Request-scoped session: committed on success, rolled back on error

        Usage:
        async with database.session() as session:
            rows = (await session.execute(query)).fetchall()
        """
        if self._sessions is None:
            raise RuntimeError("Analytics database is not connected")

        async with self._sessions() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                logger.warning("Request session rolled back")
                raise

    def status(self) -> Dict[str, Any]:
        if self.engine is None:
            return {"status": "not_connected"}

        pool = self.engine.pool
        return {
            "status": "connected" if self.connected else "disconnected",
            "checked_out": pool.checkedout(),
            "checked_in": pool.checkedin(),
            "overflow": pool.overflow(),
            "checkouts": self.checkouts,
        }

    def _driver_options(self) -> Dict[str, Any]:
        if "+asyncpg" in self.url:
            return {"server_settings": {"statement_timeout": str(STATEMENT_TIMEOUT_MS)}}
        return {}

    def _track_checkouts(self, engine: AsyncEngine) -> None:
        @event.listens_for(engine.sync_engine, "checkout")
        def on_checkout(dbapi_conn, connection_record, connection_proxy):
            self.checkouts += 1
