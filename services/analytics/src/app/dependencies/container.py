from contextlib import asynccontextmanager

from app.core.config import get_analytics_config
from app.infrastructure.database import AnalyticsDatabase, PoolSettings

from shared.utils.logger import get_logger

logger = get_logger(__name__)

config = get_analytics_config()
database = AnalyticsDatabase(
    config.database_url,
    PoolSettings(
        size=config.db_pool_min,
        max_size=config.db_pool_max,
        echo=config.debug and config.app_env == "development",
    ),
)


@asynccontextmanager
async def lifespan(app):
    logger.info("Analytics service starting up")
    await database.connect(create_schema=config.db_create_tables)
    logger.info(
        "Analytics config loaded",
        extra={
            "service_name": config.service_name,
            "service_port": config.service_port,
            "audit_enabled": config.audit_enabled,
            "api_prefix": config.api_prefix,
        },
    )
    yield
    await database.disconnect()
    logger.info("Analytics service shutting down")
