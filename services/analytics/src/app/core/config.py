import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from shared.utils.config import get_settings


@dataclass(frozen=True)
class AnalyticsConfig:
    service_name: str
    service_port: int
    log_level: str
    json_logs: bool
    app_env: str
    debug: bool
    database_url: str
    db_pool_min: int
    db_pool_max: int
    db_create_tables: bool
    cors_allow_origins: Tuple[str, ...]
    audit_enabled: bool
    api_prefix: str


def _parse_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@lru_cache()
def get_analytics_config() -> AnalyticsConfig:
    settings = get_settings()
    return AnalyticsConfig(
        service_name=os.getenv("SERVICE_NAME", settings.service_name),
        service_port=int(os.getenv("PORT", str(settings.service_port))),
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        app_env=settings.app_env,
        debug=settings.debug,
        database_url=os.getenv("DATABASE_URL", settings.postgres_async_url),
        db_pool_min=settings.db_pool_min,
        db_pool_max=settings.db_pool_max,
        db_create_tables=settings.db_create_tables,
        cors_allow_origins=tuple(settings.cors_allow_origins),
        audit_enabled=_parse_bool(
            os.getenv("ANALYTICS_AUDIT_ENABLED"), settings.analytics_audit_enabled
        ),
        api_prefix=os.getenv("ANALYTICS_API_PREFIX", "/analytics"),
    )
