"""
Wellness Centralized Logging Configuration
Structured logging with JSON output for all services
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PLAIN_DATEFMT = "%Y-%m-%d %H:%M:%S"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter for structured logging"""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = getattr(
            record, "service_name", record.name.split(".")[0]
        )

        # Request-scoped fields, when the caller attached them
        for field in ("request_id", "user_id", "role"):
            if hasattr(record, field):
                log_record[field] = getattr(record, field)


def build_formatter(json_logs: bool) -> logging.Formatter:
    """Return the JSON formatter for production or a plain one for development"""
    if json_logs:
        return CustomJsonFormatter(
            fmt="%(timestamp)s %(level)s %(name)s %(message)s",
            rename_fields={
                "levelname": "level",
                "name": "logger",
                "pathname": "file",
                "lineno": "line",
            },
        )
    return logging.Formatter(fmt=PLAIN_FORMAT, datefmt=PLAIN_DATEFMT)


def setup_logging(
    service_name: str, log_level: str = "INFO", json_logs: bool = True
) -> logging.Logger:
    """
    Setup centralized logging configuration

    Configures the service logger and the ``app``/``shared`` package loggers
    so module loggers created with ``get_logger(__name__)`` share one handler.

    Args:
        service_name: Name of the service (e.g., 'wellness-analytics')
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Whether to use JSON formatting (True for production)

    Returns:
        Configured service logger
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(build_formatter(json_logs))

    for name in (service_name, "app", "shared"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers.clear()
        logger.addHandler(console_handler)
        logger.propagate = False

    return logging.getLogger(service_name)


class AuditLogger:
    """Logger for audit writes and other business events"""

    def __init__(self, service_name: str):
        self.logger = logging.getLogger(f"{service_name}.audit")
        self.service_name = service_name

    def log_event(
        self,
        event_name: str,
        event_data: Dict[str, Any],
        user_id: Optional[str] = None,
    ) -> None:
        """
        Log a business event

        Args:
            event_name: Name of the event
            event_data: Event payload
            user_id: Associated user ID
        """
        extra = {
            "event_name": event_name,
            "event_data": event_data,
            "service_name": self.service_name,
        }

        if user_id:
            extra["user_id"] = user_id

        self.logger.info(f"EVENT: {event_name}", extra=extra)


def log_error_with_context(
    logger: logging.Logger, error: Exception, context: Optional[Dict[str, Any]] = None
) -> None:
    """
    Log error with full context and stack trace

    Args:
        logger: Logger instance
        error: Exception to log
        context: Additional context information
    """
    extra = {
        "error_type": type(error).__name__,
        "error_message": str(error),
    }

    if context:
        extra.update(context)

    logger.error(
        f"Error occurred: {type(error).__name__}: {error}",
        exc_info=True,
        extra=extra,
    )
