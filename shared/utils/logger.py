"""
Wellness Shared Logger
Centralized logging configuration
"""

import logging
import sys
from typing import Optional

from .config import get_settings
from .logging_config import build_formatter


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get configured logger instance

    The console handler is attached once to the top-level package logger
    (``app``, ``shared``, ...) so that module loggers propagate to it and
    ``setup_logging`` can later swap the handler in one place.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger
    """
    settings = get_settings()
    logger_name = name or settings.service_name
    package_logger = logging.getLogger(logger_name.split(".")[0])

    # Avoid duplicate handlers
    if not package_logger.handlers:
        log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
        package_logger.setLevel(log_level)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(build_formatter(settings.json_logs))

        package_logger.addHandler(console_handler)
        package_logger.propagate = False

    return logging.getLogger(logger_name)
