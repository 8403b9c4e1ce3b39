"""
Logger Factory - Convenience wrapper for LoggingService.

Provides simple get_logger() / configure_logging() functions that default to
the values in ``reflectkit_core.config.settings``.

License: MIT
"""

from typing import Optional

import structlog

from reflectkit_core.config import settings
from reflectkit_core.logging_service import LoggingService


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a channel-specific structlog logger.

    Args:
        name: Logger name (typically module path or __name__)

    Returns:
        Cached BoundLogger instance

    Raises:
        RuntimeError: If logging not configured yet (call configure_logging() first)
        ValueError: If name is empty or exceeds maximum length (200 chars)

    Example:
        ```python
        from reflectkit_core.utils import configure_logging, get_logger

        configure_logging()
        logger = get_logger(__name__)
        logger.info("operation_started", member="Sample.field")
        ```
    """
    return LoggingService.get_logger(name)


def configure_logging(level: Optional[str] = None, format: Optional[str] = None) -> None:
    """
    Configure structured logging infrastructure.

    Uses settings.log_level / settings.log_format for any argument left as None.

    Raises:
        ValueError: If level or format is invalid
        RuntimeError: If called after logging already configured
    """
    if level is None:
        level = settings.log_level
    if format is None:
        format = settings.log_format

    LoggingService.configure_logging(level=level, format=format)
