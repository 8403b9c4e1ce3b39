"""
LoggingService - Structured logging backend for ReflectKit.

Configures structlog once per process and hands out named, cached loggers.
The factory-backed reflection logger proxy creates its sub-loggers here.

License: MIT
"""

import logging
import sys
from dataclasses import dataclass
from typing import Any, Optional

import structlog
from structlog.types import Processor

_VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_VALID_FORMATS = ["json", "console"]
_MAX_NAME_LENGTH = 200


@dataclass
class LoggingConfig:
    """
    Configuration for LoggingService.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format ("json" or "console" for dev)
        output_stream: Output destination (default: sys.stderr)

    Example:
        config = LoggingConfig(level="DEBUG", format="console")
    """

    level: str = "INFO"
    format: str = "json"  # "json" or "console"
    output_stream: Any = sys.stderr

    def __post_init__(self) -> None:
        self.level = self.level.upper()
        self.format = self.format.lower()

        if self.level not in _VALID_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.level}. "
                "Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )
        if self.format not in _VALID_FORMATS:
            raise ValueError(f"Invalid format: {self.format}. Must be 'json' or 'console'")


class LoggingService:
    """
    Centralized structured logging service using structlog.

    Outputs JSON (or coloured console lines in development) to stderr so that
    stdout stays free for the console reflection logger.

    Example:
        # Setup logging once at startup
        LoggingService.configure_logging(level="INFO", format="json")

        # Get logger for a channel
        logger = LoggingService.get_logger("reflectkit::Accessor")
        logger.info("getter_generated", member="Sample.field")
    """

    # Class-level state
    _configured: bool = False
    _config: Optional[LoggingConfig] = None
    _loggers: dict[str, structlog.BoundLogger] = {}

    @classmethod
    def configure_logging(
        cls, level: str = "INFO", format: str = "json", config: Optional[LoggingConfig] = None
    ) -> None:
        """
        Configure global structured logging infrastructure.

        This should be called ONCE at application startup before any logging.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            format: Output format ("json" or "console")
            config: Optional LoggingConfig for advanced configuration

        Raises:
            ValueError: If level or format is invalid
            RuntimeError: If called after logging already configured
        """
        if cls._configured:
            raise RuntimeError("Logging already configured")

        cfg = config if config is not None else LoggingConfig(level=level, format=format)

        cls._config = cfg

        structlog.configure(
            processors=cls._setup_processors(),
            wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, cfg.level)),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=cfg.output_stream),
            cache_logger_on_first_use=False,
        )

        cls._configured = True

    @classmethod
    def is_configured(cls) -> bool:
        """Return True once configure_logging() has succeeded."""
        return cls._configured

    @classmethod
    def get_logger(cls, name: str) -> structlog.BoundLogger:
        """
        Get a channel-specific logger.

        Returns a cached logger if already created, otherwise creates
        a new logger bound to the given name.

        Args:
            name: Logger name (module path or "<namespace>::<source>")

        Returns:
            BoundLogger instance

        Raises:
            RuntimeError: If logging not configured yet
            ValueError: If name is empty or too long
        """
        if not cls._configured:
            raise RuntimeError("Logging not configured. Call configure_logging() first.")

        if not name:
            raise ValueError("Logger name cannot be empty")

        if len(name) > _MAX_NAME_LENGTH:
            raise ValueError(f"Logger name exceeds maximum length ({_MAX_NAME_LENGTH})")

        if name in cls._loggers:
            return cls._loggers[name]

        logger = structlog.get_logger(name).bind(logger=name)
        cls._loggers[name] = logger

        return logger

    @classmethod
    def reset(cls) -> None:
        """
        Forget configuration and cached loggers.

        WARNING: Only use in test setup/teardown.
        """
        cls._configured = False
        cls._config = None
        cls._loggers = {}
        structlog.reset_defaults()

    @classmethod
    def _setup_processors(cls) -> list[Processor]:
        """
        Setup structlog processors based on configuration.

        Processors (in order):
            1. add_log_level: Add log level to context
            2. TimeStamper: Add ISO timestamp
            3. StackInfoRenderer: Render stack info if requested
            4. JSON: format_exc_info (faults passed as exc_info) + JSONRenderer
               Console: ConsoleRenderer, which renders exceptions itself
        """
        processors: list[Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        if cls._config and cls._config.format == "console":
            processors.append(structlog.dev.ConsoleRenderer(colors=True))
        else:
            processors.append(structlog.processors.format_exc_info)
            processors.append(structlog.processors.JSONRenderer())

        return processors
