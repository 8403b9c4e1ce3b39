"""
ReflectKit Core.

Runtime-metadata helpers. Contains:
- Digit counting for fixed-width integers
- Reflection loggers (console, factory-backed proxy, process-wide registry)
- Member visibility levels
- Elapsed-time helpers
- Configuration management and structured logging service

License: MIT
"""

from .config import ReflectKitSettings, get_config_summary, settings
from .logging_service import LoggingConfig, LoggingService
from .loggers import (
    ConsoleColor,
    ConsoleReflectionToolsLogger,
    LoggerFactory,
    LoggerRegistry,
    LogSeverity,
    ReflectionToolsLogger,
    ReflectionToolsLoggerProxy,
    StructlogLoggerFactory,
    create_logger_proxy,
    get_reflection_logger,
    set_reflection_logger,
)
from .utils import (
    IntegerWidth,
    Stopwatch,
    count_digits,
    get_elapsed_milliseconds,
    measure_time,
)
from .visibility import MemberVisibility, get_highest_visibility

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "ReflectKitSettings",
    "settings",
    "get_config_summary",
    # Logging
    "LoggingService",
    "LoggingConfig",
    "ReflectionToolsLogger",
    "LoggerFactory",
    "LogSeverity",
    "ReflectionToolsLoggerProxy",
    "StructlogLoggerFactory",
    "create_logger_proxy",
    "ConsoleColor",
    "ConsoleReflectionToolsLogger",
    "LoggerRegistry",
    "get_reflection_logger",
    "set_reflection_logger",
    # Utilities
    "count_digits",
    "IntegerWidth",
    "get_elapsed_milliseconds",
    "Stopwatch",
    "measure_time",
    # Visibility
    "MemberVisibility",
    "get_highest_visibility",
]
