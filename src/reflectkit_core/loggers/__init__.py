"""
Reflection loggers.

Exports:
    ReflectionToolsLogger: Four-operation logger protocol used by library code
    LoggerFactory: Injected capability creating named sub-loggers
    LogSeverity: Debug/Info/Warning/Error with their 3-letter tags
    ReflectionToolsLoggerProxy: Logger forwarding to a LoggerFactory
    StructlogLoggerFactory: Default structlog-backed LoggerFactory
    ConsoleReflectionToolsLogger: Coloured stdout logger
    LoggerRegistry: Holder of the process-wide library logger
"""

from .base import LoggerFactory, LogSeverity, ReflectionToolsLogger, SubLogger
from .console import ConsoleColor, ConsoleReflectionToolsLogger
from .proxy import ReflectionToolsLoggerProxy, StructlogLoggerFactory, create_logger_proxy
from .registry import LoggerRegistry, get_reflection_logger, set_reflection_logger

__all__ = [
    "ReflectionToolsLogger",
    "LoggerFactory",
    "SubLogger",
    "LogSeverity",
    "ReflectionToolsLoggerProxy",
    "StructlogLoggerFactory",
    "create_logger_proxy",
    "ConsoleColor",
    "ConsoleReflectionToolsLogger",
    "LoggerRegistry",
    "get_reflection_logger",
    "set_reflection_logger",
]
