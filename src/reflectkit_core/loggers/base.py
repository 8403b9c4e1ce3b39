"""
Logger interfaces for ReflectKit.

Library code depends only on ReflectionToolsLogger; the console logger and
the factory-backed proxy are interchangeable implementations of it.

License: MIT
"""

from enum import Enum
from typing import Any, Optional, Protocol, runtime_checkable


class LogSeverity(Enum):
    """
    Severity of a reflection log record, with its fixed 3-letter tag.
    """

    DEBUG = "DBG"     # Development-time diagnostics
    INFO = "INF"      # General informational events
    WARNING = "WRN"   # Recoverable anomalies
    ERROR = "ERR"     # Failures, optionally with a captured exception

    @property
    def tag(self) -> str:
        return self.value


@runtime_checkable
class ReflectionToolsLogger(Protocol):
    """
    Trace and error logger for reflection tools.

    Every operation is fire-and-forget and must be callable from any thread.
    ``source`` is a free-text tag naming the logical emitter.
    """

    def log_debug(self, source: Optional[str], message: Optional[str]) -> None:
        """Log a verbose message meant for debugging."""
        ...

    def log_info(self, source: Optional[str], message: Optional[str]) -> None:
        """Log information that may be useful."""
        ...

    def log_warning(self, source: Optional[str], message: Optional[str]) -> None:
        """Log a warning about something that could cause errors but may be okay."""
        ...

    def log_error(
        self,
        source: Optional[str],
        fault: Optional[BaseException] = None,
        message: Optional[str] = None,
    ) -> None:
        """Log an error and/or a captured exception."""
        ...


class SubLogger(Protocol):
    """Named logger handed out by a LoggerFactory."""

    def debug(self, event: Optional[str] = None, **kw: Any) -> Any: ...

    def info(self, event: Optional[str] = None, **kw: Any) -> Any: ...

    def warning(self, event: Optional[str] = None, **kw: Any) -> Any: ...

    def error(self, event: Optional[str] = None, **kw: Any) -> Any: ...


class LoggerFactory(Protocol):
    """
    Capability that creates named sub-loggers and can be torn down.
    """

    def create_logger(self, name: str) -> SubLogger: ...

    def close(self) -> None: ...
