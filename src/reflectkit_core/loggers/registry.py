"""
LoggerRegistry - Thread-safe holder of the logger used by all library code.

License: MIT
"""

import threading
from typing import Optional

from reflectkit_core.config import settings
from reflectkit_core.loggers.base import ReflectionToolsLogger
from reflectkit_core.loggers.console import ConsoleReflectionToolsLogger

_REGISTRY_SOURCE = "Accessor.Logger"


class LoggerRegistry:
    """
    Thread-safe singleton holding the current ReflectionToolsLogger.

    Replacing the logger disposes the previous one if it supports dispose().
    The per-level toggles always read False while no logger is installed.

    Example:
        ```python
        registry = LoggerRegistry.get_instance()
        registry.set_logger(create_logger_proxy(StructlogLoggerFactory(), True))

        if registry.log_debug_messages:
            registry.logger.log_debug("Emitter", "IL: ldarg.0")
        ```
    """

    _instance: Optional["LoggerRegistry"] = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        """
        Initialize LoggerRegistry with a console logger and settings defaults.

        DO NOT call directly - use get_instance() instead.
        """
        if LoggerRegistry._instance is not None:
            raise RuntimeError("LoggerRegistry is a singleton. Use LoggerRegistry.get_instance()")

        self._logger: Optional[ReflectionToolsLogger] = ConsoleReflectionToolsLogger()
        self._logger_lock = threading.Lock()

        self._log_debug_messages = settings.log_debug_messages
        self._log_info_messages = settings.log_info_messages
        self._log_warning_messages = settings.log_warning_messages
        self._log_error_messages = settings.log_error_messages

    @classmethod
    def get_instance(cls) -> "LoggerRegistry":
        """
        Get singleton instance of LoggerRegistry.

        Thread-safe singleton creation using double-checked locking pattern.
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = LoggerRegistry()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """
        Reset singleton instance (for testing only).

        WARNING: Only use in test teardown. Never call in production code.
        """
        with cls._lock:
            cls._instance = None

    @property
    def logger(self) -> Optional[ReflectionToolsLogger]:
        with self._logger_lock:
            return self._logger

    @logger.setter
    def logger(self, value: Optional[ReflectionToolsLogger]) -> None:
        self.set_logger(value)

    def set_logger(self, value: Optional[ReflectionToolsLogger]) -> None:
        """
        Install ``value`` as the library logger (None disables logging).

        The previous logger is disposed when it is a different object that
        has a dispose() method. Dispose failures propagate.
        """
        with self._logger_lock:
            old = self._logger
            self._logger = value

        if old is not value:
            dispose = getattr(old, "dispose", None)
            if callable(dispose):
                dispose()

        if value is not None and self.log_info_messages:
            value.log_info(_REGISTRY_SOURCE, f"Logger updated: {type(value).__name__}")

    @property
    def log_debug_messages(self) -> bool:
        return self.logger is not None and self._log_debug_messages

    @log_debug_messages.setter
    def log_debug_messages(self, value: bool) -> None:
        self._log_debug_messages = value

    @property
    def log_info_messages(self) -> bool:
        return self.logger is not None and self._log_info_messages

    @log_info_messages.setter
    def log_info_messages(self, value: bool) -> None:
        self._log_info_messages = value

    @property
    def log_warning_messages(self) -> bool:
        return self.logger is not None and self._log_warning_messages

    @log_warning_messages.setter
    def log_warning_messages(self, value: bool) -> None:
        self._log_warning_messages = value

    @property
    def log_error_messages(self) -> bool:
        return self.logger is not None and self._log_error_messages

    @log_error_messages.setter
    def log_error_messages(self, value: bool) -> None:
        self._log_error_messages = value


def get_reflection_logger() -> Optional[ReflectionToolsLogger]:
    """Return the logger currently used by library code."""
    return LoggerRegistry.get_instance().logger


def set_reflection_logger(value: Optional[ReflectionToolsLogger]) -> None:
    """Replace the logger used by library code, disposing the previous one."""
    LoggerRegistry.get_instance().set_logger(value)
