"""
Factory-backed reflection logger.

ReflectionToolsLoggerProxy implements ReflectionToolsLogger on top of an
injected LoggerFactory, keeping one sub-logger per source tag.
StructlogLoggerFactory is the default factory, backed by LoggingService.

License: MIT
"""

import threading
from typing import Any, Dict, Optional

from reflectkit_core.config import settings
from reflectkit_core.logging_service import LoggingService
from reflectkit_core.loggers.base import LoggerFactory, ReflectionToolsLogger, SubLogger


class StructlogLoggerFactory:
    """
    LoggerFactory handing out structlog loggers from LoggingService.

    Configures LoggingService from settings on first use if nothing else
    configured it yet.

    Example:
        ```python
        factory = StructlogLoggerFactory()
        logger = factory.create_logger("reflectkit::Accessor")
        logger.info("getter_generated")
        ```
    """

    def __init__(self) -> None:
        self._closed = False
        self._lock = threading.Lock()

    @property
    def closed(self) -> bool:
        return self._closed

    def create_logger(self, name: str) -> SubLogger:
        """
        Create (or fetch the cached) structlog logger for ``name``.

        Raises:
            RuntimeError: If the factory has been closed
            ValueError: If name is empty or too long
        """
        with self._lock:
            if self._closed:
                raise RuntimeError("Logger factory is closed")
            if not LoggingService.is_configured():
                LoggingService.configure_logging(
                    level=settings.log_level, format=settings.log_format
                )
            return LoggingService.get_logger(name)

    def close(self) -> None:
        with self._lock:
            self._closed = True


class ReflectionToolsLoggerProxy:
    """
    Implements ReflectionToolsLogger through a LoggerFactory.

    Sub-loggers are named ``"<namespace>::<source>"``, created lazily on first
    use and cached for the lifetime of the proxy. Records without a source go
    to the ``"<namespace>"`` channel.

    Thread-Safety:
        One lock covers the cache lookup and insertion, so concurrent first use
        of a source creates exactly one sub-logger.

    Attributes:
        logger_factory: Factory to create loggers from
        dispose_factory_on_dispose: Whether dispose() closes logger_factory

    Example:
        ```python
        with ReflectionToolsLoggerProxy(StructlogLoggerFactory(), True) as logger:
            logger.log_info("Accessor", "Generated getter")
        ```
    """

    def __init__(
        self,
        logger_factory: LoggerFactory,
        dispose_factory_on_dispose: bool = False,
        namespace: Optional[str] = None,
    ) -> None:
        self._logger_factory = logger_factory
        self._dispose_factory_on_dispose = dispose_factory_on_dispose
        self._namespace = namespace or settings.logger_namespace
        self._loggers: Dict[str, SubLogger] = {}
        self._lock = threading.Lock()

    @property
    def logger_factory(self) -> LoggerFactory:
        return self._logger_factory

    @property
    def dispose_factory_on_dispose(self) -> bool:
        return self._dispose_factory_on_dispose

    @property
    def namespace(self) -> str:
        return self._namespace

    def log_debug(self, source: Optional[str], message: Optional[str]) -> None:
        self._get_or_add_logger(source).debug(message)

    def log_info(self, source: Optional[str], message: Optional[str]) -> None:
        self._get_or_add_logger(source).info(message)

    def log_warning(self, source: Optional[str], message: Optional[str]) -> None:
        self._get_or_add_logger(source).warning(message)

    def log_error(
        self,
        source: Optional[str],
        fault: Optional[BaseException] = None,
        message: Optional[str] = None,
    ) -> None:
        logger = self._get_or_add_logger(source)
        if fault is not None:
            logger.error(message, exc_info=fault)
        else:
            logger.error(message)

    def _get_or_add_logger(self, source: Optional[str]) -> SubLogger:
        if source is None:
            return self._logger_factory.create_logger(self._namespace)

        with self._lock:
            logger = self._loggers.get(source)
            if logger is None:
                logger = self._logger_factory.create_logger(f"{self._namespace}::{source}")
                self._loggers[source] = logger
            return logger

    def dispose(self) -> None:
        """Close the factory if this proxy owns it; otherwise do nothing."""
        if self._dispose_factory_on_dispose:
            self._logger_factory.close()

    close = dispose

    def __enter__(self) -> "ReflectionToolsLoggerProxy":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.dispose()


def create_logger_proxy(
    logger_factory: LoggerFactory, dispose_factory_on_dispose: bool = False
) -> ReflectionToolsLogger:
    """
    Create a reflection logger that forwards to ``logger_factory``.

    Args:
        logger_factory: Factory to create loggers from
        dispose_factory_on_dispose: Should the factory be closed when the
            returned logger is disposed?
    """
    return ReflectionToolsLoggerProxy(logger_factory, dispose_factory_on_dispose)
