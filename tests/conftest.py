"""
Pytest configuration and fixtures for all tests.

Provides shared setup/teardown for the logging service and the logger registry.

License: MIT
"""

import pytest

from reflectkit_core.logging_service import LoggingService
from reflectkit_core.loggers.registry import LoggerRegistry


@pytest.fixture(autouse=True)
def reset_logging_service():
    """Reset LoggingService state before each test."""
    LoggingService.reset()

    yield

    LoggingService.reset()


@pytest.fixture(autouse=True)
def reset_logger_registry():
    """Give each test a fresh LoggerRegistry singleton."""
    LoggerRegistry.reset_instance()

    yield

    LoggerRegistry.reset_instance()
