"""
Unit tests for logger_factory utility.

Tests the convenience wrappers for LoggingService.

License: MIT
"""

import pytest

from reflectkit_core.logging_service import LoggingService
from reflectkit_core.utils import configure_logging, get_logger
from reflectkit_core.utils import logger_factory


def test_configure_logging_uses_settings(monkeypatch):
    """Test that configure_logging() falls back to settings values."""
    monkeypatch.setattr(logger_factory.settings, "log_level", "WARNING")

    configure_logging()

    assert LoggingService._config.level == "WARNING"
    assert LoggingService._config.format == "json"


def test_configure_logging_explicit_values():
    """Test explicit level and format."""
    configure_logging(level="DEBUG", format="console")

    assert LoggingService._config.level == "DEBUG"
    assert LoggingService._config.format == "console"


def test_get_logger_requires_configuration():
    """Test that get_logger raises error if logging not configured."""
    with pytest.raises(RuntimeError) as exc_info:
        get_logger("test.module")

    assert "not configured" in str(exc_info.value).lower()


def test_get_logger_caches_instances():
    """Test that multiple calls with same name return cached instance."""
    configure_logging(level="INFO")

    assert get_logger("test.module") is get_logger("test.module")


def test_get_logger_supports_all_levels():
    """Test that the returned logger exposes the four severities."""
    configure_logging(level="INFO")

    logger = get_logger("test.levels")

    for method in ("debug", "info", "warning", "error"):
        assert hasattr(logger, method)
