"""
Unit test fixtures.

Isolates unit tests from environment variables (.env file)
to ensure tests verify actual default values.

License: MIT
"""

import os

import pytest

# Environment variables that affect ReflectKitSettings defaults
CONFIG_ENV_VARS = [
    "REFLECTKIT_LOG_LEVEL",
    "REFLECTKIT_LOG_FORMAT",
    "REFLECTKIT_LOGGER_NAMESPACE",
    "REFLECTKIT_LOG_DEBUG_MESSAGES",
    "REFLECTKIT_LOG_INFO_MESSAGES",
    "REFLECTKIT_LOG_WARNING_MESSAGES",
    "REFLECTKIT_LOG_ERROR_MESSAGES",
    "REFLECTKIT_CONSOLE_COLORS",
]


@pytest.fixture(autouse=True)
def clean_env_for_unit_tests(monkeypatch, tmp_path):
    """
    Remove all config-related environment variables and change working
    directory to avoid loading .env file.
    """
    for var in CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)

    original_dir = os.getcwd()
    os.chdir(tmp_path)
    yield
    os.chdir(original_dir)
