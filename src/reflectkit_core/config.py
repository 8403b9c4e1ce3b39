"""
Configuration Management for ReflectKit.

Provides centralized, type-safe configuration loading using Pydantic Settings.
Supports environment variables, .env files, and sensible defaults for zero-config operation.

License: MIT
"""

from typing import Any, Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReflectKitSettings(BaseSettings):
    """
    Centralized configuration for the ReflectKit logging and console layers.

    Configuration is loaded with the following priority (highest to lowest):
    1. System environment variables (prefixed with ``REFLECTKIT_``)
    2. .env file in the working directory
    3. Hardcoded default values

    Example:
        ```python
        from reflectkit_core.config import settings

        print(settings.log_level)          # 'INFO'
        print(settings.logger_namespace)   # 'reflectkit'
        ```
    """

    # ========================================
    # STRUCTURED LOGGING CONFIGURATION
    # ========================================

    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_format: str = Field(default="json", description="Log format (json, console)")

    logger_namespace: str = Field(
        default="reflectkit",
        min_length=1,
        max_length=100,
        description="Channel name used for sub-loggers created by the factory proxy",
    )

    # ========================================
    # LIBRARY MESSAGE TOGGLES
    # ========================================

    log_debug_messages: bool = Field(
        default=False, description="Emit debug messages through the library logger"
    )

    log_info_messages: bool = Field(
        default=True, description="Emit info messages through the library logger"
    )

    log_warning_messages: bool = Field(
        default=True, description="Emit warning messages through the library logger"
    )

    log_error_messages: bool = Field(
        default=True, description="Emit error messages through the library logger"
    )

    # ========================================
    # CONSOLE LOGGER CONFIGURATION
    # ========================================

    console_colors: bool = Field(
        default=True, description="Write ANSI colour sequences from the console logger"
    )

    # ========================================
    # VALIDATORS
    # ========================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate log level is one of allowed values.

        Args:
            v: Log level string (case-insensitive)

        Returns:
            Uppercase log level string

        Raises:
            ValueError: If log level not in allowed values
        """
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got '{v}'")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """
        Validate log format is one of allowed values.

        Args:
            v: Log format string (case-insensitive)

        Returns:
            Lowercase log format string

        Raises:
            ValueError: If log format not in allowed values
        """
        allowed = ["json", "console"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"log_format must be one of {allowed}, got '{v}'")
        return v_lower

    @field_validator("logger_namespace")
    @classmethod
    def validate_logger_namespace(cls, v: str) -> str:
        """Reject blank namespaces and ones containing the source separator."""
        v = v.strip()
        if not v:
            raise ValueError("logger_namespace cannot be blank")
        if "::" in v:
            raise ValueError(f"logger_namespace must not contain '::', got '{v}'")
        return v

    # ========================================
    # PYDANTIC CONFIGURATION
    # ========================================

    model_config = SettingsConfigDict(
        env_prefix="REFLECTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_assignment=True,
        extra="ignore",
    )


# ============================================================
# HELPER FUNCTIONS
# ============================================================


def get_config_summary(settings: ReflectKitSettings) -> Dict[str, Any]:
    """
    Get configuration summary for logging/debugging.

    Args:
        settings: ReflectKitSettings instance

    Returns:
        Configuration summary grouped by category
    """
    return {
        "logging": {
            "level": settings.log_level,
            "format": settings.log_format,
            "namespace": settings.logger_namespace,
            "debug_messages": settings.log_debug_messages,
            "info_messages": settings.log_info_messages,
            "warning_messages": settings.log_warning_messages,
            "error_messages": settings.log_error_messages,
        },
        "console": {
            "colors": settings.console_colors,
        },
    }


# Singleton instance - instantiated once at module import
settings = ReflectKitSettings()
