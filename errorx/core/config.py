"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration for the ambient stack (logging and the
formatting defaults of the composing error types). Values are loaded from
environment variables prefixed with ``ERRORX_``.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from errorx.core.config import get_settings

    settings = get_settings()
    if settings.is_development:
        # Human-readable logs
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from errorx.core.enums import Environment


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (``ERRORX_*``)
        2. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Formatting defaults for GenericError
    generic_error_code: int = Field(
        default=128,
        description="Code used by GenericError when none (or zero) is given",
    )
    nested_error_indent: int = Field(
        default=3,
        description="Spaces of indentation per nesting level in rendered messages",
    )

    model_config = SettingsConfigDict(
        env_prefix="ERRORX_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Level name, any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return level

    @field_validator("generic_error_code")
    @classmethod
    def validate_generic_error_code(cls, v: int) -> int:
        """
        Validate the GenericError fallback code.

        Raises:
            ValueError: If the code is not positive.
        """
        if v <= 0:
            raise ValueError("generic_error_code must be positive")
        return v

    @field_validator("nested_error_indent")
    @classmethod
    def validate_nested_error_indent(cls, v: int) -> int:
        """
        Validate the nested error indentation width.

        Raises:
            ValueError: If indentation is not between 0 and 16.
        """
        if not 0 <= v <= 16:
            raise ValueError("nested_error_indent must be between 0 and 16")
        return v

    @property
    def log_level_value(self) -> int:
        """
        Numeric logging level for ``log_level``.

        Returns:
            int: Level as understood by ``logging`` and structlog.
        """
        return logging.getLevelNamesMapping()[self.log_level]

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """
        Check if running in CI environment.

        Returns:
            bool: True if environment is CI, False otherwise.
        """
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once per process; call ``get_settings.cache_clear()``
    after changing the environment (tests do this).

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
