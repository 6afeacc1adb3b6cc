"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables prefixed with ``RAILTRACE_`` (and an optional ``.env`` file).

Architecture:
- Flat Settings structure (no nesting)
- Every field has a default; the library works with no environment at all
- Type validation via Pydantic

Usage:
    from railtrace.core.config import get_settings

    policy = get_settings().sentinel_policy

    # Environment detection
    if get_settings().is_development:
        # Dev-specific behavior
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from railtrace.core.enums import Environment, SentinelPolicy


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (RAILTRACE_*)
        2. .env file in the working directory
        3. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_trace_events: bool = Field(
        default=False,
        description="Emit a debug log every time a label is appended to a trace",
    )

    # Constructors
    sentinel_policy: SentinelPolicy = Field(
        default=SentinelPolicy.FALSY,
        description="When make_ok/make_err substitute the sentinel (falsy, missing, never)",
    )

    model_config = SettingsConfigDict(
        env_prefix="RAILTRACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate and normalize the log level name.

        Args:
            v: Log level name (case-insensitive).

        Returns:
            str: Uppercase log level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        normalized = v.strip().upper()
        if normalized not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return normalized

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

    Uses lru_cache to ensure settings are loaded only once per process.
    Call ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
