"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values (no environment)
- Settings loading from RAILTRACE_* environment variables
- Validation (log_level, sentinel_policy, environment)
- Environment detection properties
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from railtrace.core.config import Settings, get_settings
from railtrace.core.enums import Environment, SentinelPolicy


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSentinelPolicyEnum:
    """Test SentinelPolicy enum."""

    def test_policy_values(self):
        """Test that all policies are defined."""
        assert SentinelPolicy.FALSY == "falsy"
        assert SentinelPolicy.MISSING == "missing"
        assert SentinelPolicy.NEVER == "never"


class TestSettingsDefaults:
    """Test Settings with no environment."""

    def test_defaults(self):
        """Test default values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.log_trace_events is False
        assert settings.sentinel_policy == SentinelPolicy.FALSY


class TestSettingsFromEnvironment:
    """Test Settings loading from environment variables."""

    def test_loads_prefixed_variables(self):
        """Test RAILTRACE_* variables are read."""
        env_values = {
            "RAILTRACE_ENVIRONMENT": "ci",
            "RAILTRACE_LOG_LEVEL": "DEBUG",
            "RAILTRACE_LOG_TRACE_EVENTS": "true",
            "RAILTRACE_SENTINEL_POLICY": "missing",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings()

        assert settings.environment == Environment.CI
        assert settings.log_level == "DEBUG"
        assert settings.log_trace_events is True
        assert settings.sentinel_policy == SentinelPolicy.MISSING

    def test_unprefixed_variables_ignored(self):
        """Test variables without the prefix have no effect."""
        with patch.dict(os.environ, {"LOG_LEVEL": "ERROR"}, clear=True):
            settings = Settings()

        assert settings.log_level == "INFO"

    def test_case_insensitive_names(self):
        """Test variable names are case-insensitive."""
        with patch.dict(os.environ, {"railtrace_log_level": "warning"}, clear=True):
            settings = Settings()

        assert settings.log_level == "WARNING"


class TestSettingsValidation:
    """Test Settings field validation."""

    def test_log_level_normalized(self):
        """Test log_level is uppercased and stripped."""
        with patch.dict(os.environ, {"RAILTRACE_LOG_LEVEL": " error "}, clear=True):
            assert Settings().log_level == "ERROR"

    def test_log_level_rejects_unknown(self):
        """Test log_level rejects non-standard names."""
        with patch.dict(os.environ, {"RAILTRACE_LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings()

        assert any(
            "log_level must be a standard logging level" in str(error)
            for error in exc_info.value.errors()
        )

    def test_sentinel_policy_rejects_unknown(self):
        """Test sentinel_policy must be a SentinelPolicy value."""
        with patch.dict(
            os.environ, {"RAILTRACE_SENTINEL_POLICY": "sometimes"}, clear=True
        ):
            with pytest.raises(ValidationError):
                Settings()

    def test_environment_rejects_unknown(self):
        """Test environment must be an Environment value."""
        with patch.dict(os.environ, {"RAILTRACE_ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


class TestEnvironmentDetection:
    """Test environment convenience properties."""

    @pytest.mark.parametrize(
        ("environment", "flag"),
        [
            (Environment.DEVELOPMENT, "is_development"),
            (Environment.TESTING, "is_testing"),
            (Environment.CI, "is_ci"),
            (Environment.PRODUCTION, "is_production"),
        ],
    )
    def test_only_matching_flag_set(self, environment, flag):
        """Test exactly one environment property is True."""
        settings = Settings(environment=environment)
        flags = ["is_development", "is_testing", "is_ci", "is_production"]

        for name in flags:
            assert getattr(settings, name) is (name == flag)


class TestGetSettings:
    """Test cached settings accessor."""

    def test_returns_cached_instance(self):
        """Test get_settings() returns the same object."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        """Test cache_clear() picks up environment changes."""
        first = get_settings()
        with patch.dict(os.environ, {"RAILTRACE_SENTINEL_POLICY": "never"}):
            get_settings.cache_clear()
            second = get_settings()

        assert second is not first
        assert second.sentinel_policy == SentinelPolicy.NEVER
