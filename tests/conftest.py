"""Pytest configuration.

Every test starts from default settings: RAILTRACE_* variables are removed
and the settings and logger caches are cleared before and after the test.
"""

import os

import pytest

from railtrace.core.config import get_settings
from railtrace.core.container import get_logger


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Reset environment-driven singletons around each test."""
    for key in list(os.environ):
        if key.startswith("RAILTRACE_"):
            monkeypatch.delenv(key)

    get_settings.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()


@pytest.fixture
def trace_logging(monkeypatch):
    """Enable debug logging of trace appends."""
    monkeypatch.setenv("RAILTRACE_LOG_TRACE_EVENTS", "true")
    get_settings.cache_clear()
