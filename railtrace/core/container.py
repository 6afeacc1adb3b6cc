"""Composition root for process-wide services.

Only the logger lives here; settings are provided by
``railtrace.core.config.get_settings``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from railtrace.core.config import get_settings

if TYPE_CHECKING:
    from railtrace.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the process-wide logger singleton.

    Adapter selection is centralized here:
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from railtrace.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.is_testing or settings.is_ci
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
