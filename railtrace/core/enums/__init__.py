"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from railtrace.core.enums import ErrorCode, Environment, SentinelPolicy
"""

from railtrace.core.enums.environment import Environment
from railtrace.core.enums.error_code import ErrorCode
from railtrace.core.enums.sentinel_policy import SentinelPolicy

__all__ = ["ErrorCode", "Environment", "SentinelPolicy"]
