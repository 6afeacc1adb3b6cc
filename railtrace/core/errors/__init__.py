"""Core errors package.

Exports failure payload classes (returned as data) and misuse exceptions
(raised).

Usage:
    from railtrace.core.errors import DomainError, ValidationError
    from railtrace.core.errors import TraceLabelError, ResultDecodeError
"""

from railtrace.core.errors.common_errors import (
    DecodeError,
    ValidationError,
)
from railtrace.core.errors.domain_error import DomainError
from railtrace.core.errors.exceptions import (
    ResultDecodeError,
    TraceLabelError,
    UnwrapError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "DecodeError",
    "TraceLabelError",
    "ResultDecodeError",
    "UnwrapError",
]
