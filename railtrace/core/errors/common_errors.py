"""Common error classes used as failure payloads.

Error Types:
- ValidationError: Input validation failures
- DecodeError: Serialized data could not be read back

Usage:
    from railtrace.core.errors import ValidationError
    from railtrace.core.enums import ErrorCode
    from railtrace.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_LABEL,
        message="label cannot be empty",
        field="label",
    ))
"""

from dataclasses import dataclass

from railtrace.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DecodeError(DomainError):
    """Serialized data could not be decoded.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        source: Name of the format being decoded (json, dict).
        details: Additional context.
    """

    source: str | None = None

