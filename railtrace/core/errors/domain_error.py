"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for failure payloads. Domain errors represent
expected operational failures (validation, lookups, decoding) and flow
through the call chain as data inside ``Failure``, not as exceptions.

Architecture:
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)
- Always truthy, so a Failure carrying one satisfies ``is_err()``

Usage:
    from dataclasses import dataclass
    from railtrace.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class QuotaError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass
from typing import Any

from railtrace.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Render the error as JSON-native data for logs and serialization.

        Returns:
            dict: ``type``, ``code``, ``message`` and ``details`` keys.
        """
        return {
            "type": type(self).__name__,
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }
