"""Exceptions for programmer misuse.

Operational failures are returned as ``Failure`` values. The exceptions here
signal bugs at the call site (a malformed trace label, corrupt serialized
data, unwrapping a failure) and follow Python's convention of raising
``ValueError`` for values of the right type but wrong content.
"""

from typing import Any


class TraceLabelError(ValueError):
    """Raised when a trace label is not a non-empty, trimmed string."""

    def __init__(self, label: Any, reason: str) -> None:
        """Initialize trace label error.

        Args:
            label: The rejected label.
            reason: Why the label was rejected.
        """
        super().__init__(f"Invalid trace label {label!r}: {reason}")
        self.label = label
        self.reason = reason


class ResultDecodeError(ValueError):
    """Raised when serialized data does not describe a valid Result."""

    def __init__(self, reason: str) -> None:
        """Initialize decode error.

        Args:
            reason: What was wrong with the input.
        """
        super().__init__(f"Cannot decode Result: {reason}")
        self.reason = reason


class UnwrapError(RuntimeError):
    """Raised when unwrapping a Failure."""

    def __init__(self, failure: Any, trace: list[str]) -> None:
        """Initialize unwrap error.

        Args:
            failure: The failure payload that was found instead of a value.
            trace: Trace labels of the unwrapped Result.
        """
        location = " <- ".join(reversed(trace)) if trace else "<no trace>"
        super().__init__(f"Called unwrap() on a Failure: {failure!s} ({location})")
        self.failure = failure
        self.trace = list(trace)
