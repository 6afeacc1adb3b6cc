"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. This approach makes error handling explicit and
testable: every caller either inspects the Result or forwards it unchanged.

Both variants expose the same two-slot view. The populated slot holds the
payload, the other holds ``False``:

    Success(value=v)  -> success=v,     failure=False
    Failure(error=e)  -> success=False, failure=e

Predicates read the slots by truthiness. ``is_ok()`` is strict: a falsy
success payload (``0``, ``""``, ``[]``) reports ``False``. Callers that accept
falsy payloads use ``is_valid()``, which only asks whether the failure slot
is empty.

Each Result also carries ``trace``, an append-only list of caller labels
(innermost first) filled by ``railtrace.core.trace``. The trace is excluded
from equality and never affects the predicates.

Usage:
    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return Failure(error="Division by zero")
        return Success(value=a / b)

    result = divide(10, 2)
    match result:
        case Success(value=value):
            print(f"Result: {value}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

import json
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeGuard, TypeVar

from railtrace.core.constants import (
    FAILURE_KEY,
    FALSY_SLOT,
    KIND_FAILURE,
    KIND_KEY,
    KIND_SUCCESS,
    SUCCESS_KEY,
    TRACE_KEY,
)
from railtrace.core.errors import DomainError, UnwrapError

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


def _render(payload: Any) -> Any:
    if isinstance(payload, DomainError):
        return payload.to_dict()
    return payload


def _encodable(slot: Any) -> Any:
    try:
        json.dumps(slot, default=repr)
    except (TypeError, ValueError):
        return repr(slot)
    return slot


class _SlotView:
    """Predicates and serialization shared by both variants."""

    __slots__ = ()

    # Provided by each variant.
    trace: list[str]
    success: Any
    failure: Any
    kind: Literal["success", "failure"]

    def is_ok(self) -> bool:
        """Return True iff the success slot is truthy.

        A falsy success payload is indistinguishable from no success here;
        use ``is_valid()`` when falsy payloads are legitimate.
        """
        return bool(self.success)

    def is_err(self) -> bool:
        """Return True iff the failure slot is truthy."""
        return bool(self.failure)

    def is_valid(self) -> bool:
        """Return True iff the failure slot is falsy.

        Exact complement of ``is_err()``.
        """
        return not self.failure

    def to_dict(self) -> dict[str, Any]:
        """Return the full value as JSON-native data.

        Returns:
            dict: ``kind``, ``success``, ``failure`` and ``trace`` keys.
            DomainError payloads are rendered with their own ``to_dict()``.
        """
        return {
            KIND_KEY: self.kind,
            SUCCESS_KEY: _render(self.success),
            FAILURE_KEY: _render(self.failure),
            TRACE_KEY: list(self.trace),
        }

    def to_json(self) -> str:
        """Return the debug representation as JSON text.

        Payloads that are not JSON-native are rendered with ``repr()``. A slot
        JSON cannot encode at all (non-string dict keys, cycles) is replaced
        by the ``repr()`` of the whole slot, so this never raises.
        """
        data = self.to_dict()
        try:
            return json.dumps(data, default=repr)
        except (TypeError, ValueError):
            for key in (SUCCESS_KEY, FAILURE_KEY):
                data[key] = _encodable(data[key])
            return json.dumps(data, default=repr)

    def __str__(self) -> str:
        return self.to_json()


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(_SlotView, Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
        trace: Caller labels, innermost first.
    """

    value: T
    trace: list[str] = field(default_factory=list, compare=False)

    @property
    def success(self) -> T:
        return self.value

    @property
    def failure(self) -> Literal[False]:
        return FALSY_SLOT

    @property
    def kind(self) -> Literal["success"]:
        return KIND_SUCCESS

    def unwrap(self) -> T:
        """Return the success payload."""
        return self.value


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(_SlotView, Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
        trace: Caller labels, innermost first.
    """

    error: E
    trace: list[str] = field(default_factory=list, compare=False)

    @property
    def success(self) -> Literal[False]:
        return FALSY_SLOT

    @property
    def failure(self) -> E:
        return self.error

    @property
    def kind(self) -> Literal["failure"]:
        return KIND_FAILURE

    def unwrap(self) -> Any:
        """Raise, since a Failure has no success payload.

        Raises:
            UnwrapError: Always, carrying the error and the trace.
        """
        raise UnwrapError(self.error, self.trace)


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]


def is_result(value: object) -> TypeGuard[Success[Any] | Failure[Any]]:
    """Return True if value is already a Result (either variant)."""
    return isinstance(value, (Success, Failure))
