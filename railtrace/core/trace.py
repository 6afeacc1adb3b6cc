"""Trace-accumulating constructors.

Each layer of a call chain re-wraps the Result it got from the layer below
and names itself. The labels pile up innermost first, giving a readable
call path without inspecting the interpreter stack:

    def read_config() -> Result[dict, DomainError]:
        return wrap_err(ValidationError(...), "read_config")

    def load_app() -> Result[App, DomainError]:
        result = read_config()
        if result.is_err():
            return wrap_err(result, "load_app")
        ...

    load_app().trace  # ["read_config", "load_app"]

Labels are always passed by the caller. The trace is diagnostic only and
never changes what ``is_ok()``, ``is_err()`` or ``is_valid()`` report.
"""

from typing import Any

from railtrace.core.config import get_settings
from railtrace.core.constructors import make_err, make_ok
from railtrace.core.container import get_logger
from railtrace.core.enums import SentinelPolicy
from railtrace.core.errors import TraceLabelError
from railtrace.core.result import Failure, Result
from railtrace.core.validation import validate_label


def _append(result: Result[Any, Any], label: str | None) -> Result[Any, Any]:
    if label is None:
        return result

    match validate_label(label):
        case Failure(error=error):
            raise TraceLabelError(label, error.message)

    result.trace.append(label)

    if get_settings().log_trace_events:
        get_logger().debug(
            "Result trace extended",
            label=label,
            depth=len(result.trace),
            outcome=result.kind,
        )
    return result


def wrap_ok(
    value: Any,
    label: str | None = None,
    *,
    policy: SentinelPolicy | str | None = None,
) -> Result[Any, Any]:
    """Reuse or build a Success and record label on its trace.

    Args:
        value: A Result to reuse in place, or a success payload.
        label: Name of the calling layer. Nothing is appended when None.
        policy: Sentinel policy used when a new Success is built.

    Returns:
        The Result the label was appended to.

    Raises:
        TraceLabelError: If label is not a non-empty, trimmed string.
    """
    return _append(make_ok(value, policy=policy), label)


def wrap_err(
    value: Any,
    label: str | None = None,
    *,
    policy: SentinelPolicy | str | None = None,
) -> Result[Any, Any]:
    """Reuse or build a Failure and record label on its trace.

    Args:
        value: A Result to reuse in place, or a failure payload.
        label: Name of the calling layer. Nothing is appended when None.
        policy: Sentinel policy used when a new Failure is built.

    Returns:
        The Result the label was appended to.

    Raises:
        TraceLabelError: If label is not a non-empty, trimmed string.
    """
    return _append(make_err(value, policy=policy), label)
