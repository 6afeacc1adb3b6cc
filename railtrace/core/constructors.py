"""Ok/Err constructors that normalize any input into a Result.

Both constructors absorb an existing Result: passing a Success or Failure
returns that same object, so forwarding a lower layer's Result through a
success path never double-wraps it.

Otherwise the payload goes through the sentinel policy (see
``railtrace.core.enums.SentinelPolicy``). Under the default FALSY policy a
falsy payload is replaced by ``SENTINEL``, so ``make_ok(0)`` produces
``Success(value=True)``. Callers that need falsy payloads pick MISSING or
NEVER, per call or through ``RAILTRACE_SENTINEL_POLICY``.

Usage:
    from railtrace.core.constructors import make_err, make_ok

    def save(record: Record) -> Result[bool, DomainError]:
        if not record.is_dirty:
            return make_ok()          # Success(value=True)
        ...
        return make_err(ValidationError(code=..., message=...))
"""

from typing import Any, Final

from railtrace.core.config import get_settings
from railtrace.core.constants import SENTINEL
from railtrace.core.enums import SentinelPolicy
from railtrace.core.result import Failure, Result, Success, is_result

# Marks an omitted payload; distinct from an explicit None.
UNSET: Final = object()


def _resolve_policy(policy: SentinelPolicy | str | None) -> SentinelPolicy:
    if policy is None:
        return get_settings().sentinel_policy
    return SentinelPolicy(policy)


def _fill(value: Any, policy: SentinelPolicy) -> Any:
    if value is UNSET:
        return None if policy is SentinelPolicy.NEVER else SENTINEL

    match policy:
        case SentinelPolicy.FALSY:
            return value if value else SENTINEL
        case SentinelPolicy.MISSING:
            return SENTINEL if value is None else value
        case _:
            return value


def make_ok(
    value: Any = UNSET, *, policy: SentinelPolicy | str | None = None
) -> Result[Any, Any]:
    """Build a Success, or return value unchanged if it is already a Result.

    Args:
        value: Success payload. Omit for a void-like success.
        policy: Sentinel policy for this call. Defaults to
            ``Settings.sentinel_policy``.

    Returns:
        The given Result (same object), or a new Success.

    Raises:
        ValueError: If policy is not a known SentinelPolicy value.
    """
    if is_result(value):
        return value
    return Success(value=_fill(value, _resolve_policy(policy)))


def make_err(
    value: Any = UNSET, *, policy: SentinelPolicy | str | None = None
) -> Result[Any, Any]:
    """Build a Failure, or return value unchanged if it is already a Result.

    Args:
        value: Failure payload. Omit for a bare failure.
        policy: Sentinel policy for this call. Defaults to
            ``Settings.sentinel_policy``.

    Returns:
        The given Result (same object), or a new Failure.

    Raises:
        ValueError: If policy is not a known SentinelPolicy value.
    """
    if is_result(value):
        return value
    return Failure(error=_fill(value, _resolve_policy(policy)))
