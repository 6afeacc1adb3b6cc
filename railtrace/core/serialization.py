"""Reading serialized Results back.

Inverse of ``Success.to_dict()``/``Failure.to_dict()`` and ``to_json()``.
The ``kind`` key decides the variant, since both slots can be falsy (for
example ``make_ok(0, policy="never")``). A payload whose opposite slot is
truthy describes a Result with both slots populated and is rejected.

For JSON-native payloads the round trip is exact:

    parse_result_json(result.to_json()) == result
"""

import json
from collections.abc import Mapping
from typing import Any

from railtrace.core.constants import (
    FAILURE_KEY,
    FALSY_SLOT,
    KIND_FAILURE,
    KIND_KEY,
    KIND_SUCCESS,
    SUCCESS_KEY,
    TRACE_KEY,
)
from railtrace.core.enums import ErrorCode
from railtrace.core.errors import DecodeError, ResultDecodeError
from railtrace.core.result import Failure, Result, Success


def _read_trace(data: Mapping[str, Any]) -> list[str]:
    trace = data.get(TRACE_KEY, [])
    if not isinstance(trace, list):
        raise ResultDecodeError(f"trace must be a list, got {type(trace).__name__}")
    if not all(isinstance(label, str) for label in trace):
        raise ResultDecodeError("trace entries must be strings")
    return list(trace)


def _read_slot(data: Mapping[str, Any], key: str, other: str) -> Any:
    if key not in data:
        raise ResultDecodeError(f"missing {key!r} slot")
    if data.get(other, FALSY_SLOT):
        raise ResultDecodeError(f"both {key!r} and {other!r} slots are populated")
    return data[key]


def parse_result(data: Mapping[str, Any]) -> Result[Any, Any]:
    """Build a Result from its ``to_dict()`` form.

    Args:
        data: Mapping with ``kind``, ``success``, ``failure`` and optional
            ``trace`` keys.

    Returns:
        Success or Failure with the stored payload and trace.

    Raises:
        ResultDecodeError: If the mapping does not describe exactly one
            populated variant.
    """
    if not isinstance(data, Mapping):
        raise ResultDecodeError(f"expected a mapping, got {type(data).__name__}")

    trace = _read_trace(data)
    match data.get(KIND_KEY):
        case str(kind) if kind == KIND_SUCCESS:
            return Success(value=_read_slot(data, SUCCESS_KEY, FAILURE_KEY), trace=trace)
        case str(kind) if kind == KIND_FAILURE:
            return Failure(error=_read_slot(data, FAILURE_KEY, SUCCESS_KEY), trace=trace)
        case kind:
            raise ResultDecodeError(f"unknown kind {kind!r}")


def parse_result_json(text: str | bytes) -> Result[Any, Any]:
    """Build a Result from its ``to_json()`` text.

    Raises:
        ResultDecodeError: If the text is not valid JSON or not a Result.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ResultDecodeError(f"invalid JSON ({exc.msg})") from exc
    except UnicodeDecodeError as exc:
        raise ResultDecodeError(f"invalid text encoding ({exc.reason})") from exc
    return parse_result(data)


def decode_result(text: str | bytes) -> Result[Result[Any, Any], DecodeError]:
    """Like ``parse_result_json`` but reports bad input as a Failure.

    For callers reading untrusted input (files, queues) where a corrupt
    record is an expected outcome rather than a bug.

    Args:
        text: JSON text produced by ``to_json()``.

    Returns:
        Success wrapping the decoded Result, or Failure with DecodeError.
    """
    try:
        decoded = parse_result_json(text)
    except ResultDecodeError as exc:
        return Failure(
            error=DecodeError(
                code=ErrorCode.RESULT_DECODE_FAILED,
                message=exc.reason,
                source="json",
            )
        )
    return Success(value=decoded)
