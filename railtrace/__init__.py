"""railtrace: Result values with an optional caller trace.

Usage:
    from railtrace import Failure, Success, make_err, make_ok, wrap_err

    def find_user(user_id: str) -> Result[User, DomainError]:
        user = users.get(user_id)
        if user is None:
            return make_err(ValidationError(code=..., message="unknown user"))
        return make_ok(user)

    result = wrap_err(find_user("42"), "load_profile")
"""

from railtrace.core import (
    UNSET,
    DecodeError,
    DomainError,
    ErrorCode,
    Failure,
    Result,
    ResultDecodeError,
    SentinelPolicy,
    Success,
    TraceLabelError,
    UnwrapError,
    ValidationError,
    decode_result,
    is_result,
    make_err,
    make_ok,
    parse_result,
    parse_result_json,
    wrap_err,
    wrap_ok,
)
from railtrace.core.reporting import log_result

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "ResultDecodeError",
    "SentinelPolicy",
    "Success",
    "TraceLabelError",
    "UNSET",
    "UnwrapError",
    "ValidationError",
    "decode_result",
    "is_result",
    "log_result",
    "make_err",
    "make_ok",
    "parse_result",
    "parse_result_json",
    "wrap_err",
    "wrap_ok",
]
