"""Core shared kernel.

This module provides:
- Result types for railway-oriented programming
- Ok/Err constructors and their trace-accumulating variants
- Base error classes for failure payloads
- Serialization of Results for logs and storage

The core module depends only on the domain protocols it logs through.
"""

from railtrace.core.constructors import UNSET, make_err, make_ok
from railtrace.core.enums import ErrorCode, SentinelPolicy
from railtrace.core.errors import (
    DecodeError,
    DomainError,
    ResultDecodeError,
    TraceLabelError,
    UnwrapError,
    ValidationError,
)
from railtrace.core.result import Failure, Result, Success, is_result
from railtrace.core.serialization import (
    decode_result,
    parse_result,
    parse_result_json,
)
from railtrace.core.trace import wrap_err, wrap_ok

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
    "make_err",
    "make_ok",
    "parse_result",
    "parse_result_json",
    "wrap_err",
    "wrap_ok",
]
