"""Validation functions returning Result types.

Usage:
    from railtrace.core.validation import validate_label
    from railtrace.core.result import Success, Failure

    match validate_label("load_user"):
        case Success(value=label):
            ...
        case Failure(error=error):
            print(error.message)
"""

from typing import Any

from railtrace.core.enums import ErrorCode
from railtrace.core.errors import ValidationError
from railtrace.core.result import Failure, Result, Success


def validate_label(label: Any) -> Result[str, ValidationError]:
    """Validate a trace label.

    Labels must be non-empty strings without leading or trailing whitespace.

    Args:
        label: Candidate label.

    Returns:
        Success with the label if valid, Failure with ValidationError otherwise.
    """
    if not isinstance(label, str):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_LABEL,
                message=f"label must be a string, got {type(label).__name__}",
                field="label",
            )
        )
    if not label.strip():
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_LABEL,
                message="label cannot be empty",
                field="label",
            )
        )
    if label != label.strip():
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_LABEL,
                message="label must not have leading or trailing whitespace",
                field="label",
            )
        )
    return Success(value=label)
