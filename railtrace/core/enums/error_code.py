"""Machine-readable error codes carried by failure payloads.

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*)
- Decode errors (RESULT_DECODE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes.

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_LABEL = "invalid_label"

    # Decode errors
    RESULT_DECODE_FAILED = "result_decode_failed"
