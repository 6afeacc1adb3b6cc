"""Constants shared by the Result container and its constructors."""

from typing import Final

# Substituted for a missing payload so the populated slot stays truthy.
SENTINEL: Final = True

# Placeholder held by the unpopulated slot.
FALSY_SLOT: Final = False

# Serialized form keys.
KIND_KEY: Final = "kind"
SUCCESS_KEY: Final = "success"
FAILURE_KEY: Final = "failure"
TRACE_KEY: Final = "trace"

KIND_SUCCESS: Final = "success"
KIND_FAILURE: Final = "failure"
