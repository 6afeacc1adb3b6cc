"""Top-level consumer helper: log a Result and pass it on.

What to do with a failed Result (abort, degrade, retry) stays with the
caller. ``log_result`` only records the outcome and returns the same object,
so it can sit at the end of a call chain without changing it:

    return log_result(sync_accounts(), "Account sync finished", batch=batch_id)
"""

from typing import Any, Final

from railtrace.core.constants import FAILURE_KEY
from railtrace.core.container import get_logger
from railtrace.core.result import Result
from railtrace.domain.protocols.logger_protocol import LoggerProtocol

# Fields log_result writes itself.
RESERVED_CONTEXT_KEYS: Final[frozenset[str]] = frozenset({"outcome", "failure", "trace"})


def log_result(
    result: Result[Any, Any],
    message: str,
    *,
    logger: LoggerProtocol | None = None,
    **context: Any,
) -> Result[Any, Any]:
    """Log result at info (valid) or warning (error) level.

    Args:
        result: Result to report.
        message: Log message.
        logger: Logger to use. Defaults to ``get_logger()``.
        **context: Extra structured context. Must not use the keys in
            ``RESERVED_CONTEXT_KEYS``.

    Returns:
        The same Result object.

    Raises:
        ValueError: If context uses a reserved key.
    """
    clashes = RESERVED_CONTEXT_KEYS.intersection(context)
    if clashes:
        raise ValueError(
            f"log_result context cannot use reserved keys: {', '.join(sorted(clashes))}"
        )

    log = logger if logger is not None else get_logger()

    if result.is_err():
        log.warning(
            message,
            outcome=result.kind,
            failure=result.to_dict()[FAILURE_KEY],
            trace=list(result.trace),
            **context,
        )
    else:
        log.info(message, outcome=result.kind, trace=list(result.trace), **context)
    return result
