"""Sentinel substitution policies for the Ok/Err constructors.

A constructor called without a meaningful payload substitutes the sentinel
(``True``) so that ``is_ok()``/``is_err()`` still report the outcome. The
policy decides what counts as "no meaningful payload":

- FALSY: omitted or any falsy value (``None``, ``0``, ``""``, ``[]``).
  ``make_ok(0)`` silently becomes ``Success(value=True)``.
- MISSING: omitted or ``None`` only. ``make_ok(0)`` keeps ``0``.
- NEVER: no substitution at all. ``make_ok()`` holds ``None``.
"""

from enum import Enum


class SentinelPolicy(str, Enum):
    """When constructors replace the payload with the sentinel."""

    FALSY = "falsy"
    MISSING = "missing"
    NEVER = "never"
