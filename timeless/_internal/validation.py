"""Validation utilities for Timeless.

This module is not part of the public API.
"""

from __future__ import annotations

import math
import numbers
from datetime import datetime

from timeless._internal.constants import MAX_UNIX_DAY, MIN_UNIX_DAY
from timeless.errors import InvalidInput


def require_whole_number(value: object, what: str) -> int:
    """Return value as an int, or raise if it is not a whole number.

    Integral types are accepted as-is. Other real numbers (``2.0``,
    ``Fraction(4, 2)``) are accepted when finite and without a fractional
    part. ``bool`` is rejected even though it subclasses ``int``.

    Args:
        value: The value to check.
        what: What the value is, for the error message ("number of days").

    Raises:
        InvalidInput: If value is not a whole number.

    Examples:
        >>> require_whole_number(3.0, "number of days")
        3
        >>> require_whole_number(1.5, "number of days")
        Traceback (most recent call last):
        ...
        timeless.errors.InvalidInput: Non-integer number of days: 1.5
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInput(f"Non-integer {what}: {value!r}")

    if isinstance(value, numbers.Integral):
        return int(value)

    if not math.isfinite(value) or value != math.floor(value):
        raise InvalidInput(f"Non-integer {what}: {value!r}")

    return int(value)


def validate_unix_day(unix_day: int) -> None:
    """Validate that a Unix day number is within the supported range.

    Raises:
        InvalidInput: If unix_day is outside MIN_UNIX_DAY to MAX_UNIX_DAY.
    """
    if unix_day < MIN_UNIX_DAY or unix_day > MAX_UNIX_DAY:
        raise InvalidInput(
            f"unix day must be between {MIN_UNIX_DAY} and {MAX_UNIX_DAY}, "
            f"got {unix_day}"
        )


def require_aware(value: object) -> datetime:
    """Return value if it is a timezone-aware datetime (a physical instant).

    Raises:
        InvalidInput: If value is not a datetime, or is naive.
    """
    if not isinstance(value, datetime):
        raise InvalidInput(f"expected datetime, got {type(value).__name__}")
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidInput(f"naive datetime is not a physical instant: {value!r}")
    return value


__all__ = [
    "require_whole_number",
    "validate_unix_day",
    "require_aware",
]
