"""Timeless exception hierarchy.

All Timeless-specific exceptions inherit from TimelessError.
"""

from __future__ import annotations


class TimelessError(Exception):
    """Base exception for all Timeless errors."""

    pass


class InvalidInput(TimelessError):
    """A value does not describe a real, normalized calendar date.

    Raised by constructors and strict operations when the input cannot be
    turned into a Date without silently changing it.

    Examples:
        - Non-integer day or month delta (1.5)
        - Out-of-range numeric components (month 13, day 0, Feb 30)
        - Malformed or non-canonical strings ("2024-1-5", "2024/01/05")
        - Day-of-month requests that don't fit the month (April 31)
        - Naive datetimes where a physical instant is required
    """

    pass


class InvalidArgument(TimelessError):
    """The relative ordering of two Dates violates a precondition.

    Examples:
        - count_days(later, earlier)
    """

    pass


class TimezoneError(InvalidInput):
    """Invalid or unknown timezone identifier.

    Examples:
        - "Mars/Olympus_Mons"
        - "" or "../etc/passwd"
    """

    pass


__all__ = [
    "TimelessError",
    "InvalidInput",
    "InvalidArgument",
    "TimezoneError",
]
