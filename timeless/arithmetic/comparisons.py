"""Comparison operations over pairs of Dates.

These complement the is_same/is_before/... methods on Date with free
functions that take both Dates as arguments.

Supported Operations:
    - compare: Return -1, 0, or 1
    - min_date, max_date: The earlier/later of two Dates
    - count_days: Inclusive number of days in a range
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from timeless.errors import InvalidArgument

if TYPE_CHECKING:
    from timeless.core.date import Date


def compare(left: Date, right: Date) -> int:
    """Compare two Dates.

    Returns:
        -1 if left is before right, 0 if the same day, 1 if after.

    Examples:
        >>> from timeless.core.date import Date
        >>> compare(Date.from_ymd("2024-01-15"), Date.from_ymd("2024-01-16"))
        -1
    """
    if left.unix_day < right.unix_day:
        return -1
    if left.unix_day > right.unix_day:
        return 1
    return 0


def min_date(date1: Date, date2: Date) -> Date:
    """Return the earlier of two Dates.

    Examples:
        >>> from timeless.core.date import Date
        >>> min_date(Date.from_ymd("2024-01-20"), Date.from_ymd("2024-01-15"))
        Date('2024-01-15')
    """
    return date1 if date1.unix_day < date2.unix_day else date2


def max_date(date1: Date, date2: Date) -> Date:
    """Return the later of two Dates."""
    return date1 if date1.unix_day > date2.unix_day else date2


def count_days(date1: Date, date2: Date) -> int:
    """Count the days from date1 to date2, both inclusive.

    The range is never reordered: callers must pass the earlier Date first.

    Args:
        date1: First day of the range.
        date2: Last day of the range, same as or after date1.

    Returns:
        The number of days in the range; 1 when date1 and date2 are the same.

    Raises:
        InvalidArgument: If date1 is after date2.

    Examples:
        >>> from timeless.core.date import Date
        >>> count_days(Date.from_ymd("2024-02-01"), Date.from_ymd("2024-02-29"))
        29
    """
    if date1.unix_day > date2.unix_day:
        raise InvalidArgument(
            f"date1 ({date1.to_ymd_string()}) must be <= date2 ({date2.to_ymd_string()})"
        )

    return date2.unix_day - date1.unix_day + 1


__all__ = [
    "compare",
    "min_date",
    "max_date",
    "count_days",
]
