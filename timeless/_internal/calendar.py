"""Calendar utilities for Timeless.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths, and conversion between civil
year/month/day triples and Unix day numbers.

Unix day 0 = 1970-01-01 (the Unix epoch)

This module is not part of the public API.
"""

from __future__ import annotations

from timeless._internal.constants import DAYS_IN_MONTH, UNIX_EPOCH_ORDINAL


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (ordinal 1 = 0001-01-01).

    The conversion is tolerant: a month outside 1-12 rolls over into the
    neighbouring years, and a day outside the month's length spills into
    the neighbouring months. ``ymd_to_ordinal(2023, 2, 31)`` is the ordinal
    of 2023-03-03 and ``ymd_to_ordinal(2024, 13, 1)`` that of 2025-01-01.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month, normally 1-12.
        day: The day of the month, normally 1-31.

    Returns:
        The ordinal day number.
    """
    extra_years, month_index = divmod(month - 1, 12)
    year += extra_years
    month = month_index + 1

    # Python's // floors toward negative infinity, so this holds for
    # years before 1 as well
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400

    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (ordinal 1 = 0001-01-01) to year, month, day.

    Works for ordinals <= 0 as well, since divmod floors.
    """
    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)

    # 100-year cycles within the 400: each has 36524 days (except last which has 36525)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle: each has 365 days (except leap year)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year at the end of a 4- or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    doy = n + 1
    month, day = _doy_to_md(year, doy)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def ymd_to_unix_day(year: int, month: int, day: int) -> int:
    """Convert year, month, day to a Unix day number (tolerant, see ymd_to_ordinal).

    Examples:
        >>> ymd_to_unix_day(1970, 1, 1)
        0
        >>> ymd_to_unix_day(2024, 1, 32)  # spills into February
        19754
    """
    return ymd_to_ordinal(year, month, day) - UNIX_EPOCH_ORDINAL


def unix_day_to_ymd(unix_day: int) -> tuple[int, int, int]:
    """Convert a Unix day number to year, month, day.

    Examples:
        >>> unix_day_to_ymd(0)
        (1970, 1, 1)
        >>> unix_day_to_ymd(-1)
        (1969, 12, 31)
    """
    return ordinal_to_ymd(unix_day + UNIX_EPOCH_ORDINAL)


def format_ymd(year: int, month: int, day: int) -> str:
    """Format a civil date in canonical form.

    Years 0-9999 use four digits. Years outside that range use the
    extended ISO 8601 form: a sign followed by six digits.

    Examples:
        >>> format_ymd(2024, 3, 5)
        '2024-03-05'
        >>> format_ymd(12345, 1, 1)
        '+012345-01-01'
        >>> format_ymd(-1, 12, 31)
        '-000001-12-31'
    """
    if 0 <= year <= 9999:
        return f"{year:04d}-{month:02d}-{day:02d}"
    sign = "+" if year > 0 else "-"
    return f"{sign}{abs(year):06d}-{month:02d}-{day:02d}"


__all__ = [
    "is_leap_year",
    "days_in_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ymd_to_unix_day",
    "unix_day_to_ymd",
    "format_ymd",
]
