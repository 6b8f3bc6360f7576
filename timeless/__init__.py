"""Timeless: calendar dates without a time of day.

A Date represents a civil day such as "2024-03-15", independent of any
physical instant or timezone. Dates can be compared, enumerated and
shifted by days or months without timezone ambiguity, and can still be
built from a physical instant by naming the timezone to read it in.

Core Types:
    Date: Calendar date, stored as a Unix day number

Functions:
    min_date, max_date: The earlier/later of two Dates
    count_days: Inclusive day count between two Dates

Exceptions:
    TimelessError: Base exception
    InvalidInput: Input does not describe a real calendar date
    InvalidArgument: Two Dates are in the wrong order
    TimezoneError: Unknown timezone identifier

Example:
    >>> from timeless import Date, count_days
    >>> start = Date.from_ymd("2024-02-01")
    >>> count_days(start, start.last_of_month())
    29
    >>> Date.today("Europe/Helsinki")  # doctest: +SKIP
    Date('2026-10-19')
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from timeless.core.date import Date

# Operations
from timeless.arithmetic.comparisons import compare, count_days, max_date, min_date

# Timezone resolution
from timeless.units.timezone import (
    ZoneInfoResolver,
    ZoneResolver,
    get_default_resolver,
    set_default_resolver,
)

# Exceptions
from timeless.errors import (
    InvalidArgument,
    InvalidInput,
    TimelessError,
    TimezoneError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    # Operations
    "compare",
    "count_days",
    "max_date",
    "min_date",
    # Timezone resolution
    "ZoneResolver",
    "ZoneInfoResolver",
    "get_default_resolver",
    "set_default_resolver",
    # Exceptions
    "TimelessError",
    "InvalidInput",
    "InvalidArgument",
    "TimezoneError",
]
