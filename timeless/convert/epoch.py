"""Epoch conversion utilities.

This module converts between physical instants (timezone-aware
``datetime`` objects) and Unix epoch timestamps in milliseconds, the
representation Date uses for its UTC-midnight instants.

Functions:
    utc_now: The current instant as an aware UTC datetime.
    datetime_to_millis: Convert an aware datetime to Unix milliseconds.
    millis_to_datetime: Create an aware UTC datetime from Unix milliseconds.

The Unix epoch is 1970-01-01 00:00:00 UTC.

Examples:
    >>> from datetime import datetime, timezone
    >>> datetime_to_millis(datetime(1970, 1, 2, tzinfo=timezone.utc))
    86400000
    >>> millis_to_datetime(0)
    datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from timeless._internal.constants import MS_PER_DAY, MS_PER_SECOND
from timeless._internal.validation import require_aware, require_whole_number
from timeless.errors import InvalidInput

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    """Return the current moment as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def datetime_to_millis(dt: datetime) -> int:
    """Convert an aware datetime to Unix timestamp in milliseconds.

    Sub-millisecond precision is truncated toward the past.

    Args:
        dt: A timezone-aware datetime.

    Returns:
        Milliseconds since 1970-01-01 00:00:00 UTC.

    Raises:
        InvalidInput: If dt is naive or not a datetime.
    """
    delta = require_aware(dt) - EPOCH
    return (
        delta.days * MS_PER_DAY
        + delta.seconds * MS_PER_SECOND
        + delta.microseconds // 1_000
    )


def millis_to_datetime(millis: int) -> datetime:
    """Create an aware UTC datetime from Unix milliseconds.

    Raises:
        InvalidInput: If millis is not a whole number, or falls outside
            the years datetime can represent (1-9999).
    """
    millis = require_whole_number(millis, "timestamp")
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError:
        raise InvalidInput(
            f"timestamp {millis} is outside the range of datetime"
        ) from None


__all__ = [
    "EPOCH",
    "utc_now",
    "datetime_to_millis",
    "millis_to_datetime",
]
