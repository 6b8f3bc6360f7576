"""Date conversion utilities.

This module provides functions for converting Dates to and from
other representations:
    - JSON embedding as canonical YYYY-MM-DD strings
    - Unix epoch conversions for physical instants

Examples:
    >>> from timeless import Date
    >>> from timeless.convert import dumps, from_json

    >>> dumps({"due": Date.from_ymd("2024-03-15")})
    '{"due": "2024-03-15"}'
    >>> from_json("2024-03-15")
    Date('2024-03-15')
"""

from __future__ import annotations

from timeless.convert.epoch import (
    datetime_to_millis,
    millis_to_datetime,
    utc_now,
)
from timeless.convert.json import DateEncoder, dumps, from_json, to_json

__all__ = [
    # JSON
    "DateEncoder",
    "dumps",
    "to_json",
    "from_json",
    # Epoch
    "datetime_to_millis",
    "millis_to_datetime",
    "utc_now",
]
