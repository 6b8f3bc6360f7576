"""JSON embedding of Dates.

A Date is represented in JSON as its canonical ``YYYY-MM-DD`` string,
never as an object:

    {"due": "2024-03-15"}

Functions:
    to_json: Convert a Date to its JSON representation.
    from_json: Create a Date from its JSON representation.
    dumps: json.dumps with Date support.

Examples:
    >>> from timeless import Date
    >>> to_json(Date.from_numeric(2024, 3, 15))
    '2024-03-15'
    >>> dumps([Date.from_numeric(2024, 3, 15)])
    '["2024-03-15"]'
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from timeless.errors import InvalidInput

if TYPE_CHECKING:
    from timeless.core.date import Date


def to_json(value: Date) -> str:
    """Convert a Date to its JSON representation.

    Raises:
        TypeError: If value is not a Date.
    """
    # Import here to avoid circular imports
    from timeless.core.date import Date

    if not isinstance(value, Date):
        raise TypeError(
            f"Object of type {type(value).__name__} is not a Date"
        )
    return value.to_json()


def from_json(value: Any) -> Date:
    """Create a Date from its JSON representation.

    Args:
        value: A canonical YYYY-MM-DD string, as produced by to_json.

    Raises:
        InvalidInput: If value is not a string or not a canonical date.
    """
    from timeless.core.date import Date

    if not isinstance(value, str):
        raise InvalidInput(f"expected str, got {type(value).__name__}")
    return Date.from_ymd(value)


class DateEncoder(json.JSONEncoder):
    """JSONEncoder that writes Dates as YYYY-MM-DD strings.

    Examples:
        >>> import json
        >>> from timeless import Date
        >>> json.dumps({"d": Date.from_ymd("2024-01-31")}, cls=DateEncoder)
        '{"d": "2024-01-31"}'
    """

    def default(self, o: Any) -> Any:
        from timeless.core.date import Date

        if isinstance(o, Date):
            return o.to_json()
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """Serialize obj to a JSON string, encoding Dates as strings."""
    kwargs.setdefault("cls", DateEncoder)
    return json.dumps(obj, **kwargs)


__all__ = [
    "DateEncoder",
    "dumps",
    "to_json",
    "from_json",
]
