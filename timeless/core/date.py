"""Date class representing a calendar date without a time of day.

This module provides the Date class for representing civil days such as
billing periods and due dates, independent of any timezone.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from timeless._internal.calendar import (
    format_ymd,
    unix_day_to_ymd,
    ymd_to_unix_day,
)
from timeless._internal.constants import MS_PER_DAY
from timeless._internal.validation import (
    require_aware,
    require_whole_number,
    validate_unix_day,
)
from timeless.convert import epoch
from timeless.errors import InvalidInput
from timeless.units.timezone import resolve_civil_date

if TYPE_CHECKING:
    from timeless.units.timezone import ZoneResolver

# YYYY-MM-DD, or the extended +YYYYYY-MM-DD / -YYYYYY-MM-DD form
_YMD_PATTERN = re.compile(r"([0-9]{4}|[+-][0-9]{6})-([0-9]{2})-([0-9]{2})")

_ONE_DAY = timedelta(days=1)


class Date:
    """A calendar date with no time of day and no timezone.

    A Date is the abstract notion of a day, such as "2024-03-15". Because
    it carries no timezone it does not correspond to a specific physical
    time range; it can however be constructed from a physical instant by
    naming the timezone in which the instant should be read.

    Internally a Date is a Unix day number: the count of days since
    1970-01-01, increasing by exactly one per calendar day. The canonical
    YYYY-MM-DD string is derived from it once, at construction.

    Dates are immutable. Every "modifying" operation returns a new Date.

    Prefer the named constructors (from_ymd, from_numeric, ...) over
    calling Date() with a day number directly.

    Examples:
        >>> d = Date.from_ymd("2024-01-31")
        >>> d.year, d.month, d.day_of_month
        (2024, 1, 31)

        >>> d.add_months(1)  # February has no 31st: spills into March
        Date('2024-03-02')

        >>> d.unix_day
        19753
    """

    __slots__ = ("_unix_day", "_ymd_str")

    def __new__(cls, unix_day: int) -> Date:
        """Create a Date from a Unix day number.

        The slots are filled here rather than in __init__, so an existing
        Date cannot be re-initialized in place.

        Args:
            unix_day: Days since 1970-01-01 (0 = 1970-01-01, -1 = 1969-12-31).

        Raises:
            InvalidInput: If unix_day is not a whole number or is out of range.
        """
        unix_day = require_whole_number(unix_day, "unix day")
        validate_unix_day(unix_day)

        self = super().__new__(cls)
        self._unix_day = unix_day
        self._ymd_str = format_ymd(*unix_day_to_ymd(unix_day))
        return self

    def __reduce__(self) -> tuple[type[Date], tuple[int]]:
        return (type(self), (self._unix_day,))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_unix_day(cls, unix_day: int) -> Date:
        """Create a Date from a Unix day number.

        Examples:
            >>> Date.from_unix_day(0)
            Date('1970-01-01')
        """
        return cls(unix_day)

    @classmethod
    def from_utc_midnight_timestamp(cls, timestamp: int) -> Date:
        """Create a Date from a Unix timestamp in milliseconds.

        The timestamp must be exactly 00:00:00 UTC on some day.

        Args:
            timestamp: Milliseconds since 1970-01-01 00:00:00 UTC.

        Returns:
            The Date whose UTC midnight is timestamp.

        Raises:
            InvalidInput: If timestamp is not a whole number of days.

        Examples:
            >>> Date.from_utc_midnight_timestamp(86_400_000)
            Date('1970-01-02')

            >>> Date.from_utc_midnight_timestamp(1)
            Traceback (most recent call last):
            ...
            timeless.errors.InvalidInput: Non-integer unix day: 1 / 86400000
        """
        timestamp = require_whole_number(timestamp, "timestamp")
        days, remainder = divmod(timestamp, MS_PER_DAY)
        if remainder:
            raise InvalidInput(f"Non-integer unix day: {timestamp} / {MS_PER_DAY}")
        return cls(days)

    @classmethod
    def from_utc_midnight_datetime(cls, dt: datetime) -> Date:
        """Create a Date from an aware datetime that is exactly UTC midnight.

        Raises:
            InvalidInput: If dt is naive or not 00:00:00 UTC.

        Examples:
            >>> from datetime import datetime, timezone
            >>> Date.from_utc_midnight_datetime(datetime(2024, 3, 15, tzinfo=timezone.utc))
            Date('2024-03-15')
        """
        # astimezone() overflows near datetime.min/max; subtraction does not.
        elapsed = require_aware(dt) - epoch.EPOCH
        if elapsed % _ONE_DAY:
            raise InvalidInput(f"Not a UTC midnight: {dt.isoformat()}")
        return cls(elapsed.days)

    @classmethod
    def from_ymd(cls, ymd: str) -> Date:
        """Parse a date from its canonical YYYY-MM-DD form.

        The string must be exactly the form to_ymd_string() would produce
        for the date it names. Out-of-range months and days, wrong digit
        counts and other non-canonical spellings are rejected.

        Args:
            ymd: A string in YYYY-MM-DD format.

        Returns:
            The parsed Date.

        Raises:
            InvalidInput: If ymd is not a canonical, real calendar date.

        Examples:
            >>> Date.from_ymd("2024-02-29")
            Date('2024-02-29')

            >>> Date.from_ymd("2023-02-29")
            Traceback (most recent call last):
            ...
            timeless.errors.InvalidInput: Invalid date: '2023-02-29'
        """
        if not isinstance(ymd, str):
            raise InvalidInput(f"expected str, got {type(ymd).__name__}")

        match = _YMD_PATTERN.fullmatch(ymd)
        if not match:
            raise InvalidInput(f"Invalid date: {ymd!r}")

        year, month, day = (int(group) for group in match.groups())
        date = cls(ymd_to_unix_day(year, month, day))

        # Normalization changed something: Feb 30, month 13, +002024, ...
        if date._ymd_str != ymd:
            raise InvalidInput(f"Invalid date: {ymd!r}")

        return date

    @classmethod
    def from_numeric(cls, year: int, month: int, day_of_month: int) -> Date:
        """Create a Date from numeric components.

        Args:
            year: The year.
            month: The month, 1-based: 1 = January, ..., 12 = December.
            day_of_month: The day of the month.

        Returns:
            The Date for year-month-day_of_month.

        Raises:
            InvalidInput: If the components do not name a real date.

        Examples:
            >>> Date.from_numeric(2024, 3, 15)
            Date('2024-03-15')

            >>> Date.from_numeric(2024, 4, 31)
            Traceback (most recent call last):
            ...
            timeless.errors.InvalidInput: Invalid date: 2024-4-31
        """
        year = require_whole_number(year, "year")
        month = require_whole_number(month, "month")
        day_of_month = require_whole_number(day_of_month, "day of month")

        date = cls(ymd_to_unix_day(year, month, day_of_month))

        if (date.year, date.month, date.day_of_month) != (year, month, day_of_month):
            raise InvalidInput(f"Invalid date: {year}-{month}-{day_of_month}")

        return date

    @classmethod
    def from_datetime(
        cls,
        instant: datetime,
        zone: str,
        resolver: ZoneResolver | None = None,
    ) -> Date:
        """Create a Date from the day a physical instant falls on in a timezone.

        Args:
            instant: A timezone-aware datetime. The same instant may fall
                on different dates in different timezones.
            zone: A timezone identifier, e.g. "UTC", "CET", "Europe/Helsinki".
            resolver: The timezone resolver; defaults to
                timeless.units.timezone.get_default_resolver().

        Raises:
            InvalidInput: If instant is naive.
            TimezoneError: If zone is not recognized.

        Examples:
            >>> from datetime import datetime, timezone
            >>> instant = datetime(2024, 3, 14, 23, 30, tzinfo=timezone.utc)
            >>> Date.from_datetime(instant, "UTC")
            Date('2024-03-14')
            >>> Date.from_datetime(instant, "Europe/Helsinki")
            Date('2024-03-15')
        """
        year, month, day = resolve_civil_date(instant, zone, resolver)
        return cls.from_ymd(format_ymd(year, month, day))

    @classmethod
    def today(cls, zone: str, resolver: ZoneResolver | None = None) -> Date:
        """Return the current date in a timezone.

        Args:
            zone: See from_datetime().
            resolver: See from_datetime().

        Examples:
            >>> Date.today("Europe/Helsinki").year >= 2024
            True
        """
        return cls.from_datetime(epoch.utc_now(), zone, resolver)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def unix_day(self) -> int:
        """Days since 1970-01-01: 0 = 1970-01-01, 1 = 1970-01-02, etc."""
        return self._unix_day

    @property
    def ymd_str(self) -> str:
        """The canonical YYYY-MM-DD string."""
        return self._ymd_str

    @property
    def year(self) -> int:
        """Return the year component."""
        year, _, _ = unix_day_to_ymd(self._unix_day)
        return year

    @property
    def month(self) -> int:
        """Return the month, 1-based: 1 = January, ..., 12 = December."""
        _, month, _ = unix_day_to_ymd(self._unix_day)
        return month

    @property
    def day_of_month(self) -> int:
        """Return the day of the month (1-31)."""
        _, _, day = unix_day_to_ymd(self._unix_day)
        return day

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_utc_midnight_timestamp(self) -> int:
        """Return milliseconds (not seconds) from the Unix epoch to 00:00 UTC on this day.

        Examples:
            >>> Date.from_ymd("1970-01-02").to_utc_midnight_timestamp()
            86400000
        """
        return self._unix_day * MS_PER_DAY

    def to_utc_midnight_datetime(self) -> datetime:
        """Return an aware datetime for 00:00:00 UTC on this day.

        Raises:
            InvalidInput: If the year is outside what datetime supports (1-9999).
        """
        return epoch.millis_to_datetime(self.to_utc_midnight_timestamp())

    def to_ymd_string(self) -> str:
        """Return the canonical YYYY-MM-DD string."""
        return self._ymd_str

    def to_json(self) -> str:
        """Return the JSON representation: the YYYY-MM-DD string.

        Examples:
            >>> Date.from_numeric(2024, 1, 15).to_json()
            '2024-01-15'
        """
        return self._ymd_str

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add_days(self, days: int) -> Date:
        """Return a new Date offset by the given number of days.

        Args:
            days: Number of days to add (can be negative).

        Raises:
            InvalidInput: If days is not a whole number.

        Examples:
            >>> Date.from_ymd("2024-02-28").add_days(2)
            Date('2024-03-01')
        """
        days = require_whole_number(days, "number of days")
        return Date(self._unix_day + days)

    def add_months(self, months: int) -> Date:
        """Return a new Date offset by the given number of months.

        If the day of month does not exist in the target month, the excess
        days spill over into the following month rather than being
        clamped. Use with_day_of_month() for a strict alternative.

        Args:
            months: Number of months to add (can be negative).

        Raises:
            InvalidInput: If months is not a whole number.

        Examples:
            >>> Date.from_ymd("2024-01-15").add_months(2)
            Date('2024-03-15')

            >>> Date.from_ymd("2023-01-31").add_months(1)
            Date('2023-03-03')
        """
        months = require_whole_number(months, "number of months")
        year, month, day = unix_day_to_ymd(self._unix_day)
        return Date(ymd_to_unix_day(year, month + months, day))

    def with_day_of_month(self, day_of_month: int) -> Date:
        """Return a Date in the same month with the given day of month.

        Raises:
            InvalidInput: If the month has no such day (e.g. 0, 32, or
                31 in April).

        Examples:
            >>> Date.from_ymd("2024-02-10").with_day_of_month(29)
            Date('2024-02-29')
        """
        day_of_month = require_whole_number(day_of_month, "day of month")
        current = self.day_of_month

        if day_of_month == current:
            return self

        new_date = self.add_days(day_of_month - current)

        # Out-of-range days land in a neighbouring month
        if new_date.day_of_month != day_of_month:
            raise InvalidInput(
                f"Invalid day of month for {self._ymd_str[:-3]}: {day_of_month}"
            )

        return new_date

    def first_of_month(self) -> Date:
        """Return the first day of this date's month."""
        return self.with_day_of_month(1)

    def first_of_next_month(self) -> Date:
        """Return the first day of the following month.

        Examples:
            >>> Date.from_ymd("2024-12-31").first_of_next_month()
            Date('2025-01-01')
        """
        # 31 days after the 1st lands on the 1st-4th of the next month
        return self.first_of_month().add_days(31).first_of_month()

    def last_of_month(self) -> Date:
        """Return the last day of this date's month.

        Examples:
            >>> Date.from_ymd("2024-02-01").last_of_month()
            Date('2024-02-29')
        """
        return self.first_of_next_month().add_days(-1)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def is_same(self, other: Date) -> bool:
        return self._unix_day == other._unix_day

    def is_before(self, other: Date) -> bool:
        return self._unix_day < other._unix_day

    def is_after(self, other: Date) -> bool:
        return self._unix_day > other._unix_day

    def is_same_or_before(self, other: Date) -> bool:
        return self._unix_day <= other._unix_day

    def is_same_or_after(self, other: Date) -> bool:
        return self._unix_day >= other._unix_day

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._unix_day == other._unix_day

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._unix_day < other._unix_day

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._unix_day <= other._unix_day

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._unix_day > other._unix_day

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._unix_day >= other._unix_day

    def __hash__(self) -> int:
        return hash(self._unix_day)

    def __repr__(self) -> str:
        return f"Date({self._ymd_str!r})"

    def __str__(self) -> str:
        return self._ymd_str


__all__ = ["Date"]
