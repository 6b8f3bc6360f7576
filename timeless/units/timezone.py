"""Timezone resolution for Date construction.

Timeless does not implement a timezone database. Mapping a physical
instant to the civil date it falls on in a named timezone is a capability
supplied from outside through the ZoneResolver protocol. The default
resolver is backed by the standard library ``zoneinfo`` module, with the
``tzdata`` distribution as the IANA database when the system has none.

Timezone identifiers are opaque strings such as ``"UTC"``, ``"CET"`` or
``"Europe/Helsinki"``; this module passes them through to the resolver
without parsing them.

Examples:
    >>> from datetime import datetime, timezone
    >>> instant = datetime(2024, 3, 14, 23, 30, tzinfo=timezone.utc)
    >>> resolve_civil_date(instant, "UTC")
    (2024, 3, 14)
    >>> resolve_civil_date(instant, "Europe/Helsinki")
    (2024, 3, 15)
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from typing import Protocol, runtime_checkable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timeless._internal.validation import require_aware
from timeless.errors import InvalidInput, TimezoneError

logger = logging.getLogger(__name__)


@runtime_checkable
class ZoneResolver(Protocol):
    """Resolves the civil date of a physical instant in a named timezone."""

    def civil_date(self, instant: datetime, zone: str) -> tuple[int, int, int]:
        """Return the (year, month, day) that instant falls on in zone.

        Raises:
            TimezoneError: If zone is not a recognized identifier.
        """
        ...


class ZoneInfoResolver:
    """ZoneResolver backed by the IANA database through ``zoneinfo``.

    ``"UTC"`` is answered without a database lookup, so it works on
    systems with no timezone data installed.
    """

    def tzinfo(self, zone: str) -> tzinfo:
        """Return the tzinfo for a timezone identifier.

        Raises:
            TimezoneError: If zone is unknown or not a valid key.
        """
        if not isinstance(zone, str):
            raise TimezoneError(
                f"timezone must be a string, got {type(zone).__name__}"
            )
        if zone == "UTC":
            return timezone.utc
        try:
            return ZoneInfo(zone)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise TimezoneError(f"Unknown timezone: {zone!r}") from e

    def civil_date(self, instant: datetime, zone: str) -> tuple[int, int, int]:
        tz = self.tzinfo(zone)
        try:
            local = require_aware(instant).astimezone(tz)
        except OverflowError as e:
            raise InvalidInput(
                f"{instant.isoformat()} in {zone} is outside the range of datetime"
            ) from e
        return (local.year, local.month, local.day)

    def __repr__(self) -> str:
        return "ZoneInfoResolver()"


_default_resolver: ZoneResolver = ZoneInfoResolver()


def get_default_resolver() -> ZoneResolver:
    """Return the resolver used when none is passed explicitly."""
    return _default_resolver


def set_default_resolver(resolver: ZoneResolver) -> ZoneResolver:
    """Replace the process-wide default resolver.

    Args:
        resolver: The new default.

    Returns:
        The previous default, so callers can restore it.

    Raises:
        TypeError: If resolver has no civil_date method.
    """
    global _default_resolver

    if not isinstance(resolver, ZoneResolver):
        raise TypeError(
            f"resolver must implement civil_date(), got {type(resolver).__name__}"
        )
    previous = _default_resolver
    _default_resolver = resolver
    logger.debug("Default timezone resolver set to %r", resolver)
    return previous


def resolve_civil_date(
    instant: datetime,
    zone: str,
    resolver: ZoneResolver | None = None,
) -> tuple[int, int, int]:
    """Return the (year, month, day) that instant falls on in zone.

    Args:
        instant: A timezone-aware datetime.
        zone: A timezone identifier.
        resolver: Resolver to use instead of the default.

    Raises:
        InvalidInput: If instant is naive.
        TimezoneError: If zone cannot be resolved.
    """
    if resolver is None:
        resolver = _default_resolver
    ymd = resolver.civil_date(require_aware(instant), zone)
    logger.debug("Resolved %s in %s to %s", instant.isoformat(), zone, ymd)
    return ymd


__all__ = [
    "ZoneResolver",
    "ZoneInfoResolver",
    "get_default_resolver",
    "set_default_resolver",
    "resolve_civil_date",
]
