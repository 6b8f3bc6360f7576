"""Timezone resolution units."""

from __future__ import annotations

from timeless.units.timezone import (
    ZoneInfoResolver,
    ZoneResolver,
    get_default_resolver,
    resolve_civil_date,
    set_default_resolver,
)

__all__: list[str] = [
    "ZoneInfoResolver",
    "ZoneResolver",
    "get_default_resolver",
    "resolve_civil_date",
    "set_default_resolver",
]
