"""Internal constants for Timeless.

This module is not part of the public API.
"""

from __future__ import annotations

SECONDS_PER_DAY: int = 86_400
MS_PER_SECOND: int = 1_000
MS_PER_DAY: int = SECONDS_PER_DAY * MS_PER_SECOND  # 86_400_000

# Ordinal (0001-01-01 == 1) of the Unix epoch, 1970-01-01
UNIX_EPOCH_ORDINAL: int = 719_163

# +/- 8.64e15 ms around the epoch, the range of an ECMAScript time value
MAX_UNIX_DAY: int = 100_000_000
MIN_UNIX_DAY: int = -MAX_UNIX_DAY

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)


__all__ = [
    "SECONDS_PER_DAY",
    "MS_PER_SECOND",
    "MS_PER_DAY",
    "UNIX_EPOCH_ORDINAL",
    "MAX_UNIX_DAY",
    "MIN_UNIX_DAY",
    "DAYS_IN_MONTH",
]
