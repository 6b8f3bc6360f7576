"""Operations over pairs of Dates.

Comparison Operations (from timeless.arithmetic.comparisons):
    - compare: Return -1, 0, or 1 for comparison
    - min_date, max_date: Find extremes
    - count_days: Inclusive day count of a range
"""

from __future__ import annotations

from timeless.arithmetic.comparisons import (
    compare,
    count_days,
    max_date,
    min_date,
)

__all__: list[str] = [
    "compare",
    "count_days",
    "max_date",
    "min_date",
]
