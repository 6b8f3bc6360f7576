"""Core temporal types.

This module provides:
    - Date: Calendar date with no time of day and no timezone
"""

from __future__ import annotations

from timeless.core.date import Date

__all__: list[str] = [
    "Date",
]
