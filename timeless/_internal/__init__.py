"""Internal utilities for Timeless.

This module contains private implementation details:
    - Constants and magic numbers
    - Proleptic Gregorian calendar arithmetic
    - Input validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from timeless._internal.validation import (
    require_aware,
    require_whole_number,
    validate_unix_day,
)

__all__: list[str] = [
    "require_aware",
    "require_whole_number",
    "validate_unix_day",
]
