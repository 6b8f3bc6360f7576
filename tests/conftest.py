"""Pytest configuration and fixtures for Timeless tests."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add the parent directory to sys.path so timeless can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from timeless.units import timezone as tz_module  # noqa: E402


class FixedResolver:
    """ZoneResolver stub that answers every lookup with the same triple."""

    def __init__(self, ymd: tuple[int, int, int]) -> None:
        self.ymd = ymd
        self.calls: list[tuple[datetime, str]] = []

    def civil_date(self, instant: datetime, zone: str) -> tuple[int, int, int]:
        self.calls.append((instant, zone))
        return self.ymd


@pytest.fixture
def fixed_resolver() -> FixedResolver:
    """A resolver that always answers 2024-03-15."""
    return FixedResolver((2024, 3, 15))


@pytest.fixture
def restore_default_resolver():
    """Restore the process-wide default resolver after the test."""
    previous = tz_module.get_default_resolver()
    yield previous
    tz_module.set_default_resolver(previous)
