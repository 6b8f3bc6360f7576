"""Tests for Date comparison, ordering and the pairwise functions."""

from __future__ import annotations

import pytest

from timeless import Date, compare, count_days, max_date, min_date
from timeless.errors import InvalidArgument


@pytest.fixture
def early() -> Date:
    return Date.from_ymd("2024-01-15")


@pytest.fixture
def late() -> Date:
    return Date.from_ymd("2024-03-01")


class TestComparisonMethods:
    """Tests for is_same, is_before, is_after and friends."""

    def test_is_same(self, early: Date) -> None:
        """Dates with the same day number are the same."""
        assert early.is_same(Date.from_numeric(2024, 1, 15))
        assert not early.is_same(early.add_days(1))

    def test_is_before_and_after(self, early: Date, late: Date) -> None:
        """is_before and is_after are mirror images."""
        assert early.is_before(late)
        assert not late.is_before(early)
        assert late.is_after(early)
        assert not early.is_after(late)

    def test_same_or(self, early: Date, late: Date) -> None:
        """The inclusive variants accept equal dates."""
        assert early.is_same_or_before(late)
        assert early.is_same_or_before(early)
        assert late.is_same_or_after(early)
        assert late.is_same_or_after(late)
        assert not late.is_same_or_before(early)
        assert not early.is_same_or_after(late)

    def test_exactly_one_relation(self) -> None:
        """Exactly one of before/same/after holds for any pair."""
        dates = [Date(n) for n in (-400, -1, 0, 1, 59, 19797)]
        for a in dates:
            for b in dates:
                relations = [a.is_before(b), a.is_same(b), a.is_after(b)]
                assert relations.count(True) == 1


class TestOperators:
    """Tests for the rich comparison operators and hashing."""

    def test_equality(self, early: Date) -> None:
        """== compares day numbers, not identity."""
        assert early == Date.from_numeric(2024, 1, 15)
        assert early != early.add_days(1)

    def test_not_equal_to_other_types(self, early: Date) -> None:
        """Dates never equal strings or ints."""
        assert early != "2024-01-15"
        assert early != early.unix_day

    def test_ordering(self, early: Date, late: Date) -> None:
        """<, <=, >, >= follow day numbers."""
        assert early < late
        assert early <= late
        assert late > early
        assert late >= early
        assert early <= early

    def test_ordering_with_other_types(self, early: Date) -> None:
        """Ordering against a non-Date raises TypeError."""
        with pytest.raises(TypeError):
            early < "2024-01-16"  # noqa: B015

    def test_sorting(self, early: Date, late: Date) -> None:
        """Dates sort chronologically."""
        middle = Date.from_ymd("2024-02-10")
        assert sorted([late, early, middle]) == [early, middle, late]

    def test_hash(self, early: Date) -> None:
        """Equal dates hash equally and deduplicate in sets."""
        same = Date.from_ymd("2024-01-15")
        assert hash(early) == hash(same)
        assert len({early, same, early.add_days(1)}) == 2
        assert {early: "x"}[same] == "x"


class TestCompare:
    """Tests for compare()."""

    def test_values(self, early: Date, late: Date) -> None:
        """compare returns -1, 0 or 1."""
        assert compare(early, late) == -1
        assert compare(late, early) == 1
        assert compare(early, Date.from_ymd("2024-01-15")) == 0


class TestMinMax:
    """Tests for min_date() and max_date()."""

    def test_min(self, early: Date, late: Date) -> None:
        """min_date returns the earlier date in either argument order."""
        assert min_date(early, late) is early
        assert min_date(late, early) is early

    def test_max(self, early: Date, late: Date) -> None:
        """max_date returns the later date in either argument order."""
        assert max_date(early, late) is late
        assert max_date(late, early) is late

    def test_equal_dates(self, early: Date) -> None:
        """With equal dates either operand is a valid answer."""
        same = Date.from_ymd("2024-01-15")
        assert min_date(early, same) == early
        assert max_date(early, same) == early

    def test_min_max_cover_both(self) -> None:
        """min and max together are the original pair."""
        dates = [Date(n) for n in (-1, 0, 31, 19797)]
        for a in dates:
            for b in dates:
                lo, hi = min_date(a, b), max_date(a, b)
                assert {lo, hi} == {a, b}
                assert lo.is_same_or_before(hi)


class TestCountDays:
    """Tests for count_days()."""

    def test_same_day(self, early: Date) -> None:
        """A single day counts as one."""
        assert count_days(early, early) == 1

    def test_inclusive(self) -> None:
        """Both ends are counted."""
        start = Date.from_ymd("2024-02-01")
        assert count_days(start, start.last_of_month()) == 29
        assert count_days(Date.from_ymd("2023-01-01"), Date.from_ymd("2023-12-31")) == 365

    def test_across_epoch(self) -> None:
        """Counting works across the epoch."""
        assert count_days(Date(-1), Date(0)) == 2

    def test_reversed_range(self, early: Date, late: Date) -> None:
        """The range is never swapped silently."""
        with pytest.raises(InvalidArgument, match=r"date1 \(2024-03-01\) must be <= date2 \(2024-01-15\)"):
            count_days(late, early)
