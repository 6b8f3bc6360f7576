"""Tests for JSON embedding and epoch conversions."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from timeless import Date
from timeless.convert import (
    DateEncoder,
    datetime_to_millis,
    dumps,
    from_json,
    millis_to_datetime,
    to_json,
    utc_now,
)
from timeless.errors import InvalidInput


class TestDateToJson:
    """Tests for Date.to_json() and to_json()."""

    def test_method(self) -> None:
        """A Date's JSON form is its canonical string."""
        assert Date.from_numeric(2024, 1, 15).to_json() == "2024-01-15"

    def test_function(self) -> None:
        """to_json() delegates to the Date."""
        assert to_json(Date.from_numeric(2024, 1, 15)) == "2024-01-15"

    def test_function_rejects_non_date(self) -> None:
        """to_json() only accepts Dates."""
        with pytest.raises(TypeError, match="is not a Date"):
            to_json("2024-01-15")  # type: ignore[arg-type]


class TestDateEncoder:
    """Tests for DateEncoder and dumps()."""

    def test_embedded_as_string(self) -> None:
        """Dates nested in structures become plain strings."""
        payload = {"period": [Date.from_ymd("2024-01-01"), Date.from_ymd("2024-01-31")]}
        assert dumps(payload) == '{"period": ["2024-01-01", "2024-01-31"]}'

    def test_with_json_module(self) -> None:
        """DateEncoder works as the cls argument of json.dumps."""
        assert json.dumps(Date(0), cls=DateEncoder) == '"1970-01-01"'

    def test_dumps_passes_kwargs(self) -> None:
        """Extra keyword arguments reach json.dumps."""
        text = dumps({"b": Date(0), "a": 1}, sort_keys=True)
        assert text == '{"a": 1, "b": "1970-01-01"}'

    def test_unsupported_type(self) -> None:
        """Other unknown types still raise TypeError."""
        with pytest.raises(TypeError):
            dumps({"x": object()})


class TestFromJson:
    """Tests for from_json()."""

    def test_roundtrip_through_json_text(self) -> None:
        """A date survives dumps() and json.loads()."""
        d = Date.from_ymd("2024-02-29")
        restored = from_json(json.loads(dumps(d)))
        assert restored == d

    def test_invalid_string(self) -> None:
        """Invalid dates are rejected."""
        with pytest.raises(InvalidInput, match="Invalid date"):
            from_json("2024-02-30")

    @pytest.mark.parametrize("value", [None, 19797, {"value": "2024-03-15"}])
    def test_not_a_string(self, value: object) -> None:
        """Only strings are accepted."""
        with pytest.raises(InvalidInput, match="expected str"):
            from_json(value)


class TestEpoch:
    """Tests for the millisecond epoch helpers."""

    def test_datetime_to_millis(self) -> None:
        """Aware datetimes convert to Unix milliseconds."""
        dt = datetime(2024, 3, 15, tzinfo=timezone.utc)
        assert datetime_to_millis(dt) == 1_710_460_800_000

    def test_datetime_to_millis_with_offset(self) -> None:
        """The offset is applied."""
        dt = datetime(2024, 3, 15, 2, 0, tzinfo=timezone(timedelta(hours=2)))
        assert datetime_to_millis(dt) == 1_710_460_800_000

    def test_datetime_to_millis_truncates(self) -> None:
        """Sub-millisecond precision is truncated toward the past."""
        dt = datetime(1969, 12, 31, 23, 59, 59, 999_999, tzinfo=timezone.utc)
        assert datetime_to_millis(dt) == -1

    def test_datetime_to_millis_naive(self) -> None:
        """Naive datetimes are rejected."""
        with pytest.raises(InvalidInput):
            datetime_to_millis(datetime(2024, 3, 15))

    def test_millis_to_datetime(self) -> None:
        """Milliseconds convert to aware UTC datetimes."""
        assert millis_to_datetime(86_400_000) == datetime(1970, 1, 2, tzinfo=timezone.utc)
        assert millis_to_datetime(-1).microsecond == 999_000

    def test_millis_to_datetime_invalid(self) -> None:
        """Fractional or out-of-range timestamps are rejected."""
        with pytest.raises(InvalidInput, match="Non-integer timestamp"):
            millis_to_datetime(0.5)
        with pytest.raises(InvalidInput, match="outside the range"):
            millis_to_datetime(10**16)

    def test_utc_now_is_aware(self) -> None:
        """utc_now returns an aware UTC datetime."""
        assert utc_now().utcoffset() == timedelta(0)
