"""Tests for clock and duration parsing."""

from datetime import timedelta

import pytest

from biathlon.errors import DeltaParseError, EventParseError
from biathlon.timing import format_clock, parse_clock, parse_delta


class TestParseDelta:
    """Start interval strings."""

    @pytest.mark.parametrize("value, expected", [
        ("00:00:30", timedelta(seconds=30)),
        ("01:30:00", timedelta(hours=1, minutes=30)),
        ("01:23:45.670", timedelta(hours=1, minutes=23, seconds=45, milliseconds=670)),
        ("00:01:30.5", timedelta(minutes=1, seconds=30, milliseconds=500)),
    ])
    def test_valid(self, value, expected):
        assert parse_delta(value) == expected

    @pytest.mark.parametrize("value", ["30s", "1:2", "aa:00:00", "00:00:xx", "00:00:30.ab", "", "00:00:00:00"])
    def test_malformed(self, value):
        with pytest.raises(DeltaParseError):
            parse_delta(value)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_delta("bad")


class TestParseClock:
    """Times of day."""

    def test_valid(self):
        assert parse_clock("09:30:01.005") == timedelta(hours=9, minutes=30, seconds=1, milliseconds=5)

    def test_midnight(self):
        assert parse_clock("00:00:00.000") == timedelta(0)

    @pytest.mark.parametrize("value", [
        "09:30:bad",
        "9:30:00.000",
        "09:30:00",
        "09:30:00.00",
        "24:00:00.000",
        "09:60:00.000",
        "09:30:60.000",
        "09-30-00.000",
    ])
    def test_malformed(self, value):
        with pytest.raises(EventParseError):
            parse_clock(value)


class TestFormatClock:
    """Duration rendering."""

    def test_minutes(self):
        assert format_clock(timedelta(minutes=10)) == "00:10:00.000"

    def test_milliseconds(self):
        assert format_clock(timedelta(seconds=112, milliseconds=476)) == "00:01:52.476"

    def test_hours_not_wrapped(self):
        assert format_clock(timedelta(hours=25)) == "25:00:00.000"

    def test_negative(self):
        assert format_clock(timedelta(seconds=-1.5)) == "-00:00:01.500"

    def test_clock_round_trip(self):
        assert format_clock(parse_clock("12:34:56.789")) == "12:34:56.789"
