"""Tests for clock-time utilities."""

import datetime as dt

import pytest

from kilometraje.calculators.time_utils import (
    compute_elapsed_hours,
    convert_time_to_minutes,
    parse_clock_time,
)


class TestParseClockTime:
    """Tests for parsing HH:MM strings."""

    def test_parse_padded(self):
        assert parse_clock_time("09:30") == dt.time(9, 30)

    def test_parse_single_digit_hour(self):
        assert parse_clock_time("9:05") == dt.time(9, 5)

    def test_surrounding_whitespace(self):
        assert parse_clock_time(" 17:00 ") == dt.time(17, 0)

    @pytest.mark.parametrize("value", ["24:00", "12:60", "noon", "1200", "12:5", ""])
    def test_invalid(self, value):
        """Test that malformed or out-of-range times raise ValueError."""
        with pytest.raises(ValueError):
            parse_clock_time(value)

    def test_non_ascii_digits_rejected(self):
        """Test that only ASCII digits form a clock time."""
        with pytest.raises(ValueError):
            parse_clock_time("\u0660\u0669:\u0660\u0660")


class TestConvertTimeToMinutes:
    """Tests for minutes since midnight."""

    def test_from_string(self):
        assert convert_time_to_minutes("09:30") == 570

    def test_from_time(self):
        assert convert_time_to_minutes(dt.time(23, 59)) == 1439

    def test_midnight(self):
        assert convert_time_to_minutes("00:00") == 0


class TestComputeElapsedHours:
    """Tests for elapsed hours between two clock times."""

    def test_working_day(self):
        """Test a normal day with a half hour."""
        assert compute_elapsed_hours("09:00", "17:30") == 8.5

    def test_end_before_start_is_negative(self):
        """Test that ordering is not enforced."""
        assert compute_elapsed_hours("17:00", "09:00") == -8.0

    def test_fractional_minutes(self):
        assert compute_elapsed_hours("09:00", "09:20") == pytest.approx(1 / 3)

    @pytest.mark.parametrize("start,end", [(None, "17:00"), ("09:00", ""), ("", None)])
    def test_missing_value(self, start, end):
        """Test that a missing value yields zero hours."""
        assert compute_elapsed_hours(start, end) == 0.0

    def test_malformed_value_raises(self):
        with pytest.raises(ValueError):
            compute_elapsed_hours("09:00", "late")
