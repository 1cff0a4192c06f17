"""Tests for the field-level validators."""

import datetime as dt

import pytest

from kilometraje.validators.field_validators import (
    CHECK_LETTERS,
    compute_check_letter,
    normalize_national_id,
    validate_clock_time,
    validate_date_not_future,
    validate_national_id,
    validate_time_range,
)
from kilometraje.validators.validation_result import ValidationFailure

TODAY = dt.date(2024, 6, 15)


class TestNationalIdValidation:
    """Tests for DNI/NIE validation."""

    def test_valid_dni(self):
        """Test a DNI whose letter matches number mod 23."""
        assert validate_national_id("12345678Z").is_valid

    def test_incorrect_dni_letter(self):
        """Test a DNI with the wrong check letter."""
        result = validate_national_id("12345678A")

        assert not result.is_valid
        assert result.failure == ValidationFailure.INCORRECT_CHECK_LETTER

    def test_dni_is_normalized(self):
        """Test that lowercase and surrounding spaces are accepted."""
        assert validate_national_id("  12345678z ").is_valid

    def test_trailing_newline_is_trimmed(self):
        assert validate_national_id("12345678Z\n").is_valid

    def test_dni_with_leading_zeros(self):
        """Test that 00000000 maps to the first letter."""
        assert validate_national_id("00000000T").is_valid

    @pytest.mark.parametrize(
        "nie",
        ["X1234567L", "Y1234567X", "Z1234567R"],
    )
    def test_valid_nie_prefixes(self, nie):
        """Test that X, Y and Z map to 0, 1 and 2."""
        assert validate_national_id(nie).is_valid

    def test_incorrect_nie_letter(self):
        """Test a NIE with the wrong check letter."""
        result = validate_national_id("X1234567A")

        assert result.failure == ValidationFailure.INCORRECT_CHECK_LETTER

    def test_nie_letter_uses_prefixed_number(self):
        """Test that the prefix digit is part of the checksum."""
        # 1234567 % 23 == 19 -> L, 11234567 % 23 == 10 -> X
        assert validate_national_id("X1234567L").is_valid
        assert not validate_national_id("Y1234567L").is_valid

    @pytest.mark.parametrize(
        "value",
        [
            "1234567Z",  # too few digits
            "123456789Z",  # too many digits
            "12345678",  # missing letter
            "A1234567L",  # invalid NIE prefix
            "X123456L",  # short NIE
            "12345678-Z",
            "ABCDEFGHZ",
            "1234\n5678Z",
            "\u0661\u0662\u0663\u0664\u0665\u0666\u0667\u0668Z",  # Arabic-Indic digits
        ],
    )
    def test_invalid_format(self, value):
        """Test strings that match neither the DNI nor the NIE shape."""
        result = validate_national_id(value)

        assert result.failure == ValidationFailure.INVALID_FORMAT

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_defers(self, value):
        """Test that empty input is left to the required-field check."""
        assert validate_national_id(value).is_valid

    def test_every_remainder_has_a_letter(self):
        """Test that computed letters agree with the validator for all remainders."""
        for remainder in range(23):
            number = 10000000 + remainder
            letter = compute_check_letter(number)
            assert validate_national_id(f"{number}{letter}").is_valid

    def test_check_letter_table(self):
        """Test the reference alphabet."""
        assert len(CHECK_LETTERS) == 23
        assert compute_check_letter(12345678) == "Z"

    def test_normalize(self):
        """Test normalization helper."""
        assert normalize_national_id(" x1234567l ") == "X1234567L"
        assert normalize_national_id(None) == ""


class TestDateNotFutureValidation:
    """Tests for DD/MM/YYYY date validation."""

    def test_valid_past_date(self):
        """Test a normal past date."""
        assert validate_date_not_future("01/01/2024", today=TODAY).is_valid

    def test_leap_day(self):
        """Test 29 February in a leap year."""
        assert validate_date_not_future("29/02/2024", today=TODAY).is_valid

    def test_leap_day_in_non_leap_year(self):
        """Test 29 February in a common year."""
        result = validate_date_not_future("29/02/2023", today=TODAY)

        assert result.failure == ValidationFailure.INVALID_CALENDAR_DATE

    def test_day_beyond_month_length(self):
        """Test that April has only 30 days."""
        result = validate_date_not_future("31/04/2020", today=TODAY)

        assert result.failure == ValidationFailure.INVALID_CALENDAR_DATE

    @pytest.mark.parametrize("value", ["01/13/2024", "00/01/2024", "32/01/2024", "15/00/2024"])
    def test_out_of_range_parts(self, value):
        """Test month and day outside their ranges."""
        result = validate_date_not_future(value, today=TODAY)

        assert result.failure == ValidationFailure.INVALID_CALENDAR_DATE

    @pytest.mark.parametrize(
        "value",
        [
            "2024-01-01",
            "1/1/2024",
            "01-01-2024",
            "01/01/24",
            "tomorrow",
            " 01/01/2024",
            "01/01/2024\n",
            "\u0660\u0661/01/2024",  # Arabic-Indic digits
        ],
    )
    def test_invalid_format(self, value):
        """Test strings that are not strict DD/MM/YYYY."""
        result = validate_date_not_future(value, today=TODAY)

        assert result.failure == ValidationFailure.INVALID_FORMAT

    def test_future_date(self):
        """Test a date after today."""
        result = validate_date_not_future("16/06/2024", today=TODAY)

        assert result.failure == ValidationFailure.FUTURE_DATE

    def test_today_is_accepted(self):
        """Test that a date equal to today is not considered future."""
        assert validate_date_not_future("15/06/2024", today=TODAY).is_valid

    def test_defaults_to_real_today(self):
        """Test that the reference day defaults to the current date."""
        tomorrow = dt.date.today() + dt.timedelta(days=1)

        result = validate_date_not_future(tomorrow.strftime("%d/%m/%Y"))

        assert result.failure == ValidationFailure.FUTURE_DATE

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_defers(self, value):
        """Test that empty input is left to the required-field check."""
        assert validate_date_not_future(value, today=TODAY).is_valid


class TestTimeRangeValidation:
    """Tests for the start/end time range."""

    def test_valid_range(self):
        """Test end after start."""
        assert validate_time_range("09:00", "17:30").is_valid

    def test_end_before_start(self):
        """Test end earlier than start."""
        result = validate_time_range("17:00", "09:00")

        assert result.failure == ValidationFailure.END_NOT_AFTER_START
        assert result.message == "End time must be after start time"

    def test_equal_times(self):
        """Test that equal times are rejected."""
        result = validate_time_range("09:00", "09:00")

        assert result.failure == ValidationFailure.END_NOT_AFTER_START

    @pytest.mark.parametrize("start,end", [("", "09:00"), ("09:00", None), (None, None)])
    def test_missing_value_defers(self, start, end):
        """Test that a missing value raises no failure."""
        assert validate_time_range(start, end).is_valid

    def test_malformed_time(self):
        """Test a value that is not HH:MM."""
        result = validate_time_range("9am", "17:00")

        assert result.failure == ValidationFailure.INVALID_FORMAT


class TestClockTimeValidation:
    """Tests for single clock-time values."""

    @pytest.mark.parametrize("value", ["00:00", "23:59", "9:05", ""])
    def test_valid(self, value):
        assert validate_clock_time(value).is_valid

    @pytest.mark.parametrize("value", ["24:00", "12:60", "1200", "ab:cd"])
    def test_invalid(self, value):
        assert validate_clock_time(value).failure == ValidationFailure.INVALID_FORMAT
