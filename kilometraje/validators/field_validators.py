"""Field-level validators for the expense form.

This module provides pure validation functions for the raw strings typed
into the form: the Spanish national ID (DNI/NIE), the trip date and the
start/end clock times. Each function returns a ValidationResult instead of
a boolean so the caller can display the exact reason for a rejection.

Empty values are always accepted here. Whether a field is required is
checked separately by ExpenseFormValidator.
"""

import datetime as dt
import re
from typing import Optional

from kilometraje.calculators.time_utils import convert_time_to_minutes
from kilometraje.validators.validation_result import (
    ValidationFailure,
    ValidationResult,
)

# Check letter for a DNI/NIE is CHECK_LETTERS[number % 23]
CHECK_LETTERS = "TRWAGMYFPDXBNJZSQVHLCKE"

NIE_PREFIX_VALUES = {"X": "0", "Y": "1", "Z": "2"}

_DNI_PATTERN = re.compile(r"([0-9]{8})([A-Z])")
_NIE_PATTERN = re.compile(r"([XYZ])([0-9]{7})([A-Z])")
_DATE_PATTERN = re.compile(r"([0-9]{2})/([0-9]{2})/([0-9]{4})")


def normalize_national_id(raw: Optional[str]) -> str:
    """Trim and uppercase a national ID as typed by the user.

    Example:
        >>> normalize_national_id(" x1234567l ")
        'X1234567L'
    """
    if not raw:
        return ""
    return raw.strip().upper()


def compute_check_letter(number: int) -> str:
    """Return the check letter for the numeric part of a DNI/NIE.

    Example:
        >>> compute_check_letter(12345678)
        'Z'
    """
    return CHECK_LETTERS[number % 23]


def validate_national_id(raw: Optional[str]) -> ValidationResult:
    """Validate a Spanish national ID (DNI) or foreigner ID (NIE).

    Accepted shapes, after trimming and uppercasing:
    - DNI: 8 digits followed by the check letter
    - NIE: X, Y or Z, then 7 digits, then the check letter. The prefix
      stands for 0, 1 or 2 and is prepended to the digits before the
      check letter is computed.

    Args:
        raw: The ID as typed

    Returns:
        Valid, INVALID_FORMAT when neither shape matches, or
        INCORRECT_CHECK_LETTER when the letter does not match the number

    Example:
        >>> validate_national_id("12345678Z").is_valid
        True
        >>> validate_national_id("12345678A").failure.name
        'INCORRECT_CHECK_LETTER'
    """
    value = normalize_national_id(raw)
    if not value:
        return ValidationResult.ok()

    dni_match = _DNI_PATTERN.fullmatch(value)
    if dni_match:
        number, letter = int(dni_match.group(1)), dni_match.group(2)
    else:
        nie_match = _NIE_PATTERN.fullmatch(value)
        if not nie_match:
            return ValidationResult.fail(ValidationFailure.INVALID_FORMAT)
        prefix, digits, letter = nie_match.groups()
        number = int(NIE_PREFIX_VALUES[prefix] + digits)

    if letter != compute_check_letter(number):
        return ValidationResult.fail(ValidationFailure.INCORRECT_CHECK_LETTER)
    return ValidationResult.ok()


def validate_date_not_future(
    raw: Optional[str], today: Optional[dt.date] = None
) -> ValidationResult:
    """Validate a ``DD/MM/YYYY`` date that must not lie in the future.

    A date equal to today is accepted; only dates strictly after today are
    rejected as future dates.

    Args:
        raw: The date as typed
        today: Reference day (defaults to dt.date.today())

    Returns:
        Valid, INVALID_FORMAT, INVALID_CALENDAR_DATE or FUTURE_DATE

    Example:
        >>> validate_date_not_future("29/02/2024").is_valid
        True
        >>> validate_date_not_future("31/04/2020").failure.name
        'INVALID_CALENDAR_DATE'
    """
    if not raw:
        return ValidationResult.ok()

    match = _DATE_PATTERN.fullmatch(raw)
    if not match:
        return ValidationResult.fail(ValidationFailure.INVALID_FORMAT)

    day, month, year = (int(part) for part in match.groups())
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return ValidationResult.fail(ValidationFailure.INVALID_CALENDAR_DATE)

    # dt.date rejects days the month does not have (31/04, 29/02/2023)
    try:
        value = dt.date(year, month, day)
    except ValueError:
        return ValidationResult.fail(ValidationFailure.INVALID_CALENDAR_DATE)

    if today is None:
        today = dt.date.today()
    if value > today:
        return ValidationResult.fail(ValidationFailure.FUTURE_DATE)
    return ValidationResult.ok()


def validate_time_range(
    start: Optional[str], end: Optional[str]
) -> ValidationResult:
    """Validate that the end time is strictly after the start time.

    Args:
        start: Start time, ``HH:MM``
        end: End time, ``HH:MM``

    Returns:
        Valid when either value is missing or end > start,
        END_NOT_AFTER_START when end <= start, INVALID_FORMAT when a value
        is not a clock time

    Example:
        >>> validate_time_range("17:00", "09:00").failure.name
        'END_NOT_AFTER_START'
    """
    if not start or not end:
        return ValidationResult.ok()

    try:
        start_minutes = convert_time_to_minutes(start)
        end_minutes = convert_time_to_minutes(end)
    except ValueError:
        return ValidationResult.fail(ValidationFailure.INVALID_FORMAT)

    if end_minutes <= start_minutes:
        return ValidationResult.fail(ValidationFailure.END_NOT_AFTER_START)
    return ValidationResult.ok()


def validate_clock_time(raw: Optional[str]) -> ValidationResult:
    """Validate a single ``HH:MM`` clock time (empty is accepted)."""
    if not raw:
        return ValidationResult.ok()
    try:
        convert_time_to_minutes(raw)
    except ValueError:
        return ValidationResult.fail(ValidationFailure.INVALID_FORMAT)
    return ValidationResult.ok()
