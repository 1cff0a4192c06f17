"""Result values returned by the field validators.

Validators never raise for bad user input. They return a ValidationResult
that is either valid or names the precise failure, so the caller can show
the matching message next to the field.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ValidationFailure(str, Enum):
    """Reasons a single field value can be rejected."""

    INVALID_FORMAT = "invalid_format"
    INVALID_CALENDAR_DATE = "invalid_calendar_date"
    FUTURE_DATE = "future_date"
    INCORRECT_CHECK_LETTER = "incorrect_check_letter"
    END_NOT_AFTER_START = "end_not_after_start"

    @property
    def message(self) -> str:
        """Human-readable description of the failure."""
        return FAILURE_MESSAGES[self]


FAILURE_MESSAGES = {
    ValidationFailure.INVALID_FORMAT: "Value does not have the expected format",
    ValidationFailure.INVALID_CALENDAR_DATE: "Date does not exist in the calendar",
    ValidationFailure.FUTURE_DATE: "Date cannot be in the future",
    ValidationFailure.INCORRECT_CHECK_LETTER: "Check letter does not match the number",
    ValidationFailure.END_NOT_AFTER_START: "End time must be after start time",
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one value.

    Attributes:
        failure: The failure reason, or None when the value is valid

    Example:
        >>> ValidationResult.ok().is_valid
        True
        >>> ValidationResult.fail(ValidationFailure.FUTURE_DATE).message
        'Date cannot be in the future'
    """

    failure: Optional[ValidationFailure] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return _VALID

    @classmethod
    def fail(cls, failure: ValidationFailure) -> "ValidationResult":
        return cls(failure=failure)

    @property
    def is_valid(self) -> bool:
        return self.failure is None

    @property
    def message(self) -> Optional[str]:
        return self.failure.message if self.failure is not None else None

    def __bool__(self) -> bool:
        return self.is_valid


_VALID = ValidationResult()
