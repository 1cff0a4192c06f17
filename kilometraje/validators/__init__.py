"""Validation layer for the expense form."""

from kilometraje.validators.field_validators import (
    CHECK_LETTERS,
    compute_check_letter,
    normalize_national_id,
    validate_clock_time,
    validate_date_not_future,
    validate_national_id,
    validate_time_range,
)
from kilometraje.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)
from kilometraje.validators.validation_result import (
    ValidationFailure,
    ValidationResult,
)
from kilometraje.validators.validator import ExpenseFormData, ExpenseFormValidator

__all__ = [
    "CHECK_LETTERS",
    "ExpenseFormData",
    "ExpenseFormValidator",
    "ValidationFailure",
    "ValidationIssue",
    "ValidationReport",
    "ValidationResult",
    "ValidationSeverity",
    "compute_check_letter",
    "normalize_national_id",
    "validate_clock_time",
    "validate_date_not_future",
    "validate_national_id",
    "validate_time_range",
]
