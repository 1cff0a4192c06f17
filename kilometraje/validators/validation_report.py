"""Validation report for collecting form-level validation issues."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, List, Optional

from kilometraje.validators.validation_result import (
    ValidationFailure,
    ValidationResult,
)


class ValidationSeverity(IntEnum):
    """Severity levels for validation issues."""

    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class ValidationIssue:
    """A single problem found on one form field.

    Attributes:
        severity: The severity level of the issue
        field: The form field that has the issue
        message: Human-readable description shown next to the field
        value: The value that caused the issue
        failure: The validator failure reason, when the issue came from one
    """

    severity: ValidationSeverity
    field: str
    message: str
    value: Any
    failure: Optional[ValidationFailure] = None

    def __str__(self) -> str:
        return f"[{self.severity.name}] {self.field}: {self.message}"


class ValidationReport:
    """Collects validation issues for a whole form.

    Example:
        >>> report = ValidationReport()
        >>> report.add_error("date", "Date is required", "")
        >>> report.is_valid()
        False
        >>> report.errors_for("date")[0].message
        'Date is required'
    """

    def __init__(self) -> None:
        self.issues: List[ValidationIssue] = []

    @property
    def error_count(self) -> int:
        return sum(
            1 for issue in self.issues if issue.severity == ValidationSeverity.ERROR
        )

    @property
    def warning_count(self) -> int:
        return sum(
            1 for issue in self.issues if issue.severity == ValidationSeverity.WARNING
        )

    def is_valid(self) -> bool:
        """Check if validation passed (no errors).

        Warnings and info messages do not affect validity.
        """
        return self.error_count == 0

    def add_error(
        self,
        field: str,
        message: str,
        value: Any,
        failure: Optional[ValidationFailure] = None,
    ) -> None:
        """Add an error to the report.

        Args:
            field: The field name with the error
            message: Human-readable error description
            value: The value that caused the error
            failure: Optional validator failure reason
        """
        self.issues.append(
            ValidationIssue(
                severity=ValidationSeverity.ERROR,
                field=field,
                message=message,
                value=value,
                failure=failure,
            )
        )

    def add_warning(self, field: str, message: str, value: Any) -> None:
        self.issues.append(
            ValidationIssue(
                severity=ValidationSeverity.WARNING,
                field=field,
                message=message,
                value=value,
            )
        )

    def add_result(self, field: str, result: ValidationResult, value: Any) -> None:
        """Record a validator result, adding an error only if it failed.

        Args:
            field: The field the result belongs to
            result: Result returned by a field validator
            value: The validated value
        """
        if result.failure is not None:
            self.add_error(field, result.failure.message, value, result.failure)

    def get_errors(self) -> List[ValidationIssue]:
        return [
            issue for issue in self.issues if issue.severity == ValidationSeverity.ERROR
        ]

    def get_warnings(self) -> List[ValidationIssue]:
        return [
            issue
            for issue in self.issues
            if issue.severity == ValidationSeverity.WARNING
        ]

    def errors_for(self, field: str) -> List[ValidationIssue]:
        """Get the errors recorded for one field."""
        return [issue for issue in self.get_errors() if issue.field == field]

    def summary(self) -> str:
        """Get a summary with the counts of errors and warnings."""
        parts = []
        if self.error_count > 0:
            parts.append(f"{self.error_count} error(s)")
        if self.warning_count > 0:
            parts.append(f"{self.warning_count} warning(s)")

        if not parts:
            return "No issues found"

        return ", ".join(parts)

    def format(self) -> str:
        """Format the validation report for display."""
        if not self.issues:
            return "Validation successful - no issues found"

        lines = [f"Validation Report - {self.summary()}", "=" * 60]

        errors = self.get_errors()
        if errors:
            lines.append("\nERRORS:")
            for issue in errors:
                lines.append(f"  - {issue}")

        warnings = self.get_warnings()
        if warnings:
            lines.append("\nWARNINGS:")
            for issue in warnings:
                lines.append(f"  - {issue}")

        return "\n".join(lines)
