"""Output formatting utilities for CLI."""

from decimal import ROUND_HALF_UP, Decimal
from typing import List

import click

from kilometraje.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)


def format_success(message: str) -> str:
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    return click.style(f"ℹ {message}", fg="blue")


def format_amount(amount: Decimal) -> str:
    """Format a money amount with two decimals.

    Example:
        >>> format_amount(Decimal("3.4500"))
        '3.45 €'
    """
    rounded = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{rounded} €"


def format_km(distance: Decimal) -> str:
    """Format a distance, dropping a trailing ``.0``.

    Example:
        >>> format_km(Decimal("40.0"))
        '40 km'
        >>> format_km(Decimal("35.50"))
        '35.5 km'
    """
    value = Decimal(distance)
    if value == value.to_integral_value():
        value = value.quantize(Decimal("1"))
    else:
        value = value.normalize()
    return f"{value} km"


def format_hours(hours: float) -> str:
    return f"{hours:.2f} h"


def format_issue(issue: ValidationIssue) -> str:
    """Render one validation issue styled by its severity."""
    text = f"{issue.field}: {issue.message}"
    if issue.severity == ValidationSeverity.ERROR:
        return format_error(text)
    if issue.severity == ValidationSeverity.WARNING:
        return format_warning(text)
    return format_info(text)


def format_report(report: ValidationReport) -> List[str]:
    """Render each issue of a report as a styled line."""
    return [format_issue(issue) for issue in report.issues]


def format_table(headers: List[str], rows: List[List[str]], max_width: int = 40) -> str:
    """Format data as a plain-text table.

    Args:
        headers: List of column headers
        rows: List of data rows (each row is a list of cell values)
        max_width: Maximum width for each column (default: 40)

    Returns:
        Formatted table as a string
    """
    if not headers:
        return ""

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            if i < len(col_widths):
                col_widths[i] = max(col_widths[i], len(str(cell)))

    col_widths = [min(w, max_width) for w in col_widths]

    separator = "+" + "+".join("-" * (w + 2) for w in col_widths) + "+"

    def render(cells: List[str]) -> str:
        formatted = [
            f" {str(cell)[: col_widths[i]]:<{col_widths[i]}} "
            for i, cell in enumerate(cells)
            if i < len(col_widths)
        ]
        return "|" + "|".join(formatted) + "|"

    table_lines = [separator, render(headers), separator]
    if rows:
        table_lines.extend(render(row) for row in rows)
        table_lines.append(separator)

    return "\n".join(table_lines)
