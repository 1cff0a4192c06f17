"""CLI utility functions."""

from kilometraje.cli.utils.formatters import (
    format_amount,
    format_error,
    format_hours,
    format_info,
    format_issue,
    format_km,
    format_report,
    format_success,
    format_table,
    format_warning,
)

__all__ = [
    "format_amount",
    "format_error",
    "format_hours",
    "format_info",
    "format_issue",
    "format_km",
    "format_report",
    "format_success",
    "format_table",
    "format_warning",
]
