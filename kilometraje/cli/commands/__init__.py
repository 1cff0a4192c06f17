"""CLI commands."""

from kilometraje.cli.commands.profile import profile
from kilometraje.cli.commands.records import (
    add_record,
    clear_records,
    list_records,
    remove_record,
)
from kilometraje.cli.commands.reference import check_date, check_id, hours, list_cities

__all__ = [
    "add_record",
    "check_date",
    "check_id",
    "clear_records",
    "hours",
    "list_cities",
    "list_records",
    "profile",
    "remove_record",
]
