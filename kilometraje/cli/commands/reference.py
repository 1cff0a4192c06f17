"""Reference and checking commands: cities, check-id, check-date, hours."""

import click

from kilometraje.calculators.time_utils import compute_elapsed_hours
from kilometraje.cli.context import AppContext
from kilometraje.cli.error_handlers import DataValidationError, with_error_handling
from kilometraje.cli.utils.formatters import (
    format_hours,
    format_km,
    format_success,
    format_table,
    format_warning,
)
from kilometraje.validators.field_validators import (
    normalize_national_id,
    validate_date_not_future,
    validate_national_id,
    validate_time_range,
)
from kilometraje.validators.validation_result import ValidationResult


@click.command(name="cities")
@click.pass_obj
def list_cities(app: AppContext):
    """List the reference cities and their distances."""
    with with_error_handling(app.debug):
        cities = app.catalog.cities()
        if not cities:
            click.echo(format_warning("City list is not available."))
            return

        rows = [[city.name, format_km(city.distance_km)] for city in cities]
        click.echo(format_table(["City", "Distance"], rows))


@click.command(name="check-id")
@click.argument("value")
@click.pass_obj
def check_id(app: AppContext, value: str):
    """Check a DNI or NIE."""
    with with_error_handling(app.debug):
        _report(validate_national_id(value), normalize_national_id(value))


@click.command(name="check-date")
@click.argument("value")
@click.pass_obj
def check_date(app: AppContext, value: str):
    """Check a DD/MM/YYYY date (today or earlier)."""
    with with_error_handling(app.debug):
        _report(validate_date_not_future(value), value)


@click.command(name="hours")
@click.argument("start")
@click.argument("end")
@click.pass_obj
def hours(app: AppContext, start: str, end: str):
    """Show the hours between START and END (HH:MM)."""
    with with_error_handling(app.debug):
        result = validate_time_range(start, end)
        if result.is_valid:
            click.echo(format_success(format_hours(compute_elapsed_hours(start, end))))
            return
        raise DataValidationError(f"{start}-{end}: {result.message}")


def _report(result: ValidationResult, shown: str) -> None:
    if result.is_valid:
        click.echo(format_success(f"{shown} is valid"))
        return
    raise DataValidationError(f"{shown}: {result.message}")
