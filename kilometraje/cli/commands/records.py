"""Record commands: add, list, remove and clear expense records."""

from typing import Optional

import click

from kilometraje.cli.context import AppContext
from kilometraje.cli.error_handlers import DataValidationError, with_error_handling
from kilometraje.cli.utils.formatters import (
    format_amount,
    format_hours,
    format_info,
    format_km,
    format_report,
    format_success,
    format_table,
    format_warning,
)
from kilometraje.utils.logging_utils import LogContext


@click.command(name="add")
@click.option("--date", "date_", required=True, help="Trip date (DD/MM/YYYY)")
@click.option("--city", required=True, help="Destination city")
@click.option(
    "--distance",
    type=str,
    default=None,
    help="Distance in km (only needed for cities missing from the city list)",
)
@click.pass_obj
def add_record(app: AppContext, date_: str, city: str, distance: Optional[str]):
    """Add an expense record using the saved profile.

    Example:
        kilometraje add --date 01/01/2024 --city Madrid
    """
    with LogContext(command="add"), with_error_handling(app.debug):
        form = app.new_form()
        form.set_date(date_)
        form.select_city(city)
        if distance is not None:
            known = app.catalog.lookup(city)
            if known is not None:
                # Reference cities have a fixed distance
                click.echo(
                    format_warning(
                        f"Ignoring --distance: {known.name} is "
                        f"{format_km(known.distance_km)} in the city list"
                    )
                )
            else:
                form.set_distance(distance)

        report = form.validate()
        for line in format_report(report):
            click.echo(line)

        record = form.submit()
        if record is None:
            raise DataValidationError(
                report.summary(),
                recovery_hint="Fix the fields above; use 'kilometraje profile set' "
                "for name, national ID and times",
            )

        click.echo(
            format_success(
                f"Added {record.date.strftime('%d/%m/%Y')} {record.city} "
                f"({format_km(record.distance_km)})"
            )
        )
        if form.elapsed_hours:
            click.echo(format_info(f"Working hours: {format_hours(form.elapsed_hours)}"))
        _echo_totals(app)


@click.command(name="list")
@click.pass_obj
def list_records(app: AppContext):
    """List recorded trips with totals."""
    with LogContext(command="list"), with_error_handling(app.debug):
        records = app.record_store.current_list()
        if not records:
            click.echo(format_info("No records yet."))
            return

        rows = [
            [str(number), r.date.strftime("%d/%m/%Y"), r.city, format_km(r.distance_km)]
            for number, r in enumerate(records, start=1)
        ]
        click.echo(format_table(["#", "Date", "City", "Distance"], rows))

        summary = app.aggregator.summarize_by_city(records)
        if len(summary) > 1:
            click.echo()
            click.echo(
                format_table(
                    ["City", "Trips", "Distance", "Amount"],
                    [
                        [
                            row.city,
                            str(row.trips),
                            format_km(row.distance_km),
                            format_amount(row.amount),
                        ]
                        for row in summary.itertuples(index=False)
                    ],
                )
            )

        click.echo()
        _echo_totals(app)


@click.command(name="remove")
@click.argument("number", type=int)
@click.pass_obj
def remove_record(app: AppContext, number: int):
    """Remove the record shown as NUMBER in 'kilometraje list'."""
    with LogContext(command="remove"), with_error_handling(app.debug):
        count = len(app.record_store.current_list())
        if not 1 <= number <= count:
            click.echo(format_warning(f"No record number {number}"))
            return

        app.record_store.remove_at(number - 1)
        click.echo(format_success(f"Removed record {number}"))
        _echo_totals(app)


@click.command(name="clear")
@click.confirmation_option(prompt="Delete all records?")
@click.pass_obj
def clear_records(app: AppContext):
    """Delete every record."""
    with LogContext(command="clear"), with_error_handling(app.debug):
        app.record_store.clear()
        click.echo(format_success("All records deleted"))


def _echo_totals(app: AppContext) -> None:
    totals = app.aggregator.calculate_totals(app.record_store.current_list())
    click.echo(
        f"Records: {totals.record_count}   "
        f"Total: {format_km(totals.distance_km)}   "
        f"Amount: {format_amount(totals.amount)}"
    )
