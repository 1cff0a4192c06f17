"""Profile commands: the fields remembered to pre-fill new records."""

from typing import Optional

import click

from kilometraje.cli.context import AppContext
from kilometraje.cli.error_handlers import DataValidationError, with_error_handling
from kilometraje.cli.utils.formatters import (
    format_hours,
    format_info,
    format_issue,
    format_success,
)
from kilometraje.utils.logging_utils import LogContext
from kilometraje.validators.validator import ExpenseFormValidator


@click.group(name="profile")
def profile():
    """Show or change the saved name, national ID and working hours."""
    pass


@profile.command(name="show")
@click.pass_obj
def show_profile(app: AppContext):
    """Show the saved profile."""
    with LogContext(command="profile show"), with_error_handling(app.debug):
        form = app.new_form()
        data = form.data
        click.echo(f"Name:        {data.name or '-'}")
        click.echo(f"National ID: {data.national_id or '-'}")
        click.echo(f"Start time:  {data.start_time or '-'}")
        click.echo(f"End time:    {data.end_time or '-'}")
        if form.elapsed_hours:
            click.echo(f"Hours:       {format_hours(form.elapsed_hours)}")


@profile.command(name="set")
@click.option("--name", default=None, help="Full name")
@click.option("--national-id", default=None, help="DNI or NIE")
@click.option("--start", "start_time", default=None, help="Start time (HH:MM)")
@click.option("--end", "end_time", default=None, help="End time (HH:MM)")
@click.pass_obj
def set_profile(
    app: AppContext,
    name: Optional[str],
    national_id: Optional[str],
    start_time: Optional[str],
    end_time: Optional[str],
):
    """Validate and save one or more profile fields.

    Example:
        kilometraje profile set --name "Ana López" --national-id 12345678z
    """
    with LogContext(command="profile set"), with_error_handling(app.debug):
        if all(v is None for v in (name, national_id, start_time, end_time)):
            click.echo(format_info("Nothing to change."))
            return

        form = app.new_form()
        candidate = form.data
        if name is not None:
            candidate.name = name
        if national_id is not None:
            candidate.national_id = national_id
        if start_time is not None:
            candidate.start_time = start_time
        if end_time is not None:
            candidate.end_time = end_time

        changed = set()
        if name is not None:
            changed.add("name")
        if national_id is not None:
            changed.add("national_id")
        if start_time is not None or end_time is not None:
            # The range error is reported on end_time
            changed.update({"start_time", "end_time"})

        report = ExpenseFormValidator().validate_profile(candidate)
        errors = [issue for issue in report.get_errors() if issue.field in changed]
        # Missing times are allowed while the profile is filled in step by step
        errors = [
            issue
            for issue in errors
            if issue.field in ("name", "national_id")
            or getattr(candidate, issue.field)
        ]
        if errors:
            for issue in errors:
                click.echo(format_issue(issue))
            raise DataValidationError(f"{len(errors)} invalid profile field(s)")

        if name is not None:
            form.set_name(name)
        if national_id is not None:
            form.set_national_id(national_id)
        if start_time is not None:
            form.set_start_time(start_time)
        if end_time is not None:
            form.set_end_time(end_time)

        click.echo(format_success("Profile saved"))


@profile.command(name="clear")
@click.confirmation_option(prompt="Forget the saved profile?")
@click.pass_obj
def clear_profile(app: AppContext):
    """Forget the saved profile."""
    with LogContext(command="profile clear"), with_error_handling(app.debug):
        app.new_form().reset()
        click.echo(format_success("Profile cleared"))
