"""Kilometraje CLI.

This module provides a command-line interface for recording travel expense
entries, managing the saved profile and checking individual field values.
"""

import click
from pydantic import ValidationError

from kilometraje.cli.commands import (
    add_record,
    check_date,
    check_id,
    clear_records,
    hours,
    list_cities,
    list_records,
    profile,
    remove_record,
)
from kilometraje.cli.context import build_app_context
from kilometraje.cli.error_handlers import ConfigurationError, with_error_handling
from kilometraje.config.logging_config import LoggingConfig, configure_logging
from kilometraje.config.settings import get_config

__version__ = "1.0.0"


@click.group(help="Kilometraje CLI - Record trips and compute mileage allowances")
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Verbose logging and full tracebacks")
@click.pass_context
def cli(ctx: click.Context, debug: bool):
    """Kilometraje CLI main entry point."""
    if ctx.resilient_parsing:
        return

    with with_error_handling(debug):
        try:
            config = get_config()
        except ValidationError as e:
            raise ConfigurationError(
                str(e), recovery_hint="Check the variables in your .env file"
            ) from e

        logging_config = LoggingConfig.from_env(default_level=config.log_level)
        if debug or config.debug:
            logging_config.log_level = "DEBUG"
        configure_logging(logging_config)

        ctx.obj = build_app_context(config, debug=debug or config.debug)


cli.add_command(add_record)
cli.add_command(list_records)
cli.add_command(remove_record)
cli.add_command(clear_records)
cli.add_command(profile)
cli.add_command(list_cities)
cli.add_command(check_id)
cli.add_command(check_date)
cli.add_command(hours)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
