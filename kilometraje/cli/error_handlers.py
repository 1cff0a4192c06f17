"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError

from kilometraje.cli.utils.formatters import format_error, format_warning
from kilometraje.storage.key_value import StorageError


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""

    pass


class DataValidationError(CLIError):
    """User input was rejected by validation."""

    pass


EXIT_CONFIGURATION = 1
EXIT_STORAGE = 2
EXIT_VALIDATION = 3
EXIT_CANCELLED = 130
EXIT_UNEXPECTED = 255


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Print a user-friendly message for an error.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Process exit code for the error type
    """
    if isinstance(error, ConfigurationError):
        click.echo(format_error(f"Configuration Error: {error.message}"))
        if error.recovery_hint:
            click.echo(format_warning(f"Hint: {error.recovery_hint}"))
        return EXIT_CONFIGURATION

    elif isinstance(error, DataValidationError):
        click.echo(format_error(f"Validation Error: {error.message}"))
        if error.recovery_hint:
            click.echo(format_warning(f"Hint: {error.recovery_hint}"))
        return EXIT_VALIDATION

    elif isinstance(error, StorageError):
        click.echo(format_error(f"Storage Error: {error}"))
        click.echo(format_warning("Hint: Check STORAGE_FILE and its permissions"))
        return EXIT_STORAGE

    elif isinstance(error, ValidationError):
        click.echo(format_error("Invalid data"))
        click.echo(str(error))
        return EXIT_VALIDATION

    elif isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"))
        return EXIT_CANCELLED

    else:
        click.echo(format_error(f"Unexpected Error: {type(error).__name__}"))
        click.echo(str(error))

        if debug:
            click.echo("\nFull stack trace:")
            click.echo(traceback.format_exc())
        else:
            click.echo(format_warning("\nRun with --debug flag for full stack trace"))

        return EXIT_UNEXPECTED


class _ErrorHandler:
    """Context manager turning exceptions into exit codes."""

    def __init__(self, show_debug: bool):
        self.show_debug = show_debug

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val is None or isinstance(exc_val, (SystemExit, click.exceptions.Exit)):
            return False
        exit_code = handle_cli_error(exc_val, self.show_debug)
        sys.exit(exit_code)


def with_error_handling(debug: bool = False) -> _ErrorHandler:
    """
    Context manager adding standardized error handling to a command body.

    Example:
        @click.command()
        @click.pass_obj
        def my_command(app):
            with with_error_handling(app.debug):
                ...
    """
    return _ErrorHandler(debug)
