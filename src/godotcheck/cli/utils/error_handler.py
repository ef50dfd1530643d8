"""Error handling utilities for CLI commands."""

from __future__ import annotations

import traceback

import typer
from rich.console import Console

from godotcheck.cli.formatters.json_formatter import JsonFormatter
from godotcheck.cli.validators.base import ValidationError
from godotcheck.config import get_logger
from godotcheck.exceptions import GodotCheckError

logger = get_logger(__name__)
console = Console(stderr=True)

FATAL_EXIT_CODE = 2


def handle_cli_error(
    error: Exception,
    verbose: bool = False,
    json_output: bool = False,
    exit_code: int = FATAL_EXIT_CODE,
) -> None:
    """Report an error that stops a command and exit.

    Args:
        error: The exception that was raised
        verbose: Whether to show detailed error information
        json_output: Print a JSON error response to stdout instead
        exit_code: Exit code to use when exiting
    """
    if json_output:
        print(JsonFormatter().format_error_response(error, exit_code))
        logger.error(
            "Command failed",
            error=str(error),
            error_type=type(error).__name__,
            exit_code=exit_code,
        )
        raise typer.Exit(exit_code)

    if isinstance(error, GodotCheckError):
        console.print(f"[red]✗ {error.message}[/red]")

        if error.hint:
            console.print(f"[yellow]→ {error.hint}[/yellow]")

        if verbose and error.details:
            console.print("\n[dim]Details:[/dim]")
            for key, value in error.details.items():
                console.print(f"  [dim]{key}:[/dim] {value}")

        logger.error(
            "godotcheck error occurred",
            error_type=type(error).__name__,
            message=error.message,
            hint=error.hint,
            details=error.details,
            exit_code=exit_code,
        )

    elif isinstance(error, ValidationError):
        console.print(f"[red]✗ Validation Error: {error}[/red]")
        logger.error("Invalid command input", error=str(error), field=error.field)

    elif isinstance(error, FileNotFoundError):
        console.print(f"[red]✗ File not found: {error}[/red]")
        console.print("[yellow]→ Check that the file path is correct[/yellow]")
        logger.error(
            "File not found",
            error=str(error),
            filename=getattr(error, "filename", None),
            exit_code=exit_code,
        )

    else:
        console.print(f"[red]✗ Unexpected error: {error!s}[/red]")

        if verbose:
            console.print("\n[dim]Full traceback:[/dim]")
            console.print(traceback.format_exc())
        else:
            console.print("[dim]Run with --debug for full error details[/dim]")

        logger.error(
            "Unexpected error occurred",
            error=str(error),
            error_type=type(error).__name__,
            exit_code=exit_code,
            exc_info=True,
        )

    raise typer.Exit(exit_code)
