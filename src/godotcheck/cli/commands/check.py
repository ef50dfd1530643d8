"""CLI command for godotcheck check."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import pydantic
import typer
from rich.console import Console

from godotcheck.checker import ProjectChecker
from godotcheck.cli.formatters.base import OutputFormat
from godotcheck.cli.formatters.report_formatter import ReportFormatter
from godotcheck.cli.utils.error_handler import handle_cli_error
from godotcheck.cli.validators.file_validator import (
    ConfigFileValidator,
    DirectoryValidator,
)
from godotcheck.config import get_logger, get_settings_for_cli
from godotcheck.exceptions import ConfigurationError

logger = get_logger(__name__)
console = Console()

PROBLEMS_EXIT_CODE = 1


def check_command(
    path: Annotated[
        Path | None,
        typer.Argument(
            help="Godot project root (default: configured project_root)",
        ),
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output the report as JSON")
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
        ),
    ] = None,
    all_violations: Annotated[
        bool,
        typer.Option(
            "--all-violations",
            help="Report every rule violation of a file, not only the first",
        ),
    ] = False,
    skip_dir: Annotated[
        list[str] | None,
        typer.Option(
            "--skip-dir",
            help="Directory name to skip (repeatable, replaces configured list)",
        ),
    ] = None,
    exit_zero: Annotated[
        bool,
        typer.Option("--exit-zero", help="Exit with 0 even if problems are found"),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Show error details")
    ] = False,
) -> None:
    """Check a Godot project's scripts and scenes against the conventions.

    Files are never modified. Problems are reported in three groups:
    files that could not be read or parsed, script rule violations and
    scene rule violations.
    """
    try:
        overrides: dict[str, Any] = {}
        if path is not None:
            overrides["project_root"] = DirectoryValidator().validate(path)
        if all_violations:
            overrides["fail_fast"] = False
        if skip_dir:
            overrides["skip_dirs"] = skip_dir

        config_path = ConfigFileValidator().validate(config) if config else None
        try:
            settings = get_settings_for_cli(
                config_file=config_path, cli_overrides=overrides
            )
        except pydantic.ValidationError as e:
            raise ConfigurationError(
                message="Invalid configuration",
                hint="Check the values in your config file and environment",
                details={"errors": e.error_count(), "first": e.errors()[0]["msg"]},
            ) from e

        logger.debug("Checking project", project_root=str(settings.project_root))
        report = ProjectChecker(settings).check()
    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e, verbose=verbose, json_output=json_output)
        return

    formatter = ReportFormatter(console)
    if json_output:
        formatter.print(report, OutputFormat.JSON)
    else:
        formatter.print(report)

    if report.has_problems and not exit_zero:
        raise typer.Exit(PROBLEMS_EXIT_CODE)
