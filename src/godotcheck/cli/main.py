"""Main CLI entry point."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from godotcheck import __version__
from godotcheck.cli.commands import check_command, config_app
from godotcheck.cli.formatters.json_formatter import JsonFormatter
from godotcheck.config import (
    configure_logging,
    get_logger,
    get_settings,
    set_settings,
)

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="godotcheck",
    help="Convention linter for Godot scripts and scenes",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="check")(check_command)
app.add_typer(config_app, name="config")


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show godotcheck version."""
    version_info = {
        "name": "godotcheck",
        "version": __version__,
        "description": "Convention linter for Godot scripts and scenes",
    }

    if json_output:
        print(JsonFormatter().format(version_info))
    else:
        console.print(f"godotcheck v{version_info['version']}")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure global options."""
    if not (debug or verbose):
        return

    update = {"log_level": "DEBUG", "debug": True} if debug else {"log_level": "INFO"}
    settings = get_settings().model_copy(update=update)
    set_settings(settings)
    configure_logging(settings)
    if debug:
        logger.debug("Debug mode enabled")
    else:
        logger.info("Verbose mode enabled")


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
