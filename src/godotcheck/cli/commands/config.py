"""Configuration display commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.tree import Tree

from godotcheck.cli.formatters.json_formatter import JsonFormatter
from godotcheck.cli.utils.error_handler import handle_cli_error
from godotcheck.config import GodotCheckSettings, get_settings_for_cli

console = Console()

config_app = typer.Typer(
    name="config",
    help="Inspect godotcheck configuration",
    pretty_exceptions_enable=False,
)

GROUPS = {
    "project": (
        "project_root",
        "script_extension",
        "scene_extension",
        "skip_dirs",
        "resource_prefix",
    ),
    "rules": ("allowed_master_types", "fail_fast"),
    "logging": ("debug", "log_level", "log_format", "log_file"),
}


@config_app.command(name="show")
def config_show(
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to configuration file"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Display the effective configuration after merging all sources.

    Examples:
        godotcheck config show
        godotcheck config show --config godotcheck.toml --json
    """
    try:
        settings = get_settings_for_cli(config_file=config)
    except Exception as e:
        handle_cli_error(e, json_output=json_output)
        return

    if json_output:
        print(JsonFormatter().format(settings.model_dump(mode="json")))
        return

    _show_config_tree(settings)


def _show_config_tree(settings: GodotCheckSettings) -> None:
    """Display configuration as a tree structure."""
    tree = Tree("[bold cyan]godotcheck configuration[/bold cyan]")
    for group_name, field_names in GROUPS.items():
        branch = tree.add(f"[bold]{group_name}[/bold]")
        for field_name in field_names:
            value = getattr(settings, field_name)
            branch.add(f"{field_name}: [green]{value}[/green]")
    console.print(tree)
