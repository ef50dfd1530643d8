"""godotcheck CLI commands."""

from __future__ import annotations

from godotcheck.cli.commands.check import check_command
from godotcheck.cli.commands.config import config_app

__all__ = ["check_command", "config_app"]
