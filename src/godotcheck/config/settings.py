"""godotcheck configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from godotcheck.exceptions import ConfigurationError, check_config_keys

SUPPORTED_CONFIG_SUFFIXES = [".yml", ".yaml", ".toml", ".json"]


class GodotCheckSettings(BaseSettings):
    """godotcheck configuration settings.

    Settings are loaded with the following precedence (highest to lowest):
    1. CLI arguments (when provided via command flags)
       Example: godotcheck check ~/games/pushgame

    2. Config file values (YAML, TOML, or JSON)
       Example: godotcheck check --config godotcheck.toml

    3. Environment variables (prefixed with GODOTCHECK_)
       Example: export GODOTCHECK_PROJECT_ROOT=~/games/pushgame

    4. .env file (in current directory or specified path)

    5. Default values (defined in field declarations below)
    """

    model_config = SettingsConfigDict(
        env_prefix="GODOTCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Project settings
    project_root: Path = Field(
        default_factory=Path.cwd,
        description="Root directory of the Godot project to check",
    )
    script_extension: str = Field(
        default="gd",
        description="File extension of script files",
        min_length=1,
    )
    scene_extension: str = Field(
        default="tscn",
        description="File extension of scene files",
        min_length=1,
    )
    skip_dirs: list[str] = Field(
        default_factory=lambda: [".godot", "addons"],
        description="Directory names that are never descended into",
    )
    resource_prefix: str = Field(
        default="res://",
        description="Prefix of project-relative resource paths",
    )

    # Rule settings
    allowed_master_types: list[str] = Field(
        default_factory=lambda: ["Node", "Node2D", "Node3D"],
        description="Node types allowed for the master node of a scene",
    )
    fail_fast: bool = Field(
        default=True,
        description="Report only the first rule violation of each file",
    )

    # Debug settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Logging settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(?i)(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(?i)(console|json|structured)$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("project_root", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand environment variables and resolve path."""
        if v is None:
            return None
        if isinstance(v, str):
            expanded = os.path.expandvars(v)
            return Path(expanded).expanduser().resolve()
        if isinstance(v, Path):
            return v.expanduser().resolve()
        raise ValueError(
            f"Path fields must be str or Path, got {type(v).__name__}: {v!r}"
        )

    @field_validator("script_extension", "scene_extension", mode="before")
    @classmethod
    def strip_extension_dot(cls, v: Any) -> Any:
        """Accept both "gd" and ".gd"."""
        if isinstance(v, str):
            return v.strip().lstrip(".")
        return v

    @field_validator("skip_dirs", "allowed_master_types", mode="before")
    @classmethod
    def split_comma_list(cls, v: Any) -> Any:
        """Allow comma separated strings, e.g. from environment variables."""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.upper()
        raise ValueError(f"log_level must be a string, got {type(v).__name__}")

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: Any) -> str:
        """Normalize log format to lowercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.lower()
        raise ValueError(f"log_format must be a string, got {type(v).__name__}")

    @classmethod
    def from_env(cls) -> GodotCheckSettings:
        """Create settings from environment variables."""
        return cls()

    @staticmethod
    def read_config_file(config_path: Path | str) -> dict[str, Any]:
        """Read raw values from a configuration file.

        Args:
            config_path: Path to configuration file (YAML, TOML, or JSON).

        Returns:
            Dictionary of the values found in the file.

        Raises:
            ConfigurationError: If the file format is not supported.
            FileNotFoundError: If config file doesn't exist.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()

        if suffix in {".yml", ".yaml"}:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        elif suffix == ".toml":
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        elif suffix == ".json":
            with config_path.open(encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigurationError(
                message=f"Unsupported configuration file format: {suffix}",
                hint="Use one of the supported formats: .yml, .yaml, .toml, or .json",
                details={
                    "file": str(config_path),
                    "detected_format": suffix,
                    "supported_formats": SUPPORTED_CONFIG_SUFFIXES,
                },
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                message=f"Configuration file must contain a mapping: {config_path}",
                details={"found_type": type(data).__name__},
            )

        check_config_keys(data)
        return data

    @classmethod
    def from_file(cls, config_path: Path | str) -> GodotCheckSettings:
        """Load settings from a configuration file."""
        return cls(**cls.read_config_file(config_path))

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: list[Path | str] | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> GodotCheckSettings:
        """Load settings with proper precedence from multiple sources.

        Only the keys actually present in config files override environment
        variables, so an unrelated config file does not reset them to defaults.

        Args:
            config_files: List of config files to load (later files override earlier).
            cli_args: Dictionary of CLI arguments, None values are ignored.

        Returns:
            Merged settings from all sources.
        """
        data: dict[str, Any] = {}

        for config_file in config_files or []:
            try:
                data.update(cls.read_config_file(config_file))
            except FileNotFoundError:
                from godotcheck.config.logging import get_logger as _get_logger

                _get_logger(__name__).warning(
                    "Configuration file not found, using defaults",
                    config_file=str(config_file),
                )

        if cli_args:
            data.update({k: v for k, v in cli_args.items() if v is not None})

        return cls(**data)


# Global settings instance
_settings: GodotCheckSettings | None = None


def _get_config_paths() -> list[Path | str]:
    """Get the list of existing config files, later files override earlier."""
    potential_paths = [
        Path.home() / ".config" / "godotcheck" / "config.yaml",
        Path.home() / ".config" / "godotcheck" / "config.json",
        Path.home() / ".config" / "godotcheck" / "config.toml",
        Path.cwd() / ".godotcheck" / "config.yaml",
        Path.cwd() / ".godotcheck" / "config.json",
        Path.cwd() / ".godotcheck" / "config.toml",
        Path.cwd() / "godotcheck.yaml",
        Path.cwd() / "godotcheck.json",
        Path.cwd() / "godotcheck.toml",
    ]

    existing_paths: list[Path | str] = []
    for path in potential_paths:
        try:
            if path.is_file():
                existing_paths.append(path)
        except OSError:
            continue
    return existing_paths


def get_settings() -> GodotCheckSettings:
    """Get the global settings instance.

    Returns:
        Global GodotCheckSettings instance.
    """
    global _settings
    if _settings is None:
        config_paths = _get_config_paths()
        if config_paths:
            _settings = GodotCheckSettings.from_multiple_sources(
                config_files=config_paths
            )
        else:
            _settings = GodotCheckSettings.from_env()
    return _settings


def set_settings(settings: GodotCheckSettings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Forget the global settings so the next get_settings() reloads them."""
    global _settings
    _settings = None


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> GodotCheckSettings:
    """Get settings for CLI commands with consistent precedence.

    Args:
        config_file: Optional specific config file to load. If not provided,
                    uses standard config locations.
        cli_overrides: Dictionary of CLI argument overrides.
                      Only non-None values are applied.

    Returns:
        GodotCheckSettings instance with all sources merged.

    Raises:
        FileNotFoundError: If config_file is specified but doesn't exist.
    """
    if config_file:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        return GodotCheckSettings.from_multiple_sources(
            config_files=[config_file],
            cli_args=cli_overrides,
        )

    config_paths = _get_config_paths()
    return GodotCheckSettings.from_multiple_sources(
        config_files=config_paths,
        cli_args=cli_overrides,
    )
