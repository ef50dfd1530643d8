"""Tests for godotcheck settings loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from godotcheck.config import GodotCheckSettings, get_settings, get_settings_for_cli
from godotcheck.config.settings import set_settings
from godotcheck.exceptions import ConfigurationError


class TestDefaults:
    """Test default values."""

    def test_default_values(self, tmp_path, monkeypatch):
        """Test the defaults of every field."""
        monkeypatch.chdir(tmp_path)
        settings = GodotCheckSettings()
        assert settings.project_root == tmp_path.resolve()
        assert settings.script_extension == "gd"
        assert settings.scene_extension == "tscn"
        assert settings.skip_dirs == [".godot", "addons"]
        assert settings.resource_prefix == "res://"
        assert settings.allowed_master_types == ["Node", "Node2D", "Node3D"]
        assert settings.fail_fast is True
        assert settings.debug is False
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
        assert settings.log_file is None


class TestValidators:
    """Test field normalization."""

    def test_extension_dot_is_stripped(self):
        """Test '.gd' and 'gd' are equivalent."""
        settings = GodotCheckSettings(script_extension=".gd", scene_extension=" .scn")
        assert settings.script_extension == "gd"
        assert settings.scene_extension == "scn"

    def test_comma_separated_lists(self):
        """Test lists given as comma separated strings."""
        settings = GodotCheckSettings(
            skip_dirs="addons, .godot,,build", allowed_master_types="Node"
        )
        assert settings.skip_dirs == ["addons", ".godot", "build"]
        assert settings.allowed_master_types == ["Node"]

    def test_project_root_expansion(self, tmp_path, monkeypatch):
        """Test environment variables in paths are expanded."""
        monkeypatch.setenv("GAMES_DIR", str(tmp_path))
        settings = GodotCheckSettings(project_root="$GAMES_DIR/pushgame")
        assert settings.project_root == (tmp_path / "pushgame").resolve()

    def test_invalid_path_type(self):
        """Test non path values are rejected."""
        with pytest.raises(ValidationError):
            GodotCheckSettings(project_root=42)

    def test_log_level_case_insensitive(self):
        """Test log level is normalized to uppercase."""
        assert GodotCheckSettings(log_level="debug").log_level == "DEBUG"

    def test_log_format_case_insensitive(self):
        """Test log format is normalized to lowercase."""
        assert GodotCheckSettings(log_format="JSON").log_format == "json"

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            GodotCheckSettings(log_level="LOUD")


class TestEnvironment:
    """Test GODOTCHECK_ environment variables."""

    def test_from_env(self, tmp_path, monkeypatch):
        """Test values are read from the environment."""
        monkeypatch.setenv("GODOTCHECK_PROJECT_ROOT", str(tmp_path))
        monkeypatch.setenv("GODOTCHECK_FAIL_FAST", "false")
        monkeypatch.setenv("GODOTCHECK_SKIP_DIRS", '["vendor"]')
        settings = GodotCheckSettings.from_env()
        assert settings.project_root == tmp_path.resolve()
        assert settings.fail_fast is False
        assert settings.skip_dirs == ["vendor"]


class TestConfigFiles:
    """Test loading YAML, TOML and JSON files."""

    def test_yaml(self, tmp_path):
        """Test a YAML config file."""
        config = tmp_path / "godotcheck.yaml"
        config.write_text("fail_fast: false\nskip_dirs:\n  - vendor\n")
        settings = GodotCheckSettings.from_file(config)
        assert settings.fail_fast is False
        assert settings.skip_dirs == ["vendor"]

    def test_empty_yaml(self, tmp_path):
        """Test an empty YAML file yields defaults."""
        config = tmp_path / "godotcheck.yml"
        config.write_text("")
        assert GodotCheckSettings.read_config_file(config) == {}

    def test_toml(self, tmp_path):
        """Test a TOML config file."""
        config = tmp_path / "godotcheck.toml"
        config.write_text('allowed_master_types = ["Node", "Control"]\n')
        settings = GodotCheckSettings.from_file(config)
        assert settings.allowed_master_types == ["Node", "Control"]

    def test_json(self, tmp_path):
        """Test a JSON config file."""
        config = tmp_path / "godotcheck.json"
        config.write_text(json.dumps({"resource_prefix": "pck://"}))
        assert GodotCheckSettings.from_file(config).resource_prefix == "pck://"

    def test_unsupported_format(self, tmp_path):
        """Test an unsupported suffix is a configuration error."""
        config = tmp_path / "godotcheck.ini"
        config.write_text("[godotcheck]\n")
        with pytest.raises(ConfigurationError, match="Unsupported") as exc_info:
            GodotCheckSettings.from_file(config)
        assert exc_info.value.details["detected_format"] == ".ini"

    def test_non_mapping(self, tmp_path):
        """Test a file that is not a mapping is rejected."""
        config = tmp_path / "godotcheck.yaml"
        config.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            GodotCheckSettings.from_file(config)

    def test_wrong_key(self, tmp_path):
        """Test common mistakes in config keys are reported."""
        config = tmp_path / "godotcheck.yaml"
        config.write_text("exclude:\n  - vendor\n")
        with pytest.raises(ConfigurationError, match="exclude"):
            GodotCheckSettings.from_file(config)

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            GodotCheckSettings.from_file(tmp_path / "missing.yaml")


class TestMultipleSources:
    """Test precedence between sources."""

    def test_later_files_override(self, tmp_path):
        """Test later config files override earlier ones."""
        first = tmp_path / "first.yaml"
        first.write_text("fail_fast: false\nresource_prefix: a://\n")
        second = tmp_path / "second.json"
        second.write_text('{"resource_prefix": "b://"}')
        settings = GodotCheckSettings.from_multiple_sources([first, second])
        assert settings.fail_fast is False
        assert settings.resource_prefix == "b://"

    def test_cli_args_override_files(self, tmp_path):
        """Test CLI arguments win and None values are ignored."""
        config = tmp_path / "godotcheck.yaml"
        config.write_text("fail_fast: false\nresource_prefix: a://\n")
        settings = GodotCheckSettings.from_multiple_sources(
            [config], cli_args={"fail_fast": True, "resource_prefix": None}
        )
        assert settings.fail_fast is True
        assert settings.resource_prefix == "a://"

    def test_files_override_env(self, tmp_path, monkeypatch):
        """Test config files beat the environment only for keys they set."""
        monkeypatch.setenv("GODOTCHECK_RESOURCE_PREFIX", "env://")
        monkeypatch.setenv("GODOTCHECK_FAIL_FAST", "false")
        config = tmp_path / "godotcheck.yaml"
        config.write_text("resource_prefix: file://\n")
        settings = GodotCheckSettings.from_multiple_sources([config])
        assert settings.resource_prefix == "file://"
        assert settings.fail_fast is False

    def test_missing_file_is_skipped(self, tmp_path):
        """Test missing files in the list are skipped."""
        settings = GodotCheckSettings.from_multiple_sources(
            [tmp_path / "missing.yaml"]
        )
        assert settings.fail_fast is True


class TestGlobalSettings:
    """Test the global settings accessors."""

    def test_get_settings_is_cached(self, tmp_path, monkeypatch):
        """Test get_settings returns the same instance."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_settings() is get_settings()

    def test_get_settings_reads_project_config(self, tmp_path, monkeypatch):
        """Test a godotcheck.yaml in the working directory is picked up."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        (tmp_path / "godotcheck.yaml").write_text("fail_fast: false\n")
        assert get_settings().fail_fast is False

    def test_set_settings(self, tmp_path):
        """Test set_settings replaces the global instance."""
        settings = GodotCheckSettings(project_root=tmp_path)
        set_settings(settings)
        assert get_settings() is settings


class TestSettingsForCli:
    """Test get_settings_for_cli."""

    def test_explicit_config_file(self, tmp_path):
        """Test an explicit config file with overrides."""
        config = tmp_path / "godotcheck.toml"
        config.write_text("fail_fast = false\n")
        settings = get_settings_for_cli(
            config, cli_overrides={"project_root": str(tmp_path)}
        )
        assert settings.fail_fast is False
        assert settings.project_root == tmp_path.resolve()

    def test_missing_explicit_config_file(self, tmp_path):
        """Test an explicit missing config file is an error."""
        with pytest.raises(FileNotFoundError):
            get_settings_for_cli(tmp_path / "missing.yaml")

    def test_standard_locations(self, tmp_path, monkeypatch):
        """Test standard locations are used without an explicit file."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        config_dir = tmp_path / ".godotcheck"
        config_dir.mkdir()
        (config_dir / "config.json").write_text('{"skip_dirs": ["vendor"]}')
        settings = get_settings_for_cli()
        assert settings.skip_dirs == ["vendor"]
        assert settings.project_root == Path.cwd().resolve()
