"""Pytest configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from godotcheck.config import GodotCheckSettings, reset_settings, set_settings
from godotcheck.parser import Script, ScriptParser
from tests.cli_fixtures import clean_runner, cli_helper, cli_invoke  # noqa: F401

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def reset_global_settings(monkeypatch):
    """Reset global settings and drop GODOTCHECK_ variables around each test."""
    import os

    for var in [k for k in os.environ if k.startswith("GODOTCHECK_")]:
        monkeypatch.delenv(var)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def godot_project() -> Path:
    """Path to the sample Godot project."""
    return FIXTURES_DIR / "godot_project"


@pytest.fixture
def settings(tmp_path) -> GodotCheckSettings:
    """Default settings rooted at an empty temporary project."""
    settings = GodotCheckSettings(project_root=tmp_path)
    set_settings(settings)
    return settings


@pytest.fixture
def make_script() -> Callable[..., Script]:
    """Build a Script from a file name and contents without touching disk."""
    parser = ScriptParser()

    def _make(file_name: str, contents: str) -> Script:
        path = Path("/project") / file_name
        return parser.parse(path, contents, f"res://{file_name}")

    return _make


@pytest.fixture
def write_file(tmp_path) -> Callable[[str, str], Path]:
    """Write a file below tmp_path, creating parent directories."""

    def _write(relative: str, contents: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
        return path

    return _write
