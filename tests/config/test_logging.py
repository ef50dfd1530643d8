"""Tests for the logging configuration module."""

import logging
from logging.handlers import RotatingFileHandler

import pytest
import structlog

import godotcheck.config
from godotcheck.config import GodotCheckSettings, configure_logging
from godotcheck.config.logging import _build_formatter, get_logger


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Reset logging state before each test to ensure isolation."""
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers.copy()

    yield

    for handler in root_logger.handlers.copy():
        root_logger.removeHandler(handler)
        if handler not in original_handlers:
            handler.close()
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)
    structlog.reset_defaults()


class TestConfigureLogging:
    """Test configure_logging."""

    @pytest.mark.parametrize(
        ("level_str", "level_const"),
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
        ],
    )
    def test_log_level(self, level_str, level_const):
        """Test the root logger level follows the settings."""
        configure_logging(GodotCheckSettings(log_level=level_str))
        assert logging.getLogger().level == level_const

    def test_console_handler_only(self):
        """Test only a stderr handler is installed by default."""
        configure_logging(GodotCheckSettings())
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0], RotatingFileHandler)

    def test_log_file(self, tmp_path):
        """Test a rotating file handler is added for log_file."""
        log_file = tmp_path / "logs" / "godotcheck.log"
        configure_logging(GodotCheckSettings(log_file=log_file, log_level="INFO"))

        get_logger("godotcheck.test").info("Checked project", scripts=3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert any(
            isinstance(h, RotatingFileHandler) for h in logging.getLogger().handlers
        )
        assert "Checked project" in log_file.read_text(encoding="utf-8")

    def test_invalid_level(self):
        """Test levels unknown to logging are rejected."""
        settings = GodotCheckSettings().model_copy(update={"log_level": "LOUD"})
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging(settings)


class TestFormatter:
    """Test _build_formatter."""

    def test_json_renderer(self):
        """Test the json format renders JSON."""
        formatter = _build_formatter("json")
        assert isinstance(formatter.processors[-1], structlog.processors.JSONRenderer)

    def test_structured_renderer(self):
        """Test the structured format renders key=value pairs."""
        formatter = _build_formatter("structured")
        assert isinstance(
            formatter.processors[-1], structlog.processors.KeyValueRenderer
        )

    def test_console_renderer(self):
        """Test the console format is the default."""
        formatter = _build_formatter("console")
        assert isinstance(formatter.processors[-1], structlog.dev.ConsoleRenderer)


def test_get_logger_is_cached():
    """Test the package level get_logger caches loggers by name."""
    first = godotcheck.config.get_logger("godotcheck.cached")
    assert godotcheck.config.get_logger("godotcheck.cached") is first
