"""File and path validators for CLI input."""

from __future__ import annotations

from pathlib import Path

from godotcheck.cli.validators.base import ValidationError, Validator
from godotcheck.config.settings import SUPPORTED_CONFIG_SUFFIXES


def _resolve(value: str | Path) -> Path:
    if isinstance(value, str):
        return Path(value).expanduser().resolve()
    return value.expanduser().resolve()


class FileValidator(Validator[Path]):
    """Validator for paths of existing files."""

    def __init__(self, extensions: list[str] | None = None) -> None:
        """Initialize file validator.

        Args:
            extensions: Allowed file extensions (e.g., [".yaml", ".toml"])
        """
        self.extensions = extensions

    def validate(self, value: str | Path) -> Path:
        """Validate file path.

        Raises:
            ValidationError: If validation fails
        """
        self.validate_required(value, "path")
        path = _resolve(value)

        if not path.exists():
            raise ValidationError(f"File does not exist: {path}")

        if not path.is_file():
            raise ValidationError(f"Path is not a file: {path}")

        if self.extensions and path.suffix.lower() not in self.extensions:
            raise ValidationError(
                f"Invalid file extension: {path.suffix}. "
                f"Expected one of: {', '.join(self.extensions)}"
            )

        return path


class DirectoryValidator(Validator[Path]):
    """Validator for directory paths."""

    def validate(self, value: str | Path) -> Path:
        """Validate directory path.

        Raises:
            ValidationError: If the path is missing or not a directory
        """
        self.validate_required(value, "path")
        path = _resolve(value)

        if not path.exists():
            raise ValidationError(f"Directory does not exist: {path}")
        if not path.is_dir():
            raise ValidationError(f"Path is not a directory: {path}")
        return path


class ConfigFileValidator(FileValidator):
    """Validator specifically for configuration files."""

    def __init__(self) -> None:
        """Initialize config file validator."""
        super().__init__(extensions=SUPPORTED_CONFIG_SUFFIXES)
