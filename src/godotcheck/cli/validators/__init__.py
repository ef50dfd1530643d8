"""CLI input validators."""

from godotcheck.cli.validators.base import ValidationError, Validator
from godotcheck.cli.validators.file_validator import (
    ConfigFileValidator,
    DirectoryValidator,
    FileValidator,
)

__all__ = [
    "ConfigFileValidator",
    "DirectoryValidator",
    "FileValidator",
    "ValidationError",
    "Validator",
]
