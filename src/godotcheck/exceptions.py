"""Custom exception hierarchy for godotcheck with helpful error messages."""

from __future__ import annotations

from typing import Any


class GodotCheckError(Exception):
    """Base exception with helpful formatting for all godotcheck errors.

    Provides structured error messages with hints and details to help users
    understand and fix problems.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception with structured error information.

        Args:
            message: Primary error message describing what went wrong
            hint: Optional hint suggesting how to fix the problem
            details: Optional dictionary with additional debugging information
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Format the error message with hint and details.

        Returns:
            Formatted error string with all available information
        """
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class ConfigurationError(GodotCheckError):
    """Configuration errors including invalid settings and missing config files."""

    pass


class ParseError(GodotCheckError):
    """A script or scene file could not be turned into a model.

    These are fatal to the single file being built but never to the run.
    """

    def __init__(
        self,
        message: str,
        file: str | None = None,
        code: str = "parse",
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize parse error.

        Args:
            message: Error message, starting with the offending file name
            file: File name (with extension) of the offending file
            code: Short identifier of the failure kind
            hint: Optional hint
            details: Optional debugging details
        """
        self.file = file
        self.code = code
        super().__init__(message=message, hint=hint, details=details)


class RuleViolation(GodotCheckError):
    """A script or scene breaks one of the project conventions."""

    def __init__(
        self,
        message: str,
        file: str,
        rule: str,
        hint: str | None = None,
    ) -> None:
        """Initialize rule violation.

        Args:
            message: Human readable message, starting with the file name
            file: File name (with extension) of the offending file
            rule: Identifier of the broken rule
            hint: Optional hint on how to fix it
        """
        self.file = file
        self.rule = rule
        super().__init__(message=message, hint=hint)


class DiscoveryError(GodotCheckError):
    """The project tree could not be walked. Fatal to the whole run."""

    pass


def check_config_keys(config: dict[str, Any]) -> None:
    """Check for common configuration mistakes.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: With hints about correct configuration keys
    """
    wrong_keys = {
        "root": "project_root",
        "exclude": "skip_dirs",
        "skip_directories": "skip_dirs",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )
