"""Base validator classes for CLI input."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ValidationError(Exception):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize validation error.

        Args:
            message: Error message
            field: Optional field name that failed validation
        """
        self.field = field
        super().__init__(message)


class Validator(ABC, Generic[T]):
    """Base class for input validators."""

    @abstractmethod
    def validate(self, value: Any) -> T:
        """Validate input value.

        Args:
            value: Value to validate

        Returns:
            Validated value, possibly transformed

        Raises:
            ValidationError: If validation fails
        """
        pass

    def validate_required(self, value: Any, field_name: str) -> Any:
        """Validate that a value is not None or empty."""
        if value is None:
            raise ValidationError(f"{field_name} is required", field_name)
        if isinstance(value, str) and not value.strip():
            raise ValidationError(f"{field_name} cannot be empty", field_name)
        return value
