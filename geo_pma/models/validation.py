"""
Validation module for decoded feature data.

This module provides the validation results gathered while decoding
GeoServer feature collections, and the exceptions raised by the
decoding, joining and formatting stages.
"""

from dataclasses import dataclass, field
from typing import List, Any, Optional


@dataclass
class ValidationError:
    """Represents a single validation error."""

    field: str
    message: str
    value: Any = None

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.field}: {self.message} (value: {self.value!r})"
        return f"{self.field}: {self.message}"


@dataclass
class ValidationResult:
    """Result of a validation operation."""

    errors: List[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0

    def add_error(self, field: str, message: str, value: Any = None) -> None:
        """Add a validation error."""
        self.errors.append(ValidationError(field, message, value))

    @classmethod
    def error(cls, field: str, message: str, value: Any = None) -> 'ValidationResult':
        """Create a validation result with a single error."""
        return cls(errors=[ValidationError(field, message, value)])

    def __str__(self) -> str:
        if self.is_valid:
            return "Valid"
        return f"Invalid ({len(self.errors)} errors)"

    def get_error_messages(self) -> List[str]:
        """Get all error messages as strings."""
        return [str(error) for error in self.errors]


class ModelValidationError(Exception):
    """Exception raised when a feature collection cannot be decoded."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        """
        Initialize validation error.

        Args:
            message: Error message
            validation_result: Optional ValidationResult with the per-feature errors
        """
        super().__init__(message)
        self.validation_result = validation_result

    def __str__(self) -> str:
        msg = super().__str__()
        if self.validation_result and not self.validation_result.is_valid:
            messages = self.validation_result.get_error_messages()
            shown = "\n  - ".join(messages[:10])
            msg += f"\n  - {shown}"
            if len(messages) > 10:
                msg += f"\n  ... and {len(messages) - 10} more"
        return msg


class FeatureDecodeError(ValueError):
    """Raised when a properties object does not match the shape of its feature kind."""

    def __init__(self, kind: str, field: str, message: str, value: Any = None):
        self.kind = kind
        self.field = field
        self.value = value
        super().__init__(f"{kind}.{field}: {message}")


class PreconditionError(ValueError):
    """Raised when a record violates a precondition needed to derive output."""


class UnsupportedKindError(TypeError):
    """Raised when a record kind has no output line template."""
