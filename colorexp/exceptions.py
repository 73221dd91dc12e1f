"""Custom exceptions for colorexp."""

from typing import Any


class ColorexpError(Exception):
    """Base exception for all colorexp errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize colorexp error.

        Args:
            message: Error message
            details: Additional error details

        """
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(ColorexpError):
    """Raised when configuration is invalid or missing."""


class ValidationError(ColorexpError):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, message: str) -> None:
        super().__init__(message, {"field": field, "value": value})
        self.field = field
        self.value = value


class RegexValidationError(ValidationError):
    """Raised when regex pattern validation fails."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__("pattern", pattern, f"Invalid regular expression: {reason}")
        self.pattern = pattern
        self.reason = reason


class InputStreamError(ColorexpError):
    """Raised when standard input cannot be read line by line."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message, {"line_number": line_number})
        self.line_number = line_number


class SpanBoundsError(ColorexpError):
    """Raised when a span cannot be placed on the line it is rendered into.

    Only a broken span from the collector can trigger this, never user input.
    """

    def __init__(self, index: int, length: int) -> None:
        message = f"Span offset {index} out of bounds for line of length {length}"
        super().__init__(message, {"index": index, "length": length})
        self.index = index
        self.length = length
