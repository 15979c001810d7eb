"""Error types for phonetic-keys.

The encoding core is total over string input and never raises. Errors only
surface at the boundaries:
- Malformed (non-string) names handed to the public API
- Invalid configuration files or overrides
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Categories of errors for handling decisions."""

    VALIDATION = "validation"  # Bad input to the public API
    CONFIGURATION = "configuration"  # Bad settings or rule tables
    INTERNAL = "internal"  # Bug in code


class PhoneticKeysError(Exception):
    """Base exception for phonetic-keys errors.

    Attributes:
        message: Human-readable error message
        category: Error category for handling
        context: Additional context information
    """

    category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} (context: {self.context})"
        return self.message


class InvalidArgumentError(PhoneticKeysError, TypeError):
    """A name passed to encode/match/similarity was not a string."""

    category = ErrorCategory.VALIDATION


class ConfigurationError(PhoneticKeysError):
    """Configuration error.

    Examples: unreadable settings file, unknown rule type, negative limits.
    """

    category = ErrorCategory.CONFIGURATION


def require_text(value: Any, argument: str) -> str:
    """Fail fast on non-string names before they reach the encoder.

    Args:
        value: Value supplied by the caller
        argument: Argument name, reported in the error context

    Returns:
        The value, unchanged

    Raises:
        InvalidArgumentError: If value is not a str
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{argument} must be a string, got {type(value).__name__}",
            context={"argument": argument},
        )
    return value


def format_error_for_display(error: Exception) -> str:
    """Format an error message for user display.

    Args:
        error: Error to format

    Returns:
        Human-readable error message
    """
    if isinstance(error, PhoneticKeysError):
        category = error.category.value
        base_message = error.message

        if error.context:
            context_str = ", ".join(f"{k}={v}" for k, v in error.context.items())
            return f"[{category}] {base_message} ({context_str})"

        return f"[{category}] {base_message}"

    return f"[error] {type(error).__name__}: {error}"
