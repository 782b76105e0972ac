"""
Configuration-related exceptions.

All exceptions related to configuration parsing, validation, and management.
"""

from typing import Any, List, Optional

from .base import BookstoreError, ExceptionContext


class ConfigurationError(BookstoreError):
    """Base class for configuration-related errors."""

    def __init__(
        self,
        message: str,
        help_text: Optional[str] = None,
        context: Optional[ExceptionContext] = None,
    ):
        if context is None:
            context = ExceptionContext(help_text=help_text, error_code="CONFIG_ERROR")
        super().__init__(message, context)


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        message = f"Invalid configuration for '{field}': got {repr(value)}, expected {expected}"
        help_text = f"Please check the configuration for '{field}' and ensure it matches the expected format: {expected}"
        context = ExceptionContext(
            help_text=help_text,
            error_code="CONFIG_INVALID",
            user_action="Run 'bookstore config --show' to see the effective settings",
        )
        super().__init__(message, context=context)


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"

        context = ExceptionContext(
            help_text="Please check your configuration file and fix the validation errors listed above",
            error_code="CONFIG_VALIDATION",
            user_action="Run 'bookstore config --init' to write a fresh default file",
        )
        super().__init__(message, context=context)
