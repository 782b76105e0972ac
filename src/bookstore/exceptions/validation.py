"""
Input validation exceptions.

Raised while turning operator input into book fields. The shell recovers from
all of them by printing ``message`` and prompting again.
"""

from .base import BookstoreError, ExceptionContext


class ValidationError(BookstoreError):
    """Base class for field validation errors."""

    def __init__(self, field: str, message: str, error_code: str, value=None):
        self.field = field
        self.value = value
        context = ExceptionContext(
            error_code=error_code, context={"field": field, "value": value}
        )
        super().__init__(message, context)

    @property
    def label(self) -> str:
        return field_label(self.field)


def field_label(field: str) -> str:
    """Operator-facing name of a field: ``isbn`` -> ``ISBN``, ``title`` -> ``Title``."""
    if field.lower() == "isbn":
        return "ISBN"
    return field.capitalize()


class EmptyFieldError(ValidationError):
    """Raised when a required text field is blank after trimming."""

    def __init__(self, field: str):
        super().__init__(
            field,
            f"{field_label(field)} cannot be empty. Please enter again.",
            "EMPTY_FIELD",
        )


class NonNumericInputError(ValidationError):
    """Raised when a numeric field does not parse."""

    def __init__(self, field: str, value: str):
        super().__init__(
            field,
            f"Please enter a valid number for {field.lower()}!",
            "NON_NUMERIC_INPUT",
            value,
        )


class NegativeValueError(ValidationError):
    """Raised when a numeric field parses but is below zero."""

    def __init__(self, field: str, value):
        super().__init__(
            field,
            f"{field_label(field)} cannot be negative. Please enter again.",
            "NEGATIVE_VALUE",
            value,
        )
