"""
CLI-related exceptions.

All exceptions related to the interactive shell and command-line usage.
"""

from typing import Optional

from .base import BookstoreError, ExceptionContext


class CLIError(BookstoreError):
    """Base class for CLI-related errors."""


class InvalidMenuChoiceError(CLIError):
    """Raised when the menu receives a number outside the recognised set."""

    def __init__(self, choice: int):
        self.choice = choice
        context = ExceptionContext(
            error_code="INVALID_MENU_CHOICE", context={"choice": choice}
        )
        super().__init__("Invalid choice! Please select a valid option.", context)


class InputClosedError(CLIError):
    """Raised when standard input reaches end-of-stream while a prompt is waiting."""

    def __init__(self, prompt: Optional[str] = None):
        message = "Input stream closed unexpectedly"
        if prompt:
            message += f" while waiting for: {prompt.strip()}"
        context = ExceptionContext(
            help_text="The shell needs an open terminal or piped input ending with the exit option",
            error_code="INPUT_CLOSED",
        )
        super().__init__(message, context)


class NonNumericChoiceError(CLIError):
    """Raised when the menu input is not a whole number."""

    def __init__(self, raw: str):
        self.raw = raw
        context = ExceptionContext(
            error_code="NON_NUMERIC_CHOICE", context={"input": raw}
        )
        super().__init__("Please enter a valid number!", context)
