"""
Bookstore Exception Hierarchy

All exceptions carry an operator-facing message plus optional help text,
error code and context for logging.

Exception Hierarchy:
    BookstoreError (base)
    ├── ValidationError
    │   ├── EmptyFieldError
    │   ├── NonNumericInputError
    │   └── NegativeValueError
    ├── InventoryError
    │   ├── DuplicateIsbnError
    │   └── BookNotFoundError
    ├── CLIError
    │   ├── InvalidMenuChoiceError
    │   ├── NonNumericChoiceError
    │   └── InputClosedError
    └── ConfigurationError
        ├── InvalidConfigurationError
        └── ConfigurationValidationError
"""

from .base import BookstoreError, ExceptionContext

# CLI exceptions
from .cli import (
    CLIError,
    InputClosedError,
    InvalidMenuChoiceError,
    NonNumericChoiceError,
)

# Configuration exceptions
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

# Inventory exceptions
from .inventory import BookNotFoundError, DuplicateIsbnError, InventoryError

# Validation exceptions
from .validation import (
    EmptyFieldError,
    NegativeValueError,
    NonNumericInputError,
    ValidationError,
)

__all__ = [
    # Base
    "BookstoreError",
    "ExceptionContext",
    # Validation
    "ValidationError",
    "EmptyFieldError",
    "NonNumericInputError",
    "NegativeValueError",
    # Inventory
    "InventoryError",
    "DuplicateIsbnError",
    "BookNotFoundError",
    # CLI
    "CLIError",
    "InvalidMenuChoiceError",
    "NonNumericChoiceError",
    "InputClosedError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]
