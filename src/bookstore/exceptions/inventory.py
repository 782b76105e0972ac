"""
Inventory-related exceptions.

All exceptions raised by the in-memory inventory store.
"""

from .base import BookstoreError, ExceptionContext


class InventoryError(BookstoreError):
    """Base class for inventory store errors."""


class DuplicateIsbnError(InventoryError):
    """Raised when inserting a book whose ISBN is already in the inventory."""

    def __init__(self, isbn: str):
        self.isbn = isbn
        context = ExceptionContext(
            help_text="Use 'Update book' to change an existing record",
            error_code="DUPLICATE_ISBN",
            context={"isbn": isbn},
        )
        super().__init__("Error! ISBN already exists.", context)


class BookNotFoundError(InventoryError):
    """Raised when an operation targets an ISBN that is not in the inventory."""

    def __init__(self, isbn: str):
        self.isbn = isbn
        context = ExceptionContext(
            help_text="Use 'List all books' to see the ISBNs on record",
            error_code="BOOK_NOT_FOUND",
            context={"isbn": isbn},
        )
        super().__init__("Book not found!", context)
