"""
Bookstore: interactive inventory manager for a small bookstore.

Architecture Overview:
- Models: the Book record and field validation
- Services: the in-memory Inventory store
- CLI: the menu-driven shell and the command-line entry point
- Core / logging / exceptions: configuration, logging and the error hierarchy
"""

__version__ = "0.1.0"

from .exceptions import BookstoreError
from .models import Book, BookPatch
from .services import Inventory

__all__ = [
    "Book",
    "BookPatch",
    "Inventory",
    "BookstoreError",
]
