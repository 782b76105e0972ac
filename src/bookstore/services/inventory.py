"""
In-memory inventory store.

Books are keyed by ISBN in an insertion-ordered dict, which gives O(1) lookup
and a stable listing order. Removing a book never reorders the others.
"""

from typing import Dict, Iterator, List, Optional

from bookstore.exceptions import BookNotFoundError, DuplicateIsbnError
from bookstore.logging_integration import get_module_logger
from bookstore.models import Book, BookPatch

logger = get_module_logger()


class Inventory:
    """The collection of books for one session."""

    def __init__(self):
        self._books: Dict[str, Book] = {}

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, isbn: object) -> bool:
        return isbn in self._books

    def __iter__(self) -> Iterator[Book]:
        return iter(list(self._books.values()))

    @property
    def is_empty(self) -> bool:
        return not self._books

    def lookup(self, isbn: str) -> Optional[Book]:
        """Return the book with this exact ISBN, or None."""
        return self._books.get(isbn)

    def insert(self, book: Book) -> None:
        if book.isbn in self._books:
            logger.info("Rejected duplicate ISBN", isbn=book.isbn)
            raise DuplicateIsbnError(book.isbn)
        self._books[book.isbn] = book
        logger.debug("Book inserted", isbn=book.isbn, count=len(self._books))

    def remove(self, isbn: str) -> Book:
        try:
            book = self._books.pop(isbn)
        except KeyError:
            raise BookNotFoundError(isbn) from None
        logger.debug("Book removed", isbn=isbn, count=len(self._books))
        return book

    def enumerate(self) -> List[Book]:
        """All books in insertion order."""
        return list(self._books.values())

    def mutate(self, isbn: str, patch: BookPatch) -> Book:
        """Apply ``patch`` to the book with this ISBN in a single step."""
        book = self._books.get(isbn)
        if book is None:
            raise BookNotFoundError(isbn)
        book.apply(patch)
        logger.debug("Book updated", isbn=isbn)
        return book
