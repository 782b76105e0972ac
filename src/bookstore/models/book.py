"""Book record and the patch applied when a record is updated."""

import math
from dataclasses import dataclass

from bookstore.exceptions import NonNumericInputError

from .fields import format_price, normalize_price, require_non_negative, require_text


def _check_quantity(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise NonNumericInputError("quantity", value)
    return require_non_negative("quantity", value)


def _check_price(value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise NonNumericInputError("price", value)
    return normalize_price(require_non_negative("price", value))


@dataclass
class Book:
    """A title held in stock, keyed by ISBN.

    Text fields are stored trimmed and must not be empty; quantity and price
    must not be negative. Violations raise the matching ValidationError.
    """

    isbn: str
    title: str
    author: str
    quantity: int
    price: float

    def __post_init__(self):
        self.isbn = require_text("isbn", self.isbn)
        self.title = require_text("title", self.title)
        self.author = require_text("author", self.author)
        self.quantity = _check_quantity(self.quantity)
        self.price = _check_price(self.price)

    def render(self) -> str:
        return (
            f"ISBN: {self.isbn}, Title: {self.title}, Author: {self.author}, "
            f"Quantity: {self.quantity}, Price: ${format_price(self.price)}"
        )

    def __str__(self) -> str:
        return self.render()

    def apply(self, patch: "BookPatch") -> "Book":
        """Overwrite every mutable field from ``patch``. The ISBN never changes."""
        self.title = patch.title
        self.author = patch.author
        self.quantity = patch.quantity
        self.price = patch.price
        return self


@dataclass(frozen=True)
class BookPatch:
    """New title, author, quantity and price for an existing book."""

    title: str
    author: str
    quantity: int
    price: float

    def __post_init__(self):
        # frozen dataclass, so normalised values go in through object.__setattr__
        object.__setattr__(self, "title", require_text("title", self.title))
        object.__setattr__(self, "author", require_text("author", self.author))
        object.__setattr__(self, "quantity", _check_quantity(self.quantity))
        object.__setattr__(self, "price", _check_price(self.price))
