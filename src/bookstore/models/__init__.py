from .book import Book, BookPatch
from .fields import format_price, parse_price, parse_quantity, require_text

__all__ = [
    "Book",
    "BookPatch",
    "format_price",
    "parse_price",
    "parse_quantity",
    "require_text",
]
