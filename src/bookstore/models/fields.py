"""
Field parsing and validation for book records.

Used by the record model to enforce its invariants and by the shell to turn
raw operator input into typed values.
"""

import math
import re
from decimal import Decimal

from bookstore.exceptions import EmptyFieldError, NegativeValueError, NonNumericInputError

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
_DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def require_text(field: str, value: str) -> str:
    """Return ``value`` trimmed, or raise EmptyFieldError if nothing is left."""
    text = (value or "").strip()
    if not text:
        raise EmptyFieldError(field)
    return text


def require_non_negative(field: str, value):
    if value < 0:
        raise NegativeValueError(field, value)
    return value


def parse_quantity(raw: str, field: str = "quantity") -> int:
    """Parse a whole, non-negative number of copies."""
    text = (raw or "").strip()
    if not _INTEGER_PATTERN.match(text):
        raise NonNumericInputError(field, raw)
    return require_non_negative(field, int(text))


def parse_price(raw: str, field: str = "price") -> float:
    """Parse a finite, non-negative decimal price."""
    text = (raw or "").strip()
    if not _DECIMAL_PATTERN.match(text):
        raise NonNumericInputError(field, raw)
    value = float(text)
    if not math.isfinite(value):
        raise NonNumericInputError(field, raw)
    return normalize_price(require_non_negative(field, value))


def normalize_price(value) -> float:
    # -0.0 would otherwise render as "$-0.0"
    value = float(value)
    return 0.0 if value == 0 else value


def format_price(price: float) -> str:
    """Plain decimal text with at least one fractional digit: 9.5, 2.0, 10.0."""
    text = repr(float(price))
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if "." not in text:
        text += ".0"
    return text
