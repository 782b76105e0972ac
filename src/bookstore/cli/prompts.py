"""
Validated prompt loops.

Each prompt repeats until the answer passes the field's parser, printing the
validation error's message on every rejection.
"""

from typing import Callable, TypeVar

from bookstore.exceptions import ValidationError
from bookstore.logging_integration import get_module_logger
from bookstore.models import parse_price, parse_quantity, require_text

from .console import ShellConsole

logger = get_module_logger()

T = TypeVar("T")


def prompt_until_valid(console: ShellConsole, prompt: str, parse: Callable[[str], T]) -> T:
    while True:
        raw = console.read_line(prompt)
        try:
            return parse(raw)
        except ValidationError as e:
            logger.debug("Rejected input", field=e.field, error_code=e.error_code)
            console.print(e.message)


def prompt_text(console: ShellConsole, prompt: str, field: str) -> str:
    """Prompt until a non-empty answer is given; returns it trimmed."""
    return prompt_until_valid(console, prompt, lambda raw: require_text(field, raw))


def prompt_quantity(console: ShellConsole, prompt: str) -> int:
    return prompt_until_valid(console, prompt, parse_quantity)


def prompt_price(console: ShellConsole, prompt: str) -> float:
    return prompt_until_valid(console, prompt, parse_price)
