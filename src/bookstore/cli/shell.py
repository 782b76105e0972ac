"""
Interactive inventory shell.

Prints the menu, reads a choice and dispatches to one handler per menu entry.
Every handler returns to the menu; only the Exit choice ends the loop.
"""

from enum import IntEnum
from typing import Callable, Dict, Optional

from bookstore.exceptions import (
    BookNotFoundError,
    DuplicateIsbnError,
    InvalidMenuChoiceError,
    NonNumericChoiceError,
)
from bookstore.logging_integration import get_module_logger
from bookstore.models import Book, BookPatch
from bookstore.services import Inventory

from .console import ShellConsole
from .prompts import prompt_price, prompt_quantity, prompt_text

logger = get_module_logger()


class MenuChoice(IntEnum):
    """Menu entries, numbered as the operator types them."""

    ADD = 1
    UPDATE = 2
    SEARCH = 3
    LIST = 4
    DELETE = 5
    EXIT = 6

    @property
    def label(self) -> str:
        return MENU_LABELS[self]


MENU_LABELS = {
    MenuChoice.ADD: "Add book",
    MenuChoice.UPDATE: "Update book",
    MenuChoice.SEARCH: "Search book",
    MenuChoice.LIST: "List all books",
    MenuChoice.DELETE: "Delete book",
    MenuChoice.EXIT: "Exit",
}


def render_menu() -> str:
    lines = ["", "Choose an option:"]
    lines.extend(f"{choice.value}. {choice.label}" for choice in MenuChoice)
    return "\n".join(lines)


def parse_choice(raw: str) -> MenuChoice:
    """Turn a menu answer into a MenuChoice.

    Raises:
        NonNumericChoiceError: if the answer is not a whole number.
        InvalidMenuChoiceError: if the number is not on the menu.
    """
    try:
        number = int(raw.strip())
    except ValueError:
        raise NonNumericChoiceError(raw) from None
    try:
        return MenuChoice(number)
    except ValueError:
        raise InvalidMenuChoiceError(number) from None


class BookstoreShell:
    """Menu-driven operations over one Inventory."""

    def __init__(self, inventory: Inventory, console: ShellConsole):
        self.inventory = inventory
        self.console = console
        self._handlers: Dict[MenuChoice, Callable[[], None]] = {
            MenuChoice.ADD: self.add_book,
            MenuChoice.UPDATE: self.update_book,
            MenuChoice.SEARCH: self.search_book,
            MenuChoice.LIST: self.list_books,
            MenuChoice.DELETE: self.delete_book,
        }

    def run(self) -> None:
        """Loop until the operator picks Exit."""
        logger.info("Shell started")
        while self.run_once():
            pass
        logger.info("Shell exited", books=len(self.inventory))

    def run_once(self) -> bool:
        """Show the menu and service one choice. Returns False on Exit."""
        self.console.print(render_menu())
        choice = self.read_choice()
        if choice is None:
            return True
        if choice is MenuChoice.EXIT:
            return False

        logger.debug("Dispatching", choice=choice.name)
        self._handlers[choice]()
        return True

    def read_choice(self) -> Optional[MenuChoice]:
        try:
            return parse_choice(self.console.read_line())
        except (NonNumericChoiceError, InvalidMenuChoiceError) as e:
            self.console.print(e.message)
            return None

    def _read_isbn(self, prompt: str) -> str:
        # Stored ISBNs are trimmed, so the lookup key is too
        return self.console.read_line(prompt).strip()

    def add_book(self) -> None:
        isbn = prompt_text(self.console, "Enter ISBN: ", "isbn")
        title = prompt_text(self.console, "Enter title: ", "title")
        author = prompt_text(self.console, "Enter author: ", "author")
        quantity = prompt_quantity(self.console, "Enter quantity: ")
        price = prompt_price(self.console, "Enter price: ")

        try:
            self.inventory.insert(Book(isbn, title, author, quantity, price))
        except DuplicateIsbnError as e:
            self.console.print(e.message)
            return
        logger.info("Book added", isbn=isbn)
        self.console.print("Book added!")

    def update_book(self) -> None:
        """Collect a complete patch first, then apply it in one step."""
        isbn = self._read_isbn("Enter ISBN to update: ")
        if self.inventory.lookup(isbn) is None:
            self.console.print(BookNotFoundError(isbn).message)
            return

        patch = BookPatch(
            title=prompt_text(self.console, "Enter updated title: ", "title"),
            author=prompt_text(self.console, "Enter updated author: ", "author"),
            quantity=prompt_quantity(self.console, "Enter updated quantity: "),
            price=prompt_price(self.console, "Enter updated price: "),
        )
        try:
            self.inventory.mutate(isbn, patch)
        except BookNotFoundError as e:
            self.console.print(e.message)
            return
        logger.info("Book updated", isbn=isbn)
        self.console.print("Book updated!")

    def search_book(self) -> None:
        isbn = self._read_isbn("Enter ISBN to search: ")
        book = self.inventory.lookup(isbn)
        if book is None:
            self.console.print(BookNotFoundError(isbn).message)
        else:
            self.console.print(book.render())

    def list_books(self) -> None:
        books = self.inventory.enumerate()
        if not books:
            self.console.print("No books in the inventory.")
            return
        for book in books:
            self.console.print(book.render())

    def delete_book(self) -> None:
        isbn = self._read_isbn("Enter ISBN of the book to delete: ")
        try:
            self.inventory.remove(isbn)
        except BookNotFoundError as e:
            self.console.print(e.message)
            return
        logger.info("Book deleted", isbn=isbn)
        self.console.print("Book deleted successfully!")
