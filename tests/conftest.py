"""
Pytest configuration and shared fixtures for Bookstore tests.
"""

import io
import os

import pytest

from bookstore.cli.console import ShellConsole
from bookstore.cli.shell import BookstoreShell
from bookstore.models import Book
from bookstore.services import Inventory


@pytest.fixture
def inventory():
    """An empty inventory."""
    return Inventory()


@pytest.fixture
def sample_book():
    return Book("978-1", "Alpha", "Ann", 3, 9.5)


@pytest.fixture
def stocked_inventory(inventory):
    """Inventory holding three books, inserted in ISBN order."""
    inventory.insert(Book("978-1", "Alpha", "Ann", 3, 9.5))
    inventory.insert(Book("978-2", "Beta", "Bob", 1, 2.0))
    inventory.insert(Book("978-3", "Gamma", "Cid", 0, 12.25))
    return inventory


@pytest.fixture
def run_shell():
    """Run a shell session over scripted input lines and return its stdout.

    The inventory defaults to a fresh one and can be passed in to inspect it
    after the session.
    """

    def _run(lines, inventory=None):
        inventory = inventory if inventory is not None else Inventory()
        output = io.StringIO()
        console = ShellConsole(io.StringIO("".join(f"{line}\n" for line in lines)), output)
        BookstoreShell(inventory, console).run()
        return output.getvalue()

    return _run


@pytest.fixture(autouse=True)
def clean_environment(tmp_path, monkeypatch):
    """Keep tests away from the real home directory and BOOKSTORE_* variables."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for var in list(os.environ):
        if var.startswith("BOOKSTORE_"):
            monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def config_file(tmp_path):
    """Path for a temporary config file (not created)."""
    return tmp_path / "config" / "config.toml"


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests based on their location."""
    for item in items:
        path = str(item.fspath)
        if f"{os.sep}integration{os.sep}" in path:
            item.add_marker(pytest.mark.integration)
        elif f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)
