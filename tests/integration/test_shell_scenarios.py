"""
End-to-end operator scenarios.

Each scenario starts the program with no arguments on an empty inventory and
feeds newline-separated answers on standard input.
"""

import pytest
from click.testing import CliRunner

from bookstore.cli.core import cli

ALPHA_LINE = "ISBN: 978-1, Title: Alpha, Author: Ann, Quantity: 3, Price: $9.5"
ADD_ALPHA = ["1", "978-1", "Alpha", "Ann", "3", "9.5"]


@pytest.fixture
def session():
    runner = CliRunner()

    def _session(lines):
        result = runner.invoke(cli, [], input="".join(f"{line}\n" for line in lines))
        assert result.exit_code == 0, result.output
        return result.output

    return _session


class TestScenarios:

    def test_add_then_list(self, session):
        output = session(ADD_ALPHA + ["4", "6"])
        assert "Book added!" in output
        assert ALPHA_LINE in output

    def test_duplicate_rejection(self, session):
        output = session(ADD_ALPHA + ["1", "978-1", "Beta", "Bob", "1", "2.0", "4", "6"])
        assert "Error! ISBN already exists." in output
        listing = output.split("Error! ISBN already exists.")[1]
        assert ALPHA_LINE in listing
        assert "Title: Beta" not in listing

    def test_search_miss(self, session):
        assert "Book not found!" in session(["3", "nope", "6"])

    def test_negative_quantity_rejected(self, session):
        output = session(["1", "x", "T", "A", "-2", "0", "5", "4", "6"])
        assert "Quantity cannot be negative. Please enter again." in output
        assert "Book added!" in output
        assert "ISBN: x, Title: T, Author: A, Quantity: 0, Price: $5.0" in output

    def test_delete_path(self, session):
        output = session(ADD_ALPHA + ["5", "978-1", "4", "6"])
        assert "Book deleted successfully!" in output
        assert "No books in the inventory." in output

    def test_update_of_missing_record(self, session):
        assert "Book not found!" in session(["2", "ghost", "6"])

    def test_update_then_search(self, session):
        output = session(ADD_ALPHA + ["2", "978-1", "Alpha 2e", "Ann", "4", "10", "3", "978-1", "6"])
        assert "Book updated!" in output
        assert "ISBN: 978-1, Title: Alpha 2e, Author: Ann, Quantity: 4, Price: $10.0" in output
