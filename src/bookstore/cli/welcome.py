"""Optional welcome banner shown before the first menu."""

from . import __version__


def show_welcome(console):
    console.print_panel(
        f"Bookstore v{__version__}\n\n"
        "Inventory for this session lives in memory only.\n"
        "Pick a number from the menu; choose 6 to exit.",
        title="Welcome to Bookstore",
        style="green",
    )
