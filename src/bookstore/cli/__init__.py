"""Command-line interface for Bookstore."""

from bookstore import __version__

__all__ = ["__version__"]
