"""CLI commands for Bookstore."""

from .config import config
from .shell import shell

__all__ = [
    "config",
    "shell",
]
