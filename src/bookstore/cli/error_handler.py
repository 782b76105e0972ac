"""
Centralized error handling for the Bookstore CLI.

Recoverable errors are handled inside the shell. Anything that escapes it is
reported here, logged, and turned into a process exit code.
"""

import logging
import sys
from typing import Any, Callable, Optional

import click
from rich.console import Console
from rich.markup import escape

from bookstore.constants import (
    EXIT_APPLICATION,
    EXIT_CLI,
    EXIT_CONFIGURATION,
    EXIT_UNEXPECTED,
)
from bookstore.exceptions import BookstoreError, CLIError, ConfigurationError


class CLIErrorHandler:
    """Reports fatal errors on stderr and exits with a matching status."""

    def __init__(self, console: Optional[Console] = None, get_logger_func: Optional[Callable] = None):
        """Initialize the error handler.

        Args:
            console: Rich console for error output, stderr by default
            get_logger_func: Function returning a BookstoreLogger, if logging is set up
        """
        self.console = console or Console(stderr=True)
        self.get_logger = get_logger_func

    def handle_keyboard_interrupt(self) -> None:
        """Handle user cancellation (Ctrl+C)."""
        self.console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(EXIT_UNEXPECTED)

    def handle_configuration_error(self, error: ConfigurationError) -> None:
        self.console.print(f"[red]⚙️  Configuration Error: {escape(error.message)}[/red]")
        self._print_guidance(error)
        self._log_error("Configuration error occurred", error)
        sys.exit(EXIT_CONFIGURATION)

    def handle_cli_error(self, error: CLIError) -> None:
        self.console.print(f"[red]⌨️  Command Error: {escape(error.message)}[/red]")
        self._print_guidance(error)
        self._log_error("CLI error occurred", error)
        sys.exit(EXIT_CLI)

    def handle_bookstore_error(self, error: BookstoreError) -> None:
        """Handle any other Bookstore exception with full context."""
        self.console.print(f"[red]❌ Error: {escape(error.message)}[/red]")
        self._print_guidance(error)
        summary = error.context_summary()
        if summary:
            self.console.print(f"[dim]📋 Context: {escape(summary)}[/dim]")
        self.console.print(f"[dim]🔍 Error ID: {error.correlation_id}[/dim]")
        self._log_error("Bookstore error occurred", error)
        sys.exit(EXIT_APPLICATION)

    def handle_usage_error(self, error: click.ClickException) -> None:
        """Bad options or arguments; click formats the message itself."""
        error.show()
        sys.exit(error.exit_code)

    def handle_unexpected_error(self, error: Exception) -> None:
        self.console.print(f"[red]🐛 Unexpected Error: {escape(str(error))}[/red]")
        self.console.print("[yellow]This may be a bug. Run again with -vv to see the full log.[/yellow]")
        logging.getLogger("bookstore.cli.error").exception("Unexpected error occurred")
        sys.exit(EXIT_UNEXPECTED)

    def _print_guidance(self, error: BookstoreError) -> None:
        if error.help_text:
            self.console.print(f"[blue]💡 {escape(error.help_text)}[/blue]")
        if error.user_action:
            self.console.print(f"[green]🔧 Action: {escape(error.user_action)}[/green]")

    def _log_error(self, message: str, error: BookstoreError) -> None:
        if self.get_logger:
            logger = self.get_logger("bookstore.cli.error")
            logger.error(message, error_dict=error.to_dict())
        else:
            logging.getLogger("bookstore.cli.error").error(
                f"{message} ({error.error_code}): {error.message}"
            )


def create_error_handler(console: Optional[Console] = None, get_logger_func: Optional[Callable] = None) -> CLIErrorHandler:
    """Factory function to create a configured error handler."""
    return CLIErrorHandler(console=console, get_logger_func=get_logger_func)


def handle_cli_exceptions(error_handler: CLIErrorHandler, func: Callable, *args, **kwargs) -> Any:
    """
    Run ``func`` and route any exception to ``error_handler``.

    Raises:
        SystemExit: On any handled exception
    """
    try:
        return func(*args, **kwargs)
    except (KeyboardInterrupt, click.Abort):
        error_handler.handle_keyboard_interrupt()
    except click.ClickException as e:
        error_handler.handle_usage_error(e)
    except ConfigurationError as e:
        error_handler.handle_configuration_error(e)
    except CLIError as e:
        error_handler.handle_cli_error(e)
    except BookstoreError as e:
        error_handler.handle_bookstore_error(e)
    except Exception as e:
        error_handler.handle_unexpected_error(e)
