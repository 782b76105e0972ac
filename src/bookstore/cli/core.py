"""
Core CLI functionality and main command group.

Provides the main CLI group definition and command registration.
"""

import sys
from pathlib import Path
from typing import Optional

import click

from bookstore.constants import APP_NAME, EXIT_OK
from bookstore.logging_integration import get_logger

from . import __version__
from .commands import config, shell
from .error_handler import create_error_handler, handle_cli_exceptions
from .setup import setup_logging


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name=APP_NAME)
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file path (created by 'config --init')",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: int) -> None:
    """Bookstore: interactive inventory manager for a small bookstore.

    Run without a command to open the menu. The inventory lives in memory
    for the session and is discarded on exit.

    \b
    Examples:
        bookstore                  # open the interactive menu
        bookstore -vv              # same, with DEBUG logs on stderr
        bookstore config --show    # show effective settings
    """
    if config is not None and not config.exists() and ctx.invoked_subcommand != "config":
        raise click.BadParameter(f"File '{config}' does not exist.", param_hint="'--config'")

    settings = setup_logging(config, verbose)

    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = settings

    if ctx.invoked_subcommand is None:
        ctx.invoke(shell)


cli.add_command(shell)
cli.add_command(config)


def main() -> None:
    """Main entry point for the CLI with error handling."""
    error_handler = create_error_handler(get_logger_func=get_logger)
    # Abort and usage errors are reported by error_handler, not by click
    exit_code = handle_cli_exceptions(error_handler, cli.main, standalone_mode=False)
    sys.exit(exit_code if isinstance(exit_code, int) else EXIT_OK)
