"""Interactive shell command."""

import click

from bookstore.core.config import BookstoreConfig
from bookstore.services import Inventory

from ..console import ShellConsole
from ..shell import BookstoreShell
from ..welcome import show_welcome


def run_shell(config: BookstoreConfig, console: ShellConsole = None) -> None:
    """Run one interactive session against a fresh, empty inventory."""
    console = console or ShellConsole()
    if config.general.shell.show_welcome:
        show_welcome(console)
    BookstoreShell(Inventory(), console).run()


@click.command()
@click.pass_context
def shell(ctx: click.Context) -> None:
    """Start the interactive inventory menu (the default command)."""
    config = (ctx.obj or {}).get("config") or BookstoreConfig()
    run_shell(config)
