"""Configuration management command."""

import click
from rich.console import Console
from rich.table import Table

from bookstore.core.config import ConfigManager
from bookstore.logging_integration import get_module_logger

console = Console()
logger = get_module_logger()


@click.command()
@click.option("--show", is_flag=True, help="Show current configuration")
@click.option("--init", "init_file", is_flag=True, help="Write a default configuration file")
@click.pass_context
def config(ctx: click.Context, show: bool, init_file: bool) -> None:
    """Show or initialise the configuration file.

    \b
    Examples:
        bookstore config --show
        bookstore config --init
        bookstore -c ./bookstore.toml config --show
    """
    config_manager = ConfigManager((ctx.obj or {}).get("config_file"))

    if init_file:
        path = config_manager.reset_config()
        logger.info("Wrote default configuration", path=str(path))
        console.print(f"[green]✓ Default configuration written to {path}[/green]")
        return

    show_configuration(config_manager)


def show_configuration(config_manager: ConfigManager) -> None:
    """Display the effective configuration (file plus environment overrides)."""
    settings = config_manager.load_config()
    logging_settings = settings.general.logging

    table = Table(title="Bookstore Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Config File", str(config_manager.config_file))
    table.add_row("Config File Exists", str(config_manager.config_file.exists()))
    table.add_row("Log Level", logging_settings.level.value)
    table.add_row("Log Format", logging_settings.format)
    table.add_row("Log Outputs", ", ".join(logging_settings.output))
    if logging_settings.file_path:
        table.add_row("Log File", str(logging_settings.file_path))
    table.add_row("Show Welcome", str(settings.general.shell.show_welcome))

    console.print(table)
