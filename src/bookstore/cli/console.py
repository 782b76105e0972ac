"""
Line-oriented terminal I/O for the interactive shell.

Everything the operator sees on stdout is written through ShellConsole so the
shell can be driven by any pair of text streams, including io.StringIO in tests.
"""

import sys
from typing import Optional, TextIO

import click
from rich.console import Console
from rich.panel import Panel

from bookstore.exceptions import InputClosedError


class ShellConsole:
    """Reads operator input and writes plain-text output.

    Contract strings go through ``click.echo`` untouched; rich is used only for
    decorative output such as the welcome panel.
    """

    def __init__(self, input_stream: Optional[TextIO] = None, output_stream: Optional[TextIO] = None):
        self.input = input_stream if input_stream is not None else sys.stdin
        self.output = output_stream if output_stream is not None else sys.stdout
        self._rich = Console(file=self.output, highlight=False)

    def print(self, message: str = "") -> None:
        click.echo(message, file=self.output)

    def read_line(self, prompt: str = "") -> str:
        """Write ``prompt`` without a newline and return the next input line.

        Raises:
            InputClosedError: if the input stream is exhausted.
        """
        if prompt:
            click.echo(prompt, file=self.output, nl=False)
        line = self.input.readline()
        if line == "":
            raise InputClosedError(prompt or None)
        return line.rstrip("\r\n")

    def print_panel(self, content: str, title: str = "", style: str = "") -> None:
        self._rich.print(Panel(content, title=title, border_style=style))
