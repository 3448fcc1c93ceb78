# topmark:header:start
#
#   project      : XmlMode
#   file         : console.py
#   file_relpath : src/xmlmode/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-backed console used by the XmlMode commands."""

from __future__ import annotations

from typing import Any

import click

from xmlmode.cli_shared.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Writes through ``click.echo`` so ``CliRunner`` captures the output.

    Streams are not bound at construction; Click looks up the current
    ``sys.stdout`` / ``sys.stderr`` on every write.

    Args:
        color (bool): Whether ``styled()`` applies ANSI codes.
    """

    color: bool

    def __init__(self, *, color: bool) -> None:
        self.color = color

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a line of program output to stdout."""
        click.echo(text, nl=nl, color=self.color)

    def error(self, text: str) -> None:
        """Write an error line to stderr, in red when color is on."""
        click.echo(self.styled(text, fg="bright_red"), err=True, color=self.color)

    def styled(self, text: str, **style: Any) -> str:
        """Apply ``click.style`` keyword arguments when color is on."""
        return click.style(text, **style) if self.color else text
