# topmark:header:start
#
#   project      : XmlMode
#   file         : version.py
#   file_relpath : src/xmlmode/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XmlMode `version` command.

Prints the current XmlMode version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from xmlmode.cli.cli_types import EnumChoiceParam
from xmlmode.cli.cmd_common import get_console, get_effective_verbosity
from xmlmode.cli_shared.utils import OutputFormat
from xmlmode.constants import XMLMODE_VERSION

if TYPE_CHECKING:
    from xmlmode.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of XmlMode.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def version_command(
    ctx: click.Context,
    *,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the current version of XmlMode.

    Args:
        ctx (click.Context): Click context.
        output_format (OutputFormat | None): Optional output format.
    """
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt.is_machine:
        console.print(json.dumps({"version": XMLMODE_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# XmlMode Version\n")
        console.print(f"**XmlMode version: {XMLMODE_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("XmlMode version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(XMLMODE_VERSION, bold=True)}")
    else:
        console.print(console.styled(XMLMODE_VERSION, bold=True))
