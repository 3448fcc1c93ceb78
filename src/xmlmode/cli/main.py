# topmark:header:start
#
#   project      : XmlMode
#   file         : main.py
#   file_relpath : src/xmlmode/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XmlMode command-line entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console and verbosity from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from xmlmode.cli.commands.config import config_command
from xmlmode.cli.commands.detect import detect_command
from xmlmode.cli.commands.version import version_command
from xmlmode.cli.console import ClickConsole
from xmlmode.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from xmlmode.cli_shared.color import ColorMode, use_color
from xmlmode.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from xmlmode.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode): Mode combined from ``--color`` and ``--no-color``.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment (XMLMODE_LOG_LEVEL)
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    color = use_color(color_mode)
    ctx.color = color
    ctx.obj["console"] = ClickConsole(color=color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Detect whether XML documents use DTD or XSD validation.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the XmlMode CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode.from_options(color_mode, no_color=no_color),
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'xmlmode detect [LOCATIONS...]' to detect validation modes.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(detect_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
