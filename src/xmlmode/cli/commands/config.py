# topmark:header:start
#
#   project      : XmlMode
#   file         : config.py
#   file_relpath : src/xmlmode/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XmlMode `config` command.

Prints the effective configuration (defaults merged with discovered and explicit
config files) as a TOML document.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from xmlmode.cli.cli_types import EnumChoiceParam
from xmlmode.cli.cmd_common import build_config, get_console, get_effective_verbosity
from xmlmode.cli.options import common_config_options
from xmlmode.cli_shared.utils import OutputFormat

if TYPE_CHECKING:
    from xmlmode.cli_shared.console_api import ConsoleLike
    from xmlmode.config.model import Config


@click.command(
    name="config",
    help="Show the effective configuration as TOML.",
)
@common_config_options
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help="Output format: default (TOML), json, ndjson or markdown.",
)
@click.pass_context
def config_command(
    ctx: click.Context,
    *,
    no_config: bool,
    config_paths: tuple[str, ...],
    output_format: OutputFormat | None,
) -> None:
    """Print the merged configuration."""
    console: ConsoleLike = get_console(ctx)
    config: Config = build_config(no_config=no_config, config_paths=config_paths)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt.is_machine:
        console.print(json.dumps(config.to_toml_dict()))
        return

    toml_text: str = config.to_toml()
    if fmt == OutputFormat.MARKDOWN:
        console.print("# XmlMode Configuration\n")
        console.print(f"```toml\n{toml_text.rstrip()}\n```")
        return

    if get_effective_verbosity(ctx) > 0:
        sources = [str(p) for p in config.config_files] or ["<defaults>"]
        console.print(console.styled(f"# sources: {', '.join(sources)}", dim=True))
    console.print(toml_text, nl=False)
