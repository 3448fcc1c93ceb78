# topmark:header:start
#
#   project      : XmlMode
#   file         : cmd_common.py
#   file_relpath : src/xmlmode/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by several commands: verbosity lookup, console lookup and
configuration building from CLI options.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from xmlmode.cli.errors import XmlModeConfigError
from xmlmode.config.io import ConfigError
from xmlmode.config.logging import get_logger
from xmlmode.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterable

    from xmlmode.cli_shared.console_api import ConsoleLike
    from xmlmode.config.model import Config

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the group context (0 if unset)."""
    obj = ctx.find_root().obj or {}
    return int(obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console initialized by the ``xmlmode`` group."""
    return ctx.find_root().obj["console"]


def build_config(
    *,
    no_config: bool,
    config_paths: Iterable[str],
    files: Iterable[str] | None = None,
    encoding: str | None = None,
    strict: bool | None = None,
    include_patterns: Iterable[str] | None = None,
    exclude_patterns: Iterable[str] | None = None,
) -> Config:
    """Merge defaults, discovered and explicit config files and CLI overrides.

    Raises:
        XmlModeConfigError: If a config file cannot be loaded or holds invalid values.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            anchor=Path.cwd(),
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
        draft.apply_overrides(
            files=files,
            encoding=encoding,
            strict=strict,
            include_patterns=include_patterns,
            exclude_patterns=exclude_patterns,
        )
        config: Config = draft.freeze()
    except ConfigError as e:
        raise XmlModeConfigError(str(e)) from e
    logger.debug("Effective config: %s", config)
    return config
