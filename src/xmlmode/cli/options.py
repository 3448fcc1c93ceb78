# topmark:header:start
#
#   project      : XmlMode
#   file         : options.py
#   file_relpath : src/xmlmode/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based XmlMode CLI.

This module centralizes reusable options (verbosity, color, config, filtering)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import codecs
from typing import Callable, ParamSpec, TypeVar

import click

from xmlmode.cli.errors import XmlModeUsageError
from xmlmode.cli_shared.color import ColorMode

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``-1`` when quiet, ``0`` by default, otherwise the number of ``-v`` flags.

    Raises:
        XmlModeUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise XmlModeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Behavior:
        Adds -v/--verbose and -q/--quiet options that count occurrences.
        These options are mutually exclusive and control program output.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def validate_encoding_option(
    ctx: click.Context,
    param: click.Parameter,
    value: str | None,
) -> str | None:
    """Click callback: reject encodings Python does not know."""
    if value is None:
        return None
    try:
        codecs.lookup(value)
    except LookupError:
        raise XmlModeUsageError(f"Unknown encoding: {value!r}") from None
    return value


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config/-c`` options.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore xmlmode.toml / pyproject.toml in the working directory.",
    )(f)
    f = click.option(
        "--config",
        "-c",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(dir_okay=False),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_detection_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply detection and file-filtering options.

    Adds ``--include``, ``--exclude``, ``--encoding`` and ``--strict/--no-strict``.
    """
    f = click.option(
        "--include",
        "-i",
        "include_patterns",
        multiple=True,
        metavar="PATTERN",
        help="Filter: inside directories, keep only files matching these glob patterns.",
    )(f)
    f = click.option(
        "--exclude",
        "-e",
        "exclude_patterns",
        multiple=True,
        metavar="PATTERN",
        help="Filter: inside directories, remove files matching these glob patterns.",
    )(f)
    f = click.option(
        "--encoding",
        default=None,
        metavar="ENCODING",
        callback=validate_encoding_option,
        help="Text encoding of the inputs (default: platform encoding).",
    )(f)
    f = click.option(
        "--strict/--no-strict",
        default=None,
        help="Fail (exit 1) when any input cannot be classified.",
    )(f)
    return f
