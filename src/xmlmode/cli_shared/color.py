# topmark:header:start
#
#   project      : XmlMode
#   file         : color.py
#   file_relpath : src/xmlmode/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color decision for XmlMode terminal output.

``--no-color`` and ``--color`` decide first. Under ``--color=auto`` the
``FORCE_COLOR`` and ``NO_COLOR`` environment variables are honored, and
otherwise color follows whether stdout is a terminal. Machine formats never
call ``styled()``, so they stay plain regardless of the outcome.
"""

from __future__ import annotations

import os
import sys
from enum import Enum


class ColorMode(str, Enum):
    """Value of the ``--color`` option."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def from_options(cls, color: str | None, *, no_color: bool) -> ColorMode:
        """Combine ``--color`` and ``--no-color`` into one mode (``--no-color`` wins)."""
        if no_color:
            return cls.NEVER
        return cls(color) if color else cls.AUTO


def use_color(mode: ColorMode, *, stdout_isatty: bool | None = None) -> bool:
    """Return True if ANSI styling should be applied.

    Args:
        mode (ColorMode): Mode from the command line.
        stdout_isatty (bool | None): TTY state of stdout; probed from
            ``sys.stdout`` when None.

    Returns:
        bool: Whether to style console output.
    """
    if mode is not ColorMode.AUTO:
        return mode is ColorMode.ALWAYS

    force_color = os.environ.get("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            # Closed or detached stream.
            stdout_isatty = False
    return stdout_isatty
