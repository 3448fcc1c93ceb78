# topmark:header:start
#
#   project      : XmlMode
#   file         : console_api.py
#   file_relpath : src/xmlmode/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console protocol shared by the XmlMode commands.

Detection results and reports go through ``print``; per-location failures and
CLI errors go through ``error``. Diagnostics belong to logging, not here.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Output surface of ``detect``, ``config`` and ``version``."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a line of program output to stdout."""
        ...

    def error(self, text: str) -> None:
        """Write an error line to stderr."""
        ...

    def styled(self, text: str, **style: object) -> str:
        """Return ``text`` with ANSI styling, or unchanged when color is off."""
        ...
