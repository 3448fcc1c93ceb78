# topmark:header:start
#
#   project      : XmlMode
#   file         : keys.py
#   file_relpath : src/xmlmode/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for XmlMode configuration.

These constants are the external configuration schema as it appears in
``xmlmode.toml`` and in ``[tool.xmlmode]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by XmlMode configuration."""

    # Root table
    KEY_ENCODING: Final[str] = "encoding"
    KEY_STRICT: Final[str] = "strict"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_INCLUDE_PATTERNS: Final[str] = "include_patterns"
    KEY_EXCLUDE_PATTERNS: Final[str] = "exclude_patterns"

    # pyproject.toml nesting: [tool.xmlmode]
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_XMLMODE: Final[str] = "xmlmode"
