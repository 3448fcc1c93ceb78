# topmark:header:start
#
#   project      : XmlMode
#   file         : __init__.py
#   file_relpath : src/xmlmode/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for XmlMode.

Layered TOML configuration (``xmlmode.toml`` or ``[tool.xmlmode]`` in
``pyproject.toml``) merged into an immutable `Config` snapshot, plus the logging
setup shared by all modules.
"""
