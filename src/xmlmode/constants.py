# topmark:header:start
#
#   project      : XmlMode
#   file         : constants.py
#   file_relpath : src/xmlmode/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XmlMode Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

XMLMODE_VERSION: str = get_version("xmlmode")

# Tokens recognized by the comment scanner and the mode-decision loop
DOCTYPE_TOKEN: str = "DOCTYPE"
START_COMMENT: str = "<!--"
END_COMMENT: str = "-->"

# Configuration discovery
XMLMODE_TOML_NAME: str = "xmlmode.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Resource locations
PACKAGE_URL_PREFIX: str = "package:"
STDIN_LOCATION: str = "-"

DEFAULT_INCLUDE_PATTERNS: tuple[str, ...] = (
    "*.xml",
    "*.xsd",
    "*.dtd",
    "*.wsdl",
    "*.xsl",
    "*.xslt",
)
