# topmark:header:start
#
#   project      : XmlMode
#   file         : __init__.py
#   file_relpath : src/xmlmode/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the XmlMode CLI."""
