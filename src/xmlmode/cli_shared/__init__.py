# topmark:header:start
#
#   project      : XmlMode
#   file         : __init__.py
#   file_relpath : src/xmlmode/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-free helpers shared by CLI frontends: exit codes, color and output formats."""
