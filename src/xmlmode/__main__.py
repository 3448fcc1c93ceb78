# topmark:header:start
#
#   project      : XmlMode
#   file         : __main__.py
#   file_relpath : src/xmlmode/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running XmlMode via ``python -m xmlmode``.

It delegates directly to :func:`xmlmode.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how XmlMode is launched.

Examples:
    Detect the validation mode of a document::

        python -m xmlmode detect beans.xml
"""

from __future__ import annotations

from xmlmode.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
