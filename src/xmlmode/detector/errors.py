# topmark:header:start
#
#   project      : XmlMode
#   file         : errors.py
#   file_relpath : src/xmlmode/detector/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the validation mode detector.

Decoding failures are not errors: they are reported as
[`ValidationMode.AUTO`][xmlmode.detector.mode.ValidationMode]. Only genuine I/O
failures surface to the caller.
"""

from __future__ import annotations


class ValidationModeReadError(OSError):
    """The input stream could not be read while detecting the validation mode.

    The original ``OSError`` is available as ``__cause__``.
    """
