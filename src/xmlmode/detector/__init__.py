# topmark:header:start
#
#   project      : XmlMode
#   file         : __init__.py
#   file_relpath : src/xmlmode/detector/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validation mode detection.

The detector is split in two cooperating pieces:

- [`xmlmode.detector.scanner`][]: strips comment spans from a single line while
  threading the ``in_comment`` state explicitly.
- [`xmlmode.detector.engine`][]: drives line consumption over a byte stream and
  decides the [`ValidationMode`][xmlmode.detector.mode.ValidationMode].
"""

from __future__ import annotations
