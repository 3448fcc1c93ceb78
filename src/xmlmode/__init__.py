# topmark:header:start
#
#   project      : XmlMode
#   file         : __init__.py
#   file_relpath : src/xmlmode/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XmlMode package.

XmlMode inspects the leading portion of an XML document and decides, without a
full XML parser, whether the document declares DTD-based validation or is
assumed to use XSD-based (schema) validation. It exposes a small typed API and
a CLI.
"""

from __future__ import annotations

from xmlmode.detector.engine import (
    XmlValidationModeDetector,
    detect_resource_mode,
    detect_validation_mode,
)
from xmlmode.detector.errors import ValidationModeReadError
from xmlmode.detector.mode import ValidationMode
from xmlmode.detector.scanner import StripResult, strip_comments

__all__ = [
    "StripResult",
    "ValidationMode",
    "ValidationModeReadError",
    "XmlValidationModeDetector",
    "detect_resource_mode",
    "detect_validation_mode",
    "strip_comments",
]
