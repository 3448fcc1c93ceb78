# topmark:header:start
#
#   project      : XmlMode
#   file         : mode.py
#   file_relpath : src/xmlmode/detector/mode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validation mode enumeration.

The numeric codes (``NONE=0, AUTO=1, DTD=2, XSD=3``) are kept stable so the values
can be exchanged with callers that only understand the integer constants.

Each member also carries a stable lowercase ``key`` for machine output and a
human ``label``:

    ```python
    from xmlmode.detector.mode import ValidationMode

    assert ValidationMode.DTD == 2
    assert ValidationMode.DTD.key == "dtd"
    assert ValidationMode.parse("xsd") is ValidationMode.XSD
    ```
"""

from __future__ import annotations

from enum import IntEnum
from typing import TypeVar

_VM = TypeVar("_VM", bound="ValidationMode")


class ValidationMode(IntEnum):
    """Outcome of a validation mode detection run.

    Attributes:
        NONE: Validation disabled.
        AUTO: Could not be determined (for instance, the text could not be decoded);
            the caller decides.
        DTD: A ``DOCTYPE`` declaration was found.
        XSD: No ``DOCTYPE`` was found before the first real content.
    """

    key: str
    label: str

    NONE = (0, "none", "Validation disabled")
    AUTO = (1, "auto", "Undetermined; caller decides")
    DTD = (2, "dtd", "DTD validation (DOCTYPE declared)")
    XSD = (3, "xsd", "XSD validation (no DOCTYPE)")

    def __new__(cls: type[_VM], code: int, key: str, label: str) -> _VM:
        """Create a member with its numeric code, machine key and label.

        Args:
            code (int): The stable numeric code (stored as `.value`).
            key (str): Stable lowercase machine key.
            label (str): Human-readable label.

        Returns:
            _VM: The newly created enum member.
        """
        obj: _VM = int.__new__(cls, code)
        obj._value_ = code
        obj.key = key
        obj.label = label
        return obj

    def __str__(self) -> str:
        return self.key

    @property
    def is_definitive(self) -> bool:
        """True for a mode the detector settled on (``DTD`` or ``XSD``)."""
        return self in (ValidationMode.DTD, ValidationMode.XSD)

    @classmethod
    def parse(cls, raw: str | int | None) -> ValidationMode | None:
        """Parse a token into a member.

        Matches (case-insensitive) the machine key, the member name, or the numeric
        code given either as ``int`` or as a digit string.

        Returns:
            ValidationMode | None: The matching member, or None when nothing matches.
        """
        if raw is None:
            return None
        if isinstance(raw, int):
            try:
                return cls(raw)
            except ValueError:
                return None
        token: str = raw.strip().lower()
        if token.isdigit():
            return cls.parse(int(token))
        for m in cls:
            if token in (m.key, m.name.lower()):
                return m
        return None
