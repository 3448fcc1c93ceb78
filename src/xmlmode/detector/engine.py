# topmark:header:start
#
#   project      : XmlMode
#   file         : engine.py
#   file_relpath : src/xmlmode/detector/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validation mode decision loop.

Reads a document line by line, strips comments with
[`strip_comments`][xmlmode.detector.scanner.strip_comments] and stops at the first
decisive line:

  1. Lines inside a comment, or without non-whitespace content, are skipped.
  2. Content containing ``DOCTYPE`` → [`ValidationMode.DTD`][xmlmode.detector.mode.ValidationMode].
  3. Content whose first ``<`` is followed by a letter (an opening tag) → ``XSD``.
  4. Anything else (XML declaration, processing instructions, stray text) → next line.

End of input without a decision yields ``XSD``. A decoding failure yields ``AUTO``;
any other I/O failure is raised as
[`ValidationModeReadError`][xmlmode.detector.errors.ValidationModeReadError].
The byte stream handed to the detector is always closed before returning.
"""

from __future__ import annotations

import io
from contextlib import closing
from typing import TYPE_CHECKING

from xmlmode.config.logging import get_logger
from xmlmode.constants import DOCTYPE_TOKEN
from xmlmode.detector.errors import ValidationModeReadError
from xmlmode.detector.mode import ValidationMode
from xmlmode.detector.scanner import StripResult, strip_comments

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import BinaryIO

    from xmlmode.config.logging import XmlModeLogger
    from xmlmode.resources.base import Resource
    from xmlmode.resources.loader import ResourceLoader

logger: XmlModeLogger = get_logger(__name__)


def has_doctype(content: str) -> bool:
    """Does the content contain a DOCTYPE declaration?"""
    return DOCTYPE_TOKEN in content


def has_opening_tag(content: str) -> bool:
    """Does the content contain an opening tag?

    Only the first ``<`` of ``content`` is examined: it must be followed by an
    alphabetic character. Comment tokens are expected to have been consumed already.
    """
    index: int = content.find("<")
    return index > -1 and len(content) > index + 1 and content[index + 1].isalpha()


class XmlValidationModeDetector:
    """Detects whether an XML stream is using DTD- or XSD-based validation.

    The comment state of a run lives in a local variable of the decision loop, so a
    single detector may be shared by several threads.

    Args:
        encoding (str | None): Text encoding used to decode byte streams. ``None``
            selects the platform default encoding.
        loader (ResourceLoader | None): Loader used by `detect_location`; a default
            loader is created on first use when omitted.
    """

    encoding: str | None

    def __init__(
        self,
        *,
        encoding: str | None = None,
        loader: ResourceLoader | None = None,
    ) -> None:
        self.encoding = encoding
        self._loader = loader

    @property
    def loader(self) -> ResourceLoader:
        """The resource loader used to resolve locations."""
        if self._loader is None:
            from xmlmode.resources.loader import ResourceLoader

            self._loader = ResourceLoader()
        return self._loader

    def detect_lines(self, lines: Iterable[str]) -> ValidationMode:
        """Run the decision loop over already-decoded lines.

        Line terminators (``\\n``, ``\\r\\n``, ``\\r``) at the end of each item are ignored.

        Args:
            lines (Iterable[str]): The document, one line per item.

        Returns:
            ValidationMode: ``DTD`` or ``XSD``.
        """
        in_comment: bool = False
        for lineno, raw in enumerate(lines, start=1):
            result: StripResult = strip_comments(raw.rstrip("\r\n"), in_comment)
            in_comment = result.in_comment
            if in_comment or not result.has_content:
                continue
            content: str = result.content or ""
            if has_doctype(content):
                logger.debug("detector: DOCTYPE found on line %d", lineno)
                return ValidationMode.DTD
            if has_opening_tag(content):
                logger.debug("detector: opening tag on line %d without DOCTYPE", lineno)
                return ValidationMode.XSD
        logger.debug("detector: end of input without DOCTYPE")
        return ValidationMode.XSD

    def detect_validation_mode(self, stream: BinaryIO) -> ValidationMode:
        """Detect the validation mode of the XML document in ``stream``.

        The stream is closed before this method returns, on every path.

        Args:
            stream (BinaryIO): A readable byte stream positioned at the first byte.

        Returns:
            ValidationMode: ``DTD``, ``XSD``, or ``AUTO`` if the text could not be decoded.

        Raises:
            ValidationModeReadError: If reading fails for a reason other than decoding.
        """
        with closing(stream):
            try:
                with io.TextIOWrapper(stream, encoding=self.encoding) as reader:
                    return self.detect_lines(reader)
            except UnicodeDecodeError as exc:
                # Blocked by some character encoding: leave the decision to the caller.
                logger.info("detector: cannot decode input (%s); mode is AUTO", exc.reason)
                return ValidationMode.AUTO
            except OSError as exc:
                logger.error("detector: I/O error while reading input: %s", exc)
                raise ValidationModeReadError(f"Cannot read XML input: {exc}") from exc

    def detect_resource(self, resource: Resource) -> ValidationMode:
        """Open ``resource`` and detect its validation mode.

        Raises:
            ResourceNotFoundError: If the resource does not exist.
            ValidationModeReadError: If the content cannot be read.
        """
        logger.debug("detector: reading %s", resource.description)
        return self.detect_validation_mode(resource.open())

    def detect_location(self, location: str) -> ValidationMode:
        """Resolve ``location`` with the resource loader and detect its validation mode."""
        return self.detect_resource(self.loader.get_resource(location))


def detect_validation_mode(stream: BinaryIO, *, encoding: str | None = None) -> ValidationMode:
    """Detect the validation mode of ``stream`` with a fresh detector.

    Args:
        stream (BinaryIO): A readable byte stream; it is closed before returning.
        encoding (str | None): Text encoding, or ``None`` for the platform default.

    Returns:
        ValidationMode: The detected mode.
    """
    return XmlValidationModeDetector(encoding=encoding).detect_validation_mode(stream)


def detect_resource_mode(resource: Resource, *, encoding: str | None = None) -> ValidationMode:
    """Detect the validation mode of a [`Resource`][xmlmode.resources.base.Resource]."""
    return XmlValidationModeDetector(encoding=encoding).detect_resource(resource)
