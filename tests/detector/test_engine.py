# topmark:header:start
#
#   project      : XmlMode
#   file         : test_engine.py
#   file_relpath : tests/detector/test_engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the mode-decision loop and the stream-level detector."""

from __future__ import annotations

import io
import threading

import pytest

from tests.conftest import TrackingBytesIO, make_stream
from xmlmode import (
    ValidationMode,
    ValidationModeReadError,
    XmlValidationModeDetector,
    detect_validation_mode,
)
from xmlmode.detector.engine import has_doctype, has_opening_tag


class FailingStream(io.RawIOBase):
    """Raw stream that raises OSError on the first read."""

    closed_by_caller: bool = False

    def readable(self) -> bool:
        return True

    def readinto(self, b: bytearray | memoryview) -> int:  # type: ignore[override]
        raise OSError("device unplugged")

    def close(self) -> None:
        self.closed_by_caller = True
        super().close()


@pytest.mark.parametrize(
    ("document", "expected"),
    [
        (
            '<?xml version="1.0"?>\n<!DOCTYPE root SYSTEM "x.dtd">\n<root/>',
            ValidationMode.DTD,
        ),
        ('<?xml version="1.0"?>\n<root xmlns="urn:x"/>', ValidationMode.XSD),
        ("<!-- comment spanning\nmultiple lines -->\n<root/>", ValidationMode.XSD),
        ("<!-- <!DOCTYPE x> --><root/>", ValidationMode.XSD),
        ("\n   \n\t\n\n", ValidationMode.XSD),
    ],
    ids=["doctype", "schema-root", "multiline-comment", "doctype-in-comment", "blank"],
)
def test_detect_scenarios(document: str, expected: ValidationMode) -> None:
    assert detect_validation_mode(make_stream(document), encoding="utf-8") is expected


def test_empty_stream_is_xsd() -> None:
    assert detect_validation_mode(make_stream(b""), encoding="utf-8") is ValidationMode.XSD


def test_undecodable_bytes_before_decisive_line_yield_auto() -> None:
    stream: TrackingBytesIO = make_stream(b"\xff\xfe\xfa garbage\n<root/>\n")

    assert detect_validation_mode(stream, encoding="utf-8") is ValidationMode.AUTO
    assert stream.closed_by_caller


def test_undecodable_bytes_far_after_doctype_do_not_matter() -> None:
    """Detection stops at the DOCTYPE line; bytes beyond the read-ahead are never decoded."""
    data: bytes = b'<!DOCTYPE root SYSTEM "x.dtd">\n' + b" " * 200_000 + b"\xff\xfe\n"

    assert detect_validation_mode(make_stream(data), encoding="utf-8") is ValidationMode.DTD


def test_io_error_is_raised_as_read_error_and_stream_closed() -> None:
    raw = FailingStream()
    stream = io.BufferedReader(raw)

    with pytest.raises(ValidationModeReadError) as excinfo:
        XmlValidationModeDetector(encoding="utf-8").detect_validation_mode(stream)

    assert isinstance(excinfo.value, OSError)
    assert isinstance(excinfo.value.__cause__, OSError)
    assert "device unplugged" in str(excinfo.value)
    assert stream.closed
    assert raw.closed_by_caller


@pytest.mark.parametrize(
    "document",
    [
        '<!DOCTYPE root SYSTEM "x.dtd">',
        "<root/>",
        "",
    ],
)
def test_stream_is_closed_on_every_path(document: str) -> None:
    stream: TrackingBytesIO = make_stream(document)

    detect_validation_mode(stream, encoding="utf-8")

    assert stream.closed_by_caller


def test_doctype_after_comment_on_same_line_is_detected() -> None:
    document = '<!-- header --><!DOCTYPE beans PUBLIC "-//SPRING//DTD BEAN//EN" "b.dtd">'

    assert detect_validation_mode(make_stream(document), encoding="utf-8") is ValidationMode.DTD


def test_doctype_after_multiline_comment_closes_is_detected() -> None:
    document = "<!--\n license\n <root/> is ignored here\n-->\n<!DOCTYPE root>\n<root/>"

    assert detect_validation_mode(make_stream(document), encoding="utf-8") is ValidationMode.DTD


def test_doctype_takes_priority_over_opening_tag_on_same_line() -> None:
    document = "<root><!DOCTYPE odd></root>"

    assert detect_validation_mode(make_stream(document), encoding="utf-8") is ValidationMode.DTD


def test_unterminated_comment_hides_rest_of_document() -> None:
    document = "<!-- never closed\n<!DOCTYPE root>\n<root/>"

    assert detect_validation_mode(make_stream(document), encoding="utf-8") is ValidationMode.XSD


def test_processing_instructions_are_skipped() -> None:
    document = '<?xml version="1.0"?>\n<?xml-stylesheet href="s.xsl"?>\n<!DOCTYPE r>\n<r/>'

    assert detect_validation_mode(make_stream(document), encoding="utf-8") is ValidationMode.DTD


def test_crlf_line_endings() -> None:
    document = '<?xml version="1.0"?>\r\n<!DOCTYPE root>\r\n<root/>\r\n'

    assert detect_validation_mode(make_stream(document), encoding="utf-8") is ValidationMode.DTD


def test_stray_text_before_root_does_not_decide() -> None:
    """Only a ``<`` followed by a letter is an opening tag."""
    document = "some text\n< 5\n<!DOCTYPE r>"

    assert detect_validation_mode(make_stream(document), encoding="utf-8") is ValidationMode.DTD


def test_detect_lines_accepts_decoded_text() -> None:
    detector = XmlValidationModeDetector()

    assert detector.detect_lines(["<!-- x -->\n", "<!DOCTYPE a>\n"]) is ValidationMode.DTD
    assert detector.detect_lines(["<a/>"]) is ValidationMode.XSD
    assert detector.detect_lines([]) is ValidationMode.XSD


def test_explicit_encoding_is_used_for_decoding() -> None:
    document = '<?xml version="1.0" encoding="UTF-16"?>\n<!DOCTYPE r>\n<r/>'
    stream = make_stream(document, encoding="utf-16")

    assert detect_validation_mode(stream, encoding="utf-16") is ValidationMode.DTD


def test_detector_is_reusable_and_thread_safe() -> None:
    detector = XmlValidationModeDetector(encoding="utf-8")
    documents: list[tuple[str, ValidationMode]] = [
        ("<!-- a\n b -->\n<!DOCTYPE r>", ValidationMode.DTD),
        ("<!-- a -->\n<r/>", ValidationMode.XSD),
    ] * 20
    results: list[tuple[ValidationMode, ValidationMode]] = []
    lock = threading.Lock()

    def _work(doc: str, expected: ValidationMode) -> None:
        mode = detector.detect_validation_mode(make_stream(doc))
        with lock:
            results.append((mode, expected))

    threads = [threading.Thread(target=_work, args=item) for item in documents]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == len(documents)
    assert all(mode is expected for mode, expected in results)


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("<root>", True),
        ("  <a:b/>", True),
        ("<?xml?>", False),
        ("<!x", False),
        ("< root", False),
        ("<", False),
        ("text", False),
        ("<?pi?><root>", False),
    ],
)
def test_has_opening_tag_examines_first_angle_bracket_only(content: str, expected: bool) -> None:
    assert has_opening_tag(content) is expected


def test_has_doctype_is_case_sensitive() -> None:
    assert has_doctype("<!DOCTYPE x>")
    assert not has_doctype("<!doctype x>")
