# topmark:header:start
#
#   project      : XmlMode
#   file         : scanner.py
#   file_relpath : src/xmlmode/detector/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment-stripping line scanner.

Given one line of text and the current comment state, return the part of the
line that lies outside XML comments. Comments are flat (``<!--`` ... ``-->``),
may span several lines and may occur several times on the same line.

The comment state is an explicit value: it is passed in and handed back inside
[`StripResult`][xmlmode.detector.scanner.StripResult], so the scanner keeps no
state of its own and can be called from any thread.

Examples:
    ```python
    r = strip_comments("<!-- a --><root/>", in_comment=False)
    assert r.content == "<root/>" and not r.in_comment

    r = strip_comments("<!-- opens here", in_comment=False)
    assert r.content is None and r.in_comment
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from xmlmode.config.logging import get_logger
from xmlmode.constants import END_COMMENT, START_COMMENT

if TYPE_CHECKING:
    from xmlmode.config.logging import XmlModeLogger

logger: XmlModeLogger = get_logger(__name__)


@dataclass(frozen=True)
class StripResult:
    """Outcome of stripping comments from one line.

    Attributes:
        content (str | None): The text outside comments, or ``None`` when the line
            yields no usable content (it is absorbed by an open comment, or ends
            in a comment-start marker without a following token). ``""`` is a
            legitimate, distinct value.
        in_comment (bool): Comment state after the line.
    """

    content: str | None
    in_comment: bool

    @property
    def has_content(self) -> bool:
        """True if ``content`` holds non-whitespace text."""
        return bool(self.content and self.content.strip())


def _consume(text: str, in_comment: bool) -> tuple[str | None, bool]:
    """Consume the next comment token from ``text``.

    Inside a comment the next ``-->`` is searched for, outside a comment the next
    ``<!--``. On success the state flips and the text following the token is
    returned.

    Args:
        text (str): The remainder of the line.
        in_comment (bool): Current comment state.

    Returns:
        tuple[str | None, bool]: ``(remainder, state)``; remainder is ``None`` when the
            expected token is absent, in which case the state is unchanged.
    """
    token: str = END_COMMENT if in_comment else START_COMMENT
    index: int = text.find(token)
    if index == -1:
        return None, in_comment
    return text[index + len(token) :], not in_comment


def strip_comments(line: str, in_comment: bool) -> StripResult:
    """Remove comment spans from ``line``.

    Rules:
      - A line with neither ``<!--`` nor ``-->`` is returned unchanged, whatever the
        state (callers must ignore it while ``in_comment`` is true).
      - Text before the first ``<!--`` is kept verbatim as a prefix.
      - Tokens are then consumed one at a time from the rest of the line. As soon
        as the state is "outside" and the remainder (ignoring leading whitespace)
        does not open another comment, ``prefix + remainder`` is returned.
      - If a token cannot be found, the line has no usable content.

    Args:
        line (str): One line of input, without its terminator.
        in_comment (bool): Whether the line starts inside an open comment.

    Returns:
        StripResult: The content outside comments and the updated state.
    """
    start: int = line.find(START_COMMENT)
    if start == -1 and END_COMMENT not in line:
        return StripResult(content=line, in_comment=in_comment)

    prefix: str = ""
    rest: str = line
    if start >= 0:
        prefix = line[:start]
        rest = line[start:]

    state: bool = in_comment
    while True:
        remainder, state = _consume(rest, state)
        if remainder is None:
            logger.trace("scanner: no content, in_comment=%s: %r", state, line)
            return StripResult(content=None, in_comment=state)
        if not state and not remainder.strip().startswith(START_COMMENT):
            logger.trace("scanner: kept %r, in_comment=%s", prefix + remainder, state)
            return StripResult(content=prefix + remainder, in_comment=state)
        rest = remainder
