# topmark:header:start
#
#   project      : XmlMode
#   file         : utils.py
#   file_relpath : src/xmlmode/cli_shared/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output-format helpers shared by XmlMode commands."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable).
      NDJSON: One JSON object per line (newline-delimited JSON; machine-readable).
      MARKDOWN: A Markdown document (tables for per-file results).

    Notes:
      - Machine formats (``JSON`` and ``NDJSON``) never include ANSI color.
      - Use with `EnumChoiceParam` to parse ``--format`` from Click.
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"
    MARKDOWN = "markdown"

    @property
    def is_machine(self) -> bool:
        """True for JSON and NDJSON."""
        return self in (OutputFormat.JSON, OutputFormat.NDJSON)


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers: Column headers.
        rows: A sequence of row sequences (each row same length as ``headers``).
        align: Optional mapping of column index to alignment:
            ``"left"`` (default), ``"right"``, or ``"center"``.

    Returns:
        The Markdown table as a single string (ending with a newline).

    Raises:
        ValueError: If any row length differs from the number of headers.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [len(str(h)) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(str(cell)))

    def _pad(text: str, w: int) -> str:
        return f"{text:<{w}}"

    def _sep_for(i: int) -> str:
        style: str = (align or {}).get(i, "left").lower()
        w: int = max(1, widths[i])
        if style == "right":
            return "-" * (w - 1) + ":" if w > 1 else ":"
        if style == "center":
            return ":" + ("-" * (w - 2) if w > 2 else "-") + ":"
        return "-" * w

    lines: list[str] = [
        " | ".join(_pad(str(headers[i]), widths[i]) for i in range(ncols)),
        " | ".join(_sep_for(i) for i in range(ncols)),
    ]
    lines.extend(" | ".join(_pad(str(r[i]), widths[i]) for i in range(ncols)) for r in rows)
    return "".join(f"| {line} |\n" for line in lines)
