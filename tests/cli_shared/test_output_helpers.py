# topmark:header:start
#
#   project      : XmlMode
#   file         : test_output_helpers.py
#   file_relpath : tests/cli_shared/test_output_helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the Click-free CLI helpers."""

from __future__ import annotations

import pytest

from xmlmode.cli_shared.color import ColorMode, use_color
from xmlmode.cli_shared.exit_codes import ExitCode
from xmlmode.cli_shared.utils import OutputFormat, render_markdown_table


def test_render_markdown_table_pads_and_aligns() -> None:
    table: str = render_markdown_table(
        ["Location", "Mode"],
        [["a.xml", "DTD"], ["schemas/b.xml", "XSD"]],
        align={1: "center"},
    )

    assert table.splitlines() == [
        "| Location      | Mode |",
        "| ------------- | :--: |",
        "| a.xml         | DTD  |",
        "| schemas/b.xml | XSD  |",
    ]


def test_render_markdown_table_rejects_ragged_rows() -> None:
    with pytest.raises(ValueError):
        render_markdown_table(["a", "b"], [["only one"]])


def test_output_format_machine_flag() -> None:
    assert [f for f in OutputFormat if f.is_machine] == [OutputFormat.JSON, OutputFormat.NDJSON]


@pytest.mark.parametrize(
    "color, no_color, expected",
    [
        (None, False, ColorMode.AUTO),
        ("always", False, ColorMode.ALWAYS),
        ("never", False, ColorMode.NEVER),
        ("always", True, ColorMode.NEVER),
    ],
)
def test_color_mode_from_options(color: str | None, no_color: bool, expected: ColorMode) -> None:
    assert ColorMode.from_options(color, no_color=no_color) is expected


@pytest.mark.parametrize(
    "mode, env, isatty, expected",
    [
        (ColorMode.ALWAYS, {"NO_COLOR": "1"}, False, True),
        (ColorMode.NEVER, {"FORCE_COLOR": "1"}, True, False),
        (ColorMode.AUTO, {"FORCE_COLOR": "1"}, False, True),
        (ColorMode.AUTO, {"FORCE_COLOR": "0", "NO_COLOR": ""}, True, False),
        (ColorMode.AUTO, {}, True, True),
        (ColorMode.AUTO, {}, False, False),
    ],
)
def test_use_color(
    monkeypatch: pytest.MonkeyPatch,
    mode: ColorMode,
    env: dict[str, str],
    isatty: bool,
    expected: bool,
) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    for key, value in env.items():
        monkeypatch.setenv(key, value)

    assert use_color(mode, stdout_isatty=isatty) is expected


def test_exit_codes_follow_sysexits() -> None:
    assert ExitCode.USAGE_ERROR == 64
    assert ExitCode.FILE_NOT_FOUND == 66
    assert ExitCode.IO_ERROR == 74
    assert ExitCode.CONFIG_ERROR == 78
    assert sorted(int(c) for c in ExitCode) == [0, 1, 64, 66, 74, 78]
