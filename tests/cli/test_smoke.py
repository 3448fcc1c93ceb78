# topmark:header:start
#
#   project      : XmlMode
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Smoke tests for the `xmlmode` command group."""

from __future__ import annotations

import pytest
from click.testing import Result

from tests.cli.conftest import assert_SUCCESS, run_cli


@pytest.mark.cli
def test_no_subcommand_shows_hint_and_help() -> None:
    result: Result = run_cli([])

    assert_SUCCESS(result)
    assert "Hint: use 'xmlmode detect [LOCATIONS...]'" in result.output
    assert "Detect whether XML documents use DTD or XSD validation." in result.output


@pytest.mark.cli
@pytest.mark.parametrize("cmd", ["detect", "config", "version"])
def test_subcommand_help(cmd: str) -> None:
    result: Result = run_cli([cmd, "-h"])

    assert_SUCCESS(result)
    assert "--format" in result.output


@pytest.mark.cli
def test_unknown_command_is_a_click_usage_error() -> None:
    result: Result = run_cli(["validate"])

    assert result.exit_code == 2
