# topmark:header:start
#
#   project      : XmlMode
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the XmlMode test suite.

Sets up global fixtures and the logging configuration for test runs.

Notes:
    Build configs with `xmlmode.config.model.MutableConfig`, then `freeze()` into a
    `xmlmode.config.model.Config`. Do **not** mutate a frozen `Config`; call
    `Config.thaw()`, edit, then `freeze()` again.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from xmlmode.config import logging
from xmlmode.config.model import MutableConfig

if TYPE_CHECKING:
    from xmlmode.config.model import Config


@pytest.fixture(autouse=True)
def silence_xmlmode_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure XmlMode's runtime log level is not forced via env during tests.

    CLI invocations reconfigure the root logger against the runner's (short-lived)
    streams, so the test-wide TRACE setup is restored before every test.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Log at TRACE for all tests so the scanner's per-line state is exercised."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated temporary working directory.

    Keeps config discovery (``xmlmode.toml`` / ``pyproject.toml`` in the CWD)
    away from the repository's own files.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


class TrackingBytesIO(io.BytesIO):
    """BytesIO that remembers whether close() was called."""

    closed_by_caller: bool = False

    def close(self) -> None:
        self.closed_by_caller = True
        super().close()


def make_stream(text: str | bytes, encoding: str = "utf-8") -> TrackingBytesIO:
    """Return a closable byte stream holding ``text``."""
    data: bytes = text if isinstance(text, bytes) else text.encode(encoding)
    return TrackingBytesIO(data)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides."""
    return make_mutable_config(**overrides).freeze()


def make_mutable_config(**overrides: Any) -> MutableConfig:
    """Return a mutable builder from defaults with ``overrides`` set verbatim."""
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m


def write_file(path: Path, content: str | bytes) -> Path:
    """Write ``content`` to ``path`` (creating parents) and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path
