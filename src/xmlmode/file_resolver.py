# topmark:header:start
#
#   project      : XmlMode
#   file         : file_resolver.py
#   file_relpath : src/xmlmode/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve input locations for XmlMode based on config and filters.

Positional locations are either file-system paths or other resource locations
(``-``, ``package:...``, URLs). Directories are walked recursively and their
members filtered with include/exclude patterns (gitwildmatch semantics, evaluated
relative to the walked directory). Explicitly named files are never filtered.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urlparse

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from xmlmode.config.logging import get_logger
from xmlmode.constants import PACKAGE_URL_PREFIX, STDIN_LOCATION

if TYPE_CHECKING:
    from collections.abc import Iterable

    from xmlmode.config.logging import XmlModeLogger
    from xmlmode.config.model import Config

logger: XmlModeLogger = get_logger(__name__)


def is_path_location(location: str) -> bool:
    """Return True if ``location`` names a file-system path rather than another resource."""
    if location == STDIN_LOCATION or location.startswith(PACKAGE_URL_PREFIX):
        return False
    try:
        scheme: str = urlparse(location).scheme
    except ValueError:
        # Malformed URL (e.g. a broken IPv6 host); left for the loader to report.
        return False
    # A single-letter scheme is a Windows drive letter.
    return len(scheme) <= 1


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def _build_spec(patterns: Iterable[str]) -> PathSpec | None:
    lines: list[str] = list(patterns)
    return PathSpec.from_lines(GitWildMatchPattern, lines) if lines else None


def expand_directory(
    directory: Path,
    include_patterns: Iterable[str],
    exclude_patterns: Iterable[str],
) -> list[Path]:
    """Return the files below ``directory`` selected by the patterns, sorted.

    Args:
        directory (Path): Directory to walk recursively.
        include_patterns (Iterable[str]): A file is kept only if it matches one of
            these (all files are kept when empty).
        exclude_patterns (Iterable[str]): A kept file is dropped if it matches one of these.

    Returns:
        list[Path]: Selected files.
    """
    include_spec: PathSpec | None = _build_spec(include_patterns)
    exclude_spec: PathSpec | None = _build_spec(exclude_patterns)

    selected: list[Path] = []
    for p in directory.rglob("*"):
        if not p.is_file():
            continue
        rel: str = _rel_for_match(p, directory)
        if include_spec is not None and not include_spec.match_file(rel):
            continue
        if exclude_spec is not None and exclude_spec.match_file(rel):
            logger.trace("Excluded: %s", rel)
            continue
        selected.append(p)
    logger.debug("Directory %s: %d file(s) selected", directory, len(selected))
    return sorted(selected)


def resolve_locations(config: Config) -> list[str]:
    """Return the locations to detect, in command-line order.

    Directories are replaced by their selected members; every other location
    (files, missing paths, ``-``, ``package:`` entries, URLs) is kept as given so
    that errors surface when the location is opened. Duplicates are dropped.

    Args:
        config (Config): Configuration with the positional ``files``.

    Returns:
        list[str]: Locations to hand to the resource loader.
    """
    out: list[str] = []
    seen: set[str] = set()

    def _add(loc: str) -> None:
        if loc not in seen:
            seen.add(loc)
            out.append(loc)

    for location in config.files:
        if is_path_location(location) and Path(location).is_dir():
            expanded: list[Path] = expand_directory(
                Path(location), config.include_patterns, config.exclude_patterns
            )
            if not expanded:
                logger.warning("No matching files in directory: %s", location)
            for p in expanded:
                _add(str(p))
        else:
            _add(location)
    return out
