# topmark:header:start
#
#   project      : XmlMode
#   file         : io.py
#   file_relpath : src/xmlmode/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for XmlMode configuration.

Parsing and rendering are done with `tomlkit`; documents are exchanged as plain
``dict`` structures (`TomlTable`). TOML has no `null` value, so `None` entries are
stripped during rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from xmlmode.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from xmlmode.config.logging import XmlModeLogger

logger: XmlModeLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class ConfigError(Exception):
    """Raised when configuration cannot be loaded or holds invalid values."""


def load_toml_dict(path: Path, *, strict: bool = False) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``xmlmode.toml`` or ``pyproject.toml``).
        strict (bool): If True, read and parse errors raise `ConfigError`;
            otherwise they are logged and an empty dict is returned.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If ``strict`` is set and the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        if strict:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        if strict:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            out[str(k_any)] = _strip_none_for_toml(v_any)
        return out

    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]

    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


def get_table(data: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``data[key]`` or an empty dict when absent.

    Raises:
        ConfigError: If the value exists but is not a table.
    """
    value: Any = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table, got {type(value).__name__}")
    return cast("TomlTable", value)


def get_string_value_or_none(data: TomlTable, key: str) -> str | None:
    """Return a string value, or None when the key is absent.

    Raises:
        ConfigError: If the value is not a string.
    """
    value: Any = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def get_bool_value_or_none(data: TomlTable, key: str) -> bool | None:
    """Return a boolean value, or None when the key is absent.

    Raises:
        ConfigError: If the value is not a boolean.
    """
    value: Any = data.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a boolean, got {type(value).__name__}")
    return value


def get_list_value(data: TomlTable, key: str) -> list[str]:
    """Return a list of strings, or an empty list when the key is absent.

    Raises:
        ConfigError: If the value is not a list of strings.
    """
    value: Any = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return list(cast("list[str]", value))
