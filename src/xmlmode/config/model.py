# topmark:header:start
#
#   project      : XmlMode
#   file         : model.py
#   file_relpath : src/xmlmode/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the CLI and the file resolver.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layers (lowest → highest precedence):
    1) Built-in defaults
    2) ``pyproject.toml`` (``[tool.xmlmode]``) then ``xmlmode.toml`` in the anchor directory
    3) Extra config files passed explicitly via ``--config`` (in the order provided)
    4) CLI overrides (`MutableConfig.apply_overrides`)

Scalar keys are merged last-wins when set; list keys replace the lower layer when non-empty.
"""

from __future__ import annotations

import codecs
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from xmlmode.config.io import (
    ConfigError,
    get_bool_value_or_none,
    get_list_value,
    get_string_value_or_none,
    get_table,
    load_toml_dict,
    to_toml,
)
from xmlmode.config.keys import Toml
from xmlmode.config.logging import get_logger
from xmlmode.constants import (
    DEFAULT_INCLUDE_PATTERNS,
    PYPROJECT_TOML_NAME,
    XMLMODE_TOML_NAME,
)

if TYPE_CHECKING:
    from xmlmode.config.io import TomlTable
    from xmlmode.config.logging import XmlModeLogger

logger: XmlModeLogger = get_logger(__name__)

#: Marker recorded in ``config_files`` when CLI overrides were applied.
CLI_OVERRIDE_STR = "<CLI overrides>"


def validate_encoding(name: str) -> str:
    """Return the canonical codec name for ``name``.

    Raises:
        ConfigError: If Python does not know the encoding.
    """
    try:
        return codecs.lookup(name).name
    except LookupError as e:
        raise ConfigError(f"Unknown encoding: {name!r}") from e


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for XmlMode.

    Attributes:
        encoding (str | None): Text encoding used by the detector; None = platform default.
        strict (bool): Whether an ``AUTO`` result makes the run fail.
        files (tuple[str, ...]): Locations to process (CLI positionals).
        include_patterns (tuple[str, ...]): Glob patterns selecting files inside directories.
        exclude_patterns (tuple[str, ...]): Glob patterns removing files inside directories.
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
    """

    encoding: str | None
    strict: bool
    files: tuple[str, ...]
    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    config_files: tuple[Path | str, ...]

    def to_toml_dict(self, *, include_files: bool = False) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict.

        Args:
            include_files (bool): Whether to include the ``files`` list in the output.

        Returns:
            TomlTable: the TOML-serializable dict representing the Config
        """
        toml_dict: TomlTable = {
            Toml.KEY_ENCODING: self.encoding,
            Toml.KEY_STRICT: self.strict,
            Toml.SECTION_FILES: {
                Toml.KEY_INCLUDE_PATTERNS: list(self.include_patterns),
                Toml.KEY_EXCLUDE_PATTERNS: list(self.exclude_patterns),
            },
        }
        if include_files and self.files:
            toml_dict[Toml.SECTION_FILES]["files"] = list(self.files)
        return toml_dict

    def to_toml(self) -> str:
        """Render this snapshot as a TOML document (``None`` values are omitted)."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            encoding=self.encoding,
            strict=self.strict,
            files=list(self.files),
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Tri-state scalars (``None`` = unset) let a later layer override only what it
    actually sets.

    Attributes:
        encoding (str | None): Text encoding; None = inherit / platform default.
        strict (bool | None): None = inherit, resolved to False on freeze.
        files (list[str]): Locations to process.
        include_patterns (list[str]): Glob patterns to include.
        exclude_patterns (list[str]): Glob patterns to exclude.
        config_files (list[Path | str]): Provenance of merged layers.
    """

    encoding: str | None = None
    strict: bool | None = None
    files: list[str] = field(default_factory=lambda: [])
    include_patterns: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config.

        Raises:
            ConfigError: If the configured encoding is unknown.
        """
        encoding: str | None = (
            validate_encoding(self.encoding) if self.encoding is not None else None
        )
        return Config(
            encoding=encoding,
            strict=bool(self.strict),
            files=tuple(self.files),
            include_patterns=tuple(self.include_patterns),
            exclude_patterns=tuple(self.exclude_patterns),
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return the built-in defaults."""
        return cls(
            strict=False,
            include_patterns=list(DEFAULT_INCLUDE_PATTERNS),
        )

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Args:
            data (TomlTable): The XmlMode table (root of ``xmlmode.toml`` or
                ``[tool.xmlmode]``).
            config_file (Path | None): Optional path to the source TOML file.

        Returns:
            MutableConfig: The resulting MutableConfig instance.

        Raises:
            ConfigError: If a key holds a value of the wrong type.
        """
        files_tbl: TomlTable = get_table(data, Toml.SECTION_FILES)
        logger.trace("TOML [files]: %s", files_tbl)

        draft: MutableConfig = cls(
            encoding=get_string_value_or_none(data, Toml.KEY_ENCODING),
            strict=get_bool_value_or_none(data, Toml.KEY_STRICT),
            include_patterns=get_list_value(files_tbl, Toml.KEY_INCLUDE_PATTERNS),
            exclude_patterns=get_list_value(files_tbl, Toml.KEY_EXCLUDE_PATTERNS),
        )
        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path, *, strict: bool = False) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``xmlmode.toml`` and ``pyproject.toml``; for the latter only the
        ``[tool.xmlmode]`` table is considered.

        Args:
            path (Path): Path to the TOML file.
            strict (bool): Raise on unreadable or malformed TOML instead of skipping it.

        Returns:
            MutableConfig | None: The parsed layer, or None when the file holds no
                XmlMode configuration (or could not be parsed and ``strict`` is False).

        Raises:
            ConfigError: If ``strict`` is set and the file cannot be loaded, or if any
                key holds a value of the wrong type.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path, strict=strict)
        if not toml_data:
            return None

        if path.name == PYPROJECT_TOML_NAME:
            tool_tbl: TomlTable = get_table(toml_data, Toml.SECTION_TOOL)
            section: TomlTable = get_table(tool_tbl, Toml.SECTION_TOOL_XMLMODE)
            if not section:
                logger.debug("[tool.xmlmode] section missing in %s", path)
                return None
            toml_data = section

        try:
            return cls.from_toml_dict(toml_data, config_file=path)
        except ConfigError as e:
            raise ConfigError(f"{path}: {e}") from e

    @classmethod
    def discover_local_config_files(cls, anchor: Path) -> list[Path]:
        """Return config files present in ``anchor``, in merge order.

        ``pyproject.toml`` comes first and ``xmlmode.toml`` second, so the dedicated
        tool file wins when both are present.
        """
        if anchor.is_file():
            anchor = anchor.parent
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, XMLMODE_TOML_NAME):
            p: Path = anchor / name
            if p.is_file():
                logger.debug("Discovered config file: %s", p)
                found.append(p)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            anchor (Path | None): Directory searched for config files (CWD if None).
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                after discovery, in the given order.
            no_config (bool): If True, skip discovery (explicit files still apply).

        Returns:
            MutableConfig: A mutable configuration draft ready to be frozen or further edited.

        Raises:
            ConfigError: If an explicit config file is missing, unreadable or invalid.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            extra_path = Path(extra)
            if not extra_path.is_file():
                raise ConfigError(f"Config file not found: {extra_path}")
            mc = cls.from_toml_file(extra_path, strict=True)
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values from ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """
        return MutableConfig(
            encoding=other.encoding if other.encoding is not None else self.encoding,
            strict=other.strict if other.strict is not None else self.strict,
            files=other.files or self.files,
            include_patterns=other.include_patterns or self.include_patterns,
            exclude_patterns=other.exclude_patterns or self.exclude_patterns,
            config_files=self.config_files + other.config_files,
        )

    def apply_overrides(
        self,
        *,
        files: Iterable[str] | None = None,
        encoding: str | None = None,
        strict: bool | None = None,
        include_patterns: Iterable[str] | None = None,
        exclude_patterns: Iterable[str] | None = None,
    ) -> MutableConfig:
        """Apply CLI (or API) overrides in place and return ``self``.

        Only arguments that are not None (or non-empty, for collections) override.
        Excludes are added to the configured ones; includes replace them.
        """
        logger.debug(
            "Applying overrides: encoding=%r strict=%r include=%r exclude=%r",
            encoding,
            strict,
            include_patterns,
            exclude_patterns,
        )
        self.config_files.append(CLI_OVERRIDE_STR)
        if files:
            self.files = list(files)
        if encoding is not None:
            self.encoding = encoding
        if strict is not None:
            self.strict = strict
        includes: list[str] = list(include_patterns or ())
        if includes:
            self.include_patterns = includes
        self.exclude_patterns.extend(exclude_patterns or ())
        return self
