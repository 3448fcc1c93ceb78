# topmark:header:start
#
#   project      : XmlMode
#   file         : base.py
#   file_relpath : src/xmlmode/resources/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resource types.

A `Resource` describes where a document lives and can hand out a byte stream for
it. Ownership of the stream returned by `Resource.open()` passes to the caller
(the detector closes it when done).

Provided implementations:
    - `FileSystemResource`: a local file.
    - `PackageResource`: a data file bundled inside an importable package.
    - `UrlResource`: a document fetched with ``urllib`` (``http``, ``https``, ``ftp``).
    - `InputStreamResource`: an already-open stream that can be opened only once.
"""

from __future__ import annotations

import os
import urllib.error
import urllib.request
from abc import ABC, abstractmethod
from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, BinaryIO, cast
from urllib.parse import urlparse

from xmlmode.config.logging import get_logger
from xmlmode.resources.errors import (
    ResourceAlreadyReadError,
    ResourceError,
    ResourceNotFoundError,
)

if TYPE_CHECKING:
    import sys

    if sys.version_info < (3, 14):
        from importlib.abc import Traversable
    else:
        from importlib.resources.abc import Traversable

    from xmlmode.config.logging import XmlModeLogger

logger: XmlModeLogger = get_logger(__name__)

#: Timeout (seconds) applied to URL resources.
URL_TIMEOUT: float = 30.0


class Resource(ABC):
    """A readable document source."""

    @abstractmethod
    def exists(self) -> bool:
        """Return True if the resource physically exists."""

    def is_readable(self) -> bool:
        """Return True if `open()` is expected to succeed."""
        return self.exists()

    def is_open(self) -> bool:
        """Return True if the resource wraps an already-open stream."""
        return False

    def is_file(self) -> bool:
        """Return True if the resource is backed by a file on the local file system."""
        return False

    @abstractmethod
    def open(self) -> BinaryIO:
        """Open the resource for reading; the caller owns (and closes) the stream."""

    @property
    def filename(self) -> str | None:
        """Last path segment, if the resource has one."""
        return None

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description used in logs and CLI output."""

    def content_length(self) -> int:
        """Return the content length in bytes by reading the whole resource."""
        size: int = 0
        with self.open() as fh:
            while chunk := fh.read(8192):
                size += len(chunk)
        return size

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True)
class FileSystemResource(Resource):
    """A file on the local file system."""

    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    def exists(self) -> bool:
        return self.path.exists()

    def is_readable(self) -> bool:
        return self.path.is_file() and os.access(self.path, os.R_OK)

    def is_file(self) -> bool:
        return True

    def open(self) -> BinaryIO:
        try:
            return self.path.open("rb")
        except FileNotFoundError as e:
            raise ResourceNotFoundError(f"{self.description} does not exist") from e

    @property
    def filename(self) -> str | None:
        return self.path.name or None

    @property
    def description(self) -> str:
        return f"file [{self.path}]"

    def content_length(self) -> int:
        return self.path.stat().st_size

    def create_relative(self, relative_path: str) -> FileSystemResource:
        """Return a resource for ``relative_path`` resolved against this file's directory."""
        return FileSystemResource(self.path.parent / relative_path)


@dataclass(frozen=True)
class PackageResource(Resource):
    """A data file shipped inside an importable package.

    Attributes:
        package (str): Dotted package name, e.g. ``"myapp.schemas"``.
        path (str): ``/``-separated path of the file within the package.
    """

    package: str
    path: str

    def _traversable(self) -> Traversable:
        try:
            return files(self.package).joinpath(self.path)
        except ModuleNotFoundError as e:
            raise ResourceNotFoundError(f"{self.description}: no package {self.package!r}") from e
        except TypeError as e:
            # Raised for plain modules (not packages) on Python < 3.12.
            raise ResourceNotFoundError(f"{self.description}: {e}") from e

    def exists(self) -> bool:
        try:
            return self._traversable().is_file()
        except ResourceNotFoundError:
            return False

    def open(self) -> BinaryIO:
        target: Traversable = self._traversable()
        if not target.is_file():
            raise ResourceNotFoundError(f"{self.description} does not exist")
        return cast("BinaryIO", target.open("rb"))

    @property
    def filename(self) -> str | None:
        return PurePosixPath(self.path).name or None

    @property
    def description(self) -> str:
        return f"package resource [{self.package}/{self.path}]"


@dataclass(frozen=True)
class UrlResource(Resource):
    """A document addressed by a URL and fetched with ``urllib``."""

    url: str

    def exists(self) -> bool:
        request = urllib.request.Request(self.url, method="HEAD")
        try:
            with urllib.request.urlopen(request, timeout=URL_TIMEOUT) as response:
                status: int = getattr(response, "status", 200)
                return status < 400
        except (urllib.error.URLError, OSError) as e:
            logger.debug("url resource: HEAD %s failed: %s", self.url, e)
            return False

    def open(self) -> BinaryIO:
        try:
            return cast("BinaryIO", urllib.request.urlopen(self.url, timeout=URL_TIMEOUT))
        except urllib.error.HTTPError as e:
            if e.code == 404:
                raise ResourceNotFoundError(f"{self.description} does not exist") from e
            raise ResourceError(f"{self.description}: HTTP {e.code} {e.reason}") from e
        except urllib.error.URLError as e:
            raise ResourceError(f"{self.description}: {e.reason}") from e

    @property
    def filename(self) -> str | None:
        return PurePosixPath(urlparse(self.url).path).name or None

    @property
    def description(self) -> str:
        return f"URL [{self.url}]"


class InputStreamResource(Resource):
    """Wrap an already-open byte stream.

    The stream can be handed out only once; a second `open()` raises
    `ResourceAlreadyReadError`.
    """

    def __init__(self, stream: BinaryIO, description: str | None = None) -> None:
        self._stream = stream
        self._description = description or ""
        self._read = False

    def exists(self) -> bool:
        return True

    def is_open(self) -> bool:
        return True

    def open(self) -> BinaryIO:
        if self._read:
            raise ResourceAlreadyReadError(
                f"{self.description} has already been read; "
                "do not use InputStreamResource if a stream needs to be read multiple times"
            )
        self._read = True
        return self._stream

    @property
    def description(self) -> str:
        return f"InputStream resource [{self._description}]"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, InputStreamResource) and other._stream is self._stream

    def __hash__(self) -> int:
        return id(self._stream)
