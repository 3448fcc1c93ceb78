# topmark:header:start
#
#   project      : XmlMode
#   file         : loader.py
#   file_relpath : src/xmlmode/resources/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve location strings into resources.

Resolution order in [`ResourceLoader.get_resource`][xmlmode.resources.loader.ResourceLoader.get_resource]:

  1. Registered protocol resolvers, in registration order; the first non-None
     result wins.
  2. ``-`` → standard input.
  3. ``package:<dotted.package>/<path>`` → [`PackageResource`][xmlmode.resources.base.PackageResource].
  4. ``file:`` URLs → [`FileSystemResource`][xmlmode.resources.base.FileSystemResource];
     ``http``, ``https`` and ``ftp`` URLs → [`UrlResource`][xmlmode.resources.base.UrlResource].
  5. Anything else is a file-system path, relative to the loader's ``base_dir``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional
from urllib.parse import urlparse
from urllib.request import url2pathname

from xmlmode.config.logging import get_logger
from xmlmode.constants import PACKAGE_URL_PREFIX, STDIN_LOCATION
from xmlmode.resources.base import (
    FileSystemResource,
    InputStreamResource,
    PackageResource,
    Resource,
    UrlResource,
)
from xmlmode.resources.errors import ResourceError

if TYPE_CHECKING:
    from xmlmode.config.logging import XmlModeLogger

logger: XmlModeLogger = get_logger(__name__)

#: Strategy hook: return a Resource for locations it understands, None otherwise.
ProtocolResolver = Callable[[str, "ResourceLoader"], Optional[Resource]]

URL_SCHEMES: frozenset[str] = frozenset({"http", "https", "ftp"})


class ResourceLoader:
    """Turn location strings into [`Resource`][xmlmode.resources.base.Resource] objects.

    Args:
        base_dir (Path | None): Directory against which relative paths are resolved.
            Defaults to the current working directory at resolution time.
    """

    def __init__(self, *, base_dir: Path | None = None) -> None:
        self.base_dir = base_dir
        self._protocol_resolvers: list[ProtocolResolver] = []

    def add_protocol_resolver(self, resolver: ProtocolResolver) -> None:
        """Register a protocol resolver; registering the same resolver twice is a no-op."""
        if resolver not in self._protocol_resolvers:
            self._protocol_resolvers.append(resolver)

    @property
    def protocol_resolvers(self) -> tuple[ProtocolResolver, ...]:
        """Registered protocol resolvers, in registration order."""
        return tuple(self._protocol_resolvers)

    def get_resource(self, location: str) -> Resource:
        """Return the resource for ``location``.

        The returned resource is not checked for existence.

        Args:
            location (str): Path, URL, ``package:`` location or ``-``.

        Returns:
            Resource: The resolved resource.

        Raises:
            ResourceError: If a ``package:`` location is malformed or ``location``
                cannot be parsed as a URL.
        """
        for resolver in self._protocol_resolvers:
            resource: Resource | None = resolver(location, self)
            if resource is not None:
                logger.debug("loader: %r resolved by %r", location, resolver)
                return resource

        if location == STDIN_LOCATION:
            return InputStreamResource(sys.stdin.buffer, "<stdin>")

        if location.startswith(PACKAGE_URL_PREFIX):
            spec: str = location[len(PACKAGE_URL_PREFIX) :].lstrip("/")
            package, sep, path = spec.partition("/")
            if not package or not sep or not path or package.startswith("."):
                raise ResourceError(
                    f"Invalid package location {location!r}; "
                    f"expected '{PACKAGE_URL_PREFIX}<package>/<path>' with an absolute package name"
                )
            return PackageResource(package=package, path=path)

        try:
            parsed = urlparse(location)
        except ValueError as e:
            raise ResourceError(f"Invalid location {location!r}: {e}") from e
        # A single-letter scheme is a Windows drive letter, not a URL.
        if len(parsed.scheme) > 1:
            scheme: str = parsed.scheme.lower()
            if scheme == "file":
                return FileSystemResource(Path(url2pathname(parsed.path)))
            if scheme in URL_SCHEMES:
                return UrlResource(location)
            logger.debug("loader: unknown scheme %r; treating %r as a path", scheme, location)

        return self._resource_by_path(location)

    def _resource_by_path(self, path: str) -> Resource:
        p = Path(path)
        if not p.is_absolute():
            p = (self.base_dir or Path.cwd()) / p
        return FileSystemResource(p)
