# topmark:header:start
#
#   project      : XmlMode
#   file         : __init__.py
#   file_relpath : src/xmlmode/resources/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resource abstraction: turn a location string into a readable byte stream.

The detector never opens files itself. A [`ResourceLoader`][xmlmode.resources.loader.ResourceLoader]
resolves a location (file path, ``file:``/``http(s):`` URL, ``package:`` entry, or ``-``
for standard input) into a [`Resource`][xmlmode.resources.base.Resource] whose
``open()`` hands over a byte stream.
"""

from __future__ import annotations

from xmlmode.resources.base import (
    FileSystemResource,
    InputStreamResource,
    PackageResource,
    Resource,
    UrlResource,
)
from xmlmode.resources.errors import (
    ResourceAlreadyReadError,
    ResourceError,
    ResourceNotFoundError,
)
from xmlmode.resources.loader import ProtocolResolver, ResourceLoader

__all__ = [
    "FileSystemResource",
    "InputStreamResource",
    "PackageResource",
    "ProtocolResolver",
    "Resource",
    "ResourceAlreadyReadError",
    "ResourceError",
    "ResourceLoader",
    "ResourceNotFoundError",
    "UrlResource",
]
