# topmark:header:start
#
#   project      : XmlMode
#   file         : errors.py
#   file_relpath : src/xmlmode/resources/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the resource layer."""

from __future__ import annotations


class ResourceError(OSError):
    """Base class for resource resolution and access errors."""


class ResourceNotFoundError(ResourceError, FileNotFoundError):
    """The resource named by a location does not exist."""


class ResourceAlreadyReadError(ResourceError):
    """A one-shot stream resource was opened a second time."""
