# topmark:header:start
#
#   project      : XmlMode
#   file         : test_loader.py
#   file_relpath : tests/resources/test_loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for location resolution in `ResourceLoader`."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

from xmlmode.resources import (
    FileSystemResource,
    InputStreamResource,
    PackageResource,
    Resource,
    ResourceError,
    ResourceLoader,
    UrlResource,
)


def test_relative_path_resolves_against_base_dir(tmp_path: Path) -> None:
    loader = ResourceLoader(base_dir=tmp_path)

    resource: Resource = loader.get_resource("conf/beans.xml")

    assert resource == FileSystemResource(tmp_path / "conf" / "beans.xml")


def test_relative_path_defaults_to_cwd(isolation: Path) -> None:
    resource: Resource = ResourceLoader().get_resource("beans.xml")

    assert isinstance(resource, FileSystemResource)
    assert resource.path == Path.cwd() / "beans.xml"


def test_absolute_path_is_kept(tmp_path: Path) -> None:
    target: Path = tmp_path / "abs.xml"

    resource: Resource = ResourceLoader(base_dir=Path("/elsewhere")).get_resource(str(target))

    assert resource == FileSystemResource(target)


def test_file_url_maps_to_file_system_resource(tmp_path: Path) -> None:
    target: Path = tmp_path / "beans.xml"

    resource: Resource = ResourceLoader().get_resource(target.as_uri())

    assert isinstance(resource, FileSystemResource)
    assert resource.path == target


@pytest.mark.parametrize(
    "location",
    [
        "http://example.org/beans.xml",
        "https://example.org/beans.xml",
        "ftp://example.org/beans.xml",
        "HTTPS://example.org/beans.xml",
    ],
)
def test_network_urls_map_to_url_resource(location: str) -> None:
    resource: Resource = ResourceLoader().get_resource(location)

    assert resource == UrlResource(location)


def test_unknown_scheme_is_a_path(tmp_path: Path) -> None:
    resource: Resource = ResourceLoader(base_dir=tmp_path).get_resource("urn:beans")

    assert isinstance(resource, FileSystemResource)


@pytest.mark.parametrize(
    "location, package, path",
    [
        ("package:myapp.schemas/beans.xml", "myapp.schemas", "beans.xml"),
        ("package:/myapp/conf/beans.xml", "myapp", "conf/beans.xml"),
    ],
)
def test_package_locations(location: str, package: str, path: str) -> None:
    resource: Resource = ResourceLoader().get_resource(location)

    assert resource == PackageResource(package=package, path=path)


@pytest.mark.parametrize(
    "location",
    ["package:", "package:myapp", "package:myapp/", "package:.relative/beans.xml"],
)
def test_malformed_package_location(location: str) -> None:
    with pytest.raises(ResourceError, match="Invalid package location"):
        ResourceLoader().get_resource(location)


def test_dash_is_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    buffer = io.BytesIO(b"<root/>")
    monkeypatch.setattr(sys, "stdin", SimpleNamespace(buffer=buffer))

    resource: Resource = ResourceLoader().get_resource("-")

    assert isinstance(resource, InputStreamResource)
    assert resource.open() is buffer


def test_protocol_resolvers_run_first_in_order(tmp_path: Path) -> None:
    calls: list[str] = []

    def first(location: str, loader: ResourceLoader) -> Resource | None:
        calls.append("first")
        return None

    def second(location: str, loader: ResourceLoader) -> Resource | None:
        calls.append("second")
        if location.startswith("classpath:"):
            base: Path = loader.base_dir or Path.cwd()
            return FileSystemResource(base / location.split(":", 1)[1])
        return None

    loader = ResourceLoader(base_dir=tmp_path)
    loader.add_protocol_resolver(first)
    loader.add_protocol_resolver(second)
    loader.add_protocol_resolver(first)

    resource: Resource = loader.get_resource("classpath:beans.xml")

    assert loader.protocol_resolvers == (first, second)
    assert calls == ["first", "second"]
    assert resource == FileSystemResource(tmp_path / "beans.xml")


def test_protocol_resolver_can_shadow_builtin_handling() -> None:
    sentinel = UrlResource("http://mirror.example.org/beans.xml")
    loader = ResourceLoader()
    loader.add_protocol_resolver(lambda location, _loader: sentinel if location == "-" else None)

    assert loader.get_resource("-") is sentinel


def test_unparsable_url_is_a_resource_error() -> None:
    with pytest.raises(ResourceError, match="Invalid location"):
        ResourceLoader().get_resource("http://[bad/beans.xml")
