# topmark:header:start
#
#   project      : XmlMode
#   file         : cli_types.py
#   file_relpath : src/xmlmode/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types for XmlMode options."""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

import click

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Case-insensitive choice over the string values of an ``Enum``.

    Used for ``--format``; the command receives the enum member.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self.by_value: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        return "[" + "|".join(str(m.value) for m in self.enum_cls) + "]"

    def convert(
        self,
        value: str | E,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Map ``value`` to its enum member, failing with Click's usage error (exit 2)."""
        if isinstance(value, self.enum_cls):
            return value
        member = self.by_value.get(str(value).lower())
        if member is None:
            choices = ", ".join(str(m.value) for m in self.enum_cls)
            self.fail(f"{value!r} is not one of: {choices}.", param, ctx)
        return member
