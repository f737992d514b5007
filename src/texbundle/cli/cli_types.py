# topmark:header:start
#
#   project      : TexBundle
#   file         : cli_types.py
#   file_relpath : src/texbundle/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click parameter types for the TexBundle CLI."""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

import click
from click.shell_completion import CompletionItem

# Type variable bounded to Enum for generic EnumChoiceParam
E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Click parameter type accepting the (case-insensitive) values of a str-valued Enum.

    The converted value is the Enum member, so commands receive e.g.
    `OutputFormat.JSON` rather than ``"json"``.
    """

    name: str

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name = enum_cls.__name__.lower()
        self._by_value: dict[str, E] = {str(member.value).lower(): member for member in enum_cls}

    @property
    def choices(self) -> list[str]:
        """The accepted values, in definition order."""
        return list(self._by_value)

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Render the choices as ``[a|b|c]`` in help output."""
        return f"[{'|'.join(self.choices)}]"

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Convert a string (or an existing member) to a member of the Enum."""
        if isinstance(value, self.enum_cls):
            return value
        member: E | None = self._by_value.get(str(value).strip().lower())
        if member is None:
            self.fail(
                f"{value!r} is not one of {', '.join(map(repr, self.choices))}.",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete the values starting with ``incomplete``."""
        prefix: str = incomplete.lower()
        return [CompletionItem(choice) for choice in self.choices if choice.startswith(prefix)]
