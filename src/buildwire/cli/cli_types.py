# buildwire:header:start
#
#   project      : BuildWire
#   file         : cli_types.py
#   file_relpath : src/buildwire/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Shared CLI parameter types for BuildWire.

Custom Click parameter types converting user text to BuildWire enums:
    - `EnumChoiceParam`: case-insensitive match on an Enum's string values.
    - `KeyedEnumParam`: tolerant match on a `KeyedStrEnum` (key, name, aliases).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, NoReturn, Protocol, TypeVar, cast

import click

from buildwire.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable

    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)
K = TypeVar("K", bound=KeyedStrEnum)


def _fail_noreturn(
    message: str,
    param: click.Parameter | None,
    ctx: click.Context | None,
) -> NoReturn:
    """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
    raise click.BadParameter(message, param=param, ctx=ctx)


def _complete(values: Iterable[str], incomplete: str) -> list[ClickCompletionItem]:
    # Runtime import to avoid import-time dependency for non-completion paths
    from click.shell_completion import CompletionItem as RuntimeCompletionItem

    prefix: str = (incomplete or "").lower()
    return [RuntimeCompletionItem(v) for v in values if v.lower().startswith(prefix)]


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", e.value) for e in self.enum_cls]

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum (case-insensitive, by value)."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        lookup: dict[str, E] = {cast("str", e.value).lower(): e for e in self.enum_cls}
        key: str = str(value).lower()
        if key in lookup:
            return lookup[key]
        _fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click."""
        return _complete(self.choices, incomplete)


class KeyedEnumParam(ParamTypeBase, Generic[K]):
    """A Click parameter type resolving a `KeyedStrEnum` via its `parse()` rules."""

    enum_cls: type[K]
    name: str

    def __init__(self, enum_cls: type[K]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> K | None:
        """Convert a key, member name or alias to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: K | None = self.enum_cls.parse(str(value))
        if member is None:
            choices: str = ", ".join(m.name.lower().replace("_", "-") for m in self.enum_cls)
            _fail_noreturn(f"Invalid value '{value}'. Must be one of: {choices}", param, ctx)
        return member

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click."""
        return _complete((m.name.lower().replace("_", "-") for m in self.enum_cls), incomplete)
