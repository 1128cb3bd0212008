# buildwire:header:start
#
#   project      : BuildWire
#   file         : enum_mixins.py
#   file_relpath : src/buildwire/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Generic Enum utilities for BuildWire (typing-friendly, UI-agnostic).

Provided:
    - ``KeyedStrEnum``:
        ``str`` Enum whose ``.value`` is the stable wire/machine key, with a human
        ``label`` and optional parse ``aliases``.
    - ``EnumIntrospectionMixin``:
        Adds ``.value_length`` (cached) to any Enum subclass for aligned output.

Design:
    - Keep the functions *pure* and side-effect free.
    - Avoid bringing UI libraries (e.g. yachalk, click) into this module.

Example:
    ```python
    class Mode(KeyedStrEnum):
        A = ("alpha", "First mode", ("a",))
        B = ("beta", "Second mode")

    assert Mode.parse("A") is Mode.A
    assert Mode.parse("alpha") is Mode.A
    ```
"""

from __future__ import annotations

from enum import Enum
from functools import cached_property
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


class EnumIntrospectionMixin:
    """Small, UI-agnostic mixin that adds introspection conveniences to Enums.

    Implementation note:
        We rely on the Enum metaclass providing iterability over members and the
        presence of ``.value`` on each.
    """

    @cached_property
    def value_length(self) -> int:
        """Maximum length of the enum's ``.value`` strings."""
        # Pyright doesn't know 'self' is an Enum member; runtime guarantees it.
        return max(len(member.value) for member in type(self))  # type: ignore[attr-defined]


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string for tolerant matching."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return self.value

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return self.value

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against:
          - the stable key (`.value`)
          - the member name (`.name`)
          - any configured aliases

        Matching is case-insensitive and normalizes '-', ' ' to '_' via `_norm_token()`.
        Returns None when nothing matches.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)

        for m in cls:
            if token == _norm_token(m.value):
                return m
            if token == _norm_token(m.name):
                return m
            for a in m.aliases:
                if token == _norm_token(a):
                    return m
        return None
