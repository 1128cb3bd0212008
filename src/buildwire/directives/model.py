# buildwire:header:start
#
#   project      : BuildWire
#   file         : model.py
#   file_relpath : src/buildwire/directives/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Directive value types.

Each directive is an immutable dataclass describing one instruction to the
orchestrator. Values carry no identity and no lifecycle: encoding a directive
is a pure function of its fields (see
[`buildwire.directives.encoding`][buildwire.directives.encoding]).

Sections:
    * LinkSearchKind: what a link-search directory may be used to locate.
    * LinkArgTarget: which compiler invocation receives a linker argument.
    * Directive variants, grouped as in the orchestrator's documentation:
      rerun triggers, diagnostics, metadata, then compiler-facing directives.

Payload strings are never escaped. Callers must not pass values containing a
line break: the orchestrator would read the remainder as a separate directive.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Union

from buildwire.core.enum_mixins import KeyedStrEnum

PathLike = Union[str, bytes, os.PathLike[str], os.PathLike[bytes]]


class LinkSearchKind(KeyedStrEnum):
    """Classifier narrowing what a link-search path may be used to locate.

    `.value` is the token written on the wire.
    """

    DEPENDENCY = ("dependency", "Only search for transitive dependencies in this directory")
    CRATE = ("crate", "Only search for this crate's direct dependencies in this directory")
    NATIVE = ("native", "Only search for native libraries in this directory")
    FRAMEWORK = ("framework", "Only search for macOS frameworks in this directory")
    ALL = (
        "all",
        "Search for all library kinds in this directory, except frameworks",
    )


class LinkArgTarget(Enum):
    """Target selector for a linker argument.

    The selector decides the directive *name*; the flag itself is encoded the
    same way for every target.
    """

    ANY = "any"
    BIN = "bin"
    BINS = "bins"
    TESTS = "tests"
    EXAMPLES = "examples"
    CDYLIB = "cdylib"


@dataclass(frozen=True)
class RerunIfChanged:
    """Re-run the build script when the file or directory at ``path`` changes."""

    path: PathLike


@dataclass(frozen=True)
class RerunIfEnvChanged:
    """Re-run the build script when environment variable ``name`` changes."""

    name: str


@dataclass(frozen=True)
class BuildWarning:
    """Warning shown by the orchestrator after the build script finishes.

    Named ``BuildWarning`` to avoid shadowing the ``Warning`` builtin.
    """

    message: str


@dataclass(frozen=True)
class Metadata:
    """Key/value pair surfaced to build scripts of dependent packages."""

    key: str
    value: str


@dataclass(frozen=True)
class LinkArg:
    """Linker argument for the invocations selected by ``target``.

    Attributes:
        flag (str): The argument passed to the linker, verbatim.
        target (LinkArgTarget): Which invocations receive the argument.
        binary (str | None): Binary name; required for ``LinkArgTarget.BIN``
            and rejected for every other target.

    Raises:
        ValueError: If ``binary`` does not match ``target``.
    """

    flag: str
    target: LinkArgTarget = LinkArgTarget.ANY
    binary: str | None = None

    def __post_init__(self) -> None:
        if self.target is LinkArgTarget.BIN and self.binary is None:
            raise ValueError("LinkArg with target BIN requires a binary name")
        if self.target is not LinkArgTarget.BIN and self.binary is not None:
            raise ValueError(
                f"LinkArg binary name is only valid with target BIN (got {self.target.name})"
            )

    @classmethod
    def for_bin(cls, binary: str, flag: str) -> LinkArg:
        """Linker argument for the single binary ``binary``."""
        return cls(flag, LinkArgTarget.BIN, binary)


@dataclass(frozen=True)
class LinkLib:
    """Link the library ``name`` (optionally ``KIND[:MODIFIERS]=NAME[:RENAME]``)."""

    name: str


@dataclass(frozen=True)
class LinkSearch:
    """Add ``path`` to the library search path, optionally restricted by ``kind``."""

    path: PathLike
    kind: LinkSearchKind | None = None


@dataclass(frozen=True)
class CompilerFlags:
    """Raw compiler flags, passed through verbatim."""

    flags: str


@dataclass(frozen=True)
class Cfg:
    """Conditional-compilation flag ``key``, with an optional string ``value``."""

    key: str
    value: str | None = None


@dataclass(frozen=True)
class CheckCfg:
    """Declare an expected cfg expression, passed through verbatim."""

    cfg: str


@dataclass(frozen=True)
class Env:
    """Environment variable exported to later compiler stages."""

    name: str
    value: str


Directive = Union[
    RerunIfChanged,
    RerunIfEnvChanged,
    BuildWarning,
    Metadata,
    LinkArg,
    LinkLib,
    LinkSearch,
    CompilerFlags,
    Cfg,
    CheckCfg,
    Env,
]
