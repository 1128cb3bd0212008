# buildwire:header:start
#
#   project      : BuildWire
#   file         : keys.py
#   file_relpath : src/buildwire/env/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Environment keys set by the orchestrator for build scripts.

`EnvKey` is a declarative table: each member binds a symbolic name to the
variable name (its `.value`), the type the raw text converts to, and a short
description. Readers dispatch on the member instead of exposing one function
per variable.

Notes:
    - Keep this module behavior-free; reading lives in
      [`buildwire.env.accessor`][buildwire.env.accessor].
    - The parameterized ``CARGO_BIN_EXE_<name>`` key and the presence-only
      ``CARGO_PRIMARY_PACKAGE`` marker are not members; they have dedicated
      accessors.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

from buildwire.core.enum_mixins import EnumIntrospectionMixin, KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable

_EK = TypeVar("_EK", bound="EnvKey")


class EnvValueType(Enum):
    """Type an environment value is converted to."""

    TEXT = "text"
    PATH = "path"


_T = EnvValueType.TEXT
_P = EnvValueType.PATH


class EnvKey(EnumIntrospectionMixin, KeyedStrEnum):
    """Orchestrator-populated environment variables.

    Attributes:
        label (str): Description of the value.
        value_type (EnvValueType): Declared type of the value.
        aliases (tuple[str, ...]): Extra tokens accepted by `parse()`.
    """

    value_type: EnvValueType

    def __new__(
        cls: type[_EK],
        key: str,
        value_type: EnvValueType,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _EK:
        """Create a member bound to variable ``key`` of type ``value_type``."""
        obj: _EK = str.__new__(cls, key)
        obj._value_ = key
        obj.value_type = value_type
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    BINARY_PATH = ("CARGO", _P, "Path to the cargo binary performing the build", ("cargo",))
    MANIFEST_DIR = (
        "CARGO_MANIFEST_DIR",
        _P,
        "The directory containing the manifest of your package",
    )
    MANIFEST_PATH = ("CARGO_MANIFEST_PATH", _P, "The path to the manifest of your package")
    PKG_VERSION = ("CARGO_PKG_VERSION", _T, "The full version of your package", ("version",))
    PKG_VERSION_MAJOR = ("CARGO_PKG_VERSION_MAJOR", _T, "The major version of your package")
    PKG_VERSION_MINOR = ("CARGO_PKG_VERSION_MINOR", _T, "The minor version of your package")
    PKG_VERSION_PATCH = ("CARGO_PKG_VERSION_PATCH", _T, "The patch version of your package")
    PKG_VERSION_PRE = ("CARGO_PKG_VERSION_PRE", _T, "The pre-release version of your package")
    PKG_AUTHORS = (
        "CARGO_PKG_AUTHORS",
        _T,
        "Colon separated list of authors from the manifest of your package",
    )
    PKG_NAME = ("CARGO_PKG_NAME", _T, "The name of your package")
    PKG_DESCRIPTION = (
        "CARGO_PKG_DESCRIPTION",
        _T,
        "The description from the manifest of your package",
    )
    PKG_HOMEPAGE = ("CARGO_PKG_HOMEPAGE", _T, "The home page from the manifest of your package")
    PKG_REPOSITORY = (
        "CARGO_PKG_REPOSITORY",
        _T,
        "The repository from the manifest of your package",
    )
    PKG_LICENSE = ("CARGO_PKG_LICENSE", _T, "The license from the manifest of your package")
    PKG_LICENSE_FILE = (
        "CARGO_PKG_LICENSE_FILE",
        _P,
        "The license file from the manifest of your package",
    )
    PKG_RUST_VERSION = (
        "CARGO_PKG_RUST_VERSION",
        _T,
        "The minimum Rust version supported by your package (not the current Rust version)",
        ("msrv",),
    )
    PKG_README = ("CARGO_PKG_README", _P, "Path to the README file of your package")
    CRATE_NAME = (
        "CARGO_CRATE_NAME",
        _T,
        "The name of the crate currently being compiled ('-' converted to '_')",
    )
    BIN_NAME = (
        "CARGO_BIN_NAME",
        _T,
        "The name of the binary currently being compiled, without file extension",
    )
    OUT_DIR = ("OUT_DIR", _P, "The folder where the build script should place its output")
    TARGET_TMPDIR = (
        "CARGO_TARGET_TMPDIR",
        _P,
        "Scratch directory for integration tests and benchmarks",
    )
    RUSTC_CURRENT_DIR = (
        "CARGO_RUSTC_CURRENT_DIR",
        _P,
        "The directory rustc is invoked from (nightly only)",
    )

    @property
    def var(self) -> str:
        """The environment variable name."""
        return self.value
