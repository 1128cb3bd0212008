# buildwire:header:start
#
#   project      : BuildWire
#   file         : cargo.py
#   file_relpath : src/buildwire/cargo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Orchestrator-facing helpers for build scripts.

Functions here talk to Cargo itself: rerun triggers, warnings, metadata for
dependent packages, and the environment Cargo sets for the script. Directives
go through the process-wide emitter (see
[`get_default_emitter`][buildwire.directives.emitter.get_default_emitter]).

Example:
    ```python
    from buildwire import cargo

    cargo.rerun_if_changed("build.py")
    out_dir = cargo.read(cargo.EnvKey.OUT_DIR).unwrap()
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildwire.directives.emitter import get_default_emitter
from buildwire.directives.model import (
    BuildWarning,
    Metadata,
    RerunIfChanged,
    RerunIfEnvChanged,
)
from buildwire.env.accessor import EnvironmentAccessor
from buildwire.env.keys import EnvKey

if TYPE_CHECKING:
    from buildwire.directives.model import PathLike
    from buildwire.env.accessor import EnvValue
    from buildwire.env.lookup import EnvLookup

__all__ = [
    "EnvKey",
    "binary_executable_path",
    "is_primary_package",
    "metadata",
    "read",
    "rerun_if_changed",
    "rerun_if_env_changed",
    "warning",
]

_accessor = EnvironmentAccessor()


def rerun_if_changed(path: PathLike) -> None:
    """Re-run the build script if the file at ``path`` changes."""
    get_default_emitter().emit(RerunIfChanged(path))


def rerun_if_env_changed(name: str) -> None:
    """Re-run the build script if environment variable ``name`` changes."""
    get_default_emitter().emit(RerunIfEnvChanged(name))


def warning(message: str) -> None:
    """Print a warning message during the build."""
    get_default_emitter().emit(BuildWarning(message))


def metadata(key: str, value: str) -> None:
    """Set metadata readable by build scripts of dependent packages."""
    get_default_emitter().emit(Metadata(key, value))


def read(key: EnvKey) -> EnvLookup[EnvValue]:
    """Read an orchestrator-provided environment key."""
    return _accessor.read(key)


def binary_executable_path(binary_name: str) -> EnvLookup[EnvValue]:
    """Path of the executable for binary ``binary_name`` (``CARGO_BIN_EXE_<name>``)."""
    return _accessor.binary_executable_path(binary_name)


def is_primary_package() -> bool:
    """True if the package being built is the one the user asked for."""
    return _accessor.is_primary_package()
