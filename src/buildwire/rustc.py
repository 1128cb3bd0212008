# buildwire:header:start
#
#   project      : BuildWire
#   file         : rustc.py
#   file_relpath : src/buildwire/rustc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Compiler-facing directives for build scripts.

Each function emits one ``rustc-*`` directive through the process-wide emitter.
Values are passed through verbatim and must not contain line breaks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildwire.directives.emitter import get_default_emitter
from buildwire.directives.model import (
    Cfg,
    CheckCfg,
    CompilerFlags,
    Env,
    LinkArg,
    LinkArgTarget,
    LinkLib,
    LinkSearch,
    LinkSearchKind,
)

if TYPE_CHECKING:
    from buildwire.directives.model import PathLike

__all__ = [
    "LinkSearchKind",
    "cdylib_link_arg",
    "cfg",
    "check_cfg",
    "env",
    "flags",
    "link_arg",
    "link_arg_bin",
    "link_arg_bins",
    "link_arg_examples",
    "link_arg_tests",
    "link_lib",
    "link_search",
]


def link_arg(flag: str) -> None:
    """Pass a linker argument to every supported target."""
    get_default_emitter().emit(LinkArg(flag))


def link_arg_bin(bin: str, flag: str) -> None:
    """Pass a linker argument to the binary target ``bin`` only."""
    get_default_emitter().emit(LinkArg.for_bin(bin, flag))


def link_arg_bins(flag: str) -> None:
    """Pass a linker argument to all binary targets."""
    get_default_emitter().emit(LinkArg(flag, LinkArgTarget.BINS))


def link_arg_tests(flag: str) -> None:
    """Pass a linker argument to test targets."""
    get_default_emitter().emit(LinkArg(flag, LinkArgTarget.TESTS))


def link_arg_examples(flag: str) -> None:
    """Pass a linker argument to example targets."""
    get_default_emitter().emit(LinkArg(flag, LinkArgTarget.EXAMPLES))


def cdylib_link_arg(flag: str) -> None:
    """Pass a linker argument to ``cdylib`` targets."""
    get_default_emitter().emit(LinkArg(flag, LinkArgTarget.CDYLIB))


def link_lib(lib: str) -> None:
    """Link the library ``lib``."""
    get_default_emitter().emit(LinkLib(lib))


def link_search(path: PathLike, kind: LinkSearchKind | None = None) -> None:
    """Add ``path`` to the library search path, optionally limited to ``kind``."""
    get_default_emitter().emit(LinkSearch(path, kind))


def flags(flags: str) -> None:
    """Pass raw flags (``-l`` / ``-L``) to the compiler."""
    get_default_emitter().emit(CompilerFlags(flags))


def cfg(key: str, value: str | None = None) -> None:
    """Enable the cfg option ``key``, or ``key="value"`` when ``value`` is given."""
    get_default_emitter().emit(Cfg(key, value))


def check_cfg(cfg: str) -> None:
    """Declare an expected cfg expression, e.g. ``cfg(foo, values("a", "b"))``."""
    get_default_emitter().emit(CheckCfg(cfg))


def env(name: str, value: str) -> None:
    """Set environment variable ``name`` for the compilation of the package."""
    get_default_emitter().emit(Env(name, value))
