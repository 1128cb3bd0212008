# buildwire:header:start
#
#   project      : BuildWire
#   file         : encoding.py
#   file_relpath : src/buildwire/directives/encoding.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Line encoding for directives.

This module is I/O-free: it maps one directive value to exactly one line of
text (without the line terminator). The mapping is pure: the same directive and
config always produce the same line, independent of earlier calls.

Line shape:
    ``<prefix><name>=<payload>`` where ``<payload>`` is either a single field or
    two fields joined by ``=``. Nothing is escaped: embedded ``=``, quotes and
    line breaks are written as-is, because the orchestrator's parser expects no
    escaping.

Two asymmetries of the protocol are reproduced exactly:
    - `LinkSearch` without a kind uses ``config.link_search_fallback_prefix``
      (``carg::`` by default) instead of the directive prefix.
    - `Cfg` with a value wraps the value in double quotes; without a value no
      quotes are written.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from buildwire.config.model import EmitterConfig
from buildwire.directives.model import (
    BuildWarning,
    Cfg,
    CheckCfg,
    CompilerFlags,
    Env,
    LinkArg,
    LinkArgTarget,
    LinkLib,
    LinkSearch,
    Metadata,
    RerunIfChanged,
    RerunIfEnvChanged,
)

if TYPE_CHECKING:
    from buildwire.directives.model import Directive, PathLike

DEFAULT_CONFIG: Final[EmitterConfig] = EmitterConfig()

# Directive names as they appear on the wire (after the prefix).
LINK_ARG_NAMES: Final[dict[LinkArgTarget, str]] = {
    LinkArgTarget.ANY: "rustc-link-arg",
    LinkArgTarget.BIN: "rustc-link-arg-bin",
    LinkArgTarget.BINS: "rustc-link-arg-bins",
    LinkArgTarget.TESTS: "rustc-link-arg-tests",
    LinkArgTarget.EXAMPLES: "rustc-link-arg-examples",
    LinkArgTarget.CDYLIB: "rustc-cdylib-link-arg",
}


def render_path(path: PathLike) -> str:
    """Render ``path`` as display text.

    Bytes and path-like objects are decoded with the filesystem encoding.
    Each maximal invalid byte sequence is replaced with a single U+FFFD: a
    truncated multi-byte sequence renders as one replacement character, two
    stray bytes as two. The result can always be written as UTF-8 and rendering
    never fails.
    """
    text: str = os.fsdecode(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        pass
    else:
        return text
    try:
        # back to the original bytes (surrogateescape), then decode lossily
        data: bytes = os.fsencode(text)
    except UnicodeEncodeError:
        # lone surrogates that do not stand for an undecodable byte
        return "".join("\ufffd" if 0xD800 <= ord(ch) <= 0xDFFF else ch for ch in text)
    return data.decode(sys.getfilesystemencoding(), "replace")


def _line(prefix: str, name: str, *fields: str) -> str:
    return f"{prefix}{name}=" + "=".join(fields)


def _encode_rerun_if_changed(d: RerunIfChanged, config: EmitterConfig) -> str:
    return _line(config.directive_prefix, "rerun-if-changed", render_path(d.path))


def _encode_rerun_if_env_changed(d: RerunIfEnvChanged, config: EmitterConfig) -> str:
    return _line(config.directive_prefix, "rerun-if-env-changed", d.name)


def _encode_warning(d: BuildWarning, config: EmitterConfig) -> str:
    return _line(config.directive_prefix, "warning", d.message)


def _encode_metadata(d: Metadata, config: EmitterConfig) -> str:
    return _line(config.directive_prefix, "metadata", d.key, d.value)


def _encode_link_arg(d: LinkArg, config: EmitterConfig) -> str:
    name: str = LINK_ARG_NAMES[d.target]
    if d.target is LinkArgTarget.BIN:
        # LinkArg.__post_init__ guarantees a binary name for this target
        binary: str = cast("str", d.binary)
        return _line(config.directive_prefix, name, binary, d.flag)
    return _line(config.directive_prefix, name, d.flag)


def _encode_link_lib(d: LinkLib, config: EmitterConfig) -> str:
    return _line(config.directive_prefix, "rustc-link-lib", d.name)


def _encode_link_search(d: LinkSearch, config: EmitterConfig) -> str:
    path: str = render_path(d.path)
    if d.kind is None:
        return _line(config.link_search_fallback_prefix, "rustc-link-search", path)
    return _line(config.directive_prefix, "rustc-link-search", d.kind.value, path)


def _encode_compiler_flags(d: CompilerFlags, config: EmitterConfig) -> str:
    return _line(config.directive_prefix, "rustc-flags", d.flags)


def _encode_cfg(d: Cfg, config: EmitterConfig) -> str:
    if d.value is None:
        return _line(config.directive_prefix, "rustc-cfg", d.key)
    return _line(config.directive_prefix, "rustc-cfg", d.key, f'"{d.value}"')


def _encode_check_cfg(d: CheckCfg, config: EmitterConfig) -> str:
    return _line(config.directive_prefix, "rustc-check-cfg", d.cfg)


def _encode_env(d: Env, config: EmitterConfig) -> str:
    return _line(config.directive_prefix, "rustc-env", d.name, d.value)


_ENCODERS: Final[dict[type, Callable[[Directive, EmitterConfig], str]]] = {
    RerunIfChanged: _encode_rerun_if_changed,  # type: ignore[dict-item]
    RerunIfEnvChanged: _encode_rerun_if_env_changed,  # type: ignore[dict-item]
    BuildWarning: _encode_warning,  # type: ignore[dict-item]
    Metadata: _encode_metadata,  # type: ignore[dict-item]
    LinkArg: _encode_link_arg,  # type: ignore[dict-item]
    LinkLib: _encode_link_lib,  # type: ignore[dict-item]
    LinkSearch: _encode_link_search,  # type: ignore[dict-item]
    CompilerFlags: _encode_compiler_flags,  # type: ignore[dict-item]
    Cfg: _encode_cfg,  # type: ignore[dict-item]
    CheckCfg: _encode_check_cfg,  # type: ignore[dict-item]
    Env: _encode_env,  # type: ignore[dict-item]
}


def encode_directive(directive: Directive, config: EmitterConfig | None = None) -> str:
    """Encode ``directive`` as a single protocol line (without terminator).

    Args:
        directive (Directive): The directive to encode.
        config (EmitterConfig | None): Prefix settings; ``None`` uses the defaults.

    Returns:
        str: The encoded line.

    Raises:
        TypeError: If ``directive`` is not one of the directive types.
    """
    encoder = _ENCODERS.get(type(directive))
    if encoder is None:
        raise TypeError(f"Not a directive: {directive!r}")
    return encoder(directive, config or DEFAULT_CONFIG)
