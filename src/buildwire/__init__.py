# buildwire:header:start
#
#   project      : BuildWire
#   file         : __init__.py
#   file_relpath : src/buildwire/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""BuildWire package.

BuildWire lets build scripts talk to the Cargo build orchestrator: it encodes
build directives (link flags, search paths, cfg flags, environment exports,
warnings, metadata) as the line protocol Cargo reads from standard output, and
reads the environment variables Cargo sets for the script with typed accessors.

Typical use:
    ```python
    from buildwire import EnvKey, EnvironmentAccessor, DirectiveEmitter, Cfg

    env = EnvironmentAccessor()
    name = env.read(EnvKey.PKG_NAME).unwrap()

    emitter = DirectiveEmitter()
    emitter.emit(Cfg("feature_x"))
    ```
"""

from __future__ import annotations

from buildwire.config.model import EmitterConfig, MutableEmitterConfig
from buildwire.directives.emitter import DirectiveEmitter, DirectiveSink, StdoutSink
from buildwire.directives.encoding import encode_directive, render_path
from buildwire.directives.model import (
    BuildWarning,
    Cfg,
    CheckCfg,
    CompilerFlags,
    Directive,
    Env,
    LinkArg,
    LinkArgTarget,
    LinkLib,
    LinkSearch,
    LinkSearchKind,
    Metadata,
    RerunIfChanged,
    RerunIfEnvChanged,
)
from buildwire.env.accessor import EnvironmentAccessor
from buildwire.env.keys import EnvKey, EnvValueType
from buildwire.env.lookup import (
    EnvLookup,
    EnvLookupError,
    InvalidEncodingError,
    NotPresentError,
)

__all__ = [
    "BuildWarning",
    "Cfg",
    "CheckCfg",
    "CompilerFlags",
    "Directive",
    "DirectiveEmitter",
    "DirectiveSink",
    "EmitterConfig",
    "Env",
    "EnvKey",
    "EnvLookup",
    "EnvLookupError",
    "EnvValueType",
    "EnvironmentAccessor",
    "InvalidEncodingError",
    "LinkArg",
    "LinkArgTarget",
    "LinkLib",
    "LinkSearch",
    "LinkSearchKind",
    "Metadata",
    "MutableEmitterConfig",
    "NotPresentError",
    "RerunIfChanged",
    "RerunIfEnvChanged",
    "StdoutSink",
    "encode_directive",
    "render_path",
]
