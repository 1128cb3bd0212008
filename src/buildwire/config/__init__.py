# buildwire:header:start
#
#   project      : BuildWire
#   file         : __init__.py
#   file_relpath : src/buildwire/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""BuildWire configuration: encoder settings, their sources, and logging."""

from __future__ import annotations

from buildwire.config.loader import load_config
from buildwire.config.model import ConfigError, EmitterConfig, MutableEmitterConfig

__all__ = [
    "ConfigError",
    "EmitterConfig",
    "MutableEmitterConfig",
    "load_config",
]
