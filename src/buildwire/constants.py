# buildwire:header:start
#
#   project      : BuildWire
#   file         : constants.py
#   file_relpath : src/buildwire/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""BuildWire Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    BUILDWIRE_VERSION: str = get_version("buildwire")
except PackageNotFoundError:  # running from a source checkout
    BUILDWIRE_VERSION = "0.0.0"

# Namespace shared by every directive line (`cargo::<name>=<payload>`).
DIRECTIVE_PREFIX: Final[str] = "cargo::"

# Pre-1.77 orchestrators only understand the single-colon namespace.
LEGACY_DIRECTIVE_PREFIX: Final[str] = "cargo:"

# The unkinded link-search directive has always been written with this prefix.
# It is kept byte-for-byte for wire compatibility; see EmitterConfig.
LINK_SEARCH_FALLBACK_PREFIX: Final[str] = "carg::"

# Parameterized environment key: `CARGO_BIN_EXE_<name>`.
BIN_EXE_ENV_PREFIX: Final[str] = "CARGO_BIN_EXE_"

# Presence-only marker set for the package the user asked to build.
PRIMARY_PACKAGE_ENV: Final[str] = "CARGO_PRIMARY_PACKAGE"

# Environment variables that configure BuildWire itself.
ENV_LOG_LEVEL: Final[str] = "BUILDWIRE_LOG_LEVEL"
ENV_DIRECTIVE_PREFIX: Final[str] = "BUILDWIRE_DIRECTIVE_PREFIX"
ENV_LINK_SEARCH_PREFIX: Final[str] = "BUILDWIRE_LINK_SEARCH_PREFIX"

# TOML table holding BuildWire settings (e.g. in pyproject.toml).
TOML_TOOL_TABLE: Final[tuple[str, str]] = ("tool", "buildwire")

VALUE_NOT_SET: str = "<not set>"
