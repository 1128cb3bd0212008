# buildwire:header:start
#
#   project      : BuildWire
#   file         : loader.py
#   file_relpath : src/buildwire/config/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Load encoder configuration from its sources.

Sources, lowest to highest precedence:
    1. built-in defaults (see [`EmitterConfig`][buildwire.config.model.EmitterConfig]);
    2. the ``[tool.buildwire]`` table of a TOML document;
    3. ``BUILDWIRE_*`` environment variables;
    4. explicit overrides (CLI options).

TOML parsing is done with `tomlkit` and returned as plain `dict` structures.

TOML mapping:

    [tool.buildwire]
    directive-prefix = "cargo::"
    link-search-fallback-prefix = "carg::"
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from buildwire.config.logging import get_logger
from buildwire.config.model import ConfigError, EmitterConfig, MutableEmitterConfig
from buildwire.constants import ENV_DIRECTIVE_PREFIX, ENV_LINK_SEARCH_PREFIX, TOML_TOOL_TABLE

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger = get_logger(__name__)

TomlTable = dict[str, Any]

KEY_DIRECTIVE_PREFIX: Final[str] = "directive-prefix"
KEY_LINK_SEARCH_PREFIX: Final[str] = "link-search-fallback-prefix"


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _get_string_or_none(table: Mapping[str, Any], key: str) -> str | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"[tool.buildwire] {key} must be a string (got {type(value).__name__})")
    return value


def config_from_toml_dict(data: Mapping[str, Any]) -> MutableEmitterConfig:
    """Extract settings from the ``[tool.buildwire]`` table of a parsed TOML document.

    A document without the table yields an empty builder.
    """
    table: Any = data
    for part in TOML_TOOL_TABLE:
        table = table.get(part) if isinstance(table, dict) else None
    if not isinstance(table, dict):
        logger.debug("No [%s] table found", ".".join(TOML_TOOL_TABLE))
        return MutableEmitterConfig()
    section = cast("Mapping[str, Any]", table)
    unknown = sorted(set(section) - {KEY_DIRECTIVE_PREFIX, KEY_LINK_SEARCH_PREFIX})
    if unknown:
        logger.warning("Ignoring unknown [tool.buildwire] keys: %s", ", ".join(unknown))
    return MutableEmitterConfig(
        directive_prefix=_get_string_or_none(section, KEY_DIRECTIVE_PREFIX),
        link_search_fallback_prefix=_get_string_or_none(section, KEY_LINK_SEARCH_PREFIX),
    )


def config_from_env(environ: Mapping[str, str] | None = None) -> MutableEmitterConfig:
    """Read ``BUILDWIRE_*`` settings from ``environ`` (defaults to ``os.environ``)."""
    env: Mapping[str, str] = os.environ if environ is None else environ
    return MutableEmitterConfig(
        directive_prefix=env.get(ENV_DIRECTIVE_PREFIX),
        link_search_fallback_prefix=env.get(ENV_LINK_SEARCH_PREFIX),
    )


def load_config(
    *,
    toml_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
    overrides: MutableEmitterConfig | None = None,
) -> EmitterConfig:
    """Layer every configuration source and freeze the result.

    Args:
        toml_path (Path | None): Optional TOML file with a ``[tool.buildwire]`` table.
        environ (Mapping[str, str] | None): Environment to read; ``None`` uses ``os.environ``.
        overrides (MutableEmitterConfig | None): Highest-precedence explicit settings.

    Returns:
        EmitterConfig: The effective configuration.

    Raises:
        ConfigError: If a source cannot be read or holds a malformed value.
    """
    builder = MutableEmitterConfig()
    if toml_path is not None:
        logger.debug("Loading config from %s", toml_path)
        builder = builder.merge_with(config_from_toml_dict(load_toml_dict(toml_path)))
    builder = builder.merge_with(config_from_env(environ))
    if overrides is not None:
        builder = builder.merge_with(overrides)
    return builder.freeze()
