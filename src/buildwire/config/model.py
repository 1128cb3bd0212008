# buildwire:header:start
#
#   project      : BuildWire
#   file         : model.py
#   file_relpath : src/buildwire/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Encoder configuration model and merge policy.

This module defines:
    - `EmitterConfig`: an immutable snapshot consulted by the directive encoder.
    - `MutableEmitterConfig`: a mutable builder used while layering sources; it
      can be frozen into `EmitterConfig` and thawed back for edits.

Scope:
    - *In scope*: data shapes, validation, merge policy and freeze/thaw.
    - *Out of scope*: reading environment variables and TOML files. Those live in
      [`buildwire.config.loader`][buildwire.config.loader].

Settings:
    - ``directive_prefix``: namespace written before every directive name
      (``cargo::`` by default, ``cargo:`` for older orchestrators).
    - ``link_search_fallback_prefix``: prefix of the link-search directive when
      no search kind is given. Defaults to ``carg::``, which is what the
      orchestrator has always been sent; set it to ``cargo::`` to opt into the
      namespaced spelling.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from buildwire.config.logging import get_logger
from buildwire.constants import DIRECTIVE_PREFIX, LINK_SEARCH_FALLBACK_PREFIX

logger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration value is malformed."""


def validate_prefix(value: str, *, setting: str) -> str:
    """Return ``value`` if it is usable as a directive prefix.

    A prefix must end with ``:`` and contain neither whitespace nor ``=``.

    Raises:
        ConfigError: If the prefix is malformed.
    """
    if not value.endswith(":"):
        raise ConfigError(f"{setting} must end with ':' (got {value!r})")
    if "=" in value or any(ch.isspace() for ch in value):
        raise ConfigError(f"{setting} must not contain '=' or whitespace (got {value!r})")
    return value


@dataclass(frozen=True)
class EmitterConfig:
    """Immutable encoder settings."""

    directive_prefix: str = DIRECTIVE_PREFIX
    link_search_fallback_prefix: str = LINK_SEARCH_FALLBACK_PREFIX

    def thaw(self) -> MutableEmitterConfig:
        """Return a mutable copy of this configuration."""
        return MutableEmitterConfig(
            directive_prefix=self.directive_prefix,
            link_search_fallback_prefix=self.link_search_fallback_prefix,
        )

    def with_overrides(
        self,
        *,
        directive_prefix: str | None = None,
        link_search_fallback_prefix: str | None = None,
    ) -> EmitterConfig:
        """Return a copy with the given settings replaced (``None`` keeps the current one)."""
        builder = MutableEmitterConfig(
            directive_prefix=directive_prefix,
            link_search_fallback_prefix=link_search_fallback_prefix,
        )
        return replace(self, **builder.as_overrides())


def _is_set(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def _pick(override: str | None, base: str | None) -> str | None:
    """Return ``override`` if it is set, else ``base`` (blank counts as unset)."""
    return override if _is_set(override) else base


@dataclass
class MutableEmitterConfig:
    """Mutable builder for `EmitterConfig`.

    ``None`` means *unset*: the value is inherited from whatever this builder is
    merged onto, and falls back to the built-in default at `freeze()` time.
    Blank strings are treated as unset too.
    """

    directive_prefix: str | None = None
    link_search_fallback_prefix: str | None = None

    def as_overrides(self) -> dict[str, str]:
        """Return the validated settings that are explicitly set."""
        out: dict[str, str] = {}
        if self.directive_prefix is not None and _is_set(self.directive_prefix):
            out["directive_prefix"] = validate_prefix(
                self.directive_prefix.strip(), setting="directive_prefix"
            )
        if self.link_search_fallback_prefix is not None and _is_set(
            self.link_search_fallback_prefix
        ):
            out["link_search_fallback_prefix"] = validate_prefix(
                self.link_search_fallback_prefix.strip(),
                setting="link_search_fallback_prefix",
            )
        return out

    def merge_with(self, other: MutableEmitterConfig) -> MutableEmitterConfig:
        """Return a new builder where settings set in ``other`` win over ``self``."""
        return MutableEmitterConfig(
            directive_prefix=_pick(other.directive_prefix, self.directive_prefix),
            link_search_fallback_prefix=_pick(
                other.link_search_fallback_prefix, self.link_search_fallback_prefix
            ),
        )

    def freeze(self) -> EmitterConfig:
        """Validate and freeze into an `EmitterConfig`.

        Raises:
            ConfigError: If a set value is malformed.
        """
        config = EmitterConfig(**self.as_overrides())
        logger.debug("Frozen emitter config: %s", config)
        return config
