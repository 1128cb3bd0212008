# buildwire:header:start
#
#   project      : BuildWire
#   file         : formats.py
#   file_relpath : src/buildwire/core/machine/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Shared machine-output envelope conventions for BuildWire.

This module defines the canonical keys and kind values used across BuildWire's
machine-readable output formats (JSON and NDJSON).

It is intentionally Click/console-free so it can be reused by any frontend.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from pathlib import Path
from typing import Any, Final, TypedDict, cast

from buildwire.constants import BUILDWIRE_VERSION


class MachineKey:
    """Canonical keys used in machine-readable JSON/NDJSON output envelopes."""

    KIND: Final[str] = "kind"
    META: Final[str] = "meta"

    # payload container keys
    ENV: Final[str] = "env"
    VERSION: Final[str] = "version"

    # env entry fields
    KEY: Final[str] = "key"
    VAR: Final[str] = "var"
    TYPE: Final[str] = "type"
    VALUE: Final[str] = "value"
    ERROR: Final[str] = "error"


class MachineKind:
    """Canonical `kind` values for NDJSON records."""

    ENV: Final[str] = "env"
    VERSION: Final[str] = "version"


_KNOWN_KINDS: Final[set[str]] = {
    MachineKind.ENV,
    MachineKind.VERSION,
}


class MetaPayload(TypedDict):
    """Metadata describing the BuildWire runtime environment for machine output."""

    tool: str
    version: str


def validate_machine_kind(kind: str) -> None:
    """Validate that `kind` is a known machine record kind."""
    if not kind:
        raise ValueError("machine kind must be a non-empty string")
    if kind not in _KNOWN_KINDS:
        raise ValueError(
            f"Unknown machine kind '{kind}' - valid choices: {', '.join(sorted(_KNOWN_KINDS))}"
        )


def normalize_payload(obj: object) -> object:
    """Normalize a machine-output payload into JSON-serializable structures.

    Conversions:
      - Path -> str
      - Enum -> Enum.name
      - Mapping -> dict[str, normalized value]
      - list/tuple/set/frozenset -> list[normalized item]

    Args:
        obj (object): The machine-output payload to be transformed into JSON-serializable format.

    Returns:
        object: The JSON-serializable representation of machine-output payload.
    """
    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, Enum):
        return obj.name

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {str(k): normalize_payload(v) for k, v in mapping.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        seq: Iterable[object] = cast("Iterable[object]", obj)
        return [normalize_payload(v) for v in seq]

    return obj


def build_meta_payload() -> MetaPayload:
    """Build a small metadata payload with tool name and version."""
    return {"tool": "buildwire", "version": BUILDWIRE_VERSION}


def build_ndjson_record(
    *,
    kind: str,
    meta: MetaPayload,
    payload: object,
) -> dict[str, object]:
    """Build a single NDJSON record with a uniform envelope.

    Shape:
        `{"kind": <kind>, "meta": <meta>, <kind>: <payload>}`

    Args:
        kind (str): NDJSON record kind.
        meta (MetaPayload): NDJSON payload meta.
        payload (object): The payload object.

    Returns:
        dict[str, object]: the NDJSON record in the correct envelope.
    """
    validate_machine_kind(kind)
    return {
        MachineKey.KIND: kind,
        MachineKey.META: dict(meta),
        kind: normalize_payload(payload),
    }


def build_json_envelope(
    *,
    meta: Mapping[str, object],
    **payloads: object,
) -> dict[str, object]:
    """Build a JSON envelope with `meta` plus one or more named payloads."""
    out: dict[str, object] = {MachineKey.META: dict(meta)}
    for name, payload in payloads.items():
        out[name] = normalize_payload(payload)
    return out
