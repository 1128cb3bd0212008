# buildwire:header:start
#
#   project      : BuildWire
#   file         : emitters.py
#   file_relpath : src/buildwire/core/machine/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Pure JSON/NDJSON serialization helpers for BuildWire machine output.

These helpers take already-shaped payloads and only serialize them; shaping
lives in [`buildwire.core.machine.formats`][buildwire.core.machine.formats].
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from buildwire.core.machine.formats import MetaPayload, build_json_envelope

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping


def serialize_json_envelope(meta: MetaPayload, **payloads: object) -> str:
    """Serialize a JSON envelope.

    Args:
        meta (MetaPayload): Metadata payload (tool/version).
        **payloads (object): One or more named payload objects.

    Returns:
        str: A pretty-printed JSON string.
    """
    envelope: dict[str, object] = build_json_envelope(meta=meta, **payloads)
    return json.dumps(envelope, indent=2)


def iter_ndjson_strings(records: Iterable[Mapping[str, object]]) -> Iterator[str]:
    """Serialize each NDJSON record to a single-line JSON string."""
    for record in records:
        yield json.dumps(record)


def serialize_ndjson(records: Iterable[Mapping[str, object]]) -> str:
    """Serialize NDJSON records to a single newline-delimited string."""
    return "\n".join(iter_ndjson_strings(records)) + "\n"
