# buildwire:header:start
#
#   project      : BuildWire
#   file         : version.py
#   file_relpath : src/buildwire/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""BuildWire `version` command.

Prints the current BuildWire version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildwire.cli.options import OutputFormat, output_format_option
from buildwire.constants import BUILDWIRE_VERSION
from buildwire.core.machine.emitters import serialize_json_envelope, serialize_ndjson
from buildwire.core.machine.formats import (
    MachineKey,
    MachineKind,
    build_meta_payload,
    build_ndjson_record,
)

if TYPE_CHECKING:
    from buildwire.cli.console import ConsoleLike


@click.command(name="version", help="Show the current version of BuildWire.")
@output_format_option
def version_command(output_format: OutputFormat) -> None:
    """Show the current version of BuildWire."""
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]

    if output_format is OutputFormat.JSON:
        console.print(
            serialize_json_envelope(build_meta_payload(), **{MachineKey.VERSION: BUILDWIRE_VERSION})
        )
    elif output_format is OutputFormat.NDJSON:
        record = build_ndjson_record(
            kind=MachineKind.VERSION, meta=build_meta_payload(), payload=BUILDWIRE_VERSION
        )
        console.print(serialize_ndjson([record]), nl=False)
    else:
        console.print(console.styled(BUILDWIRE_VERSION, bold=True))
