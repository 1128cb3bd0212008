# buildwire:header:start
#
#   project      : BuildWire
#   file         : env.py
#   file_relpath : src/buildwire/cli/commands/env.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""BuildWire `env` commands.

Read the environment the orchestrator sets for build scripts:

    - ``env get KEY``: print one value (exit 66 if unset, 65 if not valid text).
    - ``env bin-exe NAME``: print ``CARGO_BIN_EXE_<NAME>``.
    - ``env is-primary``: print ``true``/``false``; exit 0 / 1.
    - ``env list``: every known key, as text, JSON or NDJSON.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildwire.cli.cli_types import KeyedEnumParam
from buildwire.cli.errors import error_for_lookup
from buildwire.cli.options import OutputFormat, output_format_option
from buildwire.constants import VALUE_NOT_SET
from buildwire.core.exit_codes import ExitCode
from buildwire.core.machine.emitters import serialize_json_envelope, serialize_ndjson
from buildwire.core.machine.formats import (
    MachineKey,
    MachineKind,
    build_meta_payload,
    build_ndjson_record,
)
from buildwire.env.keys import EnvKey

if TYPE_CHECKING:
    from buildwire.cli.console import ConsoleLike
    from buildwire.env.accessor import EnvironmentAccessor, EnvValue
    from buildwire.env.lookup import EnvLookup

VALUE_INVALID: str = "<invalid encoding>"


def _print_lookup(lookup: EnvLookup[EnvValue]) -> None:
    """Print the looked-up value, or raise the matching CLI error."""
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]
    if lookup.error is not None:
        raise error_for_lookup(lookup.error)
    # raw text, so an empty path value prints as empty
    console.print(lookup.raw or "")


def _entry(key: EnvKey, lookup: EnvLookup[EnvValue]) -> dict[str, object]:
    return {
        MachineKey.KEY: key.name.lower(),
        MachineKey.VAR: key.var,
        MachineKey.TYPE: key.value_type.value,
        MachineKey.VALUE: lookup.value,
        MachineKey.ERROR: None if lookup.error is None else type(lookup.error).__name__,
    }


@click.group(name="env", help="Read build-script environment variables.")
def env_group() -> None:
    """Group for environment subcommands."""


@env_group.command(name="get", help="Print the value of KEY (e.g. pkg-name or CARGO_PKG_NAME).")
@click.argument("key", type=KeyedEnumParam(EnvKey))
def get_command(key: EnvKey) -> None:
    accessor: EnvironmentAccessor = click.get_current_context().obj["accessor"]
    _print_lookup(accessor.read(key))


@env_group.command(name="bin-exe", help="Print the executable path of binary NAME.")
@click.argument("name")
def bin_exe_command(name: str) -> None:
    accessor: EnvironmentAccessor = click.get_current_context().obj["accessor"]
    _print_lookup(accessor.binary_executable_path(name))


@env_group.command(name="is-primary", help="Tell whether this is the primary package.")
def is_primary_command() -> None:
    ctx = click.get_current_context()
    accessor: EnvironmentAccessor = ctx.obj["accessor"]
    console: ConsoleLike = ctx.obj["console"]
    primary: bool = accessor.is_primary_package()
    console.print("true" if primary else "false")
    if not primary:
        ctx.exit(ExitCode.FAILURE)


@env_group.command(name="list", help="Show every known key and its current value.")
@output_format_option
def list_command(output_format: OutputFormat) -> None:
    """List every `EnvKey` in declaration order."""
    ctx = click.get_current_context()
    accessor: EnvironmentAccessor = ctx.obj["accessor"]
    console: ConsoleLike = ctx.obj["console"]
    snapshot = accessor.snapshot()

    if output_format is OutputFormat.JSON:
        payload = [_entry(key, lookup) for key, lookup in snapshot]
        console.print(serialize_json_envelope(build_meta_payload(), **{MachineKey.ENV: payload}))
        return
    if output_format is OutputFormat.NDJSON:
        meta = build_meta_payload()
        records = [
            build_ndjson_record(kind=MachineKind.ENV, meta=meta, payload=_entry(key, lookup))
            for key, lookup in snapshot
        ]
        console.print(serialize_ndjson(records), nl=False)
        return

    width: int = EnvKey.PKG_NAME.value_length
    for key, lookup in snapshot:
        if lookup.ok:
            shown: str = lookup.raw or ""
        elif lookup.invalid_encoding:
            shown = console.styled(VALUE_INVALID, fg="red")
        else:
            shown = console.styled(VALUE_NOT_SET, dim=True)
        console.print(f"{key.var:<{width}}  {shown}")
