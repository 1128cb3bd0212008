# buildwire:header:start
#
#   project      : BuildWire
#   file         : emit.py
#   file_relpath : src/buildwire/cli/commands/emit.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""BuildWire `emit` commands.

One subcommand per directive. Each writes exactly one encoded line to standard
output; arguments are passed through verbatim.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildwire.cli.cli_types import EnumChoiceParam, KeyedEnumParam
from buildwire.cli.errors import BuildwireUsageError
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
    LinkSearchKind,
    Metadata,
    RerunIfChanged,
    RerunIfEnvChanged,
)

if TYPE_CHECKING:
    from buildwire.directives.emitter import DirectiveEmitter
    from buildwire.directives.model import Directive


def _emit(directive: Directive) -> None:
    ctx = click.get_current_context()
    emitter: DirectiveEmitter = ctx.obj["emitter"]
    emitter.emit(directive)


@click.group(name="emit", help="Write one build directive line to standard output.")
def emit_group() -> None:
    """Group for directive subcommands."""


@emit_group.command(name="rerun-if-changed", help="Re-run the build script when PATH changes.")
@click.argument("path")
def rerun_if_changed_command(path: str) -> None:
    _emit(RerunIfChanged(path))


@emit_group.command(
    name="rerun-if-env-changed",
    help="Re-run the build script when environment variable VAR changes.",
)
@click.argument("var")
def rerun_if_env_changed_command(var: str) -> None:
    _emit(RerunIfEnvChanged(var))


@emit_group.command(name="warning", help="Show MESSAGE as a build warning.")
@click.argument("message")
def warning_command(message: str) -> None:
    _emit(BuildWarning(message))


@emit_group.command(name="metadata", help="Publish KEY=VALUE to dependent packages.")
@click.argument("key")
@click.argument("value")
def metadata_command(key: str, value: str) -> None:
    _emit(Metadata(key, value))


@emit_group.command(
    name="link-arg",
    help="Pass FLAG to the linker. Put '--' before a FLAG starting with '-'.",
)
@click.argument("flag")
@click.option(
    "--target",
    "target",
    type=EnumChoiceParam(LinkArgTarget),
    default=None,
    help=f"Targets receiving the flag ({', '.join(t.value for t in LinkArgTarget)}).",
)
@click.option("--bin", "binary", default=None, help="Binary name (implies --target bin).")
def link_arg_command(flag: str, target: LinkArgTarget | None, binary: str | None) -> None:
    """Emit a linker argument, scoped by ``--target`` / ``--bin``.

    Raises:
        BuildwireUsageError: If ``--bin`` and ``--target`` disagree.
    """
    if target is None:
        target = LinkArgTarget.BIN if binary is not None else LinkArgTarget.ANY
    try:
        directive = LinkArg(flag, target, binary)
    except ValueError as exc:
        raise BuildwireUsageError(str(exc)) from exc
    _emit(directive)


@emit_group.command(name="link-lib", help="Link the library LIB.")
@click.argument("lib")
def link_lib_command(lib: str) -> None:
    _emit(LinkLib(lib))


@emit_group.command(name="link-search", help="Add PATH to the library search path.")
@click.argument("path")
@click.option(
    "--kind",
    type=KeyedEnumParam(LinkSearchKind),
    default=None,
    help=f"Restrict the search ({', '.join(k.value for k in LinkSearchKind)}).",
)
def link_search_command(path: str, kind: LinkSearchKind | None) -> None:
    _emit(LinkSearch(path, kind))


@emit_group.command(
    name="flags",
    help="Pass raw FLAGS (-l / -L) to the compiler. Put '--' before FLAGS starting with '-'.",
)
@click.argument("flags")
def flags_command(flags: str) -> None:
    _emit(CompilerFlags(flags))


@emit_group.command(name="cfg", help='Enable cfg KEY, or KEY="VALUE" when VALUE is given.')
@click.argument("key")
@click.argument("value", required=False, default=None)
def cfg_command(key: str, value: str | None) -> None:
    _emit(Cfg(key, value))


@emit_group.command(name="check-cfg", help="Declare the expected cfg expression CFG.")
@click.argument("cfg")
def check_cfg_command(cfg: str) -> None:
    _emit(CheckCfg(cfg))


@emit_group.command(name="env", help="Set VAR=VALUE for the compilation of the package.")
@click.argument("var")
@click.argument("value")
def env_command(var: str, value: str) -> None:
    _emit(Env(var, value))
