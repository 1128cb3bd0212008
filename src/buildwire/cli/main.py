# buildwire:header:start
#
#   project      : BuildWire
#   file         : main.py
#   file_relpath : src/buildwire/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""BuildWire command line.

Lets shell (or any non-Python) build steps use the same encoder and environment
reader as the library:

    buildwire emit cfg feature_x
    buildwire emit link-search --kind native /opt/lib
    buildwire env get pkg-name

Group-level options are resolved once and placed into ``ctx.obj``:
``console``, ``config``, ``emitter`` and ``accessor``. Tests may inject an
``environ`` mapping through ``obj`` to read from instead of ``os.environ``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildwire.cli.commands.emit import emit_group
from buildwire.cli.commands.env import env_group
from buildwire.cli.commands.version import version_command
from buildwire.cli.console import ClickConsole
from buildwire.cli.errors import BuildwireConfigError
from buildwire.cli.options import (
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from buildwire.config.loader import load_config
from buildwire.config.logging import get_logger, resolve_env_log_level, setup_logging
from buildwire.config.model import ConfigError, MutableEmitterConfig
from buildwire.directives.emitter import DirectiveEmitter
from buildwire.env.accessor import EnvironmentAccessor

if TYPE_CHECKING:
    from pathlib import Path

    from buildwire.config.model import EmitterConfig

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_path: Path | None,
    directive_prefix: str | None,
    link_search_prefix: str | None,
) -> None:
    """Initialize logging, console, configuration and I/O objects on the Click context.

    Raises:
        BuildwireConfigError: If a configuration source is unreadable or malformed.
    """
    ctx.obj = ctx.obj or {}

    # BUILDWIRE_LOG_LEVEL wins over -v/-q; the flags are validated either way
    flag_level: int = resolve_verbosity(verbose, quiet)
    env_level: int | None = resolve_env_log_level()
    level: int = flag_level if env_level is None else env_level
    setup_logging(level=level)

    console = ClickConsole(enable_color=not no_color)
    ctx.obj["console"] = console
    ctx.color = not no_color

    overrides = MutableEmitterConfig(
        directive_prefix=directive_prefix,
        link_search_fallback_prefix=link_search_prefix,
    )
    try:
        config: EmitterConfig = load_config(
            toml_path=config_path, environ=ctx.obj.get("environ"), overrides=overrides
        )
    except ConfigError as exc:
        raise BuildwireConfigError(str(exc)) from exc
    ctx.obj["config"] = config

    # Directive lines go to the console's stdout, unstyled.
    ctx.obj["emitter"] = DirectiveEmitter(sink=console.out, config=config)
    ctx.obj["accessor"] = EnvironmentAccessor(ctx.obj.get("environ"))


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Emit build directives and read build-script environment variables.",
)
@common_verbose_options
@common_config_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    config_path: Path | None,
    directive_prefix: str | None,
    link_search_prefix: str | None,
    no_color: bool,
) -> None:
    """Entry point for the BuildWire CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        config_path=config_path,
        directive_prefix=directive_prefix,
        link_search_prefix=link_search_prefix,
    )


cli.add_command(emit_group)

cli.add_command(env_group)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
