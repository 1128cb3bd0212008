# buildwire:header:start
#
#   project      : BuildWire
#   file         : options.py
#   file_relpath : src/buildwire/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, configuration, output
format) and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from buildwire.cli.cli_types import EnumChoiceParam
from buildwire.cli.errors import BuildwireUsageError
from buildwire.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output.
      JSON: A single JSON envelope (machine-readable).
      NDJSON: One JSON record per line (machine-readable).
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from ``-v`` / ``-q`` counts.

    Three or more -v flags set TRACE, two set DEBUG, one sets INFO.
    One or more -q flags set ERROR. The default is WARNING.

    Raises:
        BuildwireUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise BuildwireUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (repeat up to three times for TRACE).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add configuration file and prefix override options."""
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="TOML file with a [tool.buildwire] table (e.g. pyproject.toml).",
    )(f)
    f = click.option(
        "--directive-prefix",
        default=None,
        help="Directive namespace, 'cargo::' (default) or legacy 'cargo:'.",
    )(f)
    f = click.option(
        "--link-search-prefix",
        default=None,
        help="Prefix for link-search without a kind (default 'carg::').",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--format`` option resolving to `OutputFormat`."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=OutputFormat.DEFAULT.value,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
