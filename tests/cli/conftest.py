# buildwire:header:start
#
#   project      : BuildWire
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""CLI test helpers.

`run_cli()` invokes the Click CLI with an injected environment mapping, so
tests never depend on (or modify) the process environment. Directive lines and
command output are on ``result.stdout``; error messages on ``result.stderr``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from buildwire.cli.main import cli
from buildwire.config.logging import TRACE_LEVEL, setup_logging
from buildwire.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Undo the logging setup done by each CLI invocation."""
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Result:
    """Invoke the CLI, reading environment keys from ``environ``.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["emit", "cfg", "x"]``.
        environ (Mapping[str, str] | None): Environment seen by `env` commands and
            ``BUILDWIRE_*`` settings. Defaults to an empty mapping.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["env", "get", "pkg-name"], environ={"CARGO_PKG_NAME": "demo"})
        assert result.stdout == "demo\\n"
        ```
    """
    runner = CliRunner()
    return runner.invoke(
        cli,
        argv,
        obj={"environ": dict(environ or {})},  # inject test override into Click's context object
    )


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_NOT_PRESENT(result: Result) -> None:
    """Assert that the command exited with NOT_PRESENT (code 66)."""
    assert result.exit_code == ExitCode.NOT_PRESENT, result.output


def assert_ENCODING_ERROR(result: Result) -> None:
    """Assert that the command exited with ENCODING_ERROR (code 65)."""
    assert result.exit_code == ExitCode.ENCODING_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
