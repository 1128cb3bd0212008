# buildwire:header:start
#
#   project      : BuildWire
#   file         : console.py
#   file_relpath : src/buildwire/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Console abstraction for user-facing program output.

This module provides a `ClickConsole` class that separates CLI output from
internal logging. Use this for messages intended for end users, while
reserving `logging` for diagnostics.

Directive lines are *not* console output: they are written by a
[`DirectiveEmitter`][buildwire.directives.emitter.DirectiveEmitter] bound to
`ClickConsole.out`, unstyled.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    out: TextIO

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.
        err (TextIO | None): The text stream to use for error output.
            Defaults to `sys.stderr`.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style (plain text if color is disabled)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
