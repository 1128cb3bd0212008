# buildwire:header:start
#
#   project      : BuildWire
#   file         : errors.py
#   file_relpath : src/buildwire/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Exceptions for the BuildWire CLI.

Raise these in CLI commands to exit with a standardized message and exit code.
They print through the project console when one is available.
"""

from __future__ import annotations

from typing import IO, Any

import click

from buildwire.core.exit_codes import ExitCode
from buildwire.env.lookup import EnvLookupError, InvalidEncodingError


class BuildwireError(click.ClickException):
    """Base class for all BuildWire CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class BuildwireUsageError(BuildwireError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BuildwireConfigError(BuildwireError):
    """Error for configuration errors (unreadable/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class BuildwireEnvNotPresentError(BuildwireError):
    """Error when a requested environment variable is not set."""

    exit_code = ExitCode.NOT_PRESENT


class BuildwireEnvEncodingError(BuildwireError):
    """Error when a requested environment variable is not valid text."""

    exit_code = ExitCode.ENCODING_ERROR


def error_for_lookup(error: EnvLookupError) -> BuildwireError:
    """Map a lookup failure to the matching CLI error."""
    if isinstance(error, InvalidEncodingError):
        return BuildwireEnvEncodingError(str(error))
    return BuildwireEnvNotPresentError(str(error))
