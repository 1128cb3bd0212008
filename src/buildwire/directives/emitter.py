# buildwire:header:start
#
#   project      : BuildWire
#   file         : emitter.py
#   file_relpath : src/buildwire/directives/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Directive emission.

The orchestrator reads the build script's standard output as an ordered log,
one directive per line. `DirectiveEmitter` encodes each directive and appends
its line to a sink, flushing after every line so that lines appear in call
order relative to any other writer of the same stream.

The emitter holds no lock. When several threads emit through the same sink,
callers must serialize the calls themselves.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol

from buildwire.config.logging import get_logger
from buildwire.directives.encoding import encode_directive

if TYPE_CHECKING:
    from collections.abc import Iterable

    from buildwire.config.logging import BuildwireLogger
    from buildwire.config.model import EmitterConfig
    from buildwire.directives.model import Directive

logger: BuildwireLogger = get_logger(__name__)


class DirectiveSink(Protocol):
    """Append-only text destination for directive lines."""

    def write(self, text: str) -> object:
        """Append ``text`` to the sink."""
        ...

    def flush(self) -> None:
        """Push buffered text to the underlying stream."""
        ...


class StdoutSink:
    """Sink bound to whatever ``sys.stdout`` is at the time of each write.

    Resolving the stream lazily keeps redirection (``contextlib.redirect_stdout``,
    test capture) working for emitters created before the redirect.
    """

    def write(self, text: str) -> object:
        """Write ``text`` to the current ``sys.stdout``."""
        return sys.stdout.write(text)

    def flush(self) -> None:
        """Flush the current ``sys.stdout``."""
        sys.stdout.flush()


class DirectiveEmitter:
    """Encode directives and write them to a sink, one line per call.

    Args:
        sink (DirectiveSink | None): Destination for lines. Defaults to the
            process standard output (see `StdoutSink`).
        config (EmitterConfig | None): Encoder settings. Defaults to the
            built-in prefixes.
    """

    def __init__(
        self,
        sink: DirectiveSink | None = None,
        config: EmitterConfig | None = None,
    ) -> None:
        self.sink: DirectiveSink = sink if sink is not None else StdoutSink()
        self.config: EmitterConfig | None = config

    def emit(self, directive: Directive) -> None:
        """Write the encoded line for ``directive`` followed by a newline."""
        line: str = encode_directive(directive, self.config)
        logger.trace("emit: %s", line)
        self.sink.write(line + "\n")
        self.sink.flush()

    def emit_all(self, directives: Iterable[Directive]) -> None:
        """Emit every directive of ``directives`` in iteration order."""
        for directive in directives:
            self.emit(directive)


_default_emitter: DirectiveEmitter = DirectiveEmitter()


def get_default_emitter() -> DirectiveEmitter:
    """Return the process-wide emitter used by `buildwire.cargo` and `buildwire.rustc`."""
    return _default_emitter


def set_default_emitter(emitter: DirectiveEmitter) -> DirectiveEmitter:
    """Replace the process-wide emitter and return the previous one."""
    global _default_emitter
    previous: DirectiveEmitter = _default_emitter
    _default_emitter = emitter
    return previous
