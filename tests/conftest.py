# buildwire:header:start
#
#   project      : BuildWire
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Pytest configuration for the BuildWire test suite.

This file sets up global fixtures and customizes the logging configuration for test runs.

Notes:
    The host environment may be a real build (variables such as ``CARGO_PKG_NAME``
    or ``OUT_DIR`` set by the orchestrator) or may export ``BUILDWIRE_*`` settings.
    An autouse fixture removes all of them so tests start from a clean slate.
"""

from __future__ import annotations

import io
import os
from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from buildwire.config import logging
from buildwire.directives.emitter import DirectiveEmitter
from buildwire.env.keys import EnvKey

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def _is_orchestrator_var(name: str) -> bool:
    return (
        name.startswith(("CARGO_", "BUILDWIRE_"))
        or name == "CARGO"
        or name in {key.var for key in EnvKey}
    )


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove orchestrator-provided and BuildWire variables from the environment.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in [n for n in os.environ if _is_orchestrator_var(n)]:
        monkeypatch.delenv(name, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log everything at TRACE level during test runs."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def sink() -> io.StringIO:
    """In-memory directive sink."""
    return io.StringIO()


@pytest.fixture
def emitter(sink: io.StringIO) -> DirectiveEmitter:
    """Emitter with default settings writing to the `sink` fixture."""
    return DirectiveEmitter(sink=sink)
