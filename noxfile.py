# buildwire:header:start
#
#   project      : BuildWire
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""BuildWire project automation via Nox.

Sessions:
  - `lint`: Ruff lint checks.
  - `format_check`: Verify formatting with Ruff.
  - `format`: Apply formatting with Ruff.
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Long-running property tests (opt-in).
  - `package_check`: Build sdist/wheel and validate metadata (twine).

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import Any, cast

import nox

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"


def _parse_pyproject_toml() -> dict[str, Any]:
    """Parse `pyproject.toml`.

    This runs at **noxfile import time**, so it only relies on `tomlkit`, which
    is a runtime dependency of the project anyway.
    """
    import tomlkit

    text: str = pathlib.Path("pyproject.toml").read_text(encoding="utf-8")
    return cast("dict[str, Any]", tomlkit.parse(text).unwrap())


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    project: Any = _parse_pyproject_toml().get("project")
    classifiers: Any = project.get("classifiers") if isinstance(project, dict) else None
    if not isinstance(classifiers, list):
        warnings.warn(
            f"No classifiers in pyproject.toml. Falling back to Python {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]

    prefix = "Programming Language :: Python :: "
    versions: set[tuple[int, int]] = set()
    for c in cast("list[str]", classifiers):
        parts: list[str] = c.removeprefix(prefix).split(".") if c.startswith(prefix) else []
        # Accept only X.Y numeric versions.
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            versions.add((int(parts[0]), int(parts[1])))

    return [f"{major}.{minor}" for major, minor in sorted(versions)] or [CURRENT_PYTHON_VERSION]


PYTHONS: list[str] = get_supported_pythons()

# Keep defaults fast; run QA (multi-Python) explicitly or in CI.
nox.options.sessions = ["lint", "format_check"]


@nox.session
def lint(session: nox.Session) -> None:
    """Run Ruff lint checks."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Verify formatting without changing files."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Apply formatting."""
    session.install("-e", ".[dev]")
    session.run("ruff", "format", ".")


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite and the type checker for one Python version."""
    session.install("-e", ".[test,dev]")
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)
    py_ver: str = str(session.python) if session.python else CURRENT_PYTHON_VERSION
    session.run("pyright", "--pythonversion", py_ver)


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests."""
    session.install("-e", ".[test]")
    session.run("pytest", "-vv", "tests", "-m", "hypothesis_slow", *session.posargs)


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build sdist/wheel and validate their metadata."""
    session.install("-e", ".[dev]")
    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
