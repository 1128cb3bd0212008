# buildwire:header:start
#
#   project      : BuildWire
#   file         : accessor.py
#   file_relpath : src/buildwire/env/accessor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Typed reads of orchestrator-provided environment variables.

Every call re-reads the live environment: nothing is cached, so a variable set
after the accessor was created is observed by the next read. Values are not
checked against the filesystem; a path-typed key simply builds a `Path` from
the text. An empty value is returned as the empty string for every key type,
since `Path("")` would name the current directory.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Union

from buildwire.config.logging import get_logger
from buildwire.constants import BIN_EXE_ENV_PREFIX, PRIMARY_PACKAGE_ENV
from buildwire.env.keys import EnvKey, EnvValueType
from buildwire.env.lookup import EnvLookup, InvalidEncodingError, NotPresentError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from buildwire.config.logging import BuildwireLogger

logger: BuildwireLogger = get_logger(__name__)

EnvValue = Union[str, Path]


def _is_valid_text(raw: str) -> bool:
    """Return True if ``raw`` round-trips through the host filesystem encoding.

    On POSIX, Python decodes environment bytes with ``surrogateescape``; bytes
    that are not valid in the host encoding come back as lone surrogates, which
    cannot be encoded strictly.
    """
    try:
        raw.encode(sys.getfilesystemencoding(), "strict")
    except UnicodeEncodeError:
        return False
    return True


class EnvironmentAccessor:
    """Read environment keys and convert them to their declared types.

    Args:
        environ (Mapping[str, str] | None): Environment to read from. ``None``
            (the default) reads ``os.environ`` at each call.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ: Mapping[str, str] | None = environ

    @property
    def environ(self) -> Mapping[str, str]:
        """The mapping reads go to."""
        return os.environ if self._environ is None else self._environ

    def read_var(
        self, name: str, value_type: EnvValueType = EnvValueType.TEXT
    ) -> EnvLookup[EnvValue]:
        """Read variable ``name`` and convert it to ``value_type``.

        The name is used as-is: case-sensitive, no normalization.
        """
        raw: str | None = self.environ.get(name)
        if raw is None:
            logger.debug("env %s: not present", name)
            return EnvLookup(name, error=NotPresentError(name))
        if not _is_valid_text(raw):
            logger.debug("env %s: invalid encoding", name)
            return EnvLookup(name, error=InvalidEncodingError(name))
        # Path("") is the current directory; an empty value has no Path form.
        value: EnvValue = Path(raw) if value_type is EnvValueType.PATH and raw else raw
        logger.trace("env %s=%r", name, raw)
        return EnvLookup(name, value=value, raw=raw)

    def read(self, key: EnvKey) -> EnvLookup[EnvValue]:
        """Read ``key`` and convert it to the key's declared type.

        Returns:
            EnvLookup[EnvValue]: A `Path` for non-empty path-typed keys, a `str`
            otherwise, or a `NotPresentError` / `InvalidEncodingError` failure.
        """
        return self.read_var(key.var, key.value_type)

    def read_text(self, key: EnvKey) -> EnvLookup[str]:
        """Read ``key`` as plain text, whatever its declared type."""
        return self.read_var(key.var, EnvValueType.TEXT)  # type: ignore[return-value]

    def binary_executable_path(self, binary_name: str) -> EnvLookup[EnvValue]:
        """Read ``CARGO_BIN_EXE_<binary_name>`` as a path.

        ``binary_name`` is appended verbatim: case is preserved and nothing is
        normalized, so ``"Foo"`` and ``"foo"`` are different keys.
        """
        name: str = f"{BIN_EXE_ENV_PREFIX}{binary_name}"
        return self.read_var(name, EnvValueType.PATH)

    def is_primary_package(self) -> bool:
        """Return True if the primary-package marker is set, whatever its value.

        An empty value counts as set. This call cannot fail.
        """
        return PRIMARY_PACKAGE_ENV in self.environ

    def snapshot(self) -> list[tuple[EnvKey, EnvLookup[EnvValue]]]:
        """Read every `EnvKey`, in declaration order."""
        return [(key, self.read(key)) for key in EnvKey]
