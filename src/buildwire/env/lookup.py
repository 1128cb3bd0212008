# buildwire:header:start
#
#   project      : BuildWire
#   file         : lookup.py
#   file_relpath : src/buildwire/env/lookup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Typed result of an environment lookup.

Reads never raise on a missing or undecodable variable. They return an
`EnvLookup` carrying either the converted value or the failure, which is one of
two exception types:

    * `NotPresentError`: the variable is unset.
    * `InvalidEncodingError`: the variable is set but its raw bytes are not
      valid text in the host encoding.

Callers that prefer exceptions use `EnvLookup.unwrap()`, which raises the
stored failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
D = TypeVar("D")


class EnvLookupError(LookupError):
    """Base class for environment lookup failures.

    Attributes:
        name (str): The environment variable that was read.
    """

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class NotPresentError(EnvLookupError):
    """The environment variable is not set."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"environment variable {name!r} is not set")


class InvalidEncodingError(EnvLookupError):
    """The environment variable is set but is not valid text."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"environment variable {name!r} is not valid unicode")


@dataclass(frozen=True)
class EnvLookup(Generic[T]):
    """Outcome of reading one environment variable.

    Exactly one of ``value`` and ``error`` is set. On success ``raw`` holds the
    variable's text exactly as read, before any conversion.
    """

    name: str
    value: T | None = None
    error: EnvLookupError | None = None
    raw: str | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("EnvLookup needs exactly one of value or error")

    @property
    def ok(self) -> bool:
        """True if the variable was read and converted."""
        return self.error is None

    @property
    def not_present(self) -> bool:
        """True if the variable is unset."""
        return isinstance(self.error, NotPresentError)

    @property
    def invalid_encoding(self) -> bool:
        """True if the variable is set but not valid text."""
        return isinstance(self.error, InvalidEncodingError)

    def unwrap(self) -> T:
        """Return the value, or raise the stored `EnvLookupError`."""
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value

    def value_or(self, default: D) -> T | D:
        """Return the value, or ``default`` if the lookup failed."""
        if self.error is not None:
            return default
        assert self.value is not None
        return self.value
