# buildwire:header:start
#
#   project      : BuildWire
#   file         : test_encoding_property.py
#   file_relpath : tests/directives/test_encoding_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

# pyright: strict

"""Property tests for the directive line encoding.

For arbitrary single-line payloads, asserts that:
1) every directive encodes to exactly one line with a known prefix,
2) encoding is pure (repeatable and independent of earlier calls),
3) the payload fields appear verbatim after the directive name,
4) cfg quoting depends only on the presence of a value.
"""

from __future__ import annotations

import io

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from buildwire.directives.emitter import DirectiveEmitter
from buildwire.directives.encoding import encode_directive
from buildwire.directives.model import Cfg, Directive, Env, Metadata
from tests.strategies_buildwire import s_directive, s_payload

KNOWN_PREFIXES: tuple[str, ...] = ("cargo::", "carg::")

# The autouse environment cleanup does not interact with generated examples.
SUPPRESSED: list[HealthCheck] = [HealthCheck.function_scoped_fixture, HealthCheck.too_slow]


@pytest.mark.hypothesis_slow
@settings(max_examples=200, suppress_health_check=SUPPRESSED)
@given(directive=s_directive())
def test_encoding_is_one_line(directive: Directive) -> None:
    line: str = encode_directive(directive)
    assert "\n" not in line
    assert "\r" not in line
    assert line.startswith(KNOWN_PREFIXES)
    assert "=" in line


@settings(suppress_health_check=SUPPRESSED)
@given(directive=s_directive(), before=st.lists(s_directive(), max_size=5))
def test_encoding_is_pure(directive: Directive, before: list[Directive]) -> None:
    """Earlier encodings do not influence later ones."""
    first: str = encode_directive(directive)
    for other in before:
        encode_directive(other)
    assert encode_directive(directive) == first


@settings(suppress_health_check=SUPPRESSED)
@given(directives=st.lists(s_directive(), max_size=10))
def test_emitter_writes_one_line_per_call_in_order(directives: list[Directive]) -> None:
    sink = io.StringIO()
    DirectiveEmitter(sink=sink).emit_all(directives)
    lines: list[str] = sink.getvalue().split("\n")
    assert lines[-1] == ""
    assert lines[:-1] == [encode_directive(d) for d in directives]


@settings(suppress_health_check=SUPPRESSED)
@given(key=s_payload(), value=s_payload())
def test_two_field_payloads_are_joined_verbatim(key: str, value: str) -> None:
    assert encode_directive(Metadata(key, value)) == f"cargo::metadata={key}={value}"
    assert encode_directive(Env(key, value)) == f"cargo::rustc-env={key}={value}"


@settings(suppress_health_check=SUPPRESSED)
@given(key=s_payload(), value=st.one_of(st.none(), s_payload()))
def test_cfg_quoting_follows_value_presence(key: str, value: str | None) -> None:
    line: str = encode_directive(Cfg(key, value))
    if value is None:
        assert line == f"cargo::rustc-cfg={key}"
    else:
        assert line == f'cargo::rustc-cfg={key}="{value}"'
        assert line.endswith('"')
