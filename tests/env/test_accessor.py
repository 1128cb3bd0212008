# buildwire:header:start
#
#   project      : BuildWire
#   file         : test_accessor.py
#   file_relpath : tests/env/test_accessor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""Typed reads of the build-script environment."""

from __future__ import annotations

from pathlib import Path

import pytest

from buildwire.env.accessor import EnvironmentAccessor
from buildwire.env.keys import EnvKey, EnvValueType
from buildwire.env.lookup import EnvLookup, InvalidEncodingError, NotPresentError
from tests.conftest import parametrize

# A lone surrogate is how Python surfaces environment bytes that are not valid text.
UNDECODABLE: str = "caf\udcff"


def test_unset_key_is_not_present() -> None:
    lookup = EnvironmentAccessor({}).read(EnvKey.PKG_NAME)
    assert not lookup.ok
    assert lookup.not_present
    assert isinstance(lookup.error, NotPresentError)
    assert lookup.error.name == "CARGO_PKG_NAME"


def test_text_key_returns_str() -> None:
    lookup = EnvironmentAccessor({"CARGO_PKG_NAME": "demo"}).read(EnvKey.PKG_NAME)
    assert lookup == EnvLookup("CARGO_PKG_NAME", value="demo", raw="demo")


def test_empty_value_is_present() -> None:
    lookup = EnvironmentAccessor({"CARGO_PKG_DESCRIPTION": ""}).read(EnvKey.PKG_DESCRIPTION)
    assert lookup.ok
    assert lookup.value == ""


@parametrize(
    "key",
    [
        EnvKey.BINARY_PATH,
        EnvKey.MANIFEST_DIR,
        EnvKey.MANIFEST_PATH,
        EnvKey.PKG_LICENSE_FILE,
        EnvKey.PKG_README,
        EnvKey.OUT_DIR,
        EnvKey.TARGET_TMPDIR,
        EnvKey.RUSTC_CURRENT_DIR,
    ],
)
def test_path_keys_return_path(key: EnvKey) -> None:
    """Path-typed keys build a Path from the raw text without touching the filesystem."""
    lookup = EnvironmentAccessor({key.var: "/does/not/exist"}).read(key)
    assert lookup.value == Path("/does/not/exist")
    assert isinstance(lookup.value, Path)


def test_empty_path_value_stays_empty() -> None:
    """An empty path-typed value is not turned into the current directory."""
    lookup = EnvironmentAccessor({"OUT_DIR": ""}).read(EnvKey.OUT_DIR)
    assert lookup.ok
    assert lookup.value == ""
    assert lookup.value != Path(".")
    assert lookup.raw == ""


def test_empty_binary_executable_path_stays_empty() -> None:
    lookup = EnvironmentAccessor({"CARGO_BIN_EXE_tool": ""}).binary_executable_path("tool")
    assert lookup.unwrap() == ""


def test_raw_text_is_kept_for_path_keys() -> None:
    lookup = EnvironmentAccessor({"OUT_DIR": "out//x/"}).read(EnvKey.OUT_DIR)
    assert lookup.value == Path("out/x")
    assert lookup.raw == "out//x/"


def test_read_text_ignores_declared_type() -> None:
    lookup = EnvironmentAccessor({"OUT_DIR": "/tmp/out"}).read_text(EnvKey.OUT_DIR)
    assert lookup.value == "/tmp/out"


def test_invalid_encoding_is_reported() -> None:
    lookup = EnvironmentAccessor({"CARGO_PKG_NAME": UNDECODABLE}).read(EnvKey.PKG_NAME)
    assert lookup.invalid_encoding
    assert not lookup.not_present
    with pytest.raises(InvalidEncodingError):
        lookup.unwrap()


def test_invalid_encoding_on_path_key() -> None:
    lookup = EnvironmentAccessor({"OUT_DIR": UNDECODABLE}).read(EnvKey.OUT_DIR)
    assert isinstance(lookup.error, InvalidEncodingError)


def test_binary_executable_path() -> None:
    accessor = EnvironmentAccessor({"CARGO_BIN_EXE_my-tool": "/target/debug/my-tool"})
    assert accessor.binary_executable_path("my-tool").unwrap() == Path("/target/debug/my-tool")


def test_binary_executable_path_is_case_sensitive() -> None:
    accessor = EnvironmentAccessor({"CARGO_BIN_EXE_Foo": "/bin/Foo"})
    assert accessor.binary_executable_path("Foo").ok
    lookup = accessor.binary_executable_path("foo")
    assert lookup.not_present
    assert lookup.name == "CARGO_BIN_EXE_foo"


def test_binary_executable_path_invalid_encoding() -> None:
    accessor = EnvironmentAccessor({"CARGO_BIN_EXE_x": UNDECODABLE})
    assert accessor.binary_executable_path("x").invalid_encoding


@parametrize(
    ("environ", "expected"),
    [
        ({}, False),
        ({"CARGO_PRIMARY_PACKAGE": "1"}, True),
        ({"CARGO_PRIMARY_PACKAGE": ""}, True),
        ({"CARGO_PRIMARY_PACKAGE": UNDECODABLE}, True),
    ],
)
def test_is_primary_package_checks_presence(environ: dict[str, str], expected: bool) -> None:
    assert EnvironmentAccessor(environ).is_primary_package() is expected


def test_reads_are_live(monkeypatch: pytest.MonkeyPatch) -> None:
    """A variable set after the accessor was created is seen by the next read."""
    accessor = EnvironmentAccessor()
    assert accessor.read(EnvKey.OUT_DIR).not_present
    monkeypatch.setenv("OUT_DIR", "/tmp/build-out")
    assert accessor.read(EnvKey.OUT_DIR).unwrap() == Path("/tmp/build-out")
    monkeypatch.setenv("OUT_DIR", "/tmp/other")
    assert accessor.read(EnvKey.OUT_DIR).unwrap() == Path("/tmp/other")
    monkeypatch.delenv("OUT_DIR")
    assert accessor.read(EnvKey.OUT_DIR).not_present


def test_primary_package_is_live(monkeypatch: pytest.MonkeyPatch) -> None:
    accessor = EnvironmentAccessor()
    assert not accessor.is_primary_package()
    monkeypatch.setenv("CARGO_PRIMARY_PACKAGE", "")
    assert accessor.is_primary_package()


def test_read_var_uses_name_verbatim() -> None:
    accessor = EnvironmentAccessor({"Custom_Var": "x"})
    assert accessor.read_var("Custom_Var").value == "x"
    assert accessor.read_var("CUSTOM_VAR").not_present
    assert accessor.read_var("Custom_Var", EnvValueType.PATH).value == Path("x")


def test_snapshot_covers_every_key_in_order() -> None:
    accessor = EnvironmentAccessor({"CARGO_PKG_NAME": "demo"})
    snapshot = accessor.snapshot()
    assert [key for key, _ in snapshot] == list(EnvKey)
    by_key = dict(snapshot)
    assert by_key[EnvKey.PKG_NAME].value == "demo"
    assert by_key[EnvKey.OUT_DIR].not_present
