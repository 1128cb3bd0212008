# buildwire:header:start
#
#   project      : BuildWire
#   file         : test_end_to_end.py
#   file_relpath : tests/test_end_to_end.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

"""A build script as the orchestrator runs it: read the environment, emit directives."""

from __future__ import annotations

import pytest

from buildwire import cargo, rustc


def _build_script() -> None:
    name = cargo.read(cargo.EnvKey.PKG_NAME).unwrap()
    out_dir = cargo.read(cargo.EnvKey.OUT_DIR).value_or(None)
    cargo.rerun_if_env_changed("CARGO_PKG_NAME")
    if out_dir is None:
        cargo.warning(f"{name}: OUT_DIR not set")
    rustc.cfg("feature_x")
    rustc.link_arg_bins("-lm")


def test_build_script_output(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("CARGO_PKG_NAME", "demo")

    _build_script()

    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "cargo::rerun-if-env-changed=CARGO_PKG_NAME",
        "cargo::warning=demo: OUT_DIR not set",
        "cargo::rustc-cfg=feature_x",
        "cargo::rustc-link-arg-bins=-lm",
    ]
    assert "cargo::" not in captured.err
