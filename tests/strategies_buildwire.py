# buildwire:header:start
#
#   project      : BuildWire
#   file         : strategies_buildwire.py
#   file_relpath : tests/strategies_buildwire.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# buildwire:header:end

# pyright: strict

"""Hypothesis strategies for generating directives.

Payload text never contains a line break: callers are required not to pass
one, so the encoder's guarantees only hold for such input. Everything else
(``=``, quotes, unicode, empty strings) is fair game.
"""

from __future__ import annotations

from hypothesis import strategies as st

from buildwire.directives.model import (
    BuildWarning,
    Cfg,
    CheckCfg,
    CompilerFlags,
    Directive,
    Env,
    LinkArg,
    LinkArgTarget,
    LinkLib,
    LinkSearch,
    LinkSearchKind,
    Metadata,
    RerunIfChanged,
    RerunIfEnvChanged,
)

LINE_BREAKS: str = "\r\n"

# Surrogates are excluded: they are not text and only reach the encoder via paths.
EXCLUDED_CATEGORIES: tuple[str, ...] = ("Cs",)


def s_payload(min_size: int = 0, max_size: int = 40) -> st.SearchStrategy[str]:
    """Single-line payload text, biased towards protocol-relevant characters."""
    plain: st.SearchStrategy[str] = st.text(
        alphabet=st.characters(
            exclude_categories=EXCLUDED_CATEGORIES, exclude_characters=LINE_BREAKS
        ),
        min_size=min_size,
        max_size=max_size,
    )
    tricky: st.SearchStrategy[str] = st.text(
        alphabet=st.sampled_from('=":-_ ab/\\'), min_size=min_size, max_size=max_size
    )
    return st.one_of(plain, tricky)


def s_link_arg() -> st.SearchStrategy[LinkArg]:
    """Linker arguments for every target selector."""
    unscoped: st.SearchStrategy[LinkArg] = st.builds(
        LinkArg,
        flag=s_payload(),
        target=st.sampled_from([t for t in LinkArgTarget if t is not LinkArgTarget.BIN]),
    )
    per_bin: st.SearchStrategy[LinkArg] = st.builds(
        LinkArg.for_bin, binary=s_payload(min_size=1), flag=s_payload()
    )
    return st.one_of(unscoped, per_bin)


def s_directive() -> st.SearchStrategy[Directive]:
    """Any directive variant with arbitrary single-line payloads."""
    kinds: st.SearchStrategy[LinkSearchKind | None] = st.one_of(
        st.none(), st.sampled_from(list(LinkSearchKind))
    )
    return st.one_of(
        st.builds(RerunIfChanged, path=s_payload()),
        st.builds(RerunIfEnvChanged, name=s_payload()),
        st.builds(BuildWarning, message=s_payload()),
        st.builds(Metadata, key=s_payload(), value=s_payload()),
        s_link_arg(),
        st.builds(LinkLib, name=s_payload()),
        st.builds(LinkSearch, path=s_payload(), kind=kinds),
        st.builds(CompilerFlags, flags=s_payload()),
        st.builds(Cfg, key=s_payload(), value=st.one_of(st.none(), s_payload())),
        st.builds(CheckCfg, cfg=s_payload()),
        st.builds(Env, name=s_payload(), value=s_payload()),
    )
