"""Hypothesis strategies for generating variant structures.

Provides custom strategies for property-based testing of the pattern-key
parser, matcher, resolver and storage codec.
"""

from __future__ import annotations

import string

from hypothesis import strategies as st
from hypothesis.strategies import composite

from variantengine.syntax.ast import MatchEntry, VariantStructure

# Common selector names seen in compiled messages
SELECTOR_NAMES = ["countPlural", "gender", "platform", "ordinal", "role"]


@composite
def selector_names(draw: st.DrawFn) -> str:
    """Generate selector names: a letter followed by letters or digits."""
    head = draw(st.sampled_from(string.ascii_letters))
    tail = draw(st.text(alphabet=string.ascii_letters + string.digits, max_size=10))
    return head + tail


@composite
def literal_values(draw: st.DrawFn) -> str:
    """Generate non-wildcard clause values."""
    return draw(st.text(alphabet=string.ascii_lowercase + string.digits, min_size=1, max_size=8))


@composite
def clause_values(draw: st.DrawFn) -> str:
    """Generate clause values, wildcard included."""
    return draw(st.one_of(st.just("*"), literal_values()))


@composite
def pattern_keys(draw: st.DrawFn, selectors: list[str] | None = None) -> str:
    """Generate well-formed pattern keys over the given selector names."""
    names = selectors or draw(
        st.lists(st.sampled_from(SELECTOR_NAMES), min_size=1, max_size=3, unique=True)
    )
    chosen = draw(st.permutations(names))
    return ", ".join(f"{name}={draw(clause_values())}" for name in chosen)


@composite
def templates(draw: st.DrawFn) -> str:
    """Generate templates with optional {placeholders}."""
    words = draw(
        st.lists(
            st.one_of(
                st.text(alphabet=string.ascii_letters + " .!", min_size=1, max_size=8),
                st.sampled_from(["{count}", "{name}", "{position}"]),
            ),
            min_size=1,
            max_size=5,
        )
    )
    return "".join(words)


@composite
def variant_structures(draw: st.DrawFn) -> VariantStructure:
    """Generate structures with unique match keys over one selector set."""
    names = draw(st.lists(st.sampled_from(SELECTOR_NAMES), min_size=1, max_size=3, unique=True))
    keys = draw(st.lists(pattern_keys(names), min_size=1, max_size=6, unique=True))
    explicit = draw(st.booleans())
    return VariantStructure(
        declarations=tuple(f"input {name}" for name in names),
        selectors=tuple(names) if explicit else (),
        match=tuple(MatchEntry(key, draw(templates())) for key in keys),
    )


@composite
def selector_params(draw: st.DrawFn) -> dict[str, str]:
    """Generate parameters covering the common selector names."""
    names = draw(st.lists(st.sampled_from(SELECTOR_NAMES), max_size=5, unique=True))
    return {name: draw(literal_values()) for name in names}
