"""Property-based tests for system invariants.

Uses Hypothesis to test properties that must always hold, regardless of input.
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import selector_params, templates, variant_structures
from variantengine import (
    MatchEntry,
    VariantResolver,
    VariantStructure,
    encode_variant_structure,
    extract_variant_structure,
    render_template,
)
from variantengine.runtime import substitute

json_values = st.recursive(
    st.none()
    | st.booleans()
    | st.integers(min_value=-(10**12), max_value=10**12)
    | st.floats(allow_nan=False)
    | st.text(),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=8), children, max_size=4),
    max_leaves=12,
)


class TestResolutionProperties:
    """render and detect must agree and never raise."""

    @given(variant_structures(), selector_params())
    def test_detect_and_render_agree(
        self, structure: VariantStructure, params: dict[str, str]
    ) -> None:
        """render shows the template of the key detect reports."""
        resolver = VariantResolver("en")
        key, _ = resolver.detect(structure, params)
        text, _ = resolver.resolve(structure, params)
        assert key is not None
        template = {entry.key: entry.template for entry in structure.match}[key]
        assert text == substitute(template, params)

    @given(variant_structures(), selector_params())
    def test_resolution_is_deterministic(
        self, structure: VariantStructure, params: dict[str, str]
    ) -> None:
        """Same inputs, same outputs."""
        resolver = VariantResolver("en")
        assert resolver.resolve(structure, params) == resolver.resolve(structure, params)

    @given(variant_structures(), selector_params(), st.text(max_size=10), templates())
    def test_appended_entries_never_shadow(
        self,
        structure: VariantStructure,
        params: dict[str, str],
        key: str,
        template: str,
    ) -> None:
        """An entry added at the end cannot change a matched result."""
        resolver = VariantResolver("en")
        before, errors = resolver.detect(structure, params)
        extended = VariantStructure(
            declarations=structure.declarations,
            selectors=structure.selectors,
            match=(*structure.match, MatchEntry(key, template)),
        )
        if not errors:
            assert resolver.detect(extended, params)[0] == before

    @given(variant_structures(), selector_params())
    def test_wildcard_only_entry_always_matches(
        self, structure: VariantStructure, params: dict[str, str]
    ) -> None:
        """A first entry of wildcards wins for every parameter set."""
        names = structure.selectors or ("platform",)
        catch_all = ", ".join(f"{name}=*" for name in names)
        first = VariantStructure(
            declarations=structure.declarations,
            selectors=structure.selectors,
            match=(MatchEntry(catch_all, "all"), *structure.match),
        )
        assert VariantResolver("en").resolve(first, params) == ("all", ())

    @given(json_values, st.dictionaries(st.text(max_size=8), json_values, max_size=4))
    def test_render_template_is_total(self, value: object, params: dict[str, object]) -> None:
        """Arbitrary decoded data renders to text without raising."""
        assert isinstance(render_template(value, params), str)


class TestStorageProperties:
    """The storage codec must preserve structures."""

    @given(variant_structures())
    def test_encode_then_extract(self, structure: VariantStructure) -> None:
        """Structures with unique keys survive the wrapped JSON shape."""
        assert extract_variant_structure(encode_variant_structure(structure)) == structure
