"""Tests for placeholder substitution."""

from __future__ import annotations

from decimal import Decimal

from hypothesis import given
from hypothesis import strategies as st

from variantengine.runtime.template import collect_placeholders, substitute


class TestSubstitute:
    """Test {name} replacement."""

    def test_single_placeholder(self) -> None:
        """Numbers are inserted as text."""
        assert substitute("You have {count} items", {"count": 5}) == "You have 5 items"

    def test_repeated_placeholder(self) -> None:
        """Every occurrence is replaced."""
        assert substitute("{n} and {n}", {"n": "x"}) == "x and x"

    def test_unresolved_placeholder_kept(self) -> None:
        """Absent parameters leave the placeholder unchanged."""
        assert substitute("Hello {name}", {"other": 1}) == "Hello {name}"

    def test_none_value_kept(self) -> None:
        """None counts as absent."""
        assert substitute("Hello {name}", {"name": None}) == "Hello {name}"

    def test_no_params(self) -> None:
        """None or empty params return the template as-is."""
        assert substitute("Hello {name}") == "Hello {name}"
        assert substitute("Hello {name}", {}) == "Hello {name}"

    def test_value_formatting(self) -> None:
        """bool, integral float and Decimal text forms."""
        params = {"a": True, "b": 2.0, "c": Decimal("1.50"), "d": 0.5}
        assert substitute("{a} {b} {c} {d}", params) == "true 2 1.50 0.5"

    def test_inserted_values_not_rescanned(self) -> None:
        """A value containing {x} is not substituted again."""
        assert substitute("{a}", {"a": "{b}", "b": "no"}) == "{b}"

    def test_non_word_placeholders_untouched(self) -> None:
        """Only word-character identifiers are placeholders."""
        template = "{not-a-name} { spaced } {}"
        assert substitute(template, {"not-a-name": 1, " spaced ": 2, "": 3}) == template

    def test_unicode_identifier_not_a_placeholder(self) -> None:
        """Identifiers are ASCII word characters."""
        assert substitute("{café}", {"café": "x"}) == "{café}"

    @given(st.text(alphabet=st.characters(exclude_characters="{}")))
    def test_text_without_braces_unchanged(self, text: str) -> None:
        """Templates without placeholders pass through."""
        assert substitute(text, {"count": 1}) == text


class TestCollectPlaceholders:
    """Test placeholder discovery."""

    def test_first_seen_order(self) -> None:
        """Distinct names in order of appearance."""
        assert collect_placeholders("{b} {a} {b}") == ("b", "a")

    def test_none_present(self) -> None:
        """Plain text has no placeholders."""
        assert collect_placeholders("plain") == ()
