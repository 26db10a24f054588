"""Tests for selector evaluation."""

from __future__ import annotations

from decimal import Decimal

from variantengine.diagnostics import (
    DiagnosticCode,
    VariantError,
    VariantResolutionError,
    VariantSyntaxError,
)
from variantengine.enums import PluralType
from variantengine.runtime.selectors import evaluate_selector, evaluate_selectors, selector_names
from variantengine.syntax.ast import (
    InputDeclaration,
    LocalDeclaration,
    MatchEntry,
    VariantStructure,
)

PLURAL = VariantStructure(
    declarations=("input count", "local countPlural = count: plural"),
    selectors=("countPlural",),
    match=(
        MatchEntry("countPlural=one", "1 item"),
        MatchEntry("countPlural=other", "{count} items"),
    ),
)


class TestSelectorNames:
    """Test declared vs inferred selectors."""

    def test_declared_selectors_win(self) -> None:
        """Declared selectors are used as-is."""
        structure = VariantStructure(
            selectors=("gender",), match=(MatchEntry("platform=ios", "x"),)
        )
        assert selector_names(structure) == ("gender",)

    def test_inferred_when_not_declared(self) -> None:
        """Empty selectors fall back to inference."""
        structure = VariantStructure(
            match=(MatchEntry("platform=ios, role=admin", "x"), MatchEntry("platform=*", "y"))
        )
        assert selector_names(structure) == ("platform", "role")


class TestEvaluateSelectors:
    """Test evaluation of whole structures."""

    def test_plural_local(self) -> None:
        """count=5 in English -> countPlural=other."""
        assert evaluate_selectors(PLURAL, {"count": 5}, "en") == {"countPlural": "other"}

    def test_plural_local_one(self) -> None:
        """count=1 in English -> countPlural=one."""
        assert evaluate_selectors(PLURAL, {"count": 1}, "en") == {"countPlural": "one"}

    def test_input_declaration_passes_text(self) -> None:
        """Input selectors use the parameter's text form."""
        structure = VariantStructure(declarations=("input gender",), selectors=("gender",))
        assert evaluate_selectors(structure, {"gender": "female"}, "en") == {"gender": "female"}

    def test_undeclared_selector_uses_parameter_of_same_name(self) -> None:
        """No declaration -> raw parameter lookup."""
        structure = VariantStructure(match=(MatchEntry("platform=ios", "iOS"),))
        assert evaluate_selectors(structure, {"platform": "ios"}, "en") == {"platform": "ios"}

    def test_missing_parameter_is_none(self) -> None:
        """Absent parameters evaluate to None."""
        structure = VariantStructure(selectors=("platform",))
        assert evaluate_selectors(structure, {}, "en") == {"platform": None}

    def test_values_use_producer_text_form(self) -> None:
        """True -> 'true' and 3.0 -> '3'."""
        structure = VariantStructure(selectors=("flag", "n"))
        values = evaluate_selectors(structure, {"flag": True, "n": 3.0}, "en")
        assert values == {"flag": "true", "n": "3"}

    def test_selector_order_preserved(self) -> None:
        """Result keys follow selector order."""
        structure = VariantStructure(selectors=("b", "a", "c"))
        assert list(evaluate_selectors(structure, {}, "en")) == ["b", "a", "c"]

    def test_first_declaration_wins(self) -> None:
        """Two declarations with one name: the first is used."""
        structure = VariantStructure(
            declarations=("local n = count: plural", "input n"),
            selectors=("n",),
        )
        assert evaluate_selectors(structure, {"count": 1, "n": "raw"}, "en") == {"n": "one"}

    def test_unknown_declaration_reported(self) -> None:
        """Malformed declarations add a syntax error and act as undeclared."""
        structure = VariantStructure(declarations=("local broken",), selectors=("broken",))
        errors: list[VariantError] = []
        values = evaluate_selectors(structure, {"broken": "x"}, "en", errors=errors)
        assert values == {"broken": "x"}
        assert len(errors) == 1
        assert isinstance(errors[0], VariantSyntaxError)
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code is DiagnosticCode.DECLARATION_MISSING_EQUALS

    def test_injected_categorizer(self) -> None:
        """The categorizer receives operand, locale and plural type."""
        calls: list[tuple[object, str, PluralType]] = []

        def fake(n: object, locale: str, plural_type: PluralType = PluralType.CARDINAL) -> str:
            calls.append((n, locale, plural_type))
            return "few"

        values = evaluate_selectors(PLURAL, {"count": "3"}, "pl", categorizer=fake)
        assert values == {"countPlural": "few"}
        assert calls == [(3, "pl", PluralType.CARDINAL)]


class TestEvaluateSelector:
    """Test single-selector evaluation."""

    def test_ordinal(self) -> None:
        """type=ordinal uses ordinal rules."""
        decl = LocalDeclaration("ordinal", "position", "plural", (("type", "ordinal"),))
        assert evaluate_selector("ordinal", decl, {"position": 2}, "en") == "two"
        assert evaluate_selector("ordinal", decl, {"position": 11}, "en") == "other"

    def test_decimal_operand(self) -> None:
        """Decimal operands are categorized directly."""
        decl = LocalDeclaration("n", "count", "plural")
        assert evaluate_selector("n", decl, {"count": Decimal("1.5")}, "en") == "other"

    def test_non_numeric_operand_is_other(self) -> None:
        """Non-numeric operand -> 'other' plus a resolution error."""
        decl = LocalDeclaration("n", "count", "plural")
        errors: list[VariantError] = []
        assert evaluate_selector("n", decl, {"count": "many"}, "en", errors=errors) == "other"
        assert isinstance(errors[0], VariantResolutionError)
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code is DiagnosticCode.PLURAL_OPERAND_INVALID
        assert errors[0].diagnostic.selector == "n"

    def test_missing_operand_is_other(self) -> None:
        """Absent operand -> 'other'."""
        decl = LocalDeclaration("n", "count", "plural")
        errors: list[VariantError] = []
        assert evaluate_selector("n", decl, {}, "en", errors=errors) == "other"
        assert len(errors) == 1

    def test_unsupported_transform_uses_source_text(self) -> None:
        """Non-plural transforms yield the source parameter text."""
        decl = LocalDeclaration("shout", "name", "upper")
        errors: list[VariantError] = []
        assert evaluate_selector("shout", decl, {"name": "ann"}, "en", errors=errors) == "ann"
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code is DiagnosticCode.TRANSFORM_UNSUPPORTED

    def test_input_declaration(self) -> None:
        """Input declarations read the parameter of their own name."""
        assert evaluate_selector("x", InputDeclaration("x"), {"x": 7}, "en") == "7"

    def test_no_declaration(self) -> None:
        """None declaration reads the parameter named like the selector."""
        assert evaluate_selector("role", None, {"role": "admin"}, "en") == "admin"
