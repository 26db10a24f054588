"""Variant structure node definitions.

Data model of the variant sub-language: declarations, pattern keys, and the
ordered match table. Includes type guards as static methods.

All nodes are frozen: they are built fresh per call and never mutated.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, TypeIs

from variantengine.constants import PLURAL_TRANSFORM, PLURAL_TYPE_OPTION, WILDCARD
from variantengine.core import format_value
from variantengine.diagnostics import Diagnostic, ErrorTemplate, VariantStructureError
from variantengine.enums import DeclarationKind, PluralType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Declarations
    "InputDeclaration",
    "LocalDeclaration",
    "UnknownDeclaration",
    # Match table
    "Condition",
    "PatternKey",
    "MatchEntry",
    "VariantStructure",
    # Type aliases
    "Declaration",
]

# ============================================================================
# DECLARATIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class InputDeclaration:
    """Parameter passed through verbatim.

    Example:
        input count
    """

    name: str

    @property
    def kind(self) -> DeclarationKind:
        return DeclarationKind.INPUT

    @staticmethod
    def guard(decl: object) -> TypeIs[InputDeclaration]:
        """Type guard for InputDeclaration."""
        return isinstance(decl, InputDeclaration)


@dataclass(frozen=True, slots=True)
class LocalDeclaration:
    """Value derived from a source parameter by a transform.

    Example:
        local ordinal = position: plural type=ordinal

    Attributes:
        name: Declared selector name ("ordinal")
        source: Parameter the transform reads ("position")
        transform: Transform name ("plural")
        options: key=value tokens in declaration order (("type", "ordinal"),)
    """

    name: str
    source: str
    transform: str
    options: tuple[tuple[str, str], ...] = ()

    @property
    def kind(self) -> DeclarationKind:
        return DeclarationKind.LOCAL

    @property
    def is_plural(self) -> bool:
        return self.transform == PLURAL_TRANSFORM

    @property
    def plural_type(self) -> PluralType:
        """Ordinal when declared with type=ordinal, cardinal otherwise."""
        if self.options_dict().get(PLURAL_TYPE_OPTION) == PluralType.ORDINAL:
            return PluralType.ORDINAL
        return PluralType.CARDINAL

    def options_dict(self) -> dict[str, str]:
        """Options as a dict; a repeated key keeps its last value."""
        return dict(self.options)

    @staticmethod
    def guard(decl: object) -> TypeIs[LocalDeclaration]:
        """Type guard for LocalDeclaration."""
        return isinstance(decl, LocalDeclaration)


@dataclass(frozen=True, slots=True)
class UnknownDeclaration:
    """Declaration text matching neither grammar.

    Always constructible. Evaluation treats a selector bound to an unknown
    declaration like an undeclared one: raw parameter lookup by name.

    Attributes:
        raw: The declaration text as given
        annotation: Why parsing failed
    """

    raw: str
    annotation: Diagnostic | None = None

    @property
    def name(self) -> str:
        return self.raw

    @property
    def kind(self) -> DeclarationKind:
        return DeclarationKind.UNKNOWN

    @staticmethod
    def guard(decl: object) -> TypeIs[UnknownDeclaration]:
        """Type guard for UnknownDeclaration."""
        return isinstance(decl, UnknownDeclaration)


# ============================================================================
# MATCH TABLE
# ============================================================================


@dataclass(frozen=True, slots=True)
class Condition:
    """One clause of a pattern key: selector=value."""

    selector: str
    value: str

    @property
    def is_wildcard(self) -> bool:
        return self.value == WILDCARD

    def is_satisfied_by(self, observed: str | None) -> bool:
        """Wildcard accepts anything; otherwise text equality. Absent never equals."""
        if self.is_wildcard:
            return True
        return observed is not None and observed == self.value


@dataclass(frozen=True, slots=True)
class PatternKey:
    """Parsed pattern key: "countPlural=one, gender=*".

    Attributes:
        raw: The key text as stored in the match table
        conditions: Clauses in first-seen selector order
        invalid_clauses: Clause texts dropped during parsing
    """

    raw: str
    conditions: tuple[Condition, ...]
    invalid_clauses: tuple[str, ...] = ()

    @property
    def selectors(self) -> tuple[str, ...]:
        return tuple(c.selector for c in self.conditions)

    def matches(self, selector_values: Mapping[str, str | None]) -> bool:
        """True iff every clause is satisfied. A key without clauses always matches."""
        return all(c.is_satisfied_by(selector_values.get(c.selector)) for c in self.conditions)


@dataclass(frozen=True, slots=True)
class MatchEntry:
    """One row of the match table."""

    key: str
    template: str


@dataclass(frozen=True, slots=True)
class VariantStructure:
    """Declarations, selectors and ordered match table of one message.

    The match table is a tuple of entries: its order is the producer's
    priority order and first-match-wins depends on it.

    Example:
        >>> VariantStructure(
        ...     declarations=("input count", "local countPlural = count: plural"),
        ...     selectors=("countPlural",),
        ...     match=(
        ...         MatchEntry("countPlural=one", "1 item"),
        ...         MatchEntry("countPlural=other", "{count} items"),
        ...     ),
        ... )
    """

    declarations: tuple[str, ...] = ()
    selectors: tuple[str, ...] = ()
    match: tuple[MatchEntry, ...] = ()

    @property
    def pattern_keys(self) -> tuple[str, ...]:
        return tuple(entry.key for entry in self.match)

    @property
    def templates(self) -> tuple[str, ...]:
        return tuple(entry.template for entry in self.match)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> VariantStructure:
        """Build a structure from a decoded storage object.

        Args:
            data: Object with optional ``declarations`` and ``selectors``
                lists and a required ``match`` table (a mapping, or a
                sequence of ``[key, template]`` pairs)

        Returns:
            VariantStructure with the match order preserved

        Raises:
            VariantStructureError: If ``match`` is missing or unusable
        """
        match_value = data.get("match")
        if match_value is None:
            raise VariantStructureError(ErrorTemplate.structure_missing_match())

        return cls(
            declarations=_string_items(data.get("declarations")),
            selectors=_string_items(data.get("selectors")),
            match=_match_entries(match_value),
        )

    def to_mapping(self) -> dict[str, Any]:
        """Storage object for this structure (match as an insertion-ordered dict)."""
        return {
            "declarations": list(self.declarations),
            "selectors": list(self.selectors),
            "match": {entry.key: entry.template for entry in self.match},
        }


def _string_items(value: object) -> tuple[str, ...]:
    if isinstance(value, (list, tuple)):
        return tuple(item for item in value if isinstance(item, str))
    return ()


def _template_text(template: object, match_value: object) -> str:
    if isinstance(template, str):
        return template
    if template is None:
        return ""
    if isinstance(template, (bool, int, float, Decimal)):
        return format_value(template) or ""
    raise VariantStructureError(ErrorTemplate.structure_invalid_match(type(match_value).__name__))


def _match_entries(match_value: object) -> tuple[MatchEntry, ...]:
    invalid = VariantStructureError(
        ErrorTemplate.structure_invalid_match(type(match_value).__name__)
    )

    if isinstance(match_value, Mapping):
        pairs: Sequence[object] = list(match_value.items())
    elif isinstance(match_value, (list, tuple)):
        pairs = match_value
    else:
        raise invalid

    entries: list[MatchEntry] = []
    for pair in pairs:
        if isinstance(pair, MatchEntry):
            entries.append(pair)
            continue
        if not isinstance(pair, (list, tuple)) or len(pair) != 2 or not isinstance(pair[0], str):
            raise invalid
        key, template = pair
        entries.append(MatchEntry(key, _template_text(template, match_value)))
    return tuple(entries)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Declaration = InputDeclaration | LocalDeclaration | UnknownDeclaration
