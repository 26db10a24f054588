"""Pattern matcher.

Walks the match table in order and returns the first entry whose pattern
key is fully satisfied by the observed selector values.

First match, not most specific match: the producer emits specific keys
before wildcard keys, and this order is the only priority signal.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from variantengine.diagnostics import ErrorTemplate, VariantError, VariantSyntaxError
from variantengine.syntax import MatchEntry, parse_match_key

__all__ = ["MatchResult", "find_match"]


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Winning match-table entry.

    Attributes:
        key: Pattern key of the entry
        template: Template of the entry
        index: Position of the entry in the match table
    """

    key: str
    template: str
    index: int


def find_match(
    match: Iterable[MatchEntry],
    selector_values: Mapping[str, str | None],
    *,
    errors: list[VariantError] | None = None,
) -> MatchResult | None:
    """Return the first entry satisfied by the selector values.

    Args:
        match: Match table in producer order
        selector_values: Observed selector values
        errors: List receiving pattern-key syntax degradations (keyword-only)

    Returns:
        MatchResult, or None if no entry matches

    Example:
        >>> entries = (MatchEntry("platform=android", "A"), MatchEntry("platform=*", "Def"))
        >>> find_match(entries, {"platform": "ios"})
        MatchResult(key='platform=*', template='Def', index=1)
    """
    for index, entry in enumerate(match):
        pattern_key = parse_match_key(entry.key)
        if errors is not None:
            errors.extend(
                VariantSyntaxError(ErrorTemplate.pattern_key_clause_invalid(entry.key, clause))
                for clause in pattern_key.invalid_clauses
            )
        if pattern_key.matches(selector_values):
            return MatchResult(key=entry.key, template=entry.template, index=index)
    return None
