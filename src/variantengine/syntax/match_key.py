"""Pattern-key parser and selector-name inference.

A pattern key names the conditions under which a match entry applies:

    "countPlural=one, gender=male"  -> countPlural == "one" and gender == "male"
    "platform=*"                    -> any platform

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from variantengine.constants import CLAUSE_SEPARATOR, CONDITION_SEPARATOR

from .ast import Condition, MatchEntry, PatternKey

__all__ = ["infer_selectors", "parse_match_key"]

logger = logging.getLogger(__name__)


def parse_match_key(key: str) -> PatternKey:
    """Parse a pattern key into ordered conditions.

    Clauses are separated by commas; each clause is ``selector=value``.
    Clauses missing either side are dropped and recorded in
    ``invalid_clauses``. A selector repeated within one key keeps its
    first position and takes the later value.

    Args:
        key: Pattern key text

    Returns:
        PatternKey with conditions in first-seen selector order

    Example:
        >>> parse_match_key("countPlural=one, gender=*").conditions
        (Condition(selector='countPlural', value='one'), Condition(selector='gender', value='*'))
    """
    conditions: dict[str, str] = {}
    invalid: list[str] = []

    for clause in (part.strip() for part in key.split(CLAUSE_SEPARATOR)):
        pieces = [piece.strip() for piece in clause.split(CONDITION_SEPARATOR)]
        selector = pieces[0]
        value = pieces[1] if len(pieces) > 1 else ""
        if selector and value:
            conditions[selector] = value
        elif clause:
            invalid.append(clause)

    if invalid:
        logger.debug("Dropped clauses %r from pattern key %r", invalid, key)

    return PatternKey(
        raw=key,
        conditions=tuple(Condition(sel, val) for sel, val in conditions.items()),
        invalid_clauses=tuple(invalid),
    )


def infer_selectors(match: Iterable[MatchEntry | str]) -> tuple[str, ...]:
    """Derive selector names from pattern keys.

    Used when a structure declares no selectors. Names are returned in
    first-seen order across all keys, in match-table order.

    Args:
        match: Match entries (or bare pattern keys)

    Returns:
        Distinct selector names

    Example:
        >>> infer_selectors(["countPlural=one, gender=male", "gender=*, platform=ios"])
        ('countPlural', 'gender', 'platform')
    """
    seen: dict[str, None] = {}
    for item in match:
        key = item.key if isinstance(item, MatchEntry) else item
        for selector in parse_match_key(key).selectors:
            seen.setdefault(selector, None)
    return tuple(seen)
