"""Variant introspection for editing tools.

Answers the questions an editor asks about a stored translation value:
is it a variant, which forms does it have, which form is active for the
current parameters, and what does the structure look like after one form
is edited.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from variantengine.runtime import collect_placeholders, detect_active_key
from variantengine.syntax import (
    MatchEntry,
    VariantStructure,
    extract_variant_structure,
    infer_selectors,
)

__all__ = [
    "VariantInfo",
    "collect_placeholders",
    "describe_variant",
    "list_pattern_keys",
    "replace_template",
]


@dataclass(frozen=True, slots=True)
class VariantInfo:
    """Editor-facing summary of a stored translation value.

    Attributes:
        is_variant: True if the value holds a variant structure
        pattern_keys: Keys of the match table, in order (empty for plain text)
        active_key: Key active for the given parameters (None when not
            detected: plain text, no keys, or no parameters)
        selectors: Declared or inferred selector names
    """

    is_variant: bool
    pattern_keys: tuple[str, ...] = ()
    active_key: str | None = None
    selectors: tuple[str, ...] = ()


def list_pattern_keys(structure: VariantStructure) -> tuple[str, ...]:
    """Match-table keys in order: the forms offered for editing."""
    return structure.pattern_keys


def describe_variant(
    value: object,
    params: Mapping[str, object] | None = None,
    locale: str | None = None,
) -> VariantInfo:
    """Summarize a stored value for an editor.

    Args:
        value: Any stored translation value
        params: Parameters of the element being edited
        locale: Locale of the element being edited

    Returns:
        VariantInfo

    Example:
        >>> info = describe_variant(
        ...     '[{"match": {"platform=android": "A", "platform=*": "B"}}]',
        ...     {"platform": "ios"},
        ... )
        >>> info.pattern_keys, info.active_key
        (('platform=android', 'platform=*'), 'platform=*')
    """
    structure = extract_variant_structure(value)
    if structure is None:
        return VariantInfo(is_variant=False)

    keys = structure.pattern_keys
    active_key = None
    if keys and params:
        active_key = detect_active_key(structure, params, locale)

    return VariantInfo(
        is_variant=True,
        pattern_keys=keys,
        active_key=active_key,
        selectors=structure.selectors or infer_selectors(structure.match),
    )


def replace_template(structure: VariantStructure, key: str, template: str) -> VariantStructure:
    """Return a copy of the structure with one form's template replaced.

    The entry keeps its position. A key not yet in the table is appended
    at the end, after any wildcard entries, so it never shadows them.

    Args:
        structure: Original structure (unchanged)
        key: Pattern key of the form being edited
        template: New template text

    Returns:
        New VariantStructure
    """
    entries = list(structure.match)
    for index, entry in enumerate(entries):
        if entry.key == key:
            entries[index] = MatchEntry(key, template)
            break
    else:
        entries.append(MatchEntry(key, template))

    return VariantStructure(
        declarations=structure.declarations,
        selectors=structure.selectors,
        match=tuple(entries),
    )
