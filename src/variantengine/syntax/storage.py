"""Storage shapes of variant structures.

Stored translation values reach the engine in one of several shapes:

    [{"declarations": [...], "selectors": [...], "match": {...}}]   decoded list
    '[{"declarations": [...], "selectors": [...], "match": {...}}]' JSON text
    "Hello {name}"                                                  plain template

The single-element list wrapper is kept for compatibility with the message
compiler that produces these values and is written back by the encoder.
JSON objects decode to insertion-ordered dicts, so match-table order
survives a decode/encode round trip.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from variantengine.constants import WRAPPED_STRUCTURE_PREFIX
from variantengine.diagnostics import (
    ErrorTemplate,
    VariantError,
    VariantStructureError,
)

from .ast import VariantStructure

__all__ = [
    "coerce_structure",
    "encode_variant_structure",
    "extract_variant_structure",
]

logger = logging.getLogger(__name__)


def extract_variant_structure(value: object) -> VariantStructure | None:
    """Normalize a stored value into a VariantStructure.

    Args:
        value: Decoded list, JSON text, VariantStructure, or anything else

    Returns:
        VariantStructure, or None when the value is not a variant (callers
        treat it as a plain template)

    Example:
        >>> s = extract_variant_structure('[{"match": {"platform=*": "Hi"}}]')
        >>> s.pattern_keys
        ('platform=*',)
        >>> extract_variant_structure("Hello {name}") is None
        True
    """
    if isinstance(value, VariantStructure):
        return value

    if isinstance(value, str):
        if not value.strip().startswith(WRAPPED_STRUCTURE_PREFIX):
            return None
        try:
            value = json.loads(value)
        except json.JSONDecodeError as e:
            logger.warning("%s", ErrorTemplate.structure_decode_failed(str(e)).message)
            return None

    if not isinstance(value, (list, tuple)) or not value:
        return None

    first = value[0]
    if not isinstance(first, Mapping) or first.get("match") is None:
        return None

    try:
        return VariantStructure.from_mapping(first)
    except VariantStructureError as e:
        logger.debug("Stored value is not a usable variant: %s", e)
        return None


def encode_variant_structure(structure: VariantStructure) -> str:
    """Encode a structure in the wrapped storage shape.

    ``declarations`` and ``selectors`` are always written, even when empty.
    Match keys are written in table order; a key repeated in the table keeps
    only its last template.

    Args:
        structure: Structure to encode

    Returns:
        JSON text of a single-element array

    Example:
        >>> encode_variant_structure(VariantStructure(match=(MatchEntry("platform=*", "Hi"),)))
        '[{"declarations": [], "selectors": [], "match": {"platform=*": "Hi"}}]'
    """
    return json.dumps([structure.to_mapping()], ensure_ascii=False)


def coerce_structure(
    value: object,
) -> tuple[VariantStructure | None, tuple[VariantError, ...]]:
    """Accept a VariantStructure, a storage object, or any stored shape.

    Unlike extract_variant_structure, a value that is clearly meant as a
    variant but lacks a usable match table yields a structure error.

    Args:
        value: VariantStructure, mapping with a ``match`` table, or stored value

    Returns:
        Tuple of (structure or None, errors)
    """
    if isinstance(value, VariantStructure):
        return (value, ())

    if isinstance(value, Mapping):
        try:
            return (VariantStructure.from_mapping(value), ())
        except VariantStructureError as e:
            return (None, (e,))

    structure = extract_variant_structure(value)
    if structure is None:
        return (None, (VariantStructureError(ErrorTemplate.structure_missing_match()),))
    return (structure, ())
