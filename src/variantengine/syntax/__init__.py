"""Variant sub-language syntax.

Declaration and pattern-key parsers, the structure data model, and the
storage codec. Depends only on core and diagnostics.

Python 3.13+.
"""

from .ast import (
    Condition,
    Declaration,
    InputDeclaration,
    LocalDeclaration,
    MatchEntry,
    PatternKey,
    UnknownDeclaration,
    VariantStructure,
)
from .declarations import parse_declaration, parse_declarations
from .match_key import infer_selectors, parse_match_key
from .storage import coerce_structure, encode_variant_structure, extract_variant_structure

__all__ = [
    "Condition",
    "Declaration",
    "InputDeclaration",
    "LocalDeclaration",
    "MatchEntry",
    "PatternKey",
    "UnknownDeclaration",
    "VariantStructure",
    "coerce_structure",
    "encode_variant_structure",
    "extract_variant_structure",
    "infer_selectors",
    "parse_declaration",
    "parse_declarations",
    "parse_match_key",
]
