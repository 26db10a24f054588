"""Shared constants for variantengine.

This module provides centralized constants used across the syntax and
runtime packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Declaration grammar: keywords and transform names
- Match table grammar: clause separators and the wildcard
- Storage: the opening token of the wrapped storage shape
- Locale: defaults and cache bounds

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Declaration grammar
    "INPUT_KEYWORD",
    "LOCAL_KEYWORD",
    "PLURAL_TRANSFORM",
    "PLURAL_TYPE_OPTION",
    # Match table grammar
    "CLAUSE_SEPARATOR",
    "CONDITION_SEPARATOR",
    "WILDCARD",
    # Storage
    "WRAPPED_STRUCTURE_PREFIX",
    # Locale
    "DEFAULT_LOCALE",
    "MAX_LOCALE_CACHE_SIZE",
    "PLURAL_FALLBACK_CATEGORY",
    "MAX_PLURAL_OPERAND_DIGITS",
]

# ============================================================================
# DECLARATION GRAMMAR
# ============================================================================
#
#   input <name>
#   local <name> = <source>: <transform> [<key>=<value> ...]
#
# Keywords include their trailing space: "inputcount" is not a declaration.

INPUT_KEYWORD: str = "input "
LOCAL_KEYWORD: str = "local "

# The only transform with evaluation semantics. Other transforms pass the
# source parameter through unchanged.
PLURAL_TRANSFORM: str = "plural"

# Option key selecting cardinal vs ordinal categorization.
PLURAL_TYPE_OPTION: str = "type"

# ============================================================================
# MATCH TABLE GRAMMAR
# ============================================================================
#
#   sel1=val1, sel2=val2, ...

CLAUSE_SEPARATOR: str = ","
CONDITION_SEPARATOR: str = "="

# Clause value satisfied by any observed selector value, including absent.
WILDCARD: str = "*"

# ============================================================================
# STORAGE
# ============================================================================

# Variant structures are stored as a single-element JSON array of objects.
# Text values starting with this token are candidates for decoding.
WRAPPED_STRUCTURE_PREFIX: str = "[{"

# ============================================================================
# LOCALE
# ============================================================================

DEFAULT_LOCALE: str = "en"

# Maximum cached Babel Locale instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# Category used when a plural operand is not a finite number.
PLURAL_FALLBACK_CATEGORY: str = "other"

# Largest decimal exponent accepted for a plural operand, in either direction.
# Covers every finite float (max 1.8e308).
MAX_PLURAL_OPERAND_DIGITS: int = 400
