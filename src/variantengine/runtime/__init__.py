"""Variant runtime package.

Provides selector evaluation, matching, template substitution, and the
VariantResolver API. Depends on syntax package for parsing.

Python 3.13+.
"""

from .config import ResolverConfig
from .matcher import MatchResult, find_match
from .plural_rules import PluralCategorizer, coerce_plural_operand, select_plural_category
from .resolver import VariantResolver, detect_active_key, render, render_template
from .selectors import SelectorValues, evaluate_selector, evaluate_selectors, selector_names
from .template import collect_placeholders, substitute

__all__ = [
    "MatchResult",
    "PluralCategorizer",
    "ResolverConfig",
    "SelectorValues",
    "VariantResolver",
    "coerce_plural_operand",
    "collect_placeholders",
    "detect_active_key",
    "evaluate_selector",
    "evaluate_selectors",
    "find_match",
    "render",
    "render_template",
    "select_plural_category",
    "selector_names",
    "substitute",
]
