"""Variant resolver - evaluates variant structures against parameters.

Two pipelines share selector evaluation and matching:

    resolve: structure + params -> winning template -> substituted text
    detect:  structure + params -> winning pattern key

Both fall back to the first match-table entry when nothing matches, so the
key reported by detect is always the key of the template render shows.

Python 3.13+. Indirect dependency: Babel (via plural_rules).

Thread Safety:
    The resolver holds only immutable configuration. Every call builds its
    own selector values and error list, so one resolver can be shared
    across threads and async tasks.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from variantengine.diagnostics import ErrorTemplate, VariantError, VariantResolutionError
from variantengine.locale_utils import normalize_locale
from variantengine.syntax import VariantStructure, coerce_structure, extract_variant_structure

from .config import ResolverConfig
from .matcher import MatchResult, find_match
from .plural_rules import PluralCategorizer, select_plural_category
from .selectors import evaluate_selectors
from .template import substitute

__all__ = [
    "VariantResolver",
    "detect_active_key",
    "render",
    "render_template",
]

logger = logging.getLogger(__name__)

type VariantInput = VariantStructure | Mapping[str, object] | Sequence[object] | str | None


class VariantResolver:
    """Resolves variant structures to strings or active pattern keys.

    Collects errors instead of raising them:
    - Returns (result, errors) tuples
    - Malformed data degrades to a best-effort result

    Example:
        >>> resolver = VariantResolver("en")
        >>> structure = extract_variant_structure(
        ...     '[{"declarations": ["input count", "local n = count: plural"],'
        ...     ' "selectors": ["n"], "match": {"n=one": "1 item", "n=other": "{count} items"}}]'
        ... )
        >>> resolver.resolve(structure, {"count": 5})
        ('5 items', ())
        >>> resolver.detect(structure, {"count": 1})
        ('n=one', ())
    """

    __slots__ = ("categorizer", "config", "locale")

    def __init__(
        self,
        locale: str | None = None,
        *,
        config: ResolverConfig | None = None,
        categorizer: PluralCategorizer | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            locale: Locale for plural categorization (default: config.default_locale)
            config: Behavioral switches (keyword-only)
            categorizer: Plural rule source, Babel CLDR data by default (keyword-only)
        """
        self.config = config or ResolverConfig()
        self.locale = normalize_locale(locale or self.config.default_locale)
        self.categorizer = categorizer or select_plural_category

    def resolve(
        self,
        structure: VariantInput,
        params: Mapping[str, object] | None = None,
    ) -> tuple[str, tuple[VariantError, ...]]:
        """Render the winning template of a structure.

        Args:
            structure: VariantStructure, storage object, or stored value
            params: Runtime parameters

        Returns:
            Tuple of (rendered_text, errors). rendered_text is "" when the
            structure has no usable match table.
        """
        params = params or {}
        result, errors = self._select(structure, params)
        if result is None:
            return ("", errors)
        return (substitute(result.template, params), errors)

    def detect(
        self,
        structure: VariantInput,
        params: Mapping[str, object] | None = None,
    ) -> tuple[str | None, tuple[VariantError, ...]]:
        """Return the pattern key of the entry resolve() would render.

        Args:
            structure: VariantStructure, storage object, or stored value
            params: Runtime parameters

        Returns:
            Tuple of (pattern_key or None, errors)
        """
        result, errors = self._select(structure, params or {})
        return (None if result is None else result.key, errors)

    def _select(
        self,
        value: VariantInput,
        params: Mapping[str, object],
    ) -> tuple[MatchResult | None, tuple[VariantError, ...]]:
        structure, structure_errors = coerce_structure(value)
        if structure is None:
            return (None, structure_errors)

        errors: list[VariantError] = []
        selector_values = evaluate_selectors(
            structure, params, self.locale, categorizer=self.categorizer, errors=errors
        )
        result = find_match(structure.match, selector_values, errors=errors)

        if result is None:
            result = self._fallback(structure)
            errors.append(
                VariantResolutionError(
                    ErrorTemplate.no_matching_variant(None if result is None else result.key)
                )
            )

        return (result, tuple(errors))

    def _fallback(self, structure: VariantStructure) -> MatchResult | None:
        """First entry of the match table, when the fallback is enabled."""
        if not self.config.first_entry_fallback or not structure.match:
            return None
        first = structure.match[0]
        return MatchResult(key=first.key, template=first.template, index=0)


def _log_errors(errors: tuple[VariantError, ...]) -> None:
    for error in errors:
        diagnostic = error.diagnostic
        if diagnostic is not None and diagnostic.severity == "warning":
            logger.warning("%s", diagnostic.message)
        else:
            logger.error("%s", error)


def render(
    structure: VariantInput,
    params: Mapping[str, object] | None = None,
    locale: str | None = None,
    *,
    config: ResolverConfig | None = None,
    categorizer: PluralCategorizer | None = None,
) -> str:
    """Render a variant structure, logging any degradations.

    Args:
        structure: VariantStructure, storage object, or stored value
        params: Runtime parameters
        locale: Locale for plural categorization (default: "en")
        config: Behavioral switches (keyword-only)
        categorizer: Plural rule source (keyword-only)

    Returns:
        Rendered text ("" when the structure has no usable match table)

    Example:
        >>> render(
        ...     {"match": {"platform=android": "Android", "platform=*": "Other"}},
        ...     {"platform": "ios"},
        ... )
        'Other'
    """
    resolver = VariantResolver(locale, config=config, categorizer=categorizer)
    result, errors = resolver.resolve(structure, params)
    if errors and resolver.config.log_diagnostics:
        _log_errors(errors)
    return result


def detect_active_key(
    structure: VariantInput,
    params: Mapping[str, object] | None = None,
    locale: str | None = None,
    *,
    config: ResolverConfig | None = None,
    categorizer: PluralCategorizer | None = None,
) -> str | None:
    """Return the pattern key of the active entry, logging any degradations.

    Args:
        structure: VariantStructure, storage object, or stored value
        params: Runtime parameters
        locale: Locale for plural categorization (default: "en")
        config: Behavioral switches (keyword-only)
        categorizer: Plural rule source (keyword-only)

    Returns:
        Pattern key, or None when the structure has no usable match table
    """
    resolver = VariantResolver(locale, config=config, categorizer=categorizer)
    key, errors = resolver.detect(structure, params)
    if errors and resolver.config.log_diagnostics:
        _log_errors(errors)
    return key


def render_template(
    value: object,
    params: Mapping[str, object] | None = None,
    locale: str | None = None,
    *,
    config: ResolverConfig | None = None,
    categorizer: PluralCategorizer | None = None,
) -> str:
    """Render any stored translation value: plain template or variant.

    Args:
        value: Plain template text, stored variant (list or JSON text),
            VariantStructure, or storage object with a ``match`` table
        params: Runtime parameters
        locale: Locale for plural categorization (default: "en")
        config: Behavioral switches (keyword-only)
        categorizer: Plural rule source (keyword-only)

    Returns:
        Rendered text ("" for values that are neither text nor variants)

    Example:
        >>> render_template("Hello {name}!", {"name": "John"})
        'Hello John!'
        >>> render_template('[{"match": {"n=*": "{n} items"}}]', {"n": 3})
        '3 items'
    """
    if not value:
        return ""

    if isinstance(value, Mapping) and value.get("match") is not None:
        return render(value, params, locale, config=config, categorizer=categorizer)

    structure = extract_variant_structure(value)
    if structure is not None:
        return render(structure, params, locale, config=config, categorizer=categorizer)

    if not isinstance(value, str):
        return ""

    return substitute(value, params)
