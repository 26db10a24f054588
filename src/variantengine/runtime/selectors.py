"""Selector evaluation.

Computes the observed value of every selector of a variant structure for
one parameter set and locale:

    LocalDeclaration (plural)  -> CLDR category of the source parameter
    LocalDeclaration (other)   -> source parameter text
    InputDeclaration           -> parameter text
    UnknownDeclaration / none  -> parameter named like the selector

Pure: the only side effects are collected errors and log records.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from variantengine.constants import PLURAL_FALLBACK_CATEGORY
from variantengine.core import lookup
from variantengine.diagnostics import (
    ErrorTemplate,
    VariantError,
    VariantResolutionError,
    VariantSyntaxError,
)
from variantengine.syntax import (
    Declaration,
    InputDeclaration,
    LocalDeclaration,
    UnknownDeclaration,
    VariantStructure,
    infer_selectors,
    parse_declarations,
)

from .plural_rules import (
    PluralCategorizer,
    coerce_plural_operand,
    has_plural_data,
    select_plural_category,
)

__all__ = ["SelectorValues", "evaluate_selector", "evaluate_selectors", "selector_names"]

logger = logging.getLogger(__name__)

type SelectorValues = dict[str, str | None]
"""Selector name -> observed text (None when the parameter is absent)."""


def selector_names(structure: VariantStructure) -> tuple[str, ...]:
    """Declared selectors, or selectors inferred from the match table."""
    if structure.selectors:
        return structure.selectors
    return infer_selectors(structure.match)


def evaluate_selectors(
    structure: VariantStructure,
    params: Mapping[str, object],
    locale: str,
    *,
    categorizer: PluralCategorizer = select_plural_category,
    errors: list[VariantError] | None = None,
) -> SelectorValues:
    """Evaluate every selector of a structure.

    A locale without CLDR plural data is reported once per call, and only
    when a plural selector is evaluated with the Babel categorizer.

    Args:
        structure: Variant structure
        params: Runtime parameters
        locale: Locale for plural categorization
        categorizer: Plural rule source (keyword-only)
        errors: List receiving degradations (keyword-only, optional)

    Returns:
        Observed value per selector, in selector order

    Example:
        >>> structure = VariantStructure(
        ...     declarations=("input count", "local countPlural = count: plural"),
        ...     selectors=("countPlural",),
        ... )
        >>> evaluate_selectors(structure, {"count": 5}, "en")
        {'countPlural': 'other'}
    """
    if errors is None:
        errors = []

    declarations = parse_declarations(structure.declarations)
    for decl in declarations:
        if isinstance(decl, UnknownDeclaration) and decl.annotation is not None:
            errors.append(VariantSyntaxError(decl.annotation))

    by_name: dict[str, Declaration] = {}
    for decl in declarations:
        by_name.setdefault(decl.name, decl)

    names = selector_names(structure)
    if (
        categorizer is select_plural_category
        and _uses_plural(names, by_name)
        and not has_plural_data(locale)
    ):
        errors.append(VariantResolutionError(ErrorTemplate.plural_locale_unknown(locale)))

    values: SelectorValues = {}
    for name in names:
        values[name] = evaluate_selector(
            name, by_name.get(name), params, locale, categorizer=categorizer, errors=errors
        )

    logger.debug("Selector values for locale %s: %s", locale, values)
    return values


def evaluate_selector(
    name: str,
    declaration: Declaration | None,
    params: Mapping[str, object],
    locale: str,
    *,
    categorizer: PluralCategorizer = select_plural_category,
    errors: list[VariantError] | None = None,
) -> str | None:
    """Evaluate one selector against its declaration.

    Args:
        name: Selector name
        declaration: Declaration bound to the selector (None if undeclared)
        params: Runtime parameters
        locale: Locale for plural categorization
        categorizer: Plural rule source (keyword-only)
        errors: List receiving degradations (keyword-only, optional)

    Returns:
        Observed text, or None when the underlying parameter is absent
    """
    if errors is None:
        errors = []

    match declaration:
        case LocalDeclaration() if declaration.is_plural:
            raw = params.get(declaration.source)
            operand = coerce_plural_operand(raw)
            if operand is None:
                errors.append(
                    VariantResolutionError(
                        ErrorTemplate.plural_operand_invalid(name, declaration.source, raw)
                    )
                )
                return PLURAL_FALLBACK_CATEGORY
            return categorizer(operand, locale, declaration.plural_type)
        case LocalDeclaration():
            errors.append(
                VariantResolutionError(
                    ErrorTemplate.transform_unsupported(name, declaration.transform)
                )
            )
            return lookup(params, declaration.source)
        case InputDeclaration():
            return lookup(params, declaration.name)
        case _:
            return lookup(params, name)


def _uses_plural(names: tuple[str, ...], by_name: Mapping[str, Declaration]) -> bool:
    return any(
        isinstance(decl, LocalDeclaration) and decl.is_plural
        for decl in (by_name.get(name) for name in names)
    )
