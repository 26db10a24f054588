"""CLDR plural rules implementation using Babel.

Provides cardinal and ordinal plural category selection for all locales
using Babel's CLDR data, plus the numeric coercion applied to plural
transform operands.

The categorizer is consumed through the PluralCategorizer protocol so that
callers can inject a test double or another rule source.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Protocol

from babel.core import UnknownLocaleError

from variantengine.constants import MAX_PLURAL_OPERAND_DIGITS
from variantengine.enums import PluralType
from variantengine.locale_utils import get_babel_locale

__all__ = [
    "PluralCategorizer",
    "coerce_plural_operand",
    "has_plural_data",
    "select_plural_category",
]

type PluralOperand = int | Decimal


class PluralCategorizer(Protocol):
    """Maps a number to a CLDR plural category for a locale."""

    def __call__(
        self, n: PluralOperand, locale: str, plural_type: PluralType = PluralType.CARDINAL
    ) -> str:
        """Return one of zero, one, two, few, many, other."""
        ...  # pylint: disable=unnecessary-ellipsis


def select_plural_category(
    n: PluralOperand, locale: str, plural_type: PluralType = PluralType.CARDINAL
) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "en", "en_US", "ar-SA")
        plural_type: Cardinal (quantities) or ordinal (positions)

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en")
        'one'
        >>> select_plural_category(5, "en")
        'other'
        >>> select_plural_category(2, "en", PluralType.ORDINAL)
        'two'
        >>> select_plural_category(5, "ru_RU")
        'many'
        >>> select_plural_category(0, "lv_LV")
        'zero'

    Architecture:
        Uses Babel's Locale.plural_form (cardinal) and Locale.ordinal_form
        (ordinal), which carry CLDR-compliant rules for all supported
        locales with automatic fallback to language-level rules.

        If locale parsing fails, cardinal categorization falls back to the
        one/other rule and ordinal categorization to "other". Nothing is
        logged here; callers report the locale once via has_plural_data().

    Performance:
        Uses cached locale parsing via get_babel_locale() to avoid
        repeated Locale.parse() overhead in hot paths.
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        if plural_type is PluralType.ORDINAL:
            return "other"
        # Most common pattern: n == 1 -> "one", else -> "other"
        return "one" if abs(n) == 1 else "other"

    if plural_type is PluralType.ORDINAL:
        return locale_obj.ordinal_form(n)
    return locale_obj.plural_form(n)


def coerce_plural_operand(value: object) -> PluralOperand | None:
    """Convert a parameter value to a plural operand.

    Integral values become ``int`` so that 1, 1.0, "1" and "1.00" all
    categorize alike: the producer converts operands with a plain numeric
    conversion that does not keep visible trailing zeros.

    Args:
        value: Parameter value

    Returns:
        int or Decimal, or None if the value is not a finite number
        (bool, None, non-numeric text, NaN, infinity, other types) or its
        decimal exponent exceeds MAX_PLURAL_OPERAND_DIGITS

    Example:
        >>> coerce_plural_operand("5")
        5
        >>> coerce_plural_operand(1.0)
        1
        >>> coerce_plural_operand("1.50")
        Decimal('1.5')
        >>> coerce_plural_operand("many") is None
        True
        >>> coerce_plural_operand("1e1000000") is None
        True
    """
    match value:
        # bool BEFORE int (bool is a subclass of int)
        case bool() | None:
            return None
        case int():
            return value
        case float():
            if not math.isfinite(value):
                return None
            decimal_value = Decimal(repr(value))
        case Decimal():
            decimal_value = value
        case str():
            try:
                decimal_value = Decimal(value.strip())
            except InvalidOperation:
                return None
        case _:
            return None

    if not decimal_value.is_finite():
        return None
    if decimal_value and abs(decimal_value.adjusted()) > MAX_PLURAL_OPERAND_DIGITS:
        return None
    if decimal_value == decimal_value.to_integral_value():
        return int(decimal_value)
    return decimal_value.normalize()


def has_plural_data(locale: str) -> bool:
    """True if Babel has CLDR plural rules for the locale.

    Example:
        >>> has_plural_data("pt-BR")
        True
        >>> has_plural_data("xx")
        False
    """
    try:
        get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        return False
    return True
