"""Enumerations for variantengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class DeclarationKind(StrEnum):
    """Kind of a parsed declaration.

    StrEnum provides automatic string conversion: str(DeclarationKind.INPUT) == "input"
    """

    INPUT = "input"
    """Parameter passed through verbatim: input count"""

    LOCAL = "local"
    """Value derived from a parameter: local countPlural = count: plural"""

    UNKNOWN = "unknown"
    """Declaration text matching neither grammar"""


class PluralType(StrEnum):
    """CLDR plural rule set used for categorization.

    StrEnum provides automatic string conversion: str(PluralType.ORDINAL) == "ordinal"
    """

    CARDINAL = "cardinal"
    """Quantities: 1 item, 5 items"""

    ORDINAL = "ordinal"
    """Positions: 1st, 2nd, 3rd, 4th"""


__all__ = [
    "DeclarationKind",
    "PluralType",
]
