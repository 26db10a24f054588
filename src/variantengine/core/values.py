"""Parameter value types and their text form.

Parameter values arrive from callers as plain Python scalars. Selector
matching compares them as text against match-table literals written by an
external message compiler, so the text form follows that producer's
conventions rather than Python's ``str()``:

    True  -> "true"       (not "True")
    5.0   -> "5"          (not "5.0")
    inf   -> "Infinity"
    1e21  -> "1e+21"      (exponent form from 1e21 up, as the producer does)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal

__all__ = [
    "ParamValue",
    "Params",
    "format_value",
    "lookup",
]

# Integral floats at or above this magnitude keep exponent form: 1e21 -> "1e+21"
MAX_PLAIN_INTEGRAL_FLOAT: float = 1e21

type ParamValue = str | int | float | Decimal | bool | None
"""Scalar accepted as a runtime parameter."""

type Params = Mapping[str, ParamValue]
"""Runtime parameters keyed by name."""


def format_value(value: object) -> str | None:
    """Convert a parameter value to its matching/display text.

    Args:
        value: Parameter value (None means absent)

    Returns:
        Text form, or None when the value is absent

    Example:
        >>> format_value(True)
        'true'
        >>> format_value(5.0)
        '5'
        >>> format_value(1e21)
        '1e+21'
        >>> format_value(0.5)
        '0.5'
        >>> format_value(None) is None
        True
    """
    match value:
        case None:
            return None
        # bool BEFORE int (bool is a subclass of int)
        case bool():
            return "true" if value else "false"
        case int() | str():
            return str(value)
        case float():
            if math.isnan(value):
                return "NaN"
            if math.isinf(value):
                return "Infinity" if value > 0 else "-Infinity"
            if value.is_integer() and abs(value) < MAX_PLAIN_INTEGRAL_FLOAT:
                return str(int(value))
            return repr(value)
        case Decimal():
            return str(value)
        case _:
            return str(value)


def lookup(params: Mapping[str, object], name: str) -> str | None:
    """Look up a parameter by name and return its text form (None if absent)."""
    return format_value(params.get(name))
