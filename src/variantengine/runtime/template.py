"""Template placeholder substitution.

Templates use ``{identifier}`` placeholders where the identifier is made of
word characters. Substitution is a single pass: values inserted into the
output are never re-scanned for placeholders.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from variantengine.core import format_value

__all__ = ["PLACEHOLDER_PATTERN", "collect_placeholders", "substitute"]

PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"\{(\w+)\}", re.ASCII)


def substitute(template: str, params: Mapping[str, object] | None = None) -> str:
    """Replace ``{name}`` placeholders with parameter values.

    A placeholder whose parameter is absent (or None) stays in the output
    unchanged.

    Args:
        template: Template text
        params: Parameter values

    Returns:
        Rendered text

    Example:
        >>> substitute("You have {count} items", {"count": 5})
        'You have 5 items'
        >>> substitute("Hello {name}", {})
        'Hello {name}'
    """
    if not params:
        return template

    def _replace(match: re.Match[str]) -> str:
        text = format_value(params.get(match.group(1)))
        return match.group(0) if text is None else text

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def collect_placeholders(template: str) -> tuple[str, ...]:
    """Distinct placeholder names in first-seen order.

    Example:
        >>> collect_placeholders("{count} of {total} ({count})")
        ('count', 'total')
    """
    return tuple(dict.fromkeys(PLACEHOLDER_PATTERN.findall(template)))
