"""Declaration parser.

Turns raw declaration strings into Declaration nodes:

    input count                                  -> InputDeclaration
    local countPlural = count: plural            -> LocalDeclaration
    local ordinal = position: plural type=ordinal -> LocalDeclaration(options=...)

The parse is total: text that fits neither form becomes an
UnknownDeclaration carrying an annotation, and a warning is logged.
Parsing never raises.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from variantengine.constants import CONDITION_SEPARATOR, INPUT_KEYWORD, LOCAL_KEYWORD
from variantengine.diagnostics import Diagnostic, ErrorTemplate

from .ast import Declaration, InputDeclaration, LocalDeclaration, UnknownDeclaration

__all__ = ["parse_declaration", "parse_declarations"]

logger = logging.getLogger(__name__)


def parse_declarations(declarations: Iterable[object] | None) -> tuple[Declaration, ...]:
    """Parse a sequence of declaration strings.

    Non-string and empty entries are dropped without a diagnostic.

    Args:
        declarations: Raw declaration strings (None is treated as empty)

    Returns:
        Parsed declarations in input order

    Example:
        >>> decls = parse_declarations(["input count", "local countPlural = count: plural"])
        >>> decls[1].source, decls[1].transform
        ('count', 'plural')
    """
    if not declarations:
        return ()
    return tuple(
        parse_declaration(decl) for decl in declarations if decl and isinstance(decl, str)
    )


def parse_declaration(raw: str) -> Declaration:
    """Parse one declaration string.

    Args:
        raw: Declaration text

    Returns:
        InputDeclaration, LocalDeclaration, or UnknownDeclaration
    """
    if raw.startswith(INPUT_KEYWORD):
        return InputDeclaration(name=raw[len(INPUT_KEYWORD) :].strip())

    if raw.startswith(LOCAL_KEYWORD):
        return _parse_local(raw)

    return _unknown(raw, ErrorTemplate.declaration_unknown_format(raw))


def _parse_local(raw: str) -> Declaration:
    rest = raw[len(LOCAL_KEYWORD) :].strip()

    name, equals, after_equals = rest.partition(CONDITION_SEPARATOR)
    if not equals:
        return _unknown(raw, ErrorTemplate.declaration_missing_equals(raw))

    source, colon, after_colon = after_equals.strip().partition(":")
    if not colon:
        return _unknown(raw, ErrorTemplate.declaration_missing_colon(raw))

    tokens = after_colon.split()
    transform = tokens[0] if tokens else ""

    return LocalDeclaration(
        name=name.strip(),
        source=source.strip(),
        transform=transform,
        options=_parse_options(tokens[1:]),
    )


def _parse_options(tokens: list[str]) -> tuple[tuple[str, str], ...]:
    """key=value tokens; tokens without '=' or with an empty side are ignored."""
    options: list[tuple[str, str]] = []
    for token in tokens:
        if CONDITION_SEPARATOR not in token:
            continue
        # "a=b=c" keeps key "a" and value "b"
        key, value = (part.strip() for part in token.split(CONDITION_SEPARATOR)[:2])
        if key and value:
            options.append((key, value))
    return tuple(options)


def _unknown(raw: str, annotation: Diagnostic) -> UnknownDeclaration:
    logger.warning("%s", annotation.message)
    return UnknownDeclaration(raw=raw, annotation=annotation)
