"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Syntax degradations (declarations, pattern keys)
        2000-2999: Resolution degradations (matching, plural categorization)
        3000-3999: Structure errors (missing or malformed match table)
    """

    # Syntax (1000-1999)
    DECLARATION_MISSING_EQUALS = 1001
    DECLARATION_MISSING_COLON = 1002
    DECLARATION_UNKNOWN_FORMAT = 1003
    PATTERN_KEY_CLAUSE_INVALID = 1004

    # Resolution (2000-2999)
    NO_MATCHING_VARIANT = 2001
    PLURAL_OPERAND_INVALID = 2002
    PLURAL_LOCALE_UNKNOWN = 2003
    TRANSFORM_UNSUPPORTED = 2004

    # Structure (3000-3999)
    STRUCTURE_MISSING_MATCH = 3001
    STRUCTURE_INVALID_MATCH = 3002
    STRUCTURE_DECODE_FAILED = 3003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
        selector: Selector name involved (resolution diagnostics)
        pattern_key: Match-table key involved (syntax/resolution diagnostics)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"
    selector: str | None = None
    pattern_key: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            warning[NO_MATCHING_VARIANT]: No match entry satisfied the selector values
              = help: Add a wildcard entry such as 'countPlural=*' as the last entry

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
