"""Variant exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
The engine collects these instead of raising them for malformed data;
callers receive them alongside a best-effort result.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class VariantError(Exception):
    """Base exception for all variant errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize VariantError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class VariantSyntaxError(VariantError):
    """Declaration or pattern-key text that failed to parse.

    Parsing continues after syntax errors. Bad declarations become
    UnknownDeclaration entries; bad clauses are dropped from the key.
    """


class VariantResolutionError(VariantError):
    """Degradation while evaluating selectors or matching entries.

    Examples:
    - No match entry satisfied the selector values
    - Non-numeric operand for a plural transform
    - Locale without CLDR plural data

    Fallback: first match entry, or category "other".
    """


class VariantStructureError(VariantError):
    """Variant structure without a usable match table.

    Fallback: render returns "", detect returns None.
    """
