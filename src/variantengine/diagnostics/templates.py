"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every degradation the engine
    can report.
    """

    # ------------------------------------------------------------------
    # Syntax
    # ------------------------------------------------------------------

    @staticmethod
    def declaration_missing_equals(raw: str) -> Diagnostic:
        """Local declaration without '=' between name and source.

        Args:
            raw: The declaration text as given

        Returns:
            Diagnostic for DECLARATION_MISSING_EQUALS
        """
        msg = f"Invalid local declaration (missing =): {raw!r}"
        return Diagnostic(
            code=DiagnosticCode.DECLARATION_MISSING_EQUALS,
            message=msg,
            hint="Use the form 'local <name> = <source>: <transform>'",
            severity="warning",
        )

    @staticmethod
    def declaration_missing_colon(raw: str) -> Diagnostic:
        """Local declaration without ':' between source and transform.

        Args:
            raw: The declaration text as given

        Returns:
            Diagnostic for DECLARATION_MISSING_COLON
        """
        msg = f"Invalid local declaration (missing :): {raw!r}"
        return Diagnostic(
            code=DiagnosticCode.DECLARATION_MISSING_COLON,
            message=msg,
            hint="Use the form 'local <name> = <source>: <transform>'",
            severity="warning",
        )

    @staticmethod
    def declaration_unknown_format(raw: str) -> Diagnostic:
        """Declaration starting with neither 'input ' nor 'local '.

        Args:
            raw: The declaration text as given

        Returns:
            Diagnostic for DECLARATION_UNKNOWN_FORMAT
        """
        msg = f"Unknown declaration format: {raw!r}"
        return Diagnostic(
            code=DiagnosticCode.DECLARATION_UNKNOWN_FORMAT,
            message=msg,
            hint="Declarations start with 'input ' or 'local '",
            severity="warning",
        )

    @staticmethod
    def pattern_key_clause_invalid(pattern_key: str, clause: str) -> Diagnostic:
        """Pattern-key clause without a selector or a value.

        Args:
            pattern_key: The full pattern key
            clause: The clause that was dropped

        Returns:
            Diagnostic for PATTERN_KEY_CLAUSE_INVALID
        """
        msg = f"Ignoring invalid clause {clause!r} in pattern key {pattern_key!r}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_KEY_CLAUSE_INVALID,
            message=msg,
            hint="Each clause has the form 'selector=value'",
            severity="warning",
            pattern_key=pattern_key,
        )

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    @staticmethod
    def no_matching_variant(fallback_key: str | None) -> Diagnostic:
        """No match entry satisfied the selector values.

        Args:
            fallback_key: Key of the entry used instead (None if disabled)

        Returns:
            Diagnostic for NO_MATCHING_VARIANT
        """
        if fallback_key is None:
            msg = "No matching template found in variant"
        else:
            msg = f"No matching template found in variant; using first entry {fallback_key!r}"
        return Diagnostic(
            code=DiagnosticCode.NO_MATCHING_VARIANT,
            message=msg,
            hint="End the match table with a wildcard entry such as 'selector=*'",
            severity="warning",
            pattern_key=fallback_key,
        )

    @staticmethod
    def plural_operand_invalid(selector: str, source: str, value: object) -> Diagnostic:
        """Plural transform source is not a finite number.

        Args:
            selector: Selector being evaluated
            source: Parameter name the transform reads
            value: The offending parameter value

        Returns:
            Diagnostic for PLURAL_OPERAND_INVALID
        """
        msg = (
            f"Parameter '{source}' for plural selector '{selector}' is not a number "
            f"({type(value).__name__}: {value!r}); using category 'other'"
        )
        return Diagnostic(
            code=DiagnosticCode.PLURAL_OPERAND_INVALID,
            message=msg,
            hint=f"Pass '{source}' as an int, float, Decimal or numeric string",
            severity="warning",
            selector=selector,
        )

    @staticmethod
    def plural_locale_unknown(locale_code: str) -> Diagnostic:
        """Locale has no CLDR plural data.

        Args:
            locale_code: The locale that failed to load

        Returns:
            Diagnostic for PLURAL_LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'; using one/other plural fallback"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_LOCALE_UNKNOWN,
            message=msg,
            hint="Use a CLDR locale code such as 'en', 'de_DE' or 'pt-BR'",
            severity="warning",
        )

    @staticmethod
    def transform_unsupported(selector: str, transform: str) -> Diagnostic:
        """Local declaration with a transform other than plural.

        Args:
            selector: Selector being evaluated
            transform: The transform name

        Returns:
            Diagnostic for TRANSFORM_UNSUPPORTED
        """
        msg = f"Unsupported transform '{transform}' for selector '{selector}'; using raw value"
        return Diagnostic(
            code=DiagnosticCode.TRANSFORM_UNSUPPORTED,
            message=msg,
            hint="Only the 'plural' transform is evaluated",
            severity="warning",
            selector=selector,
        )

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @staticmethod
    def structure_missing_match() -> Diagnostic:
        """Variant structure without a match table.

        Returns:
            Diagnostic for STRUCTURE_MISSING_MATCH
        """
        return Diagnostic(
            code=DiagnosticCode.STRUCTURE_MISSING_MATCH,
            message="Invalid variant: missing match object",
            hint="A variant structure needs a 'match' table of pattern keys to templates",
        )

    @staticmethod
    def structure_invalid_match(type_name: str) -> Diagnostic:
        """Match table of an unusable type.

        Args:
            type_name: Type name of the value found under 'match'

        Returns:
            Diagnostic for STRUCTURE_INVALID_MATCH
        """
        msg = f"Invalid variant: match must be an ordered key/template table, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.STRUCTURE_INVALID_MATCH,
            message=msg,
            hint="Use a JSON object or a list of [key, template] pairs",
        )

    @staticmethod
    def structure_decode_failed(reason: str) -> Diagnostic:
        """Stored text looked like a variant structure but did not decode.

        Args:
            reason: Decoder error message

        Returns:
            Diagnostic for STRUCTURE_DECODE_FAILED
        """
        msg = f"Failed to decode variant structure: {reason}"
        return Diagnostic(
            code=DiagnosticCode.STRUCTURE_DECODE_FAILED,
            message=msg,
            hint="Stored variants are a JSON array holding one object",
            severity="warning",
        )
