"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and consistently formatted.
    """

    # =========================================================================
    # PARSING ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def parse_natural_date_failed(
        value: str,
        locale_code: str,
        reason: str,
    ) -> Diagnostic:
        """Natural date parsing failed.

        Args:
            value: The input string that failed to parse
            locale_code: The locale used for parsing
            reason: The reason parsing failed

        Returns:
            Diagnostic for PARSE_NATURAL_DATE_FAILED
        """
        msg = f"Failed to parse date {value!r} for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NATURAL_DATE_FAILED,
            message=msg,
            hint="Check that the keyword table's date formats match the displayed text",
            source=locale_code,
        )

    @staticmethod
    def parse_locale_unknown(locale_code: str) -> Diagnostic:
        """No keyword table for the locale or its language.

        Args:
            locale_code: The unsupported locale tag

        Returns:
            Diagnostic for PARSE_LOCALE_UNKNOWN
        """
        msg = f"No keyword table for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LOCALE_UNKNOWN,
            message=msg,
            hint="Register a keyword table for the locale or its two-letter language",
            source=locale_code,
        )

    @staticmethod
    def parse_input_invalid(value: object, locale_code: str, reason: str) -> Diagnostic:
        """Input is not something a date label could be.

        Args:
            value: The rejected input (any type)
            locale_code: The locale used for parsing
            reason: Why the input was rejected

        Returns:
            Diagnostic for PARSE_INPUT_INVALID
        """
        shown = value[:50] if isinstance(value, str) else type(value).__name__
        msg = f"Rejected input {shown!r} for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INPUT_INVALID,
            message=msg,
            hint="Pass the visible date label text as a str",
            source=locale_code,
        )

    # =========================================================================
    # KEYWORD TABLE ERRORS (6000-6999)
    # =========================================================================

    @staticmethod
    def keyword_table_invalid(
        field_name: str, reason: str, source: str | None = None
    ) -> Diagnostic:
        """Keyword table field has the wrong shape.

        Args:
            field_name: Mapping key that failed validation
            reason: What was wrong with it
            source: File path or locale the data came from, if known

        Returns:
            Diagnostic for KEYWORD_TABLE_INVALID
        """
        msg = f"Invalid keyword table field '{field_name}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.KEYWORD_TABLE_INVALID,
            message=msg,
            hint="Regenerate the table from CLDR data or fix the field by hand",
            source=source,
        )
