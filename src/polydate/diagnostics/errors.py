"""Exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class PolydateError(Exception):
    """Base exception for all polydate errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PolydateError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class NaturalDateParseError(PolydateError):
    """A displayed date string could not be turned into a datetime.

    Returned (never raised) by parse_natural_date_detailed(), so that an
    unparseable label is an ordinary outcome rather than control flow.

    Attributes:
        input_value: The string that failed to parse
        locale_code: The locale tag used for parsing

    Example:
        >>> result, errors = parse_natural_date_detailed("someday", "en")
        >>> if errors:
        ...     for error in errors:
        ...         print(f"Parse failed: {error.input_value} ({error.locale_code})")
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
    ) -> None:
        """Initialize NaturalDateParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            locale_code: The locale tag used for parsing
        """
        super().__init__(message)
        self.input_value = input_value
        self.locale_code = locale_code


class KeywordTableError(PolydateError):
    """Keyword table data is structurally invalid.

    Raised while building a LocaleKeywordTable from external data (JSON files,
    mappings). Missing optional fields are NOT errors; wrong types and wrong
    sequence lengths are.
    """
