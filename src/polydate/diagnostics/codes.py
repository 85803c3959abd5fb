"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for natural date parsing.
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
        4000-4999: Parsing errors (natural date parsing)
        6000-6999: Keyword table errors (locale data loading)
    """

    # Parsing errors (4000-4999)
    PARSE_NATURAL_DATE_FAILED = 4001
    PARSE_LOCALE_UNKNOWN = 4006
    PARSE_INPUT_INVALID = 4011

    # Keyword table errors (6000-6999)
    KEYWORD_TABLE_INVALID = 6001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        source: Where the problem originated (file path, locale tag), if known
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    source: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[PARSE_LOCALE_UNKNOWN]: No keyword table for locale 'xx-YY'
              = help: Register a keyword table for the locale or its language

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
