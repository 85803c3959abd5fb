"""Tests for the diagnostics package: codes, templates, errors, formatter.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from polydate.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    KeywordTableError,
    NaturalDateParseError,
    OutputFormat,
    PolydateError,
)

_short_text = st.text(min_size=1, max_size=60)
_locale_codes = st.from_regex(r"[a-z]{2,3}(-[A-Z][a-z]{3})?(-[A-Z]{2})?", fullmatch=True)


class TestDiagnosticCode:
    """Test DiagnosticCode values."""

    def test_codes_are_unique(self) -> None:
        """Every code has its own number."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    def test_code_ranges(self) -> None:
        """Parse errors are 4xxx, keyword table errors 6xxx."""
        assert 4000 <= DiagnosticCode.PARSE_NATURAL_DATE_FAILED.value < 5000
        assert 4000 <= DiagnosticCode.PARSE_LOCALE_UNKNOWN.value < 5000
        assert 4000 <= DiagnosticCode.PARSE_INPUT_INVALID.value < 5000
        assert 6000 <= DiagnosticCode.KEYWORD_TABLE_INVALID.value < 7000


class TestErrorTemplate:
    """Templates for parse and keyword table errors."""

    @given(value=_short_text, locale_code=_locale_codes, reason=_short_text)
    def test_parse_natural_date_failed(self, value: str, locale_code: str, reason: str) -> None:
        """The input (repr), locale and reason all appear in the message."""
        d = ErrorTemplate.parse_natural_date_failed(value, locale_code, reason)
        assert d.code == DiagnosticCode.PARSE_NATURAL_DATE_FAILED
        assert repr(value) in d.message
        assert locale_code in d.message
        assert reason in d.message
        assert d.hint is not None
        event("template=parse_natural_date_failed")

    @given(locale_code=_locale_codes)
    def test_parse_locale_unknown(self, locale_code: str) -> None:
        """The locale appears in the message and as the source."""
        d = ErrorTemplate.parse_locale_unknown(locale_code)
        assert d.code == DiagnosticCode.PARSE_LOCALE_UNKNOWN
        assert locale_code in d.message
        assert d.source == locale_code

    def test_parse_input_invalid_non_string(self) -> None:
        """Non-string inputs are described by type name."""
        d = ErrorTemplate.parse_input_invalid(42, "en", "Expected string, got int")
        assert d.code == DiagnosticCode.PARSE_INPUT_INVALID
        assert "'int'" in d.message

    def test_parse_input_invalid_truncates(self) -> None:
        """Long string inputs are truncated in the message."""
        d = ErrorTemplate.parse_input_invalid("x" * 5000, "en", "too long")
        assert "x" * 51 not in d.message

    def test_keyword_table_invalid(self) -> None:
        """Field name and source are recorded."""
        d = ErrorTemplate.keyword_table_invalid("months.wide", "expected a list", "ko.json")
        assert d.code == DiagnosticCode.KEYWORD_TABLE_INVALID
        assert "'months.wide'" in d.message
        assert d.source == "ko.json"


class TestErrors:
    """Test the exception hierarchy."""

    def test_hierarchy(self) -> None:
        """Both concrete errors derive from PolydateError."""
        assert issubclass(NaturalDateParseError, PolydateError)
        assert issubclass(KeywordTableError, PolydateError)

    def test_plain_message(self) -> None:
        """A plain string message carries no diagnostic."""
        error = PolydateError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        """A diagnostic is kept and formatted into the exception text."""
        diagnostic = ErrorTemplate.parse_locale_unknown("xx-YY")
        error = NaturalDateParseError(diagnostic, input_value="Today", locale_code="xx-YY")
        assert error.diagnostic is diagnostic
        assert error.input_value == "Today"
        assert error.locale_code == "xx-YY"
        assert str(error).startswith("error[PARSE_LOCALE_UNKNOWN]:")

    def test_keyword_table_error_is_raisable(self) -> None:
        """KeywordTableError is raised with its diagnostic attached."""
        with pytest.raises(KeywordTableError) as exc_info:
            raise KeywordTableError(ErrorTemplate.keyword_table_invalid("locale", "missing"))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.KEYWORD_TABLE_INVALID


class TestDiagnosticFormatter:
    """Test DiagnosticFormatter output formats."""

    DIAGNOSTIC = Diagnostic(
        code=DiagnosticCode.PARSE_LOCALE_UNKNOWN,
        message="No keyword table for locale 'xx-YY'",
        hint="Register a table",
        source="xx-YY",
    )

    def test_rust_format(self) -> None:
        """Rust style shows code, source and help lines."""
        output = DiagnosticFormatter().format(self.DIAGNOSTIC)
        assert output.splitlines() == [
            "error[PARSE_LOCALE_UNKNOWN]: No keyword table for locale 'xx-YY'",
            "  --> xx-YY",
            "  = help: Register a table",
        ]

    def test_rust_format_minimal(self) -> None:
        """Source and hint lines are omitted when absent."""
        diagnostic = Diagnostic(code=DiagnosticCode.PARSE_INPUT_INVALID, message="bad")
        assert DiagnosticFormatter().format(diagnostic) == "error[PARSE_INPUT_INVALID]: bad"

    def test_simple_format(self) -> None:
        """Simple style is a single line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(self.DIAGNOSTIC) == (
            "PARSE_LOCALE_UNKNOWN: No keyword table for locale 'xx-YY'"
        )

    def test_json_format(self) -> None:
        """JSON style is machine-readable and keeps non-ASCII text."""
        diagnostic = ErrorTemplate.parse_natural_date_failed("오늘", "ko", "no match")
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(diagnostic))
        assert data["code"] == "PARSE_NATURAL_DATE_FAILED"
        assert data["code_value"] == DiagnosticCode.PARSE_NATURAL_DATE_FAILED.value
        assert data["source"] == "ko"
        assert "오늘" in formatter.format(diagnostic)

    def test_sanitize_truncates(self) -> None:
        """Sanitizing truncates long messages."""
        diagnostic = Diagnostic(code=DiagnosticCode.PARSE_INPUT_INVALID, message="x" * 500)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        assert formatter.format(diagnostic) == "PARSE_INPUT_INVALID: " + "x" * 10 + "..."

    def test_sanitize_applies_to_every_style(self) -> None:
        """Rust style truncates message and hint text too."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.PARSE_INPUT_INVALID, message="x" * 500, hint="y" * 500
        )
        formatter = DiagnosticFormatter(sanitize=True, max_content_length=10)
        assert formatter.format(diagnostic).splitlines() == [
            "error[PARSE_INPUT_INVALID]: " + "x" * 10 + "...",
            "  = help: " + "y" * 10 + "...",
        ]

    def test_format_all(self) -> None:
        """Multiple diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all([self.DIAGNOSTIC, self.DIAGNOSTIC])
        assert output.count("\n\n") == 1

    def test_format_error_delegates(self) -> None:
        """Diagnostic.format_error() uses the default formatter."""
        assert self.DIAGNOSTIC.format_error() == DiagnosticFormatter().format(self.DIAGNOSTIC)
        assert str(self.DIAGNOSTIC) == self.DIAGNOSTIC.message
