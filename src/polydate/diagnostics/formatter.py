"""Rendering of parse and keyword-table diagnostics.

Messages embed the date label that failed, which comes straight from a
web page, so every style can truncate message and hint text before it
reaches a log line or terminal.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Rendering styles."""

    RUST = "rust"  # multi-line, with source and help lines
    SIMPLE = "simple"  # one line: CODE: message
    JSON = "json"  # one JSON object per diagnostic


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Render diagnostics as text.

    Attributes:
        output_format: Rendering style
        sanitize: Truncate message and hint text to max_content_length
        max_content_length: Characters kept when sanitizing

    Example:
        >>> diagnostic = ErrorTemplate.parse_locale_unknown("xx-YY")
        >>> print(DiagnosticFormatter().format(diagnostic))
        error[PARSE_LOCALE_UNKNOWN]: No keyword table for locale 'xx-YY'
          --> xx-YY
          = help: Register a keyword table for the locale or its two-letter language

        >>> print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic))
        PARSE_LOCALE_UNKNOWN: No keyword table for locale 'xx-YY'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured style."""
        message = self._clip(diagnostic.message)
        hint = self._clip(diagnostic.hint) if diagnostic.hint else None

        match self.output_format:
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {message}"
            case OutputFormat.JSON:
                return self._as_json(diagnostic, message, hint)
            case OutputFormat.RUST:
                lines = [f"{diagnostic.severity}[{diagnostic.code.name}]: {message}"]
                if diagnostic.source:
                    lines.append(f"  --> {diagnostic.source}")
                if hint:
                    lines.append(f"  = help: {hint}")
                return "\n".join(lines)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    @staticmethod
    def _as_json(diagnostic: Diagnostic, message: str, hint: str | None) -> str:
        payload: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": message,
            "severity": diagnostic.severity,
        }
        if diagnostic.source:
            payload["source"] = diagnostic.source
        if hint:
            payload["hint"] = hint
        # Labels are often non-ASCII; keep them readable
        return json.dumps(payload, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if not self.sanitize or len(text) <= self.max_content_length:
            return text
        return text[: self.max_content_length] + "..."
