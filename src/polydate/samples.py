"""Sample-file checker for natural date parsing.

A sample file is a plain-text dump of the date labels a task-list UI showed
in one or more languages:

    [ko]
    날짜/시간 추가
    2026년 1월 1일
    오늘
    [en]
    Add date/time
    January 1, 2026
    Today

Line handling:
    - ``[tag]`` switches the current locale (default "en")
    - blank lines are ignored
    - "Add date/time" header lines and "Scheduled for ..." full-label lines
      are skipped (matched by per-language patterns below)
    - every other line is parsed and counted as a success or failure

Python 3.13+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING

from polydate.parsing import parse_natural_date

if TYPE_CHECKING:
    from collections.abc import Iterable

    from polydate.keywords import KeywordTableProvider

__all__ = [
    "DEFAULT_LOCALE",
    "SampleReport",
    "SampleResult",
    "check_samples",
    "format_report",
    "format_result",
    "is_full_label_line",
    "is_header_line",
]

DEFAULT_LOCALE = "en"

_LOCALE_MARKER = re.compile(r"^\[([a-z-]+)\]$", re.IGNORECASE)

# "Add date/time" button captions
_HEADER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"추가"),  # ko
    re.compile(r"Add", re.IGNORECASE),  # en
    re.compile(r"Añadir", re.IGNORECASE),  # es
    re.compile(r"Ajouter", re.IGNORECASE),  # fr
    re.compile(r"Hinzufügen", re.IGNORECASE),  # de
    re.compile(r"Tambah", re.IGNORECASE),  # id
    re.compile(r"Aggiungi", re.IGNORECASE),  # it
    re.compile(r"追加"),  # ja
    re.compile(r"Adicionar", re.IGNORECASE),  # pt
    re.compile(r"Добавить", re.IGNORECASE),  # ru
    re.compile(r"เพิ่ม"),  # th
    re.compile(r"Додати", re.IGNORECASE),  # uk
    re.compile(r"Thêm", re.IGNORECASE),  # vi
    re.compile(r"新增"),  # zh
    re.compile(r"जोड़ें"),  # hi
    re.compile(r"যোগ"),  # bn
)

# Accessible full labels ("Scheduled for Tuesday, January 13")
_FULL_LABEL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"일정\s*예약"),  # ko
    re.compile(r"Scheduled\s+for", re.IGNORECASE),  # en
    re.compile(r"Programada\s+para", re.IGNORECASE),  # es
    re.compile(r"Planifié\s+pour", re.IGNORECASE),  # fr
    re.compile(r"Geplant\s+für", re.IGNORECASE),  # de
    re.compile(r"Dijadwalkan\s+untuk", re.IGNORECASE),  # id
    re.compile(r"Data\s+programmazione", re.IGNORECASE),  # it
    re.compile(r"にスケジュール設定"),  # ja
    re.compile(r"Tarefa\s+programada", re.IGNORECASE),  # pt
    re.compile(r"Запланировано\s+на", re.IGNORECASE),  # ru
    re.compile(r"กำหนดเวลา"),  # th
    re.compile(r"Заплановано\s+на", re.IGNORECASE),  # uk
    re.compile(r"Đã\s+lên\s+lịch", re.IGNORECASE),  # vi
    re.compile(r"预定时间"),  # zh-Hans
    re.compile(r"預定時間"),  # zh-Hant
    re.compile(r"शेड्यूल\s+किया"),  # hi
    re.compile(r"শেড্যুল\s+করা"),  # bn
)


@dataclass(frozen=True, slots=True)
class SampleResult:
    """Outcome of parsing one sample line.

    Attributes:
        line_number: 1-based line number in the sample text
        locale_code: Locale in effect for the line
        text: Stripped line text
        result: Parsed datetime, or None on failure
    """

    line_number: int
    locale_code: str
    text: str
    result: datetime | None

    @property
    def ok(self) -> bool:
        """True if the line parsed."""
        return self.result is not None


@dataclass(slots=True)
class SampleReport:
    """All parsed sample lines, in file order."""

    results: list[SampleResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    @property
    def failures(self) -> tuple[SampleResult, ...]:
        return tuple(r for r in self.results if not r.ok)


def is_header_line(line: str) -> bool:
    """Check whether a line is an "Add date/time" caption."""
    return any(pattern.search(line) for pattern in _HEADER_PATTERNS)


def is_full_label_line(line: str) -> bool:
    """Check whether a line is a "Scheduled for ..." accessible label."""
    return any(pattern.search(line) for pattern in _FULL_LABEL_PATTERNS)


def check_samples(
    lines: Iterable[str],
    *,
    provider: KeywordTableProvider | None = None,
    locale_code: str = DEFAULT_LOCALE,
    today: date | None = None,
) -> SampleReport:
    """Parse every date line of a sample file.

    Args:
        lines: Sample text, one label per line
        provider: Keyword table provider passed through to the parser
        locale_code: Locale in effect until the first ``[tag]`` marker
        today: Reference day passed through to the parser

    Returns:
        SampleReport with one SampleResult per parsed line
    """
    report = SampleReport()
    current_locale = locale_code

    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue

        marker = _LOCALE_MARKER.match(line)
        if marker is not None:
            current_locale = marker.group(1)
            continue

        if is_header_line(line) or is_full_label_line(line):
            continue

        result = parse_natural_date(line, current_locale, provider=provider, today=today)
        report.results.append(SampleResult(line_number, current_locale, line, result))

    return report


def format_result(value: datetime) -> str:
    """Render a parsed value as YYYY-MM-DD, adding HH:MM when not midnight.

    Example:
        >>> format_result(datetime(2026, 1, 15, 15, 30))
        '2026-01-15 15:30'
        >>> format_result(datetime(2026, 1, 15))
        '2026-01-15'
    """
    if value.hour or value.minute:
        return value.strftime("%Y-%m-%d %H:%M")
    return value.strftime("%Y-%m-%d")


def format_report(report: SampleReport, *, verbose: bool = False) -> str:
    """Render a report as text.

    Failures are always listed; successes only when verbose.
    """
    lines: list[str] = []
    for item in report.results:
        if item.result is not None:
            if verbose:
                rendered = format_result(item.result)
                lines.append(f"[OK]   [{item.locale_code}] {item.text!r} -> {rendered}")
        else:
            lines.append(f"[FAIL] [{item.locale_code}] {item.text!r} (line {item.line_number})")

    if lines:
        lines.append("")
    lines.append("Natural Date Sample Check")
    lines.append("=" * 50)
    lines.append(f"Total:     {report.total}")
    lines.append(f"Succeeded: {report.succeeded} ({_percent(report.succeeded, report.total)})")
    lines.append(f"Failed:    {report.failed} ({_percent(report.failed, report.total)})")
    return "\n".join(lines)


def _percent(part: int, whole: int) -> str:
    if whole == 0:
        return "0%"
    return f"{round(part / whole * 100)}%"
