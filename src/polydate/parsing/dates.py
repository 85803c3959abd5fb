"""Absolute date matching against a locale's CLDR date skeletons.

Tries the table's short skeleton, then its medium skeleton. For each one:

1. analyze_pattern() yields field tokens and separators
2. split_by_separators() cuts the text into segments
3. each field token consumes one segment:
   - y+   : integer year (no range check yet)
   - M/MM : integer month 1-12
   - MMM+ : month name, case-insensitive, wide names then abbreviated
   - d+   : integer day 1-31
4. two-digit years are expanded around a fixed pivot (< 50 -> 20xx)
5. the date is constructed; impossible dates (February 30) fail the skeleton

Year, month and day are all mandatory: a skeleton without a year never
produces a date, rather than borrowing the current year.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from datetime import date
from typing import TYPE_CHECKING

from polydate.constants import (
    CURRENT_CENTURY_BASE,
    MAX_DAY_OF_MONTH,
    MONTH_COUNT,
    PREVIOUS_CENTURY_BASE,
    TWO_DIGIT_YEAR_PIVOT,
)

from .patterns import analyze_pattern, split_by_separators

if TYPE_CHECKING:
    from polydate.keywords import LocaleKeywordTable, MonthNames

__all__ = [
    "AbsoluteDateMatcher",
    "expand_two_digit_year",
    "parse_absolute_date",
    "parse_with_pattern",
]

_LEADING_NUMBER = re.compile(r"[0-9]+")

# Month tokens at least this long (MMM, MMMM) are spelled-out names.
_MONTH_NAME_TOKEN_LENGTH = 3


def expand_two_digit_year(year: int) -> int:
    """Map a two-digit year onto a full year.

    Examples:
        >>> expand_two_digit_year(26)
        2026
        >>> expand_two_digit_year(99)
        1999
        >>> expand_two_digit_year(2026)
        2026
    """
    if year >= 100:
        return year
    if year < TWO_DIGIT_YEAR_PIVOT:
        return CURRENT_CENTURY_BASE + year
    return PREVIOUS_CENTURY_BASE + year


def parse_absolute_date(text: str, table: LocaleKeywordTable) -> date | None:
    """Parse an absolute date using the table's short, then medium skeleton.

    Args:
        text: Date text with digits already normalized
        table: Keyword table of the text's locale

    Returns:
        The first date fully resolved by a skeleton, or None
    """
    if table.date_formats is None:
        return None

    for pattern in table.date_formats.in_order():
        parsed = parse_with_pattern(text, pattern, table.months)
        if parsed is not None:
            return parsed
    return None


def parse_with_pattern(text: str, pattern: str, months: MonthNames | None = None) -> date | None:
    """Parse text against a single CLDR date skeleton.

    Example:
        >>> parse_with_pattern("26. 1. 15.", "yy. M. d.")
        datetime.date(2026, 1, 15)
        >>> parse_with_pattern("2/30/26", "M/d/yy") is None
        True

    Args:
        text: Date text with digits already normalized
        pattern: CLDR date skeleton (e.g. "M/d/yy")
        months: Month names, needed only for MMM/MMMM skeletons

    Returns:
        The parsed date, or None if any field is missing or invalid
    """
    analysis = analyze_pattern(pattern)
    if not analysis.fields:
        return None

    segments = split_by_separators(text, analysis.separators)
    if len(segments) < len(analysis.fields):
        return None

    year: int | None = None
    month: int | None = None
    day: int | None = None

    for token, segment in zip(analysis.fields, segments, strict=False):
        match token[0]:
            case "y":
                year = _leading_int(segment)
            case "M":
                month = _month_value(token, segment, months)
            case "d":
                value = _leading_int(segment)
                day = value if value is not None and 1 <= value <= MAX_DAY_OF_MONTH else None

    if year is None or month is None or day is None:
        return None

    try:
        return date(expand_two_digit_year(year), month, day)
    except (ValueError, OverflowError):
        # Day beyond the month's length, or year outside date's range
        return None


class AbsoluteDateMatcher:
    """DateMatcher adapter around parse_absolute_date()."""

    name = "absolute"
    carries_time = True

    def match(self, text: str, table: LocaleKeywordTable, today: date) -> date | None:  # noqa: ARG002
        return parse_absolute_date(text, table)


def _leading_int(segment: str) -> int | None:
    found = _LEADING_NUMBER.match(segment)
    return int(found.group()) if found else None


def _month_value(token: str, segment: str, months: MonthNames | None) -> int | None:
    if len(token) >= _MONTH_NAME_TOKEN_LENGTH:
        return months.find(segment) if months is not None else None
    value = _leading_int(segment)
    if value is not None and 1 <= value <= MONTH_COUNT:
        return value
    return None
