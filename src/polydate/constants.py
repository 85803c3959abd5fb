"""Shared constants for polydate.

This module provides centralized configuration constants used across the
keyword-table and parsing packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Calendar arithmetic: Two-digit year pivot, week length, table sizes
- Cache limits: Memory bounds for keyword-table caching
- Input limits: DoS prevention via size constraints
- Locale aliases: HTML lang tags that map onto CLDR locale identifiers

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Calendar arithmetic
    "TWO_DIGIT_YEAR_PIVOT",
    "CURRENT_CENTURY_BASE",
    "PREVIOUS_CENTURY_BASE",
    "DAYS_PER_WEEK",
    "DIGIT_COUNT",
    "MONTH_COUNT",
    "MAX_DAY_OF_MONTH",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Input limits
    "MAX_TEXT_LENGTH",
    # Locale aliases
    "DEFAULT_HTML_LANG_ALIASES",
]

# ============================================================================
# CALENDAR ARITHMETIC
# ============================================================================

# Two-digit years below the pivot belong to the current century (2000+y),
# years at or above it to the previous one (1900+y).
# "26" -> 2026, "49" -> 2049, "50" -> 1950, "99" -> 1999.
TWO_DIGIT_YEAR_PIVOT: int = 50
CURRENT_CENTURY_BASE: int = 2000
PREVIOUS_CENTURY_BASE: int = 1900

DAYS_PER_WEEK: int = 7

# Fixed sizes of keyword-table sequences.
DIGIT_COUNT: int = 10
MONTH_COUNT: int = 12

# Upper bound accepted for a day field before calendar validation.
MAX_DAY_OF_MONTH: int = 31

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached keyword tables built from Babel CLDR data.
# Prevents unbounded memory growth when callers cycle arbitrary locale strings.
# 128 covers every locale a task-list UI realistically renders.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum length of a date string accepted for parsing.
# Displayed dates are short ("2026년 1월 1일 오후 3:30"); anything longer than
# this is not a rendered date and is rejected before any regex work.
MAX_TEXT_LENGTH: int = 1000

# ============================================================================
# LOCALE ALIASES
# ============================================================================

# HTML lang attribute values that have no 1:1 CLDR locale directory.
# Only non-trivial mappings are listed; everything else resolves by exact tag
# or by the two-character fallback.
DEFAULT_HTML_LANG_ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        "zh-CN": "zh-Hans",
        "zh-TW": "zh-Hant",
        "zh-HK": "zh-Hant-HK",
        "zh-SG": "zh-Hans-SG",
        "zh-MO": "zh-Hant-MO",
    }
)
