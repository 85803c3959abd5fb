"""Per-locale keyword/format tables and their providers.

Public API:
    LocaleKeywordTable - Immutable keyword/format data for one locale
    MeridiemMarkers, DateFormats, TimeFormats, MonthNames - Table sections
    KeywordTableProvider - Exact-lookup provider protocol
    ChainedKeywordTableProvider - First-hit lookup across several providers
    KeywordTableRegistry - Thread-safe in-memory provider with aliases
    default_registry - Process-wide registry used by the parser by default

Babel-backed table building lives in polydate.keywords.cldr and is imported
explicitly, so that loading JSON tables never pays for Babel's CLDR import.

Python 3.13+.
"""

from .registry import (
    ChainedKeywordTableProvider,
    KeywordTableProvider,
    KeywordTableRegistry,
    default_registry,
)
from .table import DateFormats, LocaleKeywordTable, MeridiemMarkers, MonthNames, TimeFormats

__all__ = [
    "ChainedKeywordTableProvider",
    "DateFormats",
    "KeywordTableProvider",
    "KeywordTableRegistry",
    "LocaleKeywordTable",
    "MeridiemMarkers",
    "MonthNames",
    "TimeFormats",
    "default_registry",
]
