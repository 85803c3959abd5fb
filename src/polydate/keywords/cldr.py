"""Build keyword tables from Babel's bundled CLDR data.

Lets the parser run without a separate CLDR extraction step: date and time
skeletons, month names, AM/PM markers and the default numbering system come
straight from Babel. Relative unit words ("day", "일", "jour") are recovered
from Babel's relative-time phrases by taking the longest substring shared
by the past and future phrase ("1 day ago" / "in 1 day" -> "day").

Babel does not expose the CLDR words for today/tomorrow/yesterday, so those
are supplied by the caller through ``relative_days`` (typically scraped from
the host page, or kept in a small JSON overlay).

Thread-safe. Built tables are cached per locale in a bounded LRU cache.

Python 3.13+.
"""

from __future__ import annotations

import re
import unicodedata
from datetime import timedelta
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from babel import Locale, UnknownLocaleError
from babel.dates import format_timedelta

from polydate.constants import (
    DEFAULT_HTML_LANG_ALIASES,
    DIGIT_COUNT,
    MAX_LOCALE_CACHE_SIZE,
    MONTH_COUNT,
)
from polydate.locale_utils import normalize_locale, to_babel_identifier

from .table import DateFormats, LocaleKeywordTable, MeridiemMarkers, MonthNames, TimeFormats

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .registry import KeywordTableRegistry

__all__ = [
    "BabelKeywordTableProvider",
    "build_keyword_table",
    "clear_keyword_table_cache",
    "extract_unit_word",
]

# Code point of digit zero for CLDR numbering systems whose ten digits are
# one contiguous Unicode run.
_NUMBERING_SYSTEM_ZEROS: dict[str, int] = {
    "adlm": 0x1E950,
    "arab": 0x0660,
    "arabext": 0x06F0,
    "beng": 0x09E6,
    "cakm": 0x11136,
    "deva": 0x0966,
    "fullwide": 0xFF10,
    "gujr": 0x0AE6,
    "guru": 0x0A66,
    "hmnp": 0x1E140,
    "java": 0xA9D0,
    "khmr": 0x17E0,
    "knda": 0x0CE6,
    "laoo": 0x0ED0,
    "limb": 0x1946,
    "mlym": 0x0D66,
    "mtei": 0xABF0,
    "mymr": 0x1040,
    "nkoo": 0x07C0,
    "olck": 0x1C50,
    "orya": 0x0B66,
    "rohg": 0x10D30,
    "sund": 0x1BB0,
    "tamldec": 0x0BE6,
    "telu": 0x0C66,
    "thai": 0x0E50,
    "tibt": 0x0F20,
}
_DIGIT_RUN = re.compile(r"\d+")
_WHITESPACE_RUN = re.compile(r"\s+")

# Unit words longer than this are phrase fragments, not a unit.
_MAX_UNIT_WORD_LENGTH = 20

# Day-period widths, in lookup order
_PERIOD_WIDTHS = ("wide", "abbreviated", "narrow")


def build_keyword_table(
    locale_code: str,
    *,
    relative_days: Mapping[str, str] | None = None,
) -> LocaleKeywordTable:
    """Derive a LocaleKeywordTable for a locale from Babel CLDR data.

    Args:
        locale_code: BCP-47 or POSIX locale tag (e.g. "ko", "pt-BR", "zh_Hant")
        relative_days: Optional words for "today", "tomorrow", "yesterday"

    Returns:
        Table whose ``locale`` is the BCP-47 form of Babel's identifier

    Raises:
        babel.core.UnknownLocaleError: If Babel has no data for the locale
        ValueError: If the locale tag is malformed

    Example:
        >>> table = build_keyword_table("en", relative_days={"today": "Today"})
        >>> table.date_formats.short
        'M/d/yy'
        >>> table.meridiem.pm
        'PM'
    """
    locale = Locale.parse(to_babel_identifier(locale_code))
    days = relative_days or {}
    digits = _native_digits(locale)

    return LocaleKeywordTable(
        locale=normalize_locale(str(locale)),
        today=days.get("today") or None,
        tomorrow=days.get("tomorrow") or None,
        yesterday=days.get("yesterday") or None,
        day_unit_word=_unit_word(locale, timedelta(days=1)),
        week_unit_word=_unit_word(locale, timedelta(weeks=1)),
        meridiem=_meridiem(locale),
        uses_latin_digits=digits is None,
        digit_glyphs=digits,
        date_formats=DateFormats(
            short=_pattern(locale.date_formats, "short"),
            medium=_pattern(locale.date_formats, "medium"),
        ),
        time_formats=TimeFormats(short=_pattern(locale.time_formats, "short")),
        months=_months(locale),
    )


class BabelKeywordTableProvider:
    """KeywordTableProvider that builds tables from Babel on demand.

    Unknown or malformed tags yield None, so the parser fails closed exactly
    as it would for a tag missing from a registry.

    Example:
        >>> provider = BabelKeywordTableProvider()
        >>> provider.get("ko").date_formats.short
        'yy. M. d.'
        >>> provider.get("xx-YY") is None
        True
    """

    __slots__ = ("_relative_days",)

    def __init__(self, relative_days: Mapping[str, Mapping[str, str]] | None = None) -> None:
        """Create a provider.

        Args:
            relative_days: Per-locale today/tomorrow/yesterday words, keyed by
                the same tag callers will pass to get()
        """
        self._relative_days = dict(relative_days or {})

    def get(self, locale_code: str) -> LocaleKeywordTable | None:
        """Return the Babel-derived table for exactly this tag, or None."""
        words = self._relative_days.get(locale_code)
        key = tuple(sorted(words.items())) if words else ()
        return _cached_table(locale_code, key)

    def populate(
        self,
        registry: KeywordTableRegistry,
        locale_codes: Iterable[str],
        *,
        aliases: Mapping[str, str] = DEFAULT_HTML_LANG_ALIASES,
    ) -> int:
        """Build tables for the given tags and register them.

        Tables are registered under the requested tag as well as Babel's
        canonical tag; alias tags are then pointed at registered targets.

        Args:
            registry: Registry to fill
            locale_codes: Tags to build
            aliases: Alias tag -> target tag mapping applied afterward

        Returns:
            Number of tables registered (unknown tags are skipped)
        """
        count = 0
        for code in locale_codes:
            table = self.get(code)
            if table is None:
                continue
            extra = [code] if code != table.locale else []
            registry.register(table, extra)
            count += 1
        registry.register_aliases(aliases)
        return count


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _cached_table(
    locale_code: str, relative_days: tuple[tuple[str, str], ...]
) -> LocaleKeywordTable | None:
    try:
        return build_keyword_table(locale_code, relative_days=dict(relative_days))
    except (UnknownLocaleError, ValueError, TypeError):
        return None


def clear_keyword_table_cache() -> None:
    """Clear Babel-derived keyword tables cached by BabelKeywordTableProvider."""
    _cached_table.cache_clear()


def extract_unit_word(past_phrase: str, future_phrase: str) -> str | None:
    """Recover a unit word from a past/future relative-time phrase pair.

    Finds the longest common substring of the two phrases (ignoring digits),
    then strips digits and whitespace from it.

    Examples:
        >>> extract_unit_word("1 day ago", "in 1 day")
        'day'
        >>> extract_unit_word("1일 전", "1일 후")
        '일'
        >>> extract_unit_word("", "in 1 day") is None
        True

    Args:
        past_phrase: Phrase for a past offset ("1 day ago")
        future_phrase: Phrase for a future offset ("in 1 day")

    Returns:
        Unit word, or None if nothing plausible is shared
    """
    past = _DIGIT_RUN.sub("", past_phrase).strip()
    future = _DIGIT_RUN.sub("", future_phrase).strip()

    longest = ""
    for start in range(len(past)):
        for end in range(start + len(longest) + 1, len(past) + 1):
            candidate = past[start:end]
            if candidate not in future:
                break
            if not candidate.isspace():
                longest = candidate

    cleaned = _WHITESPACE_RUN.sub("", longest)
    if 0 < len(cleaned) <= _MAX_UNIT_WORD_LENGTH:
        return cleaned
    return None


# ==============================================================================
# BABEL FIELD READERS
# ==============================================================================


def _pattern(formats: Mapping[str, object], style: str) -> str | None:
    try:
        return str(formats[style].pattern)  # type: ignore[attr-defined]
    except (AttributeError, KeyError):
        return None


def _months(locale: Locale) -> MonthNames | None:
    try:
        month_context = locale.months["format"]
    except KeyError:
        return None
    wide = month_context.get("wide")
    if not wide:
        return None
    abbreviated = month_context.get("abbreviated")
    numbers = range(1, MONTH_COUNT + 1)
    return MonthNames(
        wide=tuple(wide.get(i) for i in numbers),
        abbreviated=tuple(abbreviated.get(i) for i in numbers) if abbreviated else None,
    )


def _meridiem(locale: Locale) -> MeridiemMarkers:
    return MeridiemMarkers(am=_period(locale, "am"), pm=_period(locale, "pm"))


def _period(locale: Locale, key: str) -> str | None:
    """Resolve one day period, widest width first.

    CLDR aliases whole widths to one another, so a locale may carry "am"
    only under "abbreviated" even when "wide" exists.
    """
    try:
        formats: Mapping[str, Any] = locale.day_periods["format"]
    except KeyError:
        formats = {}
    for width in _PERIOD_WIDTHS:
        try:
            value = formats[width][key]
        except KeyError:
            continue
        if value:
            return str(value)
    try:
        value = locale.periods[key]
    except KeyError:
        return None
    return str(value) or None


def _native_digits(locale: Locale) -> str | None:
    """Return the locale's 10 default-numbering-system digits, or None for latn."""
    zero = _NUMBERING_SYSTEM_ZEROS.get(locale.default_numbering_system)
    if zero is None:
        return None
    glyphs = "".join(chr(zero + value) for value in range(DIGIT_COUNT))
    if any(unicodedata.digit(glyph, -1) != value for value, glyph in enumerate(glyphs)):
        return None
    return glyphs


def _unit_word(locale: Locale, delta: timedelta) -> str | None:
    past = format_timedelta(-delta, add_direction=True, locale=locale)
    future = format_timedelta(delta, add_direction=True, locale=locale)
    return extract_unit_word(past, future)
