"""Immutable per-locale keyword/format tables.

A LocaleKeywordTable is everything the parser knows about a locale: the
literal words the UI uses for today/tomorrow/yesterday, the unit words of
"N days ago" phrases, AM/PM markers, native digits, CLDR date/time skeletons
and month names.

Tables are produced outside the parser (a CLDR extraction step, JSON files,
or polydate.keywords.cldr) and consumed read-only. Every field except
``locale`` is optional; matchers treat a missing field as "no match".

Mapping Shape:
    from_mapping()/to_mapping() use the camelCase JSON shape emitted by the
    CLDR extraction step:

    {
      "locale": "ko",
      "today": "오늘", "tomorrow": "내일", "yesterday": "어제",
      "day": "일", "week": "주",
      "meridiem": {"am": "오전", "pm": "오후"},
      "usesLatinNumbers": true, "numberingDigits": null,
      "dateFormats": {"short": "yy. M. d.", "medium": "y. M. d."},
      "timeFormats": {"short": "a h:mm"},
      "months": {"wide": ["1월", ...], "abbreviated": ["1월", ...]}
    }

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from polydate.constants import DIGIT_COUNT, MONTH_COUNT
from polydate.diagnostics import ErrorTemplate, KeywordTableError

__all__ = [
    "DateFormats",
    "LocaleKeywordTable",
    "MeridiemMarkers",
    "MonthNames",
    "TimeFormats",
]


@dataclass(frozen=True, slots=True)
class MeridiemMarkers:
    """AM/PM designators as displayed by the locale (e.g. "오전"/"오후")."""

    am: str | None = None
    pm: str | None = None


@dataclass(frozen=True, slots=True)
class DateFormats:
    """CLDR date skeletons tried by the absolute-date matcher, in order."""

    short: str | None = None
    medium: str | None = None

    def in_order(self) -> tuple[str, ...]:
        """Return the present skeletons, short before medium."""
        return tuple(fmt for fmt in (self.short, self.medium) if fmt)


@dataclass(frozen=True, slots=True)
class TimeFormats:
    """CLDR short time skeleton (e.g. "h:mm a", "HH:mm", "H.mm")."""

    short: str | None = None


@dataclass(frozen=True, slots=True)
class MonthNames:
    """Month names as two fixed 12-slot sequences (index 0 = January).

    Individual slots may be None when the source data lacks a name.
    """

    wide: tuple[str | None, ...]
    abbreviated: tuple[str | None, ...] | None = None

    def find(self, name: str) -> int | None:
        """Find the 1-based month number for a displayed name.

        Case-insensitive exact match, wide names first, then abbreviated.

        Args:
            name: Month text as it appears in the date string

        Returns:
            Month number 1-12, or None if no name matches
        """
        wanted = name.lower()
        for names in (self.wide, self.abbreviated or ()):
            for index, candidate in enumerate(names):
                if candidate is not None and candidate.lower() == wanted:
                    return index + 1
        return None


@dataclass(frozen=True, slots=True)
class LocaleKeywordTable:
    """Keyword and format data for one locale.

    Attributes:
        locale: Canonical locale identifier (e.g. "ko", "zh-Hant")
        today: Literal word for the current day, if known
        tomorrow: Literal word for the next day, if known
        yesterday: Literal word for the previous day, if known
        day_unit_word: "day(s)" as used in relative-past phrases ("3 days ago")
        week_unit_word: "week(s)" as used in relative-past phrases
        meridiem: AM/PM markers
        uses_latin_digits: False when the locale renders native digits
        digit_glyphs: The 10 native digit characters (index = value)
        date_formats: Short/medium date skeletons
        time_formats: Short time skeleton
        months: Wide/abbreviated month names
    """

    locale: str
    today: str | None = None
    tomorrow: str | None = None
    yesterday: str | None = None
    day_unit_word: str | None = None
    week_unit_word: str | None = None
    meridiem: MeridiemMarkers = field(default_factory=MeridiemMarkers)
    uses_latin_digits: bool = True
    digit_glyphs: str | None = None
    date_formats: DateFormats | None = None
    time_formats: TimeFormats | None = None
    months: MonthNames | None = None

    def __post_init__(self) -> None:
        """Validate LocaleKeywordTable invariants.

        Raises:
            KeywordTableError: If digit_glyphs is not exactly 10 characters or
                a month sequence is not exactly 12 slots long.
        """
        if self.digit_glyphs is not None and len(self.digit_glyphs) != DIGIT_COUNT:
            raise KeywordTableError(
                ErrorTemplate.keyword_table_invalid(
                    "numberingDigits",
                    f"expected {DIGIT_COUNT} digit characters, got {len(self.digit_glyphs)}",
                    self.locale,
                )
            )
        if self.months is not None:
            for key, names in (("wide", self.months.wide), ("abbreviated", self.months.abbreviated)):
                if names is not None and len(names) != MONTH_COUNT:
                    raise KeywordTableError(
                        ErrorTemplate.keyword_table_invalid(
                            f"months.{key}",
                            f"expected {MONTH_COUNT} month names, got {len(names)}",
                            self.locale,
                        )
                    )

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], *, source: str | None = None
    ) -> LocaleKeywordTable:
        """Build a table from the JSON shape produced by CLDR extraction.

        Missing keys become None. Wrong value types raise.

        Args:
            data: Decoded JSON object
            source: File path or other origin, used in error diagnostics

        Returns:
            Validated LocaleKeywordTable

        Raises:
            KeywordTableError: If the mapping is structurally invalid
        """
        if not isinstance(data, Mapping):
            raise KeywordTableError(
                ErrorTemplate.keyword_table_invalid(
                    "<root>", f"expected an object, got {type(data).__name__}", source
                )
            )

        locale = _require_str(data, "locale", source)
        where = source or locale

        meridiem_data = _optional_section(data, "meridiem", where)
        date_data = _optional_section(data, "dateFormats", where)
        time_data = _optional_section(data, "timeFormats", where)
        months_data = _optional_section(data, "months", where)

        uses_latin = data.get("usesLatinNumbers")
        if uses_latin is None:
            uses_latin = True
        if not isinstance(uses_latin, bool):
            raise KeywordTableError(
                ErrorTemplate.keyword_table_invalid(
                    "usesLatinNumbers", f"expected a boolean, got {type(uses_latin).__name__}", where
                )
            )

        months: MonthNames | None = None
        if months_data is not None:
            wide = _optional_names(months_data, "months.wide", "wide", where)
            if wide is not None:
                months = MonthNames(
                    wide=wide,
                    abbreviated=_optional_names(months_data, "months.abbreviated", "abbreviated", where),
                )

        return cls(
            locale=locale,
            today=_optional_str(data, "today", where),
            tomorrow=_optional_str(data, "tomorrow", where),
            yesterday=_optional_str(data, "yesterday", where),
            day_unit_word=_optional_str(data, "day", where),
            week_unit_word=_optional_str(data, "week", where),
            meridiem=MeridiemMarkers(
                am=_optional_str(meridiem_data, "am", where, prefix="meridiem."),
                pm=_optional_str(meridiem_data, "pm", where, prefix="meridiem."),
            ),
            uses_latin_digits=uses_latin,
            digit_glyphs=_optional_str(data, "numberingDigits", where),
            date_formats=(
                DateFormats(
                    short=_optional_str(date_data, "short", where, prefix="dateFormats."),
                    medium=_optional_str(date_data, "medium", where, prefix="dateFormats."),
                )
                if date_data is not None
                else None
            ),
            time_formats=(
                TimeFormats(short=_optional_str(time_data, "short", where, prefix="timeFormats."))
                if time_data is not None
                else None
            ),
            months=months,
        )

    def to_mapping(self) -> dict[str, Any]:
        """Serialize to the JSON shape accepted by from_mapping()."""
        return {
            "locale": self.locale,
            "today": self.today,
            "tomorrow": self.tomorrow,
            "yesterday": self.yesterday,
            "day": self.day_unit_word,
            "week": self.week_unit_word,
            "meridiem": {"am": self.meridiem.am, "pm": self.meridiem.pm},
            "usesLatinNumbers": self.uses_latin_digits,
            "numberingDigits": self.digit_glyphs,
            "dateFormats": (
                {"short": self.date_formats.short, "medium": self.date_formats.medium}
                if self.date_formats is not None
                else None
            ),
            "timeFormats": (
                {"short": self.time_formats.short} if self.time_formats is not None else None
            ),
            "months": (
                {
                    "wide": list(self.months.wide),
                    "abbreviated": (
                        list(self.months.abbreviated) if self.months.abbreviated is not None else None
                    ),
                }
                if self.months is not None
                else None
            ),
        }


# ==============================================================================
# MAPPING FIELD READERS
# ==============================================================================

def _require_str(data: Mapping[str, Any], key: str, source: str | None) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise KeywordTableError(
            ErrorTemplate.keyword_table_invalid(key, "expected a non-empty string", source)
        )
    return value


def _optional_str(
    data: Mapping[str, Any] | None,
    key: str,
    source: str | None,
    *,
    prefix: str = "",
) -> str | None:
    """Read an optional string field; empty strings count as absent."""
    if data is None:
        return None
    value = data.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise KeywordTableError(
            ErrorTemplate.keyword_table_invalid(
                prefix + key, f"expected a string, got {type(value).__name__}", source
            )
        )
    return value


def _optional_section(
    data: Mapping[str, Any], key: str, source: str | None
) -> Mapping[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise KeywordTableError(
            ErrorTemplate.keyword_table_invalid(
                key, f"expected an object, got {type(value).__name__}", source
            )
        )
    return value


def _optional_names(
    data: Mapping[str, Any], label: str, key: str, source: str | None
) -> tuple[str | None, ...] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list | tuple):
        raise KeywordTableError(
            ErrorTemplate.keyword_table_invalid(
                label, f"expected a list, got {type(value).__name__}", source
            )
        )
    if len(value) != MONTH_COUNT:
        raise KeywordTableError(
            ErrorTemplate.keyword_table_invalid(
                label, f"expected {MONTH_COUNT} month names, got {len(value)}", source
            )
        )
    names: list[str | None] = []
    for item in value:
        if item is not None and not isinstance(item, str):
            raise KeywordTableError(
                ErrorTemplate.keyword_table_invalid(
                    label, f"expected strings or null, got {type(item).__name__}", source
                )
            )
        names.append(item or None)
    return tuple(names)
