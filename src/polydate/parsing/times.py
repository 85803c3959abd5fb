"""Clock-time extraction and AM/PM resolution.

Reads the first "H:MM"-style time in the text, using the locale's short
time skeleton only to pick the separator and the clock convention:

- Separator: "." when the skeleton contains a dot ("H.mm"), ":" otherwise
- 12-hour clock: the skeleton has an unquoted h or K field ("h:mm a")

On a 12-hour clock the meridiem marker decides the hour: PM adds 12
(except 12 PM), AM maps 12 to 0. When neither marker appears the hour is
left as written, which means "3:30" on a 12-hour locale reads as 03:30.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from enum import StrEnum
from functools import lru_cache
from typing import TYPE_CHECKING, TypeAlias

from polydate.constants import MAX_LOCALE_CACHE_SIZE

from .patterns import tokenize_pattern

if TYPE_CHECKING:
    from polydate.keywords import LocaleKeywordTable

__all__ = [
    "ClockTime",
    "Meridiem",
    "apply_time",
    "detect_meridiem",
    "extract_time",
    "uses_twelve_hour_clock",
]

_HOURS_PER_HALF_DAY = 12
_MAX_HOUR = 23
_MAX_MINUTE = 59

_COLON_TIME = re.compile(r"([0-9]{1,2}):([0-9]{2})")
_DOT_TIME = re.compile(r"([0-9]{1,2})\.([0-9]{2})")

# CLDR hour fields on a 12-hour clock: h (1-12) and K (0-11).
_TWELVE_HOUR_FIELDS = frozenset("hK")

ClockTime: TypeAlias = tuple[int, int]
"""(hour, minute) on a 24-hour clock."""


class Meridiem(StrEnum):
    """Half of the day named by a meridiem marker."""

    AM = "am"
    PM = "pm"


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def uses_twelve_hour_clock(time_pattern: str) -> bool:
    """Check whether a CLDR time skeleton uses a 12-hour clock.

    Quoted literals are ignored, so "HH 'h' mm" is a 24-hour skeleton.

    Examples:
        >>> uses_twelve_hour_clock("h:mm a")
        True
        >>> uses_twelve_hour_clock("HH 'h' mm")
        False
    """
    return any(
        not token.literal and token.text[0] in _TWELVE_HOUR_FIELDS
        for token in tokenize_pattern(time_pattern)
    )


def detect_meridiem(text: str, table: LocaleKeywordTable) -> Meridiem | None:
    """Find which meridiem marker the text contains.

    Case-insensitive. PM is checked before AM. Both markers must be known
    for either to be reported, since a lone marker cannot tell an absent
    marker from the other half of the day.

    Args:
        text: Date text
        table: Keyword table with meridiem markers

    Returns:
        Meridiem.PM, Meridiem.AM, or None when undecidable
    """
    am = table.meridiem.am
    pm = table.meridiem.pm
    if not am or not pm:
        return None

    lowered = text.lower()
    if pm.lower() in lowered:
        return Meridiem.PM
    if am.lower() in lowered:
        return Meridiem.AM
    return None


def extract_time(text: str, table: LocaleKeywordTable) -> ClockTime | None:
    """Extract a 24-hour (hour, minute) pair from the text.

    Args:
        text: Date text with digits already normalized
        table: Keyword table with the locale's short time skeleton

    Returns:
        (hour, minute), or None if the table has no time skeleton, the text
        has no time, or the minutes are out of range

    Example:
        >>> en = LocaleKeywordTable(
        ...     locale="en",
        ...     meridiem=MeridiemMarkers(am="AM", pm="PM"),
        ...     time_formats=TimeFormats(short="h:mm a"),
        ... )
        >>> extract_time("Jan 15, 3:30 PM", en)
        (15, 30)
    """
    if table.time_formats is None or not table.time_formats.short:
        return None

    pattern = table.time_formats.short
    regex = _DOT_TIME if "." in pattern else _COLON_TIME
    found = regex.search(text)
    if found is None:
        return None

    hour = int(found.group(1))
    minute = int(found.group(2))
    if minute > _MAX_MINUTE:
        return None

    if uses_twelve_hour_clock(pattern):
        match detect_meridiem(text, table):
            case Meridiem.PM:
                if hour != _HOURS_PER_HALF_DAY:
                    hour += _HOURS_PER_HALF_DAY
            case Meridiem.AM:
                if hour == _HOURS_PER_HALF_DAY:
                    hour = 0
            case None:
                pass

    return hour, minute


def apply_time(day: date, text: str, table: LocaleKeywordTable) -> datetime:
    """Combine a matched day with the time found in the text.

    The result is midnight of ``day`` when no usable time is present,
    including hours that remain above 23 after meridiem resolution.

    Args:
        day: Calendar day produced by a matcher
        text: Date text with digits already normalized
        table: Keyword table of the text's locale

    Returns:
        Naive datetime with seconds and microseconds zeroed
    """
    midnight = datetime(day.year, day.month, day.day)
    clock = extract_time(text, table)
    if clock is None:
        return midnight

    hour, minute = clock
    if hour > _MAX_HOUR:
        return midnight
    return midnight.replace(hour=hour, minute=minute)
