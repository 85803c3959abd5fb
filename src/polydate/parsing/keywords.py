"""Keyword matchers: today/tomorrow/yesterday and "N days/weeks ago".

Both matchers use plain substring search, exactly as the host UI renders
these phrases. They sit behind the DateMatcher protocol so that a stricter,
tokenizing matcher can replace them without touching the dispatcher.

A matcher returns a date (midnight is implied) or None for no-match; it
never raises for text it does not understand and never inspects the clock
itself: the reference day is passed in.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import TYPE_CHECKING, Protocol

from polydate.constants import DAYS_PER_WEEK

if TYPE_CHECKING:
    from polydate.keywords import LocaleKeywordTable

__all__ = [
    "DateMatcher",
    "RelativeOffsetMatcher",
    "SpecialKeywordMatcher",
]

_FIRST_NUMBER = re.compile(r"[0-9]+")


class DateMatcher(Protocol):
    """Protocol for one dispatch strategy of the natural date parser.

    Attributes:
        name: Short identifier used in debug logging
        carries_time: Whether an embedded clock time may be applied to a match
    """

    name: str
    carries_time: bool

    def match(self, text: str, table: LocaleKeywordTable, today: date) -> date | None:
        """Return the matched calendar day, or None when the text does not apply."""
        ...  # pylint: disable=unnecessary-ellipsis


class SpecialKeywordMatcher:
    """Matches the locale's words for today, tomorrow and yesterday.

    Checked in that order; first keyword contained in the text wins.
    Matching is case-sensitive, as supplied by the table.
    """

    name = "special"
    carries_time = True

    def match(self, text: str, table: LocaleKeywordTable, today: date) -> date | None:
        try:
            if table.today and table.today in text:
                return today
            if table.tomorrow and table.tomorrow in text:
                return today + timedelta(days=1)
            if table.yesterday and table.yesterday in text:
                return today - timedelta(days=1)
        except OverflowError:
            # Neighbour of date.min or date.max
            return None
        return None


class RelativeOffsetMatcher:
    """Matches past relative phrases: "3 days ago", "2 weeks ago".

    The first ASCII digit run is the count. The host UI only renders past
    offsets and never attaches a time to them, so neither does this matcher.
    """

    name = "relative"
    carries_time = False

    def match(self, text: str, table: LocaleKeywordTable, today: date) -> date | None:
        found = _FIRST_NUMBER.search(text)
        if found is None:
            return None
        count = int(found.group())

        try:
            if table.day_unit_word and table.day_unit_word in text:
                return today - timedelta(days=count)
            if table.week_unit_word and table.week_unit_word in text:
                return today - timedelta(days=count * DAYS_PER_WEEK)
        except OverflowError:
            # Count reaches past date.min
            return None
        return None
