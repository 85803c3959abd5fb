"""Tests for parsing/dates.py: absolute dates from CLDR skeletons.

Python 3.13+.
"""

from datetime import date

import pytest

from polydate.keywords import DateFormats, LocaleKeywordTable
from polydate.parsing import AbsoluteDateMatcher, expand_two_digit_year, parse_absolute_date
from polydate.parsing.dates import parse_with_pattern


class TestExpandTwoDigitYear:
    """Test expand_two_digit_year."""

    @pytest.mark.parametrize(
        ("year", "expected"),
        [(0, 2000), (26, 2026), (49, 2049), (50, 1950), (99, 1999), (100, 100), (2026, 2026)],
    )
    def test_pivot(self, year: int, expected: int) -> None:
        """Years below 50 are 20xx, 50-99 are 19xx, three digits and up unchanged."""
        assert expand_two_digit_year(year) == expected


class TestParseWithPattern:
    """Test parse_with_pattern on single skeletons."""

    def test_korean_short(self) -> None:
        """'26. 1. 15.' with 'yy. M. d.'."""
        assert parse_with_pattern("26. 1. 15.", "yy. M. d.") == date(2026, 1, 15)

    def test_us_short(self) -> None:
        """'1/15/26' with 'M/d/yy'."""
        assert parse_with_pattern("1/15/26", "M/d/yy") == date(2026, 1, 15)

    def test_previous_century(self) -> None:
        """'1/15/99' is 1999."""
        assert parse_with_pattern("1/15/99", "M/d/yy") == date(1999, 1, 15)

    def test_trailing_text_ignored(self) -> None:
        """Integers are the leading digits of a segment."""
        assert parse_with_pattern("2026년 1월 15일", "y년 M월 d일") == date(2026, 1, 15)
        assert parse_with_pattern("1/15/26, 3:30 PM", "M/d/yy") == date(2026, 1, 15)

    def test_month_name(self, pt_table: LocaleKeywordTable) -> None:
        """Abbreviated month name with quoted literals."""
        result = parse_with_pattern("15 de jan. de 2026", "d 'de' MMM 'de' y", pt_table.months)
        assert result == date(2026, 1, 15)

    def test_month_name_case_insensitive(self, en_table: LocaleKeywordTable) -> None:
        """Month names match regardless of case."""
        assert parse_with_pattern("JANUARY 15, 2026", "MMM d, y", en_table.months) == date(
            2026, 1, 15
        )

    def test_month_name_without_months_fails(self) -> None:
        """MMM skeletons need month names."""
        assert parse_with_pattern("Jan 15, 2026", "MMM d, y") is None

    def test_unknown_month_name_fails(self, en_table: LocaleKeywordTable) -> None:
        """A word that is not a month name fails the skeleton."""
        assert parse_with_pattern("Foo 15, 2026", "MMM d, y", en_table.months) is None

    def test_missing_year_fails(self) -> None:
        """A skeleton without a year never produces a date."""
        assert parse_with_pattern("1월 15일", "M월 d일") is None

    def test_too_few_segments(self) -> None:
        """Fewer segments than fields fails."""
        assert parse_with_pattern("1/15", "M/d/yy") is None

    @pytest.mark.parametrize("text", ["13/1/26", "0/1/26", "1/32/26", "1/0/26", "x/1/26"])
    def test_out_of_range_fields(self, text: str) -> None:
        """Months outside 1-12, days outside 1-31 and non-numbers fail."""
        assert parse_with_pattern(text, "M/d/yy") is None

    def test_february_30_fails(self) -> None:
        """Calendar-invalid dates fail rather than rolling over."""
        assert parse_with_pattern("2/30/26", "M/d/yy") is None

    def test_leap_day(self) -> None:
        """February 29 exists only in leap years."""
        assert parse_with_pattern("2/29/24", "M/d/yy") == date(2024, 2, 29)
        assert parse_with_pattern("2/29/25", "M/d/yy") is None

    def test_year_out_of_range_fails(self) -> None:
        """Years outside date's range fail instead of raising."""
        assert parse_with_pattern("1/15/99999", "M/d/y") is None
        assert parse_with_pattern("1/15/" + "9" * 30, "M/d/y") is None

    def test_pattern_without_fields(self) -> None:
        """A time skeleton is not a date skeleton."""
        assert parse_with_pattern("15:30", "HH:mm") is None


class TestParseAbsoluteDate:
    """Test parse_absolute_date with whole tables."""

    def test_short_format(self, en_table: LocaleKeywordTable) -> None:
        """The short skeleton is tried first."""
        assert parse_absolute_date("1/15/26", en_table) == date(2026, 1, 15)

    def test_falls_back_to_medium(self, en_table: LocaleKeywordTable) -> None:
        """The medium skeleton is tried when short fails."""
        assert parse_absolute_date("January 15, 2026", en_table) == date(2026, 1, 15)
        assert parse_absolute_date("Jan 15, 2026", en_table) == date(2026, 1, 15)

    def test_rejected_short_falls_through(self) -> None:
        """A short skeleton that rejects the fields lets medium try."""
        table = LocaleKeywordTable(
            locale="xx", date_formats=DateFormats(short="M/d/yy", medium="d/M/yy")
        )
        assert parse_absolute_date("30/1/26", table) == date(2026, 1, 30)

    def test_korean(self, ko_table: LocaleKeywordTable) -> None:
        """Two- and four-digit Korean years."""
        assert parse_absolute_date("26. 1. 15.", ko_table) == date(2026, 1, 15)
        assert parse_absolute_date("2026. 1. 15.", ko_table) == date(2026, 1, 15)

    def test_no_date_formats(self) -> None:
        """A table without skeletons never matches."""
        assert parse_absolute_date("1/15/26", LocaleKeywordTable(locale="xx")) is None

    def test_feb_30_fails_everywhere(self, en_table: LocaleKeywordTable) -> None:
        """February 30 fails every skeleton."""
        assert parse_absolute_date("2/30/26", en_table) is None

    def test_matcher_adapter(self, en_table: LocaleKeywordTable) -> None:
        """AbsoluteDateMatcher ignores the reference day."""
        matcher = AbsoluteDateMatcher()
        assert matcher.match("1/15/26", en_table, date(1990, 1, 1)) == date(2026, 1, 15)
        assert matcher.carries_time is True
