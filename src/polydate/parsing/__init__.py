"""Natural date parsing: displayed date labels back to Python datetimes.

- Functions NEVER raise for unparseable text - errors are returned in tuple
- parse_natural_date() is the convenience form that returns the result alone

Every stage reads a LocaleKeywordTable and nothing else: there is no clock
or locale lookup hidden inside the matchers.

Public API:
    Parsing Functions:
        parse_natural_date - Returns datetime | None, logs failures
        parse_natural_date_detailed - Returns tuple[datetime | None, tuple[NaturalDateParseError, ...]]

    Stages:
        normalize_digits - Native digit glyphs -> ASCII
        SpecialKeywordMatcher - today / tomorrow / yesterday
        RelativeOffsetMatcher - "N days ago" / "N weeks ago"
        AbsoluteDateMatcher, parse_absolute_date - CLDR date skeletons
        extract_time, apply_time - Clock time with AM/PM resolution
        analyze_pattern, split_by_separators - Skeleton analysis and segmentation

Python 3.13+.
"""

from .dates import AbsoluteDateMatcher, expand_two_digit_year, parse_absolute_date
from .keywords import DateMatcher, RelativeOffsetMatcher, SpecialKeywordMatcher
from .natural import DEFAULT_MATCHERS, parse_natural_date, parse_natural_date_detailed
from .numbers import normalize_digits
from .patterns import DatePattern, analyze_pattern, split_by_separators
from .times import Meridiem, apply_time, detect_meridiem, extract_time

__all__ = [
    # Dispatcher
    "DEFAULT_MATCHERS",
    "parse_natural_date",
    "parse_natural_date_detailed",
    # Matchers
    "AbsoluteDateMatcher",
    "DateMatcher",
    "RelativeOffsetMatcher",
    "SpecialKeywordMatcher",
    # Stages
    "DatePattern",
    "Meridiem",
    "analyze_pattern",
    "apply_time",
    "detect_meridiem",
    "expand_two_digit_year",
    "extract_time",
    "normalize_digits",
    "parse_absolute_date",
    "split_by_separators",
]
