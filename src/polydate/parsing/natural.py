"""Natural date dispatcher: displayed date text -> naive datetime.

Pipeline, first structural match wins:

    resolve locale table
      -> normalize native digits
      -> special keyword (today / tomorrow / yesterday)   [+ time]
      -> relative offset ("N days ago", "N weeks ago")
      -> absolute date (short, then medium skeleton)      [+ time]
      -> None

No exceptions escape for unparseable text. parse_natural_date_detailed()
returns (result, errors); parse_natural_date() returns the result alone and
logs a warning when there is none.

Python 3.13+.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING

from polydate.constants import MAX_TEXT_LENGTH
from polydate.diagnostics import ErrorTemplate, NaturalDateParseError
from polydate.keywords import default_registry
from polydate.locale_utils import resolve_keyword_table

from .dates import AbsoluteDateMatcher
from .keywords import RelativeOffsetMatcher, SpecialKeywordMatcher
from .numbers import normalize_digits
from .times import apply_time

if TYPE_CHECKING:
    from collections.abc import Sequence

    from polydate.diagnostics import Diagnostic
    from polydate.keywords import KeywordTableProvider

    from .keywords import DateMatcher

__all__ = [
    "DEFAULT_MATCHERS",
    "parse_natural_date",
    "parse_natural_date_detailed",
]

logger = logging.getLogger(__name__)

DEFAULT_MATCHERS: tuple[DateMatcher, ...] = (
    SpecialKeywordMatcher(),
    RelativeOffsetMatcher(),
    AbsoluteDateMatcher(),
)


def parse_natural_date_detailed(
    text: str,
    locale_code: str,
    *,
    provider: KeywordTableProvider | None = None,
    today: date | None = None,
    matchers: Sequence[DateMatcher] | None = None,
) -> tuple[datetime | None, tuple[NaturalDateParseError, ...]]:
    """Parse displayed date text into a naive datetime.

    Never raises for bad input; every failure is reported as an error in
    the returned tuple.

    Args:
        text: Date label as displayed (e.g. "26. 1. 15. 오후 3:30", "Tomorrow")
        locale_code: Language tag of the page (e.g. "ko", "pt-BR")
        provider: Keyword table provider (default: default_registry())
        today: Reference day for keyword and relative matches (default: date.today())
        matchers: Matchers to try in order (default: DEFAULT_MATCHERS)

    Returns:
        Tuple of (result, errors):
        - result: Parsed datetime, or None if parsing failed
        - errors: Tuple of NaturalDateParseError (empty tuple on success)

    Examples:
        >>> result, errors = parse_natural_date_detailed(
        ...     "Jan 15, 2026", "en", provider=registry
        ... )
        >>> result
        datetime.datetime(2026, 1, 15, 0, 0)
        >>> errors
        ()

        >>> result, errors = parse_natural_date_detailed("someday", "en", provider=registry)
        >>> result is None
        True
        >>> errors[0].diagnostic.code.name
        'PARSE_NATURAL_DATE_FAILED'

    Thread Safety:
        Thread-safe. Tables are immutable; the provider guards its own state.
    """
    # Runtime defense for untyped callers
    if not isinstance(locale_code, str):
        return _failure(
            ErrorTemplate.parse_input_invalid(
                locale_code, str(locale_code), "Locale tag must be a string"
            ),
            text if isinstance(text, str) else str(text),
            str(locale_code),
        )

    if not isinstance(text, str):
        return _failure(
            ErrorTemplate.parse_input_invalid(
                text, locale_code, f"Expected string, got {type(text).__name__}"
            ),
            str(text),
            locale_code,
        )

    if len(text) > MAX_TEXT_LENGTH:
        return _failure(
            ErrorTemplate.parse_input_invalid(
                text, locale_code, f"Input exceeds {MAX_TEXT_LENGTH} characters"
            ),
            text,
            locale_code,
        )

    table = resolve_keyword_table(
        locale_code, provider if provider is not None else default_registry()
    )
    if table is None:
        return _failure(ErrorTemplate.parse_locale_unknown(locale_code), text, locale_code)

    normalized = normalize_digits(text, table)
    reference = today if today is not None else date.today()

    for matcher in matchers if matchers is not None else DEFAULT_MATCHERS:
        day = matcher.match(normalized, table, reference)
        if day is None:
            continue

        logger.debug("Matched %r as %s via %s (%s)", text, day, matcher.name, table.locale)
        if matcher.carries_time:
            return apply_time(day, normalized, table), ()
        return datetime(day.year, day.month, day.day), ()

    return _failure(
        ErrorTemplate.parse_natural_date_failed(
            text, locale_code, "no keyword, relative phrase or date format matched"
        ),
        text,
        locale_code,
    )


def parse_natural_date(
    text: str,
    locale_code: str,
    *,
    provider: KeywordTableProvider | None = None,
    today: date | None = None,
    matchers: Sequence[DateMatcher] | None = None,
) -> datetime | None:
    """Parse displayed date text, returning None on failure.

    Same arguments as parse_natural_date_detailed(). Failures are logged at
    WARNING with the locale tag and the original text.

    Example:
        >>> parse_natural_date("Today 3:30 PM", "en", provider=registry,
        ...                    today=date(2026, 1, 15))
        datetime.datetime(2026, 1, 15, 15, 30)
    """
    result, errors = parse_natural_date_detailed(
        text, locale_code, provider=provider, today=today, matchers=matchers
    )
    for error in errors:
        logger.warning(
            "Failed to parse %r (locale: %s): %s",
            error.input_value,
            error.locale_code,
            error.diagnostic.message if error.diagnostic is not None else error,
        )
    return result


def _failure(
    diagnostic: Diagnostic, text: str, locale_code: str
) -> tuple[None, tuple[NaturalDateParseError, ...]]:
    error = NaturalDateParseError(diagnostic, input_value=text, locale_code=locale_code)
    return None, (error,)
