"""CLDR skeleton analysis and positional text segmentation.

A date skeleton such as ``"yy. M. d."`` or ``"d 'de' MMM 'de' y"`` is split
into its field tokens (runs of ``y``, ``M``, ``d``) and the literal text
around them. The literals then act as separators for cutting the displayed
date string into one segment per field.

CLDR quote escaping (tokenizer):
    - Single quotes delimit literal text: 'de' -> "de"
    - Two consecutive single quotes '' produce a literal single quote
    - '' inside quoted text also produces a literal single quote
    - Pattern letters other than y/M/d are kept as literal text

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from polydate.constants import MAX_LOCALE_CACHE_SIZE

__all__ = [
    "DatePattern",
    "PatternToken",
    "analyze_pattern",
    "split_by_separators",
    "tokenize_pattern",
]

# Letters that denote date fields; runs of anything else are literal text.
_DATE_FIELD_LETTERS = frozenset("yMd")

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class PatternToken:
    """One token of a CLDR pattern.

    Attributes:
        text: Letter run ("yy", "MMM", "h") or literal text (". ", "de")
        literal: True for literal text, including quoted pattern letters
    """

    text: str
    literal: bool


@dataclass(frozen=True, slots=True)
class DatePattern:
    """Ordered date fields and the literal separators around them.

    Example:
        >>> analyze_pattern("yy. M. d.")
        DatePattern(fields=('yy', 'M', 'd'), separators=('. ', '. ', '.'))
    """

    fields: tuple[str, ...]
    separators: tuple[str, ...]


def tokenize_pattern(pattern: str) -> list[PatternToken]:
    """Tokenize a CLDR pattern into letter runs and literal text.

    This correctly handles patterns like "d.MM.yyyy" where "d" is adjacent
    to punctuation without word boundaries.

    Examples:
        "h 'o''clock' a" -> [h, " ", "o'clock" (literal), " ", a]
        "d.MM.yyyy" -> [d, ".", MM, ".", yyyy]

    Args:
        pattern: CLDR date or time pattern

    Returns:
        Tokens in pattern order
    """
    tokens: list[PatternToken] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == "'":
            # '' outside quoted section -> literal single quote
            if i + 1 < n and pattern[i + 1] == "'":
                tokens.append(PatternToken("'", literal=True))
                i += 2
                continue

            i += 1  # Skip opening quote
            literal_chars: list[str] = []

            while i < n:
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal_chars.append("'")
                        i += 2
                    else:
                        i += 1  # Closing quote
                        break
                else:
                    literal_chars.append(pattern[i])
                    i += 1

            if literal_chars:
                tokens.append(PatternToken("".join(literal_chars), literal=True))
            continue

        # ASCII letters only: CLDR pattern letters are a-zA-Z, other scripts are literal
        if char.isascii() and char.isalpha():
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            tokens.append(PatternToken(pattern[i:j], literal=False))
            i = j
            continue

        tokens.append(PatternToken(char, literal=True))
        i += 1

    return tokens


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def analyze_pattern(pattern: str) -> DatePattern:
    """Split a date skeleton into field tokens and literal separators.

    Literal text before the first field, between fields, and after the last
    field each becomes one separator; empty gaps produce no separator.

    Results are cached per pattern string.

    Examples:
        >>> analyze_pattern("M/d/yy")
        DatePattern(fields=('M', 'd', 'yy'), separators=('/', '/'))
        >>> analyze_pattern("d 'de' MMM 'de' y")
        DatePattern(fields=('d', 'MMM', 'y'), separators=(' de ', ' de '))

    Args:
        pattern: CLDR date skeleton

    Returns:
        DatePattern with fields and separators in pattern order
    """
    fields: list[str] = []
    separators: list[str] = []
    pending: list[str] = []

    for token in tokenize_pattern(pattern):
        if not token.literal and token.text[0] in _DATE_FIELD_LETTERS:
            if pending:
                separators.append("".join(pending))
                pending.clear()
            fields.append(token.text)
        else:
            pending.append(token.text)

    if pending:
        separators.append("".join(pending))

    return DatePattern(fields=tuple(fields), separators=tuple(separators))


def split_by_separators(text: str, separators: tuple[str, ...]) -> list[str]:
    """Cut text at any occurrence of any separator.

    Separators are matched as escaped literals, longest first, with every
    whitespace run inside a separator matching any whitespace run in the
    text (CLDR data often uses no-break spaces where pages show plain ones).
    Empty and whitespace-only segments are dropped; segments are stripped.

    Example:
        >>> split_by_separators("26. 1. 15.", (". ", ". ", "."))
        ['26', '1', '15']

    Args:
        text: Date text (digits already normalized)
        separators: Literal separators from analyze_pattern()

    Returns:
        Non-empty stripped segments in text order
    """
    if not separators:
        return [text.strip()] if text.strip() else []

    regex = _separator_regex(separators)
    if regex is None:
        parts = [text]
    else:
        parts = regex.split(text)
    return [part.strip() for part in parts if part.strip()]


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _separator_regex(separators: tuple[str, ...]) -> re.Pattern[str] | None:
    alternatives: list[str] = []
    for separator in sorted(set(separators), key=len, reverse=True):
        if not separator:
            continue
        pieces = _WHITESPACE_RUN.split(separator)
        alternative = r"\s+".join(re.escape(piece) for piece in pieces)
        if alternative and alternative not in alternatives:
            alternatives.append(alternative)
    if not alternatives:
        return None
    return re.compile("|".join(alternatives))
