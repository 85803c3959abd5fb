"""Native digit normalization.

Rewrites locale digit glyphs (Bengali "০১২", Arabic-Indic "٠١٢", ...) to
ASCII digits so every later stage can match plain ``\\d`` runs.

Known limitation: replacement is character-wise over the whole string, so a
glyph that a locale also uses as punctuation is rewritten as well.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from polydate.constants import DIGIT_COUNT

if TYPE_CHECKING:
    from polydate.keywords import LocaleKeywordTable

__all__ = ["normalize_digits"]

_ASCII_DIGITS = "0123456789"


def normalize_digits(text: str, table: LocaleKeywordTable) -> str:
    """Replace the table's native digit glyphs with ASCII digits.

    Text is returned unchanged when the locale uses Latin digits or the
    table carries no glyphs.

    Args:
        text: Raw date text from the page
        table: Keyword table for the text's locale

    Returns:
        Text with every native digit replaced by its ASCII value

    Example:
        >>> bn = LocaleKeywordTable(locale="bn", uses_latin_digits=False,
        ...                         digit_glyphs="০১২৩৪৫৬৭৮৯")
        >>> normalize_digits("২০২৬", bn)
        '2026'
    """
    glyphs = table.digit_glyphs
    if table.uses_latin_digits or not glyphs or len(glyphs) != DIGIT_COUNT:
        return text
    return text.translate(str.maketrans(glyphs, _ASCII_DIGITS))
