"""Locale utilities: tag normalization and keyword-table resolution.

Keyword tables are keyed by BCP-47 tags with hyphens ("pt-BR", "zh-Hant"),
the form used by both CLDR JSON data and HTML lang attributes. Babel uses
POSIX identifiers with underscores ("pt_BR"). This module converts between
the two and implements the locale fallback used by the parser.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from polydate.keywords import KeywordTableProvider, LocaleKeywordTable

__all__ = [
    "fallback_locale",
    "normalize_locale",
    "resolve_keyword_table",
    "to_babel_identifier",
]

# Length of the primary language subtag used for fallback ("pt-BR" -> "pt").
_FALLBACK_PREFIX_LENGTH = 2


def normalize_locale(locale_code: str) -> str:
    """Convert a POSIX locale identifier to the BCP-47 form used as table keys.

    Only the separator changes; case is preserved because CLDR tags are
    case-significant as keys ("zh-Hant", not "zh-hant").

    Args:
        locale_code: Locale code (e.g., "pt_BR", "pt-BR", "zh_Hant")

    Returns:
        BCP-47 locale code (e.g., "pt-BR", "zh-Hant")

    Example:
        >>> normalize_locale("pt_BR")
        'pt-BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.strip().replace("_", "-")


def to_babel_identifier(locale_code: str) -> str:
    """Convert a BCP-47 tag to the POSIX identifier Babel expects.

    Example:
        >>> to_babel_identifier("zh-Hant-HK")
        'zh_Hant_HK'
    """
    return locale_code.strip().replace("-", "_")


def fallback_locale(locale_code: str) -> str | None:
    """Return the two-character fallback tag, or None if there is none.

    Example:
        >>> fallback_locale("pt-BR")
        'pt'
        >>> fallback_locale("ko") is None
        True
    """
    if len(locale_code) > _FALLBACK_PREFIX_LENGTH:
        return locale_code[:_FALLBACK_PREFIX_LENGTH]
    return None


def resolve_keyword_table(
    locale_code: str,
    provider: KeywordTableProvider,
) -> LocaleKeywordTable | None:
    """Resolve a locale tag to its keyword table.

    Resolution order:
    1. Exact tag (after normalize_locale)
    2. First two characters of the tag, if the tag is longer than that
    3. None

    The provider is only ever asked for exact tags.

    Args:
        locale_code: Language tag from the host page (e.g., "pt-BR", "ko")
        provider: Exact-lookup keyword table provider

    Returns:
        The matching table, or None if the locale is unsupported

    Example:
        >>> registry = KeywordTableRegistry([LocaleKeywordTable(locale="pt")])
        >>> resolve_keyword_table("pt-BR", registry).locale
        'pt'
        >>> resolve_keyword_table("xx-YY", registry) is None
        True
    """
    tag = normalize_locale(locale_code)
    if not tag:
        return None

    table = provider.get(tag)
    if table is not None:
        return table

    fallback = fallback_locale(tag)
    if fallback is not None:
        return provider.get(fallback)
    return None

