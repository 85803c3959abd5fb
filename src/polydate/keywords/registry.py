"""Keyword table providers.

Components:
    KeywordTableProvider - Protocol for exact-tag table lookup (structural typing)
    KeywordTableRegistry - Thread-safe in-memory provider with tag aliases
    default_registry - Process-wide registry used when no provider is passed

Providers only do EXACT lookups. The two-character language fallback
("pt-BR" -> "pt") belongs to polydate.locale_utils.resolve_keyword_table(),
so every provider gets identical fallback behavior for free.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from polydate.diagnostics import ErrorTemplate, KeywordTableError

from .table import LocaleKeywordTable

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

__all__ = [
    "ChainedKeywordTableProvider",
    "KeywordTableProvider",
    "KeywordTableRegistry",
    "default_registry",
]

logger = logging.getLogger(__name__)


class KeywordTableProvider(Protocol):
    """Protocol for looking up a keyword table by exact locale tag.

    This is a Protocol (structural typing) rather than ABC so that a plain
    dict-backed object, a registry, or a Babel-backed builder all qualify.

    Example:
        >>> class DictProvider:
        ...     def __init__(self, tables: dict[str, LocaleKeywordTable]) -> None:
        ...         self._tables = tables
        ...     def get(self, locale_code: str) -> LocaleKeywordTable | None:
        ...         return self._tables.get(locale_code)
    """

    def get(self, locale_code: str) -> LocaleKeywordTable | None:
        """Return the table registered under exactly this tag, or None."""
        ...  # pylint: disable=unnecessary-ellipsis


class ChainedKeywordTableProvider:
    """Ask several providers in order; the first table found wins.

    Typical use is JSON tables in front of Babel-derived ones, so hand-tuned
    data overrides CLDR defaults locale by locale.
    """

    __slots__ = ("_providers",)

    def __init__(self, *providers: KeywordTableProvider) -> None:
        self._providers = providers

    def get(self, locale_code: str) -> LocaleKeywordTable | None:
        """Return the first provider's table for exactly this tag, or None."""
        for provider in self._providers:
            table = provider.get(locale_code)
            if table is not None:
                return table
        return None


class KeywordTableRegistry:
    """In-memory keyword table provider.

    Each table is registered under its own ``locale`` and any number of
    aliases (HTML lang tags such as "zh-TW" pointing at "zh-Hant").
    Registration and lookup are guarded by an RLock.

    Example:
        >>> registry = KeywordTableRegistry()
        >>> registry.register(LocaleKeywordTable(locale="zh-Hant"), aliases=["zh-TW"])
        >>> registry.get("zh-TW").locale
        'zh-Hant'
    """

    __slots__ = ("_lock", "_tables")

    def __init__(self, tables: Iterable[LocaleKeywordTable] = ()) -> None:
        self._lock = threading.RLock()
        self._tables: dict[str, LocaleKeywordTable] = {}
        for table in tables:
            self.register(table)

    def register(self, table: LocaleKeywordTable, aliases: Iterable[str] = ()) -> None:
        """Register a table under its locale and the given aliases.

        Re-registering a tag replaces the previous table.

        Args:
            table: Table to register
            aliases: Additional tags that should resolve to the same table
        """
        tags = [table.locale, *aliases]
        with self._lock:
            for tag in tags:
                self._tables[tag] = table
        logger.debug("Registered keyword table %s under %s", table.locale, tags)

    def register_aliases(self, aliases: Mapping[str, str]) -> int:
        """Point alias tags at already-registered tables.

        Aliases whose target is not registered are skipped, and tags that
        already have a table keep it.

        Args:
            aliases: Mapping of alias tag -> registered locale tag

        Returns:
            Number of aliases added
        """
        added = 0
        with self._lock:
            for alias, target in aliases.items():
                if alias in self._tables:
                    continue
                table = self._tables.get(target)
                if table is None:
                    logger.debug("Alias %s skipped: no table for %s", alias, target)
                    continue
                self._tables[alias] = table
                added += 1
        return added

    def get(self, locale_code: str) -> LocaleKeywordTable | None:
        """Return the table registered under exactly this tag, or None."""
        with self._lock:
            return self._tables.get(locale_code)

    def unregister(self, locale_code: str) -> None:
        """Remove a tag (table or alias). Unknown tags are ignored."""
        with self._lock:
            self._tables.pop(locale_code, None)

    def clear(self) -> None:
        """Remove every registered table and alias."""
        with self._lock:
            self._tables.clear()

    @property
    def locales(self) -> tuple[str, ...]:
        """All registered tags (locales and aliases), sorted."""
        with self._lock:
            return tuple(sorted(self._tables))

    def __contains__(self, locale_code: object) -> bool:
        with self._lock:
            return locale_code in self._tables

    def __len__(self) -> int:
        with self._lock:
            return len(self._tables)

    def load_file(self, path: Path | str) -> LocaleKeywordTable:
        """Load and register one JSON keyword table.

        The file holds a single table object in the LocaleKeywordTable
        mapping shape, optionally with an ``"aliases"`` list of extra tags.

        Args:
            path: JSON file to load

        Returns:
            The registered table

        Raises:
            KeywordTableError: If the file is not valid JSON or not a valid table
            OSError: If the file cannot be read
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            logger.error("Failed to decode keyword table %s: %s", path, e)
            raise KeywordTableError(
                ErrorTemplate.keyword_table_invalid("<root>", f"invalid JSON: {e.msg}", str(path))
            ) from e

        try:
            table = LocaleKeywordTable.from_mapping(data, source=str(path))
        except KeywordTableError as e:
            logger.error("Failed to load keyword table %s: %s", path, e)
            raise

        aliases = data.get("aliases")
        if aliases is None:
            aliases = []
        if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
            raise KeywordTableError(
                ErrorTemplate.keyword_table_invalid("aliases", "expected a list of strings", str(path))
            )
        self.register(table, aliases)
        return table

    def load_directory(self, directory: Path | str) -> int:
        """Load every ``*.json`` keyword table in a directory.

        Files are loaded in sorted order, so later files win on tag clashes.

        Args:
            directory: Directory containing one JSON table per file

        Returns:
            Number of tables loaded

        Raises:
            KeywordTableError: If any file holds an invalid table
        """
        directory = Path(directory)
        count = 0
        for path in sorted(directory.glob("*.json")):
            self.load_file(path)
            count += 1
        logger.info("Loaded %d keyword tables from %s", count, directory)
        return count


_default_registry = KeywordTableRegistry()


def default_registry() -> KeywordTableRegistry:
    """Return the process-wide registry used when no provider is passed.

    It starts empty; applications populate it once at startup via
    register(), load_directory() or BabelKeywordTableProvider.populate().
    """
    return _default_registry
