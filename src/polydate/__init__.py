"""polydate - natural-language date parsing for localized task-list labels.

Turns a date label as a web UI renders it ("Tomorrow", "3 days ago",
"26. 1. 15. 오후 3:30", "১৫/১/২৬") into a naive datetime, using only a
per-locale keyword table derived from CLDR data.

Public API:
    parse_natural_date - Label + locale tag -> datetime | None
    parse_natural_date_detailed - Same, returning (result, errors)
    LocaleKeywordTable - Immutable keyword/format data for one locale
    KeywordTableRegistry - In-memory table provider with tag aliases
    default_registry - Process-wide registry used when no provider is passed

Exceptions:
    PolydateError - Base exception class
    NaturalDateParseError - Parse failure (returned, not raised)
    KeywordTableError - Structurally invalid table data

Submodules:
    polydate.keywords.cldr - Build tables from Babel CLDR data
    polydate.parsing - Individual parsing stages and matchers
    polydate.diagnostics - Diagnostic codes, templates and formatting
    polydate.samples - Sample-file checker behind ``python -m polydate``
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import KeywordTableError, NaturalDateParseError, PolydateError
from .keywords import KeywordTableRegistry, LocaleKeywordTable, default_registry
from .parsing import parse_natural_date, parse_natural_date_detailed

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("polydate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "KeywordTableError",
    "KeywordTableRegistry",
    "LocaleKeywordTable",
    "NaturalDateParseError",
    "PolydateError",
    "__version__",
    "default_registry",
    "parse_natural_date",
    "parse_natural_date_detailed",
]
