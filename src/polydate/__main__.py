"""Check a sample file of displayed date labels.

Exit codes:
    0: Every date line parsed.
    1: At least one line failed to parse.
    2: Usage error, unreadable sample file, or invalid keyword table.

Usage:
    python -m polydate SAMPLES [--locale TAG] [--tables DIR] [--babel] [-v]

Tables come from --tables (a directory of JSON keyword tables), from Babel
CLDR data with --babel, or both; JSON tables take precedence.

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from polydate.constants import DEFAULT_HTML_LANG_ALIASES
from polydate.diagnostics import KeywordTableError
from polydate.keywords import ChainedKeywordTableProvider, KeywordTableRegistry
from polydate.samples import DEFAULT_LOCALE, check_samples, format_report

if TYPE_CHECKING:
    from polydate.keywords import KeywordTableProvider


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="polydate",
        description="Parse every date label in a sample file and report failures.",
    )
    parser.add_argument(
        "samples",
        type=Path,
        help="Sample file ([tag] markers, one label per line).",
    )
    parser.add_argument(
        "--locale",
        default=DEFAULT_LOCALE,
        help=f"Locale in effect before the first [tag] marker (default: {DEFAULT_LOCALE}).",
    )
    parser.add_argument(
        "--tables",
        type=Path,
        help="Directory of JSON keyword tables to load.",
    )
    parser.add_argument(
        "--babel",
        action="store_true",
        help="Derive keyword tables from Babel CLDR data for locales without a JSON table.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="List successful lines too; repeat for debug logging.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the sample checker."""
    args = _parse_args(argv)

    level = logging.DEBUG if args.verbose > 1 else logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    registry = KeywordTableRegistry()
    if args.tables is not None:
        try:
            registry.load_directory(args.tables)
        except (KeywordTableError, OSError) as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            return 2
        registry.register_aliases(DEFAULT_HTML_LANG_ALIASES)

    provider: KeywordTableProvider = registry
    if args.babel:
        from polydate.keywords.cldr import BabelKeywordTableProvider  # noqa: PLC0415

        provider = ChainedKeywordTableProvider(registry, BabelKeywordTableProvider())

    try:
        text = args.samples.read_text(encoding="utf-8")
    except OSError as e:
        print(f"[ERROR] Cannot read {args.samples}: {e}", file=sys.stderr)
        return 2

    report = check_samples(
        text.splitlines(),
        provider=provider,
        locale_code=args.locale,
    )
    print(format_report(report, verbose=args.verbose > 0))
    return 0 if report.failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
