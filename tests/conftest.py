"""Pytest configuration for polydate test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
These are intensive property tests designed for fuzzing, not unit testing.
Run them via: pytest -m fuzz

Keyword tables:
Synthetic en/ko/bn/pt tables are provided as session-scoped fixtures so that
parser tests do not depend on the installed CLDR version, and a fixed
reference day keeps keyword and relative matches off the wall clock.
"""

from datetime import date

import pytest
from hypothesis import Phase, Verbosity, settings

from polydate.keywords import (
    DateFormats,
    KeywordTableRegistry,
    LocaleKeywordTable,
    MeridiemMarkers,
    MonthNames,
    TimeFormats,
)

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    import os

    # Explicit override via env var
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    # GitHub Actions sets CI=true automatically
    if os.environ.get("CI") == "true":
        return "ci"

    # Local development
    return "dev"


# Load appropriate profile automatically
settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested.

    Fuzz tests are intensive property tests designed for dedicated fuzzing runs,
    not for inclusion in the regular test suite. They run with high
    max_examples values over the whole digit and calendar range.

    Behavior:
    - Normal test run (pytest tests/): Fuzz tests are SKIPPED
    - Explicit fuzz run (pytest -m fuzz): Fuzz tests run, others skipped

    This keeps a plain `pytest` run fast while `pytest -m fuzz` still
    exercises the full property test suite.
    """
    # Check if user explicitly requested fuzz tests via -m marker
    marker_expr = config.getoption("-m", default="")

    # If user explicitly requested fuzz tests, don't skip them
    if "fuzz" in str(marker_expr):
        return

    # Skip fuzz-marked tests in normal test runs
    skip_fuzz = pytest.mark.skip(
        reason="Fuzzing test - run with: pytest -m fuzz"
    )
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# KEYWORD TABLE FIXTURES
# =============================================================================

REFERENCE_DAY = date(2026, 1, 15)

EN_TABLE = LocaleKeywordTable(
    locale="en",
    today="Today",
    tomorrow="Tomorrow",
    yesterday="Yesterday",
    day_unit_word="day",
    week_unit_word="week",
    meridiem=MeridiemMarkers(am="AM", pm="PM"),
    date_formats=DateFormats(short="M/d/yy", medium="MMM d, y"),
    time_formats=TimeFormats(short="h:mm a"),
    months=MonthNames(
        wide=(
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ),
        abbreviated=(
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ),
    ),
)

KO_TABLE = LocaleKeywordTable(
    locale="ko",
    today="오늘",
    tomorrow="내일",
    yesterday="어제",
    day_unit_word="일",
    week_unit_word="주",
    meridiem=MeridiemMarkers(am="오전", pm="오후"),
    date_formats=DateFormats(short="yy. M. d.", medium="y. M. d."),
    time_formats=TimeFormats(short="a h:mm"),
    months=MonthNames(wide=tuple(f"{n}월" for n in range(1, 13))),
)

BN_TABLE = LocaleKeywordTable(
    locale="bn",
    today="আজ",
    tomorrow="আগামীকাল",
    yesterday="গতকাল",
    day_unit_word="দিন",
    week_unit_word="সপ্তাহ",
    meridiem=MeridiemMarkers(am="AM", pm="PM"),
    uses_latin_digits=False,
    digit_glyphs="০১২৩৪৫৬৭৮৯",
    date_formats=DateFormats(short="d/M/yy", medium="d MMM, y"),
    time_formats=TimeFormats(short="h:mm a"),
)

PT_TABLE = LocaleKeywordTable(
    locale="pt",
    today="Hoje",
    tomorrow="Amanhã",
    yesterday="Ontem",
    day_unit_word="dia",
    week_unit_word="semana",
    date_formats=DateFormats(short="dd/MM/y", medium="d 'de' MMM 'de' y"),
    time_formats=TimeFormats(short="HH:mm"),
    months=MonthNames(
        wide=(
            "janeiro", "fevereiro", "março", "abril", "maio", "junho",
            "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
        ),
        abbreviated=(
            "jan.", "fev.", "mar.", "abr.", "mai.", "jun.",
            "jul.", "ago.", "set.", "out.", "nov.", "dez.",
        ),
    ),
)


@pytest.fixture(scope="session")
def reference_day() -> date:
    """Fixed 'today' injected into every keyword and relative match."""
    return REFERENCE_DAY


@pytest.fixture(scope="session")
def en_table() -> LocaleKeywordTable:
    return EN_TABLE


@pytest.fixture(scope="session")
def ko_table() -> LocaleKeywordTable:
    return KO_TABLE


@pytest.fixture(scope="session")
def bn_table() -> LocaleKeywordTable:
    return BN_TABLE


@pytest.fixture(scope="session")
def pt_table() -> LocaleKeywordTable:
    return PT_TABLE


@pytest.fixture(scope="session")
def registry() -> KeywordTableRegistry:
    """Registry holding the synthetic tables. Tests must not mutate it."""
    return KeywordTableRegistry([EN_TABLE, KO_TABLE, BN_TABLE, PT_TABLE])
