"""Feature-level fixtures for i18n system tests.

Provides translation dictionaries and locale contexts for translation,
formatting and humanization scenarios.
"""

import pytest

from tests.factories.i18n import (
    FIXED_NOW,
    make_i18n,
    make_locale_details,
    make_translations,
)


@pytest.fixture
def translations():
    """English translation dictionary with humanize keys and plurals."""
    return make_translations()


@pytest.fixture
def fallback_translations():
    """Lower priority dictionary providing keys missing from the primary one."""
    return {
        "greeting": "Fallback hello {name}",
        "farewell": "Goodbye",
        "checkout": {"summary": {"subtitle": "Review your order"}},
    }


@pytest.fixture
def i18n(translations):
    """en-US context with USD, US and UTC defaults and a fixed clock."""
    return make_i18n([translations])


@pytest.fixture
def bare_i18n(translations):
    """en-US context without any formatting defaults."""
    return make_i18n(
        [translations],
        details=make_locale_details(country=None, currency=None, timezone=None),
    )


@pytest.fixture
def now():
    """Instant returned by the fixed clock (2024-01-15T12:00:00Z)."""
    return FIXED_NOW
