"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    FIXED_NOW,
    make_fixed_clock,
    make_i18n,
    make_locale_details,
    make_translations,
)

__all__ = [
    "FIXED_NOW",
    "make_fixed_clock",
    "make_i18n",
    "make_locale_details",
    "make_translations",
]
