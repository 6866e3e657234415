"""Tests for infrastructure.i18n.factory module."""

from core.config import I18nSettings
from infrastructure.i18n import I18n, LocaleDetails, create_i18n
from infrastructure.i18n.factory import details_from_settings
from tests.factories.i18n import FIXED_NOW, make_fixed_clock


class TestDetailsFromSettings:
    """Tests for details_from_settings()."""

    def test_maps_settings_to_details(self):
        settings = I18nSettings(
            I18N_LOCALE="fr-CA",
            I18N_DEFAULT_COUNTRY="CA",
            I18N_DEFAULT_CURRENCY="cad",
            I18N_DEFAULT_TIMEZONE="America/Toronto",
            I18N_PSEUDOLOCALIZE="bidi",
        )
        assert details_from_settings(settings) == LocaleDetails(
            locale="fr-CA",
            country="CA",
            currency="CAD",
            timezone="America/Toronto",
            pseudolocalize="bidi",
        )


class TestCreateI18n:
    """Tests for create_i18n()."""

    def test_explicit_details(self, translations):
        details = LocaleDetails(locale="en-GB", currency="GBP")
        i18n = create_i18n([translations], details=details)
        assert isinstance(i18n, I18n)
        assert i18n.details is details
        assert i18n.translate("today") == "Today"

    def test_details_from_explicit_settings(self, translations):
        settings = I18nSettings(I18N_LOCALE="de-DE", I18N_DEFAULT_COUNTRY="DE")
        i18n = create_i18n([translations], settings=settings)
        assert i18n.locale == "de-DE"
        assert i18n.default_country == "DE"
        assert i18n.default_currency is None

    def test_details_from_application_settings(self, translations, i18n_settings):
        i18n_settings(
            I18N_LOCALE="fr-FR",
            I18N_DEFAULT_CURRENCY="EUR",
            I18N_PSEUDOLOCALIZE="true",
        )
        i18n = create_i18n([translations])
        assert i18n.locale == "fr-FR"
        assert i18n.default_currency == "EUR"
        assert i18n.pseudolocalize is True

    def test_clock_is_passed_through(self, translations):
        clock = make_fixed_clock()
        i18n = create_i18n(
            [translations], details=LocaleDetails(locale="en-US"), clock=clock
        )
        assert i18n.clock() == FIXED_NOW
