"""Factory functions for creating i18n components.

Provides a convenience function for building a locale context from the
configured defaults.
"""

from typing import Optional, Sequence

import structlog
from core.config import I18nSettings, settings as app_settings
from infrastructure.i18n.i18n import Clock, I18n
from infrastructure.i18n.models import LocaleDetails, TranslationDictionary

logger = structlog.get_logger()


def details_from_settings(settings: I18nSettings) -> LocaleDetails:
    """Build LocaleDetails from i18n settings.

    Args:
        settings: I18nSettings holding the locale and its defaults.

    Returns:
        LocaleDetails: Immutable locale details.
    """
    return LocaleDetails(
        locale=settings.LOCALE,
        country=settings.DEFAULT_COUNTRY,
        currency=settings.DEFAULT_CURRENCY,
        timezone=settings.DEFAULT_TIMEZONE,
        pseudolocalize=settings.PSEUDOLOCALIZE,
    )


def create_i18n(
    translations: Sequence[TranslationDictionary],
    details: Optional[LocaleDetails] = None,
    settings: Optional[I18nSettings] = None,
    clock: Optional[Clock] = None,
) -> I18n:
    """Create and configure an I18n instance.

    If no details are provided, they are built from the i18n settings
    (I18N_LOCALE, I18N_DEFAULT_COUNTRY, I18N_DEFAULT_CURRENCY,
    I18N_DEFAULT_TIMEZONE and I18N_PSEUDOLOCALIZE).

    Args:
        translations: Already loaded translation dictionaries, in priority
            order.
        details: Explicit locale details (default: from settings)
        settings: I18nSettings to read defaults from (default: app settings)
        clock: Source of "now" for humanized dates (default: UTC now)

    Returns:
        I18n: Configured locale context

    Raises:
        ValueError: If the settings name an unknown pseudolocalization
            variant

    Usage:
        # Use configured defaults
        i18n = create_i18n([translations])

        # Explicit locale
        i18n = create_i18n(
            [fr_translations, en_translations],
            details=LocaleDetails(locale="fr-CA", currency="CAD"),
        )
    """
    if details is None:
        details = details_from_settings(settings or app_settings.i18n)
        source = "settings"
    else:
        source = "explicit"

    i18n = I18n(translations, details, clock=clock)

    logger.info(
        "i18n_created",
        locale=details.locale,
        details_source=source,
        dictionary_count=len(i18n.translations),
        pseudolocalize=details.pseudolocalize,
    )

    return i18n
