"""i18n system - locale-aware translation and formatting.

Provides translation key resolution with scopes, pluralization and
interpolation, plus number, currency, percentage and date formatting for a
configured locale, with relative phrasing for recent dates.

Main components:
- models: LocaleDetails, TranslateOptions, RichContent, LanguageDirection
- constants: DateStyle presets, Weekdays and week start days
- errors: I18nError and the missing currency/timezone/country/translation errors
- translator: Translator with scoped lookup, plurals and interpolation
- formatting: Babel-backed number and date formatting
- humanize: relative date phrasing
- i18n: I18n locale context tying everything together
- factory: create_i18n building a context from settings
"""

from infrastructure.i18n.constants import (
    DATE_STYLE,
    DEFAULT_WEEK_START_DAY,
    WEEK_START_DAYS,
    DateStyle,
    Weekdays,
)
from infrastructure.i18n.errors import (
    I18nError,
    MissingCountryError,
    MissingCurrencyCodeError,
    MissingReplacementError,
    MissingTimezoneError,
    MissingTranslationError,
)
from infrastructure.i18n.factory import create_i18n
from infrastructure.i18n.i18n import I18n
from infrastructure.i18n.models import (
    LanguageDirection,
    LocaleDetails,
    NumberStyle,
    RichContent,
    TranslateOptions,
)
from infrastructure.i18n.translator import Translator

__all__ = [
    "I18n",
    "create_i18n",
    "LocaleDetails",
    "TranslateOptions",
    "RichContent",
    "LanguageDirection",
    "NumberStyle",
    "DateStyle",
    "DATE_STYLE",
    "Weekdays",
    "WEEK_START_DAYS",
    "DEFAULT_WEEK_START_DAY",
    "Translator",
    "I18nError",
    "MissingCurrencyCodeError",
    "MissingTimezoneError",
    "MissingCountryError",
    "MissingTranslationError",
    "MissingReplacementError",
]
