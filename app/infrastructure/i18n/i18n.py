"""Locale context for translating and formatting.

An I18n instance is built once from translation dictionaries and locale
details; every translation and formatting call is then a pure function of
its state, the call arguments and, for humanized dates, the clock.
"""

import warnings
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

import pytz
from babel.numbers import get_currency_symbol

from core.logging import get_module_logger
from infrastructure.i18n import formatting
from infrastructure.i18n.constants import (
    DATE_STYLE,
    DEFAULT_WEEK_START_DAY,
    RTL_LANGUAGES,
    WEEK_START_DAYS,
    DateStyle,
    Weekdays,
)
from infrastructure.i18n.errors import (
    MissingCountryError,
    MissingCurrencyCodeError,
    MissingTimezoneError,
)
from infrastructure.i18n.humanize import humanize_date, humanize_date_with_time
from infrastructure.i18n.models import (
    LanguageDirection,
    LocaleDetails,
    NumberStyle,
    ReplacementDictionary,
    TranslateOptions,
    TranslationDictionary,
)
from infrastructure.i18n.resolvers import (
    language_from_locale,
    region_from_locale,
    resolve_babel_locale,
)
from infrastructure.i18n.translator import Translation, Translator

logger = get_module_logger()

Clock = Callable[[], datetime]

_NUMBER_STYLES = {
    NumberStyle.NUMBER: formatting.DECIMAL,
    NumberStyle.CURRENCY: formatting.CURRENCY,
    NumberStyle.PERCENT: formatting.PERCENT,
}


def utc_now() -> datetime:
    return datetime.now(pytz.utc)


class I18n:
    """Locale context for translations, numbers and dates.

    Attributes:
        translations: Translation dictionaries in priority order.
        details: Immutable locale details the context was built from.
        clock: Callable returning the current aware datetime.
    """

    def __init__(
        self,
        translations: Sequence[TranslationDictionary],
        details: LocaleDetails,
        clock: Optional[Clock] = None,
    ):
        """Initialize the locale context.

        Args:
            translations: Translation dictionaries; earlier ones win.
            details: Locale and formatting defaults.
            clock: Source of "now" for humanized dates (default: UTC now).

        Raises:
            ValueError: If the pseudolocalization variant is unknown.
        """
        self.translations: Tuple[TranslationDictionary, ...] = tuple(translations)
        self.details = details
        self.clock: Clock = clock or utc_now
        self._translator = Translator(
            self.translations, details.locale, details.pseudolocalize
        )
        self._currency_symbols: Dict[Tuple[str, str], str] = {}
        self._logger = logger.bind(locale=details.locale)

    @property
    def locale(self) -> str:
        return self.details.locale

    @property
    def pseudolocalize(self) -> Union[bool, str]:
        return self.details.pseudolocalize

    @property
    def default_country(self) -> Optional[str]:
        return self.details.country

    @property
    def default_currency(self) -> Optional[str]:
        return self.details.currency

    @property
    def default_timezone(self) -> Optional[str]:
        return self.details.timezone

    @property
    def language(self) -> str:
        """Language subtag of the locale (e.g., "en")."""
        return language_from_locale(self.locale)

    @property
    def region(self) -> Optional[str]:
        """Region subtag of the locale (e.g., "US"), if any."""
        return region_from_locale(self.locale)

    @property
    def country_code(self) -> Optional[str]:
        """Region subtag of the locale.

        Deprecated: use region instead.
        """
        warnings.warn(
            "I18n.country_code is deprecated, use I18n.region instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.region

    @property
    def language_direction(self) -> LanguageDirection:
        if self.language in RTL_LANGUAGES:
            return LanguageDirection.RTL
        return LanguageDirection.LTR

    @property
    def is_rtl_language(self) -> bool:
        return self.language_direction == LanguageDirection.RTL

    @property
    def is_ltr_language(self) -> bool:
        return self.language_direction == LanguageDirection.LTR

    def translate(
        self,
        key: str,
        options: Union[TranslateOptions, ReplacementDictionary, None] = None,
        replacements: Optional[ReplacementDictionary] = None,
    ) -> Translation:
        """Translate a key.

        The replacements may be passed in place of the options when no
        scope is needed: translate("greeting", {"name": "Ada"}).

        Args:
            key: Dotted translation key.
            options: TranslateOptions with a scope, or the replacements.
            replacements: Values for {placeholder} tokens and the plural
                "count".

        Returns:
            The translated string, or RichContent when a replacement value
            is not a primitive.

        Raises:
            MissingTranslationError: If no dictionary resolves the key.
            MissingReplacementError: If a needed replacement is missing.
        """
        scope = None
        if isinstance(options, TranslateOptions):
            scope = options.scope
        elif options is not None:
            replacements = options

        return self._translator.translate(key, scope=scope, replacements=replacements)

    def has_translation(
        self, key: str, options: Optional[TranslateOptions] = None
    ) -> bool:
        """Check if any dictionary resolves the key."""
        scope = options.scope if options else None
        return self._translator.has_translation(key, scope=scope)

    def format_number(
        self,
        amount: formatting.Number,
        as_: Union[NumberStyle, str, None] = None,
        precision: Optional[int] = None,
        **options: Any,
    ) -> str:
        """Format a number, currency amount or percentage.

        Args:
            amount: Value to format.
            as_: "number", "currency" or "percent" (default: number).
            precision: Maximum number of fraction digits.
            **options: Intl-style number options; they take precedence over
                the values derived from as_, precision and the defaults.

        Returns:
            Localized number string.

        Raises:
            MissingCurrencyCodeError: If a currency is formatted and neither
                the options nor the context provide a currency code.
        """
        style = _NUMBER_STYLES[NumberStyle(as_)] if as_ else None
        merged = {
            "style": style,
            "maximum_fraction_digits": precision,
            "currency": self.default_currency,
            **options,
        }

        if merged["style"] == formatting.CURRENCY and merged["currency"] is None:
            self._logger.error("missing_currency_code")
            raise MissingCurrencyCodeError(
                "No currency code provided. format_number(amount, as_='currency') "
                "cannot be called without a currency code."
            )

        return formatting.format_number(amount, self.locale, merged)

    def format_currency(self, amount: formatting.Number, **options: Any) -> str:
        return self.format_number(amount, as_=NumberStyle.CURRENCY, **options)

    def format_percentage(self, amount: formatting.Number, **options: Any) -> str:
        return self.format_number(amount, as_=NumberStyle.PERCENT, **options)

    def format_date(
        self,
        date: formatting.DateLike,
        style: Union[DateStyle, str, None] = None,
        **options: Any,
    ) -> str:
        """Format a date, optionally with a named style.

        Args:
            date: Date or datetime; naive values are taken as UTC.
            style: Named preset. Humanize styles phrase the date relative to
                now; other presets expand to their option bundle.
            **options: Intl-style date options (time_zone, weekday, month,
                day, year, hour, minute, ...).

        Returns:
            Localized date string.

        Raises:
            MissingTimezoneError: If neither the options nor the context
                provide a timezone.
        """
        time_zone = options.get("time_zone") or self.default_timezone
        if time_zone is None:
            self._logger.error("missing_timezone")
            raise MissingTimezoneError(
                "No timezone code provided. format_date() cannot be called "
                "without a timezone."
            )

        if style:
            style = DateStyle(style)
            if style == DateStyle.HUMANIZE_WITH_TIME:
                return humanize_date_with_time(
                    self, date, self.clock(), time_zone, options
                )
            if style == DateStyle.HUMANIZE:
                return humanize_date(self, date, self.clock(), time_zone, options)

            return self.format_date(date, **{**options, **DATE_STYLE[style]})

        return formatting.format_date(
            date, self.locale, {**options, "time_zone": time_zone}
        )

    def week_start_day(self, country: Optional[str] = None) -> Weekdays:
        """Get the first day of the week for a country.

        Args:
            country: ISO 3166 country code (default: the context country).

        Returns:
            The week start day, or DEFAULT_WEEK_START_DAY for countries
            without a specific rule.

        Raises:
            MissingCountryError: If no country code is available.
        """
        country = country or self.default_country
        if not country:
            self._logger.error("missing_country_code")
            raise MissingCountryError(
                "No country code provided. week_start_day() cannot be called "
                "without a country code."
            )
        return WEEK_START_DAYS.get(country.upper(), DEFAULT_WEEK_START_DAY)

    def get_currency_symbol(self, currency_code: Optional[str] = None) -> str:
        """Get the localized symbol of a currency.

        Args:
            currency_code: ISO 4217 code (default: the context currency).

        Returns:
            Currency symbol for the context locale (e.g., "$", "CA$").

        Raises:
            MissingCurrencyCodeError: If no currency code is available.
        """
        currency = currency_code or self.default_currency
        if currency is None:
            self._logger.error("missing_currency_code")
            raise MissingCurrencyCodeError(
                "No currency code provided. get_currency_symbol() cannot be "
                "called without a currency code."
            )
        return self.get_currency_symbol_localized(self.locale, currency)

    def get_currency_symbol_localized(self, locale: str, currency: str) -> str:
        """Get the symbol of a currency in a locale, caching each pair."""
        key = (locale, currency)
        symbol = self._currency_symbols.get(key)
        if symbol is None:
            symbol = self._currency_symbols.setdefault(
                key, _lookup_currency_symbol(locale, currency)
            )
        return symbol


def _lookup_currency_symbol(locale: str, currency: str) -> str:
    return get_currency_symbol(currency, locale=resolve_babel_locale(locale))
