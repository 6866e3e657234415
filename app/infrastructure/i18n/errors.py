"""Custom exceptions for the i18n system.

All errors are precondition failures detected at the call site: a value
needed for formatting could not be resolved from the call arguments or the
locale context defaults.
"""

from typing import Iterable, Optional


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            i18n.format_currency(12)
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class MissingCurrencyCodeError(I18nError):
    """Raised when currency formatting is requested without a currency code.

    Example:
        >>> I18n([], LocaleDetails(locale="en-US")).format_currency(1)
        Traceback (most recent call last):
        ...
        MissingCurrencyCodeError: No currency code provided. ...
    """

    pass


class MissingTimezoneError(I18nError):
    """Raised when date formatting is requested without a timezone."""

    pass


class MissingCountryError(I18nError):
    """Raised when a country-dependent lookup has no country code."""

    pass


class MissingTranslationError(I18nError):
    """Raised when a key is not found in any translation dictionary.

    Attributes:
        key: Fully scoped key that was looked up.
        locale: Locale of the context performing the lookup.
    """

    def __init__(self, key: str, locale: Optional[str] = None):
        self.key = key
        self.locale = locale
        message = f"Missing translation for key: {key}"
        if locale:
            message = f"{message} in locale: {locale}"
        super().__init__(message)


class MissingReplacementError(I18nError, ValueError):
    """Raised when a translation needs a replacement that was not provided.

    Attributes:
        replacement: Name of the missing replacement.
        available: Names of the replacements that were provided.
    """

    def __init__(self, replacement: str, available: Iterable[str] = ()):
        self.replacement = replacement
        self.available = list(available)
        super().__init__(
            f"No replacement found for key '{replacement}'. "
            f"The following replacements were passed: {self.available}"
        )
