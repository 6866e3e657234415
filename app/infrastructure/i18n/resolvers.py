"""Locale resolution helpers.

Extracts subtags from IETF BCP 47 tags and resolves them to Babel locales
for the formatting and plural rule lookups.
"""

from typing import Optional

from babel import Locale as BabelLocale
from babel.core import parse_locale

SEPARATOR = "-"


def _normalize(locale: str) -> str:
    return locale.replace("_", SEPARATOR)


def language_from_locale(locale: str) -> str:
    """Get the language subtag of a locale (e.g., "en" from "en-US").

    Args:
        locale: BCP 47 language tag.

    Returns:
        Lower case language code.

    Raises:
        ValueError: If the tag cannot be parsed.
    """
    return parse_locale(_normalize(locale), sep=SEPARATOR)[0].lower()


def region_from_locale(locale: str) -> Optional[str]:
    """Get the region subtag of a locale (e.g., "US" from "en-US").

    Args:
        locale: BCP 47 language tag.

    Returns:
        Upper case region code, or None if the tag has no region.

    Raises:
        ValueError: If the tag cannot be parsed.
    """
    region = parse_locale(_normalize(locale), sep=SEPARATOR)[1]
    return region.upper() if region else None


def resolve_babel_locale(locale: str) -> BabelLocale:
    """Resolve a BCP 47 tag to the Babel locale holding its CLDR data.

    Args:
        locale: BCP 47 language tag.

    Returns:
        Babel Locale instance.

    Raises:
        babel.UnknownLocaleError: If CLDR has no data for the locale.
    """
    return BabelLocale.parse(_normalize(locale), sep=SEPARATOR)
