"""Number and date formatting primitives backed by Babel.

Accepts option bundles shaped like the ECMAScript Intl API, in snake_case
(e.g. maximum_fraction_digits, time_zone, month="short"), and renders them
with the CLDR data Babel ships for the locale.
"""

import copy
from decimal import Decimal
from datetime import date as date_type, datetime, time
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple, Union

import pytz
from babel import Locale as BabelLocale
from babel.dates import (
    format_datetime,
    match_skeleton,
    tokenize_pattern,
    untokenize_pattern,
)
from babel.numbers import NumberPattern, get_currency_precision

from infrastructure.i18n.resolvers import resolve_babel_locale

Number = Union[int, float, Decimal]
DateLike = Union[datetime, date_type]

DECIMAL = "decimal"
CURRENCY = "currency"
PERCENT = "percent"

NUMBER_STYLES = (DECIMAL, CURRENCY, PERCENT)

# Intl field selectors -> CLDR skeleton symbols, in canonical skeleton order.
# The hour symbol is a placeholder resolved against the locale's hour cycle.
DATE_FIELDS: Dict[str, Dict[str, str]] = {
    "era": {"narrow": "GGGGG", "short": "G", "long": "GGGG"},
    "year": {"numeric": "y", "2-digit": "yy"},
    "month": {
        "numeric": "M",
        "2-digit": "MM",
        "narrow": "MMMMM",
        "short": "MMM",
        "long": "MMMM",
    },
    "weekday": {"narrow": "EEEEE", "short": "EEE", "long": "EEEE"},
    "day": {"numeric": "d", "2-digit": "dd"},
    "hour": {"numeric": "j", "2-digit": "jj"},
    "minute": {"numeric": "m", "2-digit": "mm"},
    "second": {"numeric": "s", "2-digit": "ss"},
    "time_zone_name": {"short": "z", "long": "zzzz"},
}

DEFAULT_DATE_FIELDS = {"year": "numeric", "month": "numeric", "day": "numeric"}

NUMBER_OPTIONS = frozenset(
    {
        "style",
        "currency",
        "minimum_fraction_digits",
        "maximum_fraction_digits",
        "use_grouping",
    }
)
DATE_OPTIONS = frozenset({"time_zone", "hour12", *DATE_FIELDS})

# Pattern symbols that render the same calendar field
_FIELD_FAMILIES = {
    "E": "E",
    "c": "E",
    "e": "E",
    "M": "M",
    "L": "M",
    "h": "h",
    "H": "h",
    "K": "h",
    "k": "h",
}


def _check_options(options: Mapping[str, Any], supported: FrozenSet[str]) -> None:
    unknown = sorted(set(options) - supported)
    if unknown:
        raise ValueError(
            f"Unsupported options: {', '.join(unknown)} "
            f"(supported: {', '.join(sorted(supported))})"
        )


def _number_pattern(babel_locale: BabelLocale, style: str) -> NumberPattern:
    if style == CURRENCY:
        pattern = babel_locale.currency_formats["standard"]
    elif style == PERCENT:
        pattern = babel_locale.percent_formats[None]
    else:
        pattern = babel_locale.decimal_formats[None]
    # Locale patterns are shared CLDR data
    return copy.copy(pattern)


def _fraction_digits(
    defaults: Tuple[int, int],
    minimum: Optional[int],
    maximum: Optional[int],
) -> Tuple[int, int]:
    if minimum is None and maximum is None:
        return defaults
    if minimum is None:
        minimum = min(defaults[0], maximum)
    if maximum is None:
        maximum = max(defaults[1], minimum)
    if minimum > maximum:
        raise ValueError(
            f"minimum_fraction_digits ({minimum}) exceeds "
            f"maximum_fraction_digits ({maximum})"
        )
    return minimum, maximum


def format_number(amount: Number, locale: str, options: Mapping[str, Any]) -> str:
    """Format a number with Intl-style options.

    Args:
        amount: Value to format.
        locale: BCP 47 tag of the locale.
        options: style ("decimal", "currency" or "percent"), currency,
            minimum_fraction_digits, maximum_fraction_digits and
            use_grouping. None values are ignored.

    Returns:
        Localized number string.

    Raises:
        ValueError: If an option or the style is unknown, a currency style
            has no currency, or the fraction digit bounds conflict.
    """
    _check_options(options, NUMBER_OPTIONS)
    style = options.get("style") or DECIMAL
    if style not in NUMBER_STYLES:
        raise ValueError(f"Unsupported number style: {style}")

    currency = options.get("currency")
    if style == CURRENCY and not currency:
        raise ValueError("A currency code is required with the currency style")

    babel_locale = resolve_babel_locale(locale)
    pattern = _number_pattern(babel_locale, style)

    defaults = pattern.frac_prec
    if style == CURRENCY:
        precision = get_currency_precision(currency)
        defaults = (precision, precision)
    pattern.frac_prec = _fraction_digits(
        defaults,
        options.get("minimum_fraction_digits"),
        options.get("maximum_fraction_digits"),
    )

    use_grouping = options.get("use_grouping")
    return pattern.apply(
        amount,
        babel_locale,
        currency=currency if style == CURRENCY else None,
        currency_digits=False,
        decimal_quantization=True,
        group_separator=True if use_grouping is None else bool(use_grouping),
    )


def to_datetime(value: DateLike) -> datetime:
    """Normalize a date or datetime to an aware datetime.

    Naive datetimes are taken as UTC; dates as midnight UTC.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())
    if value.tzinfo is None:
        value = value.replace(tzinfo=pytz.utc)
    return value


def _hour_symbol(babel_locale: BabelLocale, hour12: Optional[bool]) -> str:
    if hour12 is None:
        # Quoted literals such as fr-CA's 'h' are not hour fields
        short_time = babel_locale.time_formats["short"].pattern
        hour12 = any(
            kind == "field" and value[0] in "hK"
            for kind, value in tokenize_pattern(short_time)
        )
    return "h" if hour12 else "H"


def build_skeleton(options: Mapping[str, Any], babel_locale: BabelLocale) -> str:
    """Translate Intl field selectors into a CLDR date skeleton.

    Args:
        options: Intl-style date options; only field selectors and hour12
            are considered. Without any field selector the date defaults to
            numeric year, month and day.
        babel_locale: Locale whose hour cycle resolves the hour symbol.

    Returns:
        Skeleton string (e.g., "yMMMd").

    Raises:
        ValueError: If an option is unknown or a field selector has an
            unsupported value.
    """
    _check_options(options, DATE_OPTIONS)
    selected = {
        field: options[field]
        for field in DATE_FIELDS
        if options.get(field) is not None
    }
    if not selected:
        selected = DEFAULT_DATE_FIELDS

    hour = _hour_symbol(babel_locale, options.get("hour12"))
    skeleton = []
    for field, value in selected.items():
        try:
            symbols = DATE_FIELDS[field][value]
        except KeyError as e:
            raise ValueError(f"Unsupported value for {field}: {value}") from e
        skeleton.append(symbols.replace("j", hour))
    return "".join(skeleton)


def _adjust_field_widths(pattern: str, skeleton: str) -> str:
    requested = {}
    for kind, value in tokenize_pattern(skeleton):
        if kind == "field":
            symbol, width = value
            requested[_FIELD_FAMILIES.get(symbol, symbol)] = width

    tokens = []
    for kind, value in tokenize_pattern(pattern):
        if kind == "field":
            symbol, width = value
            family = _FIELD_FAMILIES.get(symbol, symbol)
            wanted = requested.get(family)
            # Month is numeric below three symbols and text from three on
            if wanted and (family != "M" or (width >= 3) == (wanted >= 3)):
                value = (symbol, wanted)
        tokens.append((kind, value))
    return untokenize_pattern(tokens)


def resolve_date_pattern(options: Mapping[str, Any], locale: str) -> str:
    """Resolve Intl-style options to the locale's closest date pattern.

    Args:
        options: Intl-style date options.
        locale: BCP 47 tag of the locale.

    Returns:
        CLDR date pattern (e.g., "MMM d, y" for en-US short dates).
    """
    babel_locale = resolve_babel_locale(locale)
    skeleton = build_skeleton(options, babel_locale)
    skeletons = babel_locale.datetime_skeletons
    matched = match_skeleton(skeleton, skeletons, allow_different_fields=True)
    if matched is None:
        return skeleton
    return _adjust_field_widths(skeletons[matched].pattern, skeleton)


def format_date(value: DateLike, locale: str, options: Mapping[str, Any]) -> str:
    """Format a date with Intl-style options.

    Args:
        value: Date or datetime to format.
        locale: BCP 47 tag of the locale.
        options: time_zone (IANA name) plus Intl field selectors
            (weekday, era, year, month, day, hour, minute, second,
            time_zone_name) and hour12.

    Returns:
        Localized date string.

    Raises:
        ValueError: If no time_zone is given or a selector is unsupported.
        pytz.UnknownTimeZoneError: If the time_zone is unknown.
    """
    time_zone = options.get("time_zone")
    if not time_zone:
        raise ValueError("A time_zone is required to format dates")

    pattern = resolve_date_pattern(options, locale)
    return format_datetime(
        to_datetime(value),
        pattern,
        tzinfo=pytz.timezone(time_zone),
        locale=resolve_babel_locale(locale),
    )
