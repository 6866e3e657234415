"""Constants for the i18n system.

Named date style presets, week start days by country, and the languages
written right to left.
"""

from enum import Enum, IntEnum
from typing import Any, Dict


class DateStyle(str, Enum):
    """Named date formatting presets."""

    LONG = "long"
    SHORT = "short"
    HUMANIZE = "humanize"
    HUMANIZE_WITH_TIME = "humanize_with_time"
    TIME = "time"


# Humanize styles are resolved by the humanizer; their bundles are used for
# dates too far in the past to be phrased relatively.
DATE_STYLE: Dict[DateStyle, Dict[str, Any]] = {
    DateStyle.LONG: {
        "weekday": "long",
        "month": "long",
        "day": "2-digit",
        "year": "numeric",
    },
    DateStyle.SHORT: {
        "month": "short",
        "day": "numeric",
        "year": "numeric",
    },
    DateStyle.HUMANIZE: {
        "month": "long",
        "day": "numeric",
        "year": "numeric",
    },
    DateStyle.HUMANIZE_WITH_TIME: {
        "month": "short",
        "day": "numeric",
        "year": "numeric",
    },
    DateStyle.TIME: {
        "hour": "2-digit",
        "minute": "2-digit",
    },
}


class Weekdays(IntEnum):
    """Days of the week, numbered from Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


DEFAULT_WEEK_START_DAY = Weekdays.SUNDAY

_SATURDAY_START = [
    "AE", "AF", "BH", "DJ", "DZ", "EG", "IQ", "IR", "JO", "KW", "LY", "OM",
    "QA", "SD", "SY",
]  # fmt: skip

_MONDAY_START = [
    "AD", "AI", "AL", "AM", "AR", "AT", "AU", "AX", "AZ", "BA", "BE", "BG",
    "BM", "BN", "BY", "CH", "CL", "CM", "CN", "CR", "CY", "CZ", "DE", "DK",
    "EC", "EE", "ES", "FI", "FJ", "FO", "FR", "GB", "GE", "GF", "GP", "GR",
    "HR", "HU", "IE", "IS", "IT", "KG", "KZ", "LB", "LI", "LK", "LT", "LU",
    "LV", "MC", "MD", "ME", "MK", "MN", "MQ", "MY", "NL", "NO", "NZ", "PL",
    "RE", "RO", "RS", "RU", "SE", "SI", "SK", "SM", "TJ", "TM", "TR", "UA",
    "UY", "UZ", "VA", "VN", "XK",
]  # fmt: skip

WEEK_START_DAYS: Dict[str, Weekdays] = {
    **{country: Weekdays.SATURDAY for country in _SATURDAY_START},
    **{country: Weekdays.MONDAY for country in _MONDAY_START},
    "MV": Weekdays.FRIDAY,
}

RTL_LANGUAGES = frozenset(
    [
        "ae",
        "ar",
        "arc",
        "bcc",
        "bqi",
        "ckb",
        "dv",
        "fa",
        "glk",
        "he",
        "ku",
        "mzn",
        "nqo",
        "pnb",
        "ps",
        "sd",
        "ug",
        "ur",
        "yi",
    ]
)
