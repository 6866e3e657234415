"""Relative, human friendly phrasing of dates.

Dates from today and yesterday are compared by calendar day in the
formatting timezone; the finer minute/hour/day/week/year thresholds compare
raw elapsed time. The two can disagree around midnight, and the calendar
check always runs first.
"""

from datetime import datetime, timedelta
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Dict

import pytz

from infrastructure.i18n.constants import DATE_STYLE, DateStyle
from infrastructure.i18n.formatting import DateLike, to_datetime

if TYPE_CHECKING:
    from infrastructure.i18n.i18n import I18n


class TimeUnit(IntEnum):
    """Length of a time unit in milliseconds."""

    SECOND = 1000
    MINUTE = 60_000
    HOUR = 3_600_000
    DAY = 86_400_000
    WEEK = 604_800_000
    YEAR = 31_536_000_000


def elapsed_ms(date: datetime, now: datetime) -> float:
    """Milliseconds elapsed from date until now."""
    return (now - date) / timedelta(milliseconds=1)


def is_less_than(unit: TimeUnit, date: datetime, now: datetime) -> bool:
    return elapsed_ms(date, now) < unit


def get_date_diff(unit: TimeUnit, date: datetime, now: datetime) -> int:
    """Whole units elapsed from date until now, rounded down."""
    return int(elapsed_ms(date, now) // unit)


def is_today(date: datetime, now: datetime, time_zone: str) -> bool:
    tz = pytz.timezone(time_zone)
    return date.astimezone(tz).date() == now.astimezone(tz).date()


def is_yesterday(date: datetime, now: datetime, time_zone: str) -> bool:
    tz = pytz.timezone(time_zone)
    yesterday = now.astimezone(tz).date() - timedelta(days=1)
    return date.astimezone(tz).date() == yesterday


def humanize_date(
    i18n: "I18n",
    date: DateLike,
    now: datetime,
    time_zone: str,
    options: Dict[str, Any],
) -> str:
    """Phrase a date as "today", "yesterday" or a long calendar date.

    Args:
        i18n: Locale context used for translations and formatting.
        date: Date to phrase.
        now: Reference time, sampled once by the caller.
        time_zone: Timezone of the calendar day comparison.
        options: Date options forwarded to the formatter.

    Returns:
        The humanized date.
    """
    moment = to_datetime(date)

    if is_today(moment, now, time_zone):
        return i18n.translate("today")
    if is_yesterday(moment, now, time_zone):
        return i18n.translate("yesterday")
    return i18n.format_date(moment, **{**options, **DATE_STYLE[DateStyle.HUMANIZE]})


def humanize_date_with_time(
    i18n: "I18n",
    date: DateLike,
    now: datetime,
    time_zone: str,
    options: Dict[str, Any],
) -> str:
    """Phrase a date relative to now, including its time of day.

    Decision order, first match wins:
    today and under a minute ago -> "lessThanOneMinuteAgo";
    today and under an hour ago -> "lessThanOneHourAgo" with minutes;
    today and under a day ago -> time of day;
    today -> "today";
    yesterday -> "yesterdayAt" with time;
    under a week ago -> "dayOfWeekAt" with dayOfWeek and time;
    under a year ago -> "monthAndDayAt" with date and time;
    otherwise the short month, day and year.

    Args:
        i18n: Locale context used for translations and formatting.
        date: Date to phrase.
        now: Reference time, sampled once by the caller.
        time_zone: Timezone of the calendar day comparison.
        options: Date options forwarded to the formatter.

    Returns:
        The humanized date.
    """
    moment = to_datetime(date)

    def time_of_day() -> str:
        return i18n.format_date(moment, **{**options, **DATE_STYLE[DateStyle.TIME]})

    if is_today(moment, now, time_zone):
        if is_less_than(TimeUnit.MINUTE, moment, now):
            return i18n.translate("lessThanOneMinuteAgo")
        if is_less_than(TimeUnit.HOUR, moment, now):
            return i18n.translate(
                "lessThanOneHourAgo",
                {"minutes": get_date_diff(TimeUnit.MINUTE, moment, now)},
            )
        if is_less_than(TimeUnit.DAY, moment, now):
            return time_of_day()
        return i18n.translate("today")

    if is_yesterday(moment, now, time_zone):
        return i18n.translate("yesterdayAt", {"time": time_of_day()})

    if is_less_than(TimeUnit.WEEK, moment, now):
        return i18n.translate(
            "dayOfWeekAt",
            {
                "dayOfWeek": i18n.format_date(moment, **{**options, "weekday": "long"}),
                "time": time_of_day(),
            },
        )

    if is_less_than(TimeUnit.YEAR, moment, now):
        return i18n.translate(
            "monthAndDayAt",
            {
                "date": i18n.format_date(
                    moment, **{**options, "month": "short", "day": "numeric"}
                ),
                "time": time_of_day(),
            },
        )

    return i18n.format_date(
        moment,
        **{**options, **DATE_STYLE[DateStyle.HUMANIZE_WITH_TIME]},
    )
