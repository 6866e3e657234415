"""Tests for infrastructure.i18n.formatting module."""

from datetime import date, datetime
from decimal import Decimal

import pytest
import pytz

from infrastructure.i18n import formatting


class TestFormatNumber:
    """Tests for format_number()."""

    def test_decimal_defaults(self):
        assert formatting.format_number(1234.5, "en-US", {}) == "1,234.5"

    def test_decimal_caps_fraction_digits_at_three(self):
        assert formatting.format_number(1.23456, "en-US", {}) == "1.235"

    def test_maximum_fraction_digits(self):
        result = formatting.format_number(
            1234.56, "en-US", {"maximum_fraction_digits": 1}
        )
        assert result == "1,234.6"

    def test_minimum_fraction_digits(self):
        result = formatting.format_number(
            5, "en-US", {"minimum_fraction_digits": 2}
        )
        assert result == "5.00"

    def test_decimal_values(self):
        assert formatting.format_number(Decimal("0.5"), "en-US", {}) == "0.5"

    def test_without_grouping(self):
        result = formatting.format_number(1234.5, "en-US", {"use_grouping": False})
        assert result == "1234.5"

    def test_locale_separators(self):
        result = formatting.format_number(1234.5, "fr-FR", {})
        assert result.endswith("234,5")

    def test_currency(self):
        result = formatting.format_number(
            1234.5, "en-US", {"style": "currency", "currency": "USD"}
        )
        assert result == "$1,234.50"

    def test_foreign_currency_symbol(self):
        result = formatting.format_number(
            1234.5, "en-US", {"style": "currency", "currency": "CAD"}
        )
        assert result == "CA$1,234.50"

    def test_currency_uses_currency_digits(self):
        result = formatting.format_number(
            1234.4, "en-US", {"style": "currency", "currency": "JPY"}
        )
        assert result == "¥1,234"

    def test_currency_precision_override(self):
        result = formatting.format_number(
            1234.4,
            "en-US",
            {"style": "currency", "currency": "USD", "maximum_fraction_digits": 0},
        )
        assert result == "$1,234"

    def test_percent(self):
        assert formatting.format_number(0.256, "en-US", {"style": "percent"}) == "26%"

    def test_percent_with_fraction_digits(self):
        result = formatting.format_number(
            0.256, "en-US", {"style": "percent", "maximum_fraction_digits": 1}
        )
        assert result == "25.6%"

    def test_currency_without_code_raises(self):
        with pytest.raises(ValueError):
            formatting.format_number(1, "en-US", {"style": "currency"})

    def test_unknown_style_raises(self):
        with pytest.raises(ValueError):
            formatting.format_number(1, "en-US", {"style": "unit"})

    def test_conflicting_fraction_digits_raise(self):
        with pytest.raises(ValueError):
            formatting.format_number(
                1,
                "en-US",
                {"minimum_fraction_digits": 3, "maximum_fraction_digits": 1},
            )

    def test_locale_pattern_is_not_mutated(self):
        formatting.format_number(1.5, "en-US", {"minimum_fraction_digits": 4})
        assert formatting.format_number(1.5, "en-US", {}) == "1.5"

    @pytest.mark.parametrize(
        "options",
        [
            {"currency_display": "code"},
            {"minimum_integer_digits": 2},
            {"maximumFractionDigits": 1},
        ],
    )
    def test_unknown_option_raises(self, options):
        with pytest.raises(ValueError, match="Unsupported options"):
            formatting.format_number(5, "en-US", options)


class TestToDatetime:
    """Tests for to_datetime()."""

    def test_naive_datetime_is_utc(self):
        result = formatting.to_datetime(datetime(2024, 1, 15, 8, 0))
        assert result.tzinfo is not None
        assert result.utcoffset().total_seconds() == 0

    def test_date_is_midnight_utc(self):
        result = formatting.to_datetime(date(2024, 1, 15))
        assert result == datetime(2024, 1, 15, tzinfo=pytz.utc)

    def test_aware_datetime_unchanged(self):
        value = pytz.timezone("America/Toronto").localize(datetime(2024, 1, 15, 8))
        assert formatting.to_datetime(value) is value


class TestResolveDatePattern:
    """Tests for resolve_date_pattern()."""

    def test_exact_skeleton(self):
        pattern = formatting.resolve_date_pattern(
            {"month": "short", "day": "numeric"}, "en-US"
        )
        assert pattern == "MMM d"

    def test_adjusts_month_width(self):
        pattern = formatting.resolve_date_pattern(
            {"month": "long", "day": "numeric", "year": "numeric"}, "en-US"
        )
        assert pattern == "MMMM d, y"

    def test_adjusts_weekday_width(self):
        pattern = formatting.resolve_date_pattern({"weekday": "long"}, "en-US")
        assert pattern.count("c") == 4 or pattern.count("E") == 4

    def test_hour_cycle_follows_locale(self):
        assert "h" in formatting.resolve_date_pattern({"hour": "numeric"}, "en-US")
        assert "H" in formatting.resolve_date_pattern({"hour": "numeric"}, "fr-FR")

    def test_hour12_overrides_locale(self):
        pattern = formatting.resolve_date_pattern(
            {"hour": "2-digit", "minute": "2-digit", "hour12": False}, "en-US"
        )
        assert pattern == "HH:mm"

    def test_unsupported_selector_raises(self):
        with pytest.raises(ValueError):
            formatting.resolve_date_pattern({"month": "tiny"}, "en-US")

    def test_quoted_literal_is_not_an_hour_field(self):
        """fr-CA writes times as "HH 'h' mm"."""
        pattern = formatting.resolve_date_pattern(
            {"hour": "2-digit", "minute": "2-digit"}, "fr-CA"
        )
        assert "H" in pattern
        assert "a" not in pattern

    def test_unknown_option_raises(self):
        with pytest.raises(ValueError, match="Unsupported options"):
            formatting.resolve_date_pattern({"timeZone": "UTC"}, "en-US")


class TestFormatDate:
    """Tests for format_date()."""

    moment = datetime(2024, 1, 15, 8, 0, tzinfo=pytz.utc)

    def test_default_fields(self):
        result = formatting.format_date(self.moment, "en-US", {"time_zone": "UTC"})
        assert result == "1/15/2024"

    def test_short_month_day_year(self):
        result = formatting.format_date(
            self.moment,
            "en-US",
            {"time_zone": "UTC", "month": "short", "day": "numeric", "year": "numeric"},
        )
        assert result == "Jan 15, 2024"

    def test_long_weekday(self):
        result = formatting.format_date(
            self.moment, "en-US", {"time_zone": "UTC", "weekday": "long"}
        )
        assert result == "Monday"

    def test_two_digit_time(self):
        result = formatting.format_date(
            self.moment,
            "en-US",
            {"time_zone": "UTC", "hour": "2-digit", "minute": "2-digit"},
        )
        assert result.startswith("08:00")
        assert result.endswith("AM")

    def test_24_hour_time(self):
        result = formatting.format_date(
            self.moment,
            "en-US",
            {"time_zone": "UTC", "hour": "2-digit", "minute": "2-digit", "hour12": False},
        )
        assert result == "08:00"

    def test_24_hour_locale_with_quoted_hour_literal(self):
        result = formatting.format_date(
            self.moment,
            "fr-CA",
            {"time_zone": "UTC", "hour": "2-digit", "minute": "2-digit"},
        )
        assert result == "08 h 00"

    def test_converts_to_time_zone(self):
        result = formatting.format_date(
            self.moment,
            "en-US",
            {
                "time_zone": "America/Toronto",
                "hour": "2-digit",
                "minute": "2-digit",
                "hour12": False,
            },
        )
        assert result == "03:00"

    def test_time_zone_moves_calendar_day(self):
        result = formatting.format_date(
            datetime(2024, 1, 15, 2, 0, tzinfo=pytz.utc),
            "en-US",
            {"time_zone": "America/Toronto"},
        )
        assert result == "1/14/2024"

    def test_localized_month_names(self):
        result = formatting.format_date(
            self.moment,
            "fr-FR",
            {"time_zone": "UTC", "month": "long", "day": "numeric", "year": "numeric"},
        )
        assert result == "15 janvier 2024"

    def test_naive_datetime_taken_as_utc(self):
        result = formatting.format_date(
            datetime(2024, 1, 15, 8, 0),
            "en-US",
            {"time_zone": "UTC", "hour": "2-digit", "minute": "2-digit", "hour12": False},
        )
        assert result == "08:00"

    def test_requires_time_zone(self):
        with pytest.raises(ValueError):
            formatting.format_date(self.moment, "en-US", {})

    def test_unknown_time_zone_raises(self):
        with pytest.raises(pytz.UnknownTimeZoneError):
            formatting.format_date(self.moment, "en-US", {"time_zone": "Mars/Base"})
