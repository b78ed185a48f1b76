"""Tests for Gregorian calendar helpers."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from ldmlformat.calendar import (
    add_days,
    civil_from_days,
    day_of_year,
    days_from_civil,
    format_offset,
    ms_since_midnight,
    start_of,
    weekday,
)
from ldmlformat.types import Instant


# =============================================================================
# Day numbers
# =============================================================================


class TestDayNumbers:
    """Test proleptic Gregorian day numbers."""

    def test_epoch(self):
        assert days_from_civil(1970, 1, 1) == 0

    def test_after_leap_day(self):
        assert days_from_civil(2000, 3, 1) == 11017

    def test_before_epoch(self):
        assert days_from_civil(1969, 12, 31) == -1

    def test_matches_datetime_ordinal(self):
        """Day numbers agree with date.toordinal() within datetime's range."""
        epoch = date(1970, 1, 1).toordinal()
        for d in (date(1, 1, 1), date(1600, 2, 29), date(9999, 12, 31)):
            assert days_from_civil(d.year, d.month, d.day) == d.toordinal() - epoch

    def test_inverse_handles_year_zero_and_negative(self):
        for ymd in ((0, 2, 29), (-44, 3, 15), (12345, 6, 7)):
            assert civil_from_days(days_from_civil(*ymd)) == ymd


# =============================================================================
# Weekday and day of year
# =============================================================================


class TestWeekday:
    """Test weekday helpers."""

    def test_absolute_weekday(self):
        assert Instant(2023, 7, 4).weekday == 2  # Tuesday
        assert Instant(2023, 1, 1).weekday == 0  # Sunday

    def test_year_zero(self):
        assert Instant(0, 1, 1).weekday == 6  # Saturday

    def test_relative_to_first_day(self):
        tuesday = Instant(2023, 7, 4)
        assert weekday(tuesday, 0) == 2
        assert weekday(tuesday, 1) == 1
        assert weekday(Instant(2023, 1, 1), 1) == 6

    def test_day_of_year_is_zero_based(self):
        assert day_of_year(Instant(2023, 1, 1)) == 0
        assert day_of_year(Instant(2024, 12, 31)) == 365
        assert day_of_year(Instant(2023, 12, 31)) == 364


# =============================================================================
# Derived instants
# =============================================================================


class TestDerivedInstants:
    """Test functions returning new instants."""

    def test_start_of_year(self):
        value = Instant(2023, 7, 4, 13, 5, 9, 567, utc_offset=60)
        assert start_of(value, "year") == Instant(2023, 1, 1, utc_offset=60)

    def test_start_of_month(self):
        assert start_of(Instant(2023, 7, 4, 13), "month") == Instant(2023, 7, 1)

    def test_start_of_day(self):
        assert start_of(Instant(2023, 7, 4, 13, 5), "day") == Instant(2023, 7, 4)

    def test_start_of_unknown_unit(self):
        with pytest.raises(ValueError):
            start_of(Instant(2023, 7, 4), "week")

    def test_add_days_crosses_leap_day(self):
        assert add_days(Instant(2024, 2, 28), 1) == Instant(2024, 2, 29)
        assert add_days(Instant(2024, 2, 28), 2) == Instant(2024, 3, 1)

    def test_add_days_crosses_year(self):
        result = add_days(Instant(2023, 12, 31, 10), 6)
        assert result == Instant(2024, 1, 6, 10)

    def test_add_days_leaves_input_untouched(self):
        original = Instant(2023, 12, 31)
        add_days(original, -400)
        assert original == Instant(2023, 12, 31)

    def test_ms_since_midnight(self):
        assert ms_since_midnight(Instant(2024, 1, 1, 1, 2, 3, 4)) == 3723004
        assert ms_since_midnight(Instant(2024, 1, 1)) == 0


# =============================================================================
# Offsets
# =============================================================================


class TestFormatOffset:
    """Test hour-format template rendering."""

    def test_negative_side(self):
        assert format_offset(Instant(2024, 1, 1, utc_offset=-330), "+HH:mm;-HH:mm") == "-05:30"

    def test_positive_side(self):
        assert format_offset(Instant(2024, 1, 1, utc_offset=90), "+HHmm;-HHmm") == "+0130"

    def test_single_hour_letter(self):
        assert format_offset(Instant(2024, 1, 1, utc_offset=345), "+H;-H") == "+5"

    def test_single_minute_letter(self):
        assert format_offset(Instant(2024, 1, 1, utc_offset=65), "+H:m;-H:m") == "+1:5"

    def test_zero_uses_positive_side(self):
        assert format_offset(Instant(2024, 1, 1), "+HH:mm;-HH:mm") == "+00:00"

    def test_time_separator(self):
        result = format_offset(Instant(2024, 1, 1, utc_offset=90), "+HH:mm;-HH:mm", ".")
        assert result == "+01.30"


# =============================================================================
# Instant construction
# =============================================================================


class TestInstant:
    """Test Instant construction."""

    def test_from_aware_datetime(self):
        tz = timezone(timedelta(hours=-5, minutes=-30))
        value = Instant.from_datetime(datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=tz))
        assert value == Instant(2024, 1, 2, 3, 4, 5, 123, utc_offset=-330)

    def test_from_naive_datetime(self):
        assert Instant.from_datetime(datetime(2024, 1, 2, 3)).utc_offset == 0

    def test_from_date(self):
        assert Instant.from_datetime(date(2024, 1, 2)) == Instant(2024, 1, 2)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"month": 13},
            {"day": 0},
            {"hour": 24},
            {"millisecond": 1000},
        ],
    )
    def test_rejects_out_of_range_fields(self, kwargs):
        values = {"year": 2024, "month": 1, "day": 1, **kwargs}
        with pytest.raises(ValueError):
            Instant(**values)

    @pytest.mark.parametrize(
        "year, month, day",
        [(2023, 2, 29), (2023, 2, 31), (2023, 4, 31), (1900, 2, 29)],
    )
    def test_rejects_day_past_end_of_month(self, year, month, day):
        with pytest.raises(ValueError, match="out of range"):
            Instant(year, month, day)

    def test_accepts_leap_day(self):
        assert Instant(2024, 2, 29).day == 29
        assert Instant(2000, 2, 29).weekday == 2
