"""
Tests for date_utils module.
"""
from __future__ import annotations

import pytest
from datetime import date as _date, timedelta

from road_registry.date_utils import (
    add_years,
    calculate_age,
    format_date,
    in_window,
    parse_date,
    sub_years,
    try_parse_date,
    window_start,
)


class TestParseDate:
    """Tests for parse_date and format_date."""

    def test_parse_valid(self):
        assert parse_date("15-11-1990") == _date(1990, 11, 15)

    def test_format(self):
        assert format_date(_date(2024, 1, 5)) == "05-01-2024"

    @pytest.mark.parametrize("text", ["2024-01-01", "5-1-2024", "31-04-2024", "abc"])
    def test_parse_invalid_raises(self, text):
        with pytest.raises(ValueError):
            parse_date(text)

    def test_try_parse_returns_none(self):
        assert try_parse_date("2024-01-01") is None
        assert try_parse_date(None) is None


class TestYearArithmetic:
    def test_add_years(self):
        assert add_years(_date(1990, 6, 15), 25) == _date(2015, 6, 15)

    def test_add_years_leap_day(self):
        """Feb 29 clamps to Feb 28 in a non-leap target year."""
        assert add_years(_date(2000, 2, 29), 1) == _date(2001, 2, 28)

    def test_sub_years_leap_day(self):
        assert sub_years(_date(2024, 2, 29), 2) == _date(2022, 2, 28)
        assert sub_years(_date(2024, 2, 29), 4) == _date(2020, 2, 29)


class TestCalculateAge:
    """Tests for calculate_age."""

    def test_birthday_passed(self):
        assert calculate_age(_date(1990, 3, 1), _date(2025, 6, 1)) == 35

    def test_birthday_not_yet_reached(self):
        assert calculate_age(_date(1990, 11, 15), _date(2025, 6, 1)) == 34

    def test_on_birthday(self):
        assert calculate_age(_date(2004, 6, 1), _date(2025, 6, 1)) == 21

    def test_day_before_birthday(self):
        assert calculate_age(_date(2004, 6, 2), _date(2025, 6, 1)) == 20

    def test_leap_day_birth(self):
        assert calculate_age(_date(2000, 2, 29), _date(2001, 2, 28)) == 0
        assert calculate_age(_date(2000, 2, 29), _date(2001, 3, 1)) == 1

    def test_monotonic_in_as_of(self):
        """Age never decreases as the reference date moves forward."""
        birth = _date(2000, 2, 29)
        previous = calculate_age(birth, birth)
        day = birth
        for _ in range(3 * 366):
            day += timedelta(days=1)
            age = calculate_age(birth, day)
            assert age >= previous
            previous = age
        assert previous == 3


class TestWindow:
    """Tests for window_start and in_window."""

    def test_window_start_two_years(self):
        assert window_start(_date(2024, 3, 1)) == _date(2022, 3, 1)

    def test_window_start_custom_years(self):
        assert window_start(_date(2024, 3, 1), years=3) == _date(2021, 3, 1)

    def test_in_window_inclusive_lower_bound(self):
        start = _date(2022, 3, 1)
        assert in_window(start, start)
        assert not in_window(_date(2022, 2, 28), start)
        assert in_window(_date(2030, 1, 1), start)
