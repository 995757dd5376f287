# Project: weather-window
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Tests for window.py — resolve_day_of_year, normalize_location,
select_window, day_window."""

import copy
import pytest
from datetime import date, datetime

from weather_window.window import (
    as_date,
    day_window,
    days_in_year,
    normalize_location,
    resolve_day_of_year,
    select_window,
)


def make_record(doy, location="new_york", year=2020):
    return {"location": location, "year": year, "doy": doy, "temp_max": 20.0, "temp_min": 10.0}


# ---------------------------------------------------------------------------
# resolve_day_of_year
# ---------------------------------------------------------------------------

class TestResolveDayOfYear:

    def test_jan_first_is_one(self):
        assert resolve_day_of_year(date(2023, 1, 1)) == 1

    def test_jan_second_is_two(self):
        assert resolve_day_of_year(date(2023, 1, 2)) == 2

    def test_march_first_leap_year(self):
        """Elapsed-day counting gives 61 in a leap year (Feb has 29 days)."""
        assert resolve_day_of_year(date(2024, 3, 1)) == 61

    def test_march_first_common_year(self):
        assert resolve_day_of_year(date(2023, 3, 1)) == 60

    def test_dec_31_leap_year(self):
        assert resolve_day_of_year(date(2024, 12, 31)) == 366

    def test_dec_31_common_year(self):
        assert resolve_day_of_year(date(2023, 12, 31)) == 365

    def test_iso_string(self):
        assert resolve_day_of_year("2023-04-10") == 100

    def test_datetime_ignores_time(self):
        assert resolve_day_of_year(datetime(2023, 2, 1, 23, 59)) == 32

    def test_matches_timetuple(self):
        """Same convention as date.timetuple().tm_yday for every day of a year."""
        d = date(2024, 1, 1)
        while d.year == 2024:
            assert resolve_day_of_year(d) == d.timetuple().tm_yday
            d = date.fromordinal(d.toordinal() + 1)

    def test_invalid_string_raises(self):
        with pytest.raises(ValueError):
            resolve_day_of_year("2023-02-30")


# ---------------------------------------------------------------------------
# as_date / days_in_year
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("value", ["2023-04-10", " 2023-04-10 ", date(2023, 4, 10), datetime(2023, 4, 10, 18, 30)])
def test_as_date(value):
    assert as_date(value) == date(2023, 4, 10)


def test_as_date_invalid_string_raises():
    with pytest.raises(ValueError):
        as_date("10/04/2023")


@pytest.mark.parametrize("year, expected", [(2022, 365), (2024, 366), (1900, 365), (2000, 366), (None, 366)])
def test_days_in_year(year, expected):
    assert days_in_year(year) == expected


# ---------------------------------------------------------------------------
# normalize_location
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("raw", ["new_york", "New York", "NEW_YORK", "  new   york "])
def test_normalize_location(raw):
    assert normalize_location(raw) == "new york"


# ---------------------------------------------------------------------------
# select_window
# ---------------------------------------------------------------------------

class TestSelectWindow:

    def setup_method(self):
        self.records = [make_record(doy) for doy in (93, 94, 95, 100, 105, 106, 107)]

    def test_inclusive_bounds(self):
        """doy 95 and 105 are inside a ±5 window around 100; 94 and 106 are not."""
        selected = select_window(self.records, "new_york", 100, 5)
        assert [r["doy"] for r in selected] == [95, 100, 105]

    def test_default_tolerance_is_five(self):
        selected = select_window(self.records, "new_york", 100)
        assert [r["doy"] for r in selected] == [95, 100, 105]

    def test_zero_tolerance_exact_day(self):
        selected = select_window(self.records, "new_york", 100, 0)
        assert [r["doy"] for r in selected] == [100]

    def test_location_normalisation(self):
        """Records tagged 'new_york' must match a query for 'New York'."""
        selected = select_window(self.records, "New York", 100, 5)
        assert len(selected) == 3

    def test_other_locations_excluded(self):
        records = self.records + [make_record(100, location="paris")]
        selected = select_window(records, "new_york", 100, 5)
        assert all(r["location"] == "new_york" for r in selected)

    def test_string_doy_is_parsed(self):
        records = [make_record("100"), make_record("abc"), make_record(None)]
        selected = select_window(records, "new_york", 100, 0)
        assert len(selected) == 1

    def test_input_is_not_mutated(self):
        before = copy.deepcopy(self.records)
        selected = select_window(self.records, "new_york", 100, 5)
        assert self.records == before
        assert selected is not self.records

    def test_returns_new_list_even_when_everything_matches(self):
        selected = select_window(self.records, "new_york", 100, 50)
        assert selected == self.records
        assert selected is not self.records

    def test_no_match_returns_empty_list(self):
        assert select_window(self.records, "tokyo", 100, 5) == []


class TestYearBoundary:

    def setup_method(self):
        self.records = [make_record(doy) for doy in (1, 3, 7, 8, 360, 364, 365, 366)]

    def test_window_does_not_wrap_by_default(self):
        """Near Jan 1 the previous December is not picked up."""
        selected = select_window(self.records, "new_york", 2, 5)
        assert [r["doy"] for r in selected] == [1, 3, 7]

    def test_window_near_year_end_does_not_wrap_by_default(self):
        selected = select_window(self.records, "new_york", 365, 5)
        assert [r["doy"] for r in selected] == [360, 364, 365, 366]

    def test_wrap_year_picks_up_december(self):
        selected = select_window(self.records, "new_york", 2, 5, wrap_year=True)
        assert [r["doy"] for r in selected] == [1, 3, 7, 364, 365, 366]

    def test_wrap_year_picks_up_january(self):
        selected = select_window(self.records, "new_york", 364, 5, wrap_year=True)
        assert [r["doy"] for r in selected] == [1, 3, 360, 364, 365, 366]

    def test_wrap_year_common_year_december(self):
        """Dec 28 2022 is day 362; five days before Jan 2 when 2022 has 365 days."""
        records = [make_record(362, year=2022), make_record(361, year=2022)]
        selected = select_window(records, "new_york", 2, 5, wrap_year=True)
        assert selected == [records[0]]

    def test_wrap_year_leap_year_december(self):
        """Dec 28 2020 is day 363; day 362 is six days before Jan 2."""
        records = [make_record(363, year=2020), make_record(362, year=2020)]
        selected = select_window(records, "new_york", 2, 5, wrap_year=True)
        assert selected == [records[0]]

    def test_wrap_year_january_uses_previous_year_length(self):
        """Jan 3 vs day 363: five days after a common year, six after a leap year."""
        records = [make_record(3, year=2023), make_record(3, year=2021)]
        selected = select_window(records, "new_york", 363, 5, wrap_year=True)
        assert selected == [records[0]]

    def test_wrap_year_without_year_uses_leap_cycle(self):
        record = make_record(362)
        record.pop("year")
        assert select_window([record], "new_york", 2, 5, wrap_year=True) == []


# ---------------------------------------------------------------------------
# day_window
# ---------------------------------------------------------------------------

def test_day_window_ignores_location():
    records = [make_record(100, location="paris"), make_record(100, location="tokyo"), make_record(120)]
    selected = day_window(records, "2023-04-10", 5)
    assert len(selected) == 2


def test_day_window_accepts_date():
    records = [make_record(95), make_record(106)]
    assert len(day_window(records, date(2023, 4, 10))) == 1
