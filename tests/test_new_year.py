# tests/test_new_year.py

import pytest
from datetime import date

import calkhmer
from calkhmer.core.time import weekday_sun0
from calkhmer.engines.new_year import cycle_labels, khmer_new_year


@pytest.mark.parametrize("year,expected", [
    (2018, date(2018, 4, 14)),
    (2024, date(2024, 4, 12)),
])
def test_known_new_years(year, expected):
    assert khmer_new_year(year) == expected
    assert calkhmer.new_year_day(year) == expected


def test_new_year_window_and_weekday():
    for y in range(1900, 2101):
        ny = khmer_new_year(y)
        assert ny.month == 4 and 11 <= ny.day <= 17
        assert weekday_sun0(ny) == (y + 4) % 7


def test_narrow_window_falls_back_to_last_day():
    # 2018 target weekday is Saturday (14th); a window that misses it ends on its last day.
    assert khmer_new_year(2018, window=(11, 12)) == date(2018, 4, 12)


def test_cycle_labels_straddle_new_year_2018():
    before = cycle_labels(date(2018, 4, 13))
    on = cycle_labels(date(2018, 4, 14))
    after = cycle_labels(date(2018, 12, 31))
    assert (before.sak, before.animal_year) == (9, 10)
    assert (on.sak, on.animal_year) == (10, 11)
    assert on == after


def test_codes_straddle_new_year_2018():
    assert calkhmer.lunar_code(date(2018, 4, 13)).startswith("0910")
    assert calkhmer.lunar_code(date(2018, 4, 14)).startswith("1011")


def test_cycle_labels_ranges():
    for y in (1900, 1955, 2018, 2099):
        for d in (date(y, 1, 1), date(y, 12, 31)):
            c = cycle_labels(d)
            assert 1 <= c.sak <= 10
            assert 1 <= c.animal_year <= 12
