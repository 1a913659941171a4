# tests/test_api.py

import logging
import random
import pytest
from datetime import date, timedelta

import calkhmer
from calkhmer.core.time import weekday_sun0
from calkhmer.core.types import EngineId, LeapType
from calkhmer.engines.calendar import BoditheyCalendar
from calkhmer.engines.specs import KHMER, KhmerCalendarParams


@pytest.mark.parametrize("d,code", [
    (date(2017, 12, 10), "0910256101R07"),
    (date(2018, 1, 1), "0910256102K15S"),
])
def test_reference_codes(d, code):
    assert calkhmer.lunar_code(d) == code
    assert calkhmer.lunar_date(d).code == code


def test_reference_record():
    info = calkhmer.lunar_date(date(2018, 1, 1))
    assert info.sak == 9
    assert info.animal_year == 10
    assert info.buddhist_era_year == 2561
    assert info.lunar_month == 2
    assert info.lunar_month_label == "បុស្ស"
    assert info.moon_phase == "K"
    assert info.moon_phase_label == "កើត"
    assert info.lunar_day == 15
    assert info.lunar_day_label == "១៥"
    assert info.is_holy_day is True
    assert info.full_description == calkhmer.lunar_string(date(2018, 1, 1))
    assert info.full_description == "ថ្ងៃ ១៥កើត ខែបុស្ស ព.ស ២៥៦១ ឆ្នាំ រកា នព្វ\u200bស័ក"

    info = calkhmer.lunar_date(date(2017, 12, 10))
    assert (info.lunar_month, info.moon_phase, info.lunar_day, info.is_holy_day) == (1, "R", 7, False)


def _check_code(info):
    assert len(info.code) in (13, 14)
    assert (len(info.code) == 14) == info.is_holy_day
    assert info.code[10] in ("K", "R")
    assert info.code.isascii()


def test_code_length_every_day_2018():
    d = date(2018, 1, 1)
    while d.year == 2018:
        _check_code(calkhmer.lunar_date(d))
        d += timedelta(days=1)


def test_code_length_random_sample():
    random.seed(42)
    start, end = date(1900, 1, 1), date(2100, 12, 31)
    span = (end - start).days
    for _ in range(400):
        _check_code(calkhmer.lunar_date(start + timedelta(days=random.randint(0, span))))


def test_range_edges():
    _check_code(calkhmer.lunar_date(date(1900, 1, 1)))
    _check_code(calkhmer.lunar_date(date(2100, 12, 31)))
    with pytest.raises(calkhmer.InvalidRangeError):
        calkhmer.lunar_date(date(1899, 12, 31))


def test_extrapolation_past_2100(caplog):
    with caplog.at_level(logging.WARNING, logger="calkhmer.engines.calendar"):
        info = calkhmer.lunar_date(date(2101, 6, 1), debug=True)
    _check_code(info)
    assert info.debug["extrapolated"] is True
    assert info.debug["anchor"] == date(2100, 1, 1)
    assert "extrapolating" in caplog.text


def test_strict_engine_refuses_past_2100():
    assert calkhmer.lunar_code(date(2100, 12, 31), engine="khmer-strict") == \
        calkhmer.lunar_code(date(2100, 12, 31))
    with pytest.raises(calkhmer.InvalidRangeError):
        calkhmer.lunar_date(date(2101, 1, 1), engine="khmer-strict")


def test_leap_type_api():
    assert calkhmer.leap_type(2561) is LeapType.NONE
    assert calkhmer.calendar_leap_type(2561) is LeapType.NONE
    for y in range(2440, 2650):
        assert calkhmer.calendar_leap_type(y) is not LeapType.LEAP_MONTH_AND_DAY


def test_month7_end_holy_day_depends_on_leap_day():
    params = KhmerCalendarParams()
    eid = EngineId(family="custom", name="test", version="0")
    d = date(2018, 7, 1)

    plain = BoditheyCalendar(eid, params, leap_for=lambda be: LeapType.NONE)
    assert plain.day_code(d, 206).fragment == "07R14S"
    assert plain.day_code(d, 205).fragment == "07R13"

    leap_day = BoditheyCalendar(eid, params, leap_for=lambda be: LeapType.LEAP_DAY)
    assert leap_day.day_code(d, 206).fragment == "07R14"
    assert leap_day.day_code(d, 207).fragment == "07R15S"


def test_attributes():
    info = calkhmer.lunar_date(date(2018, 1, 1), attributes=("weekday", "solar", "new_year"))
    assert info.attributes["weekday"] == 1
    assert info.attributes["weekday_en"] == "Monday"
    assert info.attributes["solar"]["formatted"]["english"] == "Monday 1 January 2561 BE"
    assert info.attributes["new_year"] == date(2018, 4, 14)
    assert info.attributes["days_from_new_year"] == -103
    with pytest.raises(KeyError):
        calkhmer.lunar_date(date(2018, 1, 1), attributes=("nope",))


@pytest.mark.parametrize("d", [date(2018, 4, 14), date(2018, 4, 15), date(2024, 2, 29)])
def test_weekday_attribute_is_sunday_first(d):
    info = calkhmer.lunar_date(d, attributes=("weekday",))
    assert info.attributes["weekday"] == weekday_sun0(d)
    assert info.attributes["weekday_en"] == d.strftime("%A")


def test_full_moon_days_are_holy():
    start = date(2018, 1, 1)
    for i in range(365):
        info = calkhmer.lunar_date(start + timedelta(days=i))
        if info.moon_phase == "K" and info.lunar_day == 15:
            assert info.is_holy_day
            assert info.code.endswith("K15S")


def test_as_dict():
    out = calkhmer.lunar_date(date(2018, 1, 1)).as_dict()
    assert out["sak"] == "09"
    assert out["animalYear"] == "10"
    assert out["lunarMonth"] == "02"
    assert out["buddhistEraYear"] == 2561
    assert out["isHolyDay"] is True
    assert out["code"] == "0910256102K15S"
    assert "attributes" not in out


def test_explain():
    out = calkhmer.explain(date(2017, 12, 10))
    assert out["code"] == "0910256101R07"
    assert out["debug"]["ordinal"] == 22
    assert out["debug"]["steps"] == 343
    assert out["leap"]["be_year"] == 2561
    assert out["leap"]["avoman"] == 429


def test_registry():
    assert {"khmer", "khmer-strict"} <= set(calkhmer.list_engines())
    assert calkhmer.engine_info("khmer")["params"]["extrapolate"] is True
    assert calkhmer.engine_info("khmer-strict")["params"]["extrapolate"] is False
    with pytest.raises(KeyError):
        calkhmer.lunar_date(date(2018, 1, 1), engine="missing")
    with pytest.raises(KeyError):
        calkhmer.register_engine("khmer", calkhmer.make_engine(KHMER))


def test_register_tweaked_engine():
    eng = calkhmer.make_engine(KHMER.tweak(last_year=2050, extrapolate=False))
    calkhmer.register_engine("khmer-2050", eng, overwrite=True)
    assert calkhmer.lunar_code(date(2050, 6, 1), engine="khmer-2050") == calkhmer.lunar_code(date(2050, 6, 1))
    with pytest.raises(calkhmer.InvalidRangeError):
        calkhmer.lunar_code(date(2051, 1, 1), engine="khmer-2050")


@pytest.mark.parametrize("kwargs", [
    {"first_year": 1800},
    {"last_year": 2200},
    {"first_year": 2000, "last_year": 1990},
    {"new_year_window": (18, 11)},
])
def test_invalid_params(kwargs):
    with pytest.raises(ValueError):
        KhmerCalendarParams(**kwargs)
