# tests/test_tables.py

import pytest

from calkhmer.core.errors import InvalidRangeError, LunarTableError
from calkhmer.core.types import LunarDayCode
from calkhmer.engines import tables as T


def test_table_sizes():
    assert len(T.LUNAR_DAY_CODES) == 415
    assert len(T.EPOCH_ORDINALS) == 201
    assert sum(T.MONTH_LENGTHS) == T.CYCLE_LENGTH


@pytest.mark.parametrize("ordinal,fragment", [
    (1, "01K01"),
    (8, "01K08S"),
    (15, "01K15S"),
    (23, "01R08S"),
    (29, "01R14S"),
    (30, "02K01"),
    (59, "02R15S"),
    (88, "03R14S"),
    (163, "06R01"),
    (206, "07R14"),
    (207, "07R15S"),
    (208, "08K01"),
    (237, "08R15S"),
    (238, "09K01"),
    (268, "10K01"),
    (297, "10R15S"),
    (298, "11K01"),
    (326, "11R14S"),
    (385, "13R14S"),
    (386, "14K01"),
    (415, "14R15S"),
])
def test_code_fragments(ordinal, fragment):
    assert T.code_fragment(ordinal) == fragment


def test_holy_days_are_eighth_full_moon_or_month_end():
    for i, frag in enumerate(T.LUNAR_DAY_CODES, start=1):
        code = LunarDayCode.parse(frag)
        nxt = LunarDayCode.parse(T.LUNAR_DAY_CODES[i % 415])
        month_end = nxt.month != code.month
        full_moon = code.phase == "K" and code.day == 15
        assert code.is_holy_day == (code.day == 8 or full_moon or month_end), frag


def test_every_full_moon_is_holy():
    full_moons = [f for f in T.LUNAR_DAY_CODES if f[2:5] == "K15"]
    assert len(full_moons) == len(T.MONTH_LENGTHS)
    assert all(f.endswith("S") for f in full_moons)


@pytest.mark.parametrize("ordinal", [0, -1, 416, 1000])
def test_code_fragment_out_of_table(ordinal):
    with pytest.raises(LunarTableError):
        T.code_fragment(ordinal)


def test_anchor_ordinals():
    assert T.anchor_ordinal(1900) == 30
    assert T.anchor_ordinal(2017) == 33
    assert T.anchor_ordinal(2018) == 44
    assert T.anchor_ordinal(2100) == 20
    for y in range(1900, 2101):
        assert 1 <= T.anchor_ordinal(y) <= 60


@pytest.mark.parametrize("year", [1899, 2101])
def test_anchor_out_of_range(year):
    with pytest.raises(InvalidRangeError):
        T.anchor_ordinal(year)


def test_invalid_range_is_value_error():
    with pytest.raises(ValueError):
        T.anchor_ordinal(1800)


def test_lunar_day_code_roundtrip_and_validation():
    code = LunarDayCode.parse("02K15S")
    assert (code.month, code.phase, code.day, code.is_holy_day) == (2, "K", 15, True)
    assert code.fragment == "02K15S"
    assert LunarDayCode.parse("07R14").with_holy_day().fragment == "07R14S"
    with pytest.raises(ValueError):
        LunarDayCode.parse("07X14")
    with pytest.raises(ValueError):
        LunarDayCode.parse("07R14Q")
    with pytest.raises(ValueError):
        LunarDayCode(15, "K", 1)
