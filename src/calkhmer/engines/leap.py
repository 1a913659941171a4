"""
calkhmer.engines.leap
---------------------
Bodithey/Avoman integer recurrences deciding which leap insertions a
Buddhist-Era year carries.

All functions are pure functions of an integer BE year.
"""

from __future__ import annotations

from typing import Any, Dict

from ..core.types import LeapType

# Solar year expressed in 800ths of a day: 365 + 207/800.
_KAMMA = 292207
_KAMMA_DEN = 800
_KAMMA_SHIFT = 499


def _kamma(y: int) -> int:
    return y * _KAMMA + _KAMMA_SHIFT


def aharkun(y: int) -> int:
    """Elapsed days of the era, floor((292207*y + 499)/800) + 4."""
    return _kamma(y) // _KAMMA_DEN + 4


def avoman(y: int) -> int:
    """Lunar-day remainder (mod 692) driving the leap-day rule."""
    return (aharkun(y) * 11 + 25) % 692


def kromthupul(y: int) -> int:
    return _KAMMA_DEN - (_kamma(y) % _KAMMA_DEN)


def is_solar_leap(y: int) -> bool:
    """Khmer solar leap year: kromthupul <= 207."""
    return kromthupul(y) <= 207


def bodithey(y: int) -> int:
    """Age of the moon (0..29) at the start of the year; drives the leap-month rule."""
    a = aharkun(y)
    return ((a * 11 + 25) // 692 + a + 29) % 30


def is_leap_day_year(y: int) -> bool:
    av = avoman(y)
    if is_solar_leap(y) and av < 127:
        return True

    leap = av < 138
    if av == 137 and avoman(y + 1) == 0:
        leap = False
    if avoman(y - 1) == 138 and av == 0:
        leap = True
    return leap


def is_leap_month_year(y: int) -> bool:
    b = bodithey(y)
    b_next = bodithey(y + 1)

    leap = b < 6 or b > 24
    if b == 24 and b_next == 6:
        leap = True
    if b == 25 and b_next == 5:
        leap = False
    return leap


def bodithey_leap(be_year: int) -> LeapType:
    """Astronomical leap type of a BE year; may be LEAP_MONTH_AND_DAY."""
    month = is_leap_month_year(be_year)
    day = is_leap_day_year(be_year)
    if month and day:
        return LeapType.LEAP_MONTH_AND_DAY
    if month:
        return LeapType.LEAP_MONTH
    if day:
        return LeapType.LEAP_DAY
    return LeapType.NONE


def calendar_leap(be_year: int) -> LeapType:
    """
    Leap type actually applied to the calendar year.

    A year cannot take both insertions: when the astronomical year has both,
    it keeps the leap month and its leap day moves to the following year.
    """
    if bodithey_leap(be_year) is LeapType.LEAP_MONTH_AND_DAY:
        return LeapType.LEAP_MONTH
    if bodithey_leap(be_year - 1) is LeapType.LEAP_MONTH_AND_DAY:
        return LeapType.LEAP_DAY
    return bodithey_leap(be_year)


def leap_summary(be_year: int) -> Dict[str, Any]:
    """Intermediate quantities for a BE year (diagnostics / explain)."""
    return {
        "be_year": be_year,
        "aharkun": aharkun(be_year),
        "avoman": avoman(be_year),
        "kromthupul": kromthupul(be_year),
        "solar_leap": is_solar_leap(be_year),
        "bodithey": bodithey(be_year),
        "bodithey_leap": bodithey_leap(be_year).value,
        "calendar_leap": calendar_leap(be_year).value,
    }
