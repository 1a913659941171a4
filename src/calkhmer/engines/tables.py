"""
calkhmer.engines.tables
-----------------------
Static data for the Bodithey day counter.

* Epoch table: lunar-day ordinal of January 1 for every Gregorian year
  1900..2100, stored as a tuple indexed by ``year - EPOCH_FIRST_YEAR``.
* Lunar-day code table: the 415 slots of a "full" lunar year (one that has
  both the leap day and the leap month), ordinal 1 at index 0.
"""

from __future__ import annotations

from typing import Tuple

from ..core.errors import InvalidRangeError, LunarTableError
from ..core.types import LunarDayCode

EPOCH_FIRST_YEAR = 1900
EPOCH_LAST_YEAR = 2100

EPOCH_ORDINALS: Tuple[int, ...] = (
    30, 41, 22, 32, 43, 25, 36, 46, 27, 39,   # 1900-1909
    20, 31, 41, 23, 34, 45, 26, 38, 48, 29,   # 1910-1919
    40, 22, 33, 43, 24, 36, 47, 28, 38, 20,   # 1920-1929
    31, 42, 23, 34, 45, 26, 37, 49, 30, 40,   # 1930-1939
    21, 33, 44, 25, 35, 47, 28, 39, 20, 31,   # 1940-1949
    42, 23, 34, 46, 27, 37, 48, 30, 41, 22,   # 1950-1959
    32, 44, 25, 36, 46, 28, 39, 20, 31, 42,   # 1960-1969
    23, 34, 45, 27, 37, 48, 29, 41, 22, 32,   # 1970-1979
    43, 25, 36, 47, 28, 39, 20, 31, 42, 24,   # 1980-1989
    34, 45, 26, 38, 19, 29, 40, 22, 33, 44,   # 1990-1999
    25, 36, 47, 28, 39, 21, 31, 42, 23, 35,   # 2000-2009
    45, 26, 37, 19, 30, 41, 22, 33, 44, 25,   # 2010-2019
    36, 47, 28, 39, 20, 32, 42, 23, 34, 46,   # 2020-2029
    27, 37, 18, 30, 41, 22, 32, 44, 25, 36,   # 2030-2039
    47, 29, 39, 20, 31, 43, 24, 34, 45, 27,   # 2040-2049
    38, 19, 29, 41, 22, 33, 44, 26, 36, 47,   # 2050-2059
    28, 40, 21, 31, 42, 24, 35, 45, 26, 38,   # 2060-2069
    19, 30, 40, 22, 33, 44, 25, 36, 47, 28,   # 2070-2079
    39, 21, 32, 42, 23, 35, 46, 27, 37, 19,   # 2080-2089
    30, 41, 22, 33, 44, 25, 36, 48, 29, 39,   # 2090-2099
    20,                                       # 2100
)

# Days per lunar month in the full 415-slot year. Month 7 carries the leap-day
# slot (ordinal 207); months 9 and 10 are the leap-month pair (238..297).
MONTH_LENGTHS: Tuple[int, ...] = (29, 30, 29, 30, 29, 30, 30, 30, 30, 30, 29, 30, 29, 30)

CYCLE_LENGTH = 415

# Hard transition points of the counter.
LEAP_DAY_SLOT = 207
AFTER_LEAP_DAY = 208
LEAP_MONTH_START = 238
AFTER_LEAP_MONTH = 298
LUNAR_NEW_YEAR = 163

# Last day of month 7 when the year has no leap day.
SHORT_MONTH7_END = "07R14"


def anchor_ordinal(year: int) -> int:
    """Lunar-day ordinal of January 1 of the given Gregorian year."""
    if not (EPOCH_FIRST_YEAR <= year <= EPOCH_LAST_YEAR):
        raise InvalidRangeError(
            f"No epoch anchor for year {year}; supported range is "
            f"{EPOCH_FIRST_YEAR}..{EPOCH_LAST_YEAR}"
        )
    return EPOCH_ORDINALS[year - EPOCH_FIRST_YEAR]


def _build_code_table() -> Tuple[str, ...]:
    out = []
    for month, length in enumerate(MONTH_LENGTHS, start=1):
        for i in range(1, length + 1):
            phase, day = ("K", i) if i <= 15 else ("R", i - 15)
            holy = day == 8 or (phase == "K" and day == 15) or i == length
            out.append(LunarDayCode(month, phase, day, holy).fragment)
    return tuple(out)


LUNAR_DAY_CODES: Tuple[str, ...] = _build_code_table()


def code_fragment(ordinal: int) -> str:
    """Code-table fragment for an ordinal in 1..415."""
    if not (1 <= ordinal <= CYCLE_LENGTH):
        raise LunarTableError(f"Lunar ordinal {ordinal} outside 1..{CYCLE_LENGTH}")
    return LUNAR_DAY_CODES[ordinal - 1]
