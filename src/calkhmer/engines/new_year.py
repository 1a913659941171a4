"""
calkhmer.engines.new_year
-------------------------
Khmer (solar) New Year and the animal-year / Sak cycle labels that turn over
on it.
"""

from __future__ import annotations

from datetime import date
from typing import Tuple

from ..core.time import weekday_sun0
from ..core.types import CycleLabels

NEW_YEAR_MONTH = 4
NEW_YEAR_WINDOW: Tuple[int, int] = (11, 17)


def khmer_new_year(year: int, *, window: Tuple[int, int] = NEW_YEAR_WINDOW) -> date:
    """
    First day in the April window whose weekday (Sunday=0) equals (year+4) mod 7.
    The scan ends on the window's last day when nothing matches earlier.
    """
    target = (year + 4) % 7
    first, last = window
    day = first
    while day <= last:
        if weekday_sun0(date(year, NEW_YEAR_MONTH, day)) == target:
            break
        day += 1
    return date(year, NEW_YEAR_MONTH, min(day, last))


def cycle_labels(d: date, *, new_year: date | None = None) -> CycleLabels:
    y = d.year
    if new_year is None:
        new_year = khmer_new_year(y)
    if d >= new_year:
        return CycleLabels(sak=((y + 1) % 10) + 1, animal_year=((y + 8) % 12) + 1)
    return CycleLabels(sak=(y % 10) + 1, animal_year=((y + 7) % 12) + 1)
