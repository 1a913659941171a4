"""
calkhmer.engines.day_count
--------------------------
Counting automaton over the 415-slot lunar-day table.

The table describes a full lunar year (leap day and leap month both present).
Each simulated day advances the ordinal by one and then redirects around the
slots the current year does not have.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Callable, Dict, FrozenSet

from ..core.types import AutomatonState, LeapType
from ..core.time import days_between
from . import tables as T

logger = logging.getLogger(__name__)

LeapFunc = Callable[[int], LeapType]


def step(ordinal: int, leap: LeapType) -> int:
    """One simulated day. `leap` is the calendar leap type of the year being left."""
    ordinal += 1
    if ordinal == T.LEAP_DAY_SLOT and leap is not LeapType.LEAP_DAY:
        ordinal = T.AFTER_LEAP_DAY
    if ordinal == T.AFTER_LEAP_DAY and leap is LeapType.LEAP_MONTH:
        ordinal = T.LEAP_MONTH_START
    if ordinal == T.LEAP_MONTH_START and leap is not LeapType.LEAP_MONTH:
        ordinal = T.AFTER_LEAP_MONTH
    if ordinal == T.CYCLE_LENGTH + 1:
        ordinal = 1
    return ordinal


def successors(ordinal: int) -> FrozenSet[int]:
    """Every ordinal one step can reach from `ordinal`, over all leap types."""
    return frozenset(step(ordinal, leap) for leap in LeapType)


def count(
    target: date,
    anchor_year: int,
    anchor_ordinal: int,
    *,
    leap_for: LeapFunc,
    leap_offset: int = 544,
    be_offset: int = 543,
) -> AutomatonState:
    """
    Run the counter from January 1 of `anchor_year` up to `target`.

    leap_for(be_year) supplies the calendar leap type; it is evaluated once per
    simulated Gregorian year at `year + leap_offset`.
    """
    anchor = date(anchor_year, 1, 1)
    steps = days_between(anchor, target)
    if steps < 0:
        raise ValueError(f"Target {target} precedes anchor {anchor}")

    ordinal = anchor_ordinal
    year_path = anchor_year + be_offset
    leaps: Dict[int, LeapType] = {}

    current = anchor
    one_day = timedelta(days=1)
    for _ in range(steps):
        y = current.year
        leap = leaps.get(y)
        if leap is None:
            leap = leaps[y] = leap_for(y + leap_offset)

        ordinal = step(ordinal, leap)
        if ordinal == T.LUNAR_NEW_YEAR:
            year_path += 1
        current += one_day

    logger.debug(
        "counted %d day(s) from %s: ordinal=%d year_path=%d", steps, anchor, ordinal, year_path
    )
    return AutomatonState(
        ordinal=ordinal,
        year_path=year_path,
        anchor=anchor,
        steps=steps,
        extrapolated=anchor_year != target.year,
    )
