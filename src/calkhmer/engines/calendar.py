"""
calkhmer.engines.calendar
-------------------------
The orchestrator. Binds the epoch table, the leap rules, the day counter and
the New-Year locator into Gregorian -> Khmer lunar conversion.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import date
from typing import Any, Dict, Optional

from ..core.errors import InvalidRangeError
from ..core.types import AutomatonState, CycleLabels, EngineId, KhmerLunarDate, LeapType, LunarDayCode
from .. import formatting as fmt
from . import day_count, tables
from .leap import calendar_leap, leap_summary
from .new_year import cycle_labels, khmer_new_year
from .specs import KhmerCalendarParams

logger = logging.getLogger(__name__)


class BoditheyCalendar:
    """
    Gregorian -> Khmer lunar date via the Bodithey day counter.

    Every call restarts from the January 1 anchor of the query year, so the
    engine holds no per-query state and may be shared between threads.
    """
    def __init__(
        self,
        id: EngineId,
        params: KhmerCalendarParams,
        leap_for: day_count.LeapFunc = calendar_leap,
    ):
        self.id = id
        self.params = params
        self.leap_for = leap_for

    # ---------------------------------------------------------
    # Counting
    # ---------------------------------------------------------

    def anchor_year(self, year: int) -> int:
        p = self.params
        if year < p.first_year:
            raise InvalidRangeError(f"Year must be {p.first_year} or later (got {year})")
        if year <= p.last_year:
            return year
        if not p.extrapolate:
            raise InvalidRangeError(
                f"Year {year} is past {p.last_year} and engine '{self.id.name}' does not extrapolate"
            )
        logger.warning(
            "Year %d is past the last anchor year %d; extrapolating from %d-01-01",
            year, p.last_year, p.last_year,
        )
        return p.last_year

    def count(self, d: date) -> AutomatonState:
        y0 = self.anchor_year(d.year)
        return day_count.count(
            d,
            y0,
            tables.anchor_ordinal(y0),
            leap_for=self.leap_for,
            leap_offset=self.params.leap_offset,
            be_offset=self.params.be_offset,
        )

    def day_code(self, d: date, ordinal: int) -> LunarDayCode:
        code = LunarDayCode.parse(tables.code_fragment(ordinal))
        if code.fragment == tables.SHORT_MONTH7_END:
            if self.leap_for(d.year + self.params.leap_offset) is not LeapType.LEAP_DAY:
                code = code.with_holy_day()
        return code

    def new_year_day(self, year: int) -> date:
        return khmer_new_year(year, window=self.params.new_year_window)

    def cycle(self, d: date) -> CycleLabels:
        return cycle_labels(d, new_year=self.new_year_day(d.year))

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {"id": self.id.__dict__, "params": asdict(self.params)}

    def lunar_code(self, d: date) -> str:
        return self.lunar_date(d).code

    def lunar_string(self, d: date) -> str:
        return self.lunar_date(d).full_description

    def lunar_date(self, d: date, *, debug: bool = False) -> KhmerLunarDate:
        state = self.count(d)
        code = self.day_code(d, state.ordinal)
        labels = self.cycle(d)

        full_code = f"{labels.sak:02d}{labels.animal_year:02d}{state.year_path:04d}{code.fragment}"
        dbg: Optional[Dict[str, Any]] = None
        if debug:
            dbg = {
                "ordinal": state.ordinal,
                "year_path": state.year_path,
                "anchor": state.anchor,
                "steps": state.steps,
                "extrapolated": state.extrapolated,
                "calendar_leap": self.leap_for(d.year + self.params.leap_offset).value,
                "new_year": self.new_year_day(d.year),
            }

        return KhmerLunarDate(
            civil_date=d,
            engine=self.id,
            sak=labels.sak,
            sak_label=fmt.sak_name(labels.sak),
            animal_year=labels.animal_year,
            animal_year_label=fmt.animal_year_name(labels.animal_year),
            buddhist_era_year=state.year_path,
            lunar_month=code.month,
            lunar_month_label=fmt.lunar_month_name(code.month),
            moon_phase=code.phase,
            moon_phase_label=fmt.moon_phase_name(code.phase),
            lunar_day=code.day,
            lunar_day_label=fmt.to_khmer_numerals(code.day),
            is_holy_day=code.is_holy_day,
            code=full_code,
            full_description=fmt.describe(
                sak=labels.sak,
                animal_year=labels.animal_year,
                be_year=state.year_path,
                month=code.month,
                phase=code.phase,
                day=code.day,
            ),
            debug=dbg,
        )

    def explain(self, d: date) -> Dict[str, Any]:
        out = self.lunar_date(d, debug=True).__dict__.copy()
        out["leap"] = leap_summary(d.year + self.params.leap_offset)
        return out
