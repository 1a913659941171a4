from __future__ import annotations
from typing import Any, Dict

from .registry import register_attribute
from ..core.time import days_between, weekday_sun0
from ..engines.new_year import khmer_new_year
from .. import formatting as fmt

def weekday(info) -> Dict[str, Any]:
    # Convention: 0=Sun..6=Sat, as in the Khmer weekday table.
    i = weekday_sun0(info.civil_date)
    return {
        "weekday": i,
        "weekday_kh": fmt.weekday_name(i),
        "weekday_en": fmt.weekday_name(i, english=True),
    }

def solar(info) -> Dict[str, Any]:
    return {"solar": fmt.format_solar_date(info.civil_date)}

def new_year(info) -> Dict[str, Any]:
    ny = khmer_new_year(info.civil_date.year)
    return {
        "new_year": ny,
        "days_from_new_year": days_between(ny, info.civil_date),
    }

register_attribute("weekday", weekday)
register_attribute("solar", solar)
register_attribute("new_year", new_year)
