from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from .core.engine import CalendarEngine, EngineRegistry
from .core.types import KhmerLunarDate, LeapType
from .attributes.registry import compute_attributes
from .attributes import standard as _standard  # noqa: F401  (registers attributes)
from .engines import leap as _leap
from .engines.new_year import khmer_new_year
from .engines.specs import EngineSpec
from .engines.factory import make_engine as _make_engine

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Conversion
# ============================================================

def lunar_date(
    d: date,
    *,
    engine: str = "khmer",
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> KhmerLunarDate:
    info = _reg().get(engine).lunar_date(d, debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def lunar_code(d: date, *, engine: str = "khmer") -> str:
    """[Sak:2][animal year:2][BE:4][month:2][K|R][day:2][S]?"""
    return _reg().get(engine).lunar_code(d)

def lunar_string(d: date, *, engine: str = "khmer") -> str:
    return _reg().get(engine).lunar_date(d).full_description

def explain(d: date, *, engine: str = "khmer") -> Dict[str, Any]:
    return _reg().get(engine).explain(d)

# ============================================================
# Year-level helpers
# ============================================================

def new_year_day(year: int) -> date:
    return khmer_new_year(year)

def leap_type(be_year: int) -> LeapType:
    """Astronomical (Bodithey) leap type; may combine month and day."""
    return _leap.bodithey_leap(be_year)

def calendar_leap_type(be_year: int) -> LeapType:
    """Leap type applied to the calendar year; never LEAP_MONTH_AND_DAY."""
    return _leap.calendar_leap(be_year)
