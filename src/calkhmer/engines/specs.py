from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Literal, Tuple

from ..core.types import EngineId
from .new_year import NEW_YEAR_WINDOW
from .tables import EPOCH_FIRST_YEAR, EPOCH_LAST_YEAR


@dataclass(frozen=True)
class KhmerCalendarParams:
    """
    Tunables of the Bodithey engine.

    be_offset:   Gregorian -> Buddhist Era (label of the year path).
    leap_offset: Gregorian year -> BE year whose leap rules govern the count.
    extrapolate: past last_year, keep counting from the last anchor instead of failing.
    """
    first_year: int = EPOCH_FIRST_YEAR
    last_year: int = EPOCH_LAST_YEAR
    be_offset: int = 543
    leap_offset: int = 544
    new_year_window: Tuple[int, int] = NEW_YEAR_WINDOW
    extrapolate: bool = True

    def __post_init__(self) -> None:
        if not (EPOCH_FIRST_YEAR <= self.first_year <= self.last_year <= EPOCH_LAST_YEAR):
            raise ValueError(
                f"Require {EPOCH_FIRST_YEAR} <= first_year <= last_year <= {EPOCH_LAST_YEAR}"
            )
        lo, hi = self.new_year_window
        if not (1 <= lo <= hi <= 30):
            raise ValueError("new_year_window must be (lo, hi) with 1 <= lo <= hi <= 30")


@dataclass(frozen=True)
class EngineSpec:
    kind: Literal["bodithey"]
    id: EngineId
    payload: KhmerCalendarParams
    meta: Dict[str, Any]

    def tweak(self, **kwargs) -> "EngineSpec":
        return replace(self, payload=replace(self.payload, **kwargs))


KHMER = EngineSpec(
    kind="bodithey",
    id=EngineId(family="bodithey", name="khmer", version="1"),
    payload=KhmerCalendarParams(),
    meta={"description": "Bodithey/Avoman day counter; extrapolates past the last anchor year."},
)

KHMER_STRICT = EngineSpec(
    kind="bodithey",
    id=EngineId(family="bodithey", name="khmer-strict", version="1"),
    payload=KhmerCalendarParams(extrapolate=False),
    meta={"description": "Bodithey/Avoman day counter limited to the anchored years."},
)

ALL_SPECS: Dict[str, EngineSpec] = {
    "khmer": KHMER,
    "khmer-strict": KHMER_STRICT,
}
