from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Literal, Optional

MoonPhase = Literal["K", "R"]  # K = waxing (kaet), R = waning (roaoch)


class LeapType(str, Enum):
    """Leap insertions of a Buddhist-Era year."""
    NONE = ""
    LEAP_MONTH = "M"
    LEAP_DAY = "D"
    LEAP_MONTH_AND_DAY = "MD"


@dataclass(frozen=True)
class EngineId:
    family: Literal["bodithey", "custom"]
    name: str
    version: str


@dataclass(frozen=True)
class LunarDayCode:
    """Decoded lunar-day fragment, e.g. '02K15S'."""
    month: int
    phase: MoonPhase
    day: int
    is_holy_day: bool = False

    def __post_init__(self) -> None:
        if not (1 <= self.month <= 14):
            raise ValueError("month must be in 1..14")
        if self.phase not in ("K", "R"):
            raise ValueError("phase must be 'K' or 'R'")
        if not (1 <= self.day <= 15):
            raise ValueError("day must be in 1..15")

    @property
    def fragment(self) -> str:
        return f"{self.month:02d}{self.phase}{self.day:02d}" + ("S" if self.is_holy_day else "")

    def with_holy_day(self) -> "LunarDayCode":
        return LunarDayCode(self.month, self.phase, self.day, True)

    @classmethod
    def parse(cls, fragment: str) -> "LunarDayCode":
        if len(fragment) not in (5, 6) or (len(fragment) == 6 and fragment[5] != "S"):
            raise ValueError(f"Malformed lunar-day fragment {fragment!r}")
        return cls(
            month=int(fragment[0:2]),
            phase=fragment[2],  # type: ignore[arg-type]
            day=int(fragment[3:5]),
            is_holy_day=len(fragment) == 6,
        )


@dataclass(frozen=True)
class CycleLabels:
    sak: int          # 1..10
    animal_year: int  # 1..12


@dataclass(frozen=True)
class AutomatonState:
    ordinal: int
    year_path: int
    anchor: date
    steps: int
    extrapolated: bool = False


@dataclass(frozen=True)
class KhmerLunarDate:
    civil_date: date
    engine: EngineId
    sak: int
    sak_label: str
    animal_year: int
    animal_year_label: str
    buddhist_era_year: int
    lunar_month: int
    lunar_month_label: str
    moon_phase: MoonPhase
    moon_phase_label: str
    lunar_day: int
    lunar_day_label: str
    is_holy_day: bool
    code: str
    full_description: str
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None

    def as_dict(self) -> Dict[str, Any]:
        """Record keyed the way the service layer publishes it."""
        out: Dict[str, Any] = {
            "date": self.civil_date.isoformat(),
            "sak": f"{self.sak:02d}",
            "sakLabel": self.sak_label,
            "animalYear": f"{self.animal_year:02d}",
            "animalYearLabel": self.animal_year_label,
            "buddhistEraYear": self.buddhist_era_year,
            "lunarMonth": f"{self.lunar_month:02d}",
            "lunarMonthLabel": self.lunar_month_label,
            "moonPhase": self.moon_phase,
            "moonPhaseLabel": self.moon_phase_label,
            "lunarDay": self.lunar_day,
            "lunarDayLabel": self.lunar_day_label,
            "isHolyDay": self.is_holy_day,
            "code": self.code,
            "fullDescription": self.full_description,
        }
        if self.attributes:
            out["attributes"] = dict(self.attributes)
        return out
