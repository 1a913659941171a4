"""
calkhmer.formatting
-------------------
Khmer name tables, numeral transliteration and the descriptive sentence.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Tuple

from .core.time import weekday_sun0

BUDDHIST_ERA_OFFSET = 543

KHMER_DIGITS = "០១២៣៤៥៦៧៨៩"
_TO_KHMER = str.maketrans("0123456789", KHMER_DIGITS)
_FROM_KHMER = str.maketrans(KHMER_DIGITS, "0123456789")

# Index 0 is lunar month 1 (Migasir). 9 and 10 are the first/second Asadh of a leap-month year.
LUNAR_MONTH_NAMES: Tuple[str, ...] = (
    "មិគសិរ",
    "បុស្ស",
    "មាឃ",
    "ផល្គុន",
    "ចេត្រ",
    "ពិសាខ",
    "ជេស្ឋ",
    "អាសាធ",
    "បឋមសាធ",
    "ទុតិយសាធ",
    "ស្រាពណ៌",
    "ភទ្របទ",
    "អស្សុជ",
    "កក្ដិក",
)

ANIMAL_YEAR_NAMES: Tuple[str, ...] = (
    "ជូត",
    "ឆ្លូវ",
    "ខាល",
    "ថោះ",
    "រោង",
    "ម្សាញ់",
    "មមី",
    "ម្មែ",
    "វក",
    "រកា",
    "ច",
    "កុរ",
)

SAK_NAMES: Tuple[str, ...] = (
    "ឯក\u200bស័ក",
    "ទោ\u200bស័ក",
    "ត្រី\u200bស័ក",
    "ចត្វា\u200bស័ក",
    "បញ្ច\u200bស័ក",
    "ឆ\u200bស័ក",
    "សប្ត\u200bស័ក",
    "អដ្ឋ\u200bស័ក",
    "នព្វ\u200bស័ក",
    "សំរឹទ្ធិ\u200bស័ក",
)

MOON_PHASE_NAMES: Dict[str, str] = {"K": "កើត", "R": "រោច"}

SOLAR_MONTH_NAMES: Tuple[str, ...] = (
    "មករា",
    "កុម្ភៈ",
    "មីនា",
    "មេសា",
    "ឧសភា",
    "មិថុនា",
    "កក្កដា",
    "សីហា",
    "កញ្ញា",
    "តុលា",
    "វិច្ឆិកា",
    "ធ្នូ",
)

SOLAR_MONTH_NAMES_EN: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Sunday first.
WEEKDAY_NAMES: Tuple[str, ...] = (
    "ថ្ងៃអាទិត្យ",
    "ថ្ងៃច័ន្ទ",
    "ថ្ងៃអង្គារ",
    "ថ្ងៃពុធ",
    "ថ្ងៃព្រហស្បតិ៍",
    "ថ្ងៃសុក្រ",
    "ថ្ងៃសៅរ៍",
)

WEEKDAY_NAMES_EN: Tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)


def to_khmer_numerals(value: Any) -> str:
    """Replace ASCII digits 0-9 in str(value) with Khmer digits."""
    return str(value).translate(_TO_KHMER)


def from_khmer_numerals(text: str) -> str:
    """Inverse of to_khmer_numerals."""
    return text.translate(_FROM_KHMER)


def _pick(table: Tuple[str, ...], index: int, what: str) -> str:
    if not (1 <= index <= len(table)):
        raise ValueError(f"Invalid {what} index: {index}. Must be between 1 and {len(table)}.")
    return table[index - 1]


def lunar_month_name(month: int) -> str:
    return _pick(LUNAR_MONTH_NAMES, month, "lunar month")


def animal_year_name(animal_year: int) -> str:
    return _pick(ANIMAL_YEAR_NAMES, animal_year, "animal year")


def sak_name(sak: int) -> str:
    return _pick(SAK_NAMES, sak, "sak")


def moon_phase_name(phase: str) -> str:
    if phase not in MOON_PHASE_NAMES:
        raise ValueError(f"Invalid moon phase {phase!r}. Must be 'K' or 'R'.")
    return MOON_PHASE_NAMES[phase]


def describe(*, sak: int, animal_year: int, be_year: int, month: int, phase: str, day: int) -> str:
    """Khmer sentence: day+phase, month, BE year, animal year, Sak."""
    return (
        f"ថ្ងៃ {to_khmer_numerals(day)}{moon_phase_name(phase)} "
        f"ខែ{lunar_month_name(month)} "
        f"ព.ស {to_khmer_numerals(be_year)} "
        f"ឆ្នាំ {animal_year_name(animal_year)} {sak_name(sak)}"
    )


# ------------------------------------------------------------
# Solar (Gregorian) calendar in Khmer
# ------------------------------------------------------------

def to_buddhist_era(gregorian_year: int) -> int:
    return gregorian_year + BUDDHIST_ERA_OFFSET


def from_buddhist_era(be_year: int) -> int:
    return be_year - BUDDHIST_ERA_OFFSET


def solar_month_name(month: int) -> str:
    return _pick(SOLAR_MONTH_NAMES, month, "month")


def weekday_name(index: int, *, english: bool = False) -> str:
    """Weekday name for index 0=Sunday..6=Saturday."""
    if not (0 <= index <= 6):
        raise ValueError(f"Invalid day index: {index}. Must be between 0 and 6.")
    return (WEEKDAY_NAMES_EN if english else WEEKDAY_NAMES)[index]


def format_solar_date(d: date) -> Dict[str, Any]:
    dow = weekday_sun0(d)
    day_name = weekday_name(dow)
    be = to_buddhist_era(d.year)
    return {
        "gregorian": {"year": d.year, "month": d.month, "day": d.day, "dayName": day_name},
        "formatted": {
            "khmer": f"{day_name} ថ្ងៃទី {to_khmer_numerals(d.day)} {solar_month_name(d.month)} ឆ្នាំ {to_khmer_numerals(be)}",
            "english": f"{weekday_name(dow, english=True)} {d.day} {SOLAR_MONTH_NAMES_EN[d.month - 1]} {be} BE",
        },
    }
