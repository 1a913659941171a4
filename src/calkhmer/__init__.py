"""calkhmer public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    lunar_date,
    lunar_code,
    lunar_string,
    explain,
    list_engines,
    engine_info,
    make_engine,
    register_engine,
    new_year_day,
    leap_type,
    calendar_leap_type,
)
from .core.errors import CalkhmerError, InvalidRangeError, LunarTableError
from .core.types import KhmerLunarDate, LeapType
from .formatting import (
    to_khmer_numerals,
    from_khmer_numerals,
    to_buddhist_era,
    from_buddhist_era,
    format_solar_date,
)

__all__ = [
    "lunar_date",
    "lunar_code",
    "lunar_string",
    "explain",
    "list_engines",
    "engine_info",
    "make_engine",
    "register_engine",
    "new_year_day",
    "leap_type",
    "calendar_leap_type",
    "KhmerLunarDate",
    "LeapType",
    "CalkhmerError",
    "InvalidRangeError",
    "LunarTableError",
    "to_khmer_numerals",
    "from_khmer_numerals",
    "to_buddhist_era",
    "from_buddhist_era",
    "format_solar_date",
]
