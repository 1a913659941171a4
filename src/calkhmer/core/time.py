from __future__ import annotations
from datetime import date


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def weekday_sun0(d: date) -> int:
    """Day of week with Sunday=0 .. Saturday=6."""
    return (to_jdn(d) + 1) % 7

def days_between(start: date, end: date) -> int:
    """Whole days from start to end (negative if end precedes start)."""
    return to_jdn(end) - to_jdn(start)
