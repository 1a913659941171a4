from __future__ import annotations

from datetime import date, timedelta
import argparse
from typing import Optional

import calkhmer


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def lunar_new_year(Y: int, *, engine: str) -> Optional[date]:
    """First day of Gregorian year Y on which the BE year path turns over (ordinal 163)."""
    d = date(Y, 1, 1)
    prev = calkhmer.lunar_date(d, engine=engine).buddhist_era_year
    while d.year == Y:
        d += timedelta(days=1)
        be = calkhmer.lunar_date(d, engine=engine).buddhist_era_year
        if be != prev:
            return d
    return None


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Khmer New Year (solar) and BE turnover (lunar) dates per Gregorian year."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--engine", default="khmer")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    def fmt(d: Optional[date]) -> str:
        if d is None:
            return "-"
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "NewYear", "Animal", "Sak", "BE turnover", "Leap"]
    colw = [5, 10, 8, 14, 12, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        ny = calkhmer.new_year_day(Y)
        info = calkhmer.lunar_date(ny, engine=args.engine)
        leap = calkhmer.calendar_leap_type(Y + 544).value or "-"
        row = [
            str(Y),
            fmt(ny),
            info.animal_year_label,
            info.sak_label,
            fmt(lunar_new_year(Y, engine=args.engine)),
            leap,
        ]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
