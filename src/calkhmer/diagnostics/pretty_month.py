from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import calkhmer
from calkhmer.core.time import weekday_sun0


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def lunar_label(info: calkhmer.KhmerLunarDate) -> str:
    # 15K* = 15th waxing day, holy day
    return f"{info.lunar_day:02d}{info.moon_phase}" + ("*" if info.is_holy_day else "")


def gregorian_month_calendar(engine: str, gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    days = []
    d = first
    while d <= last:
        info = calkhmer.lunar_date(d, engine=engine)
        days.append((f"{d.day:2d} {info.lunar_month:02d}", lunar_label(info)))
        d += timedelta(days=1)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    for _ in range(weekday_sun0(first)):
        wk.append(cell("", ""))
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    head = calkhmer.lunar_date(first, engine=engine)
    title = f"{engine} Gregorian month  {gy}-{gm:02d}   (BE {head.buddhist_era_year}, {head.animal_year_label} {head.sak_label})"
    print_grid(title, weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian month calendar with lunar month, day and phase labels."
    )
    p.add_argument("--engine", default="khmer")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2018 1)")
    args = p.parse_args(argv)

    if not args.greg:
        today = date.today()
        gregorian_month_calendar(args.engine, gy=today.year, gm=today.month)
        return 0

    gy, gm = args.greg
    gregorian_month_calendar(args.engine, gy=gy, gm=gm)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
