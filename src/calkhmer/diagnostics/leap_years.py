#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from calkhmer.core.types import LeapType
from calkhmer.engines import leap


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calkhmer[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calkhmer[diagnostics]"') from e


# Row of the barcode for each applied leap type.
ROWS = {LeapType.LEAP_DAY: 1, LeapType.LEAP_MONTH: 2}
ROW_LABELS = ("leap day", "leap month")


def rows(start_year: int, end_year: int, *, leap_offset: int = 544) -> List[Tuple[int, dict]]:
    """(Gregorian year, leap summary of the BE year that governs it)."""
    return [(Y, leap.leap_summary(Y + leap_offset)) for Y in range(start_year, end_year + 1)]


def build_points(np, start_year: int, end_year: int, *, leap_offset: int = 544):
    xs, ys = [], []
    for Y in range(start_year, end_year + 1):
        t = leap.calendar_leap(Y + leap_offset)
        if t in ROWS:
            xs.append(Y)
            ys.append(ROWS[t])
    return np.array(xs, dtype=int), np.array(ys, dtype=int)


def print_table(start_year: int, end_year: int) -> None:
    headers = ["Year", "BE", "aharkun", "avoman", "krom", "bodithey", "astro", "calendar"]
    colw = [5, 5, 8, 6, 5, 8, 5, 8]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))
    for Y, s in rows(start_year, end_year):
        row = [
            Y, s["be_year"], s["aharkun"], s["avoman"], s["kromthupul"], s["bodithey"],
            s["bodithey_leap"] or "-", s["calendar_leap"] or "-",
        ]
        print("  ".join(str(c).ljust(w) for c, w in zip(row, colw)))


def plot_barcode(start_year: int, end_year: int, out: str, title: str) -> None:
    np = _need_numpy()
    plt = _need_matplotlib()

    fig, ax = plt.subplots(figsize=(16, 2.4))
    x, r = build_points(np, start_year, end_year)
    ax.scatter(x, r, s=40, marker="s", c="0.15", linewidths=0.0, zorder=5)

    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, len(ROW_LABELS) + 0.5)
    ax.set_yticks(list(range(1, len(ROW_LABELS) + 1)))
    ax.set_yticklabels(ROW_LABELS)
    ax.tick_params(axis="both", which="both", length=0)
    ax.set_xlabel("Gregorian year")
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(out, dpi=250)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Bodithey/Avoman leap table per Gregorian year, with an optional barcode plot."
    )
    p.add_argument("--start-year", type=int, default=2000)
    p.add_argument("--end-year", type=int, default=2030)
    p.add_argument("--plot", action="store_true", help="Also save a leap barcode PNG (needs extras).")
    p.add_argument("--out", default="leap_barcode.png")
    p.add_argument("--title", default="Khmer calendar leap insertions")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    print_table(args.start_year, args.end_year)
    if args.plot:
        plot_barcode(args.start_year, args.end_year, args.out, args.title)
        print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
