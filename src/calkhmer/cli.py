from __future__ import annotations

import argparse
from datetime import date
import json
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_day(info) -> None:
    print(info.full_description)
    print(f"  code         : {info.code}")
    print(f"  date         : {info.civil_date.isoformat()}")
    print(f"  sak          : {info.sak:02d} {info.sak_label}")
    print(f"  animal year  : {info.animal_year:02d} {info.animal_year_label}")
    print(f"  BE year      : {info.buddhist_era_year}")
    print(f"  lunar month  : {info.lunar_month:02d} {info.lunar_month_label}")
    print(f"  moon phase   : {info.moon_phase} {info.moon_phase_label}")
    print(f"  lunar day    : {info.lunar_day} ({info.lunar_day_label})")
    print(f"  holy day     : {'yes' if info.is_holy_day else 'no'}")
    for k, v in (info.attributes or {}).items():
        print(f"  {k:<13}: {v}")
    for k, v in (info.debug or {}).items():
        print(f"  [debug] {k}: {v}")


def cmd_day(argv: list[str]) -> int:
    import calkhmer
    from calkhmer.attributes.registry import list_attributes

    p = argparse.ArgumentParser(prog="calkhmer day", description="Gregorian -> Khmer lunar day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--engine", default="khmer")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], choices=list_attributes(),
                   help="attribute name (repeatable)")
    p.add_argument("--json", action="store_true", help="print the record as JSON")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        d = _parse_ymd(args.date)
    except ValueError as e:
        raise SystemExit(f"Invalid date {args.date!r}: {e}")

    try:
        info = calkhmer.lunar_date(d, engine=args.engine, attributes=tuple(args.attr), debug=args.debug)
    except calkhmer.InvalidRangeError as e:
        raise SystemExit(str(e))

    if args.json:
        out = info.as_dict()
        if info.debug:
            out["debug"] = info.debug
        print(json.dumps(out, ensure_ascii=False, indent=2, default=str))
    else:
        _print_day(info)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `calkhmer YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    from calkhmer.attributes.registry import list_attributes

    p = argparse.ArgumentParser(prog="calkhmer", description="Khmer lunar calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # day
    p_day = sub.add_parser("day", help="Gregorian -> Khmer lunar day label")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--engine", default="khmer")
    p_day.add_argument("--debug", action="store_true")
    p_day.add_argument("--attr", action="append", default=[], choices=list_attributes(),
                       help="attribute name (repeatable)")
    p_day.add_argument("--json", action="store_true")

    # diagnostics
    sub.add_parser("pretty-month", help="Print a Gregorian month with lunar labels (diagnostics)")
    sub.add_parser("new-years", help="Print New Year table (diagnostics)")
    sub.add_parser("leap-years", help="Print Bodithey/Avoman leap table, optional barcode plot (diagnostics)")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        day_argv = [args.date]
        if args.engine != "khmer":
            day_argv += ["--engine", args.engine]
        if args.debug:
            day_argv += ["--debug"]
        if args.json:
            day_argv += ["--json"]
        if args.verbose:
            day_argv += ["--verbose"]
        for a in args.attr:
            day_argv += ["--attr", a]
        day_argv += rest
        return cmd_day(day_argv)

    _setup_logging(args.verbose)

    if args.cmd == "pretty-month":
        return _run_module_main("calkhmer.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("calkhmer.diagnostics.new_years_table", rest)

    if args.cmd == "leap-years":
        return _run_module_main("calkhmer.diagnostics.leap_years", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
