from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    from calzh.core.time import make_date

    y, m, d = map(int, s.split("-"))
    return make_date(y, m, d)


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


def _print_day(lunar, info, *, full: bool) -> None:
    print(f"{lunar.solar.isoformat()}  {lunar.to_full_string() if full else lunar}")
    print(f"  lunar: {lunar.year}/{lunar.month}/{lunar.day}  offset: {lunar.day_offset}")
    print(f"  ganzhi: {lunar.year_in_ganzhi}年 {lunar.month_in_ganzhi}月 {lunar.day_in_ganzhi}日  ({lunar.shengxiao})")
    if lunar.jie or lunar.qi:
        print(f"  term: {lunar.jie}{lunar.qi}")
    fest = lunar.festivals + lunar.other_festivals
    if fest:
        print(f"  festivals: {', '.join(fest)}")
    if info.attributes:
        for k, v in info.attributes.items():
            print(f"  {k}: {v}")
    if info.debug:
        for k, v in info.debug.items():
            print(f"  debug.{k}: {v}")


def cmd_day(argv: list[str]) -> int:
    import calzh

    p = argparse.ArgumentParser(prog="calzh day", description="Gregorian -> Chinese lunisolar day")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--engine", default="hko")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--full", action="store_true", help="print the long description")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    info = calzh.day_info(d, engine=args.engine, attributes=tuple(args.attr), debug=args.debug)
    _print_day(calzh.from_date(d, engine=args.engine), info, full=args.full)
    return 0


def cmd_lunar(argv: list[str]) -> int:
    import calzh

    p = argparse.ArgumentParser(prog="calzh lunar", description="Chinese lunisolar date -> Gregorian")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, help="signed month; negative for the intercalary month")
    p.add_argument("day", type=int)
    p.add_argument("--engine", default="hko")
    p.add_argument("--full", action="store_true", help="print the long description")
    args = p.parse_args(argv)

    lunar = calzh.from_lunar(args.year, args.month, args.day, engine=args.engine)
    _print_day(lunar, lunar.info, full=args.full)
    return 0


def cmd_terms(argv: list[str]) -> int:
    import calzh

    p = argparse.ArgumentParser(prog="calzh terms", description="The 24 solar terms of a Gregorian year")
    p.add_argument("year", type=int)
    p.add_argument("--engine", default="hko")
    args = p.parse_args(argv)

    for d, name in calzh.terms_in_year(args.year, engine=args.engine):
        print(f"{d.isoformat()}  {name}")
    return 0


def cmd_months(argv: list[str]) -> int:
    import calzh

    p = argparse.ArgumentParser(prog="calzh months", description="Months of a lunar year")
    p.add_argument("year", type=int)
    p.add_argument("--engine", default="hko")
    args = p.parse_args(argv)

    for rec in calzh.months_in_year(args.year, engine=args.engine):
        start = rec["start"].isoformat() if rec["start"] is not None else "-"
        print(f"{rec['month']:>3}  {rec['name']:<3}  {rec['days']}  {start}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if "--verbose" in argv:
        argv = [a for a in argv if a != "--verbose"]
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Shorthand: `calzh YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="calzh", description="Chinese lunisolar calendar toolkit CLI.")
    p.add_argument("--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> lunisolar day", add_help=False)
    sub.add_parser("lunar", help="Lunisolar date -> Gregorian", add_help=False)
    sub.add_parser("terms", help="List the solar terms of a year", add_help=False)
    sub.add_parser("months", help="List the months of a lunar year", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print lunar/Gregorian month calendars (diagnostics)", add_help=False)
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "lunar":
        return cmd_lunar(rest)

    if args.cmd == "terms":
        return cmd_terms(rest)

    if args.cmd == "months":
        return cmd_months(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("calzh.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calzh.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
