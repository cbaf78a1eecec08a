from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import calzh
from calzh.core.types import LunarDate


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def _weeks(first: date, days: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = first.weekday()  # Monday=0
    for _ in range(pad):
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
    return weeks


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def lunar_month_calendar(engine: str, Y: int, M: int) -> None:
    """``M`` is signed: negative for the intercalary month."""
    d0 = calzh.to_gregorian(LunarDate.from_signed(Y, M, 1), engine=engine)
    n = calzh.days_in_month(Y, M, engine=engine)
    d1 = d0 + timedelta(days=n - 1)

    days = []
    d = d0
    for i in range(1, n + 1):
        jie, qi = calzh.get_term(d, engine=engine)
        days.append((f"{i:2d}{jie or qi}", f"{d.month:02d}-{d.day:02d}"))
        d += timedelta(days=1)

    leap_tag = "L" if M < 0 else ""
    title = f"{engine} lunar month  Y={Y}  M={abs(M)}{leap_tag}   ({d0} .. {d1})"
    print_grid(title, _weeks(d0, days))


def gregorian_month_calendar(engine: str, gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last_day = pycal.monthrange(gy, gm)[1]

    days = []
    for k in range(last_day):
        d = first + timedelta(days=k)
        t = calzh.day_info(d, engine=engine)
        leap_tag = "L" if t.lunar.month.is_leap else ""
        days.append((f"{d.day:2d}{t.jie or t.qi}", f"{t.lunar.month.number:02d}{leap_tag}-{t.lunar.day:02d}"))

    title = f"{engine} Gregorian month  {gy}-{gm:02d}"
    print_grid(title, _weeks(first, days))

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--engine", default="hko", help="registered engine name (default: hko)")

    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"),
                   help="Lunar month to print: Y M (e.g. 2026 1)")
    p.add_argument("--leap", action="store_true",
                   help="If set, print the intercalary month of that number.")

    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2026 2)")

    args = p.parse_args(argv)

    if not args.lunar and not args.greg:
        # sensible default demo
        lunar_month_calendar(args.engine, Y=2026, M=1)
        gregorian_month_calendar(args.engine, gy=2026, gm=2)
        return 0

    if args.lunar:
        Y, M = args.lunar
        lunar_month_calendar(args.engine, Y=Y, M=-M if args.leap else M)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(args.engine, gy=gy, gm=gm)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
