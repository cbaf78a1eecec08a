"""Random solar -> lunar -> solar check over the registered engines."""

from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import Iterator, Tuple

import calzh
from calzh.core.types import LunarDate


def mismatches(engine: str, n: int, start: date, end: date, seed: int) -> Iterator[Tuple[date, LunarDate, date]]:
    """Yield (solar, lunar, back) for every sampled day that does not convert back."""
    rng = random.Random(seed)
    span = (end - start).days
    for _ in range(n):
        d0 = start + timedelta(days=rng.randint(0, span))
        lunar = calzh.day_info(d0, engine=engine).lunar
        back = calzh.to_gregorian(lunar, engine=engine)
        if back != d0 or calzh.day_info(back, engine=engine).lunar != lunar:
            yield d0, lunar, back


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round trip random days through the lunisolar calendar.")
    p.add_argument("--engines", default="hko", help="comma-separated engine names")
    p.add_argument("--N", type=int, default=2000, help="samples per engine")
    p.add_argument("--start", type=date.fromisoformat, default=date(1901, 1, 1))
    p.add_argument("--end", type=date.fromisoformat, default=date(2100, 12, 31))
    p.add_argument("--seed", type=int, default=123)
    args = p.parse_args(argv)
    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    failed = 0
    for engine in filter(None, (e.strip() for e in args.engines.split(","))):
        for d0, lunar, back in mismatches(engine, args.N, args.start, args.end, args.seed):
            failed += 1
            print(f"FAIL {engine}: {d0} -> {lunar.year}/{lunar.signed_month}/{lunar.day} -> {back}")

    if failed:
        print(f"Round-trip failures: {failed}")
        return 1
    print("All round-trip tests passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
