"""
calzh.data.terms
----------------
Solar-term boundary tables.

Each Gregorian month carries one Jie (sectional) and one Qi (central) term.
For a term kind and month the table stores a list of era cutovers and, per
era, four boundary days selected by ``ry % 4``, where ``ry = year - base_year + 1``.
Era i covers ``cutovers[i-1] <= ry < cutovers[i]``.

The eras are compressed from a mean solar-term series (minutes after the
1900 Xiaohan, one tropical year = 525948.76 minutes, UTC calendar day).
The (ry, month) override patches are compatibility data and are applied
after the periodic lookup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from types import MappingProxyType
from typing import List, Literal, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

TermKind = Literal["jie", "qi"]

JIE_NAMES: Tuple[str, ...] = (
    "小寒", "立春", "惊蛰", "清明", "立夏", "芒种",
    "小暑", "立秋", "白露", "寒露", "立冬", "大雪",
)
QI_NAMES: Tuple[str, ...] = (
    "大寒", "雨水", "春分", "谷雨", "小满", "夏至",
    "大暑", "处暑", "秋分", "霜降", "小雪", "冬至",
)

# Minutes after TERM_ORIGIN for the 24 terms of 1900, Xiaohan first.
MEAN_TERM_MINUTES: Tuple[int, ...] = (
    0, 21208, 42467, 63836, 85337, 107014,
    128867, 150921, 173149, 195551, 218072, 240693,
    263343, 285989, 308563, 331033, 353350, 375494,
    397447, 419210, 440795, 462224, 483532, 504758,
)
TERM_ORIGIN = datetime(1900, 1, 6, 2, 5)
TROPICAL_YEAR_MINUTES = 525948.76

BASE_YEAR = 1901

JIE_OVERRIDES: Mapping[Tuple[int, int], int] = MappingProxyType({
    (121, 4): 5,
    (132, 4): 5,
    (194, 6): 6,
})
QI_OVERRIDES: Mapping[Tuple[int, int], int] = MappingProxyType({
    (171, 3): 21,
    (181, 5): 21,
})


@dataclass(frozen=True)
class TermTable:
    kind: TermKind
    base_year: int
    first_ry: int
    names: Tuple[str, ...]                       # per month 1..12
    cutovers: Tuple[Tuple[int, ...], ...]        # per month, exclusive era ends in ry
    days: Tuple[Tuple[int, ...], ...]            # per month, four days per era
    overrides: Mapping[Tuple[int, int], int]     # (ry, month) -> day

    @property
    def last_ry(self) -> int:
        return min(c[-1] for c in self.cutovers) - 1


def mean_term_date(year: int, index: int, *, minutes: Sequence[int] = MEAN_TERM_MINUTES) -> date:
    """UTC calendar day of term ``index`` (0 = Xiaohan .. 23 = Dongzhi) in ``year``."""
    offset = TROPICAL_YEAR_MINUTES * (year - TERM_ORIGIN.year) + minutes[index]
    return (TERM_ORIGIN + timedelta(minutes=offset)).date()


def compress_eras(days: Sequence[int], first_ry: int) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """
    Greedy split of consecutive yearly days into eras of constant 4-year pattern.
    A new era starts at the first year whose day disagrees with its slot.
    """
    cutovers: List[int] = []
    table: List[int] = []
    pattern: List[Optional[int]] = [None] * 4

    for k, day in enumerate(days):
        ry = first_ry + k
        slot = ry % 4
        if pattern[slot] is not None and pattern[slot] != day:
            cutovers.append(ry)
            table.extend(0 if p is None else p for p in pattern)
            pattern = [None] * 4
        pattern[slot] = day

    cutovers.append(first_ry + len(days))
    # unset slots of the last era lie past the covered range
    table.extend(0 if p is None else p for p in pattern)
    return tuple(cutovers), tuple(table)


def build_term_table(
    kind: TermKind,
    *,
    first_year: int,
    last_year: int,
    base_year: int = BASE_YEAR,
    overrides: Optional[Mapping[Tuple[int, int], int]] = None,
    minutes: Sequence[int] = MEAN_TERM_MINUTES,
) -> TermTable:
    if kind not in ("jie", "qi"):
        raise ValueError("kind must be 'jie' or 'qi'")
    if overrides is None:
        overrides = JIE_OVERRIDES if kind == "jie" else QI_OVERRIDES

    first_ry = first_year - base_year + 1
    cutovers = []
    days = []
    for month in range(1, 13):
        index = 2 * (month - 1) + (0 if kind == "jie" else 1)
        yearly = [mean_term_date(y, index, minutes=minutes).day for y in range(first_year, last_year + 1)]
        c, d = compress_eras(yearly, first_ry)
        cutovers.append(c)
        days.append(d)

    logger.debug(
        "built %s table for %d..%d: %d eras",
        kind, first_year, last_year, sum(len(c) for c in cutovers),
    )
    return TermTable(
        kind=kind,
        base_year=base_year,
        first_ry=first_ry,
        names=JIE_NAMES if kind == "jie" else QI_NAMES,
        cutovers=tuple(cutovers),
        days=tuple(days),
        overrides=MappingProxyType(dict(overrides)),
    )
