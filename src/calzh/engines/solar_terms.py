"""
calzh.engines.solar_terms
-------------------------
Locates Jie / Qi boundary days from a per-month era table and a 4-year cycle,
then applies the (ry, month) override patches.
"""

from __future__ import annotations

from bisect import bisect_right
from datetime import date
from typing import List, Tuple

from calzh.core.errors import OutOfRangeError
from calzh.data.terms import TermTable


class SolarTermLocator:
    """One instance per term kind; holds no state beyond its table."""

    def __init__(self, table: TermTable):
        self.t = table

    @property
    def kind(self) -> str:
        return self.t.kind

    def relative_year(self, year: int) -> int:
        return year - self.t.base_year + 1

    def periodic_day(self, year: int, month: int) -> int:
        """Boundary day from the era table alone, before overrides."""
        ry = self.relative_year(year)
        if not self.t.first_ry <= ry <= self.t.last_ry:
            raise OutOfRangeError(f"No {self.t.kind} table for year {year}")
        cutovers = self.t.cutovers[month - 1]
        i = bisect_right(cutovers, ry)
        return self.t.days[month - 1][4 * i + ry % 4]

    def term_day(self, year: int, month: int) -> int:
        ry = self.relative_year(year)
        day = self.periodic_day(year, month)
        return self.t.overrides.get((ry, month), day)

    def name(self, month: int) -> str:
        return self.t.names[month - 1]

    def get_term(self, d: date) -> str:
        if d.day == self.term_day(d.year, d.month):
            return self.name(d.month)
        return ""

    def terms_in_year(self, year: int) -> List[Tuple[date, str]]:
        return [(date(year, m, self.term_day(year, m)), self.name(m)) for m in range(1, 13)]
