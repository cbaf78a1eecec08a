"""
calzh.data.provider
-------------------
Table-backed implementation of CalendarDataProvider. All derived tables
(lunar year lengths, solar-term eras) are built once in the constructor and
are read-only afterwards.
"""

from __future__ import annotations

import logging
from datetime import date
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple

from calzh.core import time as gtime
from calzh.core.errors import InvalidFieldError, OutOfRangeError
from calzh.core.types import EpochAnchor, LunarMonth
from calzh.data.lunar_months import iter_months, leap_month_of, month_length_of
from calzh.data.terms import TermKind, TermTable, build_term_table

logger = logging.getLogger(__name__)


class TableDataProvider:
    """
    Serves the month-length, leap-month, solar-term and name tables described
    by a TableSpec. Fully implements CalendarDataProvider.
    """
    def __init__(self, spec):
        self.p = spec
        self._year_days: Tuple[int, ...] = tuple(
            sum(days for _, _, days in iter_months(info)) for info in spec.lunar_info
        )
        first, last = self.solar_span
        self._terms: Mapping[str, TermTable] = MappingProxyType({
            "jie": build_term_table(
                "jie", first_year=first.year, last_year=last.year,
                base_year=spec.term_base_year, overrides=spec.jie_overrides, minutes=spec.term_minutes,
            ),
            "qi": build_term_table(
                "qi", first_year=first.year, last_year=last.year,
                base_year=spec.term_base_year, overrides=spec.qi_overrides, minutes=spec.term_minutes,
            ),
        })
        for anchor in spec.anchors:
            self.check_lunar_fields(anchor.lunar.year, anchor.lunar.month, anchor.lunar.day)
        logger.debug(
            "provider %s ready: lunar years %d..%d, solar %s..%s",
            spec.id.name, self.first_lunar_year, self.last_lunar_year, first, last,
        )

    # ---------------------------------------------------------
    # Coverage and anchors
    # ---------------------------------------------------------

    @property
    def epoch(self) -> EpochAnchor:
        return self.p.anchors[0]

    @property
    def anchors(self) -> Tuple[EpochAnchor, ...]:
        return self.p.anchors

    @property
    def first_lunar_year(self) -> int:
        return self.p.first_lunar_year

    @property
    def last_lunar_year(self) -> int:
        return self.p.first_lunar_year + len(self.p.lunar_info) - 1

    @property
    def solar_span(self) -> Tuple[date, date]:
        return self.p.anchors[0].solar, self.p.last_solar

    # ---------------------------------------------------------
    # Gregorian calendar
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        return gtime.is_leap_year(year)

    def days_in_solar_month(self, year: int, month: int) -> int:
        return gtime.days_in_month(year, month)

    # ---------------------------------------------------------
    # Lunar months
    # ---------------------------------------------------------

    def _info(self, year: int) -> int:
        if not self.first_lunar_year <= year <= self.last_lunar_year:
            raise OutOfRangeError(
                f"Lunar year {year} outside {self.first_lunar_year}..{self.last_lunar_year}"
            )
        return self.p.lunar_info[year - self.first_lunar_year]

    def leap_month(self, year: int) -> int:
        return leap_month_of(self._info(year))

    def days_in_lunar_month(self, year: int, month: LunarMonth) -> int:
        info = self._info(year)
        if month.is_leap and leap_month_of(info) != month.number:
            raise InvalidFieldError(f"Lunar year {year} has no intercalary month {month.number}")
        return month_length_of(info, month.number, month.is_leap)

    def days_in_lunar_year(self, year: int) -> int:
        self._info(year)
        return self._year_days[year - self.first_lunar_year]

    def months_of_year(self, year: int) -> Iterator[LunarMonth]:
        for number, is_leap, _ in iter_months(self._info(year)):
            yield LunarMonth(number, is_leap)

    def next_month(self, year: int, month: LunarMonth) -> LunarMonth:
        if not month.is_leap and self.leap_month(year) == month.number:
            return LunarMonth(month.number, True)
        return LunarMonth(month.number % 12 + 1)

    def check_lunar_fields(self, year: int, month: LunarMonth, day: int) -> None:
        days = self.days_in_lunar_month(year, month)
        if not 1 <= day <= days:
            raise InvalidFieldError(f"Day {day} outside 1..{days} for lunar {year}/{month.signed}")

    # ---------------------------------------------------------
    # Sexagenary constants and solar terms
    # ---------------------------------------------------------

    @property
    def base_day_index(self) -> int:
        return self.p.base_day_index

    @property
    def base_month_branch_index(self) -> int:
        return self.p.base_month_branch_index

    def term_table(self, kind: TermKind) -> TermTable:
        if kind not in self._terms:
            raise KeyError(f"Unknown term kind '{kind}'. Available: {sorted(self._terms)}")
        return self._terms[kind]

    # ---------------------------------------------------------
    # Name tables
    # ---------------------------------------------------------

    @property
    def names(self) -> Mapping[str, object]:
        return self.p.names
