"""
calzh.engines.converter
-----------------------
Solar <-> lunisolar conversion by day accumulation from the nearest epoch
anchor. Exact within the provider's covered span.
"""

from __future__ import annotations

from datetime import date

from calzh.core.errors import OutOfRangeError
from calzh.core.time import civil_date, from_jdn, to_jdn
from calzh.core.types import EpochAnchor, LunarDate, LunarMonth
from calzh.engines.interfaces import CalendarDataProvider


class LunisolarConverter:
    def __init__(self, provider: CalendarDataProvider):
        self.data = provider
        self._epoch_jdn = to_jdn(provider.epoch.solar)

    # ---------------------------------------------------------
    # Range checks
    # ---------------------------------------------------------

    def check_solar(self, d: date) -> None:
        d = civil_date(d)
        first, last = self.data.solar_span
        if not first <= d <= last:
            raise OutOfRangeError(f"Solar date {d} outside {first}..{last}")

    def check_lunar(self, lunar: LunarDate) -> None:
        if not self.data.first_lunar_year <= lunar.year <= self.data.last_lunar_year:
            raise OutOfRangeError(
                f"Lunar year {lunar.year} outside {self.data.first_lunar_year}..{self.data.last_lunar_year}"
            )
        self.data.check_lunar_fields(lunar.year, lunar.month, lunar.day)

    # ---------------------------------------------------------
    # Day offset <-> solar date
    # ---------------------------------------------------------

    def solar_to_offset(self, d: date) -> int:
        return to_jdn(civil_date(d)) - self._epoch_jdn

    def offset_to_solar(self, offset: int) -> date:
        return from_jdn(self._epoch_jdn + offset)

    # ---------------------------------------------------------
    # Forward: solar date to lunar date
    # ---------------------------------------------------------

    def select_anchor(self, d: date) -> EpochAnchor:
        """Latest anchor not after ``d``; the first anchor is the span start."""
        chosen = self.data.anchors[0]
        for anchor in self.data.anchors[1:]:
            if anchor.solar > d:
                break
            chosen = anchor
        return chosen

    def _day_of_year(self, d: date) -> int:
        n = d.day
        for m in range(1, d.month):
            n += self.data.days_in_solar_month(d.year, m)
        return n

    def solar_diff(self, start: date, d: date) -> int:
        """Days from ``start`` to ``d`` (d >= start) by whole years, whole months and days."""
        diff = 0
        for y in range(start.year, d.year):
            diff += 365
            if self.data.is_leap_year(y):
                diff += 1
        return diff + self._day_of_year(d) - self._day_of_year(start)

    def solar_to_lunar(self, d: date) -> LunarDate:
        d = civil_date(d)
        self.check_solar(d)
        anchor = self.select_anchor(d)

        year = anchor.lunar.year
        month = anchor.lunar.month
        day = anchor.lunar.day + self.solar_diff(anchor.solar, d)

        last_day = self.data.days_in_lunar_month(year, month)
        while day > last_day:
            day -= last_day
            month = self.data.next_month(year, month)
            if month == LunarMonth(1):
                year += 1
            last_day = self.data.days_in_lunar_month(year, month)

        return LunarDate(year, month, day)

    # ---------------------------------------------------------
    # Inverse: lunar date to solar date
    # ---------------------------------------------------------

    def _days_into_table(self, lunar: LunarDate) -> int:
        """Days from the first day of the provider's first lunar year to ``lunar``."""
        n = 0
        for y in range(self.data.first_lunar_year, lunar.year):
            n += self.data.days_in_lunar_year(y)
        for month in self.data.months_of_year(lunar.year):
            if month == lunar.month:
                break
            n += self.data.days_in_lunar_month(lunar.year, month)
        return n + lunar.day - 1

    def day_offset(self, lunar: LunarDate) -> int:
        """Signed days from the epoch anchor to ``lunar``."""
        self.check_lunar(lunar)
        return self._days_into_table(lunar) - self._days_into_table(self.data.epoch.lunar)

    def lunar_to_solar(self, lunar: LunarDate) -> date:
        offset = self.day_offset(lunar)
        first, last = self.data.solar_span
        if not 0 <= offset <= self.solar_to_offset(last):
            raise OutOfRangeError(f"Lunar date {lunar.year}/{lunar.signed_month}/{lunar.day} outside {first}..{last}")
        return self.offset_to_solar(offset)
