"""
calzh.engines.calendar
----------------------
The Orchestrator. Binds the converter, the sexagenary indexer and the two
solar-term locators to one data provider and produces DayInfo records.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Tuple

from calzh.attributes import lookup
from calzh.core.errors import OutOfRangeError
from calzh.core.time import civil_date
from calzh.core.types import DayInfo, EngineId, LunarDate, LunarMonth
from calzh.engines import sexagenary
from calzh.engines.converter import LunisolarConverter
from calzh.engines.interfaces import CalendarDataProvider
from calzh.engines.solar_terms import SolarTermLocator


class LunisolarCalendar:
    """
    Translates between solar and lunisolar dates and attaches the indices,
    terms and festivals of the day.
    """
    def __init__(self, id: EngineId, provider: CalendarDataProvider):
        self.id = id
        self.data = provider
        self.converter = LunisolarConverter(provider)
        self.jie = SolarTermLocator(provider.term_table("jie"))
        self.qi = SolarTermLocator(provider.term_table("qi"))

    @property
    def tables(self):
        return self.data.names

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def to_lunar(self, d: date) -> LunarDate:
        return self.converter.solar_to_lunar(d)

    def to_gregorian(self, lunar: LunarDate) -> date:
        return self.converter.lunar_to_solar(lunar)

    # ---------------------------------------------------------
    # Day records
    # ---------------------------------------------------------

    def _build(self, solar: date, lunar: LunarDate, offset: int, debug: bool) -> DayInfo:
        month_number = lunar.month.number
        if lunar.month.is_leap:
            fest: Tuple[str, ...] = ()
            other: Tuple[str, ...] = ()
        else:
            fest = tuple(lookup.festivals(self.tables, month_number, lunar.day))
            other = tuple(lookup.other_festivals(self.tables, month_number, lunar.day))

        dbg = None
        if debug:
            anchor = self.converter.select_anchor(solar)
            dbg = {
                "anchor": anchor,
                "anchor_diff": self.converter.solar_diff(anchor.solar, solar),
                "leap_month": self.data.leap_month(lunar.year),
                "month_days": self.data.days_in_lunar_month(lunar.year, lunar.month),
                "jie_day": self.jie.term_day(solar.year, solar.month),
                "qi_day": self.qi.term_day(solar.year, solar.month),
            }

        return DayInfo(
            solar=solar,
            engine=self.id,
            lunar=lunar,
            day_offset=offset,
            year_index=sexagenary.year_index(lunar.year),
            month_index=sexagenary.month_index(lunar.year, lunar.month, self.data.base_month_branch_index),
            day_index=sexagenary.day_index(offset, self.data.base_day_index),
            jie=self.jie.get_term(solar),
            qi=self.qi.get_term(solar),
            festivals=fest,
            other_festivals=other,
            debug=dbg,
        )

    def day_info(self, d: date, *, debug: bool = False) -> DayInfo:
        d = civil_date(d)
        lunar = self.converter.solar_to_lunar(d)
        offset = self.converter.day_offset(lunar)
        return self._build(d, lunar, offset, debug)

    def lunar_info(self, lunar: LunarDate, *, debug: bool = False) -> DayInfo:
        offset = self.converter.day_offset(lunar)
        solar = self.converter.lunar_to_solar(lunar)
        return self._build(solar, lunar, offset, debug)

    # ---------------------------------------------------------
    # Year-level listings
    # ---------------------------------------------------------

    def get_term(self, d: date) -> Tuple[str, str]:
        d = civil_date(d)
        self.converter.check_solar(d)
        return self.jie.get_term(d), self.qi.get_term(d)

    def terms_in_year(self, year: int) -> List[Tuple[date, str]]:
        """All 24 boundary days of a solar year in date order."""
        out = self.jie.terms_in_year(year) + self.qi.terms_in_year(year)
        return sorted(out)

    def months_in_year(self, year: int) -> List[Dict[str, Any]]:
        """Months of a lunar year with their first solar day (None before the epoch) and length."""
        out = []
        for month in self.data.months_of_year(year):
            try:
                start = self.converter.lunar_to_solar(LunarDate(year, month, 1))
            except OutOfRangeError:
                start = None
            out.append({
                "month": month.signed,
                "name": lookup.month_in_chinese(self.tables, month.signed),
                "days": self.data.days_in_lunar_month(year, month),
                "start": start,
            })
        return out

    def days_in_month(self, year: int, month: LunarMonth) -> int:
        return self.data.days_in_lunar_month(year, month)

    def leap_month(self, year: int) -> int:
        return self.data.leap_month(year)

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------
    def info(self) -> Dict[str, Any]:
        first, last = self.data.solar_span
        return {
            "id": self.id.__dict__,
            "solar_span": (first.isoformat(), last.isoformat()),
            "lunar_years": (self.data.first_lunar_year, self.data.last_lunar_year),
            "anchors": [(a.solar.isoformat(), a.lunar.year, a.lunar.signed_month, a.lunar.day) for a in self.data.anchors],
        }

    def explain(self, d: date) -> Dict[str, Any]:
        return self.day_info(d, debug=True).__dict__
