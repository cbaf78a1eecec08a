"""
calzh.engines.interfaces
------------------------
Defines the boundary between the immutable calendar data (the provider) and
the algorithms that consume it (converter, sexagenary indexer, solar-term
locator, orchestrator).

Standard Reference Frame:
Unless otherwise specified, a day offset is the signed number of days after
the provider's epoch anchor (solar 1901-01-01 = lunar 1900/11/11 for the
built-in tables).
"""

from __future__ import annotations

from datetime import date
from typing import Iterator, Mapping, Protocol, Tuple

from calzh.core.types import EpochAnchor, LunarMonth
from calzh.data.terms import TermKind, TermTable


class CalendarDataProvider(Protocol):
    """
    Read-only calendar tables. Built once, then shared by every engine that
    was constructed from it.
    """

    # ---------------------------------------------------------
    # 1. Coverage and anchors
    # ---------------------------------------------------------
    @property
    def epoch(self) -> EpochAnchor:
        """Anchor of day offset 0."""
        ...

    @property
    def anchors(self) -> Tuple[EpochAnchor, ...]:
        """Conversion anchors in ascending order (the epoch first)."""
        ...

    @property
    def first_lunar_year(self) -> int: ...

    @property
    def last_lunar_year(self) -> int: ...

    @property
    def solar_span(self) -> Tuple[date, date]:
        """First and last supported solar dates (inclusive)."""
        ...

    # ---------------------------------------------------------
    # 2. Gregorian calendar
    # ---------------------------------------------------------
    def is_leap_year(self, year: int) -> bool: ...

    def days_in_solar_month(self, year: int, month: int) -> int: ...

    # ---------------------------------------------------------
    # 3. Lunar months
    # ---------------------------------------------------------
    def leap_month(self, year: int) -> int:
        """Number of the intercalary month of ``year``, or 0 if none."""
        ...

    def days_in_lunar_month(self, year: int, month: LunarMonth) -> int: ...

    def days_in_lunar_year(self, year: int) -> int: ...

    def months_of_year(self, year: int) -> Iterator[LunarMonth]:
        """All month labels of ``year`` in calendar order."""
        ...

    def next_month(self, year: int, month: LunarMonth) -> LunarMonth:
        """
        Successor label. The caller increments the year when the result is
        ordinary month 1.
        """
        ...

    def check_lunar_fields(self, year: int, month: LunarMonth, day: int) -> None:
        """Raise InvalidFieldError unless ``day`` exists in ``month`` of ``year``."""
        ...

    # ---------------------------------------------------------
    # 4. Sexagenary constants and solar terms
    # ---------------------------------------------------------
    @property
    def base_day_index(self) -> int:
        """Sexagenary cycle position of day offset 0."""
        ...

    @property
    def base_month_branch_index(self) -> int:
        """Branch of the first lunar month."""
        ...

    def term_table(self, kind: TermKind) -> TermTable: ...

    # ---------------------------------------------------------
    # 5. Name tables
    # ---------------------------------------------------------
    @property
    def names(self) -> Mapping[str, object]:
        """Name and annotation tables keyed by table name (GAN, ZHI, XIU, ...)."""
        ...
