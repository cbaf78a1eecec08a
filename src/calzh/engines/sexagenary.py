"""
calzh.engines.sexagenary
------------------------
Year, month and day positions in the 60-cycle of stems and branches.

The lunar year is used for the year pillar and the ordinal lunar month for the
month pillar, so neither follows the solar-term boundaries.
"""

from __future__ import annotations

from calzh.core.types import LunarMonth, SexagenaryIndex

# 4 CE (and every 60 years after, e.g. 1984) is a Jia-Zi year.
YEAR_CYCLE_BASE = 4


def year_index(year: int) -> SexagenaryIndex:
    return SexagenaryIndex.from_cycle(year - YEAR_CYCLE_BASE)


def month_index(year: int, month: LunarMonth, base_branch: int = 2) -> SexagenaryIndex:
    """
    An intercalary month shares the pillar of its ordinary month.
    The stem of month 1 follows the year stem: Jia/Ji years start at Bing-Yin.
    """
    m0 = month.number - 1
    stem_offset = (year_index(year).stem % 5 + 1) * 2
    return SexagenaryIndex((m0 + stem_offset) % 10, (m0 + base_branch) % 12)


def day_index(day_offset: int, base: int) -> SexagenaryIndex:
    return SexagenaryIndex.from_cycle(day_offset + base)
