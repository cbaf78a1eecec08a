from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from types import MappingProxyType
from typing import Any, Mapping, Tuple

from ..core.types import EngineId, EngineSpec, EpochAnchor, LunarDate, LunarMonth
from ..data import lunar_months, terms
from ..data import names as name_tables


# ============================================================
# TABLE CONSTANTS
# ============================================================

# Sexagenary position of 1901-01-01 (Ji-Mao); 2000-01-01 is then Wu-Wu.
BASE_DAY_INDEX = 15
# The first lunar month is a Yin (Tiger) month.
BASE_MONTH_BRANCH_INDEX = 2

EPOCH_1901 = EpochAnchor(date(1901, 1, 1), LunarDate(1900, LunarMonth(11), 11))
ANCHOR_2000 = EpochAnchor(date(2000, 1, 1), LunarDate(1999, LunarMonth(11), 25))


@dataclass(frozen=True)
class TableSpec:
    """Pure data payload for a table-driven lunisolar calendar."""
    id: EngineId
    lunar_info: Tuple[int, ...]
    first_lunar_year: int
    anchors: Tuple[EpochAnchor, ...]   # ascending; anchors[0] is the epoch of day offset 0
    last_solar: date
    base_day_index: int = BASE_DAY_INDEX
    base_month_branch_index: int = BASE_MONTH_BRANCH_INDEX
    term_base_year: int = terms.BASE_YEAR
    term_minutes: Tuple[int, ...] = terms.MEAN_TERM_MINUTES
    # mapping fields take part in equality but not in the hash
    jie_overrides: Mapping[Tuple[int, int], int] = field(default_factory=lambda: terms.JIE_OVERRIDES, hash=False)
    qi_overrides: Mapping[Tuple[int, int], int] = field(default_factory=lambda: terms.QI_OVERRIDES, hash=False)
    names: Mapping[str, object] = field(default_factory=lambda: name_tables.TABLES, hash=False)
    meta: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    def __post_init__(self) -> None:
        if not self.anchors:
            raise ValueError("At least one epoch anchor is required")
        solars = [a.solar for a in self.anchors]
        if solars != sorted(solars) or len(set(solars)) != len(solars):
            raise ValueError("Anchors must be in strictly ascending solar order")
        if len(self.term_minutes) != 24:
            raise ValueError("term_minutes must hold 24 entries")
        if self.last_solar < self.anchors[0].solar:
            raise ValueError("last_solar precedes the epoch")

    def tweak(self, **kwargs) -> "TableSpec":
        return replace(self, **kwargs)


# ============================================================
# BUILT-IN SPECIFICATIONS
# ============================================================

# ------------------------------------------------------------
# HKO (1901-2100)
# ------------------------------------------------------------
HKO_SPEC = TableSpec(
    id=EngineId("table", "hko", "0.1"),
    lunar_info=lunar_months.LUNAR_INFO,
    first_lunar_year=lunar_months.FIRST_YEAR,
    anchors=(EPOCH_1901, ANCHOR_2000),
    last_solar=date(2100, 12, 31),
    meta=MappingProxyType({"source": "Hong Kong Observatory month table", "terms": "mean term series + overrides"}),
)

HKO = EngineSpec(kind="table", id=HKO_SPEC.id, payload=HKO_SPEC)


ALL_SPECS = {
    "hko": HKO,
}
