from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, Literal, Optional, Tuple

from .errors import InvalidFieldError

@dataclass(frozen=True)
class EngineId:
    family: Literal["table", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class LunarMonth:
    """A lunar month label: ordinary or intercalary (leap) month of a given number."""
    number: int
    is_leap: bool = False

    def __post_init__(self) -> None:
        if not 1 <= self.number <= 12:
            raise InvalidFieldError(f"Lunar month number must be in 1..12, got {self.number}")

    @classmethod
    def from_signed(cls, month: int) -> "LunarMonth":
        """Signed encoding: negative means the intercalary month of that magnitude."""
        if month == 0:
            raise InvalidFieldError("Lunar month 0 does not exist")
        return cls(abs(month), month < 0)

    @property
    def signed(self) -> int:
        return -self.number if self.is_leap else self.number

@dataclass(frozen=True)
class LunarDate:
    year: int
    month: LunarMonth
    day: int

    @classmethod
    def from_signed(cls, year: int, month: int, day: int) -> "LunarDate":
        return cls(year, LunarMonth.from_signed(month), day)

    @property
    def signed_month(self) -> int:
        return self.month.signed

@dataclass(frozen=True)
class SexagenaryIndex:
    """Stem/branch pair; only pairs of equal parity occur in the 60-cycle."""
    stem: int
    branch: int

    def __post_init__(self) -> None:
        if not (0 <= self.stem < 10 and 0 <= self.branch < 12):
            raise InvalidFieldError(f"Stem/branch out of range: ({self.stem}, {self.branch})")
        if self.stem % 2 != self.branch % 2:
            raise InvalidFieldError(f"Stem {self.stem} and branch {self.branch} differ in parity")

    @classmethod
    def from_cycle(cls, idx: int) -> "SexagenaryIndex":
        idx %= 60
        return cls(idx % 10, idx % 12)

    @property
    def cycle(self) -> int:
        """Position 0..59 in the sexagenary cycle (0 = Jia-Zi)."""
        return (6 * self.stem - 5 * self.branch) % 60

@dataclass(frozen=True)
class EpochAnchor:
    """An exactly known solar <-> lunar correspondence."""
    solar: date
    lunar: LunarDate

@dataclass(frozen=True)
class DayInfo:
    solar: date
    engine: EngineId
    lunar: LunarDate
    day_offset: int
    year_index: SexagenaryIndex
    month_index: SexagenaryIndex
    day_index: SexagenaryIndex
    jie: str = ""
    qi: str = ""
    festivals: Tuple[str, ...] = ()
    other_festivals: Tuple[str, ...] = ()
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None

@dataclass(frozen=True)
class EngineSpec:
    """Top-level wrapper for all engine specifications."""
    kind: Literal["table"]
    id: EngineId
    payload: Any  # TableSpec

    def tweak(self, **kwargs) -> "EngineSpec":
        return replace(self, payload=replace(self.payload, **kwargs))
