from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Mapping, Protocol, Tuple

from .types import DayInfo, LunarDate, LunarMonth

logger = logging.getLogger(__name__)

class CalendarEngine(Protocol):
    @property
    def tables(self) -> Mapping[str, object]: ...
    def info(self) -> Dict[str, Any]: ...
    def day_info(self, d: date, *, debug: bool = False) -> DayInfo: ...
    def lunar_info(self, lunar: LunarDate, *, debug: bool = False) -> DayInfo: ...
    def to_gregorian(self, lunar: LunarDate) -> date: ...
    def get_term(self, d: date) -> Tuple[str, str]: ...
    def terms_in_year(self, year: int) -> List[Tuple[date, str]]: ...
    def months_in_year(self, year: int) -> List[Dict[str, Any]]: ...
    def days_in_month(self, year: int, month: LunarMonth) -> int: ...
    def leap_month(self, year: int) -> int: ...
    def explain(self, d: date) -> Dict[str, Any]: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise KeyError(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
        logger.debug("registered engine %s", name)
