from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .attributes import lookup
from .attributes.registry import compute_attributes
from .core.engine import CalendarEngine, EngineRegistry
from .core.time import make_date
from .core.types import DayInfo, EngineSpec, LunarDate, LunarMonth
from .engines.factory import make_engine as _make_engine
from .lunar import Lunar

DEFAULT_ENGINE = "hko"
_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Construction
# ============================================================

def from_date(d: Optional[date] = None, *, engine: str = DEFAULT_ENGINE) -> Lunar:
    """Lunar view of ``d`` (a date or datetime); today when omitted."""
    if d is None:
        d = date.today()
    eng = _reg().get(engine)
    return Lunar(eng.day_info(d), eng.tables)

def from_solar(year: int, month: int, day: int, *, engine: str = DEFAULT_ENGINE) -> Lunar:
    return from_date(make_date(year, month, day), engine=engine)

def from_lunar(year: int, month: int, day: int, *, engine: str = DEFAULT_ENGINE) -> Lunar:
    """``month`` is signed: -4 is the intercalary fourth month."""
    eng = _reg().get(engine)
    return Lunar(eng.lunar_info(LunarDate.from_signed(year, month, day)), eng.tables)

# ============================================================
# Day-level API
# ============================================================

def day_info(
    d: date,
    *,
    engine: str = DEFAULT_ENGINE,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    eng = _reg().get(engine)
    info = eng.day_info(d, debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes, eng.tables)
        info = replace(info, attributes=attrs)
    return info

def to_gregorian(t: LunarDate, *, engine: str = DEFAULT_ENGINE) -> date:
    return _reg().get(engine).to_gregorian(t)

def explain(d: date, *, engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    return _reg().get(engine).explain(d)

def get_term(d: date, *, engine: str = DEFAULT_ENGINE) -> Tuple[str, str]:
    """(jie, qi) names of ``d``; each is "" when the day is not a boundary."""
    return _reg().get(engine).get_term(d)

def terms_in_year(year: int, *, engine: str = DEFAULT_ENGINE) -> List[Tuple[date, str]]:
    return _reg().get(engine).terms_in_year(year)

def festivals(month: int, day: int, *, engine: str = DEFAULT_ENGINE) -> List[str]:
    """Fixed festivals of lunar (month, day); intercalary months have none."""
    if month < 0:
        return []
    return lookup.festivals(_reg().get(engine).tables, month, day)

def other_festivals(month: int, day: int, *, engine: str = DEFAULT_ENGINE) -> List[str]:
    if month < 0:
        return []
    return lookup.other_festivals(_reg().get(engine).tables, month, day)

# ============================================================
# Month-level API
# ============================================================

def leap_month(year: int, *, engine: str = DEFAULT_ENGINE) -> int:
    """Number of the intercalary month of lunar ``year``, 0 if none."""
    return _reg().get(engine).leap_month(year)

def days_in_month(year: int, month: int, *, engine: str = DEFAULT_ENGINE) -> int:
    return _reg().get(engine).days_in_month(year, LunarMonth.from_signed(month))

def months_in_year(year: int, *, engine: str = DEFAULT_ENGINE) -> List[Dict[str, Any]]:
    return _reg().get(engine).months_in_year(year)
