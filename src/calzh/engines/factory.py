"""
calzh.engines.factory
---------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations
from calzh.core.types import EngineSpec
from calzh.data.provider import TableDataProvider
from calzh.engines.calendar import LunisolarCalendar
from calzh.engines.specs import TableSpec


def build_calendar_engine(spec: TableSpec) -> LunisolarCalendar:
    """Transforms a pure data TableSpec into a live LunisolarCalendar."""
    if not isinstance(spec, TableSpec):
        raise TypeError(f"Unknown spec payload type: {type(spec)}")
    return LunisolarCalendar(id=spec.id, provider=TableDataProvider(spec))

def make_engine(spec: EngineSpec) -> LunisolarCalendar:
    """The universal entry point."""
    if spec.kind != "table":
        raise ValueError(f"Unsupported engine kind '{spec.kind}'")
    return build_calendar_engine(spec.payload)
