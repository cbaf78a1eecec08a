from __future__ import annotations
from typing import Any, Callable, Dict, Mapping, Sequence

from ..core.types import DayInfo
from ..core.time import to_jdn

Tables = Mapping[str, object]
AttrFunc = Callable[[DayInfo, Tables], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def list_attributes() -> list:
    return sorted(_REGISTRY)

def compute_attributes(info: DayInfo, names: Sequence[str], tables: Tables) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise KeyError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        out.update(_REGISTRY[name](info, tables))
    return out

# helper for attribute implementations
def jdn(info: DayInfo) -> int:
    return to_jdn(info.solar)
