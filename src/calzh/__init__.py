"""calzh public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    from_solar,
    from_lunar,
    from_date,
    day_info,
    to_gregorian,
    explain,
    get_term,
    terms_in_year,
    festivals,
    other_festivals,
    leap_month,
    days_in_month,
    months_in_year,
    list_engines,
    engine_info,
    make_engine,
    register_engine,
)
from .core.errors import CalzhError, InvalidFieldError, OutOfRangeError
from .core.types import LunarDate, LunarMonth
from .lunar import Lunar

__all__ = [
    "from_solar",
    "from_lunar",
    "from_date",
    "day_info",
    "to_gregorian",
    "explain",
    "get_term",
    "terms_in_year",
    "festivals",
    "other_festivals",
    "leap_month",
    "days_in_month",
    "months_in_year",
    "list_engines",
    "engine_info",
    "make_engine",
    "register_engine",
    "CalzhError",
    "InvalidFieldError",
    "OutOfRangeError",
    "LunarDate",
    "LunarMonth",
    "Lunar",
]
