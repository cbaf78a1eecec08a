from __future__ import annotations
from datetime import date

from .errors import InvalidFieldError

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)

def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0

def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidFieldError(f"Gregorian month must be in 1..12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]

def civil_date(d: date) -> date:
    """Drop the time of day from a datetime; plain dates pass through."""
    return date(d.year, d.month, d.day)

def make_date(year: int, month: int, day: int) -> date:
    """Build a Gregorian date, reporting bad fields as InvalidFieldError."""
    if not 1 <= day <= days_in_month(year, month):
        raise InvalidFieldError(f"Day {day} is not valid for {year}-{month:02d}")
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidFieldError(str(exc)) from exc
