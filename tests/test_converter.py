# tests/test_converter.py

import random
from datetime import date, timedelta

import pytest

from calzh.core.errors import InvalidFieldError, OutOfRangeError
from calzh.core.types import LunarDate, LunarMonth
from calzh.data.provider import TableDataProvider
from calzh.engines.converter import LunisolarConverter
from calzh.engines.specs import ANCHOR_2000, EPOCH_1901, HKO_SPEC


@pytest.fixture(scope="module")
def provider():
    return TableDataProvider(HKO_SPEC)

@pytest.fixture(scope="module")
def conv(provider):
    return LunisolarConverter(provider)


def test_anchors_convert_both_ways(conv):
    for anchor in (EPOCH_1901, ANCHOR_2000):
        assert conv.solar_to_lunar(anchor.solar) == anchor.lunar
        assert conv.lunar_to_solar(anchor.lunar) == anchor.solar
    assert conv.day_offset(EPOCH_1901.lunar) == 0
    assert conv.day_offset(ANCHOR_2000.lunar) == 36159

def test_anchor_selection(conv):
    assert conv.select_anchor(date(1999, 12, 31)) == EPOCH_1901
    assert conv.select_anchor(date(2000, 1, 1)) == ANCHOR_2000
    assert conv.select_anchor(date(2100, 6, 1)) == ANCHOR_2000

@pytest.mark.parametrize("solar, lunar", [
    (date(1901, 2, 19), (1901, 1, 1)),
    (date(1996, 2, 19), (1996, 1, 1)),
    (date(2000, 2, 5), (2000, 1, 1)),
    (date(2020, 1, 24), (2019, 12, 30)),
    (date(2020, 1, 25), (2020, 1, 1)),
    (date(2020, 4, 23), (2020, 4, 1)),
    (date(2020, 5, 23), (2020, -4, 1)),
    (date(2020, 6, 21), (2020, 5, 1)),
    (date(2023, 3, 22), (2023, -2, 1)),
    (date(2023, 9, 29), (2023, 8, 15)),
    (date(2033, 12, 22), (2033, -11, 1)),
    (date(2100, 12, 31), (2100, 12, 1)),
])
def test_known_dates(conv, solar, lunar):
    expected = LunarDate.from_signed(*lunar)
    assert conv.solar_to_lunar(solar) == expected
    assert conv.lunar_to_solar(expected) == solar

def test_solar_roundtrip_random(conv):
    random.seed(123)
    first, last = date(1901, 1, 1), date(2100, 12, 31)
    span = (last - first).days
    for _ in range(1500):
        d = first + timedelta(days=random.randint(0, span))
        lunar = conv.solar_to_lunar(d)
        assert conv.lunar_to_solar(lunar) == d
        assert conv.offset_to_solar(conv.day_offset(lunar)) == d

def test_consecutive_days_advance_by_one(conv):
    d = date(2020, 1, 1)
    prev = conv.day_offset(conv.solar_to_lunar(d))
    for k in range(1, 400):
        cur = conv.day_offset(conv.solar_to_lunar(d + timedelta(days=k)))
        assert cur == prev + 1
        prev = cur

@pytest.mark.parametrize("year", [1901, 1957, 1999, 2000, 2020, 2033, 2099])
def test_lunar_roundtrip_every_month(provider, conv, year):
    for month in provider.months_of_year(year):
        n = provider.days_in_lunar_month(year, month)
        for day in (1, n):
            lunar = LunarDate(year, month, day)
            assert conv.solar_to_lunar(conv.lunar_to_solar(lunar)) == lunar

def test_leap_month_follows_ordinary(conv):
    ordinary = conv.lunar_to_solar(LunarDate.from_signed(2020, 4, 10))
    leap = conv.lunar_to_solar(LunarDate.from_signed(2020, -4, 10))
    assert leap - ordinary == timedelta(days=30)

def test_out_of_range(conv):
    with pytest.raises(OutOfRangeError):
        conv.solar_to_lunar(date(1900, 12, 31))
    with pytest.raises(OutOfRangeError):
        conv.solar_to_lunar(date(2101, 1, 1))
    with pytest.raises(OutOfRangeError):
        conv.lunar_to_solar(LunarDate.from_signed(2101, 1, 1))
    with pytest.raises(OutOfRangeError):
        conv.lunar_to_solar(LunarDate.from_signed(1900, 11, 10))
    with pytest.raises(OutOfRangeError):
        conv.lunar_to_solar(LunarDate.from_signed(2100, 12, 2))
    # still inside the lunar table, so the offset itself is defined
    assert conv.day_offset(LunarDate.from_signed(1900, 11, 10)) == -1

def test_provider_owns_day_range_check(provider):
    provider.check_lunar_fields(2020, LunarMonth(4, True), 29)
    with pytest.raises(InvalidFieldError):
        provider.check_lunar_fields(2020, LunarMonth(4, True), 30)
    with pytest.raises(InvalidFieldError):
        provider.check_lunar_fields(2020, LunarMonth(5, True), 1)

def test_invalid_fields(conv):
    with pytest.raises(InvalidFieldError):
        LunarMonth.from_signed(0)
    with pytest.raises(InvalidFieldError):
        LunarMonth.from_signed(13)
    with pytest.raises(InvalidFieldError):
        conv.lunar_to_solar(LunarDate.from_signed(2020, -5, 1))
    with pytest.raises(InvalidFieldError):
        conv.lunar_to_solar(LunarDate.from_signed(2020, 1, 30))
    with pytest.raises(InvalidFieldError):
        conv.lunar_to_solar(LunarDate.from_signed(2020, 1, 0))
