# tests/test_sexagenary.py

import pytest

from calzh.core.errors import InvalidFieldError
from calzh.core.types import LunarMonth, SexagenaryIndex
from calzh.engines import sexagenary as sx
from calzh.engines.specs import BASE_DAY_INDEX


def test_day_index_periodic():
    for offset in range(-200, 2000, 7):
        assert sx.day_index(offset, BASE_DAY_INDEX) == sx.day_index(offset + 60, BASE_DAY_INDEX)

def test_day_index_parity():
    for offset in range(0, 120):
        idx = sx.day_index(offset, BASE_DAY_INDEX)
        assert idx.stem % 2 == idx.branch % 2

def test_known_days():
    # 1901-01-01 Ji-Mao, 2000-01-01 Wu-Wu, 2020-01-25 Ding-Mao
    assert sx.day_index(0, BASE_DAY_INDEX) == SexagenaryIndex(5, 3)
    assert sx.day_index(36159, BASE_DAY_INDEX) == SexagenaryIndex(4, 6)
    assert sx.day_index(43488, BASE_DAY_INDEX) == SexagenaryIndex(3, 3)

def test_cycle_position():
    assert SexagenaryIndex(0, 0).cycle == 0
    assert SexagenaryIndex(4, 6).cycle == 54
    for i in range(60):
        assert SexagenaryIndex.from_cycle(i).cycle == i

def test_parity_violation():
    with pytest.raises(InvalidFieldError):
        SexagenaryIndex(0, 1)
    with pytest.raises(InvalidFieldError):
        SexagenaryIndex(10, 0)

def test_year_index():
    assert sx.year_index(1984) == SexagenaryIndex(0, 0)
    assert sx.year_index(2020) == SexagenaryIndex(6, 0)
    assert sx.year_index(1900) == SexagenaryIndex(6, 0)
    assert sx.year_index(2023) == SexagenaryIndex(9, 3)

@pytest.mark.parametrize("year, stem", [
    (1984, 2),  # Jia -> Bing-Yin
    (1985, 4),  # Yi -> Wu-Yin
    (1986, 6),  # Bing -> Geng-Yin
    (1987, 8),  # Ding -> Ren-Yin
    (1988, 0),  # Wu -> Jia-Yin
    (2020, 4),  # Geng -> Wu-Yin
])
def test_first_month_stem(year, stem):
    assert sx.month_index(year, LunarMonth(1)) == SexagenaryIndex(stem, 2)

def test_leap_month_shares_pillar():
    assert sx.month_index(2020, LunarMonth(4, True)) == sx.month_index(2020, LunarMonth(4))
    assert sx.month_index(2020, LunarMonth(12)) == SexagenaryIndex(5, 1)  # Ji-Chou
