# tests/test_solar_terms.py

from datetime import date, timedelta

import pytest

from calzh.core.errors import OutOfRangeError
from calzh.data import terms
from calzh.data.provider import TableDataProvider
from calzh.engines.solar_terms import SolarTermLocator
from calzh.engines.specs import HKO_SPEC


@pytest.fixture(scope="module")
def locators():
    p = TableDataProvider(HKO_SPEC)
    return SolarTermLocator(p.term_table("jie")), SolarTermLocator(p.term_table("qi"))


def test_compress_eras_constant_pattern():
    cutovers, table = terms.compress_eras([5, 5, 6, 5, 5, 5, 6, 5], first_ry=1)
    assert cutovers == (9,)
    assert table == (5, 5, 5, 6)

def test_compress_eras_split():
    cutovers, table = terms.compress_eras([4, 4, 4, 4, 3], first_ry=1)
    assert cutovers == (5, 6)
    assert table == (4, 4, 4, 4, 0, 3, 0, 0)

def test_era_table_reproduces_mean_series(locators):
    jie, qi = locators
    for year in range(1901, 2101):
        for month in range(1, 13):
            assert jie.periodic_day(year, month) == terms.mean_term_date(year, 2 * (month - 1)).day
            assert qi.periodic_day(year, month) == terms.mean_term_date(year, 2 * (month - 1) + 1).day

@pytest.mark.parametrize("kind, year, month, periodic, patched", [
    ("jie", 2021, 4, 4, 5),
    ("jie", 2032, 4, 4, 5),
    ("jie", 2094, 6, 5, 6),
    ("qi", 2071, 3, 20, 21),
    ("qi", 2081, 5, 20, 21),
])
def test_overrides_win(locators, kind, year, month, periodic, patched):
    loc = locators[0] if kind == "jie" else locators[1]
    assert loc.periodic_day(year, month) == periodic
    assert loc.term_day(year, month) == patched
    assert loc.get_term(date(year, month, patched)) == loc.name(month)
    assert loc.get_term(date(year, month, periodic)) == ""

def test_known_terms(locators):
    jie, qi = locators
    assert jie.get_term(date(2020, 1, 6)) == "小寒"
    assert jie.get_term(date(2020, 2, 4)) == "立春"
    assert qi.get_term(date(2020, 12, 21)) == "冬至"
    assert jie.get_term(date(2020, 2, 5)) == ""

def test_one_term_of_each_kind_per_month(locators):
    for loc in locators:
        d = date(2024, 1, 1)
        hits = {}
        while d.year == 2024:
            name = loc.get_term(d)
            if name:
                hits.setdefault(d.month, []).append(name)
            d += timedelta(days=1)
        assert sorted(hits) == list(range(1, 13))
        assert all(len(v) == 1 for v in hits.values())

def test_terms_in_year(locators):
    jie, qi = locators
    rows = jie.terms_in_year(2020)
    assert len(rows) == 12
    assert rows[1] == (date(2020, 2, 4), "立春")

def test_out_of_range(locators):
    with pytest.raises(OutOfRangeError):
        locators[0].term_day(1900, 1)
    with pytest.raises(OutOfRangeError):
        locators[1].term_day(2101, 1)
