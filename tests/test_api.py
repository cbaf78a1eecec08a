# tests/test_api.py

from datetime import date, datetime

import pytest

import calzh
from calzh.core.types import LunarDate
from calzh.data import lunar_months
from calzh.engines.specs import HKO, HKO_SPEC


def test_from_solar_new_year_2020():
    lunar = calzh.from_solar(2020, 1, 25)
    assert (lunar.year, lunar.month, lunar.day) == (2020, 1, 1)
    assert lunar.day_offset == 43488
    assert str(lunar) == "二〇二〇年正月初一"
    assert lunar.year_in_ganzhi == "庚子"
    assert lunar.shengxiao == "鼠"
    assert lunar.month_in_ganzhi == "戊寅"
    assert lunar.day_in_ganzhi == "丁卯"
    assert lunar.festivals == ["春节"]
    assert lunar.season == "孟春"

def test_full_string_field_order():
    lunar = calzh.from_solar(2020, 1, 25)
    assert lunar.to_full_string() == (
        "二〇二〇年正月初一 庚子(鼠)年戊寅月丁卯日 (春节)"
        " 北方玄武 室火猪"
        " 彭祖百忌[丁不剃头头必生疮 卯不穿井水泉不香]"
        " 喜神方位[离](正南) 阳贵神方位[乾](西北) 阴贵神方位[兑](正西)"
        " 福神方位[震](正东) 财神方位[坤](西南)"
        " 冲[(癸酉)鸡] 刹[西]"
    )

def test_full_string_includes_terms():
    lunar = calzh.from_solar(2020, 2, 4)
    assert lunar.jie == "立春"
    assert " [立春]" in lunar.to_full_string()

def test_epoch():
    lunar = calzh.from_solar(1901, 1, 1)
    assert (lunar.year, lunar.month, lunar.day) == (1900, 11, 11)
    assert lunar.day_offset == 0
    assert lunar.day_in_ganzhi == "己卯"
    assert calzh.from_solar(2000, 1, 1).day_in_ganzhi == "戊午"

def test_from_lunar_leap_month():
    leap = calzh.from_lunar(2020, -4, 1)
    ordinary = calzh.from_lunar(2020, 4, 1)
    assert leap.solar == date(2020, 5, 23)
    assert ordinary.solar == date(2020, 4, 23)
    assert leap.is_leap_month and not ordinary.is_leap_month
    assert str(leap) == "二〇二〇年闰四月初一"
    assert calzh.from_date(leap.solar) == leap

def test_festivals_skip_leap_months():
    assert calzh.from_lunar(2023, 2, 2).festivals == ["龙头节"]
    assert calzh.from_lunar(2023, -2, 2).festivals == []
    assert calzh.festivals(1, 1) == ["春节"]
    assert calzh.festivals(1, 2) == []
    assert calzh.festivals(-2, 2) == []
    assert calzh.other_festivals(7, 15) == ["中元节"]

def test_get_term():
    assert calzh.get_term(date(2021, 4, 5)) == ("清明", "")
    assert calzh.get_term(date(2071, 3, 21)) == ("", "春分")
    assert calzh.get_term(date(2020, 1, 25)) == ("", "")
    with pytest.raises(calzh.OutOfRangeError):
        calzh.get_term(date(1900, 6, 1))

def test_terms_in_year_sorted():
    rows = calzh.terms_in_year(2020)
    assert len(rows) == 24
    assert rows == sorted(rows)
    assert rows[0] == (date(2020, 1, 6), "小寒")
    assert rows[-1] == (date(2020, 12, 21), "冬至")

def test_month_queries():
    assert calzh.leap_month(2020) == 4
    assert calzh.leap_month(2021) == 0
    assert calzh.days_in_month(2020, -4) == 29
    assert calzh.days_in_month(2020, 4) == 30
    months = calzh.months_in_year(2020)
    assert [m["month"] for m in months] == [1, 2, 3, 4, -4, 5, 6, 7, 8, 9, 10, 11, 12]
    assert sum(m["days"] for m in months) == 384
    assert months[0]["start"] == date(2020, 1, 25)
    assert calzh.months_in_year(1900)[0]["start"] is None

def test_errors():
    with pytest.raises(calzh.InvalidFieldError):
        calzh.from_solar(2021, 2, 29)
    with pytest.raises(calzh.InvalidFieldError):
        calzh.from_lunar(2021, 13, 1)
    with pytest.raises(calzh.InvalidFieldError):
        calzh.from_lunar(2021, -4, 1)
    with pytest.raises(calzh.OutOfRangeError):
        calzh.from_solar(2101, 1, 1)
    with pytest.raises(calzh.CalzhError):
        calzh.from_lunar(1899, 1, 1)

def test_day_info_attributes():
    info = calzh.day_info(date(2000, 1, 1), attributes=["weekday", "sexagenary", "chong"])
    assert info.attributes["weekday"] == 5
    assert info.attributes["day_ganzhi"] == "戊午"
    assert info.attributes["day_cycle"] == 54
    assert info.attributes["chong"] == "子"
    with pytest.raises(KeyError):
        calzh.day_info(date(2000, 1, 1), attributes=["nope"])

def test_day_info_debug():
    info = calzh.day_info(date(2020, 1, 25), debug=True)
    assert info.debug["anchor"].solar == date(2000, 1, 1)
    assert info.debug["leap_month"] == 4
    assert calzh.day_info(date(2020, 1, 25)).debug is None

def test_to_gregorian():
    assert calzh.to_gregorian(LunarDate.from_signed(2023, 8, 15)) == date(2023, 9, 29)

def test_registry():
    assert "hko" in calzh.list_engines()
    info = calzh.engine_info("hko")
    assert info["solar_span"] == ("1901-01-01", "2100-12-31")
    assert info["lunar_years"] == (lunar_months.FIRST_YEAR, lunar_months.LAST_YEAR) == (1900, 2100)
    with pytest.raises(KeyError):
        calzh.engine_info("missing")

def test_register_tweaked_engine():
    plain = calzh.make_engine(HKO.tweak(jie_overrides={}, qi_overrides={}))
    calzh.register_engine("hko-plain", plain, overwrite=True)
    assert calzh.get_term(date(2021, 4, 4), engine="hko-plain") == ("清明", "")
    assert calzh.get_term(date(2021, 4, 4)) == ("", "")
    with pytest.raises(KeyError):
        calzh.register_engine("hko", plain)

def test_datetime_input_drops_time_of_day():
    lunar = calzh.from_date(datetime(2020, 1, 25, 12, 0))
    assert (lunar.year, lunar.month, lunar.day) == (2020, 1, 1)
    assert lunar.solar == date(2020, 1, 25)
    assert type(lunar.solar) is date
    assert calzh.day_info(datetime(2000, 1, 1, 23, 59)).day_offset == 36159
    assert calzh.get_term(datetime(2020, 2, 4, 18, 30)) == ("立春", "")
    with pytest.raises(calzh.OutOfRangeError):
        calzh.from_date(datetime(1900, 12, 31, 12))

def test_from_date_defaults_to_today():
    before = date.today()
    lunar = calzh.from_date()
    after = date.today()
    assert lunar.solar in (before, after)

def test_specs_are_hashable():
    assert hash(HKO) == hash(HKO.tweak())
    assert HKO.tweak() == HKO
    assert HKO.tweak(qi_overrides={}) != HKO
    noted = HKO_SPEC.tweak(meta={"note": "copy"})
    assert hash(noted) == hash(HKO_SPEC)
    assert noted != HKO_SPEC
