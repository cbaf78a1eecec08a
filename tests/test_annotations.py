# tests/test_annotations.py

from calzh.attributes import lookup
from calzh.data.names import LODGES, TABLES, XIU


def test_lodge_table_shape():
    assert len(LODGES) == 28
    assert len(XIU) == 30
    assert all(len(row) == 12 for row in XIU)

def test_lodge_advances_one_per_day():
    for month in range(1, 13):
        for day in range(1, 30):
            a = LODGES.index(lookup.lodge(TABLES, day, month))
            b = LODGES.index(lookup.lodge(TABLES, day + 1, month))
            assert b == (a + 1) % 28

def test_lodge_chain():
    xiu = lookup.lodge(TABLES, 1, 1)
    assert xiu == "室"
    assert lookup.zheng(TABLES, xiu) == "火"
    assert lookup.animal(TABLES, xiu) == "猪"
    palace = lookup.gong(TABLES, xiu)
    assert palace == "北"
    assert lookup.shou(TABLES, palace) == "玄武"
    assert lookup.gong(TABLES, "角") == "东"
    assert lookup.shou(TABLES, "东") == "青龙"

def test_absent_entries_are_empty():
    assert lookup.lodge(TABLES, 31, 1) == ""
    assert lookup.lodge(TABLES, 1, 13) == ""
    assert lookup.zheng(TABLES, "") == ""
    assert lookup.shou(TABLES, "中") == ""
    assert lookup.position(TABLES, "unknown", 0) == ""
    assert lookup.position_desc(TABLES, "") == ""
    assert lookup.festivals(TABLES, 1, 2) == []
    assert lookup.other_festivals(TABLES, 1, 2) == []
    assert lookup.day_in_chinese(TABLES, 31) == ""
    assert lookup.month_in_chinese(TABLES, 13) == ""

def test_festivals():
    assert lookup.festivals(TABLES, 1, 1) == ["春节"]
    assert lookup.festivals(TABLES, 8, 15) == ["中秋节"]
    assert lookup.other_festivals(TABLES, 1, 8) == ["谷日", "顺星节"]

def test_day_stem_branch_annotations():
    # Ding-Mao day
    assert lookup.pengzu_gan(TABLES, 3) == "丁不剃头头必生疮"
    assert lookup.pengzu_zhi(TABLES, 3) == "卯不穿井水泉不香"
    assert lookup.chong(TABLES, 3) == "酉"
    assert lookup.chong_gan(TABLES, 3) == "癸"
    assert lookup.chong_gan_tie(TABLES, 3) == "庚"
    assert lookup.chong_shengxiao(TABLES, 3) == "鸡"
    assert lookup.chong_desc(TABLES, 3, 3) == "(癸酉)鸡"
    assert lookup.sha(TABLES, 3) == "西"
    assert lookup.position(TABLES, "xi", 3) == "离"
    assert lookup.position_desc(TABLES, "离") == "正南"

def test_sha_follows_branch_triads():
    # Shen-Zi-Chen south, Yin-Wu-Xu north, Hai-Mao-Wei west, Si-You-Chou east
    for branches, direction in (((8, 0, 4), "南"), ((2, 6, 10), "北"), ((11, 3, 7), "西"), ((5, 9, 1), "东")):
        assert {lookup.sha(TABLES, b) for b in branches} == {direction}

def test_chinese_numerals():
    assert lookup.year_in_chinese(TABLES, 2020) == "二〇二〇"
    assert lookup.month_in_chinese(TABLES, 1) == "正"
    assert lookup.month_in_chinese(TABLES, -4) == "闰四"
    assert lookup.month_in_chinese(TABLES, 12) == "腊"
    assert lookup.day_in_chinese(TABLES, 1) == "初一"
    assert lookup.day_in_chinese(TABLES, 30) == "三十"
    assert lookup.season(TABLES, 1) == "孟春"
