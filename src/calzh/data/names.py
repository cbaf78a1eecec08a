"""
calzh.data.names
----------------
Name tables for the Chinese calendar: stems, branches, numerals, the 28
lodges and their chained attributes, day taboos, deity positions, clashes
and festivals. Indices are 0-based unless a key is a calendar value.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

GAN: Tuple[str, ...] = tuple("甲乙丙丁戊己庚辛壬癸")
ZHI: Tuple[str, ...] = tuple("子丑寅卯辰巳午未申酉戌亥")
SHENGXIAO: Tuple[str, ...] = tuple("鼠牛虎兔龙蛇马羊猴鸡狗猪")

NUMBER: Tuple[str, ...] = tuple("〇一二三四五六七八九")
MONTH: Tuple[str, ...] = tuple("正二三四五六七八九十冬腊")
DAY: Tuple[str, ...] = (
    "初一", "初二", "初三", "初四", "初五", "初六", "初七", "初八", "初九", "初十",
    "十一", "十二", "十三", "十四", "十五", "十六", "十七", "十八", "十九", "二十",
    "廿一", "廿二", "廿三", "廿四", "廿五", "廿六", "廿七", "廿八", "廿九", "三十",
)
SEASON: Tuple[str, ...] = (
    "孟春", "仲春", "季春", "孟夏", "仲夏", "季夏",
    "孟秋", "仲秋", "季秋", "孟冬", "仲冬", "季冬",
)

# ------------------------------------------------------------
# 28 lodges (Xiu), in cycle order starting from Jiao
# ------------------------------------------------------------

LODGES: Tuple[str, ...] = tuple("角亢氐房心尾箕斗牛女虚危室壁奎娄胃昴毕觜参井鬼柳星张翼轸")
LODGE_ANIMALS: Tuple[str, ...] = tuple("蛟龙貉兔狐虎豹獬牛蝠鼠燕猪獝狼狗彘鸡乌猴猿犴羊獐马鹿蛇蚓")
SEVEN_LUMINARIES = "木金土日月火水"

# Lodge of day 1 for lunar months 1..12
MONTH_START_LODGES: Tuple[str, ...] = tuple("室奎胃毕参鬼张角氐心斗虚")

XIU: Tuple[Tuple[str, ...], ...] = tuple(
    tuple(LODGES[(LODGES.index(start) + d) % 28] for start in MONTH_START_LODGES)
    for d in range(30)
)

ZHENG: Mapping[str, str] = MappingProxyType(
    {x: SEVEN_LUMINARIES[i % 7] for i, x in enumerate(LODGES)}
)
ANIMAL: Mapping[str, str] = MappingProxyType(dict(zip(LODGES, LODGE_ANIMALS)))
GONG: Mapping[str, str] = MappingProxyType(
    {x: "东北西南"[i // 7] for i, x in enumerate(LODGES)}
)
SHOU: Mapping[str, str] = MappingProxyType(
    {"东": "青龙", "南": "朱雀", "西": "白虎", "北": "玄武"}
)

# ------------------------------------------------------------
# Peng Zu taboos, by day stem and by day branch
# ------------------------------------------------------------

PENGZU_GAN: Tuple[str, ...] = (
    "甲不开仓财物耗散", "乙不栽植千株不长", "丙不修灶必见灾殃", "丁不剃头头必生疮",
    "戊不受田田主不祥", "己不破券二比并亡", "庚不经络织机虚张", "辛不合酱主人不尝",
    "壬不泱水更难提防", "癸不词讼理弱敌强",
)
PENGZU_ZHI: Tuple[str, ...] = (
    "子不问卜自惹祸殃", "丑不冠带主不还乡", "寅不祭祀神鬼不尝", "卯不穿井水泉不香",
    "辰不哭泣必主重丧", "巳不远行财物伏藏", "午不苫盖屋主更张", "未不服药毒气入肠",
    "申不安床鬼祟入房", "酉不会客醉坐颠狂", "戌不吃犬作怪上床", "亥不嫁娶不利新郎",
)

# ------------------------------------------------------------
# Deity positions by day stem (trigram), and trigram directions
# ------------------------------------------------------------

POSITION_XI: Tuple[str, ...] = tuple("艮乾坤离巽艮乾坤离巽")
POSITION_YANG_GUI: Tuple[str, ...] = tuple("坤坤兑乾艮坎离艮震巽")
POSITION_YIN_GUI: Tuple[str, ...] = tuple("艮坎乾兑坤坤艮离巽震")
POSITION_FU: Tuple[str, ...] = tuple("巽巽震震坎离坤坤乾兑")
POSITION_CAI: Tuple[str, ...] = tuple("艮艮坤坤坎坎震震离离")

POSITION_DESC: Mapping[str, str] = MappingProxyType({
    "坎": "正北", "艮": "东北", "震": "正东", "巽": "东南",
    "离": "正南", "坤": "西南", "兑": "正西", "乾": "西北", "中": "中宫",
})

# ------------------------------------------------------------
# Clash (Chong) and kill direction (Sha)
# ------------------------------------------------------------

CHONG: Mapping[str, str] = MappingProxyType(
    {z: ZHI[(i + 6) % 12] for i, z in enumerate(ZHI)}
)
# ruthless clash (wu qing zhi ke): same polarity, six stems apart
CHONG_GAN: Mapping[str, str] = MappingProxyType(
    {g: GAN[(i + 6) % 10] for i, g in enumerate(GAN)}
)
# sentimental clash (you qing zhi ke): the stem it overcomes, of opposite polarity
CHONG_GAN_TIE: Mapping[str, str] = MappingProxyType(dict(zip(GAN, "己戊辛庚癸壬乙甲丁丙")))
SHA: Mapping[str, str] = MappingProxyType(
    {z: "南东北西"[i % 4] for i, z in enumerate(ZHI)}
)

# ------------------------------------------------------------
# Festivals keyed by (lunar month number, day)
# ------------------------------------------------------------

FESTIVAL: Mapping[Tuple[int, int], str] = MappingProxyType({
    (1, 1): "春节",
    (1, 15): "元宵节",
    (2, 2): "龙头节",
    (5, 5): "端午节",
    (7, 7): "七夕节",
    (8, 15): "中秋节",
    (9, 9): "重阳节",
    (12, 8): "腊八节",
})

OTHER_FESTIVAL: Mapping[Tuple[int, int], Tuple[str, ...]] = MappingProxyType({
    (1, 4): ("接神日",),
    (1, 5): ("隔开日",),
    (1, 7): ("人日",),
    (1, 8): ("谷日", "顺星节"),
    (1, 9): ("天日",),
    (1, 10): ("地日",),
    (1, 20): ("天穿节",),
    (1, 25): ("填仓节",),
    (1, 30): ("正月晦",),
    (2, 1): ("中和节",),
    (2, 2): ("社日节",),
    (3, 3): ("上巳节",),
    (5, 20): ("分龙节",),
    (5, 25): ("会龙节",),
    (6, 6): ("天贶节",),
    (6, 24): ("观莲节",),
    (6, 25): ("五谷母节",),
    (7, 15): ("中元节",),
    (7, 22): ("财神节",),
    (7, 29): ("地藏节",),
    (8, 1): ("天灸日",),
    (10, 1): ("寒衣节",),
    (10, 10): ("十成节",),
    (10, 15): ("下元节",),
    (12, 7): ("驱傩日",),
    (12, 16): ("尾牙",),
    (12, 24): ("祭灶日",),
})

TABLES: Mapping[str, object] = MappingProxyType({
    "GAN": GAN, "ZHI": ZHI, "SHENGXIAO": SHENGXIAO,
    "NUMBER": NUMBER, "MONTH": MONTH, "DAY": DAY, "SEASON": SEASON,
    "XIU": XIU, "ZHENG": ZHENG, "ANIMAL": ANIMAL, "GONG": GONG, "SHOU": SHOU,
    "PENGZU_GAN": PENGZU_GAN, "PENGZU_ZHI": PENGZU_ZHI,
    "POSITION_XI": POSITION_XI, "POSITION_YANG_GUI": POSITION_YANG_GUI,
    "POSITION_YIN_GUI": POSITION_YIN_GUI, "POSITION_FU": POSITION_FU,
    "POSITION_CAI": POSITION_CAI, "POSITION_DESC": POSITION_DESC,
    "CHONG": CHONG, "CHONG_GAN": CHONG_GAN, "CHONG_GAN_TIE": CHONG_GAN_TIE, "SHA": SHA,
    "FESTIVAL": FESTIVAL, "OTHER_FESTIVAL": OTHER_FESTIVAL,
})
