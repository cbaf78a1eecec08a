"""
calzh.attributes.lookup
-----------------------
Annotation lookups over the provider's name tables.

Every function is total-or-absent: a key with no entry gives "" (or an empty
list), never an error. The lodge chain is a small lookup graph:

    (day, month) -> lodge -> government, animal
                    lodge -> palace -> beast
"""

from __future__ import annotations

from typing import List, Mapping, Sequence, Tuple

Tables = Mapping[str, object]


def _at(seq: Sequence[str], i: int) -> str:
    return seq[i] if 0 <= i < len(seq) else ""


def _get(tables: Tables, table: str, key) -> str:
    return tables[table].get(key, "")


# ============================================================
# Names of stems, branches and lunar fields
# ============================================================

def gan(tables: Tables, stem: int) -> str:
    return _at(tables["GAN"], stem)


def zhi(tables: Tables, branch: int) -> str:
    return _at(tables["ZHI"], branch)


def ganzhi(tables: Tables, stem: int, branch: int) -> str:
    return gan(tables, stem) + zhi(tables, branch)


def shengxiao(tables: Tables, branch: int) -> str:
    return _at(tables["SHENGXIAO"], branch)


def year_in_chinese(tables: Tables, year: int) -> str:
    return "".join(tables["NUMBER"][int(c)] for c in str(year))


def month_in_chinese(tables: Tables, signed_month: int) -> str:
    name = _at(tables["MONTH"], abs(signed_month) - 1)
    if name and signed_month < 0:
        return "闰" + name
    return name


def day_in_chinese(tables: Tables, day: int) -> str:
    return _at(tables["DAY"], day - 1)


def season(tables: Tables, month_number: int) -> str:
    return _at(tables["SEASON"], month_number - 1)


# ============================================================
# Lodge chain
# ============================================================

def lodge(tables: Tables, day: int, month_number: int) -> str:
    """Lodge (Xiu) of lunar ``day`` in the month of magnitude ``month_number``."""
    row = _at(tables["XIU"], day - 1)
    return _at(row, month_number - 1) if row else ""


def zheng(tables: Tables, xiu: str) -> str:
    return _get(tables, "ZHENG", xiu)


def animal(tables: Tables, xiu: str) -> str:
    return _get(tables, "ANIMAL", xiu)


def gong(tables: Tables, xiu: str) -> str:
    return _get(tables, "GONG", xiu)


def shou(tables: Tables, palace: str) -> str:
    return _get(tables, "SHOU", palace)


# ============================================================
# Day taboos and deity positions
# ============================================================

def pengzu_gan(tables: Tables, stem: int) -> str:
    return _at(tables["PENGZU_GAN"], stem)


def pengzu_zhi(tables: Tables, branch: int) -> str:
    return _at(tables["PENGZU_ZHI"], branch)


POSITIONS: Tuple[Tuple[str, str, str], ...] = (
    # key, table, deity label used in the long description
    ("xi", "POSITION_XI", "喜神"),
    ("yang_gui", "POSITION_YANG_GUI", "阳贵神"),
    ("yin_gui", "POSITION_YIN_GUI", "阴贵神"),
    ("fu", "POSITION_FU", "福神"),
    ("cai", "POSITION_CAI", "财神"),
)
_POSITION_TABLE = {key: table for key, table, _ in POSITIONS}


def position(tables: Tables, deity: str, stem: int) -> str:
    table = _POSITION_TABLE.get(deity)
    if table is None:
        return ""
    return _at(tables[table], stem)


def position_desc(tables: Tables, trigram: str) -> str:
    return _get(tables, "POSITION_DESC", trigram)


# ============================================================
# Clash and kill direction
# ============================================================

def chong(tables: Tables, branch: int) -> str:
    return _get(tables, "CHONG", zhi(tables, branch))


def chong_gan(tables: Tables, stem: int) -> str:
    return _get(tables, "CHONG_GAN", gan(tables, stem))


def chong_gan_tie(tables: Tables, stem: int) -> str:
    return _get(tables, "CHONG_GAN_TIE", gan(tables, stem))


def chong_shengxiao(tables: Tables, branch: int) -> str:
    clash = chong(tables, branch)
    if not clash:
        return ""
    return shengxiao(tables, tables["ZHI"].index(clash))


def chong_desc(tables: Tables, stem: int, branch: int) -> str:
    """Clash stem, clash branch and the clash animal, e.g. ``(庚申)猴``."""
    return f"({chong_gan(tables, stem)}{chong(tables, branch)}){chong_shengxiao(tables, branch)}"


def sha(tables: Tables, branch: int) -> str:
    return _get(tables, "SHA", zhi(tables, branch))


# ============================================================
# Festivals
# ============================================================

def festivals(tables: Tables, month_number: int, day: int) -> List[str]:
    name = _get(tables, "FESTIVAL", (month_number, day))
    return [name] if name else []


def other_festivals(tables: Tables, month_number: int, day: int) -> List[str]:
    return list(tables["OTHER_FESTIVAL"].get((month_number, day), ()))
