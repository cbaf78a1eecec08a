from __future__ import annotations
from typing import Any, Dict

from . import lookup
from .registry import register_attribute, jdn

def weekday(info, tables) -> Dict[str, Any]:
    # Convention: 0=Mon..6=Sun (ISO-like).
    return {"weekday": int(jdn(info) % 7)}

def sexagenary(info, tables) -> Dict[str, Any]:
    y, m, d = info.year_index, info.month_index, info.day_index
    return {
        "year_ganzhi": lookup.ganzhi(tables, y.stem, y.branch),
        "month_ganzhi": lookup.ganzhi(tables, m.stem, m.branch),
        "day_ganzhi": lookup.ganzhi(tables, d.stem, d.branch),
        "shengxiao": lookup.shengxiao(tables, y.branch),
        "day_cycle": d.cycle,
    }

def lodge(info, tables) -> Dict[str, Any]:
    xiu = lookup.lodge(tables, info.lunar.day, info.lunar.month.number)
    gong = lookup.gong(tables, xiu)
    return {
        "xiu": xiu,
        "zheng": lookup.zheng(tables, xiu),
        "animal": lookup.animal(tables, xiu),
        "gong": gong,
        "shou": lookup.shou(tables, gong),
    }

def pengzu(info, tables) -> Dict[str, Any]:
    return {
        "pengzu_gan": lookup.pengzu_gan(tables, info.day_index.stem),
        "pengzu_zhi": lookup.pengzu_zhi(tables, info.day_index.branch),
    }

def positions(info, tables) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, _, _ in lookup.POSITIONS:
        trigram = lookup.position(tables, key, info.day_index.stem)
        out[f"position_{key}"] = trigram
        out[f"position_{key}_desc"] = lookup.position_desc(tables, trigram)
    return out

def chong(info, tables) -> Dict[str, Any]:
    s, b = info.day_index.stem, info.day_index.branch
    return {
        "chong": lookup.chong(tables, b),
        "chong_gan": lookup.chong_gan(tables, s),
        "chong_gan_tie": lookup.chong_gan_tie(tables, s),
        "chong_shengxiao": lookup.chong_shengxiao(tables, b),
        "chong_desc": lookup.chong_desc(tables, s, b),
        "sha": lookup.sha(tables, b),
    }

def season(info, tables) -> Dict[str, Any]:
    return {"season": lookup.season(tables, info.lunar.month.number)}

register_attribute("weekday", weekday)
register_attribute("sexagenary", sexagenary)
register_attribute("lodge", lodge)
register_attribute("pengzu", pengzu)
register_attribute("positions", positions)
register_attribute("chong", chong)
register_attribute("season", season)
