"""
calzh.lunar
-----------
A lunisolar date with every derived name attached.

``Lunar`` wraps one DayInfo and the engine's name tables; the accessors are
thin delegations to ``calzh.attributes.lookup``.
"""

from __future__ import annotations

from datetime import date
from typing import List, Mapping

from .attributes import lookup
from .core.types import DayInfo


class Lunar:
    def __init__(self, info: DayInfo, tables: Mapping[str, object]):
        self.info = info
        self.tables = tables

    # ---------------------------------------------------------
    # Fields
    # ---------------------------------------------------------

    @property
    def year(self) -> int:
        return self.info.lunar.year

    @property
    def month(self) -> int:
        """Signed month: negative for an intercalary month."""
        return self.info.lunar.signed_month

    @property
    def day(self) -> int:
        return self.info.lunar.day

    @property
    def is_leap_month(self) -> bool:
        return self.info.lunar.month.is_leap

    @property
    def solar(self) -> date:
        return self.info.solar

    @property
    def day_offset(self) -> int:
        return self.info.day_offset

    # ---------------------------------------------------------
    # Year, month and day names
    # ---------------------------------------------------------

    @property
    def gan(self) -> str:
        return lookup.gan(self.tables, self.info.year_index.stem)

    @property
    def zhi(self) -> str:
        return lookup.zhi(self.tables, self.info.year_index.branch)

    @property
    def shengxiao(self) -> str:
        return lookup.shengxiao(self.tables, self.info.year_index.branch)

    @property
    def year_in_chinese(self) -> str:
        return lookup.year_in_chinese(self.tables, self.year)

    @property
    def month_in_chinese(self) -> str:
        return lookup.month_in_chinese(self.tables, self.month)

    @property
    def day_in_chinese(self) -> str:
        return lookup.day_in_chinese(self.tables, self.day)

    @property
    def season(self) -> str:
        return lookup.season(self.tables, abs(self.month))

    @property
    def year_in_ganzhi(self) -> str:
        return self.gan + self.zhi

    @property
    def month_in_ganzhi(self) -> str:
        idx = self.info.month_index
        return lookup.ganzhi(self.tables, idx.stem, idx.branch)

    @property
    def day_in_ganzhi(self) -> str:
        idx = self.info.day_index
        return lookup.ganzhi(self.tables, idx.stem, idx.branch)

    # ---------------------------------------------------------
    # Terms and festivals
    # ---------------------------------------------------------

    @property
    def jie(self) -> str:
        return self.info.jie

    @property
    def qi(self) -> str:
        return self.info.qi

    @property
    def festivals(self) -> List[str]:
        return list(self.info.festivals)

    @property
    def other_festivals(self) -> List[str]:
        return list(self.info.other_festivals)

    # ---------------------------------------------------------
    # Lodge chain
    # ---------------------------------------------------------

    @property
    def xiu(self) -> str:
        return lookup.lodge(self.tables, self.day, abs(self.month))

    @property
    def zheng(self) -> str:
        return lookup.zheng(self.tables, self.xiu)

    @property
    def animal(self) -> str:
        return lookup.animal(self.tables, self.xiu)

    @property
    def gong(self) -> str:
        return lookup.gong(self.tables, self.xiu)

    @property
    def shou(self) -> str:
        return lookup.shou(self.tables, self.gong)

    # ---------------------------------------------------------
    # Day stem / branch annotations
    # ---------------------------------------------------------

    @property
    def _stem(self) -> int:
        return self.info.day_index.stem

    @property
    def _branch(self) -> int:
        return self.info.day_index.branch

    @property
    def pengzu_gan(self) -> str:
        return lookup.pengzu_gan(self.tables, self._stem)

    @property
    def pengzu_zhi(self) -> str:
        return lookup.pengzu_zhi(self.tables, self._branch)

    def position(self, deity: str) -> str:
        """Trigram of ``deity`` (xi, yang_gui, yin_gui, fu, cai) for the day."""
        return lookup.position(self.tables, deity, self._stem)

    def position_desc(self, deity: str) -> str:
        return lookup.position_desc(self.tables, self.position(deity))

    @property
    def position_xi(self) -> str:
        return self.position("xi")

    @property
    def position_xi_desc(self) -> str:
        return self.position_desc("xi")

    @property
    def position_yang_gui(self) -> str:
        return self.position("yang_gui")

    @property
    def position_yang_gui_desc(self) -> str:
        return self.position_desc("yang_gui")

    @property
    def position_yin_gui(self) -> str:
        return self.position("yin_gui")

    @property
    def position_yin_gui_desc(self) -> str:
        return self.position_desc("yin_gui")

    @property
    def position_fu(self) -> str:
        return self.position("fu")

    @property
    def position_fu_desc(self) -> str:
        return self.position_desc("fu")

    @property
    def position_cai(self) -> str:
        return self.position("cai")

    @property
    def position_cai_desc(self) -> str:
        return self.position_desc("cai")

    @property
    def chong(self) -> str:
        return lookup.chong(self.tables, self._branch)

    @property
    def chong_gan(self) -> str:
        return lookup.chong_gan(self.tables, self._stem)

    @property
    def chong_gan_tie(self) -> str:
        return lookup.chong_gan_tie(self.tables, self._stem)

    @property
    def chong_shengxiao(self) -> str:
        return lookup.chong_shengxiao(self.tables, self._branch)

    @property
    def chong_desc(self) -> str:
        return lookup.chong_desc(self.tables, self._stem, self._branch)

    @property
    def sha(self) -> str:
        return lookup.sha(self.tables, self._branch)

    # ---------------------------------------------------------
    # Display
    # ---------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.year_in_chinese}年{self.month_in_chinese}月{self.day_in_chinese}"

    def __repr__(self) -> str:
        return f"Lunar({self.year}, {self.month}, {self.day}, solar={self.solar.isoformat()})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Lunar):
            return NotImplemented
        return self.info.lunar == other.info.lunar and self.info.engine == other.info.engine

    def __hash__(self) -> int:
        return hash((self.info.lunar, self.info.engine))

    def to_full_string(self) -> str:
        parts = [
            str(self),
            f" {self.gan}{self.zhi}({self.shengxiao})年{self.month_in_ganzhi}月{self.day_in_ganzhi}日",
        ]
        for f in self.festivals + self.other_festivals:
            parts.append(f" ({f})")
        jq = self.jie + self.qi
        if jq:
            parts.append(f" [{jq}]")
        parts.append(f" {self.gong}方{self.shou}")
        parts.append(f" {self.xiu}{self.zheng}{self.animal}")
        parts.append(f" 彭祖百忌[{self.pengzu_gan} {self.pengzu_zhi}]")
        for key, _, label in lookup.POSITIONS:
            parts.append(f" {label}方位[{self.position(key)}]({self.position_desc(key)})")
        parts.append(f" 冲[{self.chong_desc}] 刹[{self.sha}]")
        return "".join(parts)
