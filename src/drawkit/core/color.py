"""
どこで: `src/drawkit/core/color.py`。
何を: 図形の塗り・枠線に使う RGB 色の値型と名前付き定数を定義する。
なぜ: 色を不変の値として代入・比較し、描画面と SVG 出力で同じ表現を共有するため。
"""

from __future__ import annotations

import random as _random
import re
from dataclasses import dataclass
from typing import Any, ClassVar, cast

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _clamp255(v: object) -> int:
    iv = int(round(float(cast(Any, v))))
    return 0 if iv < 0 else 255 if iv > 255 else iv


@dataclass(frozen=True, slots=True)
class Color:
    """0..255 の整数 RGB を持つ不変の色。

    Notes
    -----
    チャンネル値は `__post_init__` で int 化し 0..255 に clamp する。
    `Color.black` などの名前付き定数はクラス属性として提供する。
    """

    r: int
    g: int
    b: int

    black: ClassVar[Color]
    white: ClassVar[Color]
    red: ClassVar[Color]
    green: ClassVar[Color]
    blue: ClassVar[Color]
    yellow: ClassVar[Color]
    orange: ClassVar[Color]
    purple: ClassVar[Color]
    grey: ClassVar[Color]
    gray: ClassVar[Color]

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", _clamp255(self.r))
        object.__setattr__(self, "g", _clamp255(self.g))
        object.__setattr__(self, "b", _clamp255(self.b))

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """`#RGB` / `#RRGGBB` 形式の文字列から Color を生成する。

        Raises
        ------
        ValueError
            形式が不正な場合。
        """

        s = str(text).strip()
        if not _HEX_RE.match(s):
            raise ValueError(f"色は #RGB または #RRGGBB 形式である必要がある: {text!r}")
        digits = s[1:]
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @classmethod
    def parse(cls, value: object) -> Color:
        """Color または hex 文字列を Color に正規化して返す。

        Raises
        ------
        TypeError
            Color でも文字列でもない場合。
        """

        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        raise TypeError(f"色には Color か '#RRGGBB' 文字列を渡す必要がある: {value!r}")

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> Color:
        """ランダムな色を返す。"""

        r = rng if rng is not None else _random
        return cls(r.randint(0, 255), r.randint(0, 255), r.randint(0, 255))

    def to_hex(self) -> str:
        """`#RRGGBB`（大文字）表現を返す。"""

        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_rgb01(self) -> tuple[float, float, float]:
        """0..1 float の RGB を返す。"""

        return float(self.r) / 255.0, float(self.g) / 255.0, float(self.b) / 255.0

    def __str__(self) -> str:
        return self.to_hex()


Color.black = Color(0, 0, 0)
Color.white = Color(255, 255, 255)
Color.red = Color(255, 0, 0)
Color.green = Color(0, 255, 0)
Color.blue = Color(0, 0, 255)
Color.yellow = Color(255, 255, 0)
Color.orange = Color(255, 165, 0)
Color.purple = Color(128, 0, 128)
Color.grey = Color(128, 128, 128)
Color.gray = Color.grey


__all__ = ["Color"]
