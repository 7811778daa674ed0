"""
どこで: `src/drawkit/core/circle.py`。円プリミティブ。
何を: 半径で定義される円の状態・検証・描画パス・当たり判定を提供する。
なぜ: 教材用ライブラリの基本図形として、誤った入力を早く・分かりやすく弾くため。
"""

from __future__ import annotations

import math

from drawkit.core.color import Color
from drawkit.core.graphics_utils import get_distance
from drawkit.core.thing import Thing
from drawkit.core.validation import require_numbers
from drawkit.render.surface import Surface


class Circle(Thing):
    """半径で定義される円。

    Examples
    --------
    >>> c = Circle(20)
    >>> c.get_width()
    40

    Notes
    -----
    負の半径はエラーにせず 0 に clamp する。数値でない値は
    `InvalidNumberError` で拒否する。
    """

    def __init__(self, *args: float, **kwargs: float) -> None:
        """円を生成する。

        Parameters
        ----------
        radius : float
            半径。ちょうど 1 つの有限数値（位置引数または `radius=`）。

        Raises
        ------
        ArgumentCountError
            引数がちょうど 1 つでない場合、または `radius` 以外のキーワードの場合。
        InvalidNumberError
            有限の数値でない場合。
        """
        super().__init__()
        (radius,) = require_numbers(args, kwargs, signature="Circle(radius)")

        self.radius = max(0, radius)
        self.color = Color.black
        self.line_width = 3

    def draw(self, surface: Surface) -> None:
        """円を描画面に描く（描画ループから呼ばれる内部用フック）。"""

        def _draw_path(s: Surface) -> None:
            s.begin_path()
            s.arc(self.x, self.y, self.radius, 0, math.pi * 2, True)
            s.close_path()

        self.draw_with_path(surface, _draw_path)

    def get_radius(self) -> float:
        """半径を返す。"""
        return self.radius

    def get_height(self) -> float:
        """高さ（直径）を返す。"""
        return self.radius * 2

    def get_width(self) -> float:
        """幅（直径）を返す。"""
        return self.radius * 2

    def set_radius(self, *args: float, **kwargs: float) -> None:
        """半径を設定する。検証はコンストラクタと同じ。失敗時は半径を変更しない。"""

        (radius,) = require_numbers(args, kwargs, signature="set_radius(radius)")
        self.radius = max(0, radius)

    def contains_point(self, x: float, y: float) -> bool:
        """点 (x, y) が円の内側にあるかどうかを返す。

        Notes
        -----
        枠線が有効なら判定半径を線幅ぶん（半分ではなく全幅）外側へ広げる。
        境界上の点は含まない。x, y は検証しない。
        """
        circle_edge = self.radius
        if self.has_border:
            circle_edge += self.line_width
        dist = get_distance(self.x, self.y, x, y)
        return dist < circle_edge

    def __repr__(self) -> str:
        return f"Circle(radius={self.radius!r}, x={self.x!r}, y={self.y!r})"


__all__ = ["Circle"]
