"""
どこで: `src/drawkit/render/surface.py`。
何を: `Thing.draw` とパス構築コールバックが消費する描画面のインタフェースを定義する。
なぜ: 図形側を具体的な描画バックエンドから切り離し、どの描画面にも同じ手順で描けるようにするため。
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from drawkit.core.color import Color


@runtime_checkable
class Surface(Protocol):
    """HTML canvas の 2D コンテキストのうち、図形描画が使う部分集合。

    Notes
    -----
    角度はラジアン。`save()` / `restore()` は変換行列とスタイル属性を
    スタックに退避・復元する。パスは `begin_path()` で破棄され、
    `fill()` / `stroke()` では破棄されない。
    """

    fill_style: Color
    stroke_style: Color
    line_width: float
    global_alpha: float

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def rotate(self, angle: float) -> None: ...

    def begin_path(self) -> None: ...

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None: ...

    def close_path(self) -> None: ...

    def fill(self) -> None: ...

    def stroke(self) -> None: ...


DrawPath = Callable[[Surface], None]
"""図形のアウトラインを描画面の現在パスへ積むコールバック。"""


__all__ = ["DrawPath", "Surface"]
