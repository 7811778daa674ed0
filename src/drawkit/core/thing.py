"""
どこで: `src/drawkit/core/thing.py`。
何を: 全図形の抽象基底 `Thing`（位置・表示・枠線・描画手順の共通化）を定義する。
なぜ: 図形ごとの差分をパス構築コールバックだけに閉じ込め、塗り・線描・変換の手順を一箇所で扱うため。
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from drawkit.core.color import Color
from drawkit.core.validation import require_arg_count, require_integer, require_numbers
from drawkit.render.surface import DrawPath, Surface


class Thing(ABC):
    """描画可能な要素の抽象基底クラス。

    Notes
    -----
    サブクラスは `draw(surface)` を実装し、その中で
    `self.draw_with_path(surface, draw_path)` を呼んでアウトラインの構築だけを担う。
    可視判定・不透明度・回転・塗り・枠線は本クラスが一律に適用する。
    `Thing` 自体はインスタンス化できない。
    """

    def __init__(self) -> None:
        self.x: float = 0
        self.y: float = 0
        self.color: Color = Color.black
        self.stroke_color: Color = Color.black
        self.line_width: float = 1
        self.filled = True
        self.has_border = False
        self.visible = True
        self.opacity = 1.0
        self.rotation = 0.0
        self.layer = 1

    # --- position ------------------------------------------------------

    def set_position(self, *args: float, **kwargs: float) -> None:
        """要素の位置を (x, y) に設定する。"""

        x, y = require_numbers(args, kwargs, signature="set_position(x, y)")
        self.x = x
        self.y = y

    def move(self, *args: float, **kwargs: float) -> None:
        """要素を (dx, dy) だけ移動する。"""

        dx, dy = require_numbers(args, kwargs, signature="move(dx, dy)")
        self.x += dx
        self.y += dy

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    # --- style ---------------------------------------------------------

    def set_color(self, *args: Color | str, **kwargs: Color | str) -> None:
        """塗り色を設定する。`Color` か `'#RRGGBB'` 文字列を受け付ける。"""

        (color,) = require_arg_count(args, kwargs, signature="set_color(color)")
        self.color = Color.parse(color)

    def get_color(self) -> Color:
        return self.color

    def set_filled(self, filled: bool) -> None:
        self.filled = bool(filled)

    def is_filled(self) -> bool:
        return self.filled

    def set_border(self, has_border: bool) -> None:
        """枠線を描くかどうかを設定する。"""

        self.has_border = bool(has_border)

    def set_border_color(self, *args: Color | str, **kwargs: Color | str) -> None:
        (color,) = require_arg_count(args, kwargs, signature="set_border_color(color)")
        self.stroke_color = Color.parse(color)
        self.has_border = True

    def set_border_width(self, *args: float, **kwargs: float) -> None:
        """枠線の幅を設定し、枠線を有効にする。負の幅は 0 に clamp する。"""

        (width,) = require_numbers(args, kwargs, signature="set_border_width(width)")
        self.line_width = max(0, width)
        self.has_border = True

    def get_border_width(self) -> float:
        return self.line_width

    def set_opacity(self, *args: float, **kwargs: float) -> None:
        """不透明度を 0..1 で設定する（範囲外は clamp）。"""

        (opacity,) = require_numbers(args, kwargs, signature="set_opacity(opacity)")
        self.opacity = min(1.0, max(0.0, float(opacity)))

    def set_rotation(self, *args: float, degrees: bool = True, **kwargs: float) -> None:
        """回転角を設定する。既定は度数、`degrees=False` でラジアン。"""

        (angle,) = require_numbers(args, kwargs, signature="set_rotation(angle)")
        self.rotation = math.radians(angle) if degrees else float(angle)

    def rotate(self, *args: float, degrees: bool = True, **kwargs: float) -> None:
        """現在の回転角に angle を加算する。"""

        (angle,) = require_numbers(args, kwargs, signature="rotate(angle)")
        self.rotation += math.radians(angle) if degrees else float(angle)

    def set_layer(self, *args: int, **kwargs: int) -> None:
        """重なり順を設定する。大きいほど手前に描く。

        Raises
        ------
        InvalidNumberError
            整数値でない場合（`1.7` は切り捨てずに拒否する）。
        """

        (layer,) = require_arg_count(args, kwargs, signature="set_layer(layer)")
        self.layer = require_integer(layer, signature="set_layer(layer)")

    def set_visible(self, visible: bool) -> None:
        self.visible = bool(visible)

    def is_visible(self) -> bool:
        return self.visible

    # --- geometry ------------------------------------------------------

    @abstractmethod
    def get_width(self) -> float: ...

    @abstractmethod
    def get_height(self) -> float: ...

    @abstractmethod
    def contains_point(self, x: float, y: float) -> bool: ...

    # --- drawing -------------------------------------------------------

    @abstractmethod
    def draw(self, surface: Surface) -> None:
        """描画ループから呼ばれるフック。`draw_with_path` に委譲して実装する。"""

    def draw_with_path(self, surface: Surface, draw_path: DrawPath) -> None:
        """共通の描画手順でサブクラスのパスを塗り・線描する。

        Parameters
        ----------
        surface : Surface
            描画先。借用するだけで所有しない。
        draw_path : DrawPath
            現在パスにアウトラインを構築するコールバック。

        Notes
        -----
        手順: 非表示なら何もしない → save → 不透明度と回転（要素位置が回転中心）
        → パス構築 → 塗り（filled 時）→ 枠線（has_border 時）→ restore。
        """

        if not self.visible:
            return

        surface.save()
        try:
            surface.global_alpha = self.opacity
            if self.rotation:
                surface.translate(self.x, self.y)
                surface.rotate(self.rotation)
                surface.translate(-self.x, -self.y)

            draw_path(surface)

            if self.filled:
                surface.fill_style = self.color
                surface.fill()
            if self.has_border:
                surface.stroke_style = self.stroke_color
                surface.line_width = self.line_width
                surface.stroke()
        finally:
            surface.restore()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x!r}, y={self.y!r})"


__all__ = ["Thing"]
