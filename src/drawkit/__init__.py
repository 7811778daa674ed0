# どこで: `src/drawkit/__init__.py`。
# 何を: ルート `drawkit` パッケージを定義する。
# なぜ: 教材コードから `from drawkit import Circle` の 1 行で使えるようにするため。

from __future__ import annotations

from drawkit.core.circle import Circle
from drawkit.core.color import Color
from drawkit.core.graphics_utils import get_distance
from drawkit.core.scene import Scene
from drawkit.core.thing import Thing
from drawkit.errors import ArgumentCountError, InvalidNumberError
from drawkit.export.svg import export_svg
from drawkit.render.recording_surface import RecordingSurface

__all__ = [
    "ArgumentCountError",
    "Circle",
    "Color",
    "InvalidNumberError",
    "RecordingSurface",
    "Scene",
    "Thing",
    "export_svg",
    "get_distance",
]
