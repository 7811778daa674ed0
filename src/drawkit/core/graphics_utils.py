# どこで: `src/drawkit/core/graphics_utils.py`。
# 何を: 図形の当たり判定が共有する幾何ユーティリティ。

from __future__ import annotations

import math


def get_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """2 点 (x1, y1), (x2, y2) 間のユークリッド距離を返す。"""

    return math.hypot(float(x2) - float(x1), float(y2) - float(y1))


__all__ = ["get_distance"]
