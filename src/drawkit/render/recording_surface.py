"""
どこで: `src/drawkit/render/recording_surface.py`。
何を: 描画命令をポリライン列として記録する `Surface` 実装を提供する。
なぜ: ウィンドウ無しで図形の描画手順を検証し、そのまま SVG へ書き出せるようにするため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from drawkit.core.color import Color

_TWO_PI = 2.0 * math.pi
DEFAULT_ARC_SEGMENTS = 64


@dataclass(frozen=True, slots=True)
class Subpath:
    """1 本のサブパス。

    Parameters
    ----------
    points : np.ndarray
        float64 型 shape (N, 2) のデバイス座標（変換行列適用済み）。
    closed : bool
        `close_path()` で閉じられたかどうか。
    """

    points: np.ndarray
    closed: bool


@dataclass(frozen=True, slots=True)
class PaintOp:
    """`fill()` / `stroke()` 1 回分の記録。"""

    kind: str
    subpaths: tuple[Subpath, ...]
    color: Color
    alpha: float
    line_width: float


def arc_sweep(start_angle: float, end_angle: float, anticlockwise: bool) -> float:
    """canvas の `arc()` と同じ規則で、符号付きの掃引角 [rad] を返す。

    Notes
    -----
    掃引量が 2π 以上なら円周全体とする。向きと角度の大小が食い違う場合は
    反対回りに 2π 未満で到達する角度へ正規化する。
    したがって `arc(..., 0, 2π, anticlockwise=True)` は円周全体（-2π）になる。
    """

    start = float(start_angle)
    end = float(end_angle)
    if not anticlockwise:
        if end - start >= _TWO_PI:
            return _TWO_PI
        if end < start:
            return _TWO_PI - math.fmod(start - end, _TWO_PI)
        return end - start
    if start - end >= _TWO_PI:
        return -_TWO_PI
    if start < end:
        return -(_TWO_PI - math.fmod(end - start, _TWO_PI))
    return end - start


def arc_points(
    x: float,
    y: float,
    radius: float,
    start_angle: float,
    end_angle: float,
    anticlockwise: bool = False,
    *,
    segments: int = DEFAULT_ARC_SEGMENTS,
) -> np.ndarray:
    """円弧を折れ線近似した頂点列（shape (N, 2)）を返す。

    Parameters
    ----------
    segments : int, optional
        円周全体を近似するときの分割数。部分円弧は掃引角に比例して減らす。

    Raises
    ------
    ValueError
        radius が負、または segments が 3 未満の場合。
    """

    r = float(radius)
    if r < 0:
        raise ValueError(f"arc の radius は 0 以上である必要がある: got={radius!r}")
    segments = int(segments)
    if segments < 3:
        raise ValueError("arc の segments は 3 以上である必要がある")

    sweep = arc_sweep(start_angle, end_angle, anticlockwise)
    n = max(1, int(math.ceil(segments * abs(sweep) / _TWO_PI)))
    angles = np.linspace(
        float(start_angle),
        float(start_angle) + sweep,
        num=n + 1,
        dtype=np.float64,
    )
    xs = float(x) + r * np.cos(angles)
    ys = float(y) + r * np.sin(angles)
    return np.stack([xs, ys], axis=1)


class RecordingSurface:
    """描画命令を `PaintOp` 列として記録する描画面。

    変換行列とスタイル属性は `save()` / `restore()` でスタック管理する。
    円弧は `arc_segments` 分割の折れ線として現在パスへ積む。
    """

    def __init__(self, *, arc_segments: int = DEFAULT_ARC_SEGMENTS) -> None:
        if int(arc_segments) < 3:
            raise ValueError("arc_segments は 3 以上である必要がある")
        self.arc_segments = int(arc_segments)

        self.fill_style: Color = Color.black
        self.stroke_style: Color = Color.black
        self.line_width: float = 1.0
        self.global_alpha: float = 1.0

        self._matrix = np.eye(3, dtype=np.float64)
        self._stack: list[tuple[np.ndarray, Color, Color, float, float]] = []
        self._subpaths: list[Subpath] = []
        self._ops: list[PaintOp] = []

    # --- state ---------------------------------------------------------

    def save(self) -> None:
        self._stack.append(
            (
                self._matrix.copy(),
                self.fill_style,
                self.stroke_style,
                self.line_width,
                self.global_alpha,
            )
        )

    def restore(self) -> None:
        # canvas と同様、対応する save が無い restore は何もしない。
        if not self._stack:
            return
        (
            self._matrix,
            self.fill_style,
            self.stroke_style,
            self.line_width,
            self.global_alpha,
        ) = self._stack.pop()

    def translate(self, dx: float, dy: float) -> None:
        t = np.array(
            [[1.0, 0.0, float(dx)], [0.0, 1.0, float(dy)], [0.0, 0.0, 1.0]],
            dtype=np.float64,
        )
        self._matrix = self._matrix @ t

    def rotate(self, angle: float) -> None:
        c = math.cos(float(angle))
        s = math.sin(float(angle))
        r = np.array(
            [[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]],
            dtype=np.float64,
        )
        self._matrix = self._matrix @ r

    @property
    def matrix(self) -> np.ndarray:
        """現在の 3x3 アフィン変換行列（コピー）。"""
        return self._matrix.copy()

    # --- path ----------------------------------------------------------

    def begin_path(self) -> None:
        self._subpaths = []

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        pts = arc_points(
            x,
            y,
            radius,
            start_angle,
            end_angle,
            anticlockwise,
            segments=self.arc_segments,
        )
        if float(radius) == 0.0:
            return
        pts = self._apply(pts)
        if self._subpaths and not self._subpaths[-1].closed:
            last = self._subpaths[-1]
            # 開いたサブパスには直線で接続して継ぎ足す。
            self._subpaths[-1] = Subpath(
                points=np.concatenate([last.points, pts], axis=0),
                closed=False,
            )
            return
        self._subpaths.append(Subpath(points=pts, closed=False))

    def close_path(self) -> None:
        if not self._subpaths or self._subpaths[-1].closed:
            return
        last = self._subpaths[-1]
        self._subpaths[-1] = Subpath(points=last.points, closed=True)

    @property
    def current_path(self) -> tuple[Subpath, ...]:
        """現在パスのサブパス列。"""
        return tuple(self._subpaths)

    # --- paint ---------------------------------------------------------

    def fill(self) -> None:
        self._paint("fill", self.fill_style)

    def stroke(self) -> None:
        self._paint("stroke", self.stroke_style)

    @property
    def ops(self) -> tuple[PaintOp, ...]:
        """これまでに記録した塗り・線描の列（記録順）。"""
        return tuple(self._ops)

    def clear(self) -> None:
        """記録と現在パスを破棄する。変換・スタイルは保持する。"""
        self._subpaths = []
        self._ops = []

    def _paint(self, kind: str, color: Color) -> None:
        subpaths = tuple(sp for sp in self._subpaths if sp.points.shape[0] >= 2)
        if not subpaths:
            return
        self._ops.append(
            PaintOp(
                kind=kind,
                subpaths=subpaths,
                color=Color.parse(color),
                alpha=float(self.global_alpha),
                line_width=float(self.line_width),
            )
        )

    def _apply(self, pts: np.ndarray) -> np.ndarray:
        ones = np.ones((pts.shape[0], 1), dtype=np.float64)
        homogeneous = np.concatenate([pts, ones], axis=1)
        return (homogeneous @ self._matrix.T)[:, :2]


__all__ = [
    "DEFAULT_ARC_SEGMENTS",
    "PaintOp",
    "RecordingSurface",
    "Subpath",
    "arc_points",
    "arc_sweep",
]
