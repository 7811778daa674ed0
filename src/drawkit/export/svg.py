"""
どこで: `src/drawkit/export/svg.py`。
何を: Scene を `RecordingSurface` に描き、その記録を SVG として保存する関数を提供する。
なぜ: ウィンドウ無しで描画結果をファイルに残し、差分比較できる決定的な出力を得るため。
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np

from drawkit.core.color import Color
from drawkit.core.runtime_config import output_root_dir, runtime_config
from drawkit.core.scene import Scene
from drawkit.render.recording_surface import PaintOp, RecordingSurface, Subpath

_logger = logging.getLogger(__name__)

_SVG_NS = "http://www.w3.org/2000/svg"


def _fmt(value: float, *, decimals: int) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


def _subpath_to_d(subpath: Subpath, *, decimals: int) -> str:
    """サブパス（shape (N,2)）を SVG path の d 属性断片へ変換して返す。"""
    pts = np.asarray(subpath.points, dtype=np.float64)
    parts = [f"M {_fmt(pts[0, 0], decimals=decimals)} {_fmt(pts[0, 1], decimals=decimals)}"]
    for xy in pts[1:]:
        parts.append(f"L {_fmt(xy[0], decimals=decimals)} {_fmt(xy[1], decimals=decimals)}")
    if subpath.closed:
        parts.append("Z")
    return " ".join(parts)


def _op_to_element(op: PaintOp, *, decimals: int) -> str:
    d = " ".join(_subpath_to_d(sp, decimals=decimals) for sp in op.subpaths)
    opacity = ""
    if op.kind == "fill":
        if op.alpha < 1.0:
            opacity = f' fill-opacity="{_fmt(op.alpha, decimals=decimals)}"'
        return f'  <path d="{d}" fill="{op.color.to_hex()}"{opacity} stroke="none" />'
    if op.alpha < 1.0:
        opacity = f' stroke-opacity="{_fmt(op.alpha, decimals=decimals)}"'
    return (
        f'  <path d="{d}" fill="none" stroke="{op.color.to_hex()}"{opacity} '
        f'stroke-width="{_fmt(op.line_width, decimals=decimals)}" '
        f'stroke-linejoin="round" />'
    )


def render_svg(
    ops: Sequence[PaintOp],
    *,
    canvas_size: tuple[int, int],
    background: Color | None = None,
    decimals: int = 3,
) -> str:
    """記録済みの PaintOp 列を SVG テキストへ変換して返す。

    Raises
    ------
    ValueError
        canvas_size が正でない場合。
    """

    canvas_w, canvas_h = canvas_size
    if canvas_w <= 0 or canvas_h <= 0:
        raise ValueError("canvas_size は正の値である必要がある")

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        (
            f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {int(canvas_w)} {int(canvas_h)}" '
            f'width="{int(canvas_w)}" height="{int(canvas_h)}">'
        )
    )
    if background is not None:
        lines.append(
            f'  <rect width="{int(canvas_w)}" height="{int(canvas_h)}" fill="{background.to_hex()}" />'
        )
    for op in ops:
        lines.append(_op_to_element(op, decimals=decimals))
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def export_svg(
    scene: Scene,
    path: str | Path | None = None,
    *,
    canvas_size: tuple[int, int] | None = None,
) -> Path:
    """Scene を SVG として保存する。

    Parameters
    ----------
    scene : Scene
        描画対象。
    path : str or Path or None, optional
        出力先パス。None なら `{output_root}/svg/scene.svg`。
    canvas_size : tuple[int, int] or None, optional
        キャンバス寸法。None なら config の `canvas.size`。

    Returns
    -------
    Path
        保存先パス。
    """

    cfg = runtime_config()
    _path = Path(path) if path is not None else output_root_dir() / "svg" / "scene.svg"
    size = canvas_size if canvas_size is not None else cfg.canvas_size

    surface = RecordingSurface(arc_segments=cfg.arc_segments)
    scene.draw(surface)
    text = render_svg(
        surface.ops,
        canvas_size=size,
        background=cfg.background,
        decimals=cfg.svg_decimals,
    )

    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(text)
    _logger.info("SVG を保存しました: %s (ops=%d)", _path, len(surface.ops))
    return _path


__all__ = ["export_svg", "render_svg"]
