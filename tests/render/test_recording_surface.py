"""RecordingSurface の円弧近似・状態スタック・記録のテスト。"""

from __future__ import annotations

import math

import numpy as np
import pytest

from drawkit.core.color import Color
from drawkit.render.recording_surface import RecordingSurface, arc_points, arc_sweep
from drawkit.render.surface import Surface

TWO_PI = 2.0 * math.pi


def test_recording_surface_satisfies_protocol() -> None:
    assert isinstance(RecordingSurface(), Surface)


@pytest.mark.parametrize(
    ("start", "end", "anticlockwise", "expected"),
    [
        (0.0, TWO_PI, False, TWO_PI),
        (0.0, TWO_PI, True, -TWO_PI),
        (TWO_PI, 0.0, True, -TWO_PI),
        (0.0, math.pi, False, math.pi),
        (0.0, math.pi / 2, True, -1.5 * math.pi),
        (math.pi / 2, 0.0, False, 1.5 * math.pi),
        (0.0, 3 * TWO_PI, False, TWO_PI),
    ],
)
def test_arc_sweep_follows_canvas_rules(
    start: float, end: float, anticlockwise: bool, expected: float
) -> None:
    assert math.isclose(arc_sweep(start, end, anticlockwise), expected, abs_tol=1e-12)


def test_arc_points_partial_arc_scales_segment_count() -> None:
    pts = arc_points(0, 0, 2, 0, math.pi, segments=8)

    assert pts.shape == (5, 2)
    np.testing.assert_allclose(pts[0], [2.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(pts[-1], [-2.0, 0.0], atol=1e-12)


def test_arc_points_rejects_negative_radius_and_few_segments() -> None:
    with pytest.raises(ValueError):
        arc_points(0, 0, -1, 0, 1)
    with pytest.raises(ValueError):
        arc_points(0, 0, 1, 0, 1, segments=2)


def test_begin_path_discards_previous_subpaths() -> None:
    s = RecordingSurface()
    s.begin_path()
    s.arc(0, 0, 1, 0, math.pi)
    s.close_path()
    s.arc(5, 5, 1, 0, math.pi)
    assert len(s.current_path) == 2

    s.begin_path()
    assert s.current_path == ()


def test_arc_appends_to_open_subpath() -> None:
    s = RecordingSurface(arc_segments=4)
    s.begin_path()
    s.arc(0, 0, 1, 0, math.pi / 2)
    s.arc(5, 5, 1, 0, math.pi / 2)

    assert len(s.current_path) == 1
    assert s.current_path[0].points.shape == (4, 2)
    assert not s.current_path[0].closed


def test_save_restore_round_trips_styles_and_transform() -> None:
    s = RecordingSurface()
    s.save()
    s.fill_style = Color.red
    s.line_width = 9
    s.translate(3, 4)
    s.restore()

    assert s.fill_style == Color.black
    assert s.line_width == 1.0
    np.testing.assert_array_equal(s.matrix, np.eye(3))

    # 対応する save の無い restore は無視する。
    s.restore()


def test_translate_applies_to_arc_points() -> None:
    s = RecordingSurface(arc_segments=4)
    s.translate(100, 50)
    s.begin_path()
    s.arc(0, 0, 1, 0, TWO_PI)
    s.fill()

    np.testing.assert_allclose(s.ops[0].subpaths[0].points[0], [101.0, 50.0], atol=1e-12)


def test_fill_and_stroke_record_current_styles() -> None:
    s = RecordingSurface()
    s.begin_path()
    s.arc(0, 0, 1, 0, TWO_PI)
    s.close_path()
    s.fill_style = Color.red
    s.fill()
    s.stroke_style = Color.blue
    s.line_width = 2
    s.global_alpha = 0.5
    s.stroke()

    fill, stroke = s.ops
    assert (fill.kind, fill.color, fill.alpha) == ("fill", Color.red, 1.0)
    assert (stroke.kind, stroke.color, stroke.alpha, stroke.line_width) == (
        "stroke",
        Color.blue,
        0.5,
        2.0,
    )


def test_painting_an_empty_path_records_nothing() -> None:
    s = RecordingSurface()
    s.begin_path()
    s.fill()
    s.stroke()
    assert s.ops == ()


def test_clear_discards_ops() -> None:
    s = RecordingSurface()
    s.begin_path()
    s.arc(0, 0, 1, 0, TWO_PI)
    s.fill()
    s.clear()
    assert s.ops == ()
    assert s.current_path == ()
