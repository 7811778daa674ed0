"""Color 値型のテスト。"""

from __future__ import annotations

import dataclasses
import random

import pytest

from drawkit.core.color import Color


def test_named_constants() -> None:
    assert Color.black == Color(0, 0, 0)
    assert Color.white.to_hex() == "#FFFFFF"
    assert Color.gray is Color.grey


def test_channels_are_clamped_and_rounded() -> None:
    assert Color(-10, 300, 127.6) == Color(0, 255, 128)


def test_color_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        Color.black.r = 10  # type: ignore[misc]


@pytest.mark.parametrize(
    ("text", "expected"),
    [("#000000", Color.black), ("#ff0000", Color.red), ("#0F0", Color(0, 255, 0))],
)
def test_from_hex(text: str, expected: Color) -> None:
    assert Color.from_hex(text) == expected


@pytest.mark.parametrize("text", ["red", "#12345", "000000", "#GGGGGG"])
def test_from_hex_rejects_malformed_text(text: str) -> None:
    with pytest.raises(ValueError):
        Color.from_hex(text)


def test_parse_passes_colors_through() -> None:
    c = Color(1, 2, 3)
    assert Color.parse(c) is c
    with pytest.raises(TypeError):
        Color.parse((1, 2, 3))


def test_to_rgb01() -> None:
    assert Color.white.to_rgb01() == (1.0, 1.0, 1.0)
    assert str(Color.blue) == "#0000FF"


def test_random_uses_given_rng() -> None:
    a = Color.random(random.Random(7))
    b = Color.random(random.Random(7))
    assert a == b
