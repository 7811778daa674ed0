"""
どこで: `src/drawkit/core/scene.py`。
何を: 描画対象の `Thing` を保持し、重なり順での描画と当たり判定を提供する。
なぜ: 描画・エクスポート・クリック判定の全経路で同じ要素列と同じ重なり順を使うため。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from drawkit.core.thing import Thing
from drawkit.render.surface import Surface

_logger = logging.getLogger(__name__)


class Scene:
    """`Thing` の順序付きコレクション。

    Notes
    -----
    描画順は `layer` 昇順、同一 layer 内は追加順（安定ソート）。
    当たり判定は描画順の逆（手前から）に調べる。
    """

    def __init__(self, things: Iterable[Thing] = ()) -> None:
        self._things: list[Thing] = []
        for thing in things:
            self.add(thing)

    def add(self, thing: Thing) -> None:
        """要素を追加する。追加済みの要素は無視する。

        Raises
        ------
        TypeError
            `Thing` 以外が渡された場合。
        """
        if not isinstance(thing, Thing):
            raise TypeError(f"Scene に追加できるのは Thing のみ: {type(thing)!r}")
        if any(t is thing for t in self._things):
            _logger.warning("既に追加済みの要素を無視します: %r", thing)
            return
        self._things.append(thing)
        _logger.debug("add: %r (count=%d)", thing, len(self._things))

    def remove(self, thing: Thing) -> None:
        """要素を取り除く。

        Raises
        ------
        ValueError
            要素が含まれていない場合。
        """
        for i, t in enumerate(self._things):
            if t is thing:
                del self._things[i]
                _logger.debug("remove: %r (count=%d)", thing, len(self._things))
                return
        raise ValueError(f"Scene に含まれていない要素: {thing!r}")

    def clear(self) -> None:
        self._things.clear()

    def things(self) -> list[Thing]:
        """描画順（奥から手前）の要素リストを返す。"""
        return sorted(self._things, key=lambda t: t.layer)

    def draw(self, surface: Surface) -> None:
        """全要素を描画順に描く。"""
        for thing in self.things():
            thing.draw(surface)

    def elements_at(self, x: float, y: float) -> list[Thing]:
        """点 (x, y) を含む可視要素を手前から順に返す。"""
        return [
            t
            for t in reversed(self.things())
            if t.visible and t.contains_point(x, y)
        ]

    def element_at(self, x: float, y: float) -> Thing | None:
        """点 (x, y) を含む最も手前の可視要素を返す。無ければ None。"""
        hits = self.elements_at(x, y)
        return hits[0] if hits else None

    def __len__(self) -> int:
        return len(self._things)

    def __iter__(self) -> Iterator[Thing]:
        return iter(self._things)

    def __contains__(self, thing: object) -> bool:
        return any(t is thing for t in self._things)


__all__ = ["Scene"]
