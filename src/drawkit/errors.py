"""
どこで: `src/drawkit/errors.py`。
何を: 図形 API の入力検証で送出する例外型を定義する。
なぜ: 引数の数の誤りと数値でない値を、呼び出し側が区別して捕捉できるようにするため。
"""

from __future__ import annotations


class ArgumentCountError(TypeError):
    """図形 API に渡された引数の数が契約と一致しない。"""


class InvalidNumberError(TypeError):
    """有限の数値を要求する引数に、数値でない値（nan / inf を含む）が渡された。"""


__all__ = ["ArgumentCountError", "InvalidNumberError"]
