"""
どこで: `src/drawkit/core/validation.py`。
何を: 図形のコンストラクタ・setter が共有する引数検証ヘルパを提供する。
なぜ: 全ての入口で同じ例外型・同じ案内文を使い、検証の抜け漏れを防ぐため。
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping, Sequence
from typing import Any

from drawkit.errors import ArgumentCountError, InvalidNumberError

_NUMBER_HINT = (
    "`get_width()` や `get_height()` の括弧を付け忘れていないか、"
    "数値でない変数で計算していないかを確認してください。"
)


def is_finite_number(value: Any) -> bool:
    """value が有限の実数なら True を返す。

    Notes
    -----
    bool は int のサブクラスだが数値としては扱わない。
    numpy のスカラー（`np.float64` 等）は `numbers.Real` として受け付ける。
    """

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def _param_names(signature: str) -> tuple[str, ...]:
    """`"set_position(x, y)"` から引数名 `("x", "y")` を取り出す。"""

    inner = signature[signature.index("(") + 1 : signature.rindex(")")]
    return tuple(name.strip() for name in inner.split(",") if name.strip())


def require_arg_count(
    args: Sequence[Any],
    kwargs: Mapping[str, Any],
    *,
    signature: str,
) -> tuple[Any, ...]:
    """位置引数とキーワード引数を signature の引数名に束縛して返す。

    Notes
    -----
    位置・キーワードを合わせた個数が引数名の数と一致しない場合、
    未知のキーワードがある場合、同じ引数が位置とキーワードの両方で
    渡された場合は ArgumentCountError を送出する。

    Raises
    ------
    ArgumentCountError
        引数の数や名前が signature と一致しない場合。
    """

    names = _param_names(signature)
    count = len(names)
    total = len(args) + len(kwargs)
    if total != count:
        raise ArgumentCountError(
            f"`{signature}` にはちょうど {count} 個の引数を渡す必要があります"
            f"（got={total}）。"
        )

    bound = dict(zip(names, args))
    for key, value in kwargs.items():
        if key not in names:
            raise ArgumentCountError(
                f"`{signature}` に未知のキーワード引数が渡されました: {key!r}"
            )
        if key in bound:
            raise ArgumentCountError(
                f"`{signature}` の引数 {key!r} が位置とキーワードの両方で渡されました"
            )
        bound[key] = value
    return tuple(bound[name] for name in names)


def require_finite_number(value: Any, *, signature: str) -> float:
    """value が有限の数値であることを検証し、そのまま返す。

    Parameters
    ----------
    value : Any
        検証対象。
    signature : str
        エラーメッセージに載せる呼び出し形（例: ``"Circle(radius)"``）。

    Returns
    -------
    float
        検証済みの値。型は変換しない。

    Raises
    ------
    InvalidNumberError
        数値でない、または nan / inf の場合。
    """

    if not is_finite_number(value):
        raise InvalidNumberError(
            f"`{signature}` には有限の数値を渡す必要があります（got={value!r}）。"
            + _NUMBER_HINT
        )
    return value


def require_numbers(
    args: Sequence[Any],
    kwargs: Mapping[str, Any],
    *,
    signature: str,
) -> tuple[Any, ...]:
    """個数と有限性をまとめて検証し、signature の引数順のタプルを返す。"""

    bound = require_arg_count(args, kwargs, signature=signature)
    return tuple(require_finite_number(a, signature=signature) for a in bound)


def require_integer(value: Any, *, signature: str) -> int:
    """value が整数値（`2.0` のような整数値の float を含む）であることを検証し int で返す。

    Raises
    ------
    InvalidNumberError
        有限の数値でない、または小数部を持つ場合。
    """

    require_finite_number(value, signature=signature)
    if int(value) != value:
        raise InvalidNumberError(
            f"`{signature}` には整数を渡す必要があります（got={value!r}）。"
        )
    return int(value)


__all__ = [
    "is_finite_number",
    "require_arg_count",
    "require_finite_number",
    "require_integer",
    "require_numbers",
]
