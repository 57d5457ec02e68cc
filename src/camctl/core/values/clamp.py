# どこで: `src/camctl/core/values/clamp.py`。
# 何を: ControlValue を同 kind の min/max で挟み込む clamp を提供する。
# なぜ: ユーザー指定値をデバイスが報告した有効範囲へ収めてからリクエストへ載せるため。

from __future__ import annotations

from typing import Any

import numpy as np

from .errors import LengthMismatchError, TypeMismatchError
from .geometry import Rectangle, Size
from .kind import ValueKind
from .value import ControlValue


def clamp_rectangle(value: Rectangle, lo: Rectangle, hi: Rectangle) -> Rectangle:
    """矩形の左上隅と右下隅をそれぞれ範囲へ収め、その差から大きさを求め直す。

    Notes
    -----
    右下隅はクランプ後の左上隅に value の大きさを足した点を基準にする。
    隅が交差した場合の大きさは 0 に寄せる（面積 0 の矩形を許容する）。
    """

    x = max(lo.x, min(value.x, hi.x))
    y = max(lo.y, min(value.y, hi.y))
    right = max(lo.right, min(x + value.width, hi.right))
    bottom = max(lo.bottom, min(y + value.height, hi.bottom))
    return Rectangle(x=x, y=y, width=max(0, right - x), height=max(0, bottom - y))


def clamp_size(value: Size, lo: Size, hi: Size) -> Size:
    """幅と高さを独立にクランプする。"""

    return Size(
        width=max(lo.width, min(value.width, hi.width)),
        height=max(lo.height, min(value.height, hi.height)),
    )


def _clamp_element(kind: ValueKind, value: Any, lo: Any, hi: Any) -> Any:
    if kind is ValueKind.RECTANGLE:
        return clamp_rectangle(value, lo, hi)
    if kind is ValueKind.SIZE:
        return clamp_size(value, lo, hi)
    # 比較が成り立たない値（NaN）はそのまま通す。配列側の np.maximum/np.minimum と同じ結果になる。
    if value > hi:
        value = hi
    if value < lo:
        value = lo
    return value


def _clamp_numeric_array(
    kind: ValueKind, value: ControlValue, lo: ControlValue, hi: ControlValue
) -> ControlValue:
    dtype = kind.dtype
    v = np.asarray(value.payload, dtype=dtype)
    a = np.asarray(lo.payload, dtype=dtype)
    b = np.asarray(hi.payload, dtype=dtype)
    out = np.maximum(a, np.minimum(v, b))
    return ControlValue(kind, tuple(out.tolist()), is_array=True)


def _check_cardinality(value: ControlValue, bound: ControlValue, what: str) -> None:
    if bound.is_array is not value.is_array or bound.num_elements() != value.num_elements():
        raise LengthMismatchError(value.num_elements(), bound.num_elements(), what=what)


def clamp(value: ControlValue, min_value: ControlValue, max_value: ControlValue) -> ControlValue:
    """value を [min_value, max_value] に収めた ControlValue を返す。

    Raises
    ------
    TypeMismatchError
        min/max の kind が異なる場合、または value と境界の kind が異なる場合。
    LengthMismatchError
        配列性・要素数が value と境界で一致しない場合（ブロードキャストはしない）。

    Notes
    -----
    - bool は順序を持たないため、境界に関係なく value をそのまま返す。
    - スカラーは ``max(min, min(value, max))``（文字列は辞書順）。NaN は範囲外とみなさず、
      スカラー・配列とも NaN のまま返す。
    - Rectangle/Size は幾何的にクランプする（`clamp_rectangle`/`clamp_size`）。
    - NONE の value は空値を返す。
    """

    if min_value.kind is not max_value.kind:
        raise TypeMismatchError(min_value.kind, max_value.kind, what="minimum and maximum")

    kind = value.kind
    if kind is ValueKind.NONE:
        return ControlValue.none()
    if kind is not min_value.kind:
        raise TypeMismatchError(kind, min_value.kind, what="value and bound")
    if kind is ValueKind.BOOL:
        return value

    _check_cardinality(value, min_value, "value and minimum")
    _check_cardinality(value, max_value, "value and maximum")

    if value.is_array and kind.dtype is not None:
        return _clamp_numeric_array(kind, value, min_value, max_value)

    clamped = [
        _clamp_element(kind, v, a, b)
        for v, a, b in zip(value.elements(), min_value.elements(), max_value.elements())
    ]
    return value.with_elements(clamped)


__all__ = ["clamp", "clamp_rectangle", "clamp_size"]
