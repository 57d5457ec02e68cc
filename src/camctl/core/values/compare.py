# どこで: `src/camctl/core/values/compare.py`。
# 何を: ControlValue 同士の is_less/is_greater と、矩形の包含述語を提供する。
# なぜ: 候補値がデバイス報告の min/max を外れているかを kind に依存せず判定するため。

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np

from . import geometry
from .errors import LengthMismatchError, TypeMismatchError
from .kind import ValueKind
from .value import ControlValue

_Relation = Callable[[Any, Any], bool]


def _check_operands(lhs: ControlValue, rhs: ControlValue) -> None:
    if lhs.kind is not rhs.kind:
        raise TypeMismatchError(lhs.kind, rhs.kind)
    n_lhs = lhs.num_elements()
    n_rhs = rhs.num_elements()
    if n_lhs != n_rhs and n_rhs != 1:
        raise LengthMismatchError(n_lhs, n_rhs)


def _any_pair(lhs: ControlValue, rhs: ControlValue, relation: _Relation) -> bool:
    # rhs が 1 要素ならブロードキャストする。
    right = rhs.elements()
    if len(right) == 1:
        right = right * lhs.num_elements()
    return any(relation(a, b) for a, b in zip(lhs.elements(), right))


def _any_numeric(lhs: ControlValue, rhs: ControlValue, op: Callable[..., np.ndarray]) -> bool:
    dtype = lhs.kind.dtype
    a = np.asarray(lhs.elements(), dtype=dtype)
    b = np.asarray(rhs.elements(), dtype=dtype)
    return bool(np.any(op(a, b)))


def _less_relation(kind: ValueKind) -> _Relation:
    if kind is ValueKind.RECTANGLE:
        return geometry.is_enclosed_by
    if kind is ValueKind.SIZE:
        return geometry.size_is_less
    return lambda a, b: a < b


def _greater_relation(kind: ValueKind) -> _Relation:
    if kind is ValueKind.RECTANGLE:
        return geometry.encloses
    if kind is ValueKind.SIZE:
        return lambda a, b: geometry.size_is_less(b, a)
    return lambda a, b: a > b


def is_less(lhs: ControlValue, rhs: ControlValue) -> bool:
    """lhs < rhs を存在量化で判定する。

    - スカラー同士: kind の自然順序。
    - 配列同士（同じ要素数）: いずれかの添字 i で ``lhs[i] < rhs[i]`` なら True。
      辞書式でも全要素でもない（例: ``[1, 5] < [3, 2]`` は True）。
    - 配列とスカラー: rhs をブロードキャストし、いずれかの要素が成り立てば True。
    - Rectangle: 順序ではなく包含関係（lhs が rhs に厳密に内包される）。
    - NONE: 常に False。

    Raises
    ------
    TypeMismatchError
        kind が異なる場合。
    LengthMismatchError
        要素数が異なり、かつ rhs が 1 要素でない場合。
    """

    _check_operands(lhs, rhs)
    kind = lhs.kind
    if kind is ValueKind.NONE:
        return False
    if kind.dtype is not None:
        return _any_numeric(lhs, rhs, np.less)
    return _any_pair(lhs, rhs, _less_relation(kind))


def is_greater(lhs: ControlValue, rhs: ControlValue) -> bool:
    """lhs > rhs を存在量化で判定する（規則は `is_less` と対称）。

    Rectangle では lhs が rhs を厳密に内包するかを返す。
    """

    _check_operands(lhs, rhs)
    kind = lhs.kind
    if kind is ValueKind.NONE:
        return False
    if kind.dtype is not None:
        return _any_numeric(lhs, rhs, np.greater)
    return _any_pair(lhs, rhs, _greater_relation(kind))


def _check_rectangles(lhs: ControlValue, rhs: ControlValue) -> None:
    for operand in (lhs, rhs):
        if operand.kind is not ValueKind.RECTANGLE:
            raise TypeMismatchError(operand.kind, ValueKind.RECTANGLE, what="rectangle predicate")
    _check_operands(lhs, rhs)


def is_enclosed_by(lhs: ControlValue, rhs: ControlValue) -> bool:
    """Rectangle 値 lhs が rhs に厳密に内包されるか（配列は存在量化）。"""

    _check_rectangles(lhs, rhs)
    return _any_pair(lhs, rhs, geometry.is_enclosed_by)


def encloses(lhs: ControlValue, rhs: ControlValue) -> bool:
    """Rectangle 値 lhs が rhs を厳密に内包するか（配列は存在量化）。"""

    _check_rectangles(lhs, rhs)
    return _any_pair(lhs, rhs, geometry.encloses)


__all__ = ["encloses", "is_enclosed_by", "is_greater", "is_less"]
