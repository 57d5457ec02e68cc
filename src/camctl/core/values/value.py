# どこで: `src/camctl/core/values/value.py`。
# 何を: ControlValue（kind タグ付きの不変な制御値。スカラーまたは固定長配列）を定義する。
# なぜ: 実行時にしか型が分からない制御値を、変換・クランプ・比較の単一の入力表現に揃えるため。

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np

from .errors import KindMismatchError
from .geometry import Rectangle, Size
from .kind import ValueKind, as_kind, integer_range


def _is_int_like(value: object) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def normalize_element(kind: ValueKind, element: Any) -> Any:
    """element を kind の要素型へ検証・正規化して返す。

    暗黙の損失変換は行わない（float → int32 などは TypeError）。
    float 要素は単精度へ丸める。
    """

    if kind is ValueKind.BOOL:
        if isinstance(element, (bool, np.bool_)):
            return bool(element)
        raise TypeError(f"bool 要素は bool である必要があります: got={element!r}")

    if kind.is_integer:
        if not _is_int_like(element):
            raise TypeError(f"{kind.type_name} 要素は int である必要があります: got={element!r}")
        lo, hi = integer_range(kind)
        iv = int(element)
        if not lo <= iv <= hi:
            raise ValueError(f"{kind.type_name} の範囲外です: got={iv} (range=[{lo}, {hi}])")
        return iv

    if kind is ValueKind.FLOAT:
        if not (_is_int_like(element) or isinstance(element, (float, np.floating))):
            raise TypeError(f"float 要素は数値である必要があります: got={element!r}")
        fv = float(element)
        with np.errstate(over="ignore"):
            single = float(np.float32(fv))
        if math.isfinite(fv) and not math.isfinite(single):
            raise ValueError(f"float32 の範囲外です: got={fv!r}")
        return single

    if kind is ValueKind.STRING:
        if not isinstance(element, str):
            raise TypeError(f"string 要素は str である必要があります: got={element!r}")
        return element

    if kind is ValueKind.RECTANGLE:
        if not isinstance(element, Rectangle):
            raise TypeError(f"Rectangle 要素が必要です: got={element!r}")
        return element

    if kind is ValueKind.SIZE:
        if not isinstance(element, Size):
            raise TypeError(f"Size 要素が必要です: got={element!r}")
        return element

    raise TypeError(f"kind={kind.value} は要素を持ちません")


@dataclass(frozen=True, slots=True)
class ControlValue:
    """kind タグ付きの不変な制御値。

    Parameters
    ----------
    kind : ValueKind
        実行時型タグ。str の kind 名も受け付ける。
    payload : Any
        スカラー要素、または配列の場合は要素列。
    is_array : bool
        配列値かどうか。

    Notes
    -----
    payload は構築時に検証され、配列は tuple に固定される。
    NONE kind は payload を持たない空値を表す。
    """

    kind: ValueKind
    payload: Any = None
    is_array: bool = False

    def __post_init__(self) -> None:
        kind = as_kind(self.kind)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "is_array", bool(self.is_array))

        if kind is ValueKind.NONE:
            if self.payload is not None or self.is_array:
                raise ValueError("none kind の ControlValue は payload を持てません")
            return

        if self.is_array:
            if isinstance(self.payload, (str, bytes)) or not isinstance(
                self.payload, (Iterable, np.ndarray)
            ):
                raise TypeError(f"配列 payload は要素列である必要があります: got={self.payload!r}")
            elements = tuple(normalize_element(kind, e) for e in self.payload)
            object.__setattr__(self, "payload", elements)
        else:
            object.__setattr__(self, "payload", normalize_element(kind, self.payload))

    @classmethod
    def scalar(cls, kind: ValueKind | str, element: Any) -> ControlValue:
        return cls(as_kind(kind), element)

    @classmethod
    def array(cls, kind: ValueKind | str, elements: Iterable[Any]) -> ControlValue:
        return cls(as_kind(kind), tuple(elements), is_array=True)

    @classmethod
    def none(cls) -> ControlValue:
        return cls(ValueKind.NONE)

    def is_none(self) -> bool:
        return self.kind is ValueKind.NONE

    def num_elements(self) -> int:
        """要素数を返す（スカラーは 1、空値は 0）。"""

        if self.kind is ValueKind.NONE:
            return 0
        if self.is_array:
            return len(self.payload)
        return 1

    def elements(self) -> tuple[Any, ...]:
        """要素を tuple で返す（スカラーは 1 要素）。"""

        if self.kind is ValueKind.NONE:
            return ()
        if self.is_array:
            return self.payload
        return (self.payload,)

    def get(self, kind: ValueKind | str, *, array: bool = False) -> Any:
        """kind と配列性が一致する場合に限り payload を返す。"""

        requested = as_kind(kind)
        if requested is not self.kind or bool(array) is not self.is_array:
            raise KindMismatchError(self.kind, requested, array=bool(array))
        return self.payload

    def with_elements(self, elements: Iterable[Any]) -> ControlValue:
        """同じ kind・配列性で要素だけを差し替えた新しい値を返す。"""

        items = tuple(elements)
        if self.is_array:
            return ControlValue(self.kind, items, is_array=True)
        (only,) = items
        return ControlValue(self.kind, only)


_DTYPE_KINDS: dict[np.dtype, ValueKind] = {
    np.dtype(np.bool_): ValueKind.BOOL,
    np.dtype(np.uint8): ValueKind.BYTE,
    np.dtype(np.int32): ValueKind.INT32,
    np.dtype(np.int64): ValueKind.INT64,
    np.dtype(np.float32): ValueKind.FLOAT,
    np.dtype(np.float64): ValueKind.FLOAT,
}


def _infer_kind(element: Any) -> ValueKind:
    if isinstance(element, (bool, np.bool_)):
        return ValueKind.BOOL
    if isinstance(element, np.generic) and element.dtype in _DTYPE_KINDS:
        return _DTYPE_KINDS[element.dtype]
    if isinstance(element, int):
        return ValueKind.INT64
    if isinstance(element, float):
        return ValueKind.FLOAT
    if isinstance(element, str):
        return ValueKind.STRING
    if isinstance(element, Rectangle):
        return ValueKind.RECTANGLE
    if isinstance(element, Size):
        return ValueKind.SIZE
    raise TypeError(f"kind を推定できない値です: {element!r}")


def value_from_python(obj: Any, kind: ValueKind | str | None = None) -> ControlValue:
    """Python オブジェクトから ControlValue を生成して返す。

    kind を省略した場合は値から推定する（int は int64、float は float32）。
    list/tuple/ndarray は配列値になる。
    """

    if isinstance(obj, ControlValue):
        if kind is not None and as_kind(kind) is not obj.kind:
            raise KindMismatchError(obj.kind, as_kind(kind), array=obj.is_array)
        return obj

    if obj is None:
        return ControlValue.none()

    if isinstance(obj, np.ndarray):
        if obj.ndim != 1:
            raise ValueError(f"配列値は 1 次元である必要があります: shape={obj.shape}")
        if kind is None:
            if obj.dtype not in _DTYPE_KINDS:
                raise TypeError(f"kind を推定できない dtype です: {obj.dtype}")
            kind = _DTYPE_KINDS[obj.dtype]
        return ControlValue.array(kind, obj.tolist())

    if isinstance(obj, (list, tuple)):
        items = list(obj)
        if kind is None:
            if not items:
                raise ValueError("空の配列からは kind を推定できません")
            kind = _infer_kind(items[0])
        return ControlValue.array(kind, items)

    if kind is None:
        kind = _infer_kind(obj)
    return ControlValue.scalar(kind, obj)


__all__ = ["ControlValue", "normalize_element", "value_from_python"]
