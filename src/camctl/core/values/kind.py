# どこで: `src/camctl/core/values/kind.py`。
# 何を: ValueKind（制御値の実行時型タグ）と要素型の表を定義する。
# なぜ: cast/clamp/compare が同じ閉じた型集合で網羅的に分岐できるようにするため。

from __future__ import annotations

from enum import Enum

import numpy as np


class ValueKind(str, Enum):
    """制御値の実行時型タグ。

    NONE は未設定値を表し、どの変換にも参加しない（空値を返す）。
    """

    NONE = "none"
    BOOL = "bool"
    BYTE = "byte"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT = "float"
    STRING = "string"
    RECTANGLE = "rectangle"
    SIZE = "size"

    @property
    def is_numeric(self) -> bool:
        return self in _NUMERIC_KINDS

    @property
    def is_integer(self) -> bool:
        return self in _INTEGER_BITS

    @property
    def is_geometric(self) -> bool:
        return self in (ValueKind.RECTANGLE, ValueKind.SIZE)

    @property
    def dtype(self) -> np.dtype | None:
        """numpy の要素 dtype を返す（string/geometric/none は None）。"""

        return _DTYPES.get(self)

    @property
    def type_name(self) -> str:
        """エラーメッセージ用の人間可読な型名を返す。"""

        return _TYPE_NAMES[self]


_NUMERIC_KINDS = frozenset(
    {ValueKind.BOOL, ValueKind.BYTE, ValueKind.INT32, ValueKind.INT64, ValueKind.FLOAT}
)

# (bits, signed)
_INTEGER_BITS: dict[ValueKind, tuple[int, bool]] = {
    ValueKind.BYTE: (8, False),
    ValueKind.INT32: (32, True),
    ValueKind.INT64: (64, True),
}

_DTYPES: dict[ValueKind, np.dtype] = {
    ValueKind.BOOL: np.dtype(np.bool_),
    ValueKind.BYTE: np.dtype(np.uint8),
    ValueKind.INT32: np.dtype(np.int32),
    ValueKind.INT64: np.dtype(np.int64),
    ValueKind.FLOAT: np.dtype(np.float32),
}

_TYPE_NAMES: dict[ValueKind, str] = {
    ValueKind.NONE: "none",
    ValueKind.BOOL: "bool",
    ValueKind.BYTE: "uint8",
    ValueKind.INT32: "int32",
    ValueKind.INT64: "int64",
    ValueKind.FLOAT: "float32",
    ValueKind.STRING: "string",
    ValueKind.RECTANGLE: "Rectangle",
    ValueKind.SIZE: "Size",
}


def integer_range(kind: ValueKind) -> tuple[int, int]:
    """整数 kind の表現可能範囲 (lo, hi) を返す。"""

    bits, signed = _INTEGER_BITS[kind]
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def wrap_integer(value: int, kind: ValueKind) -> int:
    """value を整数 kind の幅で 2 の補数として折り返して返す。"""

    bits, signed = _INTEGER_BITS[kind]
    mask = (1 << bits) - 1
    wrapped = int(value) & mask
    if signed and wrapped >= (1 << (bits - 1)):
        wrapped -= 1 << bits
    return wrapped


def as_kind(kind: ValueKind | str) -> ValueKind:
    """ValueKind または kind 名から ValueKind を返す。"""

    if isinstance(kind, ValueKind):
        return kind
    try:
        return ValueKind(str(kind).strip().lower())
    except ValueError:
        names = ", ".join(k.value for k in ValueKind)
        raise ValueError(f"未知の kind です: {kind!r}（{names} のいずれか）") from None


__all__ = ["ValueKind", "as_kind", "integer_range", "wrap_integer"]
