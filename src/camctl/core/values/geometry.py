# どこで: `src/camctl/core/values/geometry.py`。
# 何を: 幾何 kind の要素型 Rectangle / Size と、その包含・大小関係を定義する。
# なぜ: ScalerCrop や AfWindows のような幾何制御値を数値とは別の意味論で扱うため。

from __future__ import annotations

from dataclasses import dataclass

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1
_U32_MAX = (1 << 32) - 1


def _check_i32(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} は int である必要があります: got={value!r}")
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"{name} は int32 の範囲である必要があります: got={value}")
    return int(value)


def _check_u32(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} は int である必要があります: got={value!r}")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} は uint32 の範囲である必要があります: got={value}")
    return int(value)


@dataclass(frozen=True, slots=True)
class Size:
    """幅と高さの組（いずれも uint32）。"""

    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        _check_u32("width", self.width)
        _check_u32("height", self.height)

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_null(self) -> bool:
        return self.width == 0 and self.height == 0

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


def size_is_less(lhs: Size, rhs: Size) -> bool:
    """Size の自然順序で lhs < rhs を返す。

    Notes
    -----
    判定は次の順で行う。
    1) 幅・高さがともに小さければ小さい。
    2) 幅・高さがともに以上なら小さくない。
    3) 面積が小さければ小さい（大きければ小さくない）。
    4) 面積が等しければ幅が小さい方が小さい。
    """

    if lhs.width < rhs.width and lhs.height < rhs.height:
        return True
    if lhs.width >= rhs.width and lhs.height >= rhs.height:
        return False
    if lhs.area != rhs.area:
        return lhs.area < rhs.area
    return lhs.width < rhs.width


@dataclass(frozen=True, slots=True)
class Rectangle:
    """左上 (x, y) と大きさ (width, height) で表す矩形。"""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        _check_i32("x", self.x)
        _check_i32("y", self.y)
        _check_u32("width", self.width)
        _check_u32("height", self.height)

    @property
    def right(self) -> int:
        """右下隅の x（x + width）。"""

        return self.x + self.width

    @property
    def bottom(self) -> int:
        """右下隅の y（y + height）。"""

        return self.y + self.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def is_null(self) -> bool:
        return self.width == 0 and self.height == 0

    def __str__(self) -> str:
        return f"({self.x}, {self.y})/{self.width}x{self.height}"


def is_enclosed_by(inner: Rectangle, outer: Rectangle) -> bool:
    """inner の 4 辺がすべて outer の内側（境界を含まない）にあるかを返す。"""

    return (
        inner.x > outer.x
        and inner.y > outer.y
        and inner.right < outer.right
        and inner.bottom < outer.bottom
    )


def encloses(outer: Rectangle, inner: Rectangle) -> bool:
    """outer が inner を厳密に内包するかを返す。"""

    return is_enclosed_by(inner, outer)


__all__ = ["Rectangle", "Size", "encloses", "is_enclosed_by", "size_is_less"]
