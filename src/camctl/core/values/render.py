# どこで: `src/camctl/core/values/render.py`。
# 何を: ControlValue をログ/表示向けの文字列へ整形する。
# なぜ: 範囲外警告やエラーメッセージで、kind を問わず同じ書式で値を示すため。

from __future__ import annotations

from typing import Any

from .element_cast import element_to_string, format_float
from .kind import ValueKind
from .value import ControlValue


def format_element(kind: ValueKind, element: Any, *, float_precision: int | None = None) -> str:
    """要素 1 個を表示用の文字列に整形して返す。

    float_precision を与えると float を固定小数点の桁数で表す。
    """

    if kind is ValueKind.BOOL:
        return "true" if element else "false"
    if kind is ValueKind.STRING:
        return repr(element)
    if kind is ValueKind.RECTANGLE or kind is ValueKind.SIZE:
        return str(element)
    if kind is ValueKind.FLOAT and float_precision is not None:
        return f"{element:.{int(float_precision)}f}"
    if kind is ValueKind.FLOAT:
        return format_float(element)
    return element_to_string(kind, element)


def format_value(value: ControlValue, *, float_precision: int | None = None) -> str:
    """ControlValue を表示用の文字列に整形して返す。

    例: ``5``、``'auto'``、``[ 1.5, 2 ]``、``(0, 0)/640x480``、``<none>``。
    """

    if value.is_none():
        return "<none>"
    parts = [
        format_element(value.kind, e, float_precision=float_precision) for e in value.elements()
    ]
    if not value.is_array:
        return parts[0]
    if not parts:
        return "[ ]"
    return "[ " + ", ".join(parts) + " ]"


__all__ = ["format_element", "format_value"]
