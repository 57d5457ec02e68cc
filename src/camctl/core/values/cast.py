# どこで: `src/camctl/core/values/cast.py`。
# 何を: ControlValue を目的 kind へ変換する cast と、その派生ヘルパを提供する。
# なぜ: パラメータ文字列の解釈や表示用の文字列化を、kind の組み合わせに依存せず一箇所で行うため。

from __future__ import annotations

from collections.abc import Mapping

from .element_cast import convert_element
from .errors import InvalidCastError
from .kind import ValueKind, as_kind
from .value import ControlValue


def cast(value: ControlValue, target_kind: ValueKind | str) -> ControlValue:
    """value を target_kind へ変換した ControlValue を返す。

    Parameters
    ----------
    value : ControlValue
        変換元の値。
    target_kind : ValueKind | str
        目的 kind。

    Returns
    -------
    ControlValue
        変換後の値。kind が同じ場合は value 自身を返す。
        変換元または目的 kind が NONE の場合は空値を返す。

    Raises
    ------
    InvalidCastError
        幾何 kind（Rectangle/Size）が異なる kind と関わる場合、
        または配列を bool へ変換しようとした場合。
    MalformedValueError
        文字列を目的 kind として解釈できない場合。

    Notes
    -----
    配列は要素ごとに変換し、要素数と順序を保つ。
    """

    target = as_kind(target_kind)
    source = value.kind

    if source is target:
        return value
    if source is ValueKind.NONE or target is ValueKind.NONE:
        return ControlValue.none()
    if source.is_geometric or target.is_geometric:
        raise InvalidCastError(source, target)
    if target is ValueKind.BOOL and value.is_array:
        raise InvalidCastError(source, target)

    converted = [convert_element(source, e, target) for e in value.elements()]
    if value.is_array:
        return ControlValue(target, tuple(converted), is_array=True)
    return ControlValue(target, converted[0])


def cast_to_string(value: ControlValue) -> ControlValue:
    """value を string kind へ変換して返す。"""

    return cast(value, ValueKind.STRING)


def cast_all(
    values: Mapping[str, ControlValue],
    target_kind: ValueKind | str,
) -> dict[str, ControlValue]:
    """制御名 → 値の mapping を、すべて target_kind へ変換して返す。

    最初に失敗した変換の例外をそのまま送出する。
    """

    target = as_kind(target_kind)
    return {name: cast(value, target) for name, value in values.items()}


__all__ = ["cast", "cast_all", "cast_to_string"]
