# どこで: `src/camctl/core/values/element_cast.py`。
# 何を: 数値/真偽/文字列 kind の要素 1 個を別 kind へ変換する規則を提供する。
# なぜ: スカラーと配列で同じ変換規則を共有し、cast 本体は kind の組み合わせ判定だけに集中させるため。

from __future__ import annotations

import math
import re
from typing import Any

import numpy as np

from .errors import InvalidCastError, MalformedValueError
from .kind import ValueKind, integer_range, wrap_integer

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*(?:[eE][+-]?[0-9]+)?|\.[0-9]+(?:[eE][+-]?[0-9]+)?)"
)
_FLOAT_WORDS = {"inf", "+inf", "-inf", "infinity", "+infinity", "-infinity", "nan", "+nan", "-nan"}


def format_float(value: float) -> str:
    """単精度 float を往復可能な最短の 10 進表記で返す。"""

    single = np.float32(value)
    if math.isnan(single):
        return "nan"
    if math.isinf(single):
        return "inf" if single > 0 else "-inf"
    return np.format_float_positional(single, unique=True, trim="-")


def element_to_string(kind: ValueKind, element: Any) -> str:
    """数値/真偽要素を正規の 10 進テキストへ変換して返す。"""

    if kind is ValueKind.BOOL:
        return "1" if element else "0"
    if kind.is_integer:
        return str(int(element))
    if kind is ValueKind.FLOAT:
        return format_float(element)
    if kind is ValueKind.STRING:
        return element
    raise InvalidCastError(kind, ValueKind.STRING)


def parse_bool(text: str) -> bool:
    """小文字の "true"/"false" だけを真偽値として受け付ける。"""

    word = text.strip()
    if word == "true":
        return True
    if word == "false":
        return False
    raise MalformedValueError(text, ValueKind.BOOL)


def parse_integer(text: str, kind: ValueKind) -> int:
    """text 全体を kind 幅の整数として厳密に解釈する。"""

    body = text.strip()
    if not _INT_PATTERN.fullmatch(body):
        raise MalformedValueError(text, kind)
    value = int(body)
    lo, hi = integer_range(kind)
    if not lo <= value <= hi:
        raise MalformedValueError(text, kind, reason="out of range")
    return value


def parse_float(text: str) -> float:
    """text 全体を単精度 float として厳密に解釈する。"""

    body = text.strip()
    if body.lower() in _FLOAT_WORDS:
        return float(body)
    if not _FLOAT_PATTERN.fullmatch(body):
        raise MalformedValueError(text, ValueKind.FLOAT)
    with np.errstate(over="ignore"):
        single = np.float32(float(body))
    if math.isinf(single):
        raise MalformedValueError(text, ValueKind.FLOAT, reason="out of range")
    return float(single)


def _numeric_to_integer(source: ValueKind, element: Any, target: ValueKind) -> int:
    if source is ValueKind.BOOL:
        return 1 if element else 0
    if source is ValueKind.FLOAT:
        if not math.isfinite(element):
            raise MalformedValueError(format_float(element), target, reason="not finite")
        return wrap_integer(math.trunc(element), target)
    return wrap_integer(int(element), target)


def convert_element(source: ValueKind, element: Any, target: ValueKind) -> Any:
    """source kind の要素 1 個を target kind の要素へ変換して返す。

    Notes
    -----
    幾何 kind と NONE はここに来ない前提（cast 側で除外済み）。
    整数の縮小変換は 2 の補数で折り返し、float → 整数は 0 方向へ切り捨てる。
    """

    if source is target:
        return element

    if source.is_geometric or target.is_geometric:
        raise InvalidCastError(source, target)

    if target is ValueKind.STRING:
        return element_to_string(source, element)

    if source is ValueKind.STRING:
        if target is ValueKind.BOOL:
            return parse_bool(element)
        if target.is_integer:
            return parse_integer(element, target)
        if target is ValueKind.FLOAT:
            return parse_float(element)
        raise InvalidCastError(source, target)

    # 以降は数値 → 数値
    if target is ValueKind.BOOL:
        return bool(element != 0)
    if target.is_integer:
        return _numeric_to_integer(source, element, target)
    if target is ValueKind.FLOAT:
        with np.errstate(over="ignore"):
            return float(np.float32(float(element)))

    raise InvalidCastError(source, target)


__all__ = [
    "convert_element",
    "element_to_string",
    "format_float",
    "parse_bool",
    "parse_float",
    "parse_integer",
]
