# どこで: `src/camctl/core/values/errors.py`。
# 何を: 値エンジン（cast/clamp/compare）が送出する例外階層を定義する。
# なぜ: 呼び出し側（デバイス設定層）が失敗の種類ごとに既定値フォールバックや中断を選べるようにするため。

from __future__ import annotations

from .kind import ValueKind


class ControlValueError(Exception):
    """値エンジンの失敗の基底クラス。"""


class InvalidCastError(ControlValueError, TypeError):
    """定義されていない kind 間の変換（幾何 kind の相互変換、配列→bool）。"""

    def __init__(self, source_kind: ValueKind, target_kind: ValueKind) -> None:
        super().__init__(
            f"invalid conversion from '{source_kind.type_name}' to '{target_kind.type_name}'"
        )
        self.source_kind = source_kind
        self.target_kind = target_kind


class MalformedValueError(ControlValueError, ValueError):
    """文字列を目的 kind として解釈できない。"""

    def __init__(self, text: str, target_kind: ValueKind, reason: str | None = None) -> None:
        message = f"invalid string representation for {target_kind.type_name}: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.text = text
        self.target_kind = target_kind


class TypeMismatchError(ControlValueError, TypeError):
    """2 つのオペランドの kind が一致しない。"""

    def __init__(self, lhs_kind: ValueKind, rhs_kind: ValueKind, what: str = "operands") -> None:
        super().__init__(
            f"{what} types mismatch: '{lhs_kind.type_name}' vs '{rhs_kind.type_name}'"
        )
        self.lhs_kind = lhs_kind
        self.rhs_kind = rhs_kind


class KindMismatchError(TypeMismatchError):
    """型付きアクセサで要求した kind/配列性が格納値と一致しない。"""

    def __init__(self, stored: ValueKind, requested: ValueKind, *, array: bool) -> None:
        super().__init__(stored, requested, what="stored and requested")
        self.array = array


class LengthMismatchError(ControlValueError, ValueError):
    """配列オペランドの要素数が一致しない。"""

    def __init__(self, expected: int, actual: int, what: str = "operands") -> None:
        super().__init__(f"{what} element count mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


__all__ = [
    "ControlValueError",
    "InvalidCastError",
    "MalformedValueError",
    "TypeMismatchError",
    "KindMismatchError",
    "LengthMismatchError",
]
