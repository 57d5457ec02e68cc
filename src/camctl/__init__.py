# どこで: `src/camctl/__init__.py`。
# 何を: ルート `camctl` パッケージを定義する。
# なぜ: import 起点を `camctl` に統一するため。

from __future__ import annotations

from camctl.core.controls import ControlInfo, apply_bounds
from camctl.core.values import (
    ControlValue,
    Rectangle,
    Size,
    ValueKind,
    cast,
    clamp,
    is_greater,
    is_less,
    value_from_python,
)

__all__ = [
    "ControlInfo",
    "ControlValue",
    "Rectangle",
    "Size",
    "ValueKind",
    "apply_bounds",
    "cast",
    "clamp",
    "is_greater",
    "is_less",
    "value_from_python",
]
