# どこで: `src/camctl/core/controls/__init__.py`。
# 何を: 制御カタログと範囲検証器の公開エイリアスをまとめる。
# なぜ: デバイス設定層から最小インポートで使えるようにするため。

from .bounds import ControlInfo, OutOfRangeError, apply_all, apply_bounds, is_within
from .catalog import (
    CONTROLS,
    DYNAMIC_EXTENT,
    ControlSpec,
    UnknownControlError,
    check_extent,
    control_extent,
    control_spec,
)

__all__ = [
    "ControlInfo",
    "OutOfRangeError",
    "apply_all",
    "apply_bounds",
    "is_within",
    "CONTROLS",
    "DYNAMIC_EXTENT",
    "ControlSpec",
    "UnknownControlError",
    "check_extent",
    "control_extent",
    "control_spec",
]
