# どこで: `src/camctl/core/values/__init__.py`。
# 何を: 値エンジン（ControlValue と cast/clamp/compare）の公開エイリアスをまとめる。
# なぜ: 呼び出し側が最小インポートで使えるようにするため。

from .cast import cast, cast_all, cast_to_string
from .clamp import clamp, clamp_rectangle, clamp_size
from .compare import encloses, is_enclosed_by, is_greater, is_less
from .errors import (
    ControlValueError,
    InvalidCastError,
    KindMismatchError,
    LengthMismatchError,
    MalformedValueError,
    TypeMismatchError,
)
from .geometry import Rectangle, Size
from .kind import ValueKind, as_kind
from .render import format_element, format_value
from .value import ControlValue, value_from_python

__all__ = [
    "ControlValue",
    "ValueKind",
    "Rectangle",
    "Size",
    "as_kind",
    "value_from_python",
    "cast",
    "cast_all",
    "cast_to_string",
    "clamp",
    "clamp_rectangle",
    "clamp_size",
    "is_less",
    "is_greater",
    "is_enclosed_by",
    "encloses",
    "format_element",
    "format_value",
    "ControlValueError",
    "InvalidCastError",
    "MalformedValueError",
    "TypeMismatchError",
    "KindMismatchError",
    "LengthMismatchError",
]
