# どこで: `src/camctl/core/controls/catalog.py`。
# 何を: 既知のカメラ制御 ID ごとの kind と配列長（extent）の表を提供する。
# なぜ: パラメータ解釈時に、スカラーを期待する制御か固定長配列を期待する制御かを判定するため。

from __future__ import annotations

from dataclasses import dataclass

from camctl.core.values.errors import ControlValueError, LengthMismatchError, TypeMismatchError
from camctl.core.values.kind import ValueKind
from camctl.core.values.value import ControlValue

DYNAMIC_EXTENT = -1
"""可変長配列（例: AfWindows）を表す extent。"""


class UnknownControlError(ControlValueError, KeyError):
    """表に登録されていない制御名。"""

    def __init__(self, name: str) -> None:
        super().__init__(f"control {name!r} not handled")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


@dataclass(frozen=True, slots=True)
class ControlSpec:
    """制御 1 個の静的な型情報。

    extent は 0 でスカラー、正で固定長配列、`DYNAMIC_EXTENT` で可変長配列。
    """

    name: str
    kind: ValueKind
    extent: int = 0

    @property
    def is_array(self) -> bool:
        return self.extent != 0


def _spec(name: str, kind: ValueKind, extent: int = 0) -> tuple[str, ControlSpec]:
    return name, ControlSpec(name=name, kind=kind, extent=extent)


CONTROLS: dict[str, ControlSpec] = dict(
    [
        _spec("AeEnable", ValueKind.BOOL),
        _spec("AeLocked", ValueKind.BOOL),
        _spec("AeMeteringMode", ValueKind.INT32),
        _spec("AeConstraintMode", ValueKind.INT32),
        _spec("AeExposureMode", ValueKind.INT32),
        _spec("ExposureValue", ValueKind.FLOAT),
        _spec("ExposureTime", ValueKind.INT32),
        _spec("AnalogueGain", ValueKind.FLOAT),
        _spec("Brightness", ValueKind.FLOAT),
        _spec("Contrast", ValueKind.FLOAT),
        _spec("Lux", ValueKind.FLOAT),
        _spec("AwbEnable", ValueKind.BOOL),
        _spec("AwbMode", ValueKind.INT32),
        _spec("AwbLocked", ValueKind.BOOL),
        _spec("ColourGains", ValueKind.FLOAT, 2),
        _spec("ColourTemperature", ValueKind.INT32),
        _spec("Saturation", ValueKind.FLOAT),
        _spec("SensorBlackLevels", ValueKind.INT32, 4),
        _spec("Sharpness", ValueKind.FLOAT),
        _spec("FocusFoM", ValueKind.INT32),
        _spec("ColourCorrectionMatrix", ValueKind.FLOAT, 9),
        _spec("ScalerCrop", ValueKind.RECTANGLE),
        _spec("DigitalGain", ValueKind.FLOAT),
        _spec("FrameDuration", ValueKind.INT64),
        _spec("FrameDurationLimits", ValueKind.INT64, 2),
        _spec("SensorTimestamp", ValueKind.INT64),
        _spec("AfMode", ValueKind.INT32),
        _spec("AfRange", ValueKind.INT32),
        _spec("AfSpeed", ValueKind.INT32),
        _spec("AfMetering", ValueKind.INT32),
        _spec("AfWindows", ValueKind.RECTANGLE, DYNAMIC_EXTENT),
        _spec("AfTrigger", ValueKind.INT32),
        _spec("AfPause", ValueKind.INT32),
        _spec("LensPosition", ValueKind.FLOAT),
        _spec("AfState", ValueKind.INT32),
        _spec("AfPauseState", ValueKind.INT32),
    ]
)


def control_spec(name: str) -> ControlSpec:
    """制御名から ControlSpec を返す。"""

    try:
        return CONTROLS[name]
    except KeyError:
        raise UnknownControlError(name) from None


def control_extent(name: str) -> int:
    """制御名から extent を返す（0 はスカラー）。"""

    return control_spec(name).extent


def check_extent(spec: ControlSpec, value: ControlValue) -> None:
    """value の kind と配列長が spec に合致するかを検査する。

    Raises
    ------
    TypeMismatchError
        kind が異なる場合。
    LengthMismatchError
        スカラー/配列の別、または固定長配列の要素数が一致しない場合。
    """

    if value.kind is not spec.kind:
        raise TypeMismatchError(spec.kind, value.kind, what=f"control {spec.name}")
    if spec.extent == 0:
        if value.is_array:
            raise LengthMismatchError(1, value.num_elements(), what=f"control {spec.name}")
        return
    if not value.is_array:
        expected = 1 if spec.extent == DYNAMIC_EXTENT else spec.extent
        raise LengthMismatchError(expected, 1, what=f"control {spec.name}")
    if spec.extent != DYNAMIC_EXTENT and value.num_elements() != spec.extent:
        raise LengthMismatchError(spec.extent, value.num_elements(), what=f"control {spec.name}")


__all__ = [
    "CONTROLS",
    "DYNAMIC_EXTENT",
    "ControlSpec",
    "UnknownControlError",
    "check_extent",
    "control_extent",
    "control_spec",
]
