# どこで: `src/camctl/core/controls/bounds.py`。
# 何を: 候補値をデバイス報告の範囲（ControlInfo）と照合し、方針に従って調整する検証器を提供する。
# なぜ: パラメータ由来の値を cast → 比較 → clamp の順で一貫して処理し、リクエスト前に範囲内へ収めるため。

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from camctl.core.runtime_config import OUT_OF_RANGE_POLICIES, runtime_config
from camctl.core.values.cast import cast
from camctl.core.values.clamp import clamp
from camctl.core.values.compare import is_greater, is_less
from camctl.core.values.errors import ControlValueError, TypeMismatchError
from camctl.core.values.kind import ValueKind
from camctl.core.values.render import format_value
from camctl.core.values.value import ControlValue

_logger = logging.getLogger(__name__)


class OutOfRangeError(ControlValueError, ValueError):
    """候補値が報告範囲 [min, max] の外にある。"""

    def __init__(
        self,
        value: ControlValue,
        min_value: ControlValue,
        max_value: ControlValue,
        *,
        name: str | None = None,
    ) -> None:
        subject = f"control {name!r}" if name else "value"
        super().__init__(
            f"{subject} out of range: {format_value(value)} "
            f"not in [{format_value(min_value)}, {format_value(max_value)}]"
        )
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        self.name = name


@dataclass(frozen=True, slots=True)
class ControlInfo:
    """デバイスが報告する制御の範囲情報。"""

    min: ControlValue
    max: ControlValue
    default: ControlValue | None = None

    def __post_init__(self) -> None:
        if self.min.kind is not self.max.kind:
            raise TypeMismatchError(self.min.kind, self.max.kind, what="minimum and maximum")

    @property
    def kind(self) -> ValueKind:
        return self.min.kind


def is_within(value: ControlValue, info: ControlInfo) -> bool:
    """value が [info.min, info.max] を外れていないかを返す。

    Notes
    -----
    比較は `is_less`/`is_greater` の存在量化に従う（配列は 1 要素でも外れれば範囲外）。
    """

    return not is_less(value, info.min) and not is_greater(value, info.max)


def _check_policy(policy: str) -> str:
    text = str(policy).strip().lower()
    if text not in OUT_OF_RANGE_POLICIES:
        choices = ", ".join(OUT_OF_RANGE_POLICIES)
        raise ValueError(f"policy は {choices} のいずれかである必要があります: got={policy!r}")
    return text


def _log_out_of_range(
    level: int,
    message: str,
    label: str,
    candidate: ControlValue,
    info: ControlInfo,
    float_precision: int | None,
    result: ControlValue | None = None,
) -> None:
    if not _logger.isEnabledFor(level):
        return
    args = [
        label,
        format_value(candidate, float_precision=float_precision),
        format_value(info.min, float_precision=float_precision),
        format_value(info.max, float_precision=float_precision),
    ]
    fmt = "%s: control=%s value=%s range=[%s, %s]"
    if result is not None:
        fmt += " -> %s"
        args.append(format_value(result, float_precision=float_precision))
    _logger.log(level, fmt, message, *args)


def apply_bounds(
    value: ControlValue,
    info: ControlInfo,
    *,
    policy: str | None = None,
    name: str | None = None,
    float_precision: int | None = None,
) -> ControlValue:
    """value を info.kind へ変換し、範囲外なら policy に従って処理した値を返す。

    Parameters
    ----------
    value : ControlValue
        候補値（例: 文字列パラメータ由来の値）。
    info : ControlInfo
        デバイス報告の範囲。
    policy : str | None
        ``"clamp"``/``"error"``/``"ignore"``。None で実行時設定に従う。
    name : str | None
        ログ/例外メッセージ用の制御名。
    float_precision : int | None
        ログ表示での float の桁数。None かつ policy が None のときは実行時設定に従う。

    Raises
    ------
    InvalidCastError, MalformedValueError
        info.kind へ変換できない場合。
    TypeMismatchError, LengthMismatchError
        比較・クランプの前提を満たさない場合。
    OutOfRangeError
        policy="error" で範囲外の場合。

    Notes
    -----
    policy を明示した呼び出しは実行時設定を読まない。
    bool は順序を持たずクランプされないため、clamp 方針でもそのまま返す。
    """

    if policy is None:
        cfg = runtime_config()
        resolved = cfg.out_of_range
        if float_precision is None:
            float_precision = cfg.float_precision
    else:
        resolved = _check_policy(policy)

    candidate = cast(value, info.kind)
    if candidate.is_none() or is_within(candidate, info):
        return candidate

    label = name or "<unnamed>"
    if resolved == "error":
        raise OutOfRangeError(candidate, info.min, info.max, name=name)

    if resolved == "ignore":
        _log_out_of_range(
            logging.DEBUG, "範囲外の値をそのまま使います", label, candidate, info, float_precision
        )
        return candidate

    if candidate.kind is ValueKind.BOOL:
        _log_out_of_range(
            logging.WARNING,
            "範囲外の bool 値はクランプできないためそのまま使います",
            label,
            candidate,
            info,
            float_precision,
        )
        return candidate

    clamped = clamp(candidate, info.min, info.max)
    _log_out_of_range(
        logging.WARNING,
        "範囲外の値をクランプしました",
        label,
        candidate,
        info,
        float_precision,
        result=clamped,
    )
    return clamped


def apply_all(
    values: Mapping[str, ControlValue],
    infos: Mapping[str, ControlInfo],
    *,
    policy: str | None = None,
    float_precision: int | None = None,
) -> dict[str, ControlValue]:
    """制御名 → 値の mapping に `apply_bounds` を適用して返す。

    範囲情報の無い制御はそのまま通す。
    """

    out: dict[str, ControlValue] = {}
    for name, value in values.items():
        info = infos.get(name)
        if info is None:
            out[name] = value
            continue
        out[name] = apply_bounds(
            value, info, policy=policy, name=name, float_precision=float_precision
        )
    return out


__all__ = ["ControlInfo", "OutOfRangeError", "apply_all", "apply_bounds", "is_within"]
