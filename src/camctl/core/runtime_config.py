# どこで: `src/camctl/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: 範囲外の制御値をどう扱うか（clamp/error/ignore）を、利用者が環境ごとに選べるようにするため。

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

_logger = logging.getLogger(__name__)

OUT_OF_RANGE_POLICIES = ("clamp", "error", "ignore")


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """camctl の実行時設定。"""

    config_path: Path | None
    out_of_range: str
    float_precision: int | None


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    p = Path(str(path)).expanduser()
    _EXPLICIT_CONFIG_PATH = p
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".camctl" / "config.yaml",
        home / ".config" / "camctl" / "config.yaml",
    )


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_policy(value: Any, *, key: str) -> str:
    if value is None:
        raise RuntimeError(f"{key} が未設定です（同梱 default_config.yaml を確認してください）")
    text = str(value).strip().lower()
    if text not in OUT_OF_RANGE_POLICIES:
        choices = ", ".join(OUT_OF_RANGE_POLICIES)
        raise RuntimeError(f"{key} は {choices} のいずれかである必要があります: got={value!r}")
    return text


def _as_optional_precision(value: Any, *, key: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}")
    try:
        digits = int(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}") from exc
    if digits < 0:
        raise RuntimeError(f"{key} は 0 以上である必要があります: got={digits}")
    return digits


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    try:
        import yaml  # type: ignore[import-untyped]
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(f"PyYAML を import できません: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except Exception as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    _logger.debug("config.yaml をロードしました: %s", path)
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    try:
        blob = (
            resources.files("camctl")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc

    return _load_yaml_text(blob, source="camctl/resource/default_config.yaml")


def _merge_sections(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    # セクション単位（1 段）で後勝ちにマージする。
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.camctl/config.yaml` / `~/.config/camctl/config.yaml`
    3) `set_config_path(...)` で指定したパス
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        payload = _merge_sections(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        payload = _merge_sections(payload, _load_yaml_config(explicit_path))

    version = payload.get("version")
    if version is None:
        raise RuntimeError(
            "config.yaml の version が未設定です（同梱 default_config.yaml を確認してください）"
        )
    try:
        version_i = int(version)
    except Exception as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    bounds = _as_mapping(payload.get("bounds"), key="bounds")
    out_of_range = _as_policy(bounds.get("out_of_range"), key="bounds.out_of_range")

    render = _as_mapping(payload.get("render"), key="render")
    float_precision = _as_optional_precision(
        render.get("float_precision"), key="render.float_precision"
    )

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        out_of_range=out_of_range,
        float_precision=float_precision,
    )
    _CONFIG_CACHE = cfg
    return cfg


def out_of_range_policy() -> str:
    """範囲外の制御値に対する既定の扱い（clamp/error/ignore）を返す。"""

    return runtime_config().out_of_range


__all__ = [
    "OUT_OF_RANGE_POLICIES",
    "RuntimeConfig",
    "out_of_range_policy",
    "runtime_config",
    "set_config_path",
]
