"""
どこで: `common.env`
何を: `CSG_*` 環境変数と YAML 値の読取ヘルパ（文字列/真偽/列挙値）。
なぜ: settings 側で空文字・大文字小文字・不正値の扱いを揃えるため。
"""

from __future__ import annotations

import os
from typing import Iterable, Optional

_TRUE = frozenset({"1", "true", "t", "yes", "y", "on"})
_FALSE = frozenset({"0", "false", "f", "no", "n", "off"})


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """前後空白を除いた値を返す。未設定または空白のみなら `default`。"""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def to_bool(value: object, default: bool = False) -> bool:
    """環境変数や YAML の値を真偽値へ。

    `bool` はそのまま、`1/true/yes/on` と `0/false/no/off`（大文字小文字不問）を受理し、
    その他の整数は 0 以外を True とみなす。`None` や解釈できない値は `default`。
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return bool(default)
    s = str(value).strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    try:
        return int(s) != 0
    except ValueError:
        return bool(default)


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得（解釈は `to_bool` と同じ）。"""
    return to_bool(env_str(name), default)


def env_choice(name: str, choices: Iterable[str], default: str) -> str:
    """`choices` のいずれか（大文字化して比較）を返す。範囲外は `default`。"""
    raw = env_str(name)
    if raw is None:
        return default
    allowed = {c.upper() for c in choices}
    value = raw.upper()
    return value if value in allowed else default


__all__ = ["env_str", "to_bool", "env_bool", "env_choice"]
