"""
どこで: `common.settings`
何を: CLI が参照する `CSG_*` 環境変数を型付きで保持し、起動時に読み込む。
なぜ: 環境変数の解釈を 1 箇所に集め、CLI の優先順位（フラグ > 環境変数 > YAML）を単純に保つため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_choice, env_str

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "INFO"

    # Output（None は「未指定」: YAML/既定値に委ねる）
    OUTPUT_DIR: str | None = None
    PREVIEW: bool | None = None


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `CSG_LOG_LEVEL`: ロギングレベル名（不明値は INFO）
    - `CSG_OUTPUT_DIR`: 出力ディレクトリ
    - `CSG_PREVIEW`: ターミナルプレビューの有無
    """
    _settings.LOG_LEVEL = env_choice("CSG_LOG_LEVEL", LOG_LEVELS, "INFO")
    _settings.OUTPUT_DIR = env_str("CSG_OUTPUT_DIR")
    _settings.PREVIEW = None if env_str("CSG_PREVIEW") is None else env_bool("CSG_PREVIEW", True)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["LOG_LEVELS", "get", "reload_from_env", "_Settings"]
