"""
どこで: `common` パッケージ。
何を: CLI/コア双方で使う軽量ユーティリティ（ロギング設定、環境変数設定）。
なぜ: 横断的な関心事を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
