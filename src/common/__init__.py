"""
どこで: `common` パッケージ。
何を: poline 本体とスクリプトで共有する環境変数/設定/ロギングの軽量ユーティリティ。
なぜ: 周辺的な関心事をコアのアルゴリズムから分離し、依存の向きを単純化するため。
"""

from . import settings
from .logging import setup_default_logging

__all__ = [
    "settings",
    "setup_default_logging",
]
