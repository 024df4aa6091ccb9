"""
どこで: `common.settings`
何を: poline の環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_choice, env_int

POSITION_FUNCTION_NAMES = (
    "linear",
    "exponential",
    "cubic",
    "quadratic",
    "quartic",
    "sinusoidal",
    "asinusoidal",
    "arc",
    "smoothstep",
)
LINE_SAMPLING_NAMES = ("truncated", "fractional")
LOG_LEVEL_NAMES = ("debug", "info", "warning", "error", "critical")


@dataclass
class _Settings:
    # Palette defaults
    DEFAULT_NUM_POINTS: int = 4
    DEFAULT_POSITION_FUNCTION: str = "sinusoidal"
    LINE_SAMPLING: str = "truncated"

    # Output
    CSS_CLOSE_PAREN: bool = False

    # Misc
    RANDOM_SEED: int | None = None
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int`、列挙は `env_choice` を使用。
    - 不正値は既定値へフォールバックし、点数は下限 0 に丸める。
    - 補間関数名は `_`/`-` を無視して照合する（`PositionScale.from_value` と同じ）。
    """

    # Palette defaults
    _settings.DEFAULT_NUM_POINTS = env_int("POLINE_NUM_POINTS", 4, min_value=0) or 0
    _settings.DEFAULT_POSITION_FUNCTION = env_choice(
        "POLINE_POSITION_FUNCTION", POSITION_FUNCTION_NAMES, "sinusoidal", ignore="_-"
    )
    _settings.LINE_SAMPLING = env_choice("POLINE_LINE_SAMPLING", LINE_SAMPLING_NAMES, "truncated")

    # Output
    _settings.CSS_CLOSE_PAREN = env_bool("POLINE_CSS_CLOSE_PAREN", False)

    # Misc
    _settings.RANDOM_SEED = env_int("POLINE_SEED", None, min_value=0)
    _settings.LOG_LEVEL = env_choice("POLINE_LOG_LEVEL", LOG_LEVEL_NAMES, "info").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
