"""共通フィクスチャ。

- 乱数生成器（`np.random.Generator`）の供給
- `POLINE_*` 環境変数の隔離と設定の再読込
- 小さな Poline 試料
"""

from __future__ import annotations

import os
from typing import Iterator

import numpy as np
import pytest

from common import settings
from poline import Poline, PolineOptions, PositionScale


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """各テストを `POLINE_*` 未設定の既定設定で実行する。"""
    for key in list(os.environ):
        if key.startswith("POLINE_"):
            monkeypatch.delenv(key, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(2024)


@pytest.fixture()
def two_anchor_linear() -> Poline:
    """(0,1,0.8) と (120,1,0.3) の 2 アンカー、Linear、開ループ。"""
    return Poline(
        PolineOptions(
            anchor_colors=[(0.0, 1.0, 0.8), (120.0, 1.0, 0.3)],
            num_points=4,
            position_function=PositionScale.LINEAR,
            closed_loop=False,
        )
    )


@pytest.fixture()
def three_anchor_options() -> PolineOptions:
    return PolineOptions(
        anchor_colors=[(0.0, 0.8, 0.5), (120.0, 0.6, 0.5), (240.0, 0.4, 0.5)],
        num_points=4,
        position_function=PositionScale.SINUSOIDAL,
    )
