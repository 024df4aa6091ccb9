from __future__ import annotations

import logging

import pytest

from common import settings, setup_default_logging
from common.env import env_bool, env_choice, env_int


def test_env_int(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POLINE_TEST_INT", "12")
    assert env_int("POLINE_TEST_INT", 1) == 12
    monkeypatch.setenv("POLINE_TEST_INT", "abc")
    assert env_int("POLINE_TEST_INT", 1) == 1
    monkeypatch.setenv("POLINE_TEST_INT", "-5")
    assert env_int("POLINE_TEST_INT", 1, min_value=0) == 0
    assert env_int("POLINE_TEST_MISSING", None) is None


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("0", False), ("yes", True), ("off", False), ("maybe", True)],
)
def test_env_bool(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("POLINE_TEST_BOOL", raw)
    assert env_bool("POLINE_TEST_BOOL", True) is expected


def test_env_choice(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POLINE_TEST_CHOICE", "  Cubic ")
    assert env_choice("POLINE_TEST_CHOICE", ["linear", "cubic"], "linear") == "cubic"
    monkeypatch.setenv("POLINE_TEST_CHOICE", "bouncy")
    assert env_choice("POLINE_TEST_CHOICE", ["linear", "cubic"], "linear") == "linear"


def test_settings_defaults() -> None:
    s = settings.get()
    assert s.DEFAULT_NUM_POINTS == 4
    assert s.DEFAULT_POSITION_FUNCTION == "sinusoidal"
    assert s.LINE_SAMPLING == "truncated"
    assert s.CSS_CLOSE_PAREN is False
    assert s.RANDOM_SEED is None
    assert s.LOG_LEVEL == "INFO"


def test_settings_reload_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POLINE_NUM_POINTS", "-3")
    monkeypatch.setenv("POLINE_POSITION_FUNCTION", "SmoothStep")
    monkeypatch.setenv("POLINE_LINE_SAMPLING", "nonsense")
    monkeypatch.setenv("POLINE_SEED", "99")
    monkeypatch.setenv("POLINE_LOG_LEVEL", "debug")
    settings.reload_from_env()
    s = settings.get()
    assert s.DEFAULT_NUM_POINTS == 0
    assert s.DEFAULT_POSITION_FUNCTION == "smoothstep"
    assert s.LINE_SAMPLING == "truncated"
    assert s.RANDOM_SEED == 99
    assert s.LOG_LEVEL == "DEBUG"


def test_setup_default_logging_is_noop_when_configured() -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        before = list(root.handlers)
        setup_default_logging("DEBUG")
        assert root.handlers == before
    finally:
        root.removeHandler(handler)


@pytest.mark.parametrize("raw", ["smooth_step", "Smooth-Step", "SMOOTHSTEP"])
def test_position_function_env_accepts_separators(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    """`_`/`-` 区切りの名前も `PositionScale.from_value` と同様に受け付ける。"""
    from poline import Poline, PolineOptions, PositionScale

    monkeypatch.setenv("POLINE_POSITION_FUNCTION", raw)
    settings.reload_from_env()
    assert settings.get().DEFAULT_POSITION_FUNCTION == "smoothstep"
    pal = Poline(PolineOptions(anchor_colors=[(0.0, 1.0, 0.5), (90.0, 1.0, 0.5)]))
    assert pal.position_function is PositionScale.SMOOTH_STEP


def test_env_choice_ignore(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POLINE_TEST_CHOICE", "smooth_step")
    assert env_choice("POLINE_TEST_CHOICE", ["smoothstep"], "linear") == "linear"
    assert env_choice("POLINE_TEST_CHOICE", ["smoothstep"], "linear", ignore="_-") == "smoothstep"
