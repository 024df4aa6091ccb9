from __future__ import annotations

import copy
import math

import pytest

from poline import (
    PREFER_COLOR,
    ColorPoint,
    FromColor,
    FromPosition,
    MissingArgumentError,
    PolineError,
    Vector3,
    color_point_init,
    format_hsl_css,
)


def test_color_from_point_inverted() -> None:
    cp = ColorPoint(FromPosition(Vector3(1.0, 1.0, 1.0)), inverted_lightness=True)
    h, s, l = cp.hsl
    assert h == pytest.approx(45.0)
    assert s == 1.0
    assert l == pytest.approx(1.0 - math.sqrt(2.0))


def test_point_from_color_inverted() -> None:
    cp = ColorPoint.from_color((1.0, 1.0, 1.0), inverted_lightness=True)
    assert cp.position == Vector3(0.5, 0.5, 1.0)
    assert (cp.x, cp.y, cp.z) == (0.5, 0.5, 1.0)
    assert cp.color == cp.hsl == Vector3(1.0, 1.0, 1.0)


def test_from_collection_requires_one_argument() -> None:
    with pytest.raises(MissingArgumentError) as ei:
        ColorPoint.from_collection()
    assert isinstance(ei.value, PolineError)
    assert str(ei.value) == "At least one is required"


def test_position_wins_when_both_given() -> None:
    cp = ColorPoint.from_collection(xyz=(1.0, 0.5, 0.2), color=(90.0, 0.5, 0.5))
    assert cp.position == Vector3(1.0, 0.5, 0.2)


def test_prefer_color_rule() -> None:
    init = color_point_init(xyz=(1.0, 0.5, 0.2), color=(90.0, 0.5, 0.5), prefer=PREFER_COLOR)
    assert init == FromColor(Vector3(90.0, 0.5, 0.5))
    cp = ColorPoint(init)
    assert cp.position == pytest.approx((0.5, 1.0, 0.5))


def test_constructor_rejects_non_init() -> None:
    with pytest.raises(TypeError):
        ColorPoint((0.1, 0.2, 0.3))  # type: ignore[arg-type]


def test_set_position_recomputes_color() -> None:
    cp = ColorPoint.from_color((0.0, 1.0, 0.5))
    cp.set_position((0.5, 1.0, 0.25))
    h, s, l = cp.hsl
    assert h == pytest.approx(90.0)
    assert s == 0.25
    assert l == pytest.approx(1.0)


def test_set_hsl_recomputes_position() -> None:
    cp = ColorPoint.from_position((0.5, 0.5, 0.0))
    cp.set_hsl((180.0, 0.7, 0.2))
    assert cp.position == pytest.approx((0.0, 0.5, 0.7))
    assert cp.hsl == Vector3(180.0, 0.7, 0.2)


def test_shift_hue_wraps() -> None:
    cp = ColorPoint.from_color((350.0, 0.5, 0.5))
    cp.shift_hue(20.0)
    assert cp.hsl.x == 10.0
    cp.shift_hue(-30.0)
    assert cp.hsl.x == 340.0


def test_shift_hue_full_turn_is_noop() -> None:
    cp = ColorPoint.from_color((123.0, 0.5, 0.5))
    before = cp.copy()
    cp.shift_hue(360.0)
    assert cp.hsl.x == pytest.approx(before.hsl.x)
    assert cp.position == pytest.approx(before.position)


def test_hsl_css_has_no_closing_paren_by_default() -> None:
    cp = ColorPoint.from_color((120.0, 0.5, 0.25))
    assert cp.hsl_css() == "hsl(120,50%,25%"
    assert cp.hsl_css(close_paren=True) == "hsl(120,50%,25%)"


def test_format_hsl_css_fractional_values() -> None:
    assert format_hsl_css(Vector3(12.5, 0.125, 0.5)) == "hsl(12.5,12.5%,50%"


def test_css_close_paren_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    from common import settings

    monkeypatch.setenv("POLINE_CSS_CLOSE_PAREN", "1")
    settings.reload_from_env()
    assert format_hsl_css(Vector3(0.0, 1.0, 0.5)) == "hsl(0,100%,50%)"


def test_equality_and_copy_are_by_value() -> None:
    a = ColorPoint.from_color((30.0, 0.5, 0.5))
    b = ColorPoint.from_color((30.0, 0.5, 0.5))
    assert a == b
    assert a != ColorPoint.from_color((30.0, 0.5, 0.5), inverted_lightness=True)

    c = copy.copy(a)
    assert c == a and c is not a
    c.shift_hue(10.0)
    assert c != a
    assert a.hsl.x == 30.0


def test_inverted_flag_is_read_only() -> None:
    cp = ColorPoint.from_color((30.0, 0.5, 0.5), inverted_lightness=True)
    assert cp.inverted_lightness is True
    with pytest.raises(AttributeError):
        cp.inverted_lightness = False  # type: ignore[misc]
