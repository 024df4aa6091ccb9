from __future__ import annotations

"""ColorPoint: a position and its color, kept consistent.

A ColorPoint is built from exactly one representation, either a normalized
position or an (h, s, l) color, and derives the other with the conversion
functions in :mod:`poline.conversion`. The lightness interpretation flag is
fixed at construction.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from common import settings

from .conversion import hsl_to_point, point_to_hsl
from .errors import MissingArgumentError
from .types import Vector3


@dataclass(frozen=True)
class FromPosition:
    """Initialize a ColorPoint from a normalized (x, y, z) position."""

    xyz: Vector3


@dataclass(frozen=True)
class FromColor:
    """Initialize a ColorPoint from an (h, s, l) color."""

    color: Vector3


ColorPointInit = Union[FromPosition, FromColor]


class InitPreference(Enum):
    """Tie-break rule when both a position and a color are supplied."""

    PREFER_POSITION = "position"
    PREFER_COLOR = "color"


PREFER_POSITION = InitPreference.PREFER_POSITION
PREFER_COLOR = InitPreference.PREFER_COLOR


def color_point_init(
    xyz: Optional[Iterable[float]] = None,
    color: Optional[Iterable[float]] = None,
    prefer: InitPreference = PREFER_POSITION,
) -> ColorPointInit:
    """Resolve optional position/color arguments into a ColorPointInit.

    Raises
    ------
    MissingArgumentError
        If neither ``xyz`` nor ``color`` is given.
    """
    if xyz is not None and color is not None:
        if prefer is PREFER_COLOR:
            return FromColor(Vector3.of(color))
        return FromPosition(Vector3.of(xyz))
    if xyz is not None:
        return FromPosition(Vector3.of(xyz))
    if color is not None:
        return FromColor(Vector3.of(color))
    raise MissingArgumentError()


def _format_number(v: float) -> str:
    if float(v).is_integer():
        return str(int(v))
    return repr(float(v))


def format_hsl_css(hsl: Vector3, close_paren: Optional[bool] = None) -> str:
    """Format an (h, s, l) triple as a CSS-like ``hsl(...)`` string.

    The closing parenthesis is omitted unless ``close_paren`` is set (or
    ``POLINE_CSS_CLOSE_PAREN`` is enabled), keeping strings identical to
    those produced by earlier releases.
    """
    if close_paren is None:
        close_paren = settings.get().CSS_CLOSE_PAREN
    h, s, l = hsl
    out = f"hsl({_format_number(h)},{_format_number(s * 100.0)}%,{_format_number(l * 100.0)}%"
    return out + ")" if close_paren else out


class ColorPoint:
    """A point in the normalized palette space together with its color.

    Attributes are read through properties; use :meth:`set_position`,
    :meth:`set_hsl` or :meth:`shift_hue` to change a point so that both
    representations stay in sync.
    """

    __slots__ = ("_x", "_y", "_z", "_color", "_inverted_lightness")

    def __init__(self, init: ColorPointInit, inverted_lightness: bool = False) -> None:
        self._inverted_lightness = bool(inverted_lightness)
        if isinstance(init, FromPosition):
            self.set_position(init.xyz)
        elif isinstance(init, FromColor):
            self.set_hsl(init.color)
        else:
            raise TypeError(f"Expected FromPosition or FromColor, got {type(init).__name__}")

    @classmethod
    def from_position(cls, xyz: Iterable[float], inverted_lightness: bool = False) -> "ColorPoint":
        return cls(FromPosition(Vector3.of(xyz)), inverted_lightness)

    @classmethod
    def from_color(cls, color: Iterable[float], inverted_lightness: bool = False) -> "ColorPoint":
        return cls(FromColor(Vector3.of(color)), inverted_lightness)

    @classmethod
    def from_collection(
        cls,
        xyz: Optional[Iterable[float]] = None,
        color: Optional[Iterable[float]] = None,
        inverted_lightness: bool = False,
        prefer: InitPreference = PREFER_POSITION,
    ) -> "ColorPoint":
        """Build from optional position/color; see :func:`color_point_init`."""
        return cls(color_point_init(xyz, color, prefer), inverted_lightness)

    # --- accessors ---
    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def position(self) -> Vector3:
        return Vector3(self._x, self._y, self._z)

    @property
    def hsl(self) -> Vector3:
        return self._color

    color = hsl

    @property
    def inverted_lightness(self) -> bool:
        return self._inverted_lightness

    # --- mutators ---
    def set_position(self, xyz: Iterable[float]) -> None:
        """Move the point and recompute its color."""
        pos = Vector3.of(xyz)
        self._x, self._y, self._z = pos
        self._color = point_to_hsl(pos, self._inverted_lightness)

    def set_hsl(self, color: Iterable[float]) -> None:
        """Recolor the point and recompute its position."""
        self._color = Vector3.of(color)
        self._x, self._y, self._z = hsl_to_point(self._color, self._inverted_lightness)

    def shift_hue(self, angle: float) -> None:
        """Rotate the hue by ``angle`` degrees, wrapping into [0, 360)."""
        h, s, l = self._color
        self.set_hsl((((360.0 + (h + angle)) % 360.0), s, l))

    def hsl_css(self, close_paren: Optional[bool] = None) -> str:
        return format_hsl_css(self._color, close_paren)

    def copy(self) -> "ColorPoint":
        dup = ColorPoint.__new__(ColorPoint)
        dup._x, dup._y, dup._z = self._x, self._y, self._z
        dup._color = self._color
        dup._inverted_lightness = self._inverted_lightness
        return dup

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorPoint):
            return NotImplemented
        return (
            self.position == other.position
            and self._color == other._color
            and self._inverted_lightness == other._inverted_lightness
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        h, s, l = self._color
        return (
            f"ColorPoint(xyz=({self._x:.4f}, {self._y:.4f}, {self._z:.4f}), "
            f"hsl=({h:.2f}, {s:.4f}, {l:.4f}), inverted_lightness={self._inverted_lightness})"
        )


__all__ = [
    "ColorPoint",
    "ColorPointInit",
    "FromPosition",
    "FromColor",
    "InitPreference",
    "PREFER_POSITION",
    "PREFER_COLOR",
    "color_point_init",
    "format_hsl_css",
]
