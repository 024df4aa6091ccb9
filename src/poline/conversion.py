from __future__ import annotations

"""Conversion between normalized points and HSL-like colors.

The (x, y) plane is a unit square centered on (0.5, 0.5). The angle around
the center is the hue, the distance from the center is the lightness and z
is the saturation. Unlike a real color space this is purely geometric.
"""

import math

from .types import PartialVector3, Vector3

_CX = 0.5
_CY = 0.5


def normalize_hue(h: float) -> float:
    """Normalize hue angle into [0, 360)."""
    return (h % 360.0 + 360.0) % 360.0


def point_to_hsl(xyz: Vector3, inverted_lightness: bool = False) -> Vector3:
    """Convert a normalized point to an (h, s, l) triple.

    Lightness is the distance from the center divided by 0.5 and is not
    clamped, so points towards the corners exceed 1 (up to ``sqrt(2)``).

    Examples
    --------
    >>> point_to_hsl(Vector3(0.5, 0.5, 1.0))
    Vector3(x=0.0, y=1.0, z=0.0)
    """
    x, y, z = xyz

    radians = math.atan2(y - _CY, x - _CX)
    deg = (360.0 + math.degrees(radians)) % 360.0

    s = z

    dist = math.sqrt((y - _CY) ** 2 + (x - _CX) ** 2)
    l = dist / _CX

    lightness = 1.0 - l if inverted_lightness else l
    return Vector3(deg, s, lightness)


def hsl_to_point(hsl: Vector3, inverted_lightness: bool = False) -> Vector3:
    """Convert an (h, s, l) triple to a normalized point.

    Only the inverted mode uses lightness for the radius. Otherwise every
    color lands on the circle of radius 0.5, so this is not the inverse of
    :func:`point_to_hsl` for lightness in that mode.

    Examples
    --------
    >>> hsl_to_point(Vector3(0.0, 0.0, 0.5))
    Vector3(x=1.0, y=0.5, z=0.0)
    """
    h, s, l = hsl
    radians = math.radians(h)

    dist = (1.0 - l) * _CX if inverted_lightness else _CX

    x = _CX + dist * math.cos(radians)
    y = _CY + dist * math.sin(radians)
    return Vector3(x, y, s)


def distance(p1: PartialVector3, p2: PartialVector3, hue_mode: bool = False) -> float:
    """Euclidean distance over the axes present on both sides.

    With ``hue_mode`` the first axis is a hue in degrees and contributes the
    shorter way around the circle, scaled by 1/360.
    """
    a1, b1, c1 = p1
    a2, b2, c2 = p2

    if a1 is None or a2 is None:
        a = 0.0
    elif hue_mode:
        d = abs(a1 - a2)
        a = min(d, 360.0 - d) / 360.0
    else:
        a = a1 - a2

    b = 0.0 if b1 is None or b2 is None else b2 - b1
    c = 0.0 if c1 is None or c2 is None else c2 - c1

    return math.sqrt(a * a + b * b + c * c)


__all__ = ["normalize_hue", "point_to_hsl", "hsl_to_point", "distance"]
