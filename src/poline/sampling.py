from __future__ import annotations

"""Sampling points on the line between two anchors.

Each axis is eased independently so that, for example, hue can sweep
sinusoidally while saturation moves linearly.
"""

import logging
from enum import Enum
from typing import List, Optional

from .positions import PositionScale, position_from_scale
from .types import Vector3

logger = logging.getLogger(__name__)


class LineSampling(Enum):
    """How the sampling parameter ``t`` is derived from the sample index.

    TRUNCATED computes ``i // (n - 1)`` with integer division, which keeps
    every sample but the last at ``t = 0``. This matches the output of
    existing palettes. FRACTIONAL spreads samples evenly with ``i / (n - 1)``.
    """

    TRUNCATED = "truncated"
    FRACTIONAL = "fractional"

    @classmethod
    def from_value(cls, value: "LineSampling | str") -> "LineSampling":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unknown line sampling mode: {value!r}") from exc


def _invert(t: float, invert: bool) -> float:
    return 1.0 - t if invert else t


def _axis_t(t: float, invert: bool, fn: Optional[PositionScale]) -> float:
    if fn is None:
        return _invert(t, invert)
    return position_from_scale(fn, t, invert)


def vector_on_line(
    t: float,
    p1: Vector3,
    p2: Vector3,
    invert: bool = False,
    fx: Optional[PositionScale] = None,
    fy: Optional[PositionScale] = None,
    fz: Optional[PositionScale] = None,
) -> Vector3:
    """Interpolate between ``p1`` and ``p2`` at ``t`` with per-axis easing.

    Axes without an easing function use ``t`` directly, or ``1 - t`` when
    ``invert`` is set.
    """
    tx = _axis_t(t, invert, fx)
    ty = _axis_t(t, invert, fy)
    tz = _axis_t(t, invert, fz)

    x = (1.0 - tx) * p1[0] + tx * p2[0]
    y = (1.0 - ty) * p1[1] + ty * p2[1]
    z = (1.0 - tz) * p1[2] + tz * p2[2]
    return Vector3(x, y, z)


def vectors_on_line(
    p1: Vector3,
    p2: Vector3,
    num_points: int = 4,
    invert: bool = False,
    fx: Optional[PositionScale] = None,
    fy: Optional[PositionScale] = None,
    fz: Optional[PositionScale] = None,
    sampling: LineSampling = LineSampling.TRUNCATED,
) -> List[Vector3]:
    """Sample ``num_points`` points on the line from ``p1`` to ``p2``.

    Parameters
    ----------
    p1, p2:
        Segment endpoints as normalized points.
    num_points:
        Number of samples including both endpoints. Must be at least 2.
    invert:
        Use the reversed easing curves (see :func:`position_from_scale`).
    fx, fy, fz:
        Optional easing per axis.
    sampling:
        How the sample index maps to ``t``; see :class:`LineSampling`.

    Returns
    -------
    list[Vector3]
        ``num_points`` points ordered by sample index.
    """
    if num_points < 2:
        raise ValueError("num_points must be at least 2.")

    last = num_points - 1
    if sampling is LineSampling.TRUNCATED:
        ts = [float(i // last) for i in range(num_points)]
        if num_points > 2:
            logger.debug("truncated sampling collapses %d of %d samples to t=0", last, num_points)
    else:
        ts = [i / last for i in range(num_points)]

    return [vector_on_line(t, p1, p2, invert, fx, fy, fz) for t in ts]


__all__ = ["LineSampling", "vector_on_line", "vectors_on_line"]
