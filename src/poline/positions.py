from __future__ import annotations

"""Easing ("position scale") functions.

Each :class:`PositionScale` member selects a pure function mapping the
interpolation parameter ``t`` in [0, 1] to an eased ``t``. The ``reverse``
flag selects the mirrored curve so that alternating segments of a palette
join without a visible kink.
"""

import math
import numbers
from enum import Enum


class PositionScale(Enum):
    """Easing curves applied per axis when sampling between anchors.

    Values are the ordinals used by external callers (0–8).
    """

    LINEAR = 0
    EXPONENTIAL = 1
    CUBIC = 2
    QUADRATIC = 3
    QUARTIC = 4
    SINUSOIDAL = 5
    ASINUSOIDAL = 6
    ARC = 7
    SMOOTH_STEP = 8

    @classmethod
    def from_value(cls, value: "PositionScale | int | str") -> "PositionScale":
        """Resolve a member from itself, an ordinal (0–8) or a name.

        Names are matched case-insensitively and ignore ``_``/``-``, so
        ``"smoothStep"``, ``"smooth_step"`` and ``"SmoothStep"`` are equivalent.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unknown position function: {value!r}")
        if isinstance(value, numbers.Integral):
            try:
                return cls(int(value))
            except ValueError as exc:
                raise ValueError(f"Position function ordinal must be 0-8, got {value}.") from exc
        if isinstance(value, str):
            key = value.strip().replace("_", "").replace("-", "").lower()
            for member in cls:
                if member.name.replace("_", "").lower() == key:
                    return member
        raise ValueError(f"Unknown position function: {value!r}")

    def position(self, t: float, reverse: bool = False) -> float:
        """Eased position of ``t`` for this scale."""
        return position_from_scale(self, t, reverse)


_HALF_PI = math.pi / 2.0


def position_from_scale(scale: PositionScale, t: float, reverse: bool = False) -> float:
    """Apply the easing curve ``scale`` to ``t``.

    Parameters
    ----------
    scale:
        Easing curve.
    t:
        Interpolation parameter, expected in [0, 1].
    reverse:
        Use the mirrored variant ``1 - f(1 - t)``. Linear and SmoothStep
        have no distinct reverse form.
    """
    if scale is PositionScale.LINEAR:
        return t
    if scale is PositionScale.EXPONENTIAL:
        return 1.0 - (1.0 - t) ** 2 if reverse else t**2
    if scale is PositionScale.CUBIC:
        return 1.0 - (1.0 - t) ** 3 if reverse else t**3
    if scale is PositionScale.QUADRATIC:
        return 1.0 - (1.0 - t) ** 4 if reverse else t**4
    if scale is PositionScale.QUARTIC:
        return 1.0 - (1.0 - t) ** 5 if reverse else t**5
    if scale is PositionScale.SINUSOIDAL:
        if reverse:
            return 1.0 - math.sin((1.0 - t) * math.pi / 2.0)
        return math.sin(t * math.pi / 2.0)
    if scale is PositionScale.ASINUSOIDAL:
        if reverse:
            return 1.0 - math.asin(1.0 - t) / _HALF_PI
        return math.asin(t) / _HALF_PI
    if scale is PositionScale.ARC:
        if reverse:
            return math.sqrt(1.0 - (1.0 - t) ** 2)
        return 1.0 - math.sqrt(1.0 - t)
    if scale is PositionScale.SMOOTH_STEP:
        return t ** (2.0 * (3.0 - 2.0 * t))

    raise ValueError(f"Unsupported PositionScale: {scale}")


__all__ = ["PositionScale", "position_from_scale"]
