from __future__ import annotations

"""Plain vector value types shared across poline.

A :class:`Vector3` is either a normalized point ``(x, y, z)`` or an HSL-like
color ``(h, s, l)`` depending on where it is used. :class:`PartialVector3`
allows any axis to be missing and only serves as a mask for distance queries.
"""

from typing import Iterable, NamedTuple, Optional


class Vector2(NamedTuple):
    a: float
    b: float


class Vector3(NamedTuple):
    """Immutable 3-component float triple with componentwise equality."""

    x: float
    y: float
    z: float

    @classmethod
    def of(cls, values: Iterable[float]) -> "Vector3":
        """Build a Vector3 from any 3-element iterable of numbers."""
        t = tuple(float(v) for v in values)
        if len(t) != 3:
            raise ValueError("Vector3 requires exactly 3 components.")
        return cls(*t)


class PartialVector3(NamedTuple):
    """3-component triple where any component may be ``None``."""

    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None


def optional_vector3(v: Vector3) -> PartialVector3:
    """Lift a fully specified vector into a PartialVector3."""
    x, y, z = v
    return PartialVector3(x, y, z)


__all__ = ["Vector2", "Vector3", "PartialVector3", "optional_vector3"]
