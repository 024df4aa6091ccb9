from __future__ import annotations

"""Random default anchors.

Palettes created without explicit anchors start from a light color and a
darker color whose hue is 60–240 degrees away. The random source is a
``numpy.random.Generator`` so callers (and tests) can make it deterministic.
"""

from typing import List, Optional

import numpy as np

from common import settings

from .types import Vector2, Vector3


def default_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a Generator seeded from ``seed`` or ``POLINE_SEED``."""
    if seed is None:
        seed = settings.get().RANDOM_SEED
    return np.random.default_rng(seed)


def _offset_hue(start_hue: float, rng: np.random.Generator) -> float:
    return (start_hue + 60.0 + float(rng.random()) * 180.0) % 360.0


def random_hsl_pair(
    start_hue: Optional[float] = None,
    saturations: Optional[Vector2] = None,
    lightnesses: Optional[Vector2] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Vector3]:
    """Generate a light/dark pair of anchor colors.

    Parameters
    ----------
    start_hue:
        Hue of the first color in degrees. Random in [0, 360) if omitted.
    saturations:
        Saturation of each color. Uniform in [0, 1) if omitted.
    lightnesses:
        Lightness of each color. Defaults to [0.75, 0.95) and [0.3, 0.5).
    rng:
        Random source. See :func:`default_rng`.
    """
    if rng is None:
        rng = default_rng()
    if start_hue is None:
        start_hue = float(rng.random()) * 360.0
    if saturations is None:
        saturations = Vector2(float(rng.random()), float(rng.random()))
    if lightnesses is None:
        lightnesses = Vector2(
            0.75 + float(rng.random()) * 0.2,
            0.3 + float(rng.random()) * 0.2,
        )
    return [
        Vector3(start_hue, saturations[0], lightnesses[0]),
        Vector3(_offset_hue(start_hue, rng), saturations[1], lightnesses[1]),
    ]


def random_hsl_triple(
    start_hue: Optional[float] = None,
    saturations: Optional[Vector3] = None,
    lightnesses: Optional[Vector3] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Vector3]:
    """Generate a light/dark/light triple of anchor colors."""
    if rng is None:
        rng = default_rng()
    if start_hue is None:
        start_hue = float(rng.random()) * 360.0
    if saturations is None:
        saturations = Vector3(*(float(v) for v in rng.random(3)))
    if lightnesses is None:
        lightnesses = Vector3(
            0.75 + float(rng.random()) * 0.2,
            0.3 + float(rng.random()) * 0.2,
            0.75 + float(rng.random()) * 0.2,
        )
    return [
        Vector3(start_hue, saturations[0], lightnesses[0]),
        Vector3(_offset_hue(start_hue, rng), saturations[1], lightnesses[1]),
        Vector3(_offset_hue(start_hue, rng), saturations[2], lightnesses[2]),
    ]


__all__ = ["default_rng", "random_hsl_pair", "random_hsl_triple"]
