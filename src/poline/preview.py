from __future__ import annotations

"""Headless swatch previews.

matplotlib is an optional dependency and is only imported when rendering.
"""

import colorsys
import logging
import os
from typing import Iterable, Sequence, Tuple

from .types import Vector3

logger = logging.getLogger(__name__)

RGB = Tuple[float, float, float]


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def hsl_to_rgb(hsl: Vector3) -> RGB:
    """Convert an (h, s, l) triple to sRGB in [0, 1].

    Saturation and lightness are clamped first since palette lightness can
    exceed 1 near the corners of the square.
    """
    h, s, l = hsl
    r, g, b = colorsys.hls_to_rgb((h % 360.0) / 360.0, _clamp01(l), _clamp01(s))
    return (r, g, b)


def render_swatches_png(
    colors: Sequence[Vector3] | Iterable[Vector3],
    out_path: str,
    *,
    swatch_px: int = 60,
    height_px: int = 120,
) -> str:
    """Draw one rectangle per color side by side and save as PNG."""
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    from matplotlib.patches import Rectangle

    colors = list(colors)
    if not colors:
        raise ValueError("colors must not be empty.")

    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    width_px = swatch_px * len(colors)
    dpi = 100
    fig = plt.figure(figsize=(width_px / dpi, height_px / dpi), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, len(colors))
    ax.set_ylim(0, 1)
    ax.axis("off")
    for i, c in enumerate(colors):
        ax.add_patch(Rectangle((i, 0), 1, 1, facecolor=hsl_to_rgb(c), edgecolor="none"))
    fig.savefig(out_path, dpi=dpi)
    plt.close(fig)
    logger.info("wrote %d swatches to %s", len(colors), out_path)
    return out_path


__all__ = ["hsl_to_rgb", "render_swatches_png"]
