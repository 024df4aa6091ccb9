from __future__ import annotations

"""Helper utilities for integrating poline into external UIs.

This module exposes label/enum pairs for position functions, sampling modes
and export formats, and provides :func:`export_palette` to convert a
:class:`Poline` into a plain list that UI code can consume easily.
"""

from enum import Enum
from typing import Dict, List

from .poline import Poline
from .positions import PositionScale
from .sampling import LineSampling


class ExportFormat(Enum):
    """Supported output formats for exported color lists."""

    HSL = "hsl"
    CSS = "css"
    XYZ = "xyz"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
POSITION_FUNCTION_OPTIONS: List[tuple[str, PositionScale]] = [
    ("Linear", PositionScale.LINEAR),
    ("Exponential", PositionScale.EXPONENTIAL),
    ("Cubic", PositionScale.CUBIC),
    ("Quadratic", PositionScale.QUADRATIC),
    ("Quartic", PositionScale.QUARTIC),
    ("Sinusoidal", PositionScale.SINUSOIDAL),
    ("Asinusoidal", PositionScale.ASINUSOIDAL),
    ("Arc", PositionScale.ARC),
    ("Smooth Step", PositionScale.SMOOTH_STEP),
]
LINE_SAMPLING_OPTIONS: List[tuple[str, LineSampling]] = [
    ("Truncated (compatible)", LineSampling.TRUNCATED),
    ("Fractional", LineSampling.FRACTIONAL),
]
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("HSL", ExportFormat.HSL),
    ("CSS", ExportFormat.CSS),
    ("XYZ", ExportFormat.XYZ),
]

POSITION_FUNCTION_LABEL_MAP: Dict[str, PositionScale] = {
    label: value for label, value in POSITION_FUNCTION_OPTIONS
}


def export_palette(poline: Poline, fmt: ExportFormat | str) -> List[object]:
    """Convert a Poline to a list of colors in the desired format.

    Every format lists the same points as :meth:`Poline.colors` (closed loops
    drop the repeated first anchor), so exports line up index by index.
    """
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.HSL:
        return [tuple(c) for c in poline.colors()]
    if export_fmt == ExportFormat.CSS:
        return list(poline.colors_css())
    if export_fmt == ExportFormat.XYZ:
        return [tuple(p.position) for p in poline._output_points()]
    raise ValueError(f"Unsupported export format: {fmt}")


__all__ = [
    "ExportFormat",
    "POSITION_FUNCTION_OPTIONS",
    "LINE_SAMPLING_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
    "POSITION_FUNCTION_LABEL_MAP",
    "export_palette",
]
