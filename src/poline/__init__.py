"""Public entrypoint for the poline palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``poline`` instead of individual
submodules.
"""

from .types import PartialVector3, Vector2, Vector3, optional_vector3
from .errors import MissingArgumentError, PointNotFoundError, PolineError
from .positions import PositionScale, position_from_scale
from .conversion import distance, hsl_to_point, normalize_hue, point_to_hsl
from .sampling import LineSampling, vector_on_line, vectors_on_line
from .color_point import (
    PREFER_COLOR,
    PREFER_POSITION,
    ColorPoint,
    ColorPointInit,
    FromColor,
    FromPosition,
    InitPreference,
    color_point_init,
    format_hsl_css,
)
from .random_colors import default_rng, random_hsl_pair, random_hsl_triple
from .poline import Poline, PolineOptions
from .export import (
    EXPORT_FORMAT_OPTIONS,
    LINE_SAMPLING_OPTIONS,
    POSITION_FUNCTION_LABEL_MAP,
    POSITION_FUNCTION_OPTIONS,
    ExportFormat,
    export_palette,
)

__all__ = [
    "Vector2",
    "Vector3",
    "PartialVector3",
    "optional_vector3",
    "PolineError",
    "MissingArgumentError",
    "PointNotFoundError",
    "PositionScale",
    "position_from_scale",
    "normalize_hue",
    "point_to_hsl",
    "hsl_to_point",
    "distance",
    "LineSampling",
    "vector_on_line",
    "vectors_on_line",
    "ColorPoint",
    "ColorPointInit",
    "FromPosition",
    "FromColor",
    "InitPreference",
    "PREFER_POSITION",
    "PREFER_COLOR",
    "color_point_init",
    "format_hsl_css",
    "default_rng",
    "random_hsl_pair",
    "random_hsl_triple",
    "Poline",
    "PolineOptions",
    "ExportFormat",
    "export_palette",
    "POSITION_FUNCTION_OPTIONS",
    "LINE_SAMPLING_OPTIONS",
    "POSITION_FUNCTION_LABEL_MAP",
    "EXPORT_FORMAT_OPTIONS",
]
