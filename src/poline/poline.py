from __future__ import annotations

"""The palette engine.

A :class:`Poline` owns an ordered list of anchor :class:`ColorPoint` objects,
pairs adjacent anchors into segments and samples each segment with the line
sampler. All derived data (anchor pairs and sampled points) is rebuilt from
scratch after every structural change; nothing is cached incrementally.

Flattened output
----------------
Each segment yields ``num_points + 2`` samples and the first sample of a
segment coincides with the last sample of the previous one::

    segment 0: a0 . . . . a1        flat index 0..5
    segment 1: a1 . . . . a2        flat index 6..11   (index 6 dropped)

:meth:`Poline.flattened_points` drops every flat index that is a nonzero
multiple of ``num_points + 2``. In a closed loop the last sample repeats the
first anchor, so :meth:`Poline.colors` also drops the final element.
"""

import logging
import numbers
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from common import settings

from .color_point import ColorPoint, ColorPointInit, FromColor, FromPosition
from .conversion import distance
from .errors import PointNotFoundError
from .positions import PositionScale
from .random_colors import random_hsl_pair
from .sampling import LineSampling, vectors_on_line
from .types import PartialVector3, Vector3, optional_vector3

logger = logging.getLogger(__name__)

AnchorPair = Tuple[ColorPoint, ColorPoint]
PositionFunctionLike = PositionScale | int | str


def _default_num_points() -> int:
    return settings.get().DEFAULT_NUM_POINTS


def _default_position_function() -> PositionScale:
    return PositionScale.from_value(settings.get().DEFAULT_POSITION_FUNCTION)


@dataclass
class PolineOptions:
    """Construction options for :class:`Poline`.

    Attributes
    ----------
    anchor_colors:
        Anchor colors as (h, s, l) triples. At least two are required. A
        random complementary pair is generated when ``None``.
    num_points:
        Samples between two anchors, excluding the anchors themselves.
    position_function:
        Easing applied to all axes unless overridden per axis.
    position_function_x, position_function_y, position_function_z:
        Optional per-axis easing overrides.
    inverted_lightness:
        Map the distance from the center to ``1 - l`` instead of ``l``.
    closed_loop:
        Connect the last anchor back to the first.
    line_sampling:
        Sampling mode; ``None`` uses ``POLINE_LINE_SAMPLING``.
    """

    anchor_colors: Optional[Sequence[Iterable[float]]] = None
    num_points: int = field(default_factory=_default_num_points)
    position_function: PositionFunctionLike = field(default_factory=_default_position_function)
    position_function_x: Optional[PositionFunctionLike] = None
    position_function_y: Optional[PositionFunctionLike] = None
    position_function_z: Optional[PositionFunctionLike] = None
    inverted_lightness: bool = False
    closed_loop: bool = False
    line_sampling: Optional[LineSampling | str] = None

    _KEY_ALIASES = {
        "anchorColors": "anchor_colors",
        "numPoints": "num_points",
        "positionFunction": "position_function",
        "positionFunctionX": "position_function_x",
        "positionFunctionY": "position_function_y",
        "positionFunctionZ": "position_function_z",
        "invertedLightness": "inverted_lightness",
        "closedLoop": "closed_loop",
        "lineSampling": "line_sampling",
    }

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "PolineOptions":
        """Build options from a plain mapping (snake_case or camelCase keys).

        Easing selectors may be members, ordinals 0–8 or names.
        ``position_function`` may also be a sequence of three selectors to
        set x, y and z at once. Keys mapped to ``None`` keep their defaults.
        """
        known = set(cls._KEY_ALIASES.values())
        kwargs: dict[str, Any] = {}
        unknown: list[str] = []
        for key, value in values.items():
            name = cls._KEY_ALIASES.get(key, key)
            if name not in known:
                unknown.append(key)
                continue
            if value is not None:
                kwargs[name] = value
        if unknown:
            raise ValueError(f"Unknown Poline options: {', '.join(sorted(unknown))}")

        fn = kwargs.get("position_function")
        if fn is not None and not isinstance(fn, (PositionScale, numbers.Integral, str)):
            per_axis = list(fn)
            if len(per_axis) != 3:
                raise ValueError("position_function must be one selector or three selectors.")
            del kwargs["position_function"]
            for axis, sel in zip("xyz", per_axis):
                kwargs.setdefault(f"position_function_{axis}", sel)

        for key in ("position_function", "position_function_x", "position_function_y", "position_function_z"):
            if kwargs.get(key) is not None:
                kwargs[key] = PositionScale.from_value(kwargs[key])
        if kwargs.get("line_sampling") is not None:
            kwargs["line_sampling"] = LineSampling.from_value(kwargs["line_sampling"])
        if kwargs.get("anchor_colors") is not None:
            kwargs["anchor_colors"] = [Vector3.of(c) for c in kwargs["anchor_colors"]]
        if "num_points" in kwargs:
            kwargs["num_points"] = int(kwargs["num_points"])
        return cls(**kwargs)


class Poline:
    """Palette interpolated through anchor colors.

    Parameters
    ----------
    options:
        Construction options. ``PolineOptions()`` when omitted.
    rng:
        Random source for the default anchors; only used when
        ``options.anchor_colors`` is ``None``.

    Raises
    ------
    ValueError
        If fewer than two anchor colors are given or ``num_points`` is
        negative.
    """

    def __init__(
        self,
        options: Optional[PolineOptions] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if options is None:
            options = PolineOptions()

        anchor_colors = options.anchor_colors
        if anchor_colors is None:
            anchor_colors = random_hsl_pair(rng=rng)
        anchor_colors = list(anchor_colors)
        if len(anchor_colors) < 2:
            raise ValueError("Poline requires at least two anchor colors.")
        if options.num_points < 0:
            raise ValueError("num_points must be non-negative.")

        self._inverted_lightness = bool(options.inverted_lightness)
        self._anchor_points: List[ColorPoint] = [
            ColorPoint(FromColor(Vector3.of(c)), self._inverted_lightness) for c in anchor_colors
        ]
        self._num_points = int(options.num_points)

        fn = PositionScale.from_value(options.position_function)
        self._position_function_x = _axis_function(options.position_function_x, fn)
        self._position_function_y = _axis_function(options.position_function_y, fn)
        self._position_function_z = _axis_function(options.position_function_z, fn)

        self._closed_loop = bool(options.closed_loop)
        sampling = options.line_sampling
        if sampling is None:
            sampling = settings.get().LINE_SAMPLING
        self._line_sampling = LineSampling.from_value(sampling)

        self._anchor_pairs: List[AnchorPair] = []
        self._points: List[List[ColorPoint]] = []
        self.update_anchor_pairs()

    # --- derivation ---
    def update_anchor_pairs(self) -> None:
        """Rebuild anchor pairs and the sampled grid from the anchors."""
        anchors = self._anchor_points
        n = len(anchors)
        pair_count = n if self._closed_loop else n - 1

        self._anchor_pairs = [(anchors[i], anchors[(i + 1) % n]) for i in range(max(pair_count, 0))]

        segment_size = self._num_points + 2
        points: List[List[ColorPoint]] = []
        for i, (p1, p2) in enumerate(self._anchor_pairs):
            positions = vectors_on_line(
                p1.position,
                p2.position,
                segment_size,
                i % 2 == 0,
                self._position_function_x,
                self._position_function_y,
                self._position_function_z,
                sampling=self._line_sampling,
            )
            points.append(
                [ColorPoint(FromPosition(pos), self._inverted_lightness) for pos in positions]
            )
        self._points = points
        logger.debug(
            "derived %d anchor pairs x %d samples from %d anchors",
            len(self._anchor_pairs),
            segment_size,
            n,
        )

    # --- anchor edits ---
    def add_anchor_point(
        self, init: ColorPointInit, insert_at_index: Optional[int] = None
    ) -> ColorPoint:
        """Add an anchor, appended unless ``insert_at_index`` is given.

        ``insert_at_index`` may equal the anchor count (append); anything
        further out raises ``IndexError``. The palette's own
        ``inverted_lightness`` applies to the new point. Returns a copy of
        the created anchor.
        """
        count = len(self._anchor_points)
        if insert_at_index is not None and not -count <= insert_at_index <= count:
            raise IndexError(f"insert_at_index {insert_at_index} out of range for {count} anchors")
        anchor = ColorPoint(init, self._inverted_lightness)
        if insert_at_index is None:
            self._anchor_points.append(anchor)
        else:
            self._anchor_points.insert(insert_at_index, anchor)
        logger.debug("added anchor %r at %s", anchor, insert_at_index)
        self.update_anchor_pairs()
        return anchor.copy()

    def remove_anchor_point_at_index(self, index: int) -> None:
        _ = self._anchor_points[index]  # IndexError before any change
        if len(self._anchor_points) <= 2:
            raise ValueError("Poline requires at least two anchor points.")
        removed = self._anchor_points.pop(index)
        logger.debug("removed anchor %r", removed)
        self.update_anchor_pairs()

    def remove_anchor_point(self, point: ColorPoint) -> None:
        """Remove the first anchor equal to ``point``.

        Raises
        ------
        PointNotFoundError
            If no anchor equals ``point``; the palette is left unchanged.
        """
        self.remove_anchor_point_at_index(self._index_of(point))

    def update_anchor_point_at_index(self, index: int, init: ColorPointInit) -> ColorPoint:
        """Move or recolor the anchor at ``index``; returns a copy of it."""
        point = self._anchor_points[index]
        if isinstance(init, FromPosition):
            point.set_position(init.xyz)
        elif isinstance(init, FromColor):
            point.set_hsl(init.color)
        else:
            raise TypeError(f"Expected FromPosition or FromColor, got {type(init).__name__}")
        self.update_anchor_pairs()
        return point.copy()

    def update_anchor_point(self, point: ColorPoint, init: ColorPointInit) -> ColorPoint:
        """Update the first anchor equal to ``point``; see :meth:`remove_anchor_point`."""
        return self.update_anchor_point_at_index(self._index_of(point), init)

    def _index_of(self, point: ColorPoint) -> int:
        for i, anchor in enumerate(self._anchor_points):
            if anchor == point:
                return i
        raise PointNotFoundError()

    def shift_hue(self, angle: float) -> None:
        """Rotate the hue of every anchor by ``angle`` degrees."""
        for point in self._anchor_points:
            point.shift_hue(angle)
        self.update_anchor_pairs()

    # --- queries ---
    def get_closest_anchor_point(
        self,
        xyz: PartialVector3 | Iterable[Optional[float]],
        max_distance: float = 1.0,
    ) -> Optional[ColorPoint]:
        """Return the anchor nearest to ``xyz``, or ``None`` if too far.

        Axes set to ``None`` in ``xyz`` are ignored. On ties the earliest
        anchor wins.
        """
        query = PartialVector3(*xyz)
        distances = [
            distance(optional_vector3(anchor.position), query, False)
            for anchor in self._anchor_points
        ]
        return self._closest(distances, max_distance)

    def get_closest_anchor_point_by_hsl(
        self,
        hsl: PartialVector3 | Iterable[Optional[float]],
        max_distance: float = 1.0,
    ) -> Optional[ColorPoint]:
        """Like :meth:`get_closest_anchor_point` but compares colors.

        Hue differences wrap around the color wheel and are scaled by 1/360.
        """
        query = PartialVector3(*hsl)
        distances = [
            distance(optional_vector3(anchor.hsl), query, True) for anchor in self._anchor_points
        ]
        return self._closest(distances, max_distance)

    def _closest(self, distances: List[float], max_distance: float) -> Optional[ColorPoint]:
        best = min(range(len(distances)), key=distances.__getitem__)
        if distances[best] > max_distance:
            return None
        return self._anchor_points[best].copy()

    def flattened_points(self) -> List[ColorPoint]:
        """All sampled points in order with segment-boundary duplicates removed."""
        segment_size = self._num_points + 2
        flat = [p for segment in self._points for p in segment]
        return [p.copy() for i, p in enumerate(flat) if i == 0 or i % segment_size != 0]

    def _output_points(self) -> List[ColorPoint]:
        points = self.flattened_points()
        if self._closed_loop and points:
            points = points[:-1]
        return points

    def colors(self) -> List[Vector3]:
        """Flattened colors as (h, s, l) triples."""
        return [p.hsl for p in self._output_points()]

    def colors_css(self, close_paren: Optional[bool] = None) -> List[str]:
        """Flattened colors as CSS-like ``hsl(...)`` strings."""
        return [p.hsl_css(close_paren) for p in self._output_points()]

    # --- properties ---
    @property
    def anchor_points(self) -> List[ColorPoint]:
        return [p.copy() for p in self._anchor_points]

    @property
    def anchor_pairs(self) -> List[AnchorPair]:
        return [(a.copy(), b.copy()) for a, b in self._anchor_pairs]

    @property
    def points(self) -> List[List[ColorPoint]]:
        return [[p.copy() for p in segment] for segment in self._points]

    @property
    def num_points(self) -> int:
        return self._num_points

    @num_points.setter
    def num_points(self, value: int) -> None:
        if value < 0:
            raise ValueError("num_points must be non-negative.")
        self._num_points = int(value)
        self.update_anchor_pairs()

    @property
    def closed_loop(self) -> bool:
        return self._closed_loop

    @closed_loop.setter
    def closed_loop(self, value: bool) -> None:
        self._closed_loop = bool(value)
        self.update_anchor_pairs()

    @property
    def inverted_lightness(self) -> bool:
        return self._inverted_lightness

    @property
    def line_sampling(self) -> LineSampling:
        return self._line_sampling

    @line_sampling.setter
    def line_sampling(self, value: LineSampling | str) -> None:
        self._line_sampling = LineSampling.from_value(value)
        self.update_anchor_pairs()

    @property
    def position_function(self) -> PositionScale:
        """Easing of the x axis; assigning sets all three axes."""
        return self._position_function_x

    @position_function.setter
    def position_function(self, value: PositionFunctionLike) -> None:
        fn = PositionScale.from_value(value)
        self._position_function_x = fn
        self._position_function_y = fn
        self._position_function_z = fn
        self.update_anchor_pairs()

    @property
    def position_functions(self) -> Tuple[PositionScale, PositionScale, PositionScale]:
        return (self._position_function_x, self._position_function_y, self._position_function_z)

    @property
    def position_function_x(self) -> PositionScale:
        return self._position_function_x

    @position_function_x.setter
    def position_function_x(self, value: PositionFunctionLike) -> None:
        self._position_function_x = PositionScale.from_value(value)
        self.update_anchor_pairs()

    @property
    def position_function_y(self) -> PositionScale:
        return self._position_function_y

    @position_function_y.setter
    def position_function_y(self, value: PositionFunctionLike) -> None:
        self._position_function_y = PositionScale.from_value(value)
        self.update_anchor_pairs()

    @property
    def position_function_z(self) -> PositionScale:
        return self._position_function_z

    @position_function_z.setter
    def position_function_z(self, value: PositionFunctionLike) -> None:
        self._position_function_z = PositionScale.from_value(value)
        self.update_anchor_pairs()

    def __repr__(self) -> str:
        return (
            f"Poline(anchors={len(self._anchor_points)}, num_points={self._num_points}, "
            f"closed_loop={self._closed_loop}, inverted_lightness={self._inverted_lightness})"
        )


def _axis_function(value: Optional[PositionFunctionLike], fallback: PositionScale) -> PositionScale:
    if value is None:
        return fallback
    return PositionScale.from_value(value)


__all__ = ["Poline", "PolineOptions", "AnchorPair"]
