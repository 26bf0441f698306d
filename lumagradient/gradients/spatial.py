"""
Mesh and gaussian gradients.

Both paint the first position-ranked color as a background, then lay one soft
radial blob per stop at its anchor (see :mod:`lumagradient.layout`), in
insertion order. A blob is the stop color at full coverage in the center,
fading linearly to transparent at its radius. The first blob uses normal
blending and every later one uses screen blending, so overlaps brighten.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from ..colors.rgb import hex_to_rgb
from ..config import GradientConfig
from ..defaults import GAUSSIAN_RADIUS_FACTOR, MESH_RADIUS_FACTOR
from ..layout import resolve_anchors
from ..types.gradient_type import GradientType
from .helpers import (
    buffer_size,
    composite_screen,
    composite_source_over,
    logical_grid,
    solid_fill,
)


def blob_radius(gradient_type: GradientType, width: float) -> float:
    factor = MESH_RADIUS_FACTOR if gradient_type is GradientType.MESH else GAUSSIAN_RADIUS_FACTOR
    return width * factor


def blob_coverage(xs: NDArray, ys: NDArray, cx: float, cy: float, radius: float) -> NDArray:
    """Linear falloff from 1 at ``(cx, cy)`` to 0 at ``radius``."""
    distances = np.hypot(xs - cx, ys - cy)
    return np.clip(1.0 - distances / radius, 0.0, 1.0)


def render_spatial(
    config: GradientConfig,
    width: float,
    height: float,
    scale: float = 1.0,
    rng: Optional[np.random.Generator] = None,
) -> NDArray:
    buffer_w, buffer_h = buffer_size(width, height, scale)
    xs, ys = logical_grid(width, height, scale)

    background = hex_to_rgb(config.sorted_stops()[0].color)
    canvas = solid_fill(np.array(background, dtype=np.float64), buffer_w, buffer_h)

    radius = blob_radius(config.type, width)
    anchors = resolve_anchors(config, width, height)
    for i, (stop, (ax, ay)) in enumerate(zip(config.stops, anchors)):
        color = np.array(hex_to_rgb(stop.color), dtype=np.float64)
        coverage = blob_coverage(xs, ys, ax, ay, radius)
        if i == 0:
            canvas = composite_source_over(canvas, color, coverage)
        else:
            canvas = composite_screen(canvas, color, coverage)
    return canvas


render_mesh = render_spatial
render_gaussian = render_spatial
