"""
Bezier band gradient.

Over a background of the first ranked color, each later stop ``i`` adds a band
whose top edge is a cubic Bezier wave from ``(0, y)`` to ``(width, y)`` with
``y = i / n * height``. The two control points sit at 33% and 66% of the width
with their heights jittered by up to +/-200 px, so every render is different.
The band runs down to the bottom edge and is filled with a vertical gradient
from the stop's color to the next stop's color at 80% opacity.

The band outline is rasterized with Pillow's ``ImageDraw``.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw

from ..colors.rgb import hex_to_rgb
from ..config import GradientConfig
from ..defaults import (
    BEZIER_BAND_ALPHA,
    BEZIER_CONTROL_X,
    BEZIER_CURVE_SAMPLES,
    BEZIER_JITTER,
)
from .helpers import buffer_size, composite_source_over, logical_grid, solid_fill

Point = Tuple[float, float]


def cubic_bezier(p0: Point, p1: Point, p2: Point, p3: Point, samples: int = BEZIER_CURVE_SAMPLES) -> NDArray:
    """Points along a cubic Bezier curve, shape ``(samples, 2)``."""
    t = np.linspace(0.0, 1.0, samples)[:, None]
    mt = 1.0 - t
    pts = np.array([p0, p1, p2, p3], dtype=np.float64)
    return (
        mt ** 3 * pts[0]
        + 3.0 * mt ** 2 * t * pts[1]
        + 3.0 * mt * t ** 2 * pts[2]
        + t ** 3 * pts[3]
    )


def band_outline(
    y_start: float,
    width: float,
    height: float,
    rng: np.random.Generator,
) -> NDArray:
    """Closed outline of one band in logical pixels."""
    cp1_y = y_start - BEZIER_JITTER + rng.random() * 2.0 * BEZIER_JITTER
    cp2_y = y_start + BEZIER_JITTER - rng.random() * 2.0 * BEZIER_JITTER
    curve = cubic_bezier(
        (0.0, y_start),
        (width * BEZIER_CONTROL_X[0], cp1_y),
        (width * BEZIER_CONTROL_X[1], cp2_y),
        (width, y_start),
    )
    return np.vstack([curve, [[width, height], [0.0, height]]])


def band_mask(outline: NDArray, scale: float, buffer_w: int, buffer_h: int) -> NDArray:
    """Boolean coverage of a polygon on the buffer grid."""
    mask = Image.new("L", (buffer_w, buffer_h), 0)
    points: List[Point] = [(float(x) * scale, float(y) * scale) for x, y in outline]
    ImageDraw.Draw(mask).polygon(points, fill=255)
    return np.asarray(mask, dtype=np.uint8) > 0


def render_bezier(
    config: GradientConfig,
    width: float,
    height: float,
    scale: float = 1.0,
    rng: Optional[np.random.Generator] = None,
) -> NDArray:
    rng = rng if rng is not None else np.random.default_rng()
    buffer_w, buffer_h = buffer_size(width, height, scale)
    _, ys = logical_grid(width, height, scale)

    ranked = config.sorted_stops()
    colors = [np.array(hex_to_rgb(s.color), dtype=np.float64) for s in ranked]
    total = len(ranked)
    canvas = solid_fill(colors[0], buffer_w, buffer_h)

    # Vertical fill runs from the top edge (0) to the bottom edge (1)
    u = np.clip(ys / height, 0.0, 1.0)[..., None]
    for i in range(1, total):
        top = colors[i]
        bottom = colors[min(i + 1, total - 1)]
        fill = top * (1.0 - u) + bottom * u

        outline = band_outline(i / total * height, width, height, rng)
        coverage = band_mask(outline, scale, buffer_w, buffer_h) * BEZIER_BAND_ALPHA
        canvas = composite_source_over(canvas, fill, coverage)
    return canvas
