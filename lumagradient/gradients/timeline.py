"""
Timeline Gradients
==================

Linear, radial and conic gradients. Each one maps every pixel to a fraction
along a single parametric axis and samples the position-sorted stops there.

- linear: projection onto the axis given by ``angle`` (0 deg points up, angles
  run clockwise). The axis spans the canvas center +/- the unit direction times
  the larger canvas dimension, so any aspect ratio is fully covered.
- radial: distance from the canvas center over ``max(width, height) / 1.5``.
- conic: clockwise sweep around the center starting at ``angle - 90`` degrees.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from ..config import GradientConfig
from ..defaults import RADIAL_RADIUS_DIVISOR
from .helpers import logical_grid
from .interpolation import interpolate_stops, timeline_arrays


def axis_radians(angle: float) -> float:
    """Canvas-space direction of a CSS-style angle (0 = up, clockwise)."""
    return math.radians(angle - 90.0)


def linear_fraction(xs: NDArray, ys: NDArray, width: float, height: float, angle: float) -> NDArray:
    """
    Fraction along the linear axis for every sample point.

    The endpoints sit at ``max(width, height)`` from the center, outside the
    canvas, so the visible span is only the middle half of the ramp. A 0 deg
    black-to-white ramp on a 100x100 canvas runs from about 64 on the top row
    to about 191 on the bottom row. That range is intended; do not stretch the
    axis to the canvas edges.
    """
    rad = axis_radians(angle)
    length = max(width, height)
    cx, cy = width / 2.0, height / 2.0
    dx, dy = math.cos(rad) * length, math.sin(rad) * length

    # Fraction 0 sits on the side the axis points to
    start_x, start_y = cx + dx, cy + dy
    end_x, end_y = cx - dx, cy - dy
    vx, vy = end_x - start_x, end_y - start_y
    return ((xs - start_x) * vx + (ys - start_y) * vy) / (vx * vx + vy * vy)


def radial_fraction(xs: NDArray, ys: NDArray, width: float, height: float) -> NDArray:
    radius = max(width, height) / RADIAL_RADIUS_DIVISOR
    distances = np.hypot(xs - width / 2.0, ys - height / 2.0)
    return distances / radius


def conic_fraction(xs: NDArray, ys: NDArray, width: float, height: float, angle: float) -> NDArray:
    theta = np.arctan2(ys - height / 2.0, xs - width / 2.0)
    start = axis_radians(angle)
    return np.mod(theta - start, 2.0 * math.pi) / (2.0 * math.pi)


def _render_timeline(config: GradientConfig, fraction: NDArray) -> NDArray:
    offsets, colors = timeline_arrays(config.stops)
    return interpolate_stops(fraction, offsets, colors)


def render_linear(
    config: GradientConfig,
    width: float,
    height: float,
    scale: float = 1.0,
    rng: Optional[np.random.Generator] = None,
) -> NDArray:
    xs, ys = logical_grid(width, height, scale)
    return _render_timeline(config, linear_fraction(xs, ys, width, height, config.angle))


def render_radial(
    config: GradientConfig,
    width: float,
    height: float,
    scale: float = 1.0,
    rng: Optional[np.random.Generator] = None,
) -> NDArray:
    xs, ys = logical_grid(width, height, scale)
    return _render_timeline(config, radial_fraction(xs, ys, width, height))


def render_conic(
    config: GradientConfig,
    width: float,
    height: float,
    scale: float = 1.0,
    rng: Optional[np.random.Generator] = None,
) -> NDArray:
    xs, ys = logical_grid(width, height, scale)
    return _render_timeline(config, conic_fraction(xs, ys, width, height, config.angle))
