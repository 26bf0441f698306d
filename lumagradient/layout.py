"""
Anchor layout for the spatial gradient types.

A mesh or gaussian stop is drawn at its explicit ``(x, y)`` when it has one and
at a deterministic default slot otherwise. The renderer and the interaction
controller both go through ``resolve_anchor`` with the stop's index in
insertion order, so the anchor a user grabs is always the one that was drawn.
Resolved positions are never written back onto the stops.
"""

from __future__ import annotations

import math
from typing import List, Tuple

from boundednumbers.functions import clamp01

from .config import ColorStop, GradientConfig
from .defaults import (
    GAUSSIAN_RING_FACTOR,
    MESH_COLUMN_X,
    MESH_GRID_CAPACITY,
    MESH_GRID_COLUMNS,
    MESH_OVERFLOW_X,
    MESH_ROW_START,
    MESH_ROW_STEP,
)
from .types.gradient_type import GradientType, GradientTypeInput, as_gradient_type

Point = Tuple[float, float]


def mesh_default_anchor(index: int, width: float, height: float) -> Point:
    """
    Two-column grid slot for the ``index``-th stop.

    Stops past the first two rows collapse onto the horizontal center.
    """
    row, col = divmod(index, MESH_GRID_COLUMNS)
    x = MESH_COLUMN_X[col] * width
    if index >= MESH_GRID_CAPACITY:
        x = MESH_OVERFLOW_X * width
    y = (MESH_ROW_START + row * MESH_ROW_STEP) * height
    return x, y


def gaussian_default_anchor(index: int, total: int, width: float, height: float) -> Point:
    """Evenly spaced slot on a ring of radius ``0.2 * width`` around the center."""
    angle = (index / total) * 2.0 * math.pi if total > 0 else 0.0
    dist = width * GAUSSIAN_RING_FACTOR
    return width / 2.0 + math.cos(angle) * dist, height / 2.0 + math.sin(angle) * dist


def resolve_anchor(
    stop: ColorStop,
    index: int,
    total: int,
    gradient_type: GradientTypeInput,
    width: float,
    height: float,
) -> Point:
    """
    Pixel position of a stop's anchor on a ``width`` x ``height`` canvas.

    Args:
        stop: The color stop
        index: Index of the stop in insertion order
        total: Number of stops in the configuration
        gradient_type: Algorithm choosing the default layout
        width, height: Canvas size in logical pixels

    Returns:
        ``(x, y)`` in logical pixels. Explicit coordinates always win.
    """
    if stop.has_anchor:
        return stop.x * width, stop.y * height  # type: ignore[operator]

    gradient_type = as_gradient_type(gradient_type)
    if gradient_type is GradientType.MESH:
        return mesh_default_anchor(index, width, height)
    # Gaussian ring is also the layout for non-spatial types, which never draw anchors
    return gaussian_default_anchor(index, total, width, height)


def resolve_anchors(config: GradientConfig, width: float, height: float) -> List[Point]:
    """Anchors of every stop of ``config``, in insertion order."""
    total = len(config.stops)
    return [
        resolve_anchor(stop, i, total, config.type, width, height)
        for i, stop in enumerate(config.stops)
    ]


def normalize_point(x: float, y: float, width: float, height: float) -> Point:
    """Map canvas pixels to ``[0, 1] x [0, 1]``, clamping points off the canvas."""
    nx = x / width if width > 0 else 0.0
    ny = y / height if height > 0 else 0.0
    return clamp01(nx), clamp01(ny)
