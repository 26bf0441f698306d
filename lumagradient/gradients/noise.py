"""
Procedural noise gradient and the grain post-process.

Both add a per-pixel offset to R, G and B together and clamp to [0, 255]; alpha
is untouched. The offset for the noise gradient mixes a fixed low-frequency
interference field with uniform randomness. Grain is uniform randomness only,
scaled by the configuration's ``noise`` amount.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from ..config import GradientConfig
from ..defaults import GRAIN_INTENSITY, NOISE_FIELD_AMPLITUDE, NOISE_FIELD_SCALE
from .helpers import buffer_size, clamp_channels, logical_grid, pixel_grid, quantize
from .interpolation import interpolate_stops, timeline_arrays


def noise_field(buffer_w: int, buffer_h: int) -> NDArray:
    """
    Deterministic interference pattern in [-1, 1] on integer pixel coordinates.

    ``sin(10 nx + 5 ny) * cos(5 nx - 10 ny)`` with ``nx, ny = 0.01 * (x, y)``.
    """
    xs, ys = pixel_grid(buffer_w, buffer_h)
    nx = xs * NOISE_FIELD_SCALE
    ny = ys * NOISE_FIELD_SCALE
    return np.sin(nx * 10.0 + ny * 5.0) * np.cos(nx * 5.0 - ny * 10.0)


def diagonal_fraction(xs: NDArray, ys: NDArray, width: float, height: float) -> NDArray:
    """Projection onto the top-left to bottom-right diagonal."""
    return (xs * width + ys * height) / (width * width + height * height)


def jitter(rgb: NDArray, offsets: NDArray) -> NDArray:
    """Add one offset per pixel to every color channel and clamp."""
    return clamp_channels(rgb.astype(np.float64) + offsets[..., None])


def render_noise(
    config: GradientConfig,
    width: float,
    height: float,
    scale: float = 1.0,
    rng: Optional[np.random.Generator] = None,
) -> NDArray:
    rng = rng if rng is not None else np.random.default_rng()
    buffer_w, buffer_h = buffer_size(width, height, scale)
    xs, ys = logical_grid(width, height, scale)

    offsets, colors = timeline_arrays(config.stops)
    base = quantize(interpolate_stops(diagonal_fraction(xs, ys, width, height), offsets, colors))

    perturbation = (
        (rng.random((buffer_h, buffer_w)) - 0.5) * GRAIN_INTENSITY
        + noise_field(buffer_w, buffer_h) * NOISE_FIELD_AMPLITUDE
    )
    return jitter(base, perturbation)


def apply_grain(rgb: NDArray, amount: float, rng: Optional[np.random.Generator] = None) -> NDArray:
    """
    Film grain over an 8-bit RGB buffer.

    Args:
        rgb: ``(H, W, 3)`` uint8 buffer
        amount: Grain amount in [0, 1]; offsets fall in ``+/- amount * 40 / 2``
        rng: Random source

    Returns:
        New uint8 buffer; ``rgb`` itself is left unchanged.
    """
    if amount <= 0:
        return rgb.copy()
    rng = rng if rng is not None else np.random.default_rng()
    h, w = rgb.shape[:2]
    offsets = (rng.random((h, w)) - 0.5) * (amount * GRAIN_INTENSITY)
    return quantize(jitter(rgb, offsets))
