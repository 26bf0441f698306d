from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy.typing import NDArray
from boundednumbers import BoundType, bound_type_to_np_function

_clamp_array = bound_type_to_np_function[BoundType.CLAMP]


def buffer_size(width: float, height: float, scale: float = 1.0) -> Tuple[int, int]:
    """Buffer dimensions ``(buffer_width, buffer_height)`` for a logical size."""
    return int(round(width * scale)), int(round(height * scale))


def logical_grid(width: float, height: float, scale: float = 1.0) -> Tuple[NDArray, NDArray]:
    """
    Logical coordinates of every buffer pixel center.

    Returns:
        ``(xs, ys)`` arrays of shape ``(buffer_height, buffer_width)``.
    """
    buffer_w, buffer_h = buffer_size(width, height, scale)
    indices_matrix = np.indices((buffer_h, buffer_w), dtype=np.float64)
    ys = (indices_matrix[0] + 0.5) / scale
    xs = (indices_matrix[1] + 0.5) / scale
    return xs, ys


def pixel_grid(buffer_w: int, buffer_h: int) -> Tuple[NDArray, NDArray]:
    """Integer buffer coordinates ``(xs, ys)`` as float arrays."""
    indices_matrix = np.indices((buffer_h, buffer_w), dtype=np.float64)
    return indices_matrix[1], indices_matrix[0]


def solid_fill(color: NDArray, buffer_w: int, buffer_h: int) -> NDArray:
    """Float RGB canvas filled with one color."""
    return np.tile(np.asarray(color, dtype=np.float64), (buffer_h, buffer_w, 1))


def clamp_channels(rgb: NDArray) -> NDArray:
    return _clamp_array(rgb, 0.0, 255.0)


def quantize(rgb: NDArray) -> NDArray:
    """Round float RGB to 8-bit the way a canvas stores pixels."""
    return np.rint(clamp_channels(rgb)).astype(np.uint8)


def composite_source_over(dst: NDArray, src: NDArray, alpha: NDArray) -> NDArray:
    """
    Normal blending of ``src`` over an opaque ``dst``.

    Args:
        dst: Float RGB ``(H, W, 3)`` in [0, 255]
        src: Float RGB broadcastable to ``dst``
        alpha: Source coverage ``(H, W)`` in [0, 1]
    """
    a = alpha[..., None]
    return src * a + dst * (1.0 - a)


def composite_screen(dst: NDArray, src: NDArray, alpha: NDArray) -> NDArray:
    """Screen blending: ``1 - (1 - a)(1 - b)`` per channel, weighted by ``alpha``."""
    d = dst / 255.0
    s = np.asarray(src, dtype=np.float64) / 255.0
    blended = 1.0 - (1.0 - d) * (1.0 - s)
    a = alpha[..., None]
    return (d * (1.0 - a) + blended * a) * 255.0


def to_rgba(rgb: NDArray) -> NDArray:
    """Attach an opaque alpha channel to an 8-bit RGB buffer."""
    h, w = rgb.shape[:2]
    out = np.empty((h, w, 4), dtype=np.uint8)
    out[..., :3] = rgb
    out[..., 3] = 255
    return out
