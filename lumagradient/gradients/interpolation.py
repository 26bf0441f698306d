"""
Piecewise-linear color interpolation along a gradient timeline.

Offsets are fractions in [0, 1] sorted ascending. A sample before the first
offset takes the first color, after the last offset the last color. Where two
stops share an offset the transition is a hard edge and the later stop wins at
the shared offset itself, matching how canvas color stops behave.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from ..colors.rgb import stops_to_arrays
from ..config import ColorStop


def interpolate_stops(t: NDArray, offsets: NDArray, colors: NDArray) -> NDArray:
    """
    Sample the gradient at fractions ``t``.

    Args:
        t: Array of fractions, any shape
        offsets: Stop offsets, shape ``(n,)``, ascending
        colors: Stop colors, shape ``(n, 3)``, float RGB in [0, 255]

    Returns:
        Float RGB with shape ``t.shape + (3,)``
    """
    t = np.asarray(t, dtype=np.float64)
    offsets = np.asarray(offsets, dtype=np.float64)
    colors = np.asarray(colors, dtype=np.float64)

    if len(offsets) == 1:
        return np.broadcast_to(colors[0], t.shape + (3,)).copy()

    idx = np.searchsorted(offsets, t, side="right") - 1
    idx = np.clip(idx, 0, len(offsets) - 2)

    t0 = offsets[idx]
    t1 = offsets[idx + 1]
    delta = t1 - t0
    safe_delta = np.where(delta > 0, delta, 1.0)
    u = np.where(delta > 0, (t - t0) / safe_delta, (t >= t1).astype(np.float64))
    u = np.clip(u, 0.0, 1.0)[..., None]

    return colors[idx] * (1.0 - u) + colors[idx + 1] * u


def timeline_arrays(stops: Sequence[ColorStop]) -> Tuple[NDArray, NDArray]:
    """``(offsets, colors)`` for stops ranked by position (stable)."""
    ranked = sorted(stops, key=lambda s: s.position)
    return stops_to_arrays(ranked)
