"""
Gradient Renderer
=================

``render`` turns a ``GradientConfig`` into an RGBA pixel buffer:

1. Size the buffer as the logical size times the device pixel ratio.
2. Run the algorithm registered for ``config.type`` (geometry in logical units).
3. Quantize to 8 bits.
4. Apply grain when ``config.noise > 0`` (the noise algorithm carries its own).

Every call starts from a blank buffer and keeps nothing between calls. The only
input that is not part of the configuration is the random source, which tests
can pin by passing a seeded ``numpy.random.Generator``.

Example
-------
>>> from lumagradient import default_config, render
>>> buf = render(default_config(), 320, 200, scale=2.0)
>>> buf.shape
(400, 640, 4)
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

import numpy as np
from numpy.typing import NDArray

from ..config import GradientConfig
from ..types.gradient_type import GradientType
from .bezier import render_bezier
from .helpers import buffer_size, quantize, to_rgba
from .noise import apply_grain, render_noise
from .spatial import render_gaussian, render_mesh
from .timeline import render_conic, render_linear, render_radial

AlgorithmRenderer = Callable[
    [GradientConfig, float, float, float, Optional[np.random.Generator]],
    NDArray,
]

ALGORITHMS: Dict[GradientType, AlgorithmRenderer] = {
    GradientType.LINEAR: render_linear,
    GradientType.RADIAL: render_radial,
    GradientType.CONIC: render_conic,
    GradientType.MESH: render_mesh,
    GradientType.GAUSSIAN: render_gaussian,
    GradientType.BEZIER: render_bezier,
    GradientType.NOISE: render_noise,
}


def render(
    config: GradientConfig,
    width: float,
    height: float,
    scale: float = 1.0,
    rng: Optional[np.random.Generator] = None,
) -> Optional[NDArray]:
    """
    Rasterize a configuration.

    Args:
        config: Gradient to draw
        width, height: Logical canvas size
        scale: Device pixel ratio
        rng: Random source for grain, bezier jitter and noise; a fresh
             unseeded generator is used when omitted

    Returns:
        ``uint8`` array of shape ``(round(height*scale), round(width*scale), 4)``,
        or ``None`` when the target is empty.
    """
    if width <= 0 or height <= 0 or scale <= 0:
        return None
    buffer_w, buffer_h = buffer_size(width, height, scale)
    if buffer_w == 0 or buffer_h == 0:
        return None

    rng = rng if rng is not None else np.random.default_rng()
    algorithm = ALGORITHMS[config.type]
    rgb = quantize(algorithm(config, width, height, scale, rng))

    if config.noise > 0 and config.type is not GradientType.NOISE:
        rgb = apply_grain(rgb, config.noise, rng)
    return to_rgba(rgb)


def render_image(
    config: GradientConfig,
    width: float,
    height: float,
    scale: float = 1.0,
    rng: Optional[np.random.Generator] = None,
):
    """Same as ``render`` but returns a Pillow RGBA image (or ``None``)."""
    from PIL import Image

    buffer = render(config, width, height, scale, rng)
    if buffer is None:
        return None
    return Image.fromarray(buffer)
