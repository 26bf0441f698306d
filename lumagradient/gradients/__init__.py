from .renderer import ALGORITHMS, render, render_image
from .interpolation import interpolate_stops
from .noise import apply_grain, noise_field

__all__ = [
    "ALGORITHMS",
    "render",
    "render_image",
    "interpolate_stops",
    "apply_grain",
    "noise_field",
]
