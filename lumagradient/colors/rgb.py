"""
RGB color helpers.

Stops carry their color as a CSS string (usually ``#rrggbb``). Parsing goes
through Pillow's ``ImageColor`` so anything a stylesheet would accept for a
solid color (``#abc``, ``#aabbcc``, ``rgb(1, 2, 3)``, ``tomato``) works here too.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Tuple, TYPE_CHECKING

import numpy as np
from PIL import ImageColor

from ..types.color_types import ColorInput, RGBTuple, UnitRGB

if TYPE_CHECKING:
    from ..config import ColorStop


@lru_cache(maxsize=256)
def _parse_css_color(value: str) -> RGBTuple:
    try:
        parsed = ImageColor.getrgb(value)
    except ValueError:
        raise ValueError(f"Invalid color: {value!r}") from None
    r, g, b = parsed[:3]
    return int(r), int(g), int(b)


def hex_to_rgb(color: ColorInput) -> RGBTuple:
    """
    Convert a color to an integer RGB tuple in [0, 255].

    Args:
        color: CSS color string or an ``(r, g, b)`` tuple

    Returns:
        ``(r, g, b)`` integers; an alpha component, if given, is dropped.

    Raises:
        ValueError: If the string is not a color Pillow can parse.
    """
    if isinstance(color, tuple):
        if len(color) != 3:
            raise ValueError(f"RGB tuple must have 3 channels, got {len(color)}")
        return tuple(max(0, min(int(round(c)), 255)) for c in color)  # type: ignore[return-value]
    if not isinstance(color, str):
        raise TypeError(f"Unsupported color input type: {type(color).__name__}")
    return _parse_css_color(color.strip())


def hex_to_unit_rgb(color: ColorInput) -> UnitRGB:
    r, g, b = hex_to_rgb(color)
    return r / 255.0, g / 255.0, b / 255.0


def rgb_to_hex(rgb: Tuple[float, float, float]) -> str:
    """Format an integer RGB triple as lowercase ``#rrggbb``."""
    r, g, b = (max(0, min(int(round(c)), 255)) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_hex(color: ColorInput) -> str:
    return rgb_to_hex(hex_to_rgb(color))


def is_valid_color(color: object) -> bool:
    if not isinstance(color, (str, tuple)):
        return False
    try:
        hex_to_rgb(color)  # type: ignore[arg-type]
    except (ValueError, TypeError):
        return False
    return True


def stops_to_arrays(stops: Iterable["ColorStop"]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split stops into interpolation arrays.

    Returns:
        ``(offsets, colors)`` where offsets are ``position / 100`` with shape
        ``(n,)`` and colors are float RGB in [0, 255] with shape ``(n, 3)``.
        Order is preserved; callers sort beforehand if they need to.
    """
    stops = list(stops)
    offsets = np.array([s.position / 100.0 for s in stops], dtype=np.float64)
    colors = np.array([hex_to_rgb(s.color) for s in stops], dtype=np.float64).reshape(-1, 3)
    return offsets, colors
