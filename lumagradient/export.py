"""
Export helpers.

Linear, radial and conic gradients have a direct stylesheet equivalent. The
other algorithms do not, and ``to_style_string`` returns ``None`` for them so
the host can fall back to exporting a rendered image (``to_png_bytes``).
"""

from __future__ import annotations

import io
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from .config import ColorStop, GradientConfig
from .types.gradient_type import (
    STYLE_EXPORT_TYPES,
    GradientType,
    GradientTypeInput,
    as_gradient_type,
)


def supports_style_export(gradient_type: GradientTypeInput) -> bool:
    return as_gradient_type(gradient_type) in STYLE_EXPORT_TYPES


def format_number(value: float) -> str:
    """``50`` rather than ``50.0``; fractional values keep their digits."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_stop(stop: ColorStop) -> str:
    return f"{stop.color} {format_number(stop.position)}%"


def to_style_string(config: GradientConfig) -> Optional[str]:
    """
    CSS gradient function for ``config``.

    Returns:
        e.g. ``linear-gradient(135deg, #111111 0%, #FF5A19 100%)``, or ``None``
        when the type has no stylesheet equivalent.
    """
    segments = ", ".join(format_stop(s) for s in config.sorted_stops())
    angle = format_number(config.angle)

    if config.type is GradientType.LINEAR:
        return f"linear-gradient({angle}deg, {segments})"
    if config.type is GradientType.RADIAL:
        return f"radial-gradient(circle, {segments})"
    if config.type is GradientType.CONIC:
        return f"conic-gradient(from {angle}deg, {segments})"
    return None


def css_declaration(config: GradientConfig) -> Optional[str]:
    """``background: <gradient>;`` ready to paste into a stylesheet."""
    style = to_style_string(config)
    if style is None:
        return None
    return f"background: {style};"


def to_png_bytes(buffer: NDArray) -> bytes:
    """Encode an RGBA buffer from ``render`` as PNG."""
    from PIL import Image

    image = Image.fromarray(np.ascontiguousarray(buffer, dtype=np.uint8))
    out = io.BytesIO()
    image.save(out, format="PNG")
    return out.getvalue()
