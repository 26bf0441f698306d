# No dependencies
from enum import Enum
from typing import Union


class GradientType(str, Enum):
    LINEAR = "linear"
    RADIAL = "radial"
    CONIC = "conic"
    MESH = "mesh"
    GAUSSIAN = "gaussian"
    BEZIER = "bezier"
    NOISE = "noise"


GradientTypeInput = Union[GradientType, str]

TIMELINE_TYPES = frozenset({
    GradientType.LINEAR,
    GradientType.RADIAL,
    GradientType.CONIC,
    GradientType.BEZIER,
    GradientType.NOISE,
})

SPATIAL_TYPES = frozenset({
    GradientType.MESH,
    GradientType.GAUSSIAN,
})

# Types with a declarative CSS equivalent
STYLE_EXPORT_TYPES = frozenset({
    GradientType.LINEAR,
    GradientType.RADIAL,
    GradientType.CONIC,
})


def as_gradient_type(value: GradientTypeInput) -> GradientType:
    """Coerce a host string (or member) into a GradientType."""
    if isinstance(value, GradientType):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Gradient type must be a string, got {type(value).__name__}")
    try:
        return GradientType(value.lower())
    except ValueError:
        raise ValueError(f"Unknown gradient type: {value!r}") from None


def is_timeline_type(value: GradientTypeInput) -> bool:
    """True for types that rank stops by their 1-D ``position``."""
    return as_gradient_type(value) in TIMELINE_TYPES


def is_spatial_type(value: GradientTypeInput) -> bool:
    """True for types that place stops at draggable 2-D anchors."""
    return as_gradient_type(value) in SPATIAL_TYPES
