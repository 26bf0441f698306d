"""Tunable constants and the session-start configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import GradientConfig

# Configuration invariants
MIN_STOPS = 2
POSITION_MIN = 0.0
POSITION_MAX = 100.0
ANGLE_MIN = 0
ANGLE_MAX = 360
ADD_STOP_STEP = 10
DEFAULT_NEW_STOP_COLOR = "#ffffff"
STOP_ID_LENGTH = 9

# Timeline algorithms
RADIAL_RADIUS_DIVISOR = 1.5

# Spatial algorithms (fractions of the canvas width)
MESH_RADIUS_FACTOR = 0.8
GAUSSIAN_RADIUS_FACTOR = 0.6
GAUSSIAN_RING_FACTOR = 0.2
MESH_COLUMN_X = (0.2, 0.8)
MESH_OVERFLOW_X = 0.5
MESH_ROW_START = 0.2
MESH_ROW_STEP = 0.4
MESH_GRID_COLUMNS = 2
MESH_GRID_CAPACITY = 4

# Bezier bands
BEZIER_JITTER = 200.0
BEZIER_CONTROL_X = (0.33, 0.66)
BEZIER_BAND_ALPHA = 0.8
BEZIER_CURVE_SAMPLES = 96

# Grain and procedural noise (8-bit channel units)
GRAIN_INTENSITY = 40.0
NOISE_FIELD_AMPLITUDE = 20.0
NOISE_FIELD_SCALE = 0.01

# Interaction
HIT_RADIUS = 30.0


def default_config() -> "GradientConfig":
    """Configuration a new editing session starts from."""
    from .config import ColorStop, GradientConfig
    from .types.gradient_type import GradientType

    return GradientConfig(
        type=GradientType.LINEAR,
        angle=135,
        noise=0.1,
        stops=(
            ColorStop(id="1", color="#111111", position=0),
            ColorStop(id="2", color="#FF5A19", position=100),
        ),
    )
