"""
Configuration mutators.

Every control on the editing surface maps to one function here. Each takes the
current ``GradientConfig`` and returns a new one; inputs are never modified.
This is the only place where ``position``, ``noise``, ``angle`` and anchor
coordinates are brought back into range, so everything downstream can assume
a valid configuration.
"""

from __future__ import annotations

import math
import secrets
import string
import warnings
from dataclasses import replace
from typing import Optional

from boundednumbers.functions import clamp, clamp01

from .colors.rgb import hex_to_rgb
from .config import ColorStop, GradientConfig
from .defaults import (
    ADD_STOP_STEP,
    ANGLE_MAX,
    ANGLE_MIN,
    DEFAULT_NEW_STOP_COLOR,
    MIN_STOPS,
    POSITION_MAX,
    POSITION_MIN,
    STOP_ID_LENGTH,
)
from .types.gradient_type import GradientTypeInput, as_gradient_type

_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_stop_id() -> str:
    """Random 9-character lowercase alphanumeric id."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(STOP_ID_LENGTH))


def _unique_stop_id(config: GradientConfig) -> str:
    taken = {s.id for s in config.stops}
    stop_id = new_stop_id()
    while stop_id in taken:
        stop_id = new_stop_id()
    return stop_id


def _lookup(config: GradientConfig, stop_id: str) -> Optional[ColorStop]:
    stop = config.get_stop(stop_id)
    if stop is None:
        warnings.warn(f"No color stop with id {stop_id!r}; configuration unchanged", UserWarning, stacklevel=3)
    return stop


def _finite(value: float, name: str) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    return value


def clamp_position(position: float) -> float:
    return clamp(_finite(position, "position"), POSITION_MIN, POSITION_MAX)


def clamp_noise(noise: float) -> float:
    return clamp01(_finite(noise, "noise"))


def clamp_angle(angle: float) -> int:
    return int(clamp(int(round(_finite(angle, "angle"))), ANGLE_MIN, ANGLE_MAX))


def set_type(config: GradientConfig, gradient_type: GradientTypeInput) -> GradientConfig:
    return replace(config, type=as_gradient_type(gradient_type))


def set_angle(config: GradientConfig, angle: float) -> GradientConfig:
    """Set the angle, rounded to whole degrees and clamped to [0, 360]. NaN and inf raise ``ValueError``."""
    return replace(config, angle=clamp_angle(angle))


def set_noise(config: GradientConfig, noise: float) -> GradientConfig:
    """Set the grain amount, clamped to [0, 1]. NaN and inf raise ``ValueError``."""
    return replace(config, noise=clamp_noise(noise))


def set_stop_color(config: GradientConfig, stop_id: str, color: str) -> GradientConfig:
    """
    Replace the color of one stop.

    Raises:
        ValueError: If ``color`` is not a parseable CSS color.
    """
    hex_to_rgb(color)
    stop = _lookup(config, stop_id)
    if stop is None:
        return config
    return config.replace_stop(replace(stop, color=color.strip()))


def set_stop_position(config: GradientConfig, stop_id: str, position: float) -> GradientConfig:
    stop = _lookup(config, stop_id)
    if stop is None:
        return config
    return config.replace_stop(replace(stop, position=clamp_position(position)))


def add_stop(config: GradientConfig, color: str = DEFAULT_NEW_STOP_COLOR) -> GradientConfig:
    """
    Append a stop ten units after the most recently added one.

    The new position is clamped, so adding after a stop at 95 lands on 100.
    """
    last = config.stops[-1]
    stop = ColorStop(
        id=_unique_stop_id(config),
        color=color,
        position=clamp_position(last.position + ADD_STOP_STEP),
    )
    return config.with_stops(config.stops + (stop,))


def remove_stop(config: GradientConfig, stop_id: str) -> GradientConfig:
    """Remove a stop; rejected (returns ``config``) if fewer than two would remain."""
    if len(config.stops) <= MIN_STOPS:
        return config
    if _lookup(config, stop_id) is None:
        return config
    return config.with_stops(s for s in config.stops if s.id != stop_id)


def move_anchor(config: GradientConfig, stop_id: str, x: float, y: float) -> GradientConfig:
    """Pin a stop's 2-D anchor at normalized ``(x, y)``, each clamped to [0, 1]."""
    stop = _lookup(config, stop_id)
    if stop is None:
        return config
    return config.replace_stop(stop.with_anchor(clamp01(_finite(x, "x")), clamp01(_finite(y, "y"))))


def clear_anchor(config: GradientConfig, stop_id: str) -> GradientConfig:
    """Drop a stop's explicit anchor so it returns to its default layout slot."""
    stop = _lookup(config, stop_id)
    if stop is None:
        return config
    return config.replace_stop(stop.with_anchor(None, None))
