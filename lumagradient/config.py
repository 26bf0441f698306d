"""
Gradient Configuration
======================

Immutable value types describing one gradient:

- ``ColorStop``: a color with a 1-D timeline ``position`` in [0, 100] and an
  optional explicit 2-D anchor ``(x, y)`` in [0, 1] x [0, 1].
- ``GradientConfig``: algorithm, angle, grain amount and the ordered stops.

Stops keep insertion order. Algorithms that need them ranked by position sort a
copy (see ``sorted_stops``); the stored order is never changed. Range clamping
happens in :mod:`lumagradient.editing`, not here.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from .colors.rgb import hex_to_rgb
from .defaults import MIN_STOPS
from .types.gradient_type import GradientType, as_gradient_type


@dataclass(frozen=True)
class ColorStop:
    id: str
    color: str
    position: float
    x: Optional[float] = None
    y: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise ValueError("ColorStop id must be a non-empty string")
        # Raises ValueError for anything the renderer could not draw
        hex_to_rgb(self.color)

    @property
    def has_anchor(self) -> bool:
        """True when both explicit anchor coordinates are set."""
        return self.x is not None and self.y is not None

    def with_anchor(self, x: Optional[float], y: Optional[float]) -> "ColorStop":
        return replace(self, x=x, y=y)


@dataclass(frozen=True)
class GradientConfig:
    type: GradientType
    angle: int
    stops: Tuple[ColorStop, ...]
    noise: float = 0.0

    def __post_init__(self) -> None:
        # frozen: go through object.__setattr__ for normalization
        object.__setattr__(self, "type", as_gradient_type(self.type))
        object.__setattr__(self, "stops", tuple(self.stops))

        if len(self.stops) < MIN_STOPS:
            raise ValueError(
                f"GradientConfig requires at least {MIN_STOPS} stops, got {len(self.stops)}"
            )
        ids = [s.id for s in self.stops]
        if len(set(ids)) != len(ids):
            raise ValueError("ColorStop ids must be unique within a configuration")

    def sorted_stops(self) -> Tuple[ColorStop, ...]:
        """Stops ranked by position; ties keep insertion order."""
        return tuple(sorted(self.stops, key=lambda s: s.position))

    def stop_index(self, stop_id: str) -> int:
        """Index of the stop with ``stop_id`` in insertion order, or -1."""
        for i, stop in enumerate(self.stops):
            if stop.id == stop_id:
                return i
        return -1

    def get_stop(self, stop_id: str) -> Optional[ColorStop]:
        idx = self.stop_index(stop_id)
        return self.stops[idx] if idx >= 0 else None

    def replace_stop(self, stop: ColorStop) -> "GradientConfig":
        """New configuration with the stop of the same id swapped for ``stop``."""
        return replace(
            self,
            stops=tuple(stop if s.id == stop.id else s for s in self.stops),
        )

    def with_stops(self, stops: Iterable[ColorStop]) -> "GradientConfig":
        return replace(self, stops=tuple(stops))
