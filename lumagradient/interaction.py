"""
Anchor Drag Controller
======================

Finite-state machine that lets a pointer pick up and move the anchors of a
mesh or gaussian gradient.

States
------
- IDLE: nothing under the pointer
- HOVERING: pointer within the hit radius of an anchor (highlight only)
- DRAGGING: an anchor is held; every move pins it at the pointer

Events are plain method calls carrying canvas-local logical coordinates and the
canvas size, so the protocol runs without any real pointer device. The
controller never keeps a copy of the stops: each event receives the current
configuration, and a drag move returns the replacement configuration.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Optional

from .config import GradientConfig
from .defaults import HIT_RADIUS
from .editing import move_anchor
from .layout import normalize_point, resolve_anchor
from .types.gradient_type import is_spatial_type

ChangeCallback = Callable[[GradientConfig], None]


class InteractionState(str, Enum):
    IDLE = "idle"
    HOVERING = "hovering"
    DRAGGING = "dragging"


class AnchorDragController:
    """
    Hit-testing and drag handling for spatial gradient anchors.

    Usage:
        controller = AnchorDragController(on_change=host.set_config)
        controller.pointer_down(config, x, y, width, height)
        config = controller.pointer_move(config, x, y, width, height) or config
        controller.pointer_up()

    Attributes:
        dragging_id: Id of the stop being dragged, if any
        hovered_id: Id of the stop under the pointer, if any
        hit_radius: Pick distance in logical pixels
    """

    def __init__(
        self,
        on_change: Optional[ChangeCallback] = None,
        hit_radius: float = HIT_RADIUS,
    ) -> None:
        self.on_change = on_change
        self.hit_radius = hit_radius
        self.dragging_id: Optional[str] = None
        self.hovered_id: Optional[str] = None

    @property
    def state(self) -> InteractionState:
        if self.dragging_id is not None:
            return InteractionState.DRAGGING
        if self.hovered_id is not None:
            return InteractionState.HOVERING
        return InteractionState.IDLE

    @property
    def is_dragging(self) -> bool:
        return self.dragging_id is not None

    def hit_test(
        self,
        config: GradientConfig,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> Optional[str]:
        """
        Id of the topmost anchor within ``hit_radius`` of ``(x, y)``.

        Anchors are checked from last drawn to first, so overlapping anchors
        resolve to the one on top. Always ``None`` for non-spatial types.
        """
        if not is_spatial_type(config.type):
            return None
        total = len(config.stops)
        for index in range(total - 1, -1, -1):
            stop = config.stops[index]
            ax, ay = resolve_anchor(stop, index, total, config.type, width, height)
            if math.hypot(x - ax, y - ay) <= self.hit_radius:
                return stop.id
        return None

    def pointer_down(
        self,
        config: GradientConfig,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> Optional[str]:
        """Start dragging the anchor under the pointer; returns its id."""
        hit = self.hit_test(config, x, y, width, height)
        if hit is not None:
            self.dragging_id = hit
            self.hovered_id = hit
        return hit

    def pointer_move(
        self,
        config: GradientConfig,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> Optional[GradientConfig]:
        """
        Track the pointer.

        Returns:
            The updated configuration while dragging (also passed to
            ``on_change``), otherwise ``None`` after refreshing ``hovered_id``.
        """
        if self.dragging_id is None:
            self.hovered_id = self.hit_test(config, x, y, width, height)
            return None

        if config.get_stop(self.dragging_id) is None:
            # Stop was removed mid-drag
            self.dragging_id = None
            return None

        nx, ny = normalize_point(x, y, width, height)
        updated = move_anchor(config, self.dragging_id, nx, ny)
        if self.on_change is not None:
            self.on_change(updated)
        return updated

    def pointer_up(self) -> None:
        self.dragging_id = None

    def pointer_leave(self) -> None:
        self.dragging_id = None
        self.hovered_id = None
