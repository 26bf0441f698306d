"""LumaGradient: parametric gradient rendering, anchor dragging and CSS export."""

from .types.gradient_type import GradientType, is_timeline_type, is_spatial_type
from .config import ColorStop, GradientConfig
from .defaults import default_config
from .editing import (
    new_stop_id,
    set_type,
    set_angle,
    set_noise,
    set_stop_color,
    set_stop_position,
    add_stop,
    remove_stop,
    move_anchor,
    clear_anchor,
)
from .palette import FALLBACK_PALETTE, stops_from_palette, config_from_palette
from .layout import resolve_anchor, resolve_anchors
from .gradients import render, render_image, apply_grain
from .interaction import AnchorDragController, InteractionState
from .export import (
    supports_style_export,
    to_style_string,
    css_declaration,
    to_png_bytes,
)

__version__ = "1.0.0"

__all__ = [
    # model
    "GradientType",
    "is_timeline_type",
    "is_spatial_type",
    "ColorStop",
    "GradientConfig",
    "default_config",
    # mutators
    "new_stop_id",
    "set_type",
    "set_angle",
    "set_noise",
    "set_stop_color",
    "set_stop_position",
    "add_stop",
    "remove_stop",
    "move_anchor",
    "clear_anchor",
    # palette
    "FALLBACK_PALETTE",
    "stops_from_palette",
    "config_from_palette",
    # layout
    "resolve_anchor",
    "resolve_anchors",
    # rendering
    "render",
    "render_image",
    "apply_grain",
    # interaction
    "AnchorDragController",
    "InteractionState",
    # export
    "supports_style_export",
    "to_style_string",
    "css_declaration",
    "to_png_bytes",
]
