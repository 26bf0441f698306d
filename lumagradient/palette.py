"""
Turn an extracted palette into color stops.

The color-extraction service itself lives outside this package; it hands over a
list of color strings. Stops are spread evenly over the timeline in the order
given. When too few usable colors arrive, the built-in fallback palette is used
so an editing session can always start.
"""

from __future__ import annotations

import warnings
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from .colors.rgb import is_valid_color
from .config import ColorStop, GradientConfig
from .defaults import MIN_STOPS, default_config

FALLBACK_PALETTE: Tuple[str, ...] = ("#FF5A19", "#FFDBCA", "#111111", "#7B7B7B", "#EEEEEE")


def stops_from_palette(colors: Sequence[str]) -> List[ColorStop]:
    """
    Evenly spaced stops, ids ``gen-<index>``, positions rounded to integers.

    Entries that are not valid colors are skipped with a warning.
    """
    valid = []
    for color in colors:
        if is_valid_color(color):
            valid.append(color)
        else:
            warnings.warn(f"Skipping invalid palette color {color!r}", UserWarning, stacklevel=2)

    if len(valid) == 1:
        return [ColorStop(id="gen-0", color=valid[0], position=0)]

    last = len(valid) - 1
    return [
        ColorStop(id=f"gen-{i}", color=color, position=round(i / last * 100))
        for i, color in enumerate(valid)
    ]


def config_from_palette(
    colors: Sequence[str],
    base: Optional[GradientConfig] = None,
) -> GradientConfig:
    """
    Replace the stops of ``base`` with a palette.

    Args:
        colors: Color strings, typically hex codes
        base: Configuration whose type, angle and grain are kept
              (defaults to ``default_config()``)

    Returns:
        A new configuration. Falls back to ``FALLBACK_PALETTE`` when fewer than
        two valid colors are supplied.
    """
    base = base if base is not None else default_config()
    stops = stops_from_palette(colors)

    if len(stops) < MIN_STOPS:
        warnings.warn(
            f"Palette has {len(stops)} usable color(s); using the fallback palette",
            UserWarning,
            stacklevel=2,
        )
        stops = stops_from_palette(FALLBACK_PALETTE)
    return replace(base, stops=tuple(stops))
