from .rgb import (
    hex_to_rgb,
    hex_to_unit_rgb,
    rgb_to_hex,
    normalize_hex,
    is_valid_color,
    stops_to_arrays,
)

__all__ = [
    "hex_to_rgb",
    "hex_to_unit_rgb",
    "rgb_to_hex",
    "normalize_hex",
    "is_valid_color",
    "stops_to_arrays",
]
