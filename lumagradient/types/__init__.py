from .gradient_type import GradientType, is_timeline_type, is_spatial_type

__all__ = ["GradientType", "is_timeline_type", "is_spatial_type"]
