"""
Painter Package

Turns a built BSP tree and a viewpoint into a back-to-front 360° view.
"""

from .painters_view import paint, classify_point, angular_projection, normalize_angle

__all__ = [
    "paint",
    "classify_point",
    "angular_projection",
    "normalize_angle",
]
