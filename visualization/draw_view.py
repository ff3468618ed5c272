"""
Visualization utilities for a painter's view.

This module provides:
    • rasterize_view(view, bins)          (numpy, no drawing)
    • draw_view_ring(img, view, center, radius)
    • draw_view_strip(view, width, height)

Angular segments are drawn in emission order, so later (nearer)
fragments cover earlier ones.
"""

import math

import cv2
import numpy as np

from models.angular_segment import TWO_PI
from models.view import View
from config import get_active_params, COLOR_EMPTY


def _color(angular_segment):
    color = angular_segment.segment.color
    return color if isinstance(color, tuple) else (0, 0, 0)


# ---------------------------------------------------------------------
#  RASTERIZATION
# ---------------------------------------------------------------------

def rasterize_view(view: View, bins: int = 360) -> np.ndarray:
    """
    Index of the emitted angular segment visible in each angular bin,
    -1 where nothing is seen. Bin i covers [i, i+1) * 2π / bins and is
    sampled at its center.
    """
    visible = np.full(bins, -1, dtype=np.int64)
    centers = (np.arange(bins) + 0.5) * TWO_PI / bins

    for index, ang in enumerate(view):
        visible[ang.contains(centers)] = index

    return visible


# ---------------------------------------------------------------------
#  360° RING
# ---------------------------------------------------------------------

def draw_view_ring(image, view: View, center, radius=None, thickness: int = 3):
    """
    Draws each angular segment as an arc of the circle. Angle 0 points
    east, angles grow counter-clockwise as in world coordinates.
    """
    if radius is None:
        radius = get_active_params()["RING_RADIUS"]

    cv2.circle(image, center, radius, COLOR_EMPTY, 1)

    for ang in view:
        # OpenCV angles run clockwise in image space
        start_deg = -math.degrees(ang.end_angle)
        end_deg = -math.degrees(ang.start_angle)
        cv2.ellipse(image, center, (radius, radius), 0, start_deg, end_deg, _color(ang), thickness)

    return image


# ---------------------------------------------------------------------
#  LINEAR STRIP
# ---------------------------------------------------------------------

def draw_view_strip(view: View, width=None, height=None) -> np.ndarray:
    """
    Panorama of the view unrolled over [0, 2π) from left to right.
    """
    params = get_active_params()
    width = params["STRIP_WIDTH"] if width is None else width
    height = params["STRIP_HEIGHT"] if height is None else height

    strip = np.empty((height, width, 3), dtype=np.uint8)
    strip[:] = COLOR_EMPTY

    visible = rasterize_view(view, bins=width)
    for column in np.flatnonzero(visible >= 0):
        strip[:, column] = _color(view[int(visible[column])])

    return strip
