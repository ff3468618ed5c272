"""
Visualization utilities for rendering a scene and its BSP partition.

This module provides:
    • to_pixel(x, y, scene, margin)
    • scene_canvas(scene, margin)
    • draw_segments(img, segments, scene, thickness)
    • draw_partitions(img, root, scene)
    • draw_viewpoint(img, viewpoint, scene)

World coordinates have y pointing up; image rows grow downwards.
"""

from typing import List, Optional

import cv2

from models.bsp_node import BSPNode
from models.point import Point
from models.scene import Scene
from models.segment import Segment
from utils.geometry import clip_line_to_rect
from utils.image_io import blank_canvas
from config import get_active_params, COLOR_BACKGROUND, COLOR_PARTITION, COLOR_VIEWPOINT


def _margin(margin: Optional[int]) -> int:
    return get_active_params()["IMAGE_MARGIN"] if margin is None else margin


def to_pixel(x, y, scene: Scene, margin: Optional[int] = None):
    m = _margin(margin)
    return int(round(m + x + scene.extent_x)), int(round(m + scene.extent_y - y))


def scene_canvas(scene: Scene, margin: Optional[int] = None):
    m = _margin(margin)
    return blank_canvas(int(scene.width) + 2 * m, int(scene.height) + 2 * m, COLOR_BACKGROUND)


# ---------------------------------------------------------------------
#  SEGMENTS
# ---------------------------------------------------------------------

def draw_segments(image, segments: List[Segment], scene: Scene, thickness: int = 2, margin: Optional[int] = None):
    """
    Draws segments in their own color; a non-tuple color tag is drawn black.
    """
    for seg in segments:
        color = seg.color if isinstance(seg.color, tuple) else (0, 0, 0)
        cv2.line(
            image,
            to_pixel(seg.start.x, seg.start.y, scene, margin),
            to_pixel(seg.end.x, seg.end.y, scene, margin),
            color,
            thickness,
        )
    return image


# ---------------------------------------------------------------------
#  PARTITION LINES
# ---------------------------------------------------------------------

def draw_partitions(image, root: BSPNode, scene: Scene, thickness: int = 1, margin: Optional[int] = None):
    """
    Draws every partition line of the tree, clipped to the scene rectangle.
    """
    for line in root.iter_partitions():
        clipped = clip_line_to_rect(line, -scene.extent_x, -scene.extent_y, scene.extent_x, scene.extent_y)
        if clipped is None:
            continue
        p, q = clipped
        cv2.line(
            image,
            to_pixel(p.x, p.y, scene, margin),
            to_pixel(q.x, q.y, scene, margin),
            COLOR_PARTITION,
            thickness,
        )
    return image


def draw_viewpoint(image, viewpoint: Point, scene: Scene, radius: int = 4, margin: Optional[int] = None):
    cv2.circle(image, to_pixel(viewpoint.x, viewpoint.y, scene, margin), radius, COLOR_VIEWPOINT, -1)
    return image
