"""
Centralized output-saving utilities.

This module provides:
    • save_scene(...)
    • save_view(...)
    • save_all_outputs(...)

Uses draw modules to visualize and utils.image_io for filesystem handling.
"""

import numpy as np

from models.bsp_node import BSPNode
from models.point import Point
from models.scene import Scene
from models.view import View

from visualization.draw_scene import (
    scene_canvas,
    draw_segments,
    draw_partitions,
    draw_viewpoint,
)
from visualization.draw_view import draw_view_ring, draw_view_strip
from utils.image_io import save_image, ensure_output_dir, blank_canvas
from config import get_active_params, COLOR_BACKGROUND


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_scene(path: str, scene: Scene, root: BSPNode, viewpoint: Point):
    """
    Partition lines under the tree's fragments, plus the viewpoint.
    """
    vis = scene_canvas(scene)
    draw_partitions(vis, root, scene)
    draw_segments(vis, list(root.iter_segments()), scene)
    draw_viewpoint(vis, viewpoint, scene)
    save_image(path, vis)


def save_view(path: str, view: View):
    """
    360° ring on top, unrolled strip below.
    """
    params = get_active_params()
    radius = params["RING_RADIUS"]
    margin = params["IMAGE_MARGIN"]

    strip = draw_view_strip(view)
    width = max(strip.shape[1], 2 * (radius + margin))
    ring = blank_canvas(width, 2 * (radius + margin), COLOR_BACKGROUND)
    draw_view_ring(ring, view, (width // 2, radius + margin), radius)

    padded = blank_canvas(width, strip.shape[0] + margin, COLOR_BACKGROUND)
    padded[: strip.shape[0], : strip.shape[1]] = strip
    save_image(path, np.vstack([ring, padded]))


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    name: str,
    scene: Scene,
    root: BSPNode,
    view: View,
    viewpoint: Point,
):
    """
    Saves every output artifact for one query.

    Example output:
        <name>_tree.png
        <name>_view.png
    """

    ensure_output_dir(output_dir)

    save_scene(f"{output_dir}/{name}_tree.png", scene, root, viewpoint)
    save_view(f"{output_dir}/{name}_view.png", view)
