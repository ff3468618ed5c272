"""
Visualization Tools

Provides drawing utilities for:
- Scenes and BSP partition lines
- Painter's views (360° ring, unrolled strip)
"""

from .draw_scene import draw_segments, draw_partitions, draw_viewpoint, scene_canvas
from .draw_view import rasterize_view, draw_view_ring, draw_view_strip
from .save_outputs import save_all_outputs, save_scene, save_view

__all__ = [
    "draw_segments",
    "draw_partitions",
    "draw_viewpoint",
    "scene_canvas",
    "rasterize_view",
    "draw_view_ring",
    "draw_view_strip",
    "save_all_outputs",
    "save_scene",
    "save_view",
]
