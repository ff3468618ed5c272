"""
Utility Functions

Provides segment geometry helpers, built-in demo scenes and image I/O
utilities used by the builders, the visualization layer and the driver.
"""

from .geometry import (
    segments_to_array,
    total_length,
    projected_length,
    clip_line_to_rect,
)
from .scenes import square_scene, parallel_scene, random_scene, get_scene, PALETTE

__all__ = [
    "segments_to_array",
    "total_length",
    "projected_length",
    "clip_line_to_rect",
    "square_scene",
    "parallel_scene",
    "random_scene",
    "get_scene",
    "PALETTE",
]
