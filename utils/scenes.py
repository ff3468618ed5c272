"""
Built-in demo scenes.

This module provides:
    • square_scene(half_size)
    • parallel_scene(count, spacing, length)
    • random_scene(count, extent, rng)
    • get_scene(name)
"""

from typing import Optional, Tuple

import numpy as np

from models.point import Point
from models.scene import Scene
from models.segment import Segment
from config import get_active_params


# BGR, as everywhere else in the drawing code
PALETTE = [
    (0, 0, 255),      # red
    (0, 160, 0),      # green
    (255, 0, 0),      # blue
    (0, 165, 255),    # orange
    (128, 0, 128),    # purple
    (255, 255, 0),    # cyan
    (203, 192, 255),  # pink
    (0, 0, 0),        # black
]


def square_scene(half_size: float = 100) -> Scene:
    """
    Four walls of a square centered on the origin plus one interior
    diagonal in the upper-left quadrant.
    """
    h = half_size
    segments = [
        Segment(Point(-h, -h), Point(h, -h), PALETTE[0]),
        Segment(Point(h, -h), Point(h, h), PALETTE[1]),
        Segment(Point(h, h), Point(-h, h), PALETTE[2]),
        Segment(Point(-h, h), Point(-h, -h), PALETTE[3]),
        Segment(Point(-h / 2, 0), Point(0, h / 2), PALETTE[4]),
    ]
    return Scene("square", segments, h, h)


def parallel_scene(count: int = 2, spacing: float = 10, length: float = 10) -> Scene:
    """Horizontal segments stacked `spacing` apart, none of them coincident."""
    segments = [
        Segment(Point(0, i * spacing), Point(length, i * spacing), PALETTE[i % len(PALETTE)])
        for i in range(count)
    ]
    extent = max(length, count * spacing)
    return Scene("parallel", segments, extent, extent)


def random_scene(
    count: Optional[int] = None,
    extent: Optional[Tuple[float, float]] = None,
    rng: Optional[np.random.Generator] = None,
) -> Scene:
    """
    `count` segments with endpoints drawn uniformly inside the extent.
    Degenerate draws (identical endpoints) are redrawn.
    """
    params = get_active_params()
    if count is None:
        count = params["RANDOM_SCENE_SIZE"]
    if extent is None:
        extent = params["SCENE_EXTENT"]
    if rng is None:
        rng = np.random.default_rng(params["RANDOM_SEED"])

    ex, ey = extent
    segments = []
    while len(segments) < count:
        (x1, y1), (x2, y2) = rng.uniform((-ex, -ey), (ex, ey), size=(2, 2))
        if x1 == x2 and y1 == y2:
            continue
        color = PALETTE[len(segments) % len(PALETTE)]
        segments.append(Segment(Point(float(x1), float(y1)), Point(float(x2), float(y2)), color))

    return Scene("random", segments, ex, ey)


def get_scene(name: str) -> Scene:
    match name.lower():
        case "square":
            return square_scene()
        case "parallel":
            return parallel_scene()
        case "random":
            return random_scene()
    raise ValueError(f"Unknown scene: {name!r}")
