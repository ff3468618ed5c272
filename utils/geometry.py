"""
This module provides:
    - segments_to_array
    - total_length
    - projected_length
    - clip_line_to_rect
"""

from typing import List, Optional, Tuple

import numpy as np

from models.line import Line
from models.point import Point
from models.segment import Segment
from config import get_active_params


# ----------------------------------------------------------------------
#  SEGMENT ARRAYS
# ----------------------------------------------------------------------

def segments_to_array(segments: List[Segment]) -> np.ndarray:
    """
    Endpoints as an (N, 2, 2) float array:
        arr[i] = [[x1, y1], [x2, y2]]
    """
    if not segments:
        return np.zeros((0, 2, 2), dtype=float)
    return np.array(
        [[[s.start.x, s.start.y], [s.end.x, s.end.y]] for s in segments],
        dtype=float,
    )


# ----------------------------------------------------------------------
#  LENGTH MEASURES (used to check that splitting conserves geometry)
# ----------------------------------------------------------------------

def total_length(segments: List[Segment]) -> float:
    arr = segments_to_array(segments)
    if arr.size == 0:
        return 0.0
    return float(np.linalg.norm(arr[:, 1] - arr[:, 0], axis=1).sum())


def projected_length(segments: List[Segment], axis: int) -> float:
    """
    Sum of the segments' extents on the x (axis=0) or y (axis=1) axis.
    """
    arr = segments_to_array(segments)
    if arr.size == 0:
        return 0.0
    return float(np.abs(arr[:, 1, axis] - arr[:, 0, axis]).sum())


# ----------------------------------------------------------------------
#  LINE CLIPPING (drawing partition lines inside the scene)
# ----------------------------------------------------------------------

def clip_line_to_rect(
    line: Line, xmin: float, ymin: float, xmax: float, ymax: float
) -> Optional[Tuple[Point, Point]]:
    """
    Portion of an infinite line inside an axis-aligned rectangle, or
    None if the line misses it.
    """
    epsilon = get_active_params()["EPSILON"]
    borders = (
        Line(1, 0, -xmin),
        Line(1, 0, -xmax),
        Line(0, 1, -ymin),
        Line(0, 1, -ymax),
    )

    hits = []
    for border in borders:
        p = line.intersection_point(border)
        if p is None:
            continue
        if xmin - epsilon <= p.x <= xmax + epsilon and ymin - epsilon <= p.y <= ymax + epsilon:
            hits.append(p)

    if len(hits) < 2:
        return None

    # the two hits farthest apart (corners can be reported twice)
    best = max(
        ((p, q) for i, p in enumerate(hits) for q in hits[i + 1:]),
        key=lambda pq: pq[0].distance_to(pq[1]),
    )
    return best
