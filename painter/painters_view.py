"""
Painter's algorithm over a BSP tree.

This module provides:
    • paint(root, viewpoint)               -> View (back-to-front)
    • classify_point(line, point, epsilon) -> 1 / -1 / 0
    • angular_projection(segment, viewpoint)

At every internal node the half-plane that does not contain the
viewpoint is visited first; nothing in it can hide anything on the
viewpoint's side of the partition.
"""

import logging
import math
from typing import List, Optional

from models.angular_segment import AngularSegment, TWO_PI
from models.bsp_node import BSPNode
from models.line import Line
from models.point import Point
from models.segment import Segment
from models.view import View
from config import get_active_params

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# 1. TRAVERSAL
# ----------------------------------------------------------------------

def paint(root: Optional[BSPNode], viewpoint: Point, epsilon: Optional[float] = None) -> View:
    """
    Returns the angular projections of every fragment of the tree, in
    back-to-front order as seen from `viewpoint`.

    Coplanar segments of a partition that contains the viewpoint are
    seen edge-on and are not emitted.
    """
    if epsilon is None:
        epsilon = get_active_params()["VIEWPOINT_EPSILON"]

    emitted: List[AngularSegment] = []
    _paint_node(root, viewpoint, epsilon, emitted)

    logger.info("painted %d angular segments from %s", len(emitted), viewpoint)
    return View.from_iterable(emitted)


def _paint_node(node, viewpoint, epsilon, out):
    if node is None:
        return

    if node.is_leaf:
        _emit(node.segments, viewpoint, out)
        return

    side = classify_point(node.partition, viewpoint, epsilon)

    if side > 0:
        _paint_node(node.left, viewpoint, epsilon, out)
        _emit(node.segments, viewpoint, out)
        _paint_node(node.right, viewpoint, epsilon, out)
    elif side < 0:
        _paint_node(node.right, viewpoint, epsilon, out)
        _emit(node.segments, viewpoint, out)
        _paint_node(node.left, viewpoint, epsilon, out)
    else:
        _paint_node(node.right, viewpoint, epsilon, out)
        _paint_node(node.left, viewpoint, epsilon, out)


def _emit(segments, viewpoint, out):
    for seg in segments:
        out.append(angular_projection(seg, viewpoint))


# ----------------------------------------------------------------------
# 2. VIEWPOINT CLASSIFICATION
# ----------------------------------------------------------------------

def classify_point(line: Line, point: Point, epsilon: float = 0.0) -> int:
    """
    1 if point is in the positive half-plane, -1 if in the negative one,
    0 if on the line. epsilon = 0.0 is a strict sign test.
    """
    value = line.evaluate(point)
    if value > epsilon:
        return 1
    if value < -epsilon:
        return -1
    return 0


# ----------------------------------------------------------------------
# 3. ANGULAR PROJECTION
# ----------------------------------------------------------------------

def normalize_angle(angle: float) -> float:
    """atan2 output folded into [0, 2π)."""
    if angle < 0:
        angle += TWO_PI
    # -1e-17 + 2π rounds up to 2π
    return 0.0 if angle >= TWO_PI else angle


def angular_projection(segment: Segment, viewpoint: Point) -> AngularSegment:
    """
    Smallest angular interval covering `segment` seen from `viewpoint`.

    The direct interval [min, max] is used when it is not larger than
    its complement; otherwise the arc crosses angle 0 and is stored as
    [max, min + 2π].
    """
    angle1 = normalize_angle(math.atan2(segment.start.y - viewpoint.y, segment.start.x - viewpoint.x))
    angle2 = normalize_angle(math.atan2(segment.end.y - viewpoint.y, segment.end.x - viewpoint.x))

    direct = abs(angle2 - angle1)
    complement = TWO_PI - direct

    if direct <= complement:
        start, end = min(angle1, angle2), max(angle1, angle2)
    else:
        start, end = max(angle1, angle2), min(angle1, angle2) + TWO_PI

    return AngularSegment(start, end, segment)
