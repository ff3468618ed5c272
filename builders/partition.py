"""
Segment partitioning against a splitting line.

This module provides:
    • PartitionResult
    • partition_segments(segments, line)
"""

from typing import List, NamedTuple

from models.line import Line
from models.segment import Segment
from config import get_active_params


class PartitionResult(NamedTuple):
    coplanar: List[Segment]
    positive: List[Segment]
    negative: List[Segment]


def partition_segments(segments: List[Segment], line: Line) -> PartitionResult:
    """
    Classifies every segment against `line` by its center:

        |eval(center)| < EPSILON  -> coplanar
        eval(center) > 0          -> positive, unless the endpoints
                                     straddle the line (then split)
        eval(center) < 0          -> mirror case

    Input order is preserved inside each group.
    """
    epsilon = get_active_params()["EPSILON"]

    coplanar = []
    positive = []
    negative = []

    for seg in segments:
        value = line.evaluate(seg.center)

        if abs(value) < epsilon:
            coplanar.append(seg)
            continue

        e1 = line.evaluate(seg.left_endpoint)
        e2 = line.evaluate(seg.right_endpoint)

        if e1 * e2 < -epsilon:
            pos_part, neg_part = seg.split(line)
            if pos_part is not None:
                positive.append(pos_part)
            if neg_part is not None:
                negative.append(neg_part)
        elif value > 0:
            positive.append(seg)
        else:
            negative.append(seg)

    return PartitionResult(coplanar, positive, negative)
