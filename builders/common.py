"""
Recursive tree growth shared by every builder.

A builder only decides which line splits a region; `grow_tree` does the
rest: leaf creation, partitioning, the progress check and the recursion
on both half-planes.
"""

import logging
from typing import Callable, List, Optional

from models.bsp_node import BSPNode
from models.errors import BSPConstructionError
from models.line import Line
from models.segment import Segment
from builders.partition import partition_segments

logger = logging.getLogger(__name__)

LineChooser = Callable[[List[Segment], Optional[Line]], Line]


def grow_tree(segments: List[Segment], choose_line: LineChooser, parent_line: Optional[Line] = None) -> BSPNode:
    """
    Builds the subtree for `segments`.

      - 0 or 1 segment -> leaf
      - otherwise: line = choose_line(segments, parent_line), partition,
        keep the coplanar group on the node, negative group -> left,
        positive group -> right, `line` becomes the children's parent line

    Raises BSPConstructionError when a partition leaves nothing on its
    own line: the region would be passed down unchanged.
    """
    if len(segments) <= 1:
        return BSPNode.leaf(segments)

    line = choose_line(segments, parent_line)
    result = partition_segments(segments, line)

    if not result.coplanar:
        raise BSPConstructionError(
            f"Splitting line {line} classifies none of {len(segments)} segments as coplanar."
        )

    logger.debug(
        "split %d segments by %s: %d coplanar, %d positive, %d negative",
        len(segments), line, len(result.coplanar), len(result.positive), len(result.negative),
    )

    left = grow_tree(result.negative, choose_line, line)
    right = grow_tree(result.positive, choose_line, line)
    return BSPNode.internal(line, result.coplanar, left, right)
