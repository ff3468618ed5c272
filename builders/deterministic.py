"""
Deterministic BSP builder (balance heuristic).

The tree is a pure function of the input order: the same list always
gives the same partition lines and the same coplanar groups.
"""

import logging
from typing import List, Optional

from models.bsp_node import BSPNode
from models.line import Line
from models.segment import Segment
from builders.candidates import evaluate_candidates, select_best_candidate
from builders.common import grow_tree

logger = logging.getLogger(__name__)


def choose_balanced_line(segments: List[Segment], parent_line: Optional[Line]) -> Line:
    """
    Best-balanced support line among the candidates connected to the
    parent line. With no candidate left, the first segment's support
    line is used regardless of the parent.
    """
    candidates = evaluate_candidates(segments, parent_line)
    if not candidates:
        logger.debug("no candidate touches %s, falling back to first segment", parent_line)
        return segments[0].support_line
    return select_best_candidate(candidates).line


def build_deterministic_tree(segments: List[Segment], parent_line: Optional[Line] = None) -> BSPNode:
    root = grow_tree(list(segments), choose_balanced_line, parent_line)
    logger.info("deterministic tree: %d segments -> size %d, height %d",
                len(segments), root.size(), root.height())
    return root
