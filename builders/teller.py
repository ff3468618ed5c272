"""
Teller BSP builder (ratio heuristic).

`tau` is expected in (0, 1); it is not validated here. Close to 0 the
max-sigma rule almost always applies, close to 1 the min-f rule does.
"""

import logging
from functools import partial
from typing import List, Optional

from models.bsp_node import BSPNode
from models.line import Line
from models.segment import Segment
from builders.candidates import evaluate_teller_candidates, select_teller_candidate
from builders.common import grow_tree
from config import get_active_params

logger = logging.getLogger(__name__)


def choose_teller_line(segments: List[Segment], parent_line: Optional[Line], tau: float) -> Line:
    candidates = evaluate_teller_candidates(segments, parent_line)
    if not candidates:
        logger.debug("no candidate intersects %s, falling back to first segment", parent_line)
        return segments[0].support_line
    return select_teller_candidate(candidates, tau).line


def build_teller_tree(
    segments: List[Segment],
    tau: Optional[float] = None,
    parent_line: Optional[Line] = None,
) -> BSPNode:
    if tau is None:
        tau = get_active_params()["TELLER_TAU"]

    root = grow_tree(list(segments), partial(choose_teller_line, tau=tau), parent_line)
    logger.info("teller tree (tau=%g): %d segments -> size %d, height %d",
                tau, len(segments), root.size(), root.height())
    return root
