"""
Random BSP builder: shuffle, then build deterministically.
"""

import logging
from typing import List, Optional

import numpy as np

from models.bsp_node import BSPNode
from models.line import Line
from models.segment import Segment
from builders.deterministic import build_deterministic_tree
from config import get_active_params

logger = logging.getLogger(__name__)


def shuffled_copy(segments: List[Segment], rng: Optional[np.random.Generator] = None) -> List[Segment]:
    """
    Uniformly random permutation of a copy of `segments`.
    The caller's list is left untouched.
    """
    if rng is None:
        rng = np.random.default_rng(get_active_params()["RANDOM_SEED"])
    order = rng.permutation(len(segments))
    return [segments[i] for i in order]


def build_random_tree(
    segments: List[Segment],
    parent_line: Optional[Line] = None,
    rng: Optional[np.random.Generator] = None,
) -> BSPNode:
    shuffled = shuffled_copy(segments, rng)
    logger.debug("random builder: permuted %d segments", len(shuffled))
    return build_deterministic_tree(shuffled, parent_line)
