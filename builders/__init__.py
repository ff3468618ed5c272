"""
Builders Package

Contains the BSP construction modules:
- Segment partitioning
- Candidate evaluation (balance and Teller heuristics)
- Deterministic, random and Teller tree builders
- Builder selection
"""

from .partition import PartitionResult, partition_segments
from .candidates import (
    evaluate_candidates,
    select_best_candidate,
    evaluate_teller_candidates,
    select_teller_candidate,
)
from .common import grow_tree
from .deterministic import build_deterministic_tree
from .random_tree import build_random_tree, shuffled_copy
from .teller import build_teller_tree
from .tree_builder import TreeBuilder, build_tree

__all__ = [
    "PartitionResult",
    "partition_segments",
    "evaluate_candidates",
    "select_best_candidate",
    "evaluate_teller_candidates",
    "select_teller_candidate",
    "grow_tree",
    "build_deterministic_tree",
    "build_random_tree",
    "shuffled_copy",
    "build_teller_tree",
    "TreeBuilder",
    "build_tree",
]
