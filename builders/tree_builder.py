"""
Builder selection.

This module provides:
    • TreeBuilder            (enum of the three heuristics)
    • build_tree(segments, builder, tau, rng)
"""

from enum import Enum
from typing import List, Optional

import numpy as np

from models.bsp_node import BSPNode
from models.segment import Segment
from builders.deterministic import build_deterministic_tree
from builders.random_tree import build_random_tree
from builders.teller import build_teller_tree


class TreeBuilder(Enum):
    DETERMINISTIC = "Deterministic"
    RANDOM = "Random"
    TELLER = "Teller"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_display_name(cls, name: str) -> "TreeBuilder":
        """Case-insensitive lookup; unknown names raise ValueError."""
        for builder in cls:
            if builder.value.lower() == name.strip().lower():
                return builder
        raise ValueError(f"Unknown tree builder: {name!r}")

    @classmethod
    def display_names(cls) -> List[str]:
        return [builder.value for builder in cls]

    def __str__(self):
        return self.value


def build_tree(
    segments: List[Segment],
    builder: TreeBuilder = TreeBuilder.DETERMINISTIC,
    tau: Optional[float] = None,
    rng: Optional[np.random.Generator] = None,
) -> BSPNode:
    """
    Builds a BSP tree over `segments` with the selected heuristic.
    `tau` only applies to TELLER, `rng` only to RANDOM.
    """
    if isinstance(builder, str):
        builder = TreeBuilder.from_display_name(builder)

    match builder:
        case TreeBuilder.DETERMINISTIC:
            return build_deterministic_tree(segments)
        case TreeBuilder.RANDOM:
            return build_random_tree(segments, rng=rng)
        case TreeBuilder.TELLER:
            return build_teller_tree(segments, tau=tau)
    raise ValueError(f"Unknown tree builder: {builder!r}")
