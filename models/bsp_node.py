from typing import Iterator, List, Optional

from models.line import Line
from models.segment import Segment


class BSPNode:
    """
    A node of a BSP tree.

    Two variants, fixed at construction:
      • internal node: a partition line, the segments lying on it
        (coplanar), and two children, `left` for the negative half-plane
        and `right` for the positive one
      • leaf: a list of segments, no partition, no children

    The same `segments` attribute holds the coplanar list of an internal
    node and the content of a leaf.
    """

    __slots__ = ("partition", "segments", "left", "right")

    def __init__(
        self,
        partition: Optional[Line],
        segments: List[Segment],
        left: Optional["BSPNode"] = None,
        right: Optional["BSPNode"] = None,
    ):
        if partition is None and (left is not None or right is not None):
            raise ValueError("A leaf cannot have children.")
        if partition is not None and (left is None or right is None):
            raise ValueError("An internal node needs two children.")

        self.partition = partition
        self.segments = segments
        self.left = left
        self.right = right

    @classmethod
    def leaf(cls, segments):
        return cls(None, list(segments))

    @classmethod
    def internal(cls, partition, coplanar, left, right):
        return cls(partition, list(coplanar), left, right)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def is_leaf(self) -> bool:
        return self.partition is None

    @property
    def coplanar(self) -> List[Segment]:
        return self.segments

    def size(self) -> int:
        """Number of nodes of the subtree, leaves included."""
        if self.is_leaf:
            return 1
        return 1 + self.left.size() + self.right.size()

    def height(self) -> int:
        if self.is_leaf:
            return 0
        return 1 + max(self.left.height(), self.right.height())

    def leaf_count(self) -> int:
        return sum(1 for node in self.iter_nodes() if node.is_leaf)

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def iter_nodes(self) -> Iterator["BSPNode"]:
        """Pre-order: node, left subtree, right subtree."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if not node.is_leaf:
                stack.append(node.right)
                stack.append(node.left)

    def iter_segments(self) -> Iterator[Segment]:
        """Every segment fragment stored in the subtree, in pre-order."""
        for node in self.iter_nodes():
            yield from node.segments

    def iter_partitions(self) -> Iterator[Line]:
        for node in self.iter_nodes():
            if not node.is_leaf:
                yield node.partition

    def segment_count(self) -> int:
        return sum(len(node.segments) for node in self.iter_nodes())

    def total_length(self) -> float:
        return sum(seg.length for seg in self.iter_segments())

    # ------------------------------------------------------------------
    # Convenience / debugging
    # ------------------------------------------------------------------

    def __repr__(self):
        if self.is_leaf:
            return f"Leaf({self.segments})"
        return f"Node(partition={self.partition}, coplanar={len(self.segments)})"
