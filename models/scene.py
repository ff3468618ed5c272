from dataclasses import dataclass, field
from typing import List

from models.segment import Segment


@dataclass
class Scene:
    """
    A named set of segments inside the rectangle
    [-extent_x, extent_x] x [-extent_y, extent_y].
    """

    name: str
    segments: List[Segment] = field(default_factory=list)
    extent_x: float = 0
    extent_y: float = 0

    @property
    def width(self):
        return self.extent_x * 2

    @property
    def height(self):
        return self.extent_y * 2

    def copy(self):
        """Deep copy: segments are copied, colors are shared."""
        return Scene(
            self.name,
            [seg.copy() for seg in self.segments],
            self.extent_x,
            self.extent_y,
        )

    def __repr__(self):
        return (
            f"Scene[{self.name}: {len(self.segments)} segments, "
            f"extentX={self.extent_x}, extentY={self.extent_y}]"
        )
