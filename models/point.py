import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """
    A point of the plane. Equality is exact float equality, the same
    comparison used to detect degenerate (zero-length) segments.
    """

    x: float
    y: float

    def copy(self):
        return Point(self.x, self.y)

    def distance_to(self, other):
        return math.dist((self.x, self.y), (other.x, other.y))

    def __iter__(self):
        # allows `x, y = point`
        yield self.x
        yield self.y

    def __repr__(self):
        return f"({self.x}, {self.y})"
