import math
from dataclasses import dataclass

from models.segment import Segment

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class AngularSegment:
    """
    Projection of a segment fragment on the 360° view: the angular
    interval [start_angle, end_angle) in radians, counter-clockwise from
    the +x axis. A wrap-around arc is stored with end_angle > 2π; readers
    reduce it modulo 2π.
    """

    start_angle: float
    end_angle: float
    segment: Segment

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def normalized_end(self) -> float:
        return math.fmod(self.end_angle, TWO_PI)

    def contains(self, angle):
        """
        True if the direction `angle` (any real) falls inside the interval.
        Also accepts a numpy array of angles and returns a boolean mask.
        """
        offset = (angle - self.start_angle) % TWO_PI
        return offset < self.span

    def __repr__(self):
        return (
            f"AngularSegment[{self.start_angle:.4f} ({math.degrees(self.start_angle):.1f}°), "
            f"{self.end_angle:.4f} ({math.degrees(self.end_angle):.1f}°)]"
        )
