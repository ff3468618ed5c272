from models.errors import GeometryError
from models.line import Line
from models.point import Point
from config import EPSILON


class Segment:
    """
    A straight segment between two distinct endpoints, carrying an opaque
    color tag (any value: BGR tuple, name, id) that every fragment keeps.
    """

    __slots__ = ("start", "end", "color")

    def __init__(self, start: Point, end: Point, color=None):
        if start is None or end is None:
            raise GeometryError("Segment endpoints must not be None.")
        if start == end:
            raise GeometryError(f"Start and end points must be distinct: {start}")

        self.start = start
        self.end = end
        self.color = color

    @classmethod
    def from_coords(cls, x1, y1, x2, y2, color=None):
        return cls(Point(x1, y1), Point(x2, y2), color)

    # ------------------------------------------------------------
    # Derived geometry
    # ------------------------------------------------------------
    @property
    def support_line(self) -> Line:
        return Line.from_points(self.start, self.end)

    @property
    def center(self) -> Point:
        return Point((self.start.x + self.end.x) / 2.0, (self.start.y + self.end.y) / 2.0)

    @property
    def left_endpoint(self) -> Point:
        # smaller x; start wins a tie
        return self.start if self.start.x <= self.end.x else self.end

    @property
    def right_endpoint(self) -> Point:
        return self.start if self.start.x > self.end.x else self.end

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    # ------------------------------------------------------------
    # Splitting
    # ------------------------------------------------------------
    def split(self, line: Line):
        """
        Split this segment by a line.

        Returns a (positive, negative) pair, either item possibly None:
          - both endpoints strictly on one side -> whole segment on that side
          - both endpoints on the line           -> whole segment, positive side
          - otherwise                            -> two fragments cut at the
                                                   intersection point; a
                                                   zero-length fragment is dropped
        """
        eval_start = line.evaluate(self.start)
        eval_end = line.evaluate(self.end)

        if eval_start * eval_end > 0:
            if eval_start > 0:
                return self, None
            return None, self

        if abs(eval_start) < EPSILON and abs(eval_end) < EPSILON:
            return self, None

        t = eval_start / (eval_start - eval_end)
        intersection = Point(
            self.start.x + t * (self.end.x - self.start.x),
            self.start.y + t * (self.end.y - self.start.y),
        )

        if eval_start > 0:
            positive = (self.start, intersection)
            negative = (intersection, self.end)
        else:
            positive = (intersection, self.end)
            negative = (self.start, intersection)

        return self._fragment(*positive), self._fragment(*negative)

    def _fragment(self, start, end):
        if start == end:
            return None
        return Segment(start, end, self.color)

    # ------------------------------------------------------------
    # Convenience
    # ------------------------------------------------------------
    def copy(self):
        return Segment(self.start.copy(), self.end.copy(), self.color)

    def __repr__(self):
        return f"Segment({self.start} -> {self.end}, color={self.color})"
