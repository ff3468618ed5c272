import math

from models.errors import GeometryError
from models.point import Point
from config import EPSILON


class Line:
    """
    Supports:
      - normalized implicit form a*x + b*y + c = 0 with a² + b² = 1
      - signed distance evaluation (the sidedness test of every builder)
      - touches / intersect predicates between two lines
      - intersection point of two non-parallel lines
    """

    __slots__ = ("a", "b", "c")

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __init__(self, a, b, c):
        """
        Coefficients are normalized so that evaluate() is a true signed
        distance. A zero (a, b) pair does not describe a line.
        """
        norm = math.hypot(a, b)
        if norm == 0:
            raise GeometryError(f"Invalid line coefficients: ({a}, {b}, {c})")

        self.a = a / norm
        self.b = b / norm
        self.c = c / norm

    @classmethod
    def from_points(cls, p1, p2):
        """
        Line through p1 and p2. The positive half-plane lies to the right
        of the direction p1 -> p2.
        """
        a = p2.y - p1.y
        b = p1.x - p2.x
        c = -(a * p1.x + b * p1.y)

        if math.hypot(a, b) == 0:
            raise GeometryError(f"Points must be distinct: {p1}, {p2}")
        return cls(a, b, c)

    # ------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------
    def evaluate(self, point):
        """Signed distance from point to the line."""
        return self.a * point.x + self.b * point.y + self.c

    def determinant(self, other):
        return self.a * other.b - other.a * self.b

    # ------------------------------------------------------------
    # Line-line predicates
    # ------------------------------------------------------------
    def touches(self, other):
        """
        True if the lines cross at one point, or are parallel and
        coincident within EPSILON.
        """
        if abs(self.determinant(other)) > EPSILON:
            return True
        return abs(self.c - other.c) < EPSILON

    def intersect(self, other):
        """
        True only for non-parallel lines. Coincident lines do not count.
        """
        return abs(self.determinant(other)) >= EPSILON

    def intersection_point(self, other):
        """
        Crossing point of two lines, or None if they are parallel.
        """
        det = self.determinant(other)
        if abs(det) < EPSILON:
            return None
        x = (self.b * other.c - other.b * self.c) / det
        y = (other.a * self.c - self.a * other.c) / det
        return Point(x, y)

    # ------------------------------------------------------------
    # Comparison / repr
    # ------------------------------------------------------------
    def __eq__(self, other):
        return (
            isinstance(other, Line)
            and math.isclose(self.a, other.a, abs_tol=EPSILON)
            and math.isclose(self.b, other.b, abs_tol=EPSILON)
            and math.isclose(self.c, other.c, abs_tol=EPSILON)
        )

    # unhashable: equality is tolerance-based
    __hash__ = None

    def __repr__(self):
        return f"Line({self.a:.4f}x + {self.b:.4f}y + {self.c:.4f} = 0)"
