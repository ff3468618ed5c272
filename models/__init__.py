"""
Data Models

Defines the core data structures:
- Point, Line, Segment
- BSPNode
- AngularSegment, View
- Scene
"""

from .errors import GeometryError, BSPConstructionError
from .point import Point
from .line import Line
from .segment import Segment
from .bsp_node import BSPNode
from .angular_segment import AngularSegment
from .view import View
from .scene import Scene

__all__ = [
    "GeometryError",
    "BSPConstructionError",
    "Point",
    "Line",
    "Segment",
    "BSPNode",
    "AngularSegment",
    "View",
    "Scene",
]
