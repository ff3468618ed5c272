"""
Exceptions raised by the geometry models and the tree builders.
"""


class GeometryError(ValueError):
    """Invalid geometry: coincident points, zero-norm line, missing endpoint."""


class BSPConstructionError(RuntimeError):
    """A partition step classified nothing on its own line."""
