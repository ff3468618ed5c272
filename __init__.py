"""
BSP Visibility Package

This package provides a modular implementation of 2D visibility
ordering with Binary Space Partitioning trees, including:

- Geometric models (points, lines, segments, BSP nodes, views)
- Segment partitioning & candidate evaluation
- Deterministic, random and Teller tree builders
- Painter's algorithm 360° views
- Output visualization utilities
"""
__all__ = [
    "config",
    "main",
    "builders",
    "models",
    "painter",
    "utils",
    "visualization",
]
