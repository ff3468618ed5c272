"""
Image output utilities for the visualization layer.

This module provides:
    • ensure_output_dir(path)
    • blank_canvas(width, height, color)
    • save_image(path, image)
"""

import os

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  CANVAS
# -------------------------------------------------------------------------

def blank_canvas(width: int, height: int, color=(255, 255, 255)) -> np.ndarray:
    """BGR image filled with `color`."""
    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[:] = color
    return canvas


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    cv2.imwrite(path, image)
