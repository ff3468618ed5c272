"""
Configuration file for the BSP visibility system.

Contains both SQUARE and RANDOM demo parameter sets.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# "SQUARE" for the hand-made square scene, "RANDOM" for a generated one
DEMO_MODE = "SQUARE"


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

OUTPUT_FOLDER = "output"


# ===============================================================
# SQUARE-MODE PARAMETERS
# ===============================================================

SQUARE = {
    "DEMO_SCENE": "square",
    "DEMO_BUILDER": "Deterministic",
    "DEMO_VIEWPOINT": (0.0, 0.0),
}


# ===============================================================
# RANDOM-MODE PARAMETERS
# ===============================================================

RANDOM = {
    "DEMO_SCENE": "random",
    "DEMO_BUILDER": "Teller",
    "DEMO_VIEWPOINT": (10.0, -25.0),
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

EPSILON = 1e-6                     # "on the line" tolerance
VIEWPOINT_EPSILON = 0.0            # painter's side test, strict sign
TELLER_TAU = 0.5
RANDOM_SEED = None                 # None -> fresh entropy

SCENE_EXTENT = (200, 200)          # half-extents (x, y)
RANDOM_SCENE_SIZE = 25


# ---------------------------------------------------------------
# VISUALIZATION
# ---------------------------------------------------------------

IMAGE_MARGIN = 20
RING_RADIUS = 130
STRIP_WIDTH = 720
STRIP_HEIGHT = 24

COLOR_BACKGROUND = (255, 255, 255)
COLOR_PARTITION = (200, 200, 200)  # light gray
COLOR_VIEWPOINT = (255, 0, 0)      # blue
COLOR_EMPTY = (211, 211, 211)      # strip background


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by builders, painter and driver so they only import one dictionary.
    """

    base = {
        "EPSILON": EPSILON,
        "VIEWPOINT_EPSILON": VIEWPOINT_EPSILON,
        "TELLER_TAU": TELLER_TAU,
        "RANDOM_SEED": RANDOM_SEED,
        "SCENE_EXTENT": SCENE_EXTENT,
        "RANDOM_SCENE_SIZE": RANDOM_SCENE_SIZE,
        "IMAGE_MARGIN": IMAGE_MARGIN,
        "RING_RADIUS": RING_RADIUS,
        "STRIP_WIDTH": STRIP_WIDTH,
        "STRIP_HEIGHT": STRIP_HEIGHT,
    }

    # Merge in square or random mode values
    if DEMO_MODE == "RANDOM":
        base.update(RANDOM)
    else:
        base.update(SQUARE)

    return base
