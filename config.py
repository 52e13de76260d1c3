"""
Configuration file for the point-separation system.

Contains the instance limits, file naming and rendering parameters.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Render a PNG of every solved instance next to its solution file
RENDER_OUTPUTS = True

# Stop on the first invalid instance (False: report and skip it)
STOP_ON_INVALID = True

# Dump sorted views and the adjacency matrix for every instance
VERBOSE = False


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

INPUT_FOLDER = "."
OUTPUT_FOLDER = "output"

INSTANCE_PREFIX = "instance"
SOLUTION_PREFIX = "greedy_solution_"
INSTANCE_PATTERN = INSTANCE_PREFIX + "[0-9]*"


# ===============================================================
# INSTANCE LIMITS
# ===============================================================

MAX_POINTS = 100          # largest accepted instance
MAX_INSTANCES = 99        # instance numbers are two digits


# ===============================================================
# RENDERING PARAMETERS
# ===============================================================

RENDER = {
    "CANVAS_SIZE": 600,
    "CANVAS_MARGIN": 40,
    "POINT_RADIUS": 4,
    "LINE_THICKNESS": 1,
    "FONT_SCALE": 0.4,
}


# ---------------------------------------------------------------
# VISUALIZATION COLORS
# ---------------------------------------------------------------

COLOR_BACKGROUND = (255, 255, 255)  # white
COLOR_POINT = (0, 0, 0)             # black
COLOR_LABEL = (80, 80, 80)          # grey
COLOR_VERTICAL = (255, 0, 0)        # X-axis lines - blue
COLOR_HORIZONTAL = (0, 0, 255)      # Y-axis lines - red


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - Instance limits, file naming and mode flags.
    - Rendering values, used by the visualization package.
    """

    base = {
        "MAX_POINTS": MAX_POINTS,
        "MAX_INSTANCES": MAX_INSTANCES,
        "INPUT_FOLDER": INPUT_FOLDER,
        "OUTPUT_FOLDER": OUTPUT_FOLDER,
        "INSTANCE_PREFIX": INSTANCE_PREFIX,
        "SOLUTION_PREFIX": SOLUTION_PREFIX,
        "INSTANCE_PATTERN": INSTANCE_PATTERN,
        "STOP_ON_INVALID": STOP_ON_INVALID,
        "RENDER_OUTPUTS": RENDER_OUTPUTS,
        "VERBOSE": VERBOSE,
    }

    # Merge in rendering values
    base.update(RENDER)

    return base
