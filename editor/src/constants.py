"""
StitchCraft - Constants and Configuration

This module contains all constant values used throughout the application:
- Viewport zoom limits and steps
- History limits
- Bounding box classification tolerances
- Keyboard nudge distances and rotation step defaults
- Export file names and column layout
"""

# ======================================================================
# VIEWPORT
# ======================================================================
DEFAULT_ZOOM = 1.0
MIN_ZOOM = 0.1
MAX_ZOOM = 5.0
ZOOM_STEP = 0.1              # Zoom buttons / Ctrl+= and Ctrl+-
WHEEL_ZOOM_FACTOR = 0.001    # Zoom change per wheel delta unit (Ctrl+wheel)

# Padding (screen pixels) left around content by "Fit to View"
FIT_TO_VIEW_PADDING = 50

# ======================================================================
# HISTORY
# ======================================================================
MAX_HISTORY_ENTRIES = 50

# ======================================================================
# GEOMETRY
# ======================================================================
# Rotations within this many degrees of a multiple of 90 use exact
# width/height (or swapped) instead of the trig expansion
ORTHOGONAL_SNAP_TOLERANCE = 0.05

# ======================================================================
# LAYER MOVEMENT CONSTANTS
# ======================================================================
# Amount to move layers (world pixels) when using arrow keys
ARROW_KEY_MOVE_NORMAL = 1
ARROW_KEY_MOVE_COARSE = 10   # Coarse movement with Shift modifier

# ======================================================================
# ROTATION
# ======================================================================
DEFAULT_ANGLE_STEP = 0.1
MAX_ANGLE_STEP = 90

ROTATION_SLIDER_MIN = -180
ROTATION_SLIDER_MAX = 180
ROTATION_SLIDER_SNAPS = [-180, -90, 0, 90, 180]
ROTATION_SLIDER_SNAP_DISTANCE = 5

# ======================================================================
# DEFAULT LAYER VALUES
# ======================================================================
DEFAULT_POSITION_X = 0.0
DEFAULT_POSITION_Y = 0.0
DEFAULT_ROTATION = 0.0
DEFAULT_SCALE = 1.0
DEFAULT_OPACITY = 1.0

# ======================================================================
# IMPORT / EXPORT
# ======================================================================
SUPPORTED_IMAGE_EXTENSIONS = ['.png', '.jpg', '.jpeg', '.bmp', '.gif', '.tif', '.tiff', '.webp']

EXPORT_FIELDS = ['filename', 'shift_x', 'shift_y', 'rotate', 'layer_order']
EXPORT_JSON_FILENAME = 'stitching_data.json'
EXPORT_CSV_FILENAME = 'stitching_data.csv'

# ======================================================================
# CONFIG
# ======================================================================
CONFIG_DIR_NAME = '.stitchcraft'
CONFIG_FILE_NAME = 'config.json'
