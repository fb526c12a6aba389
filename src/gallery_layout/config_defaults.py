"""Shared default values for user-facing layout settings."""
from gallery_layout.type_defs import Direction

# Gallery
DEFAULT_DIRECTION: Direction = "row"
DEFAULT_MARGIN = 2.0
DEFAULT_EXTRA_HEIGHT = 0.0

# Row mode
DEFAULT_TARGET_ROW_HEIGHT = 300.0
# Scale relative to the target row height; 1.0 keeps a short last row at
# exactly the target height instead of stretching it across the container.
DEFAULT_LAST_ROW_MAX_SCALE = 1.0
