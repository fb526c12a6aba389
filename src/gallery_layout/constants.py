"""
Constants used internally by the gallery layout engine.

These are implementation-level tuning values that should not be
overridden via config files or CLI arguments.
"""

# Row search window sizing
SEARCH_WINDOW_MIN = 2
SEARCH_WINDOW_BUFFER = 2
SEARCH_WINDOW_CAP_FACTOR = 3
SEARCH_WINDOW_MAX = 60

# Default column breakpoints as (min container width px, columns),
# checked from the widest down.
COLUMN_BREAKPOINTS: tuple[tuple[int, int], ...] = (
    (1500, 4),
    (900, 3),
    (500, 2),
)
DEFAULT_COLUMN_COUNT = 1

# Directions understood by the dispatcher
DIRECTION_ROW = "row"
DIRECTION_COLUMN = "column"
