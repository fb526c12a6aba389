"""
Adaptive sizing of the row search window.

The justified packer's cost grows with ``images * window``. Past a few
more images than fit one row at the target height, extra candidates
cannot form a plausible row, so the window follows the ratio of
container width to target row height, with a floor and a hard cap.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from gallery_layout.constants import (
    SEARCH_WINDOW_BUFFER,
    SEARCH_WINDOW_CAP_FACTOR,
    SEARCH_WINDOW_MAX,
    SEARCH_WINDOW_MIN,
)
from gallery_layout.errors import InvalidConfigError

if TYPE_CHECKING:  # pragma: no cover
    from gallery_layout.config import LayoutConfig


def ideal_search_window(
    container_width: float,
    target_row_height: float,
) -> int:
    """
    Return how many consecutive images one candidate row may contain.

    Square images at the target height give the estimate
    ``ceil(container_width / target_row_height)``. The window is the
    estimate plus a small buffer, limited to a multiple of the estimate
    and to an absolute maximum, and never below the floor.
    """
    if not math.isfinite(container_width) or container_width <= 0:
        msg = (
            "container_width must be positive and finite, "
            f"got {container_width}"
        )
        raise InvalidConfigError(msg)
    if not math.isfinite(target_row_height) or target_row_height <= 0:
        msg = (
            "target_row_height must be positive and finite, "
            f"got {target_row_height}"
        )
        raise InvalidConfigError(msg)

    # the window never exceeds the hard cap, so clamp before ceil()
    estimate = math.ceil(
        min(container_width / target_row_height, SEARCH_WINDOW_MAX),
    )
    window = min(
        estimate + SEARCH_WINDOW_BUFFER,
        estimate * SEARCH_WINDOW_CAP_FACTOR,
        SEARCH_WINDOW_MAX,
    )
    return max(window, SEARCH_WINDOW_MIN)


def resolve_search_window(config: LayoutConfig) -> int:
    """Return the configured window, or the ideal one when unset."""
    if config.search_window is not None:
        return config.search_window
    return ideal_search_window(
        config.container_width, config.target_row_height,
    )


__all__ = ["ideal_search_window", "resolve_search_window"]
