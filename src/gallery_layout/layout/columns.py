"""
Masonry column layout.

Greedy assignment to the shortest column, in input order. This does not
minimise the tallest column globally; reordering would be needed for
that, and display order is fixed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gallery_layout.config import coerce_config
from gallery_layout.constants import DIRECTION_COLUMN
from gallery_layout.errors import InvalidConfigError
from gallery_layout.layout.aspect import normalize_images
from gallery_layout.layout.result import build_layout_result
from gallery_layout.logging_utils import logger
from gallery_layout.type_defs import PlacementRecord

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Mapping

    from gallery_layout.config import LayoutConfig
    from gallery_layout.type_defs import LayoutResult


def column_width(container_width: float, columns: int, margin: float) -> float:
    """Return the width of one column, rejecting non-positive results."""
    if columns <= 0:
        msg = f"columns must be positive, got {columns}"
        raise InvalidConfigError(msg)
    width = (container_width - 2 * margin * columns) / columns
    if width <= 0:
        msg = (
            f"container_width {container_width} is too small for "
            f"{columns} columns with margin {margin}"
        )
        raise InvalidConfigError(msg)
    return width


def compute_column_layout(
    images: Iterable[Any],
    config: LayoutConfig | Mapping[str, Any],
) -> LayoutResult:
    """
    Lay out ``images`` in ``config.columns`` equal-width columns.

    Each image goes to the column with the smallest accumulated height,
    the leftmost one on ties, and is scaled to the column width.
    """
    cfg = coerce_config(config)
    if cfg.columns is None:
        msg = "columns must be set for column layout"
        raise InvalidConfigError(msg)
    items = normalize_images(images)
    col_w = column_width(cfg.container_width, cfg.columns, cfg.margin)
    heights = [0.0] * cfg.columns

    placements: list[PlacementRecord] = []
    for item in items:
        # min() keeps the first minimum, i.e. the leftmost column
        col = min(range(cfg.columns), key=heights.__getitem__)
        height = col_w / item.aspect_ratio
        placements.append(
            PlacementRecord(
                index=item.index,
                left=col * (col_w + 2 * cfg.margin),
                top=heights[col] + cfg.margin,
                width=col_w,
                height=height,
                group=col,
                source=item.source,
            ),
        )
        heights[col] += height + 2 * cfg.margin + cfg.extra_height

    container_height = max(heights) if items else 0.0
    logger.debug(
        "Column layout: %d images in %d columns of %.1f px, "
        "container height %.1f",
        len(items), cfg.columns, col_w, container_height,
    )
    return build_layout_result(
        DIRECTION_COLUMN,
        placements,
        image_count=len(items),
        container_height=container_height,
        column_heights=heights,
    )


__all__ = ["column_width", "compute_column_layout"]
