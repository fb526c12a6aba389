"""
Justified row layout.

Images are split into contiguous rows by a shortest-path search over the
possible row breaks. Node ``i`` means "every image before ``i`` has been
placed" and the edge ``i -> j`` means images ``[i, j)`` share a row. A
row is scaled to fill the container exactly, and its cost is the squared
difference between the resulting height and the target row height.
"""

from __future__ import annotations

import math
from itertools import pairwise
from typing import TYPE_CHECKING, Any

import numpy as np

from gallery_layout.config import coerce_config
from gallery_layout.constants import DIRECTION_ROW
from gallery_layout.errors import InvalidConfigError
from gallery_layout.layout.aspect import normalize_images
from gallery_layout.layout.result import build_layout_result
from gallery_layout.layout.search import resolve_search_window
from gallery_layout.logging_utils import logger
from gallery_layout.type_defs import PlacementRecord

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Mapping, Sequence

    from gallery_layout.config import LayoutConfig
    from gallery_layout.type_defs import AspectImage, LayoutResult, RowBounds


def row_height(
    aspect_ratios: Sequence[float],
    container_width: float,
    margin: float,
) -> float:
    """Height at which a row of ``aspect_ratios`` exactly fills the width."""
    usable = container_width - 2 * margin * len(aspect_ratios)
    return usable / math.fsum(aspect_ratios)


def row_cost(
    aspect_ratios: Sequence[float],
    container_width: float,
    target_row_height: float,
    margin: float,
) -> float:
    """Squared deviation of a filled row's height from the target."""
    height = row_height(aspect_ratios, container_width, margin)
    return (height - target_row_height) ** 2


def find_row_breaks(
    aspect_ratios: Sequence[float],
    *,
    container_width: float,
    target_row_height: float,
    margin: float,
    search_window: int,
) -> list[int]:
    """
    Return the row boundaries ``[0, b1, ..., n]`` of the cheapest layout.

    ``best[j]`` is the minimum total cost of laying out images ``[0, j)``.
    Candidate predecessors of ``j`` are evaluated together over prefix
    sums of the aspect ratios; ``argmin`` returns the first minimum, so
    ties go to the smallest start index (the longest row). Rows whose
    margins alone use up the container width are not candidates.

    The edge ``j - 1 -> j`` always exists, so every node is reachable.
    """
    n = len(aspect_ratios)
    if n == 0:
        return [0]

    prefix = np.concatenate(([0.0], np.cumsum(aspect_ratios, dtype=float)))
    best = np.full(n + 1, np.inf)
    best[0] = 0.0
    previous = np.zeros(n + 1, dtype=np.intp)

    for stop in range(1, n + 1):
        starts = np.arange(max(0, stop - search_window), stop)
        usable = container_width - 2 * margin * (stop - starts)
        heights = usable / (prefix[stop] - prefix[starts])
        costs = np.where(
            usable > 0, (heights - target_row_height) ** 2, np.inf,
        )
        totals = best[starts] + costs
        pick = int(np.argmin(totals))
        best[stop] = totals[pick]
        previous[stop] = starts[pick]

    breaks = [n]
    while breaks[-1] > 0:
        breaks.append(int(previous[breaks[-1]]))
    breaks.reverse()
    logger.debug(
        "Row search: %d images, window %d, total cost %.3f",
        n, search_window, best[n],
    )
    return breaks


def _place_row(  # noqa: PLR0913
    row: Sequence[AspectImage],
    *,
    row_index: int,
    top: float,
    height: float,
    margin: float,
    justified: bool,
) -> list[PlacementRecord]:
    placements: list[PlacementRecord] = []
    left = 0.0
    for item in row:
        width = height * item.aspect_ratio
        placements.append(
            PlacementRecord(
                index=item.index,
                left=left,
                top=top,
                width=width,
                height=height,
                group=row_index,
                source=item.source,
                justified=justified,
            ),
        )
        left += width + 2 * margin
    return placements


def _capped_last_row_height(
    row: Sequence[AspectImage],
    height: float,
    cfg: LayoutConfig,
) -> float:
    """Limit a short final row to ``last_row_max_scale`` times the target."""
    if cfg.last_row_max_scale is None:
        return height
    natural_width = (
        cfg.target_row_height * math.fsum(i.aspect_ratio for i in row)
        + 2 * cfg.margin * len(row)
    )
    if natural_width >= cfg.container_width:
        return height
    return min(height, cfg.target_row_height * cfg.last_row_max_scale)


def compute_row_layout(
    images: Iterable[Any],
    config: LayoutConfig | Mapping[str, Any],
) -> LayoutResult:
    """
    Lay out ``images`` in justified rows for ``config.container_width``.

    Every row but the last fills the container width exactly. A last row
    too short to fill the width at the target height is not stretched
    beyond ``last_row_max_scale``; such rows are marked
    ``justified=False``. A lone image always fills the container.
    """
    cfg = coerce_config(config)
    items = normalize_images(images)
    if cfg.container_width <= 2 * cfg.margin:
        msg = (
            f"container_width {cfg.container_width} leaves no room for an "
            f"image with margin {cfg.margin}"
        )
        raise InvalidConfigError(msg)
    window = resolve_search_window(cfg)

    ratios = [item.aspect_ratio for item in items]
    breaks = find_row_breaks(
        ratios,
        container_width=cfg.container_width,
        target_row_height=cfg.target_row_height,
        margin=cfg.margin,
        search_window=window,
    )
    rows: list[RowBounds] = list(pairwise(breaks))

    placements: list[PlacementRecord] = []
    offset = 0.0
    for row_index, (start, stop) in enumerate(rows):
        row = items[start:stop]
        filled = row_height(ratios[start:stop], cfg.container_width, cfg.margin)
        height = filled
        if row_index == len(rows) - 1 and len(items) > 1:
            height = _capped_last_row_height(row, filled, cfg)
        placements.extend(
            _place_row(
                row,
                row_index=row_index,
                top=offset + cfg.margin,
                height=height,
                margin=cfg.margin,
                justified=height == filled,
            ),
        )
        offset += height + cfg.extra_height + 2 * cfg.margin

    logger.debug(
        "Row layout: %d images in %d rows, container height %.1f",
        len(items), len(rows), offset,
    )
    return build_layout_result(
        DIRECTION_ROW,
        placements,
        image_count=len(items),
        container_height=offset,
        rows=rows,
    )


__all__ = [
    "compute_row_layout",
    "find_row_breaks",
    "row_cost",
    "row_height",
]
