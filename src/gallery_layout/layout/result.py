"""Assembly and coverage check of packer output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gallery_layout.errors import IncompletePackingError
from gallery_layout.type_defs import LayoutResult

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from gallery_layout.type_defs import Direction, PlacementRecord, RowBounds


def _check_coverage(
    placements: Sequence[PlacementRecord],
    image_count: int,
) -> None:
    """Require exactly one placement per input index, in input order."""
    if len(placements) != image_count:
        msg = (
            f"expected {image_count} placements, "
            f"packer produced {len(placements)}"
        )
        raise IncompletePackingError(msg)
    for position, placement in enumerate(placements):
        if placement.index != position:
            msg = (
                f"placement {position} refers to image {placement.index}; "
                "every image must be placed once, in input order"
            )
            raise IncompletePackingError(msg)


def build_layout_result(  # noqa: PLR0913
    direction: Direction,
    placements: Sequence[PlacementRecord],
    *,
    image_count: int,
    container_height: float,
    rows: Sequence[RowBounds] = (),
    column_heights: Sequence[float] = (),
) -> LayoutResult:
    """
    Freeze packer output into a ``LayoutResult``.

    Raises :class:`IncompletePackingError` when the placements do not
    cover every input image exactly once.
    """
    _check_coverage(placements, image_count)
    return LayoutResult(
        direction=direction,
        placements=tuple(placements),
        container_height=float(container_height),
        rows=tuple(rows),
        column_heights=tuple(float(h) for h in column_heights),
    )


__all__ = ["build_layout_result"]
