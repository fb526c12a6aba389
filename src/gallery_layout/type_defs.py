"""
Defines shared types and records for the gallery layout engine.

Centralizes the input descriptor and the placement/result records so
both packers and the serialisation helpers agree on one shape.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator

Direction = Literal["row", "column"]
RowBounds = tuple[int, int]


@dataclass(frozen=True, slots=True)
class ImageDescriptor:
    """Caller-supplied image size with opaque metadata."""

    width: float
    height: float
    meta: Any = None


@dataclass(frozen=True, slots=True)
class AspectImage:
    """Validated image dimensions with the computed aspect ratio."""

    index: int
    width: float
    height: float
    aspect_ratio: float
    source: Any


@dataclass(frozen=True, slots=True)
class PlacementRecord:
    """
    Position and display size of one image inside the container.

    ``group`` is the row index in row mode and the column index in
    column mode. ``height`` excludes any per-item extra height.
    """

    index: int
    left: float
    top: float
    width: float
    height: float
    group: int
    source: Any
    justified: bool = True


@dataclass(frozen=True, slots=True)
class LayoutResult:
    """Ordered placements plus the container height they require."""

    direction: Direction
    placements: tuple[PlacementRecord, ...] = ()
    container_height: float = 0.0
    rows: tuple[RowBounds, ...] = ()
    column_heights: tuple[float, ...] = ()

    def __len__(self) -> int:
        return len(self.placements)

    def __iter__(self) -> Iterator[PlacementRecord]:
        return iter(self.placements)

    def group(self, group_index: int) -> list[PlacementRecord]:
        """Return the placements of one row or column, in input order."""
        return [p for p in self.placements if p.group == group_index]
