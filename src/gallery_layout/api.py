"""
Layout API shared by the CLI, scripts and tests.

Dispatches a direction to the matching packer and converts results into
plain, JSON-serialisable mappings. Image descriptor files are JSON
arrays of objects carrying at least ``width`` and ``height``; all other
keys travel through the layout untouched.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from gallery_layout.constants import DIRECTION_COLUMN, DIRECTION_ROW
from gallery_layout.errors import InvalidConfigError
from gallery_layout.layout import compute_column_layout, compute_row_layout
from gallery_layout.type_defs import ImageDescriptor

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable

    from gallery_layout.config import LayoutConfig
    from gallery_layout.type_defs import Direction, LayoutResult, PlacementRecord

DIRECTION_CHOICES: tuple[Direction, ...] = (DIRECTION_ROW, DIRECTION_COLUMN)


def compute_layout(
    images: Iterable[Any],
    config: LayoutConfig | Mapping[str, Any],
    direction: Direction = DIRECTION_ROW,
) -> LayoutResult:
    """Run the row or column packer selected by ``direction``."""
    if direction == DIRECTION_ROW:
        return compute_row_layout(images, config)
    if direction == DIRECTION_COLUMN:
        return compute_column_layout(images, config)
    msg = f"direction must be one of {DIRECTION_CHOICES}, got {direction!r}"
    raise InvalidConfigError(msg)


def _source_to_dict(source: Any) -> Any:
    if isinstance(source, ImageDescriptor):
        return dataclasses.asdict(source)
    if isinstance(source, Mapping):
        return dict(source)
    return source


def placement_to_dict(placement: PlacementRecord) -> dict[str, Any]:
    """Return one placement as a plain mapping."""
    return {
        "index": placement.index,
        "left": placement.left,
        "top": placement.top,
        "width": placement.width,
        "height": placement.height,
        "group": placement.group,
        "justified": placement.justified,
        "source": _source_to_dict(placement.source),
    }


def layout_to_dict(result: LayoutResult) -> dict[str, Any]:
    """
    Return ``result`` as a JSON-friendly mapping.

    Row layouts carry their ``rows`` boundaries and column layouts their
    final ``column_heights``.
    """
    data: dict[str, Any] = {
        "direction": result.direction,
        "container_height": result.container_height,
    }
    if result.direction == DIRECTION_ROW:
        data["rows"] = [list(bounds) for bounds in result.rows]
    else:
        data["column_heights"] = list(result.column_heights)
    data["placements"] = [placement_to_dict(p) for p in result.placements]
    return data


def read_images(path: Path | str) -> list[dict[str, Any]]:
    """
    Read image descriptors from a JSON file.

    Raises ``FileNotFoundError`` for a missing file and ``ValueError``
    when the document is not an array of objects. Dimension checks are
    left to the layout engine.
    """
    images_path = Path(path)
    if not images_path.is_file():
        msg = f"Image list not found: {path}"
        raise FileNotFoundError(msg)
    with images_path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, list) or not all(
        isinstance(item, dict) for item in data
    ):
        msg = f"{path} must contain a JSON array of objects"
        raise ValueError(msg)
    return data


def write_layout(result: LayoutResult, path: Path | str | None = None) -> str:
    """Serialise ``result`` as indented JSON, writing it when ``path`` is set."""
    text = json.dumps(layout_to_dict(result), indent=2)
    if path is not None:
        Path(path).write_text(text + "\n", encoding="utf-8")
    return text


__all__ = [
    "DIRECTION_CHOICES",
    "compute_layout",
    "layout_to_dict",
    "placement_to_dict",
    "read_images",
    "write_layout",
]
