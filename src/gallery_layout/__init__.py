"""Public package exports for the gallery layout engine."""

from __future__ import annotations

from .api import compute_layout, layout_to_dict
from .config import ConfigLoader, GallerySettings, LayoutConfig
from .errors import (
    IncompletePackingError,
    InvalidConfigError,
    InvalidDimensionError,
    LayoutError,
)
from .layout import (
    compute_column_layout,
    compute_row_layout,
    ideal_search_window,
)
from .type_defs import ImageDescriptor, LayoutResult, PlacementRecord

__all__ = [
    "ConfigLoader",
    "GallerySettings",
    "ImageDescriptor",
    "IncompletePackingError",
    "InvalidConfigError",
    "InvalidDimensionError",
    "LayoutConfig",
    "LayoutError",
    "LayoutResult",
    "PlacementRecord",
    "compute_column_layout",
    "compute_layout",
    "compute_row_layout",
    "ideal_search_window",
    "layout_to_dict",
]
