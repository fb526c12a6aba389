"""
Layout engine split into aspect normalization, search sizing, the two
packers and the shared result builder.

The most commonly used entry points are exposed directly.
"""

from __future__ import annotations

from . import aspect, columns, justified, result, search
from .aspect import normalize_image, normalize_images
from .columns import column_width, compute_column_layout
from .justified import compute_row_layout, find_row_breaks, row_cost, row_height
from .result import build_layout_result
from .search import ideal_search_window, resolve_search_window

__all__ = [
    "aspect",
    "build_layout_result",
    "column_width",
    "columns",
    "compute_column_layout",
    "compute_row_layout",
    "find_row_breaks",
    "ideal_search_window",
    "justified",
    "normalize_image",
    "normalize_images",
    "resolve_search_window",
    "result",
    "row_cost",
    "row_height",
    "search",
]
