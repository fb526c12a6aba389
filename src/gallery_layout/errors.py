"""Exception hierarchy raised by the layout engine."""

from __future__ import annotations


class LayoutError(ValueError):
    """Base class for all layout failures."""


class InvalidDimensionError(LayoutError):
    """An input image has a missing, non-numeric or non-positive size."""

    def __init__(self, index: int, message: str) -> None:
        super().__init__(f"Image {index}: {message}")
        self.index = index


class InvalidConfigError(LayoutError):
    """Layout configuration is unusable or yields non-positive sizes."""


class IncompletePackingError(LayoutError):
    """A packer did not produce exactly one placement per image."""
