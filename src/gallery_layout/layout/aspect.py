"""Normalize caller image descriptors into validated aspect records."""

from __future__ import annotations

import math
from collections.abc import Mapping
from numbers import Real
from typing import TYPE_CHECKING, Any

from gallery_layout.errors import InvalidDimensionError
from gallery_layout.type_defs import AspectImage

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable


def _read_dimension(raw: Any, name: str) -> Any:
    """Fetch ``name`` from a mapping key or an attribute."""
    if isinstance(raw, Mapping):
        return raw.get(name)
    return getattr(raw, name, None)


def _validate_dimension(value: Any, name: str, index: int) -> float:
    if value is None:
        msg = f"{name} is missing"
        raise InvalidDimensionError(index, msg)
    # bool is a Real subclass but never a size
    if isinstance(value, bool) or not isinstance(value, Real):
        msg = f"{name} must be a number, got {type(value).__name__}"
        raise InvalidDimensionError(index, msg)
    number = float(value)
    if not math.isfinite(number) or number <= 0:
        msg = f"{name} must be a positive finite number, got {value!r}"
        raise InvalidDimensionError(index, msg)
    return number


def normalize_image(raw: Any, index: int = 0) -> AspectImage:
    """
    Validate one descriptor and compute its aspect ratio.

    ``raw`` may be an :class:`~gallery_layout.type_defs.ImageDescriptor`,
    a mapping with ``width``/``height`` keys or any object exposing those
    attributes. It is kept unchanged as the record's ``source``.
    """
    width = _validate_dimension(_read_dimension(raw, "width"), "width", index)
    height = _validate_dimension(
        _read_dimension(raw, "height"), "height", index,
    )
    aspect_ratio = width / height
    if not math.isfinite(aspect_ratio) or aspect_ratio <= 0:
        msg = f"aspect ratio {width!r}/{height!r} is out of range"
        raise InvalidDimensionError(index, msg)
    return AspectImage(
        index=index,
        width=width,
        height=height,
        aspect_ratio=aspect_ratio,
        source=raw,
    )


def normalize_images(images: Iterable[Any]) -> list[AspectImage]:
    """Normalize a sequence of descriptors, failing on the first bad one."""
    return [normalize_image(raw, index) for index, raw in enumerate(images)]


__all__ = ["normalize_image", "normalize_images"]
