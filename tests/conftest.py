"""
Test configuration and shared fixtures for gallery_layout.

Provides image descriptor lists with known aspect ratios and factories
for writing JSON image lists and TOML settings files into temporary
directories.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import tomlkit


def sizes_to_images(sizes: list[tuple[float, float]]) -> list[dict[str, Any]]:
    """Turn ``(width, height)`` pairs into descriptors with an id key."""
    return [
        {"id": f"img-{i}", "width": w, "height": h}
        for i, (w, h) in enumerate(sizes)
    ]


@pytest.fixture
def example_row_images() -> list[dict[str, Any]]:
    """Three images with aspect ratios 2.0, 1.0 and 1.5."""
    return sizes_to_images([(2000, 1000), (1000, 1000), (1500, 1000)])


@pytest.fixture
def example_column_images() -> list[dict[str, Any]]:
    """Three images with aspect ratios 1.0, 0.5 and 1.0."""
    return sizes_to_images([(1, 1), (1, 2), (1, 1)])


@pytest.fixture
def mixed_images() -> list[dict[str, Any]]:
    """A varied set of landscape, portrait and square images."""
    return sizes_to_images([
        (1600, 900), (800, 1200), (1000, 1000), (1200, 800),
        (600, 900), (2000, 1000), (900, 1600), (1500, 1000),
        (1000, 750), (640, 480), (480, 640), (1920, 1080),
    ])


@pytest.fixture
def make_square_images() -> Callable[[int], list[dict[str, Any]]]:
    """Build ``n`` square image descriptors."""

    def _make(n: int) -> list[dict[str, Any]]:
        return sizes_to_images([(500, 500)] * n)

    return _make


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write ``data`` as JSON to ``tmp_path / name`` and return the path."""

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_toml(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write a TOML document built from ``data`` and return its path."""

    def _write(data: dict[str, Any]) -> Path:
        doc = tomlkit.document()
        doc.update(data)
        path = tmp_path / "gallery.toml"
        path.write_text(tomlkit.dumps(doc), encoding="utf-8")
        return path

    return _write
