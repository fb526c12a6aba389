"""Helpers for accessing the installed package version."""

from __future__ import annotations

import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path

from gallery_layout.logging_utils import logger

DISTRIBUTION_NAME = "gallery-layout"
FALLBACK_VERSION = "0.0.0"


def _pyproject_version(start: Path) -> str | None:
    """Return ``project.version`` from the nearest pyproject.toml above."""
    for parent in start.resolve().parents:
        pyproject_path = parent / "pyproject.toml"
        if not pyproject_path.is_file():
            continue
        try:
            with pyproject_path.open("rb") as handle:
                data = tomllib.load(handle)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Error reading %s: %s", pyproject_path, exc)
            return None
        version = data.get("project", {}).get("version")
        if isinstance(version, str) and version.strip():
            return version.strip()
        return None
    return None


def resolve_project_version() -> str:
    """
    Return the installed distribution version.

    Source checkouts fall back to the version in pyproject.toml, and
    finally to ``0.0.0``.
    """
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        pass
    return _pyproject_version(Path(__file__)) or FALLBACK_VERSION
