"""
Configuration schema and loader for the gallery layout engine.

Defines the Pydantic models consumed by the packers and by the CLI, a
TOML-based settings loader, and the helpers that turn container
dependent settings into a plain, fully resolved ``LayoutConfig``.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gallery_layout.config_defaults import (
    DEFAULT_DIRECTION,
    DEFAULT_EXTRA_HEIGHT,
    DEFAULT_LAST_ROW_MAX_SCALE,
    DEFAULT_MARGIN,
    DEFAULT_TARGET_ROW_HEIGHT,
)
from gallery_layout.constants import (
    COLUMN_BREAKPOINTS,
    DEFAULT_COLUMN_COUNT,
    DIRECTION_COLUMN,
)
from gallery_layout.errors import InvalidConfigError
from gallery_layout.type_defs import Direction

PositiveInt = Annotated[int, Field(ge=1)]
PositiveFloat = Annotated[float, Field(gt=0)]

SETTINGS_TABLE = "gallery"

# Keys shared by GallerySettings and LayoutConfig
_LAYOUT_KEYS = (
    "margin",
    "target_row_height",
    "search_window",
    "columns",
    "extra_height",
    "last_row_max_scale",
)


class LayoutConfig(BaseModel):
    """
    Fully resolved inputs for one layout computation.

    ``search_window`` and ``last_row_max_scale`` only affect row mode and
    ``columns`` only column mode. An unset ``search_window`` is derived
    from the container width and target row height. Infinite and NaN
    values are rejected.

    Constructing the model directly raises pydantic's ``ValidationError``
    on bad values. Pass a mapping to the packers, or use
    :func:`coerce_config`, to get :class:`InvalidConfigError` instead.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    container_width: float = Field(gt=0)
    margin: float = Field(DEFAULT_MARGIN, ge=0)
    target_row_height: float = Field(DEFAULT_TARGET_ROW_HEIGHT, gt=0)
    search_window: PositiveInt | None = None
    columns: PositiveInt | None = None
    extra_height: float = Field(DEFAULT_EXTRA_HEIGHT, ge=0)
    last_row_max_scale: PositiveFloat | None = DEFAULT_LAST_ROW_MAX_SCALE


class GallerySettings(BaseModel):
    """
    Container-independent gallery settings, as stored in a config file.

    Mirrors the ``[gallery]`` table of a TOML file. Call :meth:`resolve`
    once the container width is known.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    direction: Direction = DEFAULT_DIRECTION
    margin: float = Field(DEFAULT_MARGIN, ge=0)
    target_row_height: float = Field(DEFAULT_TARGET_ROW_HEIGHT, gt=0)
    search_window: PositiveInt | None = None
    columns: PositiveInt | None = None
    extra_height: float = Field(DEFAULT_EXTRA_HEIGHT, ge=0)
    last_row_max_scale: PositiveFloat | None = DEFAULT_LAST_ROW_MAX_SCALE

    def resolve(self, container_width: float) -> LayoutConfig:
        """
        Build the ``LayoutConfig`` for a concrete container width.

        In column mode an unset column count is chosen from the default
        width breakpoints.
        """
        values: dict[str, Any] = {
            key: getattr(self, key) for key in _LAYOUT_KEYS
        }
        if self.direction == DIRECTION_COLUMN and self.columns is None:
            values["columns"] = default_columns(container_width)
        return coerce_config({"container_width": container_width, **values})


def default_columns(container_width: float) -> int:
    """Return the breakpoint column count for ``container_width``."""
    for min_width, columns in COLUMN_BREAKPOINTS:
        if container_width >= min_width:
            return columns
    return DEFAULT_COLUMN_COUNT


def coerce_config(config: LayoutConfig | Mapping[str, Any]) -> LayoutConfig:
    """
    Return ``config`` as a validated ``LayoutConfig``.

    Plain mappings are validated here; schema violations surface as
    :class:`InvalidConfigError` so engine callers see a single error
    kind for bad configuration.
    """
    if isinstance(config, LayoutConfig):
        return config
    if not isinstance(config, Mapping):
        msg = (
            "config must be a LayoutConfig or a mapping, "
            f"got {type(config).__name__}"
        )
        raise InvalidConfigError(msg)
    try:
        return LayoutConfig.model_validate(dict(config))
    except ValidationError as exc:
        raise InvalidConfigError(str(exc)) from exc


def build_settings_from_cli(
    cli_args: Mapping[str, Any],
    base_settings: GallerySettings | None = None,
) -> GallerySettings:
    """
    Overlay explicitly provided CLI values on top of base settings.

    Keys that are missing or ``None`` in ``cli_args`` keep the value
    from ``base_settings`` (or the defaults when there is none).
    """
    settings = base_settings or GallerySettings.model_validate({})
    overrides = {
        key: cli_args[key]
        for key in ("direction", *_LAYOUT_KEYS)
        if cli_args.get(key) is not None
    }
    if not overrides:
        return settings
    return GallerySettings.model_validate(
        {**settings.model_dump(), **overrides},
    )


class ConfigLoader:
    """
    Loads a TOML settings file into a typed ``GallerySettings`` object.

    Settings are read from the ``[gallery]`` table when present, or from
    the top level of the document otherwise. Missing fields fall back to
    defaults.
    """

    @staticmethod
    def load(path: str | Path) -> GallerySettings:
        """Load and validate gallery settings from a TOML file."""
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f).unwrap()

        table = doc.get(SETTINGS_TABLE, doc)
        return GallerySettings.model_validate(table)
