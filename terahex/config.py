"""Validated settings describing how a hex grid sits on the plane."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GridSettings(BaseModel):
    """Size, rotation and origin of a hex grid in plane units."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    cell_size: float = Field(default=1.0, gt=0.0, allow_inf_nan=False)
    rotation: float = Field(default=0.0, allow_inf_nan=False)
    origin_x: float = Field(default=0.0, allow_inf_nan=False)
    origin_y: float = Field(default=0.0, allow_inf_nan=False)

    @classmethod
    def from_toml(cls, path: str | Path) -> GridSettings:
        """Load settings from a TOML file.

        The ``[grid]`` table is used when present, otherwise the top-level
        table. Missing keys fall back to the defaults.
        """

        with Path(path).open("rb") as handle:
            data: dict[str, Any] = tomllib.load(handle)
        table = data.get("grid", data)
        if not isinstance(table, dict):
            raise TypeError("grid settings must be a table")
        return cls.model_validate(table)
