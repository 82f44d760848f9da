"""Snowflake configuration models."""

from __future__ import annotations

from pydantic import BaseModel, Field

_HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"


class Branch(BaseModel):
    """One offshoot of an arm: sprouts at ``position``, extends ``length``."""

    length: float = Field(..., ge=0)
    position: float = Field(..., ge=0)

    model_config = {"frozen": True}


class Configuration(BaseModel):
    """Ordered branch list. Replaced wholesale, never edited in place."""

    branches: tuple[Branch, ...] = ()

    model_config = {"frozen": True}

    @property
    def hexagon_size(self) -> float | None:
        if not self.branches:
            return None
        return min(b.position for b in self.branches)


class DrawSettings(BaseModel):
    """Display and generation tuning. Values outside the ranges are rejected."""

    stroke_width: int = Field(default=10, ge=1, le=100, description="Border stroke width")
    branch_width: int = Field(default=50, ge=1, le=250, description="Full width of a branch")
    max_branches: int = Field(default=6, ge=1, le=20, description="Upper bound for derived branch count")
    rotate: bool = Field(default=False, description="Spin the whole figure")
    size: int = Field(default=500, ge=1, le=2000, description="Radial world scale of an arm")
    border: bool = Field(default=False, description="Draw a border layer under the fill")
    fill_color: str = Field(default="#ffffff", pattern=_HEX_COLOR)
    border_color: str = Field(default="#000000", pattern=_HEX_COLOR)

    model_config = {"frozen": True}
