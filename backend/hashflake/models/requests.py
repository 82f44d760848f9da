"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from hashflake.models.snowflake import DrawSettings


class GenerateRequest(BaseModel):
    seed: str = Field(default="", description="Seed text; empty picks a random snowflake")
    draw_settings: DrawSettings = Field(default_factory=DrawSettings)


class RenderRequest(BaseModel):
    fragment: str = Field(default="", description="Persisted position:length,... fragment")
    draw_settings: DrawSettings = Field(default_factory=DrawSettings)


class ValidateRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code of a rendered snowflake")


class SessionSeedRequest(BaseModel):
    seed: str = Field(..., description="Seed text submitted by the user")


class SessionFragmentRequest(BaseModel):
    fragment: str = Field(..., description="Fragment after an external navigation")


class SessionSettingsRequest(BaseModel):
    draw_settings: DrawSettings
