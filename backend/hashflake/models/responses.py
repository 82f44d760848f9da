"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from hashflake.models.snowflake import Branch


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class SnowflakeResponse(BaseModel):
    fragment: str
    branches: list[Branch] = Field(default_factory=list)
    hexagon_size: float | None = None
    svg: str = ""
    fallback: bool = False


class ValidateResponse(BaseModel):
    valid: bool
    arm_count: int = 0
    path_count: int = 0
    deviation: float = 0.0
    issues: list[str] = Field(default_factory=list)


class SessionResponse(BaseModel):
    state: str
    fragment: str
    branches: list[Branch] = Field(default_factory=list)
    svg: str = ""
