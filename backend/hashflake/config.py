"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    hashflake_env: str = "development"
    hashflake_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Rendering
    view_box_size: int = 2000
    default_title: str = "Snowflake"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
