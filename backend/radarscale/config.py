"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    radarscale_env: str = "development"
    radarscale_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Viewport used when a request does not send one
    default_viewport_width: float = 800.0
    default_viewport_height: float = 600.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
