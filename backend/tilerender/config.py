"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    tilerender_env: str = "development"
    tilerender_log_level: str = "info"

    # Output raster
    tilerender_width: int = 2000
    tilerender_height: int = 2000

    # Labels; an empty path selects Pillow's bundled font
    tilerender_font_path: str = ""
    tilerender_font_size: int = 12

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
