"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    framesight_env: str = "development"
    framesight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Uploaded frames larger than this on either side are rejected
    max_frame_side: int = 4096

    # Detector overrides
    min_contour_area: float = 1500.0
    overlap_threshold: float = 0.5
    max_detections: int = 10

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
