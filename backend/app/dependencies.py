"""FastAPI dependency injection."""

from __future__ import annotations

from app.config import Settings, settings
from app.engine.config import DetectorConfig


def get_settings() -> Settings:
    return settings


def get_detector_config() -> DetectorConfig:
    return DetectorConfig(
        min_contour_area=settings.min_contour_area,
        overlap_threshold=settings.overlap_threshold,
        max_detections=settings.max_detections,
    )
