"""FrameSight per-frame detection engine."""

from app.engine.config import DetectorConfig
from app.engine.detector import ObjectDetector
from app.engine.errors import (
    DetectionError,
    ErrorKind,
    ExtractionError,
    InternalError,
    InvalidFrameError,
)
from app.engine.labels import Label
from app.engine.summary import SceneSummary
from app.engine.types import BoundingBox, Detection

__all__ = [
    "DetectorConfig",
    "ObjectDetector",
    "DetectionError",
    "ErrorKind",
    "ExtractionError",
    "InternalError",
    "InvalidFrameError",
    "Label",
    "SceneSummary",
    "BoundingBox",
    "Detection",
]
