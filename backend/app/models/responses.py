"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    environment: str = "development"


class LabelInfo(BaseModel):
    label: str
    display_name: str
    color: str


class BoundingBoxModel(BaseModel):
    x: int
    y: int
    width: int
    height: int


class PointModel(BaseModel):
    x: float
    y: float


class DetectionModel(BaseModel):
    label: str
    display_name: str
    color: str
    bounding_box: BoundingBoxModel
    area: float
    aspect_ratio: float
    extent: float
    circularity: float
    confidence: float
    center: PointModel


class LabelStatsModel(BaseModel):
    count: int
    average_confidence: float


class SummaryModel(BaseModel):
    types: dict[str, LabelStatsModel] = Field(default_factory=dict)
    total_detections: int = 0
    average_confidence: float = 0.0


class LabelTagModel(BaseModel):
    label: str
    text: str
    confidence_pct: int
    color: str


class DetectResponse(BaseModel):
    width: int
    height: int
    detections: list[DetectionModel] = Field(default_factory=list)
    summary: SummaryModel = Field(default_factory=SummaryModel)
    description: str = "a general scene"
    stats: str = "No objects detected"
    tags: list[LabelTagModel] = Field(default_factory=list)
    overlay_svg: str | None = None
    errors: list[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0
