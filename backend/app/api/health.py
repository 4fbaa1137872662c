"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.config import Settings
from app.dependencies import get_settings
from app.engine.labels import Label
from app.models.responses import HealthResponse, LabelInfo

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(app_settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok", version="0.1.0", environment=app_settings.framesight_env
    )


@router.get("/labels", response_model=list[LabelInfo])
async def labels() -> list[LabelInfo]:
    return [
        LabelInfo(label=label.value, display_name=label.display_name, color=label.color)
        for label in Label
    ]
