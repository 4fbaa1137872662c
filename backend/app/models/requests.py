"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DetectRequest(BaseModel):
    image: str = Field(..., description="Base64 image bytes or a data: URL (PNG, JPEG, ...)")
    include_overlay: bool = Field(
        default=False,
        description="Also return an SVG overlay sized to the frame",
    )
