"""POST /api/detect — run the detection pipeline on one uploaded frame."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from app.config import Settings
from app.dependencies import get_detector_config, get_settings
from app.engine.config import DetectorConfig
from app.engine.detector import ObjectDetector
from app.engine.errors import DetectionError, InvalidFrameError
from app.engine.overlay import render_overlay
from app.engine.summary import detection_stats, label_tags
from app.models.requests import DetectRequest
from app.models.responses import DetectResponse
from app.utils.imaging import decode_base64_image

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/detect", response_model=DetectResponse)
def detect(
    req: DetectRequest,
    config: DetectorConfig = Depends(get_detector_config),
    app_settings: Settings = Depends(get_settings),
) -> DetectResponse:
    start = time.perf_counter()

    try:
        frame = decode_base64_image(req.image, max_side=app_settings.max_frame_side)
    except InvalidFrameError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    height, width = frame.shape[:2]

    errors: list[str] = []

    def _collect(error: DetectionError) -> None:
        errors.append(f"{error.kind.value}: {error}")

    # One detector per request: working buffers are never shared between calls
    with ObjectDetector(config=config, on_error=_collect) as detector:
        try:
            detector.initialize(width, height)
        except InvalidFrameError as e:
            raise HTTPException(status_code=422, detail=str(e)) from e

        detections = detector.process_frame(frame)
        summary = detector.get_detection_summary()
        description = detector.get_scene_description()

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Detected %d objects in %dx%d frame (%.0fms)", len(detections), width, height, elapsed
    )

    return DetectResponse(
        width=width,
        height=height,
        detections=[d.to_dict() for d in detections],
        summary=summary.to_dict(),
        description=description,
        stats=detection_stats(summary),
        tags=label_tags(summary),
        overlay_svg=render_overlay(detections, width, height) if req.include_overlay else None,
        errors=errors,
        processing_time_ms=round(elapsed, 1),
    )
