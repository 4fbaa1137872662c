"""Non-maximum suppression over bounding boxes, then rank and truncate.

Suppression walks detections in discovery order and keeps the first of an
overlapping cluster, whatever its confidence. Ranking only reorders the
survivors afterwards.
"""

from __future__ import annotations

from collections.abc import Sequence

from app.engine.config import DetectorConfig
from app.engine.types import BoundingBox, Detection


def _overlap_area(a: BoundingBox, b: BoundingBox) -> int:
    x_overlap = min(a.x2, b.x2) - max(a.x, b.x)
    y_overlap = min(a.y2, b.y2) - max(a.y, b.y)
    if x_overlap <= 0 or y_overlap <= 0:
        return 0
    return x_overlap * y_overlap


def iou(a: BoundingBox, b: BoundingBox) -> float:
    """Intersection over union; 0.0 for disjoint or edge-touching boxes."""
    intersection = _overlap_area(a, b)
    if intersection == 0:
        return 0.0
    union = a.area + b.area - intersection
    return intersection / union


def suppress_overlaps(
    detections: Sequence[Detection],
    threshold: float = DetectorConfig.overlap_threshold,
) -> list[Detection]:
    """Drop any detection whose IoU with an already-kept one is > threshold."""
    kept: list[Detection] = []
    for candidate in detections:
        box = candidate.bounding_box
        if any(iou(box, other.bounding_box) > threshold for other in kept):
            continue
        kept.append(candidate)
    return kept


def rank_detections(
    detections: Sequence[Detection],
    limit: int = DetectorConfig.max_detections,
) -> list[Detection]:
    """Stable sort by confidence, highest first, truncated to ``limit``."""
    ranked = sorted(detections, key=lambda d: d.confidence, reverse=True)
    return ranked[:limit]


def non_max_suppression(
    detections: Sequence[Detection],
    threshold: float = DetectorConfig.overlap_threshold,
    limit: int = DetectorConfig.max_detections,
) -> list[Detection]:
    return rank_detections(suppress_overlaps(detections, threshold), limit)
