"""Geometric descriptor: area, bbox, aspect, extent, perimeter, circularity.

Outlines below the noise floor are dropped here and never become detections.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import NDArray

from app.engine.config import DetectorConfig
from app.engine.types import BoundingBox
from app.utils.geometry import (
    as_points,
    circularity,
    closed_perimeter,
    pixel_bbox,
    signed_area,
)


@dataclass(frozen=True)
class ShapeDescriptor:
    area: float
    bounding_box: BoundingBox
    aspect_ratio: float
    extent: float
    perimeter: float
    circularity: float

    @classmethod
    def from_measurements(
        cls, area: float, bounding_box: BoundingBox, perimeter: float
    ) -> ShapeDescriptor:
        width = bounding_box.width
        height = bounding_box.height
        return cls(
            area=area,
            bounding_box=bounding_box,
            aspect_ratio=width / height,
            extent=area / (width * height),
            perimeter=perimeter,
            circularity=circularity(area, perimeter),
        )


def describe(
    outline: NDArray,
    min_area: float = DetectorConfig.min_contour_area,
) -> ShapeDescriptor | None:
    """Measure one closed outline, or return None when it is noise."""
    points = as_points(outline)
    area = abs(signed_area(points))
    if area < min_area:
        return None

    x, y, width, height = pixel_bbox(points)
    return ShapeDescriptor.from_measurements(
        area=area,
        bounding_box=BoundingBox(x, y, width, height),
        perimeter=closed_perimeter(points),
    )
