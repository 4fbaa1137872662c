"""Value types produced by the per-frame pipeline.

A frame's detections are immutable and fully replaced on the next frame;
nothing here is carried from one frame to another.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.engine.labels import Label

if TYPE_CHECKING:
    from app.engine.descriptors import ShapeDescriptor


@dataclass(frozen=True)
class BoundingBox:
    """Integer axis-aligned rectangle, top-left origin."""

    x: int
    y: int
    width: int
    height: int

    @property
    def x2(self) -> int:
        return self.x + self.width

    @property
    def y2(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Detection:
    label: Label
    bounding_box: BoundingBox
    area: float
    aspect_ratio: float
    extent: float
    circularity: float
    confidence: float

    @property
    def center(self) -> tuple[float, float]:
        return self.bounding_box.center

    @classmethod
    def from_descriptor(
        cls, label: Label, descriptor: ShapeDescriptor, confidence: float
    ) -> Detection:
        return cls(
            label=label,
            bounding_box=descriptor.bounding_box,
            area=descriptor.area,
            aspect_ratio=descriptor.aspect_ratio,
            extent=descriptor.extent,
            circularity=descriptor.circularity,
            confidence=confidence,
        )

    def to_dict(self) -> dict[str, Any]:
        cx, cy = self.center
        return {
            "label": self.label.value,
            "display_name": self.label.display_name,
            "color": self.label.color,
            "bounding_box": {
                "x": self.bounding_box.x,
                "y": self.bounding_box.y,
                "width": self.bounding_box.width,
                "height": self.bounding_box.height,
            },
            "area": round(self.area, 2),
            "aspect_ratio": round(self.aspect_ratio, 4),
            "extent": round(self.extent, 4),
            "circularity": round(self.circularity, 4),
            "confidence": round(self.confidence, 4),
            "center": {"x": cx, "y": cy},
        }
