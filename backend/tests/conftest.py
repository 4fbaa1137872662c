"""Shared test fixtures."""

from __future__ import annotations

import struct
import zlib

import numpy as np
import pytest

from app.engine.descriptors import ShapeDescriptor
from app.engine.labels import Label
from app.engine.types import BoundingBox, Detection

FRAME_W = 320
FRAME_H = 240


def rect_outline(x: int, y: int, w: int, h: int) -> np.ndarray:
    """Corner points of a rectangle covering pixels x..x+w-1, y..y+h-1.

    Bounding box is w×h; shoelace area is (w-1)×(h-1).
    """
    return np.array(
        [[x, y], [x, y + h - 1], [x + w - 1, y + h - 1], [x + w - 1, y]],
        dtype=np.int32,
    )


def png_header_only(width: int, height: int) -> bytes:
    """A 1-bit grayscale PNG that declares its size but carries no real pixels.

    Enough for ``Image.open`` to read the size; decoding the pixels would fail.
    """

    def chunk(tag: bytes, data: bytes) -> bytes:
        crc = zlib.crc32(tag + data) & 0xFFFFFFFF
        return struct.pack(">I", len(data)) + tag + data + struct.pack(">I", crc)

    ihdr = struct.pack(">IIBBBBB", width, height, 1, 0, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + chunk(b"IHDR", ihdr)
        + chunk(b"IDAT", zlib.compress(b"\x00"))
        + chunk(b"IEND", b"")
    )


def make_descriptor(
    area: float,
    width: int,
    height: int,
    circularity: float = 0.5,
    x: int = 0,
    y: int = 0,
) -> ShapeDescriptor:
    """Descriptor with explicit measurements (perimeter back-derived from circularity)."""
    return ShapeDescriptor(
        area=area,
        bounding_box=BoundingBox(x, y, width, height),
        aspect_ratio=width / height,
        extent=area / (width * height),
        perimeter=float(np.sqrt(4 * np.pi * area / circularity)),
        circularity=circularity,
    )


def make_detection(
    box: tuple[int, int, int, int],
    confidence: float = 0.5,
    label: Label = Label.RECTANGULAR,
) -> Detection:
    x, y, w, h = box
    area = float(w * h)
    return Detection(
        label=label,
        bounding_box=BoundingBox(x, y, w, h),
        area=area,
        aspect_ratio=w / h,
        extent=1.0,
        circularity=0.5,
        confidence=confidence,
    )


class FakeExtractor:
    """Returns canned outlines regardless of the mask."""

    def __init__(self, outlines: list[np.ndarray] | None = None) -> None:
        self.outlines = outlines or []
        self.calls = 0

    def find_outer_contours(self, mask: np.ndarray) -> list[np.ndarray]:
        self.calls += 1
        return [o.copy() for o in self.outlines]


class FailingExtractor:
    def find_outer_contours(self, mask: np.ndarray) -> list[np.ndarray]:
        raise RuntimeError("tracer exploded")


def blank_frame(width: int = FRAME_W, height: int = FRAME_H, value: int = 128) -> np.ndarray:
    frame = np.full((height, width, 4), value, dtype=np.uint8)
    frame[:, :, 3] = 255
    return frame


@pytest.fixture
def frame() -> np.ndarray:
    return blank_frame()


@pytest.fixture
def person_outline() -> np.ndarray:
    # Trapezoid spanning 100×250 px: aspect 0.4, area 60×249 = 14940
    return np.array([[0, 0], [99, 0], [60, 249], [39, 249]], dtype=np.int32)
