"""Leaf-node geometry helpers for pixel outlines. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def as_points(points: NDArray) -> NDArray[np.float64]:
    """Coerce an outline (N×2, or OpenCV's N×1×2) into an N×2 float array."""
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2))
    return arr.reshape(-1, 2)


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula over the implicitly closed outline.

    Positive = CCW in a y-up frame. Image outlines are y-down, so OpenCV's
    clockwise traversal comes out positive here.
    """
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def closed_perimeter(points: NDArray[np.float64]) -> float:
    """Sum of edge lengths, including the closing edge back to the first point."""
    if len(points) < 2:
        return 0.0
    closed = np.vstack([points, points[:1]])
    diffs = np.diff(closed, axis=0)
    return float(np.sum(np.sqrt(np.sum(diffs**2, axis=1))))


def pixel_bbox(points: NDArray[np.float64]) -> tuple[int, int, int, int]:
    """Axis-aligned (x, y, width, height) with inclusive pixel extents.

    A single pixel has width = height = 1, matching OpenCV's boundingRect.
    """
    if len(points) == 0:
        return (0, 0, 0, 0)
    x_min = int(np.floor(np.min(points[:, 0])))
    y_min = int(np.floor(np.min(points[:, 1])))
    x_max = int(np.floor(np.max(points[:, 0])))
    y_max = int(np.floor(np.max(points[:, 1])))
    return (x_min, y_min, x_max - x_min + 1, y_max - y_min + 1)


def circularity(area: float, perimeter: float) -> float:
    """Isoperimetric ratio 4π·area/perimeter². Circle=1.0, not clamped."""
    if perimeter <= 1e-10:
        return 0.0
    return float(4 * np.pi * area / (perimeter**2))
