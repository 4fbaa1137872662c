"""Frame preprocessor — RGBA frame to a binary mask of solid blobs.

Steps, each feeding the next:
1. RGBA → single-channel intensity
2. 5×5 Gaussian blur (sigma derived from the kernel size)
3. Adaptive threshold, Gaussian-weighted 11×11 neighbourhood, offset 2
4. Morphological close with a 3×3 rectangle to merge nearby fragments
"""

from __future__ import annotations

import logging

import cv2
import numpy as np
from numpy.typing import NDArray

from app.engine.buffers import WorkingBuffers
from app.engine.config import DetectorConfig
from app.engine.errors import InvalidFrameError

logger = logging.getLogger(__name__)

_CHANNELS = 4


def validate_frame(frame: object, width: int, height: int) -> NDArray[np.uint8]:
    """Return ``frame`` as a contiguous H×W×4 uint8 array or raise InvalidFrameError."""
    if frame is None:
        raise InvalidFrameError("frame buffer is missing")
    if not isinstance(frame, np.ndarray):
        raise InvalidFrameError(f"frame must be a numpy array, got {type(frame).__name__}")
    if frame.ndim != 3 or frame.shape[2] != _CHANNELS:
        raise InvalidFrameError(f"frame must be H×W×{_CHANNELS}, got shape {frame.shape}")
    if frame.dtype != np.uint8:
        raise InvalidFrameError(f"frame must be uint8, got {frame.dtype}")

    h, w = frame.shape[:2]
    if h == 0 or w == 0:
        raise InvalidFrameError("frame has zero size")
    if (w, h) != (width, height):
        raise InvalidFrameError(
            f"frame is {w}x{h}, detector was initialized for {width}x{height}"
        )
    return np.ascontiguousarray(frame)


class FramePreprocessor:
    """Runs the mask pipeline into a detector's working buffers."""

    def __init__(self, buffers: WorkingBuffers, config: DetectorConfig | None = None) -> None:
        self.buffers = buffers
        self.config = config or DetectorConfig()
        size = self.config.close_kernel_size
        self._kernel = cv2.getStructuringElement(cv2.MORPH_RECT, (size, size))

    def run(self, frame: object) -> NDArray[np.uint8]:
        """Return the mask buffer (0/255) for ``frame``."""
        b = self.buffers
        if not b.is_allocated:
            raise InvalidFrameError("working buffers are not allocated")
        rgba = validate_frame(frame, b.width, b.height)
        c = self.config

        cv2.cvtColor(rgba, cv2.COLOR_RGBA2GRAY, dst=b.gray)
        k = c.blur_kernel_size
        cv2.GaussianBlur(b.gray, (k, k), 0, dst=b.blurred)
        cv2.adaptiveThreshold(
            b.blurred,
            c.threshold_max_value,
            cv2.ADAPTIVE_THRESH_GAUSSIAN_C,
            cv2.THRESH_BINARY,
            c.threshold_block_size,
            c.threshold_offset,
            dst=b.mask,
        )
        cv2.morphologyEx(b.mask, cv2.MORPH_CLOSE, self._kernel, dst=b.mask)
        return b.mask
