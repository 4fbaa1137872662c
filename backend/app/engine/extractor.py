"""Shape extractor: outer outlines of the blobs in a binary mask.

The detector only depends on the ``ShapeExtractor`` protocol; the OpenCV
implementation is the default. Extractors must not modify the mask.
"""

from __future__ import annotations

from typing import Protocol

import cv2
import numpy as np
from numpy.typing import NDArray


class ShapeExtractor(Protocol):
    def find_outer_contours(self, mask: NDArray[np.uint8]) -> list[NDArray[np.int32]]:
        """Return outer (non-nested) closed outlines as N×2 integer point arrays."""
        ...


class OpenCVContourExtractor:
    """cv2.findContours with external retrieval and simple chain approximation."""

    def find_outer_contours(self, mask: NDArray[np.uint8]) -> list[NDArray[np.int32]]:
        contours, _hierarchy = cv2.findContours(
            mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE
        )
        return [np.asarray(c, dtype=np.int32).reshape(-1, 2) for c in contours]
