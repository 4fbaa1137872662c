"""Per-detector working buffers, sized once and reused on every frame."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray


@dataclass
class WorkingBuffers:
    """Gray, blurred and mask images plus outline storage for one frame size.

    Owned exclusively by a single ObjectDetector; every stage writes into
    these arrays instead of allocating its own.
    """

    width: int
    height: int
    gray: NDArray[np.uint8] | None = None
    blurred: NDArray[np.uint8] | None = None
    mask: NDArray[np.uint8] | None = None
    outlines: list[NDArray[np.int32]] = field(default_factory=list)

    @classmethod
    def allocate(cls, width: int, height: int) -> WorkingBuffers:
        shape = (height, width)
        return cls(
            width=width,
            height=height,
            gray=np.zeros(shape, dtype=np.uint8),
            blurred=np.zeros(shape, dtype=np.uint8),
            mask=np.zeros(shape, dtype=np.uint8),
        )

    @property
    def is_allocated(self) -> bool:
        return self.mask is not None

    def reset(self) -> None:
        """Start-of-frame reset; images are overwritten in full by each stage."""
        self.outlines.clear()

    def release(self) -> None:
        self.gray = None
        self.blurred = None
        self.mask = None
        self.outlines.clear()
