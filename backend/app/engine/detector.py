"""ObjectDetector — the per-frame detection pipeline and its lifecycle.

    preprocess -> extract outlines -> {describe, classify, score} -> NMS

One ``process_frame`` call per display refresh. Calls are synchronous and
must not overlap. A failing frame is logged, reported to ``on_error`` and
yields an empty result; the detector stays usable for the next frame.
"""

from __future__ import annotations

import logging
import operator
import time
from collections.abc import Callable, Sequence

from app.engine.buffers import WorkingBuffers
from app.engine.classifier import ClassificationRule, classify, default_rules
from app.engine.config import DetectorConfig
from app.engine.descriptors import describe
from app.engine.errors import DetectionError, ExtractionError, InternalError, InvalidFrameError
from app.engine.extractor import OpenCVContourExtractor, ShapeExtractor
from app.engine.preprocess import FramePreprocessor
from app.engine.scoring import score
from app.engine.summary import SceneSummary, describe_scene, summarize
from app.engine.suppression import non_max_suppression
from app.engine.types import Detection

logger = logging.getLogger(__name__)

# Receives the failure; its ``kind`` tells callers which ErrorKind occurred
ErrorCallback = Callable[[DetectionError], None]


class ObjectDetector:
    """Owns the working buffers and the most recent frame's detections."""

    def __init__(
        self,
        config: DetectorConfig | None = None,
        extractor: ShapeExtractor | None = None,
        rules: Sequence[ClassificationRule] | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        self.config = config or DetectorConfig()
        self.extractor = extractor or OpenCVContourExtractor()
        self.rules = list(rules) if rules is not None else default_rules(self.config)
        self.on_error = on_error
        self._buffers: WorkingBuffers | None = None
        self._preprocessor: FramePreprocessor | None = None
        self._detections: tuple[Detection, ...] = ()
        self._busy = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def is_initialized(self) -> bool:
        return self._buffers is not None

    @property
    def frame_size(self) -> tuple[int, int] | None:
        if self._buffers is None:
            return None
        return (self._buffers.width, self._buffers.height)

    def initialize(self, width: int, height: int) -> None:
        """Allocate working buffers for ``width``×``height`` frames.

        Raises InvalidFrameError for non-integer (bools included) or non-positive
        dimensions. Re-initializing releases the previous buffers first.
        """
        if isinstance(width, bool) or isinstance(height, bool):
            raise InvalidFrameError("frame dimensions must be integers")
        try:
            width, height = operator.index(width), operator.index(height)
        except TypeError as e:
            raise InvalidFrameError("frame dimensions must be integers") from e
        if width <= 0 or height <= 0:
            raise InvalidFrameError(f"frame dimensions must be positive, got {width}x{height}")

        if self._buffers is not None:
            self.cleanup()

        self._buffers = WorkingBuffers.allocate(width, height)
        self._preprocessor = FramePreprocessor(self._buffers, self.config)
        logger.info("Object detector initialized for %dx%d frames", width, height)

    def cleanup(self) -> None:
        """Release working buffers. Safe to call repeatedly or before initialize."""
        if self._buffers is not None:
            self._buffers.release()
            logger.info("Object detector buffers released")
        self._buffers = None
        self._preprocessor = None
        self._detections = ()

    def __enter__(self) -> ObjectDetector:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cleanup()

    # ------------------------------------------------------------------
    # Per-frame pipeline
    # ------------------------------------------------------------------

    def process_frame(self, frame: object) -> list[Detection]:
        """Run the whole pipeline on one RGBA frame.

        Never raises: failures become an empty list and an ``on_error`` call.
        """
        if self._buffers is None:
            logger.debug("process_frame called before initialize; skipping")
            return []
        if self._busy:
            self._report(InternalError("process_frame re-entered while a frame is in flight"))
            return []

        self._busy = True
        start = time.perf_counter()
        try:
            detections = self._run(frame)
        except DetectionError as e:
            self._report(e)
            detections = []
        except Exception as e:
            err = InternalError(f"unexpected failure: {e}")
            err.__cause__ = e
            self._report(err)
            detections = []
        finally:
            self._busy = False

        self._detections = tuple(detections)
        logger.debug(
            "Frame processed: %d detections in %.1fms",
            len(detections),
            (time.perf_counter() - start) * 1000,
        )
        return list(detections)

    def _run(self, frame: object) -> list[Detection]:
        buffers = self._buffers
        assert buffers is not None and self._preprocessor is not None
        buffers.reset()

        mask = self._preprocessor.run(frame)

        try:
            outlines = self.extractor.find_outer_contours(mask)
        except Exception as e:
            raise ExtractionError(f"shape extractor failed: {e}") from e
        buffers.outlines.extend(outlines)

        c = self.config
        candidates: list[Detection] = []
        for outline in buffers.outlines:
            descriptor = describe(outline, c.min_contour_area)
            if descriptor is None:
                continue
            label = classify(descriptor, self.rules)
            candidates.append(
                Detection.from_descriptor(label, descriptor, score(label, descriptor, c))
            )

        return non_max_suppression(candidates, c.overlap_threshold, c.max_detections)

    def _report(self, error: DetectionError) -> None:
        logger.warning("Frame failed (%s): %s", error.kind.value, error)
        if self.on_error is None:
            return
        try:
            self.on_error(error)
        except Exception:
            logger.exception("on_error callback raised")

    # ------------------------------------------------------------------
    # Inspection of the most recent frame
    # ------------------------------------------------------------------

    @property
    def detections(self) -> tuple[Detection, ...]:
        return self._detections

    def get_detection_summary(self) -> SceneSummary:
        return summarize(self._detections)

    def get_scene_description(self) -> str:
        return describe_scene(self._detections)
