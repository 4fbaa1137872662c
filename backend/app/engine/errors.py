"""Failure kinds raised inside the detection pipeline."""

from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    INVALID_FRAME = "invalid_frame"
    EXTRACTION_FAILURE = "extraction_failure"
    INTERNAL_FAILURE = "internal_failure"


class DetectionError(Exception):
    """Base class; ``kind`` tells the caller which stage gave up."""

    kind: ErrorKind = ErrorKind.INTERNAL_FAILURE


class InvalidFrameError(DetectionError):
    """Missing buffer, wrong layout, or dimensions that differ from the working size."""

    kind = ErrorKind.INVALID_FRAME


class ExtractionError(DetectionError):
    """The shape extractor raised while tracing outlines."""

    kind = ErrorKind.EXTRACTION_FAILURE


class InternalError(DetectionError):
    """Unexpected failure while describing, classifying, scoring or suppressing."""

    kind = ErrorKind.INTERNAL_FAILURE
