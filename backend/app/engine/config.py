"""Detector configuration — every threshold the per-frame pipeline uses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DetectorConfig:
    """Fixed heuristics for preprocessing, classification, scoring and NMS."""

    # Preprocessing
    blur_kernel_size: int = 5
    threshold_block_size: int = 11  # Gaussian-weighted neighbourhood
    threshold_offset: float = 2.0
    threshold_max_value: int = 255
    close_kernel_size: int = 3

    # Noise floor for outlines (px²); equal to the floor is kept
    min_contour_area: float = 1500.0

    # Person: tall, mid-sized, at least this many pixels high
    person_aspect_min: float = 0.3
    person_aspect_max: float = 0.8
    person_area_min: float = 10000.0
    person_area_max: float = 200000.0
    person_min_height: int = 100

    circular_threshold: float = 0.7
    square_aspect_min: float = 0.8
    square_aspect_max: float = 1.2
    horizontal_aspect: float = 1.5
    vertical_aspect: float = 0.67
    large_area: float = 50000.0
    small_area: float = 5000.0

    # Confidence
    person_canonical_aspect_min: float = 0.4
    person_canonical_aspect_max: float = 0.6
    person_canonical_confidence: float = 0.8
    person_default_confidence: float = 0.6
    circular_confidence_cap: float = 0.9
    extent_confidence_cap: float = 0.7
    confidence_floor: float = 0.1
    confidence_ceiling: float = 0.9

    # Deduplication
    overlap_threshold: float = 0.5  # strictly greater suppresses
    max_detections: int = 10
