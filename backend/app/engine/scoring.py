"""Label-specific confidence heuristics, clamped to [0.1, 0.9]."""

from __future__ import annotations

from collections.abc import Callable

from app.engine.config import DetectorConfig
from app.engine.descriptors import ShapeDescriptor
from app.engine.labels import Label

_Scorer = Callable[[ShapeDescriptor, DetectorConfig], float]


def _person(d: ShapeDescriptor, c: DetectorConfig) -> float:
    # Standing humans sit around 0.4-0.6 width/height
    if c.person_canonical_aspect_min <= d.aspect_ratio <= c.person_canonical_aspect_max:
        return c.person_canonical_confidence
    return c.person_default_confidence


def _circular(d: ShapeDescriptor, c: DetectorConfig) -> float:
    return min(c.circular_confidence_cap, d.circularity)


def _square(d: ShapeDescriptor, c: DetectorConfig) -> float:
    return 1.0 - abs(d.aspect_ratio - 1.0)


def _by_extent(d: ShapeDescriptor, c: DetectorConfig) -> float:
    return min(c.extent_confidence_cap, d.extent)


_SCORERS: dict[Label, _Scorer] = {
    Label.PERSON: _person,
    Label.CIRCULAR: _circular,
    Label.SQUARE: _square,
}


def raw_confidence(
    label: Label, descriptor: ShapeDescriptor, config: DetectorConfig | None = None
) -> float:
    """Unclamped score for ``label``; labels without their own cue use extent."""
    c = config or DetectorConfig()
    return _SCORERS.get(label, _by_extent)(descriptor, c)


def score(
    label: Label, descriptor: ShapeDescriptor, config: DetectorConfig | None = None
) -> float:
    c = config or DetectorConfig()
    raw = raw_confidence(label, descriptor, c)
    return max(c.confidence_floor, min(c.confidence_ceiling, raw))
