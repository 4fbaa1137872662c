"""Scene summary — per-label counts and confidence, plus a short text gist.

The gist is handed to the enhancement collaborator as a hint, e.g.
"2 people with a circular object, 3 square objects".
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from app.engine.labels import Label, display_name, percent, pluralize
from app.engine.types import Detection

_EMPTY_SCENE = "a general scene"
_FALLBACK_SCENE = "various objects"
_MAX_LISTED_LABELS = 3


@dataclass
class LabelStats:
    count: int = 0
    total_confidence: float = 0.0

    @property
    def average_confidence(self) -> float:
        if self.count == 0:
            return 0.0
        return self.total_confidence / self.count


@dataclass
class SceneSummary:
    # Insertion order = first appearance in the detection list
    types: dict[Label, LabelStats] = field(default_factory=dict)
    total_detections: int = 0
    average_confidence: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "types": {
                label.value: {
                    "count": stats.count,
                    "average_confidence": round(stats.average_confidence, 4),
                }
                for label, stats in self.types.items()
            },
            "total_detections": self.total_detections,
            "average_confidence": round(self.average_confidence, 4),
        }


def summarize(detections: Sequence[Detection]) -> SceneSummary:
    summary = SceneSummary()
    total_confidence = 0.0
    for det in detections:
        stats = summary.types.setdefault(det.label, LabelStats())
        stats.count += 1
        stats.total_confidence += det.confidence
        total_confidence += det.confidence

    summary.total_detections = len(detections)
    if detections:
        summary.average_confidence = total_confidence / len(detections)
    return summary


def describe_scene(detections: Sequence[Detection]) -> str:
    """People first, then up to three other labels."""
    if not detections:
        return _EMPTY_SCENE

    summary = summarize(detections)
    description = ""

    people = summary.types.get(Label.PERSON)
    if people is not None:
        description = "a person" if people.count == 1 else f"{people.count} people"

    others = [label for label in summary.types if label is not Label.PERSON]
    if others:
        listed = ", ".join(
            pluralize(label, summary.types[label].count)
            for label in others[:_MAX_LISTED_LABELS]
        )
        description = f"{description} with {listed}" if description else listed

    return description or _FALLBACK_SCENE


def label_tags(summary: SceneSummary) -> list[dict[str, Any]]:
    """One UI tag per label: text plus rounded average confidence percentage."""
    tags = []
    for label, stats in summary.types.items():
        name = display_name(label)
        tags.append({
            "label": label.value,
            "text": name if stats.count == 1 else f"{stats.count} {name}s",
            "confidence_pct": percent(stats.average_confidence),
            "color": label.color,
        })
    return tags


def detection_stats(summary: SceneSummary) -> str:
    if summary.total_detections == 0:
        return "No objects detected"
    pct = percent(summary.average_confidence)
    return f"{summary.total_detections} objects detected ({pct}% avg confidence)"
