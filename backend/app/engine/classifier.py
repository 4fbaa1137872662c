"""Shape classification — an ordered rule table, first match wins.

  person      aspect 0.3-0.8 AND area 10k-200k AND height >= 100
  circular    circularity > 0.7
  square      aspect 0.8-1.2
  horizontal  aspect > 1.5
  vertical    aspect < 0.67
  large       area > 50k
  small       area < 5k
  rectangular everything else

Order matters: a tall blob that is also round is a person, not circular.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from app.engine.config import DetectorConfig
from app.engine.descriptors import ShapeDescriptor
from app.engine.labels import Label


@dataclass(frozen=True)
class ClassificationRule:
    label: Label
    predicate: Callable[[ShapeDescriptor], bool]
    description: str = ""


def is_likely_person(d: ShapeDescriptor, config: DetectorConfig) -> bool:
    if not config.person_aspect_min <= d.aspect_ratio <= config.person_aspect_max:
        return False
    if not config.person_area_min <= d.area <= config.person_area_max:
        return False
    return d.bounding_box.height >= config.person_min_height


def default_rules(config: DetectorConfig | None = None) -> list[ClassificationRule]:
    """Build the rule table from config thresholds, in evaluation order."""
    c = config or DetectorConfig()
    return [
        ClassificationRule(
            Label.PERSON,
            lambda d: is_likely_person(d, c),
            "upright mid-sized blob",
        ),
        ClassificationRule(
            Label.CIRCULAR,
            lambda d: d.circularity > c.circular_threshold,
            f"circularity > {c.circular_threshold}",
        ),
        ClassificationRule(
            Label.SQUARE,
            lambda d: c.square_aspect_min <= d.aspect_ratio <= c.square_aspect_max,
            f"aspect {c.square_aspect_min}-{c.square_aspect_max}",
        ),
        ClassificationRule(
            Label.HORIZONTAL,
            lambda d: d.aspect_ratio > c.horizontal_aspect,
            f"aspect > {c.horizontal_aspect}",
        ),
        ClassificationRule(
            Label.VERTICAL,
            lambda d: d.aspect_ratio < c.vertical_aspect,
            f"aspect < {c.vertical_aspect}",
        ),
        ClassificationRule(
            Label.LARGE,
            lambda d: d.area > c.large_area,
            f"area > {c.large_area:g}",
        ),
        ClassificationRule(
            Label.SMALL,
            lambda d: d.area < c.small_area,
            f"area < {c.small_area:g}",
        ),
        ClassificationRule(Label.RECTANGULAR, lambda d: True, "fallback"),
    ]


def classify(
    descriptor: ShapeDescriptor,
    rules: Sequence[ClassificationRule] | None = None,
) -> Label:
    """Return the label of the first rule whose predicate holds."""
    for rule in rules if rules is not None else default_rules():
        if rule.predicate(descriptor):
            return rule.label
    return Label.UNKNOWN
