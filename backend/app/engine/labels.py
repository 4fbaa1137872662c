"""Detection label taxonomy with its display lookups."""

from __future__ import annotations

import enum
import math


class Label(str, enum.Enum):
    PERSON = "person"
    # Reserved for a face-region pass; the geometric path never emits it.
    FACE = "face"
    RECTANGULAR = "rectangular"
    CIRCULAR = "circular"
    SQUARE = "square"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    SMALL = "small"
    LARGE = "large"
    UNKNOWN = "unknown"

    @property
    def color(self) -> str:
        return label_color(self)

    @property
    def display_name(self) -> str:
        return display_name(self)


_COLORS: dict[Label, str] = {
    Label.PERSON: "#ff6b6b",
    Label.FACE: "#4ecdc4",
    Label.RECTANGULAR: "#45b7d1",
    Label.CIRCULAR: "#96ceb4",
    Label.SQUARE: "#feca57",
    Label.VERTICAL: "#ff9ff3",
    Label.HORIZONTAL: "#54a0ff",
    Label.SMALL: "#5f27cd",
    Label.LARGE: "#00d2d3",
    Label.UNKNOWN: "#ffffff",
}

# Labels that name a thing on their own; every other label describes an "object".
_NOUN_LABELS = {Label.PERSON: "person", Label.FACE: "face", Label.UNKNOWN: "object"}


def label_color(label: Label) -> str:
    """Hex stroke colour used when drawing a detection of this label."""
    return _COLORS[label]


def display_name(label: Label) -> str:
    """Human-readable name, e.g. ``circular object``."""
    noun = _NOUN_LABELS.get(label)
    if noun is not None:
        return noun
    return f"{label.value} object"


def pluralize(label: Label, count: int) -> str:
    """``a circular object`` for one, ``3 circular objects`` otherwise."""
    name = display_name(label)
    if count == 1:
        return f"a {name}"
    return f"{count} {name}s"


def percent(fraction: float) -> int:
    """Whole percentage with halves rounded up (0.625 → 63)."""
    return math.floor(fraction * 100 + 0.5)
