"""Detection overlay as a standalone SVG document.

Each detection gets a box stroked in its label colour, a
"<name> (<pct>%)" caption on a translucent plate above the box, and a
centre dot. The UI layer lays the document over the live video.
"""

from __future__ import annotations

from collections.abc import Sequence
from html import escape

from app.engine.labels import percent
from app.engine.types import Detection

_FONT_SIZE = 14
_CHAR_WIDTH = 7.5  # approx advance of 14px Arial
_PLATE_HEIGHT = 20
_PLATE_OFFSET = 25
_TEXT_BASELINE = 8
_DOT_RADIUS = 3


def caption(det: Detection) -> str:
    return f"{det.label.display_name} ({percent(det.confidence)}%)"


def _render_detection(det: Detection) -> str:
    box = det.bounding_box
    color = det.label.color
    text = caption(det)
    plate_w = len(text) * _CHAR_WIDTH + 10
    cx, cy = det.center
    return (
        f'<g class="detection" data-label="{det.label.value}">'
        f'<rect x="{box.x}" y="{box.y}" width="{box.width}" height="{box.height}" '
        f'fill="none" stroke="{color}" stroke-width="2"/>'
        f'<rect x="{box.x}" y="{box.y - _PLATE_OFFSET}" width="{plate_w:.1f}" '
        f'height="{_PLATE_HEIGHT}" fill="rgba(0, 0, 0, 0.7)"/>'
        f'<text x="{box.x + 5}" y="{box.y - _TEXT_BASELINE}" fill="{color}" '
        f'font-family="Arial" font-size="{_FONT_SIZE}">{escape(text)}</text>'
        f'<circle cx="{cx:.1f}" cy="{cy:.1f}" r="{_DOT_RADIUS}" fill="{color}"/>'
        "</g>"
    )


def render_overlay(detections: Sequence[Detection], width: int, height: int) -> str:
    """Transparent SVG sized to the frame with one group per detection."""
    body = "\n".join(_render_detection(d) for d in detections)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}"'
        f' width="{width}" height="{height}">'
        f"\n{body}\n</svg>"
    )
