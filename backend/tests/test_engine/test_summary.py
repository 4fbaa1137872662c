"""Tests for scene summaries and the text gist."""

import pytest

from app.engine.labels import Label
from app.engine.summary import (
    describe_scene,
    detection_stats,
    label_tags,
    summarize,
)
from tests.conftest import make_detection


def _dets(*pairs):
    return [
        make_detection((i * 200, 0, 100, 100), confidence=conf, label=label)
        for i, (label, conf) in enumerate(pairs)
    ]


def test_empty_scene():
    assert describe_scene([]) == "a general scene"


def test_empty_summary():
    s = summarize([])
    assert s.total_detections == 0
    assert s.average_confidence == 0.0
    assert s.types == {}


def test_summary_counts_and_averages():
    s = summarize(_dets(
        (Label.SQUARE, 0.8),
        (Label.SQUARE, 0.4),
        (Label.CIRCULAR, 0.9),
    ))
    assert s.total_detections == 3
    assert s.average_confidence == pytest.approx(0.7)
    assert s.types[Label.SQUARE].count == 2
    assert s.types[Label.SQUARE].average_confidence == pytest.approx(0.6)
    assert list(s.types) == [Label.SQUARE, Label.CIRCULAR]


def test_summary_to_dict():
    data = summarize(_dets((Label.PERSON, 0.8))).to_dict()
    assert data == {
        "types": {"person": {"count": 1, "average_confidence": 0.8}},
        "total_detections": 1,
        "average_confidence": 0.8,
    }


def test_single_person():
    assert describe_scene(_dets((Label.PERSON, 0.8))) == "a person"


def test_several_people():
    assert describe_scene(_dets((Label.PERSON, 0.8), (Label.PERSON, 0.6))) == "2 people"


def test_people_with_objects():
    text = describe_scene(_dets(
        (Label.PERSON, 0.8),
        (Label.CIRCULAR, 0.7),
        (Label.SQUARE, 0.6),
        (Label.SQUARE, 0.5),
    ))
    assert text == "a person with a circular object, 2 square objects"


def test_at_most_three_other_labels():
    text = describe_scene(_dets(
        (Label.SQUARE, 0.9),
        (Label.CIRCULAR, 0.8),
        (Label.LARGE, 0.7),
        (Label.SMALL, 0.6),
    ))
    assert text == "a square object, a circular object, a large object"


def test_people_listed_first_regardless_of_rank():
    text = describe_scene(_dets((Label.VERTICAL, 0.9), (Label.PERSON, 0.6)))
    assert text == "a person with a vertical object"


def test_unknown_label_reads_as_object():
    assert describe_scene(_dets((Label.UNKNOWN, 0.5), (Label.UNKNOWN, 0.5))) == "2 objects"


def test_label_tags():
    s = summarize(_dets((Label.SQUARE, 0.8), (Label.SQUARE, 0.6), (Label.PERSON, 0.8)))
    tags = label_tags(s)
    assert tags[0] == {
        "label": "square",
        "text": "2 square objects",
        "confidence_pct": 70,
        "color": "#feca57",
    }
    assert tags[1]["text"] == "person"


def test_detection_stats():
    assert detection_stats(summarize([])) == "No objects detected"
    s = summarize(_dets((Label.SQUARE, 0.8), (Label.SMALL, 0.6)))
    assert detection_stats(s) == "2 objects detected (70% avg confidence)"


def test_percentages_round_halves_up():
    s = summarize(_dets((Label.CIRCULAR, 0.75), (Label.CIRCULAR, 0.5)))
    assert label_tags(s)[0]["confidence_pct"] == 63
    assert detection_stats(s) == "2 objects detected (63% avg confidence)"
