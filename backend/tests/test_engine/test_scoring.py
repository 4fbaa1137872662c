"""Tests for label-specific confidence scoring."""

import itertools

import pytest

from app.engine.classifier import classify
from app.engine.labels import Label
from app.engine.scoring import raw_confidence, score
from tests.conftest import make_descriptor


def test_person_canonical_aspect():
    d = make_descriptor(area=15000, width=100, height=250)
    assert score(Label.PERSON, d) == pytest.approx(0.8)


def test_person_other_aspect():
    d = make_descriptor(area=15000, width=140, height=200)
    assert score(Label.PERSON, d) == pytest.approx(0.6)


def test_circular_uses_circularity():
    d = make_descriptor(area=60000, width=280, height=280, circularity=0.85)
    assert score(Label.CIRCULAR, d) == pytest.approx(0.85)


def test_circular_capped():
    d = make_descriptor(area=60000, width=280, height=280, circularity=1.05)
    assert raw_confidence(Label.CIRCULAR, d) == pytest.approx(0.9)
    assert score(Label.CIRCULAR, d) == pytest.approx(0.9)


def test_square_distance_from_unit_aspect():
    d = make_descriptor(area=3000, width=110, height=100)
    assert score(Label.SQUARE, d) == pytest.approx(0.9)
    d = make_descriptor(area=3000, width=90, height=100)
    assert score(Label.SQUARE, d) == pytest.approx(0.9)


def test_perfect_square_clamped_to_ceiling():
    d = make_descriptor(area=3000, width=100, height=100)
    assert raw_confidence(Label.SQUARE, d) == pytest.approx(1.0)
    assert score(Label.SQUARE, d) == pytest.approx(0.9)


def test_extent_capped_for_other_labels():
    d = make_descriptor(area=19000, width=200, height=100)
    assert score(Label.HORIZONTAL, d) == pytest.approx(0.7)


def test_low_extent_hits_floor():
    d = make_descriptor(area=1500, width=300, height=100)
    assert d.extent == pytest.approx(0.05)
    assert score(Label.HORIZONTAL, d) == pytest.approx(0.1)


def test_mid_extent_passes_through():
    d = make_descriptor(area=9000, width=150, height=100)
    assert score(Label.RECTANGULAR, d) == pytest.approx(0.6)


@pytest.mark.parametrize(
    "area,width,height,circ",
    list(itertools.product(
        [1500, 4000, 12000, 60000, 250000],
        [20, 100, 400],
        [20, 150, 600],
        [0.05, 0.72, 1.3],
    )),
)
def test_confidence_always_in_range(area, width, height, circ):
    d = make_descriptor(area=area, width=width, height=height, circularity=circ)
    for label in Label:
        assert 0.1 <= score(label, d) <= 0.9
    assert 0.1 <= score(classify(d), d) <= 0.9
