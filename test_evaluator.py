"""Tests for the claim evaluation rules."""

import pytest

from backend.evaluator import evaluate
from backend.models.claim import Coordinate, Purpose
from backend.models.decision import Verdict


@pytest.mark.parametrize("lat,lon", [(20, 80), (15.0001, 75.0001), (89.9, 179.9), (45, 100)])
def test_commercial_inside_region_is_approved(lat, lon):
    decision = evaluate(Coordinate(lat, lon), Purpose.COMMERCIAL)
    assert decision.verdict is Verdict.APPROVED
    assert decision.reason == "Land suitable for commercial use"


@pytest.mark.parametrize("lat,lon", [(20, 80), (-45, -120), (0, 0), (300, -999)])
def test_industrial_always_needs_review(lat, lon):
    decision = evaluate(Coordinate(lat, lon), Purpose.INDUSTRIAL)
    assert decision.verdict is Verdict.FURTHER_REVIEW_REQUIRED
    assert decision.reason == "Environmental clearance needed"


@pytest.mark.parametrize("purpose", [Purpose.PROTECTED, Purpose.AGRICULTURAL])
@pytest.mark.parametrize("lat,lon", [(20, 80), (10, 70), (-30, 150)])
def test_protected_and_agricultural_are_rejected(purpose, lat, lon):
    decision = evaluate(Coordinate(lat, lon), purpose)
    assert decision.verdict is Verdict.REJECTED
    assert decision.reason == "Land is protected area"


@pytest.mark.parametrize("lat,lon", [(15, 76), (16, 75), (15, 75), (10, 80), (20, 70)])
def test_commercial_outside_region_is_rejected(lat, lon):
    """Boundary values fall outside the strict inequality."""
    decision = evaluate(Coordinate(lat, lon), Purpose.COMMERCIAL)
    assert decision.verdict is Verdict.REJECTED
    assert decision.reason == "Land is protected area"


def test_out_of_range_coordinates_are_evaluated():
    decision = evaluate(Coordinate(120.0, 500.0), Purpose.COMMERCIAL)
    assert decision.verdict is Verdict.APPROVED


def test_decision_snapshots_inputs():
    coordinate = Coordinate(12.5, 78.3)
    decision = evaluate(coordinate, Purpose.AGRICULTURAL)
    assert decision.coordinate == coordinate
    assert decision.purpose is Purpose.AGRICULTURAL


def test_evaluate_accepts_purpose_value_string():
    decision = evaluate(Coordinate(20, 80), "Industrial")
    assert decision.purpose is Purpose.INDUSTRIAL


def test_verdict_labels():
    assert Verdict.APPROVED.label == "Claim Approved"
    assert Verdict.REJECTED.label == "Claim Rejected"
    assert Verdict.FURTHER_REVIEW_REQUIRED.label == "Further Review Required"
