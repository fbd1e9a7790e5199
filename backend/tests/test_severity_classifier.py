import pytest

from fixitbot.domain.entities.bbox_entity import DetectionBox
from fixitbot.domain.entities.estimate_entity import SEVERITIES, SEVERITY_HIGH, SEVERITY_LOW, SEVERITY_MEDIUM
from fixitbot.domain.services.severity_classifier import (
    FALLBACK_AREA,
    confidence_weight,
    infer_severity,
    severity_from_file_size,
    weighted_area,
)


class TestWeights:
    def test_full_confidence_counts_whole_area(self):
        box = DetectionBox(0, 0, 0.2, 0.25, "dent", score=1.0)
        assert weighted_area([box]) == pytest.approx(0.05)

    def test_missing_score_uses_default_confidence(self):
        box = DetectionBox(0, 0, 0.2, 0.25, "dent")
        assert confidence_weight(box) == pytest.approx(0.75)

    def test_score_clamped(self):
        assert confidence_weight(DetectionBox(0, 0, 0.1, 0.1, "dent", score=3.0)) == pytest.approx(1.0)


class TestInferSeverity:
    def test_small_area_is_low(self):
        assert infer_severity([DetectionBox(0, 0, 0.1, 0.1, "dent", score=1.0)]) == SEVERITY_LOW

    def test_medium_area(self):
        assert infer_severity([DetectionBox(0, 0, 0.2, 0.25, "dent", score=1.0)]) == SEVERITY_MEDIUM

    def test_large_area_is_high(self):
        assert infer_severity([DetectionBox(0, 0, 0.3, 0.3, "scratch", score=0.8)]) == SEVERITY_HIGH

    def test_hard_class_escalates(self):
        assert infer_severity([DetectionBox(0, 0, 0.2, 0.25, "crack", score=1.0)]) == SEVERITY_HIGH

    def test_hard_class_needs_some_area(self):
        assert infer_severity([DetectionBox(0, 0, 0.1, 0.1, "crack", score=1.0)]) == SEVERITY_LOW

    def test_empty(self):
        assert infer_severity([]) == SEVERITY_LOW

    def test_monotonic_in_confidence(self):
        order = {s: i for i, s in enumerate(SEVERITIES)}
        tiers = [
            order[infer_severity([DetectionBox(0, 0, 0.2, 0.2, "dent", score=s)])]
            for s in (0.0, 0.2, 0.4, 0.6, 0.8, 1.0)
        ]
        assert tiers == sorted(tiers)

    def test_monotonic_in_area(self):
        order = {s: i for i, s in enumerate(SEVERITIES)}
        tiers = [
            order[infer_severity([DetectionBox(0, 0, side, side, "scratch", score=0.7)])]
            for side in (0.05, 0.1, 0.15, 0.2, 0.25, 0.3, 0.4)
        ]
        assert tiers == sorted(tiers)


class TestFileSizeFallback:
    @pytest.mark.parametrize("size, severity, category", [
        (500_000, SEVERITY_LOW, "scratch"),
        (800_000, SEVERITY_MEDIUM, "paint_damage"),
        (1_200_000, SEVERITY_MEDIUM, "paint_damage"),
        (1_600_000, SEVERITY_HIGH, "dent"),
        (4_000_000, SEVERITY_HIGH, "dent"),
    ])
    def test_tiers(self, size, severity, category):
        guess = severity_from_file_size(size)
        assert guess.severity == severity
        assert guess.category == category
        assert guess.area == FALLBACK_AREA
