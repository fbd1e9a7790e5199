import pytest

from fixitbot.domain.entities.bbox_entity import DetectionBox, RawPrediction
from fixitbot.domain.services.box_filter import clamp01, keep_box, normalize_prediction, post_filter


class TestNormalizePrediction:
    def test_center_to_top_left(self):
        box = normalize_prediction(RawPrediction(x=500, y=500, width=200, height=100, cls="dent", confidence=0.9), 1000, 1000)
        assert box.x == pytest.approx(0.4)
        assert box.y == pytest.approx(0.45)
        assert box.w == pytest.approx(0.2)
        assert box.h == pytest.approx(0.1)
        assert box.cls == "dent"
        assert box.score == 0.9

    def test_missing_dimensions_use_defaults(self):
        box = normalize_prediction(RawPrediction(x=100, y=100, width=100, height=100, cls="dent"))
        assert box.x == pytest.approx(0.05)
        assert box.w == pytest.approx(0.1)
        assert box.score is None

    def test_each_field_clamped_independently(self):
        box = normalize_prediction(RawPrediction(x=10, y=990, width=100, height=2000, cls="dent"), 1000, 1000)
        assert box.x == 0.0
        assert box.w == pytest.approx(0.1)
        assert box.h == 1.0
        assert box.y == 0.0

    @pytest.mark.parametrize("x, y, w, h", [
        (-50, -50, 10, 10),
        (5000, 5000, 300, 300),
        (320, 240, 640, 480),
        (0, 0, 0, 0),
    ])
    def test_fields_always_in_unit_range(self, x, y, w, h):
        box = normalize_prediction(RawPrediction(x=x, y=y, width=w, height=h, cls="dent"), 640, 480)
        for value in (box.x, box.y, box.w, box.h):
            assert 0.0 <= value <= 1.0

    def test_clamp01(self):
        assert clamp01(-0.5) == 0.0
        assert clamp01(1.7) == 1.0
        assert clamp01(0.3) == 0.3


class TestPostFilter:
    def test_low_confidence_dropped(self):
        assert not keep_box(DetectionBox(0.1, 0.1, 0.3, 0.3, "dent", score=0.3))

    def test_missing_score_is_kept(self):
        assert keep_box(DetectionBox(0.1, 0.1, 0.3, 0.3, "dent"))

    def test_tiny_box_dropped(self):
        assert not keep_box(DetectionBox(0.1, 0.1, 0.1, 0.1, "dent", score=0.9))

    def test_unknown_class_dropped(self):
        assert not keep_box(DetectionBox(0.1, 0.1, 0.3, 0.3, "rust", score=0.9))
        assert not keep_box(DetectionBox(0.1, 0.1, 0.3, 0.3, "lamp_broken", score=0.9))

    def test_raw_or_normalized_class_allowed(self):
        assert keep_box(DetectionBox(0.1, 0.1, 0.3, 0.3, "front-bumper-dent", score=0.9))
        assert keep_box(DetectionBox(0.1, 0.1, 0.3, 0.3, "Deep Scratch", score=0.9))

    def test_subset_keeps_input_order(self):
        boxes = [
            DetectionBox(0.0, 0.0, 0.2, 0.2, "scratch", score=0.9),
            DetectionBox(0.0, 0.0, 0.2, 0.2, "dent", score=0.1),
            DetectionBox(0.5, 0.5, 0.2, 0.2, "paint_damage", score=0.7),
            DetectionBox(0.5, 0.5, 0.01, 0.01, "dent", score=0.99),
        ]
        kept = post_filter(boxes)
        assert kept == [boxes[0], boxes[2]]
        assert len(boxes) == 4

    def test_empty(self):
        assert post_filter([]) == []
