import pytest

from fixitbot.domain.entities.bbox_entity import DetectionBox
from fixitbot.domain.services.pricing_engine import (
    GLOBAL_DEFAULT_COST,
    PRICE_MATRIX,
    area_factor,
    dominant_category,
    final_estimate,
    matrix_cost,
    needs_replacement,
    replacement_cost,
    round_half_up,
    severity_factor,
)


class TestMatrixCost:
    @pytest.mark.parametrize("category, label, expected", [
        ("dent", "cofre", 1100),
        ("scratch", "defensa (central)", 300),
        ("dent", "panel (central media)", 900),
        ("door_ding", "cofre", 550),
        ("Paint Damage", "espejo (izquierdo)", 400),
        ("flat_tire", "llanta (derecho)", 150),
    ])
    def test_lookup(self, category, label, expected):
        assert matrix_cost(category, label) == expected

    def test_unknown_category_uses_global_default(self):
        assert matrix_cost("hail", "cofre") == GLOBAL_DEFAULT_COST

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            PRICE_MATRIX["dent"]["hood"] = 1


class TestFactors:
    def test_severity(self):
        assert severity_factor("bajo") == 1.0
        assert severity_factor("intermedio") == 1.3
        assert severity_factor("avanzado") == 1.6

    @pytest.mark.parametrize("pct, expected", [(0.0, 1.0), (0.1, 1.15), (0.25, 1.375), (0.9, 1.375)])
    def test_area_factor(self, pct, expected):
        assert area_factor(pct) == pytest.approx(expected)

    def test_replacement_costs(self):
        assert replacement_cost("door_panel") == 3500
        assert replacement_cost("hood") == 4000
        assert replacement_cost("roof") == 3000

    def test_needs_replacement(self):
        assert needs_replacement("avanzado", 0.15)
        assert not needs_replacement("avanzado", 0.10)
        assert not needs_replacement("intermedio", 0.5)


class TestDominantCategory:
    def test_largest_total_area(self):
        boxes = [
            DetectionBox(0, 0, 0.1, 0.2, "scratch", score=0.9),
            DetectionBox(0, 0, 0.2, 0.25, "dent", score=0.9),
        ]
        assert dominant_category(boxes) == "dent"

    def test_confidence_not_weighted(self):
        boxes = [
            DetectionBox(0, 0, 0.2, 0.25, "scratch", score=0.6),
            DetectionBox(0, 0, 0.2, 0.2, "dent", score=1.0),
        ]
        assert dominant_category(boxes) == "scratch"

    def test_empty_defaults_to_scratch(self):
        assert dominant_category([]) == "scratch"


class TestRounding:
    @pytest.mark.parametrize("value, expected", [(2.5, 3), (3.5, 4), (1997.6, 1998), (400.0, 400), (10.49, 10)])
    def test_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_final_estimate(self):
        assert final_estimate(400, 1.0, 1.0) == 400
        assert final_estimate(1000, 1.3, 1.15) == 1495
