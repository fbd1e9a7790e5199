"""Local body-shop price tables and the multipliers applied on top of them.

Amounts are in MXN.
"""
import math
from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from fixitbot.domain.entities.bbox_entity import DetectionBox
from fixitbot.domain.entities.estimate_entity import SEVERITY_HIGH, SEVERITY_LOW, SEVERITY_MEDIUM
from fixitbot.domain.services.class_normalizer import normalize_class
from fixitbot.domain.services.zone_locator import DEFAULT_ZONE, zone_key


DEFAULT_CATEGORY = "scratch"
REPLACEMENT_CATEGORY = "reemplazo_de_pieza"
GLOBAL_DEFAULT_COST = 850

AREA_FACTOR_CAP = 0.25
AREA_FACTOR_SLOPE = 1.5
REPLACEMENT_AREA_THRESHOLD = 0.10


def _frozen(table: Dict[str, Dict[str, int]]) -> Mapping[str, Mapping[str, int]]:
    return MappingProxyType({k: MappingProxyType(v) for k, v in table.items()})


PRICE_MATRIX = _frozen({
    "scratch": {"bumper": 300, "door_panel": 400, "hood": 450, "side_panel": 500, "roof": 600, "default": 400},
    "dent": {"bumper": 600, "door_panel": 750, "hood": 1100, "side_panel": 1200, "roof": 1500, "default": 900},
    "door_ding": {"door_panel": 500, "side_panel": 600, "default": 550},
    "paint_damage": {
        "mirror": 400, "bumper": 650, "door_panel": 900, "hood": 1200, "side_panel": 1100, "roof": 1000,
        "default": 800,
    },
    "lamp_broken": {"lamp": 1200, "default": 1200},
    "glass_shatter": {"glass": 1500, "default": 1500},
    "crack": {"bumper": 950, "default": 1100},
    "rust_corrosion": {"door_panel": 800, "side_panel": 1000, "default": 900},
    "flat_tire": {"tire": 150, "default": 150},
    "headlight_restore": {"lamp": 500, "default": 500},
})

REPLACEMENT_COSTS = MappingProxyType({
    "door_panel": 3500,
    "bumper": 2800,
    "hood": 4000,
    "side_panel": 3800,
    "lamp": 1800,
    "default": 3000,
})

SEVERITY_FACTORS = MappingProxyType({
    SEVERITY_LOW: 1.0,
    SEVERITY_MEDIUM: 1.3,
})
HIGH_SEVERITY_FACTOR = 1.6


def dominant_category(boxes: Iterable[DetectionBox]) -> str:
    """Canonical class covering the largest total (unweighted) area."""
    acc: Dict[str, float] = {}
    for b in boxes:
        cls = normalize_class(b.cls)
        acc[cls] = acc.get(cls, 0.0) + b.area
    best, best_area = DEFAULT_CATEGORY, 0.0
    for cls, area in acc.items():
        if area > best_area:
            best, best_area = cls, area
    return best


def matrix_cost(category: str, area_label: str) -> int:
    prices = PRICE_MATRIX.get(normalize_class(category))
    if not prices:
        return GLOBAL_DEFAULT_COST
    return prices.get(zone_key(area_label)) or prices.get(DEFAULT_ZONE) or GLOBAL_DEFAULT_COST


def severity_factor(severity: str) -> float:
    return SEVERITY_FACTORS.get(severity, HIGH_SEVERITY_FACTOR)


def area_factor(area_pct: float) -> float:
    return 1 + min(area_pct, AREA_FACTOR_CAP) * AREA_FACTOR_SLOPE


def replacement_cost(zone: str) -> int:
    return REPLACEMENT_COSTS.get(zone, REPLACEMENT_COSTS[DEFAULT_ZONE])


def needs_replacement(severity: str, area_pct: float) -> bool:
    return severity == SEVERITY_HIGH and area_pct > REPLACEMENT_AREA_THRESHOLD


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def final_estimate(base: float, sev_factor: float, area_k: float) -> int:
    return round_half_up(base * sev_factor * area_k)
