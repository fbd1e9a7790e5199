"""Damage-to-estimate heuristic.

Single synchronous pass over the detector boxes:
post-filter -> severity/category -> zones -> price -> DIY and workshop insights.
"""
from typing import Iterable, List, Optional

from fixitbot.domain.entities.bbox_entity import DetectionBox
from fixitbot.domain.entities.estimate_entity import (
    SEVERITY_LOW,
    Breakdown,
    BreakdownItem,
    EstimateResult,
    Insights,
)
from fixitbot.domain.services import diy_selector, pricing_engine
from fixitbot.domain.services.box_filter import post_filter
from fixitbot.domain.services.severity_classifier import infer_severity, severity_from_file_size
from fixitbot.domain.services.zone_locator import DEFAULT_ZONE, UNIDENTIFIED_AREA, area_labels, zone_key


FALLBACK_NOTE = "Sin detecciones utilizables: estimación aproximada por tamaño de archivo."
REPLACEMENT_NOTE = "El daño es extenso y severo: se cotiza el reemplazo de la pieza principal."
MULTIPLE_ZONES = "multiple"


def damaged_area_pct(boxes: Iterable[DetectionBox]) -> float:
    """Summed box area, capped at the whole frame (overlaps are not merged)."""
    return min(1.0, sum(b.area for b in boxes))


def calculate_estimate(input_boxes: Iterable[DetectionBox], fallback_size: Optional[int] = None) -> EstimateResult:
    """Price the damage described by ``input_boxes``.

    ``fallback_size`` is the byte size of the uploaded photo; it is only used
    when no box survives the post-filter.
    """
    boxes = post_filter(input_boxes)
    pct = damaged_area_pct(boxes)
    notes: List[str] = []

    if boxes:
        severity = infer_severity(boxes)
        category = pricing_engine.dominant_category(boxes)
        labels = area_labels(boxes)
        area = " y ".join(labels)
    elif fallback_size is not None:
        guess = severity_from_file_size(fallback_size)
        severity, category, area = guess.severity, guess.category, guess.area
        labels = [area]
        notes.append(FALLBACK_NOTE)
    else:
        severity, category, area = SEVERITY_LOW, pricing_engine.DEFAULT_CATEGORY, UNIDENTIFIED_AREA
        labels = [area]

    detailed: List[BreakdownItem] = []
    zones: List[str] = []
    total_base = 0
    for label in labels:
        zone = zone_key(label)
        base = pricing_engine.matrix_cost(category, label)
        total_base += base
        detailed.append(BreakdownItem(part=label, base=base, zone=zone))
        if zone not in zones:
            zones.append(zone)

    sev_factor = pricing_engine.severity_factor(severity)
    area_k = pricing_engine.area_factor(pct)

    if pricing_engine.needs_replacement(severity, pct):
        total_base = pricing_engine.replacement_cost(zones[0] if zones else DEFAULT_ZONE)
        if detailed:
            detailed[0].base = total_base
        category = pricing_engine.REPLACEMENT_CATEGORY
        sev_factor = 1.0
        notes.append(REPLACEMENT_NOTE)

    if len(zones) > 1:
        breakdown_zone = MULTIPLE_ZONES
    else:
        breakdown_zone = zones[0] if zones else DEFAULT_ZONE

    return EstimateResult(
        severity=severity,
        area=area,
        category=category,
        estimate=pricing_engine.final_estimate(total_base, sev_factor, area_k),
        boxes=boxes,
        area_pct=pct,
        breakdown=Breakdown(
            base=total_base,
            sev_factor=sev_factor,
            area_factor=area_k,
            area_pct=pct,
            zone=breakdown_zone,
        ),
        detailed_breakdown=detailed,
        insights=Insights(
            top_classes=diy_selector.top_classes(boxes),
            recommend_workshop=diy_selector.recommend_workshop(severity, pct, boxes),
        ),
        diy=diy_selector.pick_diy(category, severity, pct),
        note=" | ".join(notes) or None,
    )
