from typing import Iterable, NamedTuple

from fixitbot.domain.entities.bbox_entity import DetectionBox
from fixitbot.domain.entities.estimate_entity import SEVERITY_HIGH, SEVERITY_LOW, SEVERITY_MEDIUM
from fixitbot.domain.services.box_filter import clamp01
from fixitbot.domain.services.class_normalizer import is_hard_class


DEFAULT_CONFIDENCE = 0.5

HARD_DAMAGE_MIN_SCORE = 0.03
LOW_MAX_SCORE = 0.02
MEDIUM_MAX_SCORE = 0.06

FALLBACK_AREA = "componente exterior (estimado)"
FALLBACK_SMALL_FILE = 800_000
FALLBACK_MEDIUM_FILE = 1_600_000


class FallbackGuess(NamedTuple):
    severity: str
    category: str
    area: str


def confidence_weight(box: DetectionBox) -> float:
    conf = clamp01(box.score) if box.score is not None else DEFAULT_CONFIDENCE
    return 0.5 + 0.5 * conf


def weighted_area(boxes: Iterable[DetectionBox]) -> float:
    return sum(confidence_weight(b) * b.area for b in boxes)


def infer_severity(boxes) -> str:
    boxes = list(boxes)
    score = weighted_area(boxes)
    has_hard = any(is_hard_class(b.cls) for b in boxes)
    if has_hard and score > HARD_DAMAGE_MIN_SCORE:
        return SEVERITY_HIGH
    if score < LOW_MAX_SCORE:
        return SEVERITY_LOW
    if score < MEDIUM_MAX_SCORE:
        return SEVERITY_MEDIUM
    return SEVERITY_HIGH


def severity_from_file_size(size: int) -> FallbackGuess:
    """Last-resort guess when the detector gave nothing usable.

    File size is not a damage signal; it only keeps the answer plausible.
    """
    if size < FALLBACK_SMALL_FILE:
        return FallbackGuess(SEVERITY_LOW, "scratch", FALLBACK_AREA)
    if size < FALLBACK_MEDIUM_FILE:
        return FallbackGuess(SEVERITY_MEDIUM, "paint_damage", FALLBACK_AREA)
    return FallbackGuess(SEVERITY_HIGH, "dent", FALLBACK_AREA)
