"""Normalization of raw detector output and anti false-positive filtering."""
from typing import Iterable, List, Optional

from fixitbot.domain.entities.bbox_entity import DetectionBox, RawPrediction
from fixitbot.domain.services.class_normalizer import normalize_class


# Image size assumed when the detector response omits it.
DEFAULT_IMAGE_WIDTH = 1000
DEFAULT_IMAGE_HEIGHT = 1000

MIN_SCORE = 0.60
MIN_AREA = 0.015  # 1.5% of the frame
ALLOWED_CLASSES = frozenset({
    "dent",
    "scratch",
    "paint_damage",
    "door_ding",
    "bumper_damage",
    "front-bumper-dent",
})


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def normalize_prediction(
    pred: RawPrediction,
    image_width: Optional[float] = None,
    image_height: Optional[float] = None,
) -> DetectionBox:
    """Convert a center-based pixel prediction into a fractional top-left box.

    Each coordinate is clamped on its own, so a box hanging off the image edge
    may end up degenerate; that is expected.
    """
    iw = image_width or DEFAULT_IMAGE_WIDTH
    ih = image_height or DEFAULT_IMAGE_HEIGHT
    return DetectionBox(
        x=clamp01((pred.x - pred.width / 2) / iw),
        y=clamp01((pred.y - pred.height / 2) / ih),
        w=clamp01(pred.width / iw),
        h=clamp01(pred.height / ih),
        cls=pred.cls,
        score=pred.confidence,
    )


def _allowed(box: DetectionBox) -> bool:
    raw = (box.cls or "").lower()
    return raw in ALLOWED_CLASSES or normalize_class(raw) in ALLOWED_CLASSES


def keep_box(box: DetectionBox) -> bool:
    if box.score is not None and box.score < MIN_SCORE:
        return False
    if box.area < MIN_AREA:
        return False
    return _allowed(box)


def post_filter(boxes: Iterable[DetectionBox]) -> List[DetectionBox]:
    """Drop low-confidence, tiny and unrecognized detections, keeping order."""
    return [b for b in boxes if keep_box(b)]
