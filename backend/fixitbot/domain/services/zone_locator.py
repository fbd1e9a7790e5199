"""Vehicle zone inference from box geometry and class hints."""
import re
from typing import Iterable, List, Tuple

from fixitbot.domain.entities.bbox_entity import DetectionBox


UNIDENTIFIED_AREA = "zona no identificada"
DEFAULT_ZONE = "default"


def horizontal_band(cx: float) -> str:
    if cx < 0.33:
        return "izquierdo"
    if cx > 0.66:
        return "derecho"
    return "central"


def vertical_band(cy: float) -> str:
    if cy < 0.4:
        return "superior"
    if cy > 0.7:
        return "inferior"
    return "media"


def _found(pattern: str, text: str) -> bool:
    return re.search(pattern, text, re.IGNORECASE) is not None


def part_label(box: DetectionBox) -> str:
    """Human-readable part for one box, e.g. ``puerta (derecho)``."""
    cx, cy = box.center
    side = horizontal_band(cx)
    v_pos = vertical_band(cy)
    cls = box.cls or ""

    if _found(r"lamp|headlight", cls):
        return f"faro ({side})"
    if _found(r"tire|llanta", cls):
        return f"llanta ({side})"
    if _found(r"mirror|espejo", cls):
        return f"espejo ({side})"
    if v_pos == "inferior" or _found(r"bumper|defensa", cls):
        return f"defensa ({side})"
    if _found(r"door|puerta", cls):
        return f"puerta ({side})"
    if _found(r"fender|salpicadera", cls):
        return f"salpicadera ({side})"
    if _found(r"hood|cofre", cls):
        return "cofre"
    if _found(r"roof|techo", cls):
        return "techo"
    if _found(r"trunk|cajuela", cls):
        return "cajuela"
    if _found(r"quarter[_|\s]?panel|costado", cls):
        return f"costado ({side})"
    return f"panel ({side} {v_pos})"


def area_labels(boxes: Iterable[DetectionBox]) -> List[str]:
    """Distinct part labels in first-seen order."""
    labels: List[str] = []
    for box in boxes:
        label = part_label(box)
        if label not in labels:
            labels.append(label)
    return labels or [UNIDENTIFIED_AREA]


ZONE_RULES: Tuple[Tuple[str, str], ...] = (
    (r"puerta|door", "door_panel"),
    (r"salpicadera|fender", "door_panel"),
    (r"defensa|bumper", "bumper"),
    (r"cofre|hood", "hood"),
    (r"techo|roof", "roof"),
    (r"costado|quarter_panel", "side_panel"),
    (r"faro|lamp|headlight", "lamp"),
    (r"llanta|tire", "tire"),
    (r"cristal|glass", "glass"),
    (r"espejo|mirror", "mirror"),
)


def zone_key(area_label: str) -> str:
    """Pricing zone for a human-readable area label."""
    for pattern, zone in ZONE_RULES:
        if _found(pattern, area_label):
            return zone
    return DEFAULT_ZONE
