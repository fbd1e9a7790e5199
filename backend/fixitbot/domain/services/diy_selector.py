"""Do-it-yourself guide selection and workshop insights."""
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional

from fixitbot.domain.entities.bbox_entity import DetectionBox
from fixitbot.domain.entities.estimate_entity import (
    SEVERITY_HIGH,
    SEVERITY_LOW,
    SEVERITY_MEDIUM,
    ClassWeight,
    DiyGuide,
)
from fixitbot.domain.services.box_filter import clamp01
from fixitbot.domain.services.class_normalizer import is_hard_class, map_to_diy_key, normalize_class


DIY_MEDIUM_MAX_AREA = 0.03
WORKSHOP_MIN_AREA = 0.08
TOP_CLASSES_LIMIT = 3

_VIDEO = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"

FRIENDLY_DIY = frozenset({
    "scratch",
    "paint_damage",
    "bumper_scuff",
    "dent",
    "door_ding",
    "paint_transfer",
    "headlight_restore",
    "plastic_bumper_crack_small",
    "clearcoat_chip",
    "rust_corrosion",
    "flat_tire",
})

DIY_LIBRARY = MappingProxyType({
    "scratch": DiyGuide(
        title="Pulido de rayón leve (sin traspasar barniz)",
        video_url=_VIDEO,
        steps=(
            "Lava y seca el área.",
            "Enmascara orillas con cinta.",
            "Aplica compuesto pulidor (corte medio) en pad de espuma.",
            "Pulir con presión ligera, 30–60 s por pasada.",
            "Microfibra para retirar residuo y revisar.",
        ),
    ),
    "paint_damage": DiyGuide(
        title="Retoque puntual de pintura",
        video_url=_VIDEO,
        steps=(
            "Desengrasa con isopropílico.",
            "Lija suave si hay rebabas (grano 2000).",
            "Aplica capas finas de pintura de retoque.",
            "Cura y sella con barniz.",
            "Pulido ligero de integración.",
        ),
    ),
    "dent": DiyGuide(
        title="PDR casero (golpe pequeño sin romper pintura)",
        video_url=_VIDEO,
        steps=(
            "Calienta ligeramente el panel.",
            "Coloca ventosa/tab en el centro del golpe.",
            "Tira con incrementos cortos.",
            "Corrige alta/baja con martillo de teflón.",
        ),
    ),
    "door_ding": DiyGuide(
        title="Ding de puerta con kit de ventosa",
        video_url=_VIDEO,
        steps=(
            "Limpia y marca el centro.",
            "Pega tab pequeño con pegamento.",
            "Tira con golpes cortos.",
            "Corrige perímetro con puntero.",
        ),
    ),
    "headlight_restore": DiyGuide(
        title="Restauración de faro opaco",
        video_url=_VIDEO,
        steps=(
            "Enmascara el contorno.",
            "Lija progresivo 1000→2000 en húmedo.",
            "Pulido plástico hasta transparencia.",
            "Sellador UV para proteger.",
        ),
    ),
    "paint_transfer": DiyGuide(
        title="Quitar transferencia de pintura sin repintar",
        video_url=_VIDEO,
        steps=(
            "APC/citrus en la marca, 1–2 min.",
            "Frota con clay bar o borrador melamínico suave.",
            "Pulido suave para recuperar brillo.",
        ),
    ),
    "rust_corrosion": DiyGuide(
        title="Tratamiento de óxido superficial",
        video_url=_VIDEO,
        steps=(
            "Lija hasta metal sano.",
            "Desengrasa.",
            "Convertidor de óxido y primer anticorrosivo.",
            "Color y barniz; pulido final.",
        ),
    ),
    "plastic_bumper_crack_small": DiyGuide(
        title="Grieta pequeña en defensa plástica",
        video_url=_VIDEO,
        steps=(
            "Bisela por detrás; desengrasa.",
            "Resina/epoxi + malla; curar.",
            "Lijar/emplastar; fondo, color, barniz.",
        ),
    ),
    "clearcoat_chip": DiyGuide(
        title="Astilla de barniz (chip)",
        video_url=_VIDEO,
        steps=(
            "Limpia y desengrasa.",
            "Gota de barniz en el chip.",
            "Curado y pulido suave.",
        ),
    ),
    "flat_tire": DiyGuide(
        title="Reparación temporal de pinchazo (mecha)",
        video_url=_VIDEO,
        steps=(
            "Marca y extrae el objeto.",
            "Agranda con herramienta en T.",
            "Inserta mecha con pegamento.",
            "Corta excedente; infla y revisa fugas.",
        ),
    ),
})


def diy_eligible(severity: str, area_pct: float = 0.0) -> bool:
    return severity == SEVERITY_LOW or (severity == SEVERITY_MEDIUM and area_pct <= DIY_MEDIUM_MAX_AREA)


def pick_diy(category: str, severity: str, area_pct: float = 0.0) -> Optional[DiyGuide]:
    if not diy_eligible(severity, area_pct):
        return None
    key = map_to_diy_key(category)
    if key not in FRIENDLY_DIY:
        return None
    guide = DIY_LIBRARY.get(key)
    if guide is None or not guide.video_url.startswith("http"):
        return None
    return guide


def top_classes(boxes: Iterable[DetectionBox], limit: int = TOP_CLASSES_LIMIT) -> List[ClassWeight]:
    """Canonical classes ranked by confidence-weighted area.

    Boxes without a score count at half weight.
    """
    acc: Dict[str, float] = {}
    for b in boxes:
        factor = 0.5 + 0.5 * clamp01(b.score) if b.score is not None else 0.5
        cls = normalize_class(b.cls)
        acc[cls] = acc.get(cls, 0.0) + b.area * factor
    ranked = sorted(acc.items(), key=lambda item: item[1], reverse=True)
    return [ClassWeight(cls=cls, weight=weight) for cls, weight in ranked[:limit]]


def recommend_workshop(severity: str, area_pct: float, boxes: Iterable[DetectionBox]) -> bool:
    if severity == SEVERITY_HIGH or area_pct > WORKSHOP_MIN_AREA:
        return True
    return any(is_hard_class(b.cls) for b in boxes)
