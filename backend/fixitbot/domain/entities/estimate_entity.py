from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from fixitbot.domain.entities.bbox_entity import DetectionBox


SEVERITY_LOW = "bajo"
SEVERITY_MEDIUM = "intermedio"
SEVERITY_HIGH = "avanzado"
SEVERITIES = (SEVERITY_LOW, SEVERITY_MEDIUM, SEVERITY_HIGH)


@dataclass(frozen=True)
class DiyGuide:
    title: str
    video_url: str
    steps: tuple

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "videoUrl": self.video_url, "steps": list(self.steps)}


@dataclass
class BreakdownItem:
    """One priced part: the human-readable area label and its pricing zone."""
    part: str
    base: float
    zone: str


@dataclass
class Breakdown:
    base: float
    sev_factor: float
    area_factor: float
    area_pct: float
    zone: str


@dataclass
class ClassWeight:
    cls: str
    weight: float


@dataclass
class Insights:
    top_classes: List[ClassWeight]
    recommend_workshop: bool


@dataclass
class EstimateResult:
    """Result of the damage-to-estimate heuristic for a single photo."""
    severity: str
    area: str
    category: str
    estimate: int
    boxes: List[DetectionBox]
    area_pct: float
    breakdown: Optional[Breakdown]
    detailed_breakdown: List[BreakdownItem] = field(default_factory=list)
    insights: Optional[Insights] = None
    diy: Optional[DiyGuide] = None
    note: Optional[str] = None

    def add_note(self, note: Optional[str]) -> None:
        if not note:
            return
        self.note = f"{self.note} | {note}" if self.note else note

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used by the web client."""
        data: Dict[str, Any] = {
            "severity": self.severity,
            "area": self.area,
            "category": self.category,
            "estimate": self.estimate,
            "boxes": [b.to_dict() for b in self.boxes],
            "areaPct": self.area_pct,
            "detailedBreakdown": [
                {"part": d.part, "base": d.base, "zone": d.zone} for d in self.detailed_breakdown
            ],
        }
        if self.breakdown is not None:
            data["breakdown"] = {
                "base": self.breakdown.base,
                "sevFactor": self.breakdown.sev_factor,
                "areaFactor": self.breakdown.area_factor,
                "areaPct": self.breakdown.area_pct,
                "zone": self.breakdown.zone,
            }
        if self.insights is not None:
            data["insights"] = {
                "topClasses": [{"cls": c.cls, "weight": c.weight} for c in self.insights.top_classes],
                "recommendWorkshop": self.insights.recommend_workshop,
            }
        if self.diy is not None:
            data["diy"] = self.diy.to_dict()
        if self.note:
            data["note"] = self.note
        return data
