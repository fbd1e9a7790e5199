"""Pydantic models shared by the estimate, detector and report routers.

Field names are snake_case; the JSON contract of the web client is camelCase,
so fields carry aliases and responses are serialized by alias.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from fixitbot.domain.entities.bbox_entity import DetectionBox
from fixitbot.domain.entities.estimate_entity import Breakdown, DiyGuide, EstimateResult


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class BoxModel(CamelModel):
    # json.loads accepts NaN/Infinity literals
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    x: float
    y: float
    w: float
    h: float
    cls: str = ""
    score: Optional[float] = None

    def to_entity(self) -> DetectionBox:
        return DetectionBox(x=self.x, y=self.y, w=self.w, h=self.h, cls=self.cls, score=self.score)


class DiyModel(CamelModel):
    title: str
    video_url: str = Field(..., alias="videoUrl")
    steps: List[str] = []


class BreakdownModel(CamelModel):
    base: float
    sev_factor: float = Field(1.0, alias="sevFactor")
    area_factor: float = Field(1.0, alias="areaFactor")
    area_pct: Optional[float] = Field(None, alias="areaPct")
    zone: Optional[str] = None


class BreakdownItemModel(CamelModel):
    part: str
    base: float
    zone: str


class ClassWeightModel(CamelModel):
    cls: str
    weight: float


class InsightsModel(CamelModel):
    top_classes: List[ClassWeightModel] = Field(default_factory=list, alias="topClasses")
    recommend_workshop: bool = Field(False, alias="recommendWorkshop")


class EstimateResponse(CamelModel):
    severity: str
    area: str
    category: str
    estimate: int
    boxes: List[BoxModel] = []
    area_pct: float = Field(0.0, alias="areaPct")
    breakdown: Optional[BreakdownModel] = None
    detailed_breakdown: List[BreakdownItemModel] = Field(default_factory=list, alias="detailedBreakdown")
    insights: Optional[InsightsModel] = None
    diy: Optional[DiyModel] = None
    note: Optional[str] = None

    @classmethod
    def from_entity(cls, result: EstimateResult) -> "EstimateResponse":
        return cls.model_validate(result.to_dict())


class ReportResultModel(CamelModel):
    """The subset of an estimate the PDF report needs."""
    severity: str
    area: str
    category: str
    estimate: float
    diy: Optional[DiyModel] = None
    breakdown: Optional[BreakdownModel] = None

    def to_entity(self) -> EstimateResult:
        breakdown = None
        if self.breakdown is not None:
            breakdown = Breakdown(
                base=self.breakdown.base,
                sev_factor=self.breakdown.sev_factor,
                area_factor=self.breakdown.area_factor,
                area_pct=self.breakdown.area_pct or 0.0,
                zone=self.breakdown.zone or "default",
            )
        diy = None
        if self.diy is not None:
            diy = DiyGuide(title=self.diy.title, video_url=self.diy.video_url, steps=tuple(self.diy.steps))
        return EstimateResult(
            severity=self.severity,
            area=self.area,
            category=self.category,
            estimate=self.estimate,
            boxes=[],
            area_pct=breakdown.area_pct if breakdown else 0.0,
            breakdown=breakdown,
            diy=diy,
        )
