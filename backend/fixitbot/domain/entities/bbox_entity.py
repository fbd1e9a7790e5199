from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RawPrediction:
    """A detector prediction in pixel space.

    (x, y) is the box center; width/height are in pixels of the source image.
    """
    x: float
    y: float
    width: float
    height: float
    cls: str
    confidence: Optional[float] = None


@dataclass(frozen=True)
class DetectionBox:
    """A detected damage region in fractional image coordinates.

    - x, y: top-left corner as a fraction of the image width/height
    - w, h: fractional width/height
    - cls: damage label (free text or canonical)
    - score: optional detector confidence [0.0 - 1.0]
    """
    x: float
    y: float
    w: float
    h: float
    cls: str
    score: Optional[float] = None

    @property
    def area(self) -> float:
        return self.w * self.h

    @property
    def center(self):
        return self.x + self.w / 2, self.y + self.h / 2

    def to_dict(self) -> dict:
        data = {"x": self.x, "y": self.y, "w": self.w, "h": self.h, "cls": self.cls}
        if self.score is not None:
            data["score"] = self.score
        return data


@dataclass
class DetectionResult:
    """Boxes produced by one detector call plus an optional human-readable note."""
    boxes: list
    note: Optional[str] = None
