import re
from numbers import Real
from typing import Any, Dict, List, Optional

from fixitbot.core.utils.logger import get_logger
from fixitbot.data.adapters.roboflow_client import RoboflowClient
from fixitbot.domain.entities.bbox_entity import DetectionBox, DetectionResult, RawPrediction
from fixitbot.domain.exceptions import DetectorError
from fixitbot.domain.repositories.detection_repository import DetectionRepository
from fixitbot.domain.services.box_filter import (
    DEFAULT_IMAGE_HEIGHT,
    DEFAULT_IMAGE_WIDTH,
    normalize_prediction,
)

_logger = get_logger("detection_repo")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_prediction(p: Any) -> bool:
    return (
        isinstance(p, dict)
        and all(_is_number(p.get(k)) for k in ("x", "y", "width", "height"))
        and isinstance(p.get("class"), str)
        and (p.get("confidence") is None or _is_number(p.get("confidence")))
    )


def _is_image_meta(img: Any) -> bool:
    if img is None:
        return True
    return isinstance(img, dict) and all(
        img.get(k) is None or _is_number(img.get(k)) for k in ("width", "height")
    )


def slug_class(label: str) -> str:
    return re.sub(r"\s+", "_", label.lower())


class DetectionRepositoryImpl(DetectionRepository):
    """Repositorio que usa RoboflowClient y normaliza sus predicciones."""

    def __init__(
        self,
        client: RoboflowClient,
        default_width: int = DEFAULT_IMAGE_WIDTH,
        default_height: int = DEFAULT_IMAGE_HEIGHT,
    ):
        self._client = client
        self._default_width = default_width
        self._default_height = default_height

    def detect_file(self, data: bytes, filename: str = "upload.jpg") -> DetectionResult:
        return DetectionResult(boxes=self.to_boxes(self._client.detect_file(data, filename)))

    def detect_base64(self, image_base64: str) -> DetectionResult:
        return DetectionResult(boxes=self.to_boxes(self._client.detect_base64(image_base64)))

    def health(self) -> dict:
        return self._client.health()

    def selftest(self) -> dict:
        return self._client.selftest()

    def to_boxes(self, raw: Dict[str, Any]) -> List[DetectionBox]:
        """Validate a detector payload and map it to fractional boxes."""
        if not isinstance(raw, dict):
            raise DetectorError("Respuesta de Roboflow no válida")
        preds = raw.get("predictions")
        image = raw.get("image")
        if not isinstance(preds, list) or not all(_is_prediction(p) for p in preds) or not _is_image_meta(image):
            _logger.error("Respuesta no válida de Roboflow: %.300s", raw)
            raise DetectorError("Respuesta de Roboflow no válida")

        image = image or {}
        width: Optional[float] = image.get("width") or self._default_width
        height: Optional[float] = image.get("height") or self._default_height
        boxes = [
            normalize_prediction(
                RawPrediction(
                    x=p["x"],
                    y=p["y"],
                    width=p["width"],
                    height=p["height"],
                    cls=slug_class(p["class"]),
                    confidence=p.get("confidence"),
                ),
                width,
                height,
            )
            for p in preds
        ]
        _logger.info("Roboflow devolvió %d predicciones (imagen %sx%s)", len(boxes), width, height)
        return boxes
