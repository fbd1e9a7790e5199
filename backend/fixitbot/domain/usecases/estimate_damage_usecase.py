from typing import Callable, Iterable, Optional

from fixitbot.core.utils.logger import get_logger
from fixitbot.domain.entities.bbox_entity import DetectionBox, DetectionResult
from fixitbot.domain.entities.estimate_entity import EstimateResult
from fixitbot.domain.exceptions import DetectorError, ImageTooLargeError, InvalidImageError, UnsupportedMediaError
from fixitbot.domain.repositories.detection_repository import DetectionRepository
from fixitbot.domain.services.estimator import calculate_estimate

_logger = get_logger("estimate_usecase")

ALLOWED_CONTENT_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png", "image/webp"})
MAX_UPLOAD_BYTES = 5 * 1024 * 1024


class EstimateDamageUseCase:
    """Caso de uso: de una foto (o de cajas ya detectadas) a una cotización.

    Un fallo del detector nunca hace fallar la solicitud: se continúa sin
    detecciones y se deja constancia en la nota del resultado.
    """

    def __init__(self, repository: DetectionRepository, max_upload_bytes: int = MAX_UPLOAD_BYTES):
        self._repo = repository
        self._max_upload_bytes = max_upload_bytes

    def recalculate(self, boxes: Iterable[DetectionBox], note: Optional[str] = None) -> EstimateResult:
        """Recalcula a partir de cajas enviadas por el cliente, sin llamar al detector."""
        boxes = list(boxes)
        if not boxes:
            raise InvalidImageError("Faltan 'boxes' o 'image_base64' en JSON.")
        result = calculate_estimate(boxes)
        result.add_note(note)
        return result

    def estimate_upload(self, data: bytes, filename: str = "upload.jpg", content_type: Optional[str] = None) -> EstimateResult:
        self.validate_upload(data, content_type)
        detection = self._detect(lambda: self._repo.detect_file(data, filename or "upload.jpg"))
        result = calculate_estimate(detection.boxes, fallback_size=len(data))
        result.add_note(detection.note)
        return result

    def estimate_base64(self, image_base64: str) -> EstimateResult:
        if not image_base64 or not image_base64.strip():
            raise InvalidImageError("Falta image_base64.")
        detection = self._detect(lambda: self._repo.detect_base64(image_base64.strip()))
        result = calculate_estimate(detection.boxes)
        result.add_note(detection.note)
        return result

    def validate_upload(self, data: bytes, content_type: Optional[str]) -> None:
        size = len(data)
        if content_type and content_type not in ALLOWED_CONTENT_TYPES and size > 0:
            raise UnsupportedMediaError("Formato de imagen no soportado. Usa JPG, PNG o WEBP.")
        if size > self._max_upload_bytes:
            mb = self._max_upload_bytes / (1024 * 1024)
            raise ImageTooLargeError(f"Imagen demasiado grande (máximo {mb:g} MB).")

    @staticmethod
    def _detect(call: Callable[[], DetectionResult]) -> DetectionResult:
        try:
            return call()
        except DetectorError as e:
            _logger.warning("Detector no disponible, se continúa sin detecciones: %s", e)
            return DetectionResult(boxes=[], note=f"Error al llamar al detector: {e}")
