from fixitbot.domain.entities.bbox_entity import DetectionResult
from fixitbot.domain.exceptions import InvalidImageError
from fixitbot.domain.repositories.detection_repository import DetectionRepository


class DetectDamageUseCase:
    """Raw detection: normalized boxes straight from the detector, errors propagate."""

    def __init__(self, repository: DetectionRepository) -> None:
        self._repo = repository

    def detect_file(self, data: bytes, filename: str = "upload.jpg") -> DetectionResult:
        if not data:
            raise InvalidImageError("El archivo recibido está vacío.")
        return self._repo.detect_file(data, filename or "upload.jpg")

    def detect_base64(self, image_base64: str) -> DetectionResult:
        if not image_base64 or not image_base64.strip():
            raise InvalidImageError("Falta image_base64.")
        return self._repo.detect_base64(image_base64.strip())

    def health(self) -> dict:
        return self._repo.health()

    def selftest(self) -> dict:
        return self._repo.selftest()
