from abc import ABC, abstractmethod

from fixitbot.domain.entities.bbox_entity import DetectionResult


class DetectionRepository(ABC):
    """Contrato para obtener cajas de daño normalizadas a partir de una foto."""

    @abstractmethod
    def detect_file(self, data: bytes, filename: str = "upload.jpg") -> DetectionResult:
        """Detecta daños en los bytes de una imagen subida."""
        raise NotImplementedError

    @abstractmethod
    def detect_base64(self, image_base64: str) -> DetectionResult:
        """
        Detecta daños en una imagen codificada en base64.

        - image_base64: base64 plano o data URL (data:image/...;base64,...).
        """
        raise NotImplementedError

    @abstractmethod
    def health(self) -> dict:
        """Pistas seguras sobre la configuración del detector y un ping a su API."""
        raise NotImplementedError

    @abstractmethod
    def selftest(self) -> dict:
        """Prueba en dos pasos: API base y llamada de detección sin imagen."""
        raise NotImplementedError
