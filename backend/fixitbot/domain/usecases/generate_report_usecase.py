import base64
import binascii
from typing import Optional

from fixitbot.domain.entities.estimate_entity import EstimateResult
from fixitbot.domain.repositories.report_repository import ReportRepository


REPORT_FILENAME = "FixItBot-Reporte-Analisis.pdf"


def decode_image(image: Optional[str]) -> Optional[bytes]:
    """Accepts a data URL (data:image/...;base64,...) or bare base64."""
    if not image:
        return None
    payload = image
    if image.startswith("data:image"):
        _, sep, payload = image.partition(";base64,")
        if not sep:
            return None
    try:
        return base64.b64decode(payload, validate=False) or None
    except (binascii.Error, ValueError):
        return None


class GenerateReportUseCase:
    def __init__(self, repository: ReportRepository) -> None:
        self._repo = repository

    def execute(self, result: EstimateResult, image: Optional[str] = None) -> bytes:
        return self._repo.render(result, image=decode_image(image))
