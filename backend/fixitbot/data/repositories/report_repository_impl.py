from typing import Optional

from fixitbot.core.utils.logger import get_logger
from fixitbot.data.adapters.reportlab_pdf_builder import ReportlabPdfBuilder
from fixitbot.domain.entities.estimate_entity import EstimateResult
from fixitbot.domain.exceptions import ReportError
from fixitbot.domain.repositories.report_repository import ReportRepository

_logger = get_logger("report_repo")


class ReportRepositoryImpl(ReportRepository):
    """PDF rendering backed by reportlab."""

    def __init__(self, builder: ReportlabPdfBuilder):
        self._builder = builder

    def render(self, result: EstimateResult, image: Optional[bytes] = None) -> bytes:
        try:
            return self._builder.build(result, image=image)
        except Exception as e:
            _logger.error("Error generando el PDF: %s", e)
            raise ReportError("No se pudo generar el reporte PDF.") from e
