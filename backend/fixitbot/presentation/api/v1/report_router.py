from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel

from fixitbot.core.di.service_locator import ServiceLocator
from fixitbot.core.utils.logger import get_logger
from fixitbot.domain.usecases.generate_report_usecase import REPORT_FILENAME
from fixitbot.presentation.api.v1.schemas import ReportResultModel


router = APIRouter(prefix="/api/v1/report", tags=["report"])
logger = get_logger("report_router")


class ReportRequest(BaseModel):
    image: Optional[str] = None  # data URL o base64 plano
    result: ReportResultModel


@router.post("", response_class=Response)
def generate_report(req: ReportRequest):
    try:
        pdf = ServiceLocator.report_usecase().execute(req.result.to_entity(), image=req.image)
    except Exception as e:
        logger.error("Error generando el PDF: %s", e)
        raise HTTPException(status_code=500, detail="No se pudo generar el reporte PDF.")
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{REPORT_FILENAME}"'},
    )
