import json
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from starlette.datastructures import UploadFile

from fixitbot.core.di.service_locator import ServiceLocator
from fixitbot.core.utils.logger import get_logger
from fixitbot.domain.exceptions import DetectorConfigError, DetectorError, InvalidImageError
from fixitbot.presentation.api.v1.schemas import BoxModel


router = APIRouter(prefix="/api/v1/detector", tags=["detector"])
logger = get_logger("detector_router")


class DetectorJsonRequest(BaseModel):
    image_base64: Optional[str] = None


class DetectorResponse(BaseModel):
    boxes: List[BoxModel]


@router.post("", response_model=DetectorResponse, response_model_exclude_none=True)
async def detect(request: Request):
    content_type = request.headers.get("content-type", "")
    usecase = ServiceLocator.detect_usecase()

    try:
        if "multipart/form-data" in content_type:
            form = await request.form()
            upload = form.get("file")
            b64 = form.get("image_base64")
            if isinstance(upload, UploadFile):
                data = await upload.read()
                detection = await run_in_threadpool(usecase.detect_file, data, upload.filename or "upload.jpg")
            elif isinstance(b64, str) and b64:
                detection = await run_in_threadpool(usecase.detect_base64, b64)
            else:
                raise HTTPException(status_code=400, detail="No se encontró 'file' ni 'image_base64' en multipart.")
        elif "application/json" in content_type:
            body = DetectorJsonRequest.model_validate(await request.json())
            if not body.image_base64:
                raise HTTPException(status_code=400, detail="Falta image_base64 en JSON.")
            detection = await run_in_threadpool(usecase.detect_base64, body.image_base64)
        else:
            raise HTTPException(
                status_code=415,
                detail="Content-Type no soportado. Usa multipart/form-data (file) o application/json (image_base64).",
            )
    except HTTPException:
        raise
    except DetectorConfigError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except DetectorError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except (InvalidImageError, json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Fallo inesperado en el detector")
        raise HTTPException(status_code=500, detail="Error en detector.")

    return DetectorResponse(boxes=[BoxModel(**b.to_dict()) for b in detection.boxes])


@router.get("/health")
def detector_health():
    try:
        return ServiceLocator.detect_usecase().health()
    except Exception as e:
        logger.error("Health check del detector falló: %s", e)
        return JSONResponse(status_code=500, content={"ok": False, "error": str(e)})


@router.get("/selftest")
def detector_selftest():
    report = ServiceLocator.detect_usecase().selftest()
    return JSONResponse(status_code=200 if report.get("ok") else 500, content=report)
