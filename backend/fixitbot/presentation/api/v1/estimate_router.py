import json
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ValidationError
from starlette.datastructures import UploadFile

from fixitbot.core.di.service_locator import ServiceLocator
from fixitbot.core.utils.logger import get_logger
from fixitbot.domain.exceptions import ImageTooLargeError, InvalidImageError, UnsupportedMediaError
from fixitbot.presentation.api.v1.schemas import BoxModel, EstimateResponse


router = APIRouter(prefix="/api/v1/estimate", tags=["estimate"])
logger = get_logger("estimate_router")

# Malformed requests; any other ValueError is a server fault
CLIENT_ERRORS = (InvalidImageError, json.JSONDecodeError, UnicodeDecodeError, ValidationError)


class EstimateJsonRequest(BaseModel):
    boxes: Optional[List[BoxModel]] = None
    note: Optional[str] = None
    image_base64: Optional[str] = None


def _pick_file(form) -> Optional[UploadFile]:
    for key in ("file", "image"):
        value = form.get(key)
        if isinstance(value, UploadFile):
            return value
    return None


@router.post("", response_model=EstimateResponse, response_model_exclude_none=True)
async def estimate(request: Request):
    """Cotiza a partir de cajas (JSON), de una imagen base64 o de un archivo subido."""
    content_type = request.headers.get("content-type", "")
    usecase = ServiceLocator.estimate_usecase()

    try:
        if "application/json" in content_type:
            body = EstimateJsonRequest.model_validate(await request.json())
            if body.boxes:
                result = usecase.recalculate([b.to_entity() for b in body.boxes], note=body.note)
            elif body.image_base64:
                result = await run_in_threadpool(usecase.estimate_base64, body.image_base64)
            else:
                raise HTTPException(status_code=400, detail="Faltan 'boxes' o 'image_base64' en JSON.")

        elif "multipart/form-data" in content_type:
            form = await request.form()
            upload = _pick_file(form)
            b64 = form.get("image_base64")
            if upload is not None:
                data = await upload.read()
                result = await run_in_threadpool(
                    usecase.estimate_upload, data, upload.filename or "upload.jpg", upload.content_type
                )
            elif isinstance(b64, str) and b64:
                result = await run_in_threadpool(usecase.estimate_base64, b64)
            else:
                raise HTTPException(status_code=400, detail="No se subió ningún 'file'/'image' ni 'image_base64'.")

        else:
            raise HTTPException(
                status_code=415,
                detail="Content-Type no soportado. Usa application/json o multipart/form-data.",
            )
    except HTTPException:
        raise
    except UnsupportedMediaError as e:
        raise HTTPException(status_code=415, detail=str(e))
    except ImageTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except CLIENT_ERRORS as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Fallo inesperado en la API de estimación")
        raise HTTPException(status_code=500, detail="Error de servidor interno en la API de estimación.")

    logger.info(
        "Estimación: severidad=%s categoria=%s total=%s cajas=%d",
        result.severity, result.category, result.estimate, len(result.boxes),
    )
    return EstimateResponse.from_entity(result)
