from typing import Any, Dict, List
from urllib.parse import quote

import requests

from fixitbot.core.utils.logger import get_logger
from fixitbot.domain.exceptions import DetectorConfigError, DetectorError

_logger = get_logger("roboflow_client")

_USER_AGENT = "fixitbot-backend/1.0"


def strip_data_uri_prefix(image_base64: str) -> str:
    marker = "base64,"
    i = image_base64.find(marker)
    return image_base64[i + len(marker):] if i >= 0 else image_base64


class RoboflowClient:
    """Cliente para un modelo de detección hospedado en Roboflow.

    Devuelve el JSON crudo de la API; el repositorio se encarga de validarlo
    y de normalizar las cajas.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        version: str = "1",
        confidence: str = "0.25",
        overlap: str = "0.45",
        detect_base: str = "https://detect.roboflow.com",
        api_base: str = "https://api.roboflow.com",
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.model = model
        self.version = version or "1"
        self.confidence = confidence
        self.overlap = overlap
        self.detect_base = detect_base.rstrip("/")
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    def _ensure_configured(self) -> None:
        if not self.model or not self.api_key:
            _logger.error("Falta ROBOFLOW_MODEL o ROBOFLOW_API_KEY")
            raise DetectorConfigError("Faltan variables de entorno de Roboflow.")

    def detect_url(self, with_thresholds: bool = True) -> str:
        url = (
            f"{self.detect_base}/{quote(self.model, safe='')}/{quote(self.version, safe='')}"
            f"?api_key={quote(self.api_key, safe='')}"
        )
        if with_thresholds:
            url += f"&confidence={quote(self.confidence, safe='')}&overlap={quote(self.overlap, safe='')}"
        return url + "&format=json"

    def _post(self, **kwargs) -> Dict[str, Any]:
        self._ensure_configured()
        try:
            resp = requests.post(self.detect_url(), timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            _logger.error("Error de red llamando a Roboflow: %s", e)
            raise DetectorError(f"Roboflow no disponible: {e}") from e
        if not resp.ok:
            detail = (resp.text or "")[:500]
            _logger.error("Roboflow error %s: %s", resp.status_code, detail)
            raise DetectorError(f"Roboflow {resp.status_code}" + (f": {detail}" if detail else ""))
        try:
            return resp.json()
        except ValueError as e:
            raise DetectorError("Respuesta de Roboflow no es JSON") from e

    def detect_file(self, data: bytes, filename: str = "upload.jpg") -> Dict[str, Any]:
        return self._post(files={"file": (filename or "upload.jpg", data)})

    def detect_base64(self, image_base64: str) -> Dict[str, Any]:
        return self._post(
            data={"image": strip_data_uri_prefix(image_base64)},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

    def ping(self) -> requests.Response:
        """GET the account API root; a valid key answers 200 with a welcome text."""
        return requests.get(
            f"{self.api_base}/",
            params={"api_key": self.api_key},
            headers={"User-Agent": _USER_AGENT},
            timeout=self.timeout,
        )

    def health(self) -> Dict[str, Any]:
        ping = self.ping()
        preview = (ping.text or "")[:80]
        return {
            "ok": True,
            # Never echo the key, only safe hints
            "model": self.model,
            "version": self.version,
            "key_len": len(self.api_key),
            "key_prefix": self.api_key[:4],
            "key_suffix": self.api_key[-4:] if self.api_key else "",
            "looks_publishable": self.api_key.startswith("rf_"),
            "ping_status": ping.status_code,
            "ping_preview": preview,
            "hint": "Si ping_status !== 200 o ping_preview no contiene 'Welcome', la key es inválida/en mal formato.",
        }

    def selftest(self) -> Dict[str, Any]:
        env = {
            "model": self.model,
            "version": self.version,
            "keyLen": len(self.api_key),
            "keyStartsWith_rf": self.api_key.startswith("rf_"),
        }
        steps: List[Dict[str, Any]] = []
        try:
            base = self.ping()
            steps.append({"step": "base", "status": base.status_code, "body": (base.text or "")[:200]})
            if not base.ok:
                return {
                    "ok": False,
                    "env": env,
                    "steps": steps,
                    "error": "Roboflow base API no responde 200 (clave inválida o mal pegada).",
                }
            # Detect call without an image: only validates auth, must not answer 403
            det = requests.post(
                self.detect_url(with_thresholds=False),
                headers={"User-Agent": _USER_AGENT},
                timeout=self.timeout,
            )
            steps.append({"step": "detect", "status": det.status_code, "body": (det.text or "")[:200]})
        except requests.RequestException as e:
            _logger.error("Selftest de Roboflow falló: %s", e)
            return {"ok": False, "env": env, "steps": steps, "error": str(e)}
        return {"ok": True, "env": env, "steps": steps}
