from typing import Any, Dict, Optional

import requests
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request as GoogleAuthRequest
from google.oauth2 import service_account

from fixitbot.core.utils.logger import get_logger
from fixitbot.domain.exceptions import ChatConfigError, ChatError

_logger = get_logger("dialogflow_client")

SCOPES = ["https://www.googleapis.com/auth/cloud-platform"]
TOKEN_URI = "https://oauth2.googleapis.com/token"


class DialogflowClient:
    """Client for the Dialogflow CX ``detectIntent`` REST endpoint.

    Authenticates with a service account whose e-mail and private key come
    from the environment (the key may carry literal ``\\n`` sequences).
    """

    def __init__(
        self,
        client_email: str,
        private_key: str,
        project_id: str,
        agent_id: str,
        location: str = "global",
        language: str = "es",
        environment: str = "",
        base_url: str = "https://dialogflow.googleapis.com/v3",
        timeout: float = 30.0,
    ):
        self.client_email = client_email
        self.private_key = (private_key or "").replace("\\n", "\n")
        self.project_id = project_id
        self.agent_id = agent_id
        self.location = location or "global"
        self.language = language or "es"
        self.environment = environment
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._credentials: Optional[service_account.Credentials] = None

    def _agent_path(self) -> str:
        return f"projects/{self.project_id}/locations/{self.location}/agents/{self.agent_id}"

    def session_path(self, session_id: str) -> str:
        return f"{self._agent_path()}/sessions/{session_id}"

    def _access_token(self) -> str:
        if not (self.client_email and self.private_key and self.project_id and self.agent_id):
            raise ChatConfigError("Faltan credenciales de Google o el agente de Dialogflow CX.")
        if self._credentials is None:
            self._credentials = self._load_credentials()
        if not self._credentials.valid:
            try:
                self._credentials.refresh(GoogleAuthRequest())
            except GoogleAuthError as e:
                _logger.error("No se pudo obtener el token de Google: %s", e)
                raise ChatError("No se pudo autenticar con Dialogflow.") from e
        return self._credentials.token

    def _load_credentials(self) -> service_account.Credentials:
        try:
            return service_account.Credentials.from_service_account_info(
                {
                    "type": "service_account",
                    "client_email": self.client_email,
                    "private_key": self.private_key,
                    "project_id": self.project_id,
                    "token_uri": TOKEN_URI,
                },
                scopes=SCOPES,
            )
        except ValueError as e:
            # Malformed PEM key; the parser message stays in the log
            _logger.error("Credenciales de Google inválidas: %s", e)
            raise ChatConfigError("Credenciales de Google inválidas.") from e

    def detect_intent(self, session_id: str, text: str) -> Dict[str, Any]:
        token = self._access_token()
        url = f"{self.base_url}/{self.session_path(session_id)}:detectIntent"
        params = {}
        if self.environment:
            params["environment"] = f"{self._agent_path()}/environments/{self.environment}"
        payload = {"queryInput": {"text": {"text": text}, "languageCode": self.language}}

        try:
            resp = requests.post(
                url,
                params=params,
                json=payload,
                headers={"Authorization": f"Bearer {token}"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            _logger.error("Error de red llamando a Dialogflow: %s", e)
            raise ChatError(f"Dialogflow no disponible: {e}") from e
        if not resp.ok:
            _logger.error("Dialogflow error %s: %.300s", resp.status_code, resp.text)
            raise ChatError(f"Dialogflow {resp.status_code}: {resp.text}")
        return resp.json()
