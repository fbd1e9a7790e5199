import os
from dataclasses import dataclass

from dotenv import load_dotenv


# .env values override blanks coming from the hosting environment.
load_dotenv(dotenv_path=os.path.join(os.getcwd(), ".env"), override=True)


def _env(name: str, default: str = "") -> str:
    # Hosting dashboards tend to keep surrounding spaces and quotes when pasting secrets
    value = os.getenv(name, default) or default
    return value.strip().strip('"').strip("'")


@dataclass
class EnvironmentConfig:
    app_env: str = _env("APP_ENV", "development")
    log_level: str = _env("LOG_LEVEL", "INFO")
    # Hosted object detector (Roboflow-style endpoint)
    roboflow_model: str = _env("ROBOFLOW_MODEL")
    roboflow_version: str = _env("ROBOFLOW_VERSION", "1")
    roboflow_api_key: str = _env("ROBOFLOW_API_KEY")
    roboflow_confidence: str = _env("ROBOFLOW_CONFIDENCE", "0.25")
    roboflow_overlap: str = _env("ROBOFLOW_OVERLAP", "0.45")
    roboflow_detect_base: str = _env("ROBOFLOW_DETECT_BASE", "https://detect.roboflow.com")
    roboflow_api_base: str = _env("ROBOFLOW_API_BASE", "https://api.roboflow.com")
    detector_timeout: float = float(_env("DETECTOR_TIMEOUT", "30"))
    # Used when the detector response does not carry the image size
    detector_default_image_width: int = int(_env("DETECTOR_DEFAULT_IMAGE_WIDTH", "1000"))
    detector_default_image_height: int = int(_env("DETECTOR_DEFAULT_IMAGE_HEIGHT", "1000"))
    max_upload_bytes: int = int(_env("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))
    # Dialogflow CX chat agent
    google_client_email: str = _env("GOOGLE_CLIENT_EMAIL")
    google_private_key: str = _env("GOOGLE_PRIVATE_KEY")
    google_project_id: str = _env("GOOGLE_PROJECT_ID")
    dialogflow_location: str = _env("DIALOGFLOW_CX_LOCATION", "global")
    dialogflow_agent_id: str = _env("DIALOGFLOW_CX_AGENT_ID")
    dialogflow_language: str = _env("DIALOGFLOW_CX_LANGUAGE", "es")
    dialogflow_environment: str = _env("DIALOGFLOW_CX_ENVIRONMENT")
    # Comma separated list, "*" allows every origin
    cors_allow_origins: str = _env("CORS_ALLOW_ORIGINS", "*")

    @property
    def detector_configured(self) -> bool:
        return bool(self.roboflow_model and self.roboflow_api_key)

    @property
    def chat_configured(self) -> bool:
        return bool(
            self.google_client_email
            and self.google_private_key
            and self.google_project_id
            and self.dialogflow_agent_id
        )
