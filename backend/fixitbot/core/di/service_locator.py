from typing import Optional

from fixitbot.core.config.environment_config import EnvironmentConfig
from fixitbot.core.utils.logger import get_logger
from fixitbot.data.adapters.dialogflow_client import DialogflowClient
from fixitbot.data.adapters.reportlab_pdf_builder import ReportlabPdfBuilder
from fixitbot.data.adapters.roboflow_client import RoboflowClient
from fixitbot.data.repositories.catalog_repository_impl import CatalogRepositoryImpl
from fixitbot.data.repositories.chat_repository_impl import ChatRepositoryImpl
from fixitbot.data.repositories.detection_repository_impl import DetectionRepositoryImpl
from fixitbot.data.repositories.report_repository_impl import ReportRepositoryImpl
from fixitbot.domain.repositories.catalog_repository import CatalogRepository
from fixitbot.domain.repositories.chat_repository import ChatRepository
from fixitbot.domain.repositories.detection_repository import DetectionRepository
from fixitbot.domain.repositories.report_repository import ReportRepository
from fixitbot.domain.usecases.ask_assistant_usecase import AskAssistantUseCase
from fixitbot.domain.usecases.detect_damage_usecase import DetectDamageUseCase
from fixitbot.domain.usecases.estimate_damage_usecase import EstimateDamageUseCase
from fixitbot.domain.usecases.generate_report_usecase import GenerateReportUseCase
from fixitbot.domain.usecases.search_catalog_usecase import SearchCatalogUseCase

_logger = get_logger("service_locator")


class ServiceLocator:
    _config: Optional[EnvironmentConfig] = None
    _roboflow_client: Optional[RoboflowClient] = None
    _detection_repo: Optional[DetectionRepository] = None
    _estimate_usecase: Optional[EstimateDamageUseCase] = None
    _detect_usecase: Optional[DetectDamageUseCase] = None
    _dialogflow_client: Optional[DialogflowClient] = None
    _chat_repo: Optional[ChatRepository] = None
    _ask_assistant_usecase: Optional[AskAssistantUseCase] = None
    _report_repo: Optional[ReportRepository] = None
    _report_usecase: Optional[GenerateReportUseCase] = None
    _catalog_repo: Optional[CatalogRepository] = None
    _catalog_usecase: Optional[SearchCatalogUseCase] = None

    @classmethod
    def reset(cls) -> None:
        for name in cls.__annotations__:
            setattr(cls, name, None)

    @classmethod
    def config(cls) -> EnvironmentConfig:
        if cls._config is None:
            cls._config = EnvironmentConfig()
            _logger.info(
                "config APP_ENV=%s ROBOFLOW_MODEL=%s ROBOFLOW_API_KEY=%s DIALOGFLOW=%s",
                cls._config.app_env,
                cls._config.roboflow_model or "MISSING",
                "SET" if cls._config.roboflow_api_key else "MISSING",
                "SET" if cls._config.chat_configured else "MISSING",
            )
        return cls._config

    @classmethod
    def roboflow_client(cls) -> RoboflowClient:
        if cls._roboflow_client is None:
            cfg = cls.config()
            cls._roboflow_client = RoboflowClient(
                api_key=cfg.roboflow_api_key,
                model=cfg.roboflow_model,
                version=cfg.roboflow_version,
                confidence=cfg.roboflow_confidence,
                overlap=cfg.roboflow_overlap,
                detect_base=cfg.roboflow_detect_base,
                api_base=cfg.roboflow_api_base,
                timeout=cfg.detector_timeout,
            )
        return cls._roboflow_client

    @classmethod
    def detection_repo(cls) -> DetectionRepository:
        if cls._detection_repo is None:
            cfg = cls.config()
            cls._detection_repo = DetectionRepositoryImpl(
                client=cls.roboflow_client(),
                default_width=cfg.detector_default_image_width,
                default_height=cfg.detector_default_image_height,
            )
        return cls._detection_repo

    @classmethod
    def estimate_usecase(cls) -> EstimateDamageUseCase:
        if cls._estimate_usecase is None:
            cls._estimate_usecase = EstimateDamageUseCase(
                repository=cls.detection_repo(),
                max_upload_bytes=cls.config().max_upload_bytes,
            )
        return cls._estimate_usecase

    @classmethod
    def detect_usecase(cls) -> DetectDamageUseCase:
        if cls._detect_usecase is None:
            cls._detect_usecase = DetectDamageUseCase(repository=cls.detection_repo())
        return cls._detect_usecase

    @classmethod
    def dialogflow_client(cls) -> DialogflowClient:
        if cls._dialogflow_client is None:
            cfg = cls.config()
            cls._dialogflow_client = DialogflowClient(
                client_email=cfg.google_client_email,
                private_key=cfg.google_private_key,
                project_id=cfg.google_project_id,
                agent_id=cfg.dialogflow_agent_id,
                location=cfg.dialogflow_location,
                language=cfg.dialogflow_language,
                environment=cfg.dialogflow_environment,
            )
        return cls._dialogflow_client

    @classmethod
    def chat_repo(cls) -> ChatRepository:
        if cls._chat_repo is None:
            cls._chat_repo = ChatRepositoryImpl(client=cls.dialogflow_client())
        return cls._chat_repo

    @classmethod
    def ask_assistant_usecase(cls) -> AskAssistantUseCase:
        if cls._ask_assistant_usecase is None:
            cls._ask_assistant_usecase = AskAssistantUseCase(repository=cls.chat_repo())
        return cls._ask_assistant_usecase

    @classmethod
    def report_repo(cls) -> ReportRepository:
        if cls._report_repo is None:
            cls._report_repo = ReportRepositoryImpl(builder=ReportlabPdfBuilder())
        return cls._report_repo

    @classmethod
    def report_usecase(cls) -> GenerateReportUseCase:
        if cls._report_usecase is None:
            cls._report_usecase = GenerateReportUseCase(repository=cls.report_repo())
        return cls._report_usecase

    @classmethod
    def catalog_repo(cls) -> CatalogRepository:
        if cls._catalog_repo is None:
            cls._catalog_repo = CatalogRepositoryImpl()
        return cls._catalog_repo

    @classmethod
    def catalog_usecase(cls) -> SearchCatalogUseCase:
        if cls._catalog_usecase is None:
            cls._catalog_usecase = SearchCatalogUseCase(repository=cls.catalog_repo())
        return cls._catalog_usecase
