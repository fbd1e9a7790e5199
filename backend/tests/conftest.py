import pytest
from fastapi.testclient import TestClient

from fixitbot.core.di.service_locator import ServiceLocator
from fixitbot.domain.entities.bbox_entity import DetectionBox, DetectionResult
from fixitbot.domain.entities.chat_entity import ChatReply
from fixitbot.domain.exceptions import DetectorError
from fixitbot.domain.repositories.chat_repository import ChatRepository
from fixitbot.domain.repositories.detection_repository import DetectionRepository


class FakeDetectionRepository(DetectionRepository):
    """In-memory detector: returns the configured boxes or raises the configured error."""

    def __init__(self, boxes=None, error=None):
        self.boxes = list(boxes or [])
        self.error = error
        self.calls = []

    def _answer(self):
        if self.error is not None:
            raise self.error
        return DetectionResult(boxes=list(self.boxes))

    def detect_file(self, data, filename="upload.jpg"):
        self.calls.append(("file", data, filename))
        return self._answer()

    def detect_base64(self, image_base64):
        self.calls.append(("base64", image_base64))
        return self._answer()

    def health(self):
        return {"ok": True, "model": "car-damage", "key_len": 12}

    def selftest(self):
        if self.error is not None:
            return {"ok": False, "steps": [], "error": str(self.error)}
        return {"ok": True, "steps": [{"step": "base", "status": 200, "body": "Welcome"}]}


class FakeChatRepository(ChatRepository):
    def __init__(self, replies=None, error=None):
        self.replies = replies or ["Hola, ¿en qué te ayudo?"]
        self.error = error
        self.calls = []

    def send(self, session_id, text):
        self.calls.append((session_id, text))
        if self.error is not None:
            raise self.error
        return ChatReply(replies=list(self.replies), raw={"queryResult": {}})


@pytest.fixture
def dent_box():
    return DetectionBox(x=0.1, y=0.1, w=0.3, h=0.3, cls="hood_dent", score=0.8)


@pytest.fixture
def fake_detector():
    return FakeDetectionRepository()


@pytest.fixture
def failing_detector():
    return FakeDetectionRepository(error=DetectorError("Roboflow 503"))


@pytest.fixture
def fake_chat():
    return FakeChatRepository()


@pytest.fixture(autouse=True)
def reset_locator():
    ServiceLocator.reset()
    yield
    ServiceLocator.reset()


@pytest.fixture
def client():
    from fixitbot.presentation.api.main import app
    return TestClient(app)
