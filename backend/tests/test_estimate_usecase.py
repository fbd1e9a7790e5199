import pytest

from conftest import FakeDetectionRepository
from fixitbot.domain.entities.bbox_entity import DetectionBox
from fixitbot.domain.exceptions import ImageTooLargeError, InvalidImageError, UnsupportedMediaError
from fixitbot.domain.services.estimator import FALLBACK_NOTE
from fixitbot.domain.usecases.detect_damage_usecase import DetectDamageUseCase
from fixitbot.domain.usecases.estimate_damage_usecase import EstimateDamageUseCase


class TestEstimateDamageUseCase:
    def test_upload_uses_detector_boxes(self, dent_box):
        repo = FakeDetectionRepository(boxes=[dent_box])
        result = EstimateDamageUseCase(repo).estimate_upload(b"\xff\xd8jpeg", "car.jpg", "image/jpeg")

        assert repo.calls == [("file", b"\xff\xd8jpeg", "car.jpg")]
        assert result.area == "cofre"
        assert result.note is None

    def test_detector_failure_degrades_to_fallback(self, failing_detector):
        result = EstimateDamageUseCase(failing_detector).estimate_upload(b"x" * 1000, "car.jpg", "image/jpeg")

        assert result.severity == "bajo"
        assert result.area == "componente exterior (estimado)"
        assert result.note == f"{FALLBACK_NOTE} | Error al llamar al detector: Roboflow 503"

    def test_base64_failure_uses_default_zone(self, failing_detector):
        result = EstimateDamageUseCase(failing_detector).estimate_base64("QUJD")
        assert result.area == "zona no identificada"
        assert result.estimate == 400
        assert "Error al llamar al detector" in result.note

    def test_unexpected_detector_errors_propagate(self):
        repo = FakeDetectionRepository(error=KeyError("bug"))
        with pytest.raises(KeyError):
            EstimateDamageUseCase(repo).estimate_base64("QUJD")

    def test_unsupported_media(self, fake_detector):
        with pytest.raises(UnsupportedMediaError):
            EstimateDamageUseCase(fake_detector).estimate_upload(b"GIF89a", "a.gif", "image/gif")
        assert fake_detector.calls == []

    def test_empty_body_skips_type_check(self, fake_detector):
        EstimateDamageUseCase(fake_detector).validate_upload(b"", "text/plain")

    def test_too_large(self, fake_detector):
        with pytest.raises(ImageTooLargeError):
            EstimateDamageUseCase(fake_detector, max_upload_bytes=10).estimate_upload(b"x" * 11, "a.png", "image/png")

    def test_recalculate_keeps_client_note(self, dent_box, fake_detector):
        result = EstimateDamageUseCase(fake_detector).recalculate([dent_box], note="editado a mano")
        assert result.note == "editado a mano"
        assert fake_detector.calls == []

    def test_recalculate_requires_boxes(self, fake_detector):
        with pytest.raises(InvalidImageError):
            EstimateDamageUseCase(fake_detector).recalculate([])

    def test_missing_base64(self, fake_detector):
        with pytest.raises(InvalidImageError):
            EstimateDamageUseCase(fake_detector).estimate_base64("  ")


class TestDetectDamageUseCase:
    def test_empty_file_rejected(self, fake_detector):
        with pytest.raises(InvalidImageError):
            DetectDamageUseCase(fake_detector).detect_file(b"")

    def test_returns_unfiltered_boxes(self):
        low = DetectionBox(0.1, 0.1, 0.05, 0.05, "rust", score=0.2)
        repo = FakeDetectionRepository(boxes=[low])
        assert DetectDamageUseCase(repo).detect_base64("QUJD").boxes == [low]
