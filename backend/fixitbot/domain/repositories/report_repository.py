from abc import ABC, abstractmethod
from typing import Optional

from fixitbot.domain.entities.estimate_entity import EstimateResult


class ReportRepository(ABC):
    @abstractmethod
    def render(self, result: EstimateResult, image: Optional[bytes] = None) -> bytes:
        """Render the estimate (and optional evidence photo) as a PDF document."""
        raise NotImplementedError
