from abc import ABC, abstractmethod
from typing import List

from fixitbot.domain.entities.catalog_entity import GuideCard, Workshop


class CatalogRepository(ABC):
    @abstractmethod
    def guides(self) -> List[GuideCard]:
        raise NotImplementedError

    @abstractmethod
    def workshops(self) -> List[Workshop]:
        raise NotImplementedError
