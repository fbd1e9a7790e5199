from typing import List, Sequence

from fixitbot.data.sources import static_catalog
from fixitbot.domain.entities.catalog_entity import GuideCard, Workshop
from fixitbot.domain.repositories.catalog_repository import CatalogRepository


class CatalogRepositoryImpl(CatalogRepository):
    """Serves the in-process guide and workshop lists."""

    def __init__(
        self,
        guides: Sequence[GuideCard] = static_catalog.GUIDES,
        workshops: Sequence[Workshop] = static_catalog.WORKSHOPS,
    ) -> None:
        self._guides = tuple(guides)
        self._workshops = tuple(workshops)

    def guides(self) -> List[GuideCard]:
        return list(self._guides)

    def workshops(self) -> List[Workshop]:
        return list(self._workshops)
