from typing import List, Optional

from fixitbot.domain.entities.catalog_entity import GuideCard, Workshop
from fixitbot.domain.repositories.catalog_repository import CatalogRepository


class SearchCatalogUseCase:
    """Case-insensitive text search over the DIY guide and workshop catalogs."""

    def __init__(self, repository: CatalogRepository) -> None:
        self._repo = repository

    def guides(self, query: Optional[str] = None) -> List[GuideCard]:
        q = (query or "").strip().lower()
        return [g for g in self._repo.guides() if not q or q in g.search_text()]

    def workshops(self, query: Optional[str] = None) -> List[Workshop]:
        q = (query or "").strip().lower()
        return [w for w in self._repo.workshops() if not q or q in w.search_text()]
