import asyncio
import logging
from typing import List, Optional, Tuple

from src.constants.languages import LanguageCatalog
from src.dictionary.schemas import (
    DictionaryItemResponse, NestedDictionaryItem, TranslationSearchResponse
)
from src.dictionary.store import DictionaryStore
from src.pagination import get_offset, get_total_pages, normalize_page

logger = logging.getLogger(__name__)


class DictionaryService:
    """Service for dictionary search"""

    def __init__(self, store: DictionaryStore, catalog: LanguageCatalog):
        self.store = store
        self.catalog = catalog

    async def search(
        self,
        term: str,
        page: Optional[int],
        page_size: int,
    ) -> Tuple[int, List[NestedDictionaryItem]]:
        """
        Search vocabulary entries whose translation contains `term`.

        Entries are ranked by the length of the matching translation, shortest
        first. Returns the total number of pages and the requested page, each
        entry carrying its translations in every stored language.
        """
        if not term:
            return 0, []

        total = await self.store.count_matches(term)
        total_pages = get_total_pages(total, page_size)
        logger.debug(f"'{term}' matched {total} vocabulary entries ({total_pages} pages)")
        if total == 0:
            return 0, []

        page = normalize_page(page)
        targets = await self.store.find_matches(term, get_offset(page, page_size), page_size)

        # gather keeps argument order, so the ranking survives the fan-out
        siblings = await asyncio.gather(
            *(self.store.get_by_vocabulary_id(target.vocabulary_id) for target in targets)
        )

        return total_pages, [
            self._nest(target, items) for target, items in zip(targets, siblings)
        ]

    async def search_translations(
        self,
        term: str,
        page: Optional[int],
        page_size: int,
    ) -> TranslationSearchResponse:
        """Search and wrap the page into the API response"""
        total_pages, results = await self.search(term, page, page_size)
        return TranslationSearchResponse(
            total_pages=total_pages,
            page=normalize_page(page),
            page_size=page_size,
            results=results,
        )

    def _nest(
        self,
        target: DictionaryItemResponse,
        items: List[DictionaryItemResponse],
    ) -> NestedDictionaryItem:
        ordered = sorted(
            items,
            key=lambda item: self.catalog.order(item.language) if item.language in self.catalog else len(self.catalog),
        )
        return NestedDictionaryItem(
            vocabulary_id=target.vocabulary_id,
            target=target.translation,
            target_language=target.language,
            translations={item.language: item.translation for item in ordered},
        )
