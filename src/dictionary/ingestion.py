import asyncio
import logging
from typing import Dict, List, Optional, Sequence

from src.constants.languages import Language, LanguageCatalog
from src.dictionary.deduplication import delete_duplicate_items
from src.dictionary.schemas import DictionaryItemCreate
from src.dictionary.source import TextMapClient
from src.dictionary.store import DictionaryStore

logger = logging.getLogger(__name__)


def to_pending_items(language: Language, text_map: Dict[int, str]) -> List[DictionaryItemCreate]:
    """Turn a downloaded text map into rows; blank translations are dropped"""
    items = [
        DictionaryItemCreate(vocabulary_id=vocabulary_id, language=language, translation=translation)
        for vocabulary_id, translation in text_map.items()
        if translation.strip()
    ]
    skipped = len(text_map) - len(items)
    if skipped:
        logger.debug(f"Skipped {skipped} blank translations for {language.value}")
    return items


class DictionaryIngestionService:
    """
    Reloads the whole dictionary from the text map source.

    A refresh wipes the table first and is not transactional: until it
    finishes, searches can see an empty or partially loaded dictionary.
    Refreshes must not run concurrently with each other.

    The service owns its TextMapClient; use it as an async context manager or
    call `aclose()` when done.
    """

    def __init__(self, store: DictionaryStore, catalog: LanguageCatalog, client: TextMapClient):
        self.store = store
        self.catalog = catalog
        self.client = client

    async def aclose(self):
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def refresh(self, languages: Optional[Sequence[Language]] = None) -> int:
        """
        Wipe the store, load every language concurrently, then de-duplicate.

        Returns the number of inserted rows. The first failing language fails
        the refresh and de-duplication is skipped. Languages still in flight
        are not cancelled: the refresh waits for them, drops their results and
        only then re-raises the first error.
        """
        languages = list(languages) if languages else list(self.catalog.languages)
        for language in languages:
            # Fail before wiping anything
            self.catalog.source_url(language)

        logger.warning(
            "Refreshing dictionary: the store is wiped and reloaded, "
            "searches may return partial results until the refresh completes"
        )
        await self.store.delete_all()

        tasks = [asyncio.create_task(self._load_language(language)) for language in languages]
        try:
            counts = await asyncio.gather(*tasks)
        except Exception:
            # Collect the siblings so none outlives the client and none leaves an unretrieved error
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        total = sum(counts)

        await delete_duplicate_items(self.store)

        logger.info(f"Dictionary refreshed: {total} items for {len(languages)} languages")
        return total

    async def _load_language(self, language: Language) -> int:
        text_map = await self.client.fetch_text_map(language)
        logger.info(f"Updating data for {language.value}")
        count = await self.store.insert_items(to_pending_items(language, text_map))
        logger.info(f"Data for {language.value} updated")
        return count
