from functools import lru_cache

from fastapi import Depends

from src.config import settings
from src.constants.languages import LanguageCatalog
from src.database import AsyncSessionLocal
from src.dictionary.ingestion import DictionaryIngestionService
from src.dictionary.service import DictionaryService
from src.dictionary.source import TextMapClient
from src.dictionary.store import DictionaryStore, SqlAlchemyDictionaryStore


@lru_cache
def get_language_catalog() -> LanguageCatalog:
    """Get the LanguageCatalog built from settings (built once)"""
    return LanguageCatalog(settings.TEXT_MAP_URL_TEMPLATE)

def get_dictionary_store() -> DictionaryStore:
    """Get DictionaryStore instance"""
    return SqlAlchemyDictionaryStore(
        AsyncSessionLocal,
        batch_size=settings.INSERT_BATCH_SIZE,
        case_sensitive=settings.SEARCH_CASE_SENSITIVE,
    )

def get_dictionary_service(
    store: DictionaryStore = Depends(get_dictionary_store),
    catalog: LanguageCatalog = Depends(get_language_catalog),
) -> DictionaryService:
    """Get DictionaryService instance"""
    return DictionaryService(store, catalog)

def get_ingestion_service() -> DictionaryIngestionService:
    """
    Get DictionaryIngestionService instance. Use it with `async with` so
    its TextMapClient gets closed.
    """
    catalog = get_language_catalog()
    client = TextMapClient(catalog, timeout=settings.SOURCE_TIMEOUT_SECONDS)
    return DictionaryIngestionService(get_dictionary_store(), catalog, client)
