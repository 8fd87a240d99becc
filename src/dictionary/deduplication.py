"""
De-duplication of vocabulary groups.

The source sometimes publishes the same word under several vocabulary ids.
Two ids are duplicates when their (language, translation) pairs are
identical. Within each set of duplicates only the smallest id is kept.
Grouping happens inside the store, so no rows are loaded here.
"""
import logging

from src.dictionary.store import DictionaryStore

logger = logging.getLogger(__name__)


async def delete_duplicate_items(store: DictionaryStore) -> int:
    """
    Remove every redundant vocabulary group from the store.

    Returns the number of deleted rows. Running it again right away deletes
    nothing.
    """
    logger.info("Deleting duplicated items")

    redundant = await store.find_redundant_vocabularies()
    if not redundant:
        logger.info("No duplicated items found")
        return 0

    deleted = await store.delete_vocabularies(redundant)
    logger.info(
        f"{deleted} duplicated items was deleted ({len(redundant)} vocabulary ids)"
    )
    return deleted
