"""
Persistence for dictionary rows.

`DictionaryStore` is the only thing the ingestion, de-duplication and search
code talks to. `SqlAlchemyDictionaryStore` implements it on top of the async
engine; every call opens its own session so callers can run operations
concurrently.
"""
import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Collection, Iterator, List, Sequence, Set

from sqlalchemy import case, delete, func, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.constants.languages import Language
from src.dictionary.exceptions import DictionaryStoreException
from src.dictionary.models import DictionaryItem
from src.dictionary.schemas import DictionaryItemCreate, DictionaryItemResponse
from src.dictionary.utils import chunked

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 800


class DictionaryStore(ABC):
    """Operations the dictionary core needs from storage"""

    @abstractmethod
    async def insert_items(self, items: Sequence[DictionaryItemCreate]) -> int:
        """Insert rows in fixed-size batches, return the number inserted"""

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every row"""

    @abstractmethod
    async def delete_vocabularies(self, vocabulary_ids: Collection[int]) -> int:
        """Delete all rows of the given vocabulary ids in one transaction"""

    @abstractmethod
    async def count_matches(self, term: str) -> int:
        """Count distinct vocabulary ids with a translation containing `term`"""

    @abstractmethod
    async def find_matches(self, term: str, offset: int, limit: int) -> List[DictionaryItemResponse]:
        """
        One matching row per vocabulary id, shortest translation first.
        """

    @abstractmethod
    async def get_by_vocabulary_id(self, vocabulary_id: int) -> List[DictionaryItemResponse]:
        """All rows sharing a vocabulary id"""

    @abstractmethod
    async def find_redundant_vocabularies(self) -> Set[int]:
        """
        Vocabulary ids whose (language, translation) set also belongs to a
        smaller vocabulary id.
        """


class SqlAlchemyDictionaryStore(DictionaryStore):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        batch_size: int = DEFAULT_BATCH_SIZE,
        case_sensitive: bool = True,
    ):
        self.session_factory = session_factory
        self.batch_size = batch_size
        self.case_sensitive = case_sensitive

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"Dictionary store {operation} failed: {e}")
            raise DictionaryStoreException() from e

    def _match_clause(self, term: str):
        # autoescape makes % and _ in the term match literally
        if self.case_sensitive:
            return DictionaryItem.translation.contains(term, autoescape=True)
        return DictionaryItem.translation.icontains(term, autoescape=True)

    async def insert_items(self, items: Sequence[DictionaryItemCreate]) -> int:
        count = len(items)
        with self._store_errors("insert"):
            for batch in chunked(items, self.batch_size):
                await self._insert_batch(batch)

        logger.info(f"{count} new dictionary items inserted")
        return count

    async def _insert_batch(self, batch: Sequence[DictionaryItemCreate]) -> None:
        async with self.session_factory() as session:
            async with session.begin():
                await session.execute(
                    insert(DictionaryItem),
                    [item.model_dump() for item in batch],
                )

    async def delete_all(self) -> int:
        logger.info("Deleting all items")
        with self._store_errors("delete"):
            async with self.session_factory() as session:
                async with session.begin():
                    result = await session.execute(
                        delete(DictionaryItem).execution_options(synchronize_session=False)
                    )
        return result.rowcount

    async def delete_vocabularies(self, vocabulary_ids: Collection[int]) -> int:
        ids = sorted(set(vocabulary_ids))
        if not ids:
            return 0

        deleted = 0
        with self._store_errors("delete"):
            async with self.session_factory() as session:
                # One transaction for every chunk: either all groups go or none
                async with session.begin():
                    for batch in chunked(ids, self.batch_size):
                        result = await session.execute(
                            delete(DictionaryItem)
                            .where(DictionaryItem.vocabulary_id.in_(batch))
                            .execution_options(synchronize_session=False)
                        )
                        deleted += result.rowcount
        return deleted

    async def count_matches(self, term: str) -> int:
        stmt = select(
            func.count(DictionaryItem.vocabulary_id.distinct())
        ).where(self._match_clause(term))

        with self._store_errors("count"):
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return result.scalar() or 0

    async def find_matches(self, term: str, offset: int, limit: int) -> List[DictionaryItemResponse]:
        match_length = func.length(DictionaryItem.translation)
        ranked = (
            select(
                DictionaryItem.id,
                DictionaryItem.vocabulary_id,
                DictionaryItem.language,
                DictionaryItem.translation,
                match_length.label("match_length"),
                func.row_number().over(
                    partition_by=DictionaryItem.vocabulary_id,
                    order_by=[match_length, DictionaryItem.id],
                ).label("match_rank"),
            )
            .where(self._match_clause(term))
            .subquery()
        )
        stmt = (
            select(ranked.c.id, ranked.c.vocabulary_id, ranked.c.language, ranked.c.translation)
            .where(ranked.c.match_rank == 1)
            .order_by(ranked.c.match_length, ranked.c.vocabulary_id)
            .offset(offset)
            .limit(limit)
        )

        with self._store_errors("search"):
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                rows = result.all()

        return [DictionaryItemResponse(**row._mapping) for row in rows]

    async def get_by_vocabulary_id(self, vocabulary_id: int) -> List[DictionaryItemResponse]:
        stmt = (
            select(DictionaryItem)
            .where(DictionaryItem.vocabulary_id == vocabulary_id)
            .order_by(DictionaryItem.id)
        )

        with self._store_errors("lookup"):
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                items = result.scalars().all()

        return [DictionaryItemResponse.model_validate(item) for item in items]

    @staticmethod
    def _signatures():
        """
        One row per vocabulary id with one column per language holding that
        language's translation (NULL when missing).

        A vocabulary id has at most one row per language, so two ids with
        equal columns have the same set of (language, translation) pairs.
        """
        translations = [
            func.max(
                case((DictionaryItem.language == language, DictionaryItem.translation))
            ).label(f"translation_{language.value}")
            for language in Language
        ]
        return (
            select(DictionaryItem.vocabulary_id, *translations)
            .group_by(DictionaryItem.vocabulary_id)
            .subquery("signatures")
        )

    async def find_redundant_vocabularies(self) -> Set[int]:
        signatures = self._signatures()
        signature_columns = [c for c in signatures.c if c.key != "vocabulary_id"]
        # PARTITION BY groups NULLs together, so a missing language is part of the signature
        ranked = select(
            signatures.c.vocabulary_id,
            func.min(signatures.c.vocabulary_id).over(partition_by=signature_columns).label("kept_id"),
        ).subquery()
        stmt = select(ranked.c.vocabulary_id).where(ranked.c.vocabulary_id != ranked.c.kept_id)

        with self._store_errors("dedup scan"):
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return set(result.scalars().all())
