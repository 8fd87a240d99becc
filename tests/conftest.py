"""Pytest configuration and fixtures."""

import os

# Keep the module-level engine off PostgreSQL while testing
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test_hsrdict.db")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker

from src.constants.languages import LanguageCatalog
from src.database import Base, create_database_engine
from src.dictionary.models import DictionaryItem
from src.dictionary.schemas import DictionaryItemCreate
from src.dictionary.store import SqlAlchemyDictionaryStore

TEST_URL_TEMPLATE = "https://textmaps.test/TextMap{code}.json"


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Async engine on a throw-away SQLite file with the schema created."""
    engine = create_database_engine(f"sqlite+aiosqlite:///{tmp_path / 'dictionary.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
def store(session_factory):
    return SqlAlchemyDictionaryStore(session_factory, batch_size=800)


@pytest.fixture
def catalog():
    return LanguageCatalog(TEST_URL_TEMPLATE)


@pytest.fixture
def seed(store):
    """Insert (vocabulary_id, language, translation) tuples."""
    async def _seed(*rows):
        await store.insert_items([
            DictionaryItemCreate(vocabulary_id=vocabulary_id, language=language, translation=translation)
            for vocabulary_id, language, translation in rows
        ])
    return _seed


@pytest.fixture
def count_rows(session_factory):
    """Count stored rows, optionally for one vocabulary id."""
    async def _count(vocabulary_id=None):
        stmt = select(func.count(DictionaryItem.id))
        if vocabulary_id is not None:
            stmt = stmt.where(DictionaryItem.vocabulary_id == vocabulary_id)
        async with session_factory() as session:
            return (await session.execute(stmt)).scalar()
    return _count
