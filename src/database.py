from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy import MetaData, event
from sqlalchemy.orm import declarative_base
from src.config import get_database_url

# PostgreSQL naming conventions
POSTGRES_INDEXES_NAMING_CONVENTION = {
    "ix": "%(column_0_label)s_idx",
    "uq": "%(table_name)s_%(column_0_name)s_key",
    "ck": "%(table_name)s_%(constraint_name)s_check",
    "fk": "%(table_name)s_%(column_0_name)s_fkey",
    "pk": "%(table_name)s_pkey",
}

metadata = MetaData(naming_convention=POSTGRES_INDEXES_NAMING_CONVENTION)


def to_async_url(database_url: str) -> str:
    """Rewrite sync Postgres URLs to the asyncpg driver"""
    if database_url.startswith("postgresql+psycopg2://"):
        return database_url.replace("postgresql+psycopg2://", "postgresql+asyncpg://", 1)
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return database_url


def create_database_engine(database_url: str, **kwargs) -> AsyncEngine:
    """
    Create the async engine used by the dictionary store.

    SQLite's LIKE ignores ASCII case by default; the pragma makes it behave
    like PostgreSQL so substring search has one case policy on both backends.
    """
    database_url = to_async_url(database_url)
    is_postgres = database_url.startswith("postgresql")

    engine = create_async_engine(
        database_url,
        echo=False,
        future=True,
        connect_args={
            "server_settings": {
                "timezone": "UTC"
            }
        } if is_postgres else {},
        **kwargs,
    )

    if engine.dialect.name == "sqlite":
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_case_sensitive_like(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA case_sensitive_like = ON")
            cursor.close()

    return engine


# Create async database engine
database_url = to_async_url(get_database_url())
engine = create_database_engine(database_url)

# Create AsyncSessionLocal class
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

# Create Base class with naming conventions
Base = declarative_base(metadata=metadata)
