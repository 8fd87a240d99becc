from typing import List, Union
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

class Settings(BaseSettings):
    # Project settings
    PROJECT_NAME: str = "HSR Dictionary"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Multilingual dictionary lookup service"
    API_V1_STR: str = "/api/v1"

    # Database - prefer discrete Postgres settings; fallback to DATABASE_URL
    DATABASE_URL: str = ""  # Optional explicit URL; leave empty to assemble from fields below
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "starrail_dictionary"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    DATABASE_DIALECT: str = "postgresql+asyncpg"  # e.g., postgresql+asyncpg, sqlite+aiosqlite

    # Migrations
    AUTO_MIGRATE_ON_STARTUP: bool = False

    # Run a full dictionary refresh when the API starts
    UPDATE_ON_STARTUP: bool = False

    # CORS (the public search API is read-only, allow everything by default)
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "app.log"

    # Pagination
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # Dictionary source
    TEXT_MAP_URL_TEMPLATE: str = (
        "https://raw.githubusercontent.com/CanglongCl/StarRailData/master/TextMap/TextMap{code}.json"
    )
    SOURCE_TIMEOUT_SECONDS: float = 60.0

    # Rows per INSERT statement; keeps bind parameters below the backend limit
    INSERT_BATCH_SIZE: int = 800

    # Substring search policy
    SEARCH_CASE_SENSITIVE: bool = True

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

settings = Settings()

# Helper to assemble DB URL when not explicitly provided
def get_database_url() -> str:
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    # URL-encode credentials to handle special characters like @ : /
    from urllib.parse import quote_plus

    user = quote_plus(settings.POSTGRES_USER or "")
    password = quote_plus(settings.POSTGRES_PASSWORD or "")
    host = settings.POSTGRES_HOST
    port = settings.POSTGRES_PORT
    db = settings.POSTGRES_DB
    dialect = settings.DATABASE_DIALECT
    if password:
        cred = f"{user}:{password}@"
    elif user:
        cred = f"{user}@"
    else:
        cred = ""
    return f"{dialect}://{cred}{host}:{port}/{db}"
