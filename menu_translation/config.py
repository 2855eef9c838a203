from typing import List, Union
from pydantic_settings import BaseSettings
from pydantic import validator

class Settings(BaseSettings):
    # Project settings
    PROJECT_NAME: str = "Menu Translation"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Hybrid Japanese menu translation (dictionary + morphology + MT)"
    API_V1_STR: str = "/api/v1"

    # Database - prefer discrete Postgres settings; fallback to DATABASE_URL
    DATABASE_URL: str = ""  # Optional explicit URL; leave empty to assemble from fields below
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "menu_translation"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    DATABASE_DIALECT: str = "postgresql+asyncpg"
    # When False the dictionary and cache live in process memory only
    USE_DATABASE: bool = True
    # JSON dictionary loaded into memory when USE_DATABASE is False
    DICTIONARY_SEED_FILE: str = "data/dictionary_seed.json"

    # Machine translation provider: "deepl" or "google"
    MT_PROVIDER: str = "deepl"
    DEEPL_API_KEY: str = ""
    DEEPL_SERVER_URL: str = ""  # Optional, e.g. for the free API endpoint

    # Google Cloud Translation API
    GOOGLE_APPLICATION_CREDENTIALS: str = ""  # Path to service account JSON file

    # Translation pipeline
    SUPPORTED_TARGET_LANGUAGES: List[str] = ["en", "zh"]
    DICTIONARY_CACHE_TTL_SECONDS: int = 300
    TRANSLATION_CACHE_TTL_DAYS: int = 30
    FORCE_CORRECTION_MAX_PRIORITY: int = 2

    # Migrations
    AUTO_MIGRATE_ON_STARTUP: bool = False

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:8081",
        "http://localhost:19006",
    ]

    # Logging
    LOG_LEVEL: str = "INFO"

    @validator("BACKEND_CORS_ORIGINS", pre=True)
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()

# Helper to assemble DB URL when not explicitly provided
def get_database_url() -> str:
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
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
