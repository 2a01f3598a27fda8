from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Quick Edit API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./quickedit.db"
    cors_origins: list[str] = ["http://localhost:3020"]

    # Quick edit behaviour
    bool_accepts_numeric: bool = True        # "1" counts as true for bool/boolean values

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_quick_edit: str = "INFO"       # QuickEditService pipeline

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
