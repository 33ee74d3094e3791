from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os

# Fallbacks used when the corresponding POSTGRES_* variable is unset.
DATABASE_DEFAULTS: dict[str, str] = {
    "POSTGRES_USER": "user",
    "POSTGRES_PASSWORD": "password",
    "POSTGRES_HOST": "127.0.0.1",
    "POSTGRES_PORT": "5432",
    "POSTGRES_DB": "apidb",
}


def _database_url() -> str:
    """Return ``POSTGRES_URL`` or assemble one from the individual connection variables."""
    explicit = os.getenv("POSTGRES_URL")
    if explicit:
        return explicit
    values = {name: os.getenv(name, default) for name, default in DATABASE_DEFAULTS.items()}
    return "postgresql://{POSTGRES_USER}:{POSTGRES_PASSWORD}@{POSTGRES_HOST}:{POSTGRES_PORT}/{POSTGRES_DB}".format(
        **values
    )


def missing_database_settings() -> list[str]:
    """Names of database variables that fell back to their hardcoded default."""
    if os.getenv("POSTGRES_URL"):
        return []
    return [name for name in DATABASE_DEFAULTS if not os.getenv(name)]


@dataclass(frozen=True)
class Settings:
    """Runtime configuration values exposed to FastAPI components."""

    app_name: str = "user-service"
    version: str = "0.1.0"
    database_url: str = _database_url()
    db_pool_min_size: int = int(os.getenv("DB_POOL_MIN_SIZE", "1"))
    db_pool_max_size: int = int(os.getenv("DB_POOL_MAX_SIZE", "10"))
    http_host: str = os.getenv("HTTP_HOST", "0.0.0.0")
    http_port: int = int(os.getenv("HTTP_PORT", "8080"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "12"))
    cors_allow_origins: str = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:5173")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached Settings instance for the running process."""
    return Settings()
