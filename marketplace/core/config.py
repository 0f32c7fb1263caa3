"""
Configuration helpers for the marketplace backend.

Everything the routers, services and stores need from the environment is
read here once, so the rest of the code never touches os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT_DIR = Path(__file__).resolve().parents[2]
DEFAULT_DATA_DIR = ROOT_DIR / "data"
DEFAULT_CORS_ORIGIN = "http://localhost:3000"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str = "dev"
    api_prefix: str = "/api"
    cors_origin: str = DEFAULT_CORS_ORIGIN
    cors_allow_credentials: bool = False
    storage_backend: str = "json"
    data_file: str = str(DEFAULT_DATA_DIR / "db.json")
    database_url: str = f"sqlite:///{DEFAULT_DATA_DIR / 'marketplace.db'}"
    trust_client_identity: bool = True
    seller_api_keys: tuple = ()
    log_level: str = "INFO"
    log_file: str = ""
    host: str = "0.0.0.0"
    port: int = 5000


def _int(value: str | None, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_api_keys(raw: str | None) -> tuple:
    """Parse ``key:sellerId,key2:sellerId2`` into ``((key, sellerId), ...)``."""
    keys = []
    for chunk in (raw or "").split(","):
        key, sep, seller_id = chunk.strip().partition(":")
        if not sep or not key.strip() or not seller_id.strip():
            continue
        keys.append((key.strip(), seller_id.strip()))
    return tuple(keys)


def _prefix(value: str | None) -> str:
    prefix = (value if value is not None else "/api").strip().rstrip("/")
    if prefix and not prefix.startswith("/"):
        prefix = "/" + prefix
    return prefix


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    cors_origin = os.getenv("CORS_ORIGIN") or os.getenv("NEXTAUTH_URL") or DEFAULT_CORS_ORIGIN
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        api_prefix=_prefix(os.getenv("API_PREFIX")),
        cors_origin=cors_origin.rstrip("/"),
        cors_allow_credentials=_bool(os.getenv("CORS_ALLOW_CREDENTIALS"), False),
        storage_backend=(os.getenv("STORAGE_BACKEND") or "json").strip().lower(),
        data_file=os.getenv("DB_PATH") or str(DEFAULT_DATA_DIR / "db.json"),
        database_url=os.getenv("DATABASE_URL") or f"sqlite:///{DEFAULT_DATA_DIR / 'marketplace.db'}",
        trust_client_identity=_bool(os.getenv("TRUST_CLIENT_IDENTITY"), True),
        seller_api_keys=parse_api_keys(os.getenv("SELLER_API_KEYS")),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE", ""),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "5000"), 5000),
    )
