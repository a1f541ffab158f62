"""
Configuration helpers for the VipCortes backend.

Settings are read from environment variables once (``get_settings`` is cached)
so that routers/services never touch os.environ directly. The database
parameters default to the local MySQL instance the shop has always used.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATABASE_URL = "mysql+pymysql://root:@localhost/vipcortes"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    data_dir: Path
    port: int
    log_level: str
    cors_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            return default
        return tuple(item.strip() for item in value.split(",") if item.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL).strip(),
        data_dir=Path(os.getenv("DATA_DIR", "data")).resolve(),
        port=_int(os.getenv("PORT", "10000"), 10000),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_origins=_list(os.getenv("CORS_ORIGINS"), ("*",)),
    )
