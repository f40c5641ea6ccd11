"""
Configuration helpers for the cars service.

Settings are read from environment variables once and cached, so routers and
services never fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_file: str
    host: str
    port: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_file=os.getenv("CARS_DATA_FILE") or "cars.json",
        host=os.getenv("CARS_HOST", "0.0.0.0"),
        port=_int(os.getenv("CARS_PORT", "228"), 228),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
