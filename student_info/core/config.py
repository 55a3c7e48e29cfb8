"""
Configuration helpers for the Student Info backend.

Settings is a typed view of the environment (listen port, storage path, CORS,
log level) so that routers/services never fetch os.environ directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[2] / "students.json"
DEFAULT_PORT = 5000


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    data_file: Path = DEFAULT_DATA_FILE
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            return default
        items = tuple(item.strip() for item in value.split(",") if item.strip())
        return items or default

    data_file = (os.getenv("STUDENTS_FILE") or "").strip()
    return Settings(
        port=_int(os.getenv("PORT"), DEFAULT_PORT) or DEFAULT_PORT,
        host=os.getenv("HOST", "0.0.0.0"),
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        cors_origins=_list(os.getenv("CORS_ORIGINS"), ("*",)),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
