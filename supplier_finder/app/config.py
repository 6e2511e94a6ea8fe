"""Application configuration read from environment variables.

Settings are re-read on every call so the SerpAPI key can be provided (or
patched in tests) without restarting the process.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)

SEARCH_URL = "https://serpapi.com/search.json"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    serpapi_key: Optional[str] = None
    serpapi_url: str = SEARCH_URL
    serpapi_timeout: float = 10.0
    port: int = 3000
    static_dir: str = "public"
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    cors_raw = os.getenv("CORS_ORIGINS", "http://localhost:3000")
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        log_level = "INFO"

    return Settings(
        serpapi_key=os.getenv("SERPAPI_KEY") or None,
        serpapi_url=os.getenv("SERPAPI_URL", SEARCH_URL),
        serpapi_timeout=_env_number("SERPAPI_TIMEOUT", 10.0, float),
        port=_env_number("PORT", 3000, int),
        static_dir=os.getenv("STATIC_DIR", "public"),
        log_level=log_level,
        cors_origins=[origin.strip() for origin in cors_raw.split(",") if origin.strip()],
    )
