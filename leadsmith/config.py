"""Centralised settings for the Leadsmith service.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

Only the application edges (CLI, API factory) read the module-level
``settings`` object; scraper classes receive their values as constructor
arguments.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Shared scraper behaviour
    # ------------------------------------------------------------------
    user_agent: str = field(
        default_factory=lambda: os.environ.get("SCRAPER_USER_AGENT", DEFAULT_USER_AGENT)
    )

    # ------------------------------------------------------------------
    # Static fetch backend
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "20.0"))
    )

    # ------------------------------------------------------------------
    # Headless browser backend
    # ------------------------------------------------------------------
    headless_enabled: bool = field(
        default_factory=lambda: _env_bool("SCRAPER_HEADLESS_ENABLED", True)
    )
    navigation_timeout: float = field(
        default_factory=lambda: float(os.environ.get("SCRAPER_NAVIGATION_TIMEOUT", "30.0"))
    )
    settle_delay: float = field(
        default_factory=lambda: float(os.environ.get("SCRAPER_SETTLE_DELAY", "2.0"))
    )

    # ------------------------------------------------------------------
    # Remote reader backend
    # ------------------------------------------------------------------
    reader_api_key: str = field(
        default_factory=lambda: os.environ.get("JINA_API_KEY", "")
    )
    reader_base_url: str = field(
        default_factory=lambda: os.environ.get("READER_BASE_URL", "https://r.jina.ai")
    )
    reader_timeout: float = field(
        default_factory=lambda: float(os.environ.get("READER_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )


# Module-level instance for the application edges:
#   from leadsmith.config import settings
settings = Settings()
