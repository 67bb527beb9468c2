"""Centralised settings for modgraph.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Public platform origin; relative dependency links are resolved against it.
DEFAULT_BASE_URL = "https://reforger.armaplatform.com"

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Workshop
    # ------------------------------------------------------------------
    workshop_base_url: str = field(
        default_factory=lambda: os.environ.get(
            "WORKSHOP_BASE_URL", DEFAULT_BASE_URL
        )
    )
    default_max_depth: int = field(
        default_factory=lambda: int(os.environ.get("WORKSHOP_MAX_DEPTH", "5"))
    )

    # ------------------------------------------------------------------
    # HTTP fetching
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "WORKSHOP_USER_AGENT",
            "Mozilla/5.0 (compatible; modgraph/0.1; +https://github.com/modgraph)",
        )
    )

    # ------------------------------------------------------------------
    # Logging / API server
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "WARNING")
    )
    api_host: str = field(
        default_factory=lambda: os.environ.get("MODGRAPH_HOST", "127.0.0.1")
    )
    api_port: int = field(
        default_factory=lambda: int(os.environ.get("MODGRAPH_PORT", "8000"))
    )


# Module-level singleton: import this everywhere:
#   from modgraph.config import settings
settings = Settings()
