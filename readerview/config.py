"""Centralised settings for readerview.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "READERVIEW_USER_AGENT",
            "Googlebot/2.1 (+http://www.google.com/bot.html)",
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Host rewriting
    # ------------------------------------------------------------------
    twitter_mirror_host: str = field(
        default_factory=lambda: os.environ.get("TWITTER_MIRROR_HOST", "fxtwitter.com")
    )
    reddit_mirror_host: str = field(
        default_factory=lambda: os.environ.get("REDDIT_MIRROR_HOST", "old.reddit.com")
    )

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------
    og_timeout: float = field(
        default_factory=lambda: float(os.environ.get("OG_TIMEOUT", "10.0"))
    )
    min_readerable_score: float = field(
        default_factory=lambda: float(os.environ.get("MIN_READERABLE_SCORE", "20.0"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )


# Module-level singleton - import this everywhere:
#   from readerview.config import settings
settings = Settings()
