# /app/core/config.py

"""
Process-wide settings for the classroom backend.

Values are read from the environment (and an optional `.env` file) exactly once,
the first time `get_settings()` is called, and are immutable afterwards. The JWT
signing secret lives here and nowhere else.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

# --- CONFIGURATION ---
load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///./classroom.db"
DEFAULT_JWT_EXPIRES_MINUTES = 60 * 24


@dataclass(frozen=True)
class Settings:
    database_url: str
    jwt_secret: str
    jwt_expires_minutes: int
    log_level: str
    cors_origins: List[str]


def _parse_origins(raw: str) -> List[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


@lru_cache
def get_settings() -> Settings:
    """Builds the settings object from the environment. Cached for the process lifetime."""
    jwt_secret = os.getenv("JWT_SECRET")
    if not jwt_secret:
        raise RuntimeError("FATAL ERROR: JWT_SECRET environment variable is not set.")

    raw_expiry = os.getenv("JWT_EXPIRES_MINUTES", str(DEFAULT_JWT_EXPIRES_MINUTES))
    try:
        jwt_expires_minutes = int(raw_expiry)
    except ValueError:
        raise RuntimeError(f"FATAL ERROR: JWT_EXPIRES_MINUTES must be an integer, got {raw_expiry!r}.")
    if jwt_expires_minutes <= 0:
        raise RuntimeError("FATAL ERROR: JWT_EXPIRES_MINUTES must be positive.")

    return Settings(
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        jwt_secret=jwt_secret,
        jwt_expires_minutes=jwt_expires_minutes,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS", "*")),
    )
