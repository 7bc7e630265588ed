"""
core/config.py
--------------
Central configuration for the HealthInfoBot service.

- Reads settings from environment variables (a local `.env` is honored).
- Provides global constants for the backend, database and logging.
"""

from __future__ import annotations
import os

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Database configuration
# ---------------------------------------------------------------------------

# None -> SQLite file inside the database/ package
DATABASE_URL: str | None = os.getenv("DATABASE_URL") or None

SEED_ON_STARTUP: bool = os.getenv("SEED_ON_STARTUP", "true").strip().lower() not in {"0", "false", "no"}

# ---------------------------------------------------------------------------
# Server configuration
# ---------------------------------------------------------------------------

HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "3000"))

CORS_ORIGINS: list[str] = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
