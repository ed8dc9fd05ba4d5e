"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_RESET,
    HOST,
    LOG_DIR,
    LOG_LEVEL,
    LOG_TO_FILE,
    PORT,
)
from .database import engine, get_session, init_db
from .logging import setup_logging
from .time import isoformat_z, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_RESET",
    "HOST",
    "LOG_DIR",
    "LOG_LEVEL",
    "LOG_TO_FILE",
    "PORT",
    "engine",
    "get_session",
    "init_db",
    "isoformat_z",
    "setup_logging",
    "utcnow",
]
