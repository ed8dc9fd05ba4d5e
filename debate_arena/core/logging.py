"""Logging configuration."""

from __future__ import annotations

import sys

from loguru import logger

from .config import LOG_DIR, LOG_LEVEL, LOG_TO_FILE


def setup_logging(level: str = LOG_LEVEL, to_file: bool = LOG_TO_FILE):
    """Configure logging with console and optional file output."""
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "debate_arena_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger


__all__ = ["setup_logging"]
