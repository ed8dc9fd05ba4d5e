"""Aggregate API routers."""

from fastapi import APIRouter

from .debates import router as debates_router
from .leaderboard import router as leaderboard_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    debates_router,
    leaderboard_router,
)

__all__ = ["ALL_ROUTERS"]
