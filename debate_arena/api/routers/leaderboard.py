"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from ...services.leaderboard import entry_to_dict, leaderboard
from ...store import DocumentStore
from ..dependencies import get_store

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard")
def get_leaderboard(
    filter: Optional[str] = Query("all"), store: DocumentStore = Depends(get_store)
) -> List[Dict[str, Any]]:
    """Users ranked by votes; ``filter`` is ``all``, ``weekly`` or ``monthly``."""

    return [entry_to_dict(entry) for entry in leaderboard(store, filter)]


__all__ = ["router"]
