"""Debate catalogue and joining endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from ...services.debates import (
    create_debate,
    debate_to_dict,
    get_debate,
    get_joined_debate,
    joined_debate_to_dict,
    list_debates,
)
from ...services.joining import join_debate
from ...store import DocumentStore
from ..dependencies import get_store

router = APIRouter(tags=["debates"])


@router.get("/debates")
def list_all_debates(store: DocumentStore = Depends(get_store)) -> List[Dict[str, Any]]:
    """List all debates."""

    return [debate_to_dict(debate) for debate in list_debates(store)]


@router.post("/debates", status_code=201)
def create_new_debate(
    body: Dict[str, Any] = Body(...), store: DocumentStore = Depends(get_store)
) -> Dict[str, Any]:
    """Create a debate with empty sides."""

    debate = create_debate(store, body)
    return {"message": "Debate created", "id": debate.id}


@router.post("/debates/{debate_id}/join")
def join(
    debate_id: str, body: Dict[str, Any] = Body(...), store: DocumentStore = Depends(get_store)
) -> Dict[str, str]:
    """Join a debate on the Support or Oppose side."""

    result = join_debate(store, debate_id, body.get("name"), body.get("side"))
    return {"message": result.message}


@router.get("/debates/{debate_id}")
def get_single_debate(debate_id: str, store: DocumentStore = Depends(get_store)) -> Dict[str, Any]:
    """Get a specific debate by ID."""

    return debate_to_dict(get_debate(store, debate_id))


@router.get("/joinedDebates")
def get_joined(
    name: Optional[str] = Query(None),
    debate_id: Optional[str] = Query(None, alias="debateId"),
    store: DocumentStore = Depends(get_store),
) -> Dict[str, Any]:
    """Get the joined-debate snapshot for a participant."""

    return joined_debate_to_dict(get_joined_debate(store, name, debate_id))


__all__ = ["router"]
