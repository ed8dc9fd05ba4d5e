"""Request-scoped dependencies shared by the routers."""

from __future__ import annotations

from fastapi import Depends
from sqlmodel import Session

from ..core import get_session
from ..store import DocumentStore


def get_store(session: Session = Depends(get_session)) -> DocumentStore:
    """FastAPI dependency wrapping the request session in a store handle."""

    return DocumentStore(session)


__all__ = ["get_store"]
