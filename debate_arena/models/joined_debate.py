"""Database model for per-participant debate snapshots."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class JoinedDebate(SQLModel, table=True):
    """Side chosen by a participant plus a copy of the debate at join time."""

    __tablename__ = "joined_debate"
    __table_args__ = (UniqueConstraint("debate_id", "name", name="uq_joined_debate_participant"),)

    id: Optional[int] = ORMField(default=None, primary_key=True)
    debate_id: str = ORMField(index=True)
    name: str = ORMField(index=True)
    side: str
    title: str
    description: str
    category: str
    duration: str
    tags: List[str] = ORMField(default_factory=list, sa_column=Column(JSON, nullable=False))
    joined_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["JoinedDebate"]
