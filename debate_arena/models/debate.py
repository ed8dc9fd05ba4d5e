"""Database model for debates."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List

from sqlalchemy import JSON, Column
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


def new_debate_id() -> str:
    return uuid.uuid4().hex


class Debate(SQLModel, table=True):
    """Debate topic with the participants on each side."""

    id: str = ORMField(default_factory=new_debate_id, primary_key=True)
    title: str
    description: str
    tags: List[str] = ORMField(default_factory=list, sa_column=Column(JSON, nullable=False))
    category: str
    duration: str
    support: List[str] = ORMField(default_factory=list, sa_column=Column(JSON, nullable=False))
    oppose: List[str] = ORMField(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Debate", "new_debate_id"]
