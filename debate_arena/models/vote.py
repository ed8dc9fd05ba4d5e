"""Database model for argument votes feeding the leaderboard."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class VoteRecord(SQLModel, table=True):
    """Votes a user's argument received in one debate."""

    __tablename__ = "vote_record"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_name: str = ORMField(index=True)
    debate_id: str = ORMField(index=True)
    votes: int = 0
    created_at: datetime = ORMField(default_factory=utcnow, index=True)


__all__ = ["VoteRecord"]
