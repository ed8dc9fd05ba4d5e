"""Document-style persistence over the debate tables.

Every method maps to one logical store operation (find, insert, targeted field
update, upsert, aggregation) and commits on its own. Services compose them;
nothing here spans more than one write.
"""

from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, TypeVar

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, func, select

from .errors import StoreFailure
from .models import Debate, JoinedDebate, VoteRecord

SIDE_FIELDS = ("support", "oppose")

DocumentT = TypeVar("DocumentT", bound=SQLModel)


class VoteTotal(NamedTuple):
    user_name: str
    total_votes: int
    debates_participated: int


class DocumentStore:
    """Collection-scoped CRUD and aggregation for debates, snapshots and votes."""

    def __init__(self, session: Session):
        self._session = session

    @contextmanager
    def _guard(self, operation: str) -> Iterator[Session]:
        try:
            yield self._session
        except SQLAlchemyError as exc:
            self._session.rollback()
            logger.error("Store operation {} failed: {}", operation, exc)
            raise StoreFailure() from exc

    # Generic ------------------------------------------------------------------

    def insert(self, document: DocumentT) -> DocumentT:
        with self._guard("insert") as session:
            session.add(document)
            session.commit()
            session.refresh(document)
            return document

    # Debates ------------------------------------------------------------------

    def find_debate(self, debate_id: str) -> Optional[Debate]:
        with self._guard("find_debate") as session:
            return session.get(Debate, debate_id)

    def find_debates(self) -> List[Debate]:
        with self._guard("find_debates") as session:
            return list(session.exec(select(Debate).order_by(Debate.created_at)).all())

    def pull_participant(self, debate_id: str, name: str) -> bool:
        """Remove ``name`` from both sides. Returns False when no debate matched."""

        with self._guard("pull_participant") as session:
            debate = session.get(Debate, debate_id)
            if debate is None:
                return False
            debate.support = [member for member in debate.support if member != name]
            debate.oppose = [member for member in debate.oppose if member != name]
            session.add(debate)
            session.commit()
            return True

    def add_participant(self, debate_id: str, field: str, name: str) -> bool:
        """Add ``name`` to one side unless already present."""

        if field not in SIDE_FIELDS:
            raise ValueError(f"Unknown side field: {field}")

        with self._guard("add_participant") as session:
            debate = session.get(Debate, debate_id)
            if debate is None:
                return False
            members = getattr(debate, field)
            if name not in members:
                setattr(debate, field, [*members, name])
                session.add(debate)
                session.commit()
            return True

    # Joined debates -----------------------------------------------------------

    def find_joined(self, debate_id: str, name: str) -> Optional[JoinedDebate]:
        with self._guard("find_joined") as session:
            return session.exec(
                select(JoinedDebate).where(
                    JoinedDebate.debate_id == debate_id,
                    JoinedDebate.name == name,
                )
            ).first()

    def upsert_joined(self, debate_id: str, name: str, fields: Dict[str, Any]) -> JoinedDebate:
        """Replace the snapshot for ``(debate_id, name)``, inserting it if missing."""

        with self._guard("upsert_joined") as session:
            record = session.exec(
                select(JoinedDebate).where(
                    JoinedDebate.debate_id == debate_id,
                    JoinedDebate.name == name,
                )
            ).first()
            if record is None:
                record = JoinedDebate(debate_id=debate_id, name=name, **fields)
            else:
                for key, value in fields.items():
                    setattr(record, key, value)
            session.add(record)
            session.commit()
            session.refresh(record)
            return record

    # Votes --------------------------------------------------------------------

    def vote_totals(self, since: Optional[datetime] = None) -> List[VoteTotal]:
        """Sum votes per (user, debate), then per user, highest total first."""

        per_debate = select(
            VoteRecord.user_name,
            VoteRecord.debate_id,
            func.sum(VoteRecord.votes).label("debate_votes"),
        )
        if since is not None:
            since = since.astimezone(timezone.utc) if since.tzinfo else since.replace(tzinfo=timezone.utc)
            per_debate = per_debate.where(VoteRecord.created_at >= since)
        per_debate = per_debate.group_by(VoteRecord.user_name, VoteRecord.debate_id).subquery()

        total_votes = func.sum(per_debate.c.debate_votes).label("total_votes")
        statement = (
            select(
                per_debate.c.user_name,
                total_votes,
                func.count().label("debates_participated"),
            )
            .group_by(per_debate.c.user_name)
            .order_by(total_votes.desc())
        )

        with self._guard("vote_totals") as session:
            rows = session.exec(statement).all()
        return [
            VoteTotal(user_name=row[0], total_votes=int(row[1] or 0), debates_participated=int(row[2]))
            for row in rows
        ]


__all__ = ["DocumentStore", "SIDE_FIELDS", "VoteTotal"]
