"""Joining a side of a debate."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from ..core.time import utcnow
from ..errors import InvalidArgument, NotFound
from ..store import DocumentStore

SIDES = ("Support", "Oppose")


@dataclass(frozen=True)
class JoinResult:
    side: str

    @property
    def message(self) -> str:
        return f"Successfully joined the debate as {self.side}"


def join_debate(store: DocumentStore, debate_id: str, name: str | None, side: str | None) -> JoinResult:
    """Put ``name`` on ``side`` of a debate and refresh their snapshot.

    The participant is first pulled from both sides, then added to the chosen
    one, then the joined-debate record is upserted. These are three separate
    writes: a failure part way leaves the earlier ones in place.
    """

    name = name.strip() if isinstance(name, str) else ""
    if not name or side not in SIDES:
        raise InvalidArgument("Name and valid side are required (Support or Oppose)")

    debate = store.find_debate(debate_id)
    if debate is None:
        raise NotFound("Debate not found")

    store.pull_participant(debate_id, name)
    store.add_participant(debate_id, side.lower(), name)
    store.upsert_joined(
        debate_id,
        name,
        {
            "side": side,
            "title": debate.title,
            "description": debate.description,
            "category": debate.category,
            "duration": debate.duration,
            "tags": list(debate.tags or []),
            "joined_at": utcnow(),
        },
    )

    logger.info("{} joined debate {} as {}", name, debate_id, side)
    return JoinResult(side=side)


__all__ = ["JoinResult", "SIDES", "join_debate"]
