"""Helpers for debate domain objects."""

from __future__ import annotations

from typing import Any, Dict, List

from loguru import logger

from ..core.time import isoformat_z
from ..errors import InvalidArgument, NotFound
from ..models import Debate, JoinedDebate, VoteRecord
from ..store import DocumentStore

REQUIRED_DEBATE_FIELDS = ("title", "description", "tags", "category", "duration")


def debate_to_dict(debate: Debate) -> Dict[str, Any]:
    """Serialise a debate model to API-friendly dict."""

    return {
        "_id": debate.id,
        "title": debate.title,
        "description": debate.description,
        "tags": list(debate.tags or []),
        "category": debate.category,
        "duration": debate.duration,
        "support": list(debate.support or []),
        "oppose": list(debate.oppose or []),
        "createdAt": isoformat_z(debate.created_at),
    }


def joined_debate_to_dict(record: JoinedDebate) -> Dict[str, Any]:
    """Serialise a joined-debate snapshot to API-friendly dict."""

    return {
        "_id": record.id,
        "debateId": record.debate_id,
        "name": record.name,
        "side": record.side,
        "title": record.title,
        "description": record.description,
        "category": record.category,
        "duration": record.duration,
        "tags": list(record.tags or []),
        "joinedAt": isoformat_z(record.joined_at),
    }


def create_debate(store: DocumentStore, payload: Dict[str, Any]) -> Debate:
    """Validate a creation payload and store a debate with empty sides."""

    if any(not payload.get(field) for field in REQUIRED_DEBATE_FIELDS):
        raise InvalidArgument("All fields are required")

    tags = payload["tags"]
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise InvalidArgument("Tags must be a list of strings")

    debate = store.insert(
        Debate(
            title=str(payload["title"]),
            description=str(payload["description"]),
            tags=tags,
            category=str(payload["category"]),
            duration=str(payload["duration"]),
        )
    )
    logger.info("Created debate {} ({})", debate.id, debate.title)
    return debate


def list_debates(store: DocumentStore) -> List[Debate]:
    return store.find_debates()


def get_debate(store: DocumentStore, debate_id: str) -> Debate:
    debate = store.find_debate(debate_id)
    if debate is None:
        raise NotFound("Debate not found")
    return debate


def get_joined_debate(store: DocumentStore, name: str | None, debate_id: str | None) -> JoinedDebate:
    """Fetch the snapshot a participant holds for one debate."""

    name = name.strip() if isinstance(name, str) else ""
    if not name or not debate_id:
        raise InvalidArgument("Missing name or debateId query parameters")

    record = store.find_joined(debate_id, name)
    if record is None:
        raise NotFound("No joined debate found for this user and debate")
    return record


def record_vote(store: DocumentStore, user_name: str, debate_id: str, votes: int) -> VoteRecord:
    """Append a vote record for the leaderboard."""

    if not user_name or not debate_id:
        raise InvalidArgument("User name and debate id are required")
    return store.insert(VoteRecord(user_name=user_name, debate_id=debate_id, votes=int(votes)))


__all__ = [
    "REQUIRED_DEBATE_FIELDS",
    "create_debate",
    "debate_to_dict",
    "get_debate",
    "get_joined_debate",
    "joined_debate_to_dict",
    "list_debates",
    "record_vote",
]
