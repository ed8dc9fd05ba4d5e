"""Service layer helpers."""

from .debates import (
    create_debate,
    debate_to_dict,
    get_debate,
    get_joined_debate,
    joined_debate_to_dict,
    list_debates,
    record_vote,
)
from .joining import JoinResult, join_debate
from .leaderboard import LeaderboardEntry, entry_to_dict, leaderboard

__all__ = [
    "JoinResult",
    "LeaderboardEntry",
    "create_debate",
    "debate_to_dict",
    "entry_to_dict",
    "get_debate",
    "get_joined_debate",
    "join_debate",
    "joined_debate_to_dict",
    "leaderboard",
    "list_debates",
    "record_vote",
]
