"""Database model exports."""

from .debate import Debate
from .joined_debate import JoinedDebate
from .vote import VoteRecord

__all__ = [
    "Debate",
    "JoinedDebate",
    "VoteRecord",
]
